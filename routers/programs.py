from typing import List

from fastapi import APIRouter, Depends, HTTPException

from models.schemas import (
    Inquiry, InquiryRequest, Program, ProgramSummary, Quote, QuoteRequest, TierSelection
)
from services.catalog import ProgramCatalog, get_catalog
from services.inquiry import InquiryError, compose_inquiry, inquiry_link
from services.pricing import lowest_price
from services.quote import build_quote, default_selection, first_tier, hotel_options

router = APIRouter(prefix="/programs", tags=["programs"])


def _program_or_404(program_id: str, catalog: ProgramCatalog) -> Program:
    program = catalog.get_program(program_id)
    if program is None:
        raise HTTPException(status_code=404, detail=f"Program '{program_id}' not found")
    return program


def _tier_or_404(program: Program, tier: str) -> str:
    if not tier or tier not in program.packages:
        raise HTTPException(status_code=404, detail=f"Tier '{tier}' not found in program '{program.id}'")
    return tier


def _quote(program: Program, req: QuoteRequest) -> Quote:
    tier = _tier_or_404(program, req.tier or first_tier(program))
    return build_quote(program, tier, req.selected_hotels, req.room_type)


@router.get("/", response_model=List[ProgramSummary])
def list_programs(catalog: ProgramCatalog = Depends(get_catalog)):
    """Catalog listing with the lowest available price per program."""
    return [
        ProgramSummary(
            id=p.id,
            title=p.title,
            description=p.description,
            image=p.image,
            program_type=p.program_type,
            days=p.days,
            nights=p.nights,
            tiers=list(p.packages),
            lowest_price=lowest_price(p),
        )
        for p in catalog.list_programs()
    ]


@router.get("/{program_id}")
def get_program(program_id: str, catalog: ProgramCatalog = Depends(get_catalog)):
    """Full program document, pricing combinations in stored form."""
    return _program_or_404(program_id, catalog).model_dump(mode="json")


@router.get("/{program_id}/tiers/{tier}/selection", response_model=TierSelection)
def tier_selection(program_id: str, tier: str, catalog: ProgramCatalog = Depends(get_catalog)):
    """Initial hotel picks for a tier, plus the hotels offered per location."""
    program = _program_or_404(program_id, catalog)
    _tier_or_404(program, tier)
    return TierSelection(
        tier=tier,
        selected_hotels=default_selection(program, tier),
        hotel_options=hotel_options(program, tier),
    )


@router.post("/{program_id}/quote", response_model=Quote)
def quote(program_id: str, req: QuoteRequest, catalog: ProgramCatalog = Depends(get_catalog)):
    """
    Price the selection. Tier defaults to the program's first tier.
    Unmatched or partial selections come back with a status, not an error.
    """
    return _quote(_program_or_404(program_id, catalog), req)


@router.post("/{program_id}/inquiry", response_model=Inquiry)
def inquiry(program_id: str, req: InquiryRequest, catalog: ProgramCatalog = Depends(get_catalog)):
    """Prefilled booking message and chat link for a bookable selection."""
    program = _program_or_404(program_id, catalog)
    q       = _quote(program, req)
    try:
        message = compose_inquiry(program, q)
    except InquiryError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return Inquiry(message=message, link=inquiry_link(message), quote=q)
