# Quote Service: turn a tier/hotel/room selection into a priced quote
# Re-run from scratch on every selection change; nothing is cached.

from typing import Dict, List, Mapping, Optional

from models.schemas import Program, Quote
from services.pricing import is_complete_selection, price_for, resolve_pricing


def _tier(program: Program, tier_name: str):
    if tier_name not in program.packages:
        raise KeyError(tier_name)
    return program.packages[tier_name]


def first_tier(program: Program) -> Optional[str]:
    return next(iter(program.packages), None)


def hotel_options(program: Program, tier_name: str) -> Dict[str, List[str]]:
    """Hotels offered per location under a tier, in program location order."""
    tier = _tier(program, tier_name)
    return {loc.name: tier.hotels_at(loc.name) for loc in program.locations}


def default_selection(program: Program, tier_name: str) -> Dict[str, str]:
    """First hotel per location; "" where the tier offers none."""
    return {
        loc: (hotels[0] if hotels else "")
        for loc, hotels in hotel_options(program, tier_name).items()
    }


def build_quote(
    program:         Program,
    tier_name:       str,
    selected_hotels: Mapping[str, str],
    room_type:       Optional[str] = None
) -> Quote:
    """
    Resolve the selection against the tier's pricing combinations.

    Status:
      incomplete       - some location has no hotel picked
      no_match         - no combination accepts the picks
      room_required    - prices resolved, no room chosen yet
      room_unavailable - chosen room is not in the resolved prices
      priced           - price found (may be 0)
    Only a priced quote with a positive price is bookable.
    """
    tier      = _tier(program, tier_name)
    locations = program.locations
    selection = {loc.name: selected_hotels.get(loc.name, "") for loc in locations}

    quote = Quote(
        program_id=program.id,
        tier=tier_name,
        selected_hotels=selection,
        room_type=room_type or None,
        status="incomplete",
    )

    if not is_complete_selection(locations, selection):
        return quote

    pricing = resolve_pricing(locations, tier.pricing_combinations, selection)
    if pricing is None:
        quote.status = "no_match"
        return quote

    quote.room_options = list(pricing)
    if not room_type:
        quote.status = "room_required"
        return quote

    price = price_for(pricing, room_type)
    if price is None:
        quote.status = "room_unavailable"
        return quote

    quote.status   = "priced"
    quote.price    = price
    quote.bookable = price > 0
    return quote
