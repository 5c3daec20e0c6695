from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, NonNegativeFloat, field_serializer, field_validator

# Delimiters of the stored combination-key string:
#   "HotelA,HotelB_HotelC"  ->  [["HotelA", "HotelB"], ["HotelC"]]
SEGMENT_DELIMITER = "_"
HOTEL_DELIMITER   = ","

# room type -> price
Pricing = Dict[str, float]


class Hotel(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def _no_key_delimiters(cls, v: str) -> str:
        if SEGMENT_DELIMITER in v or HOTEL_DELIMITER in v:
            raise ValueError(
                f"hotel name {v!r} must not contain "
                f"'{SEGMENT_DELIMITER}' or '{HOTEL_DELIMITER}'"
            )
        return v


class ProgramLocation(BaseModel):
    name:  str
    label: str


class CombinationKey(BaseModel):
    """
    Structured combination key: one list of accepted hotel names per location.
    The delimited string form only exists at the storage boundary.
    """
    segments: List[List[str]]

    @classmethod
    def parse(cls, raw: str) -> "CombinationKey":
        return cls(segments=[
            segment.split(HOTEL_DELIMITER)
            for segment in raw.split(SEGMENT_DELIMITER)
        ])

    def encode(self) -> str:
        return SEGMENT_DELIMITER.join(HOTEL_DELIMITER.join(s) for s in self.segments)

    def accepts(self, position: int, hotel: str) -> bool:
        return hotel in self.segments[position]

    def __len__(self) -> int:
        return len(self.segments)


class PricingCombination(BaseModel):
    key:    CombinationKey
    prices: Dict[str, NonNegativeFloat] = {}

    @field_validator("key", mode="before")
    @classmethod
    def _parse_key(cls, v):
        return CombinationKey.parse(v) if isinstance(v, str) else v


class PackageTier(BaseModel):
    location_hotels:      Dict[str, List[Hotel]]   = {}
    pricing_combinations: List[PricingCombination] = []

    @field_validator("location_hotels", mode="before")
    @classmethod
    def _unwrap_hotels(cls, v):
        # Stored documents wrap each list as {"hotels": [...]}
        if not isinstance(v, dict):
            return v
        return {
            loc: (hotels.get("hotels", []) if isinstance(hotels, dict) else hotels)
            for loc, hotels in v.items()
        }

    @field_validator("pricing_combinations", mode="before")
    @classmethod
    def _ordered_combinations(cls, v):
        # Stored documents use {raw_key: {room: price}}; dicts keep insertion order.
        if isinstance(v, dict):
            return [{"key": key, "prices": prices} for key, prices in v.items()]
        return v

    @field_validator("pricing_combinations")
    @classmethod
    def _unique_keys(cls, v: List[PricingCombination]) -> List[PricingCombination]:
        seen = set()
        for combo in v:
            raw = combo.key.encode()
            if raw in seen:
                raise ValueError(f"duplicate combination key {raw!r}")
            seen.add(raw)
        return v

    @field_serializer("location_hotels")
    def _wrap_hotels(self, v: Dict[str, List[Hotel]]) -> Dict[str, Any]:
        return {loc: {"hotels": [h.model_dump() for h in hotels]} for loc, hotels in v.items()}

    @field_serializer("pricing_combinations")
    def _combinations_to_mapping(self, v: List[PricingCombination]) -> Dict[str, Pricing]:
        # First occurrence wins, matching resolution order
        mapping = {}
        for combo in v:
            mapping.setdefault(combo.key.encode(), dict(combo.prices))
        return mapping

    def hotels_at(self, location_name: str) -> List[str]:
        return [h.name for h in self.location_hotels.get(location_name, [])]


class Program(BaseModel):
    id:           Optional[str] = None
    title:        str
    description:  str = ""
    image:        str = ""
    program_type: Literal["umrah", "tourism", "other"]
    days:         int = Field(default=0, ge=0)
    nights:       int = Field(default=0, ge=0)
    locations:    List[ProgramLocation] = []
    packages:     Dict[str, PackageTier] = {}
    includes:     List[str] = []
    created_at:   Optional[datetime] = None
    updated_at:   Optional[datetime] = None


class ProgramSummary(BaseModel):
    id:           str
    title:        str
    description:  str
    image:        str
    program_type: str
    days:         int
    nights:       int
    tiers:        List[str]
    lowest_price: Optional[float] = None


class TierSelection(BaseModel):
    tier:            str
    selected_hotels: Dict[str, str]
    hotel_options:   Dict[str, List[str]]


class QuoteRequest(BaseModel):
    tier:            Optional[str] = None
    selected_hotels: Dict[str, str] = {}
    room_type:       Optional[str] = None


QuoteStatus = Literal["incomplete", "no_match", "room_required", "room_unavailable", "priced"]


class Quote(BaseModel):
    program_id:      Optional[str] = None
    tier:            str
    selected_hotels: Dict[str, str]
    room_type:       Optional[str] = None
    status:          QuoteStatus
    room_options:    List[str] = []
    price:           Optional[float] = None
    bookable:        bool = False


class InquiryRequest(QuoteRequest):
    pass


class Inquiry(BaseModel):
    message: str
    link:    str
    quote:   Quote
