# Pricing Service: resolve a tier's price table from per-location hotel picks
#
# A tier's pricing combinations are scanned in their declared order and the
# first combination whose key accepts every selected hotel wins. Keys whose
# segment count differs from the program's location count never match.
# Nothing here raises for bad data: every failure degrades to None.

import logging
from typing import List, Mapping, Optional, Sequence

from models.schemas import Pricing, PricingCombination, Program, ProgramLocation

logger = logging.getLogger(__name__)


def _user_selections(
    locations: Sequence[ProgramLocation],
    selected_hotels: Mapping[str, str]
) -> List[Optional[str]]:
    return [selected_hotels.get(loc.name) for loc in locations]


def is_complete_selection(
    locations: Sequence[ProgramLocation],
    selected_hotels: Mapping[str, str]
) -> bool:
    """True when every location has a non-empty hotel pick."""
    return all(_user_selections(locations, selected_hotels))


def resolve_pricing(
    locations:            Sequence[ProgramLocation],
    pricing_combinations: Optional[Sequence[PricingCombination]],
    selected_hotels:      Mapping[str, str]
) -> Optional[Pricing]:
    """
    Return the price table of the first combination matching the selection,
    or None when nothing matches (including partial selections).
    """
    if not pricing_combinations:
        return None

    selections = _user_selections(locations, selected_hotels)

    for combo in pricing_combinations:
        if len(combo.key) != len(selections):
            logger.debug(
                "Skipping combination %r: %d segments for %d locations",
                combo.key.encode(), len(combo.key), len(selections)
            )
            continue

        matched = True
        for i, hotel in enumerate(selections):
            if not hotel or not combo.key.accepts(i, hotel):
                matched = False
                break

        if matched:
            return dict(combo.prices)

    return None


def room_options_for(
    locations:            Sequence[ProgramLocation],
    pricing_combinations: Optional[Sequence[PricingCombination]],
    selected_hotels:      Mapping[str, str]
) -> List[str]:
    """Room types available for the selection; empty until a price table resolves."""
    if not is_complete_selection(locations, selected_hotels):
        return []
    pricing = resolve_pricing(locations, pricing_combinations, selected_hotels)
    return list(pricing) if pricing else []


def price_for(pricing: Optional[Mapping[str, float]], room_type: Optional[str]) -> Optional[float]:
    """
    Price of `room_type` in a resolved table.
    None means no price (no table, no room, or room missing); 0.0 is a real price.
    """
    if not pricing or not room_type:
        return None
    price = pricing.get(room_type)
    return float(price) if price is not None else None


def lowest_price(program: Program) -> Optional[float]:
    """Cheapest room price across all tiers and combinations, for catalog listings."""
    prices = [
        float(price)
        for tier in program.packages.values()
        for combo in tier.pricing_combinations
        for price in combo.prices.values()
    ]
    return min(prices) if prices else None
