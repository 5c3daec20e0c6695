# Combination keys: build keys from selections and keep them in sync
# with hotel renames made while editing a tier.

import logging
from typing import List, Mapping, Optional, Sequence

from models.schemas import CombinationKey, Hotel, PackageTier, ProgramLocation

logger = logging.getLogger(__name__)


def combination_key_for(
    locations: Sequence[ProgramLocation],
    selected_hotels: Mapping[str, str]
) -> Optional[CombinationKey]:
    """Single-hotel key for a complete selection, None if any location is unpicked."""
    picks = [selected_hotels.get(loc.name) for loc in locations]
    if not picks or not all(picks):
        return None
    return CombinationKey(segments=[[hotel] for hotel in picks])


def malformed_combinations(
    locations: Sequence[ProgramLocation],
    tier: PackageTier
) -> List[str]:
    """Raw keys that can never match because their segment count is off."""
    return [
        combo.key.encode()
        for combo in tier.pricing_combinations
        if len(combo.key) != len(locations)
    ]


def rename_hotel(
    locations:     Sequence[ProgramLocation],
    tier:          PackageTier,
    location_name: str,
    old_name:      str,
    new_name:      str
) -> PackageTier:
    """
    Return a copy of `tier` with a hotel renamed at one location.
    The rename is carried into every well-formed combination key's segment
    for that location so existing prices stay attached. Combination order
    is preserved; the input tier is not modified.

    A rename onto a hotel already present merges the two: keys that collide
    keep the earlier combination's prices. Renaming a hotel the location
    does not list leaves the tier unchanged.
    """
    new_hotel = Hotel(name=new_name)
    listed    = tier.hotels_at(location_name)
    if old_name not in listed or old_name == new_name:
        return tier.model_copy()

    names = []
    for listed_name in listed:
        name = new_hotel.name if listed_name == old_name else listed_name
        if name not in names:
            names.append(name)
    hotels = dict(tier.location_hotels)
    hotels[location_name] = [Hotel(name=name) for name in names]

    index = next((i for i, loc in enumerate(locations) if loc.name == location_name), None)
    if index is None:
        return tier.model_copy(update={"location_hotels": hotels})

    combos = []
    seen   = set()
    for combo in tier.pricing_combinations:
        if len(combo.key) == len(locations) and old_name in combo.key.segments[index]:
            segments = [list(s) for s in combo.key.segments]
            segment  = []
            for hotel in segments[index]:
                kept = new_name if hotel == old_name else hotel
                if kept not in segment:
                    segment.append(kept)
            segments[index] = segment
            renamed = CombinationKey(segments=segments)
            logger.debug("Renamed combination %r -> %r", combo.key.encode(), renamed.encode())
            combo = combo.model_copy(update={"key": renamed})

        raw = combo.key.encode()
        if raw in seen:
            logger.warning("Dropping combination %r: duplicates an earlier key after rename", raw)
            continue
        seen.add(raw)
        combos.append(combo)

    return tier.model_copy(update={"location_hotels": hotels, "pricing_combinations": combos})
