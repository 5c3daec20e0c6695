from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import make_locations
from models.schemas import CombinationKey, Hotel, PackageTier
from services.combinations import combination_key_for, malformed_combinations, rename_hotel
from services.pricing import resolve_pricing

LOCATIONS = make_locations("madinah", "makkah")


@pytest.fixture
def tier() -> PackageTier:
    return PackageTier.model_validate({
        "location_hotels": {
            "madinah": {"hotels": [{"name": "Ansar"}]},
            "makkah": {"hotels": [{"name": "Tayseer"}, {"name": "Misk"}]},
        },
        "pricing_combinations": {
            "Ansar_Tayseer,Misk": {"double": 16500},
            "Ansar_Misk": {"double": 17000},
            "Ansar_Misk_Extra": {"double": 1},
        },
    })


def test_parse_splits_segments_and_groups():
    key = CombinationKey.parse("A,B_C")

    assert key.segments == [["A", "B"], ["C"]]
    assert len(key) == 2
    assert key.accepts(0, "B")
    assert not key.accepts(1, "A")


@pytest.mark.parametrize("raw", ["A_B", "A,B_C", "Hotel One (Comfort)", " A _B", "A,,B_C"])
def test_encode_restores_stored_key(raw):
    assert CombinationKey.parse(raw).encode() == raw


def test_stored_mapping_keeps_declared_order(tier: PackageTier):
    assert [c.key.encode() for c in tier.pricing_combinations] == [
        "Ansar_Tayseer,Misk",
        "Ansar_Misk",
        "Ansar_Misk_Extra",
    ]


def test_tier_serializes_back_to_stored_shape(tier: PackageTier):
    dumped = tier.model_dump()

    assert dumped["location_hotels"]["makkah"] == {"hotels": [{"name": "Tayseer"}, {"name": "Misk"}]}
    assert list(dumped["pricing_combinations"]) == ["Ansar_Tayseer,Misk", "Ansar_Misk", "Ansar_Misk_Extra"]
    assert PackageTier.model_validate(dumped) == tier


def test_tier_accepts_bare_hotel_lists():
    tier = PackageTier.model_validate({"location_hotels": {"makkah": [{"name": "Misk"}]}})

    assert tier.hotels_at("makkah") == ["Misk"]
    assert tier.hotels_at("madinah") == []


@pytest.mark.parametrize("name", ["Hotel_One", "Hotel,One"])
def test_hotel_names_cannot_contain_key_delimiters(name):
    with pytest.raises(ValidationError):
        Hotel(name=name)


def test_negative_prices_are_rejected():
    with pytest.raises(ValidationError):
        PackageTier.model_validate({"pricing_combinations": {"A_B": {"double": -1}}})


def test_combination_key_for_complete_selection():
    key = combination_key_for(LOCATIONS, {"makkah": "Misk", "madinah": "Ansar"})

    assert key.encode() == "Ansar_Misk"


def test_combination_key_for_partial_selection():
    assert combination_key_for(LOCATIONS, {"madinah": "Ansar"}) is None
    assert combination_key_for([], {}) is None


def test_malformed_combinations_reported(tier: PackageTier):
    assert malformed_combinations(LOCATIONS, tier) == ["Ansar_Misk_Extra"]


def test_rename_hotel_updates_lists_and_keys(tier: PackageTier):
    renamed = rename_hotel(LOCATIONS, tier, "makkah", "Misk", "Safir Misk")

    assert renamed.hotels_at("makkah") == ["Tayseer", "Safir Misk"]
    assert [c.key.encode() for c in renamed.pricing_combinations] == [
        "Ansar_Tayseer,Safir Misk",
        "Ansar_Safir Misk",
        "Ansar_Misk_Extra",
    ]
    selection = {"madinah": "Ansar", "makkah": "Safir Misk"}
    assert resolve_pricing(LOCATIONS, renamed.pricing_combinations, selection) == {"double": 16500}


def test_rename_hotel_leaves_input_tier_untouched(tier: PackageTier):
    before = tier.model_dump()

    rename_hotel(LOCATIONS, tier, "makkah", "Misk", "Safir Misk")

    assert tier.model_dump() == before


def test_rename_hotel_only_touches_its_location():
    tier = PackageTier.model_validate({
        "location_hotels": {"madinah": [{"name": "Same"}], "makkah": [{"name": "Same"}]},
        "pricing_combinations": {"Same_Same": {"double": 1}},
    })

    renamed = rename_hotel(LOCATIONS, tier, "makkah", "Same", "Other")

    assert renamed.hotels_at("madinah") == ["Same"]
    assert renamed.pricing_combinations[0].key.encode() == "Same_Other"


def test_rename_hotel_rejects_delimiters(tier: PackageTier):
    with pytest.raises(ValidationError):
        rename_hotel(LOCATIONS, tier, "makkah", "Misk", "Misk_2")


def test_duplicate_keys_are_rejected():
    with pytest.raises(ValidationError, match="duplicate combination key"):
        PackageTier.model_validate({"pricing_combinations": [
            {"key": "A_C", "prices": {"double": 1}},
            {"key": "A_C", "prices": {"double": 2}},
        ]})


def test_serialization_keeps_first_price_for_repeated_key():
    first = PackageTier.model_validate({"pricing_combinations": {"A_C": {"double": 1}}})
    combo = first.pricing_combinations[0]
    tier = first.model_copy(update={"pricing_combinations": [
        combo, combo.model_copy(update={"prices": {"double": 2.0}}),
    ]})
    selection = {"madinah": "A", "makkah": "C"}

    reloaded = PackageTier.model_validate(tier.model_dump())

    assert resolve_pricing(LOCATIONS, tier.pricing_combinations, selection) == {"double": 1.0}
    assert resolve_pricing(LOCATIONS, reloaded.pricing_combinations, selection) == {"double": 1.0}


def test_rename_onto_existing_hotel_keeps_earlier_price():
    tier = PackageTier.model_validate({
        "location_hotels": {"madinah": [{"name": "A"}, {"name": "B"}], "makkah": [{"name": "C"}]},
        "pricing_combinations": {"A_C": {"double": 1}, "B_C": {"double": 2}, "A,B_C": {"double": 3}},
    })

    renamed = rename_hotel(LOCATIONS, tier, "madinah", "B", "A")

    assert renamed.hotels_at("madinah") == ["A"]
    assert [c.key.encode() for c in renamed.pricing_combinations] == ["A_C"]
    assert renamed.pricing_combinations[0].prices == {"double": 1.0}
    reloaded = PackageTier.model_validate(renamed.model_dump())
    assert resolve_pricing(LOCATIONS, reloaded.pricing_combinations, {"madinah": "A", "makkah": "C"}) == {"double": 1.0}


def test_rename_of_unlisted_hotel_changes_nothing(tier: PackageTier):
    renamed = rename_hotel(LOCATIONS, tier, "makkah", "Ghost", "Safir Misk")

    assert renamed == tier


def test_rename_validates_new_name_even_for_unlisted_hotel():
    tier = PackageTier.model_validate({
        "location_hotels": {"madinah": [{"name": "A"}], "makkah": [{"name": "C"}]},
        "pricing_combinations": {"Old_C": {"double": 1}},
    })

    with pytest.raises(ValidationError):
        rename_hotel(LOCATIONS, tier, "madinah", "Old", "X_Y")
    assert [c.key.encode() for c in rename_hotel(LOCATIONS, tier, "madinah", "Old", "New").pricing_combinations] == ["Old_C"]
