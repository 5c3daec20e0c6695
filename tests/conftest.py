from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from data.programs import PROGRAMS
from main import app
from models.schemas import PackageTier, Program, ProgramLocation
from services.catalog import ProgramCatalog, get_catalog


def make_locations(*names: str) -> list[ProgramLocation]:
    return [ProgramLocation(name=name, label=name.title()) for name in names]


def make_combinations(table: dict) -> list:
    return PackageTier.model_validate({"pricing_combinations": table}).pricing_combinations


@pytest.fixture
def umrah() -> Program:
    return Program.model_validate({**PROGRAMS["umrah_july"], "id": "umrah_july"})


@pytest.fixture
def turkey() -> Program:
    return Program.model_validate({**PROGRAMS["turkey_tour_8d"], "id": "turkey_tour_8d"})


@pytest.fixture
def catalog() -> ProgramCatalog:
    return ProgramCatalog(seed=PROGRAMS)


@pytest.fixture
def client(catalog: ProgramCatalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
