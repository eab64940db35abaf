import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db import models  # noqa: F401
from app.db.session import get_db
from main import app
from services.catalog.loader import parse_catalog
from services.explorer.api import get_catalog


# Catalog order matters: several tests rely on it.
CATALOG_DATA = {
    "projects": [
        {
            "id": "privy",
            "title": "Clock Tower Privy",
            "type": "excavation",
            "teaser": "Boarding house privy.",
            "summary": "Household refuse from 1880s boarding houses.",
            "era": "Victorian",
            "focus": "Domestic life",
            "themes": ["Foodways"],
            "years": "2019-2020",
            "startYear": 2019,
            "location": "Clock Tower Plaza",
            "coordinates": [38.6361, -90.2339],
            "discoveries": ["Medicine bottles"],
            "artifacts": [
                {"category": "Glass", "items": ["Bottle", {"name": "Ink well", "notes": "cone form"}]},
            ],
        },
        {
            "id": "boulevard",
            "title": "Boulevard Survey",
            "type": "survey",
            "teaser": "Shovel tests.",
            "era": "Gilded Age",
            "focus": "Landscape",
            "years": "2017",
            "startYear": 2017,
            "location": "Grand Boulevard",
            "coordinates": [38.6372, -90.2334],
        },
        {
            "id": "ceramics",
            "title": "Ceramics Lab",
            "type": "lab",
            "teaser": "Cataloging ceramics.",
            "timelineNote": "Lab season opens.",
            "era": "Victorian",
            "focus": "Material culture",
            "years": "2021-present",
            "startYear": 2021,
            "coordinates": [38.6358, -90.2352],
        },
        {
            "id": "farmstead",
            "title": "Laclede Farmstead",
            "type": "excavation",
            "teaser": "Colonial farmstead.",
            "era": "Colonial",
            "focus": "Domestic life",
            "years": "2017-2018",
            "startYear": 2017,
            "location": "Laclede Lot",
            "coordinates": [38.6349, -90.2361],
        },
        {
            "id": "streetcar",
            "title": "Streetcar GPR",
            "type": "survey",
            "teaser": "Radar over the rails.",
            "era": "Gilded Age",
            "focus": "Transportation",
            "themes": ["Landscape"],
            "years": "2022",
            "startYear": 2022,
            "coordinates": [38.6367, -90.2375],
        },
    ]
}


@pytest.fixture
def catalog():
    return parse_catalog(CATALOG_DATA)


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory, catalog):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
