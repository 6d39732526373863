"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from contact_directory_api.app.core.config import Settings
from contact_directory_api.app.core.db import Database
from contact_directory_api.app.main import create_app

SCHEMA = [
    "CREATE TABLE province_info (province_id INTEGER PRIMARY KEY, province TEXT)",
    "CREATE TABLE state_info (state_id INTEGER PRIMARY KEY, state_name TEXT)",
    "CREATE TABLE location (location_id INTEGER PRIMARY KEY, location TEXT)",
    "CREATE TABLE mk_cat_info (mk_cat_id INTEGER PRIMARY KEY, mk_category TEXT)",
    "CREATE TABLE md_cat_info (md_cat_id INTEGER PRIMARY KEY, md_category TEXT)",
    "CREATE TABLE muas_cat_info (muas_cat_id INTEGER PRIMARY KEY, muas_category TEXT)",
    "CREATE TABLE nrt_cat_info (nrt_cat_id INTEGER PRIMARY KEY, nrt_category TEXT)",
    "CREATE TABLE field_cat_info (field_cat_id INTEGER PRIMARY KEY, field_category TEXT)",
    "CREATE TABLE medical_cat_info (medical_cat_id INTEGER PRIMARY KEY, medical_category TEXT)",
    "CREATE TABLE service_cat_info (service_cat_id INTEGER PRIMARY KEY, service_category TEXT)",
    """
    CREATE TABLE phone_record (
        record_id INTEGER PRIMARY KEY,
        rank TEXT,
        f_name TEXT,
        l_name TEXT,
        phone TEXT,
        phone1 TEXT,
        phone2 TEXT,
        location_id INTEGER DEFAULT 0,
        mk_cat_id INTEGER DEFAULT 0,
        md_cat_id INTEGER DEFAULT 0,
        muas_cat_id INTEGER DEFAULT 0,
        nrt_cat_id INTEGER DEFAULT 0,
        field_cat_id INTEGER DEFAULT 0,
        medical_cat_id INTEGER DEFAULT 0,
        service_cat_id INTEGER DEFAULT 0,
        province_id INTEGER,
        state_id INTEGER
    )
    """,
]

SEED = [
    "INSERT INTO province_info VALUES (1, 'Lagos'), (2, 'Abuja')",
    "INSERT INTO state_info VALUES (2, 'Lagos State'), (3, 'FCT')",
    "INSERT INTO location VALUES (3, 'Lagos Hub'), (4, 'Abuja Central'), (5, 'Shared Label')",
    "INSERT INTO mk_cat_info VALUES (5, 'MK Five'), (6, 'Shared Label')",
    "INSERT INTO md_cat_info VALUES (7, 'MD Seven')",
    "INSERT INTO muas_cat_info VALUES (1, 'Muas One')",
    "INSERT INTO nrt_cat_info VALUES (1, 'NRT One')",
    "INSERT INTO field_cat_info VALUES (1, 'Field One')",
    "INSERT INTO medical_cat_info VALUES (1, 'Medical One')",
    "INSERT INTO service_cat_info VALUES (1, 'Service One'), (2, ''), (3, NULL)",
    """
    INSERT INTO phone_record
        (record_id, rank, f_name, l_name, phone, phone1, phone2,
         location_id, mk_cat_id, md_cat_id, service_cat_id, province_id, state_id)
    VALUES
        (1, 'Inspector', 'John', 'Doe', '08011112222', NULL, NULL, 3, 0, 0, 0, 1, 2),
        (2, NULL, 'Ada', '', '', '+234 803 123 4567', NULL, 0, 5, 7, 0, 2, 3),
        (3, NULL, '', '', '', '', '8031234567', 0, 0, 0, 0, NULL, NULL),
        (4, 'Sergeant', 'Grace', 'Hopper', '0700', NULL, NULL, 99, 0, 0, 1, 1, 2),
        (5, NULL, 'Bola', 'Ade', '09000000000', NULL, NULL, 4, 0, 0, 0, 2, 3)
    """,
]


@pytest.fixture
def engine():
    """In-memory SQLite store seeded with a small directory."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        for statement in SCHEMA + SEED:
            conn.exec_driver_sql(statement)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db(engine):
    return Database(engine)


@pytest.fixture
def settings():
    return Settings(environment="development", database_url="sqlite://")


@pytest.fixture
def client(settings, engine):
    app = create_app(settings=settings, engine=engine)
    return TestClient(app)
