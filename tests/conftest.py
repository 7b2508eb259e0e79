"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from app import app
from src.gtfs_clean_bc.agency.domain.entities.agency_profile import get_agency_profile


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api_base_url():
    """Base URL for cleaning API endpoints."""
    return "/api/v1/clean"


@pytest.fixture
def rtc_profile():
    """Reference agency profile (RTC Québec, fr_CA)."""
    return get_agency_profile("rtc_quebec")
