"""
Pytest configuration and shared fixtures for the net worth planner tests.
"""

import pytest

from planner import create_app
from planner.config import Settings
from planner.models.profile import (
    MortgageEvent,
    OneTimeEvent,
    Profile,
    YearlyAdjustment,
)


@pytest.fixture
def settings(tmp_path):
    """Settings for an isolated testing app with storage under tmp_path."""
    return Settings(
        _env_file=None,
        SECRET_KEY="test-secret-key-123",
        APP_ENV="testing",
        STORAGE_BASE_PATH=str(tmp_path / "storage"),
    )


@pytest.fixture
def app(settings):
    """Flask application wired with the testing settings."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client for the application."""
    return app.test_client()


@pytest.fixture
def base_profile():
    """Simple profile: 10k saved, 100k income, 20% savings rate."""
    return Profile(annual_income=100000, initial_savings=10000, savings_rate=20)


@pytest.fixture
def advanced_profile():
    """Profile with carry-forward adjustments, a purchase and a mortgage."""
    return Profile(
        annual_income=100000,
        initial_savings=50000,
        savings_rate=20,
        advanced_mode=True,
        yearly_adjustments={
            3: YearlyAdjustment(savings_rate=30),
            6: YearlyAdjustment(income=120000),
        },
        events=[
            OneTimeEvent(id=1, year=4, amount=25000, description="Car"),
            MortgageEvent(
                id=2,
                year=5,
                house_cost=400000,
                down_payment=80000,
                interest_rate=6,
                mortgage_term=15,
                description="House",
            ),
        ],
    )
