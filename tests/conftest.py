from datetime import date

import pytest

from booker_seed.schemas.booking import BookingDates, BookingTemplate


def pytest_configure(config):
    config.addinivalue_line("markers", "live: hits the public Restful Booker API")


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SEED_BASE_URL", "https://booker.test")
    monkeypatch.setenv("SEED_INTER_REQUEST_DELAY_MS", "0")
    monkeypatch.setenv("SEED_ARTIFACT_PATH", str(tmp_path / "seeded-booking-ids.json"))
    monkeypatch.setenv("SEED_LOG_LEVEL", "DEBUG")


@pytest.fixture
def template():
    return BookingTemplate(
        firstname="Jim",
        lastname="Brown",
        totalprice=111,
        depositpaid=True,
        bookingdates=BookingDates(checkin=date(2025, 1, 1), checkout=date(2025, 1, 5)),
        additionalneeds="Breakfast",
    )


