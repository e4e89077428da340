"""Deterministic records served while the clinic backend is unreachable."""

from .appointments import FixtureAppointmentGateway, fixture_doctors
from .clients import FixtureClientGateway, fixture_clients
from .dashboard import FixtureDashboardGateway
from .pets import FixturePetGateway, fixture_owners, fixture_pets
from .users import FixtureUserGateway

__all__ = [
    "FixtureAppointmentGateway",
    "FixtureClientGateway",
    "FixtureDashboardGateway",
    "FixturePetGateway",
    "FixtureUserGateway",
    "fixture_clients",
    "fixture_doctors",
    "fixture_owners",
    "fixture_pets",
]
