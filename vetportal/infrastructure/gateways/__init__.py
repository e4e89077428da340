"""Gateways to the clinic backend and their offline counterparts."""

from .appointments import RemoteAppointmentGateway
from .base import FallbackGateway, FixtureIds, command_result
from .clients import RemoteClientGateway
from .dashboard import RemoteDashboardGateway
from .notifications import RemoteNotificationGateway
from .pets import RemotePetGateway
from .users import RemoteUserGateway

__all__ = [
    "FallbackGateway",
    "FixtureIds",
    "RemoteAppointmentGateway",
    "RemoteClientGateway",
    "RemoteDashboardGateway",
    "RemoteNotificationGateway",
    "RemotePetGateway",
    "RemoteUserGateway",
    "command_result",
]
