"""Use case that reloads the live notification set of a user."""

from __future__ import annotations

import logging
from datetime import date

from vetportal.application.gateways import AppointmentGateway, NotificationGateway
from vetportal.application.listing import EqualsIgnoreCase, FilterSpec, evaluate
from vetportal.application.notifications import NotificationFeed
from vetportal.domain.entities import Notification
from vetportal.infrastructure.http import BackendUnavailableError
from vetportal.utils import today_in_app_timezone

from .generate_notifications import generate_appointment_notifications

logger = logging.getLogger(__name__)


def _fetch_published(gateway: NotificationGateway, email: str | None) -> list[Notification]:
    if email:
        try:
            return gateway.for_user(email)
        except BackendUnavailableError as exc:
            logger.warning("User notifications unavailable for %s: %s", email, exc)
    return gateway.general()


def collect_notifications(
    notifications: NotificationGateway,
    appointments: AppointmentGateway,
    *,
    email: str | None = None,
    today: date | None = None,
) -> list[Notification]:
    """Return the candidate notifications for ``email``.

    The user-specific list is preferred, then the general list. When neither
    can be fetched the notifications are generated from upcoming appointments.
    """

    try:
        return _fetch_published(notifications, email)
    except BackendUnavailableError as exc:
        logger.warning("Notifications unavailable, generating from appointments: %s", exc)

    candidates = appointments.list_basic()
    if email:
        candidates = evaluate(candidates, FilterSpec.of(EqualsIgnoreCase("email", email)))
    return generate_appointment_notifications(
        candidates, today=today or today_in_app_timezone()
    )


def refresh_notifications(
    feed: NotificationFeed,
    notifications: NotificationGateway,
    appointments: AppointmentGateway,
    *,
    email: str | None = None,
    today: date | None = None,
) -> list[Notification]:
    """Publish the freshly collected notifications and return the live set."""

    candidates = collect_notifications(notifications, appointments, email=email, today=today)
    live = feed.publish(candidates)
    logger.info(
        "Published %s of %s notifications for %s", len(live), len(candidates), email or "anonymous"
    )
    return live
