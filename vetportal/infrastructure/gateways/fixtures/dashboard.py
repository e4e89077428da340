"""Offline answers for dashboard counters.

Statistics, today's appointments and admin notifications are derived from
other sources by the dashboard use cases instead of being canned here.
"""

from __future__ import annotations

from vetportal.domain.entities import OperationResult


class FixtureDashboardGateway:
    def mark_notification_read(self, notification_id: int) -> OperationResult:
        return OperationResult(success=False)

    def user_count(self) -> int:
        return 0

    def appointment_count(self) -> int:
        return 0

    def pet_count(self) -> int:
        return 0


__all__ = ["FixtureDashboardGateway"]
