"""Schemas for the administration dashboard."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AdminStatsRead(BaseModel):
    total_users: int
    today_appointments: int
    total_appointments: int
    total_pets: int
    pending_appointments: int
    completed_appointments: int

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AdminStatsRead"]
