"""Aggregate statistics displayed on the administration dashboards."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AdminStats:
    total_users: int = 0
    today_appointments: int = 0
    total_appointments: int = 0
    total_pets: int = 0
    pending_appointments: int = 0
    completed_appointments: int = 0


@dataclass
class AppointmentStats:
    total_appointments: int = 0
    pending_appointments: int = 0
    confirmed_appointments: int = 0
    completed_appointments: int = 0
    cancelled_appointments: int = 0


@dataclass
class PetStats:
    total_pets: int = 0
    active_pets: int = 0
    inactive_pets: int = 0
    pets_by_type: dict[str, int] = field(default_factory=dict)
    recent_registrations: int = 0


@dataclass
class VaccinationStats:
    total_vaccinations: int = 0
    upcoming_vaccinations: int = 0
    overdue_vaccinations: int = 0
    vaccinations_by_type: dict[str, int] = field(default_factory=dict)


__all__ = ["AdminStats", "AppointmentStats", "PetStats", "VaccinationStats"]
