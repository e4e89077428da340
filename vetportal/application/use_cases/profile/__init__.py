"""Use cases for user profiles."""

from .user_profile import change_password, get_profile, get_user, update_profile, validate_password

__all__ = [
    "change_password",
    "get_profile",
    "get_user",
    "update_profile",
    "validate_password",
]
