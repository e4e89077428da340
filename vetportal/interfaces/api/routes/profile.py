"""Routes for the signed-in user's profile."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from vetportal.application.gateways import UserGateway
from vetportal.application.use_cases.profile import (
    change_password as change_password_uc,
    get_profile as get_profile_uc,
    get_user as get_user_uc,
    update_profile as update_profile_uc,
    validate_password as validate_password_uc,
)
from vetportal.interfaces.api.dependencies import get_user_gateway
from vetportal.interfaces.api.routes_helpers import changes_from, http_error_from
from vetportal.interfaces.api.schemas import (
    OperationResultRead,
    PasswordChangeRequest,
    PasswordValidationRequest,
    UserProfileRead,
    UserProfileUpdate,
)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/user/{user_id}", response_model=UserProfileRead)
def read_user(user_id: int, gateway: UserGateway = Depends(get_user_gateway)):
    return UserProfileRead.model_validate(get_user_uc(gateway, user_id))


@router.get("/{email}", response_model=UserProfileRead)
def read_profile(email: str, gateway: UserGateway = Depends(get_user_gateway)):
    return UserProfileRead.model_validate(get_profile_uc(gateway, email))


@router.put("/{email}", response_model=OperationResultRead)
def update_profile(
    email: str,
    profile_in: UserProfileUpdate,
    gateway: UserGateway = Depends(get_user_gateway),
):
    try:
        result = update_profile_uc(gateway, email, changes_from(profile_in))
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return OperationResultRead.model_validate(result)


@router.post("/{email}/password", response_model=OperationResultRead)
def change_password(
    email: str,
    password_in: PasswordChangeRequest,
    gateway: UserGateway = Depends(get_user_gateway),
):
    """Change the password after checking the form locally."""

    try:
        result = change_password_uc(
            gateway,
            email,
            current_password=password_in.current_password,
            new_password=password_in.new_password,
            new_password_confirmation=password_in.new_password_confirmation,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return OperationResultRead.model_validate(result)


@router.post("/{email}/validate-password", response_model=OperationResultRead)
def validate_password(
    email: str,
    password_in: PasswordValidationRequest,
    gateway: UserGateway = Depends(get_user_gateway),
):
    return OperationResultRead.model_validate(
        validate_password_uc(gateway, email, password_in.password)
    )
