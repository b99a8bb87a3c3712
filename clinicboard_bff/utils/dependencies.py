"""
FastAPI Dependencies
Shared clients live on app.state (created in the lifespan); services are
built per request on top of them.
"""

from fastapi import Depends, Request
from typing import Annotated

from clinicboard_bff.config import settings
from clinicboard_bff.services.appointment_service import AppointmentService
from clinicboard_bff.services.auth_service import AuthService
from clinicboard_bff.services.patient_service import PatientService
from clinicboard_bff.services.user_service import UserService
from clinicboard_bff.utils.http_request import HttpRequestClient
from clinicboard_bff.utils.token_storage import TokenStorage


def get_token_storage(request: Request) -> TokenStorage:
    """Token storage dependency"""
    return request.app.state.token_storage


def get_http_client(request: Request) -> HttpRequestClient:
    """Upstream request pipeline dependency"""
    return request.app.state.http_client


def get_auth_service(
    http_client: HttpRequestClient = Depends(get_http_client),
    token_storage: TokenStorage = Depends(get_token_storage)
) -> AuthService:
    return AuthService(http_client, settings.base_urls, token_storage)


def get_user_service(http_client: HttpRequestClient = Depends(get_http_client)) -> UserService:
    return UserService(http_client, settings.base_urls)


def get_patient_service(http_client: HttpRequestClient = Depends(get_http_client)) -> PatientService:
    return PatientService(http_client, settings.base_urls)


def get_appointment_service(http_client: HttpRequestClient = Depends(get_http_client)) -> AppointmentService:
    return AppointmentService(http_client, settings.base_urls)


# Type aliases for dependency injection
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
PatientServiceDep = Annotated[PatientService, Depends(get_patient_service)]
AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
