"""
Request and response models for the BFF
"""

from .schemas import (
    UserRequest, UserUpdateRequest, LoginRequest,
    PatientRequest, AppointmentRequest, ErrorResponse, payload_of
)

__all__ = [
    "UserRequest",
    "UserUpdateRequest",
    "LoginRequest",
    "PatientRequest",
    "AppointmentRequest",
    "ErrorResponse",
    "payload_of",
]
