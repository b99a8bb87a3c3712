"""
Payload schemas

Upstream services own validation, so every field is optional, untyped and
unknown fields are kept. The models only document the API with the field
names the upstream DTOs use; whatever JSON values the caller sent are
forwarded as-is.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class PassThroughModel(BaseModel):
    model_config = ConfigDict(extra="allow")


def payload_of(model: BaseModel) -> Dict[str, Any]:
    """JSON-ready dict of the fields the caller actually sent"""
    return model.model_dump(mode="json", exclude_unset=True)


# Auth / user schemas
class UserRequest(PassThroughModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    password: Optional[Any] = None
    contact: Optional[Any] = None
    role: Optional[Any] = None


class UserUpdateRequest(PassThroughModel):
    name: Optional[Any] = None
    contact: Optional[Any] = None


class LoginRequest(PassThroughModel):
    email: Optional[Any] = None
    password: Optional[Any] = None


# Business service schemas
class PatientRequest(PassThroughModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    phone: Optional[Any] = None


class AppointmentRequest(PassThroughModel):
    patientId: Optional[Any] = None
    professionalId: Optional[Any] = None
    scheduledTime: Optional[Any] = Field(default=None, description="yyyy-MM-ddTHH:mm:ss")
    appointmentType: Optional[Any] = Field(default=None, description="e.g. FIRST_CONSULTATION, FOLLOW_UP")
    observations: Optional[Any] = None


class ErrorResponse(BaseModel):
    error: bool = True
    message: Any
    status_code: int
