"""
Appointment Routes
"""

from fastapi import APIRouter, Query, status

from clinicboard_bff.models.schemas import AppointmentRequest, payload_of
from clinicboard_bff.utils.dependencies import AppointmentServiceDep

router = APIRouter()


@router.get("/available-times")
async def list_available_times(
    appointment_service: AppointmentServiceDep,
    id: str = Query(..., description="Professional ID"),
    date: str = Query(..., description="Day to check, as accepted by the business service")
):
    """Free slots of a professional on a given date"""
    return await appointment_service.find_available_times(id, date)


@router.get("/professional")
async def list_professional_appointments(
    appointment_service: AppointmentServiceDep,
    id: str = Query(..., description="Professional ID"),
    date: str = Query(..., description="Day to list")
):
    """Appointments booked with a professional on a given date"""
    return await appointment_service.find_professional_appointments(id, date)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_appointment(appointment_data: AppointmentRequest, appointment_service: AppointmentServiceDep):
    return await appointment_service.create(payload_of(appointment_data))


@router.get("")
async def list_appointments(appointment_service: AppointmentServiceDep):
    return await appointment_service.find_all()


@router.get("/{appointment_id}")
async def get_appointment(appointment_id: str, appointment_service: AppointmentServiceDep):
    return await appointment_service.find_one(appointment_id)


@router.put("/{appointment_id}")
async def update_appointment(appointment_id: str, appointment_data: AppointmentRequest, appointment_service: AppointmentServiceDep):
    return await appointment_service.update(appointment_id, payload_of(appointment_data))


@router.delete("/{appointment_id}")
async def delete_appointment(appointment_id: str, appointment_service: AppointmentServiceDep):
    return await appointment_service.remove(appointment_id)
