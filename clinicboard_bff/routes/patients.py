"""
Patient Routes
"""

from fastapi import APIRouter, status

from clinicboard_bff.models.schemas import PatientRequest, payload_of
from clinicboard_bff.utils.dependencies import PatientServiceDep

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_patient(patient_data: PatientRequest, patient_service: PatientServiceDep):
    return await patient_service.create(payload_of(patient_data))


@router.get("/professional/{professional_id}")
async def list_professional_patients(professional_id: str, patient_service: PatientServiceDep):
    """Patients assigned to a professional"""
    return await patient_service.find_professional_patients(professional_id)


@router.get("/{patient_id}")
async def get_patient(patient_id: str, patient_service: PatientServiceDep):
    return await patient_service.find_one(patient_id)


@router.patch("/{patient_id}")
async def update_patient(patient_id: str, patient_data: PatientRequest, patient_service: PatientServiceDep):
    return await patient_service.update(patient_id, payload_of(patient_data))


@router.delete("/{patient_id}")
async def delete_patient(patient_id: str, patient_service: PatientServiceDep):
    return await patient_service.remove(patient_id)
