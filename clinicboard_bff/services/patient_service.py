"""
Patient Service forwarder
"""

from typing import Any, Dict
from urllib.parse import quote

from clinicboard_bff.utils.http_request import HttpRequestClient


class PatientService:
    """Patient calls against the business service"""

    def __init__(self, http_client: HttpRequestClient, base_urls: Dict[str, str]):
        self.http_client = http_client
        self.base_url = f"{base_urls['BUSINESS_SERVICE']}/patients"

    async def create(self, payload: Dict[str, Any]) -> Any:
        return await self.http_client.request("POST", self.base_url, payload)

    async def find_professional_patients(self, professional_id: str) -> Any:
        """Patients assigned to a professional"""
        return await self.http_client.request("GET", f"{self.base_url}/professional/{quote(professional_id, safe='')}")

    async def find_one(self, patient_id: str) -> Any:
        return await self.http_client.request("GET", f"{self.base_url}/{quote(patient_id, safe='')}")

    async def update(self, patient_id: str, payload: Dict[str, Any]) -> Any:
        # The business service only exposes full updates
        return await self.http_client.request("PUT", f"{self.base_url}/{quote(patient_id, safe='')}", payload)

    async def remove(self, patient_id: str) -> Any:
        return await self.http_client.request("DELETE", f"{self.base_url}/{quote(patient_id, safe='')}")
