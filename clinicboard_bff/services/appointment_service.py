"""
Appointment Service forwarder
"""

from typing import Any, Dict
from urllib.parse import quote, urlencode

from clinicboard_bff.utils.http_request import HttpRequestClient


class AppointmentService:
    """Appointment calls against the business service"""

    def __init__(self, http_client: HttpRequestClient, base_urls: Dict[str, str]):
        self.http_client = http_client
        self.base_url = f"{base_urls['BUSINESS_SERVICE']}/appointments"

    async def create(self, payload: Dict[str, Any]) -> Any:
        return await self.http_client.request("POST", self.base_url, payload)

    async def find_all(self) -> Any:
        return await self.http_client.request("GET", self.base_url)

    async def find_available_times(self, professional_id: str, date: str) -> Any:
        """Free slots of a professional on a given date"""
        query = urlencode({"id": professional_id, "date": date})
        return await self.http_client.request("GET", f"{self.base_url}/available-times?{query}")

    async def find_professional_appointments(self, professional_id: str, date: str) -> Any:
        """Appointments booked with a professional on a given date"""
        query = urlencode({"id": professional_id, "date": date})
        return await self.http_client.request("GET", f"{self.base_url}/professional?{query}")

    async def find_one(self, appointment_id: str) -> Any:
        return await self.http_client.request("GET", f"{self.base_url}/{quote(appointment_id, safe='')}")

    async def update(self, appointment_id: str, payload: Dict[str, Any]) -> Any:
        return await self.http_client.request("PUT", f"{self.base_url}/{quote(appointment_id, safe='')}", payload)

    async def remove(self, appointment_id: str) -> Any:
        return await self.http_client.request("DELETE", f"{self.base_url}/{quote(appointment_id, safe='')}")
