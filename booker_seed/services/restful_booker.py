import logging

import httpx
from pydantic import ValidationError

from booker_seed.exceptions.custom import (
    AuthError,
    BookingNotFoundError,
    CreationError,
    NetworkError,
    SeedError,
)
from booker_seed.schemas.booking import BookingTemplate, CreatedBooking, Credentials

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://restful-booker.herokuapp.com"

HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _json_or_empty(resp: httpx.Response):
    """Decode a JSON body; anything unparseable counts as an empty object."""
    try:
        return resp.json()
    except ValueError:
        return {}


class RestfulBookerService:
    def __init__(self, client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            return await self._client.request(method, url, headers=HEADERS, **kwargs)
        except httpx.TransportError as exc:
            raise NetworkError(f"{method} {url} failed: {exc!r}") from exc

    async def authenticate(self, credentials: Credentials) -> str:
        resp = await self._request("POST", "/auth", json=credentials.model_dump())

        data = _json_or_empty(resp)
        token = data.get("token") if isinstance(data, dict) else None
        if not resp.is_success or not token:
            reason = data.get("reason") if isinstance(data, dict) else None
            raise AuthError(
                f"Failed to get auth token ({reason or resp.status_code})",
                status_code=resp.status_code,
            )

        logger.info("Token obtained successfully")
        return token

    async def _fetch_list(self, firstname: str | None) -> list:
        params = {"firstname": firstname} if firstname else None
        resp = await self._request("GET", "/booking", params=params)

        if not resp.is_success:
            raise SeedError(resp.text, status_code=resp.status_code)

        data = _json_or_empty(resp)
        if not isinstance(data, list):
            raise SeedError("Unexpected booking list payload", status_code=resp.status_code)
        return data

    async def list_bookings(self, firstname: str | None = None) -> list[int]:
        data = await self._fetch_list(firstname)

        ids: list[int] = []
        for item in data:
            booking_id = item.get("bookingid") if isinstance(item, dict) else None
            if isinstance(booking_id, int) and not isinstance(booking_id, bool):
                ids.append(booking_id)
            else:
                logger.debug("Skipping malformed booking list entry: %r", item)
        return ids

    async def count_bookings(self, firstname: str | None = None) -> int:
        """Number of entries in the booking list, well-formed or not."""
        return len(await self._fetch_list(firstname))

    async def create_booking(self, template: BookingTemplate) -> CreatedBooking:
        resp = await self._request("POST", "/booking", json=template.model_dump(mode="json"))

        data = _json_or_empty(resp)
        booking_id = data.get("bookingid") if isinstance(data, dict) else None
        if (
            not resp.is_success
            or not isinstance(booking_id, int)
            or isinstance(booking_id, bool)
            or booking_id <= 0
        ):
            raise CreationError(
                f"Failed to create booking for {template.guest_name}",
                guest_name=template.guest_name,
                status_code=resp.status_code,
            )

        # Older deployments omit the echoed booking
        echoed = data.get("booking") or template.model_dump(mode="json")
        try:
            return CreatedBooking(bookingid=booking_id, booking=echoed)
        except ValidationError as exc:
            raise CreationError(
                f"Unexpected booking echoed for {template.guest_name}: {exc.error_count()} invalid fields",
                guest_name=template.guest_name,
                status_code=resp.status_code,
            ) from exc

    async def get_booking(self, booking_id: int) -> BookingTemplate:
        resp = await self._request("GET", f"/booking/{booking_id}")

        if resp.status_code == 404:
            raise BookingNotFoundError(booking_id)
        if not resp.is_success:
            raise SeedError(resp.text, status_code=resp.status_code)

        try:
            return BookingTemplate.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise SeedError(
                f"Unexpected payload for booking {booking_id}", status_code=resp.status_code
            ) from exc
