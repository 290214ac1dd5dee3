import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from booker_seed.artifact import write_seed_result
from booker_seed.exceptions.custom import ArtifactError, NetworkError, SeedError
from booker_seed.schemas.booking import BookingTemplate, CreatedBooking, Credentials, SeedResult
from booker_seed.services.restful_booker import RestfulBookerService
from booker_seed.templates import DEFAULT_TEMPLATES

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 500
DEFAULT_WARN_THRESHOLD = 20
DEFAULT_FILTER = "Automation"


class SeederService:
    """Creates a fixed batch of bookings and records their ids.

    Every step runs in order and the first error propagates; the artifact
    is only written once all templates have been created.
    """

    def __init__(
        self,
        booker: RestfulBookerService,
        artifact_path: str | Path,
        credentials: Credentials | None = None,
        templates: Sequence[BookingTemplate] = DEFAULT_TEMPLATES,
        inter_request_delay_ms: int = DEFAULT_DELAY_MS,
        cleanup_warn_threshold: int = DEFAULT_WARN_THRESHOLD,
        cleanup_filter: str = DEFAULT_FILTER,
    ):
        self._booker = booker
        self._artifact_path = Path(artifact_path)
        self._credentials = credentials or Credentials()
        self._templates = tuple(templates)
        self._delay = inter_request_delay_ms / 1000
        self._warn_threshold = cleanup_warn_threshold
        self._cleanup_filter = cleanup_filter

    @property
    def artifact_path(self) -> Path:
        return self._artifact_path

    async def authenticate(self, credentials: Credentials | None = None) -> str:
        logger.info("Getting authentication token...")
        return await self._booker.authenticate(credentials or self._credentials)

    async def inspect_existing(self, firstname: str | None = None) -> int:
        """Count earlier bookings for ``firstname``. Read-only, warns only."""
        firstname = firstname or self._cleanup_filter
        logger.info("Checking for existing bookings named '%s'...", firstname)

        try:
            count = await self._booker.count_bookings(firstname)
        except NetworkError:
            raise
        except SeedError as exc:
            logger.warning(
                "Could not list existing bookings (status=%s), skipping check",
                exc.status_code,
            )
            return 0

        logger.info("Found %d existing '%s' bookings", count, firstname)
        if count > self._warn_threshold:
            logger.warning(
                "Many '%s' bookings exist (%d > %d). Consider manual cleanup.",
                firstname, count, self._warn_threshold,
            )
        return count

    async def create_record(self, template: BookingTemplate) -> CreatedBooking:
        logger.info("Creating booking: %s...", template.guest_name)
        created = await self._booker.create_booking(template)
        logger.info("Booking created with ID: %d", created.bookingid)
        return created

    async def run(self) -> SeedResult:
        # The token is not needed by POST /booking; auth only proves the API is up
        await self.authenticate()
        await self.inspect_existing()

        created: list[CreatedBooking] = []
        for template in self._templates:
            created.append(await self.create_record(template))
            await asyncio.sleep(self._delay)

        result = SeedResult(bookings=created, timestamp=datetime.now(timezone.utc))
        try:
            write_seed_result(result, self._artifact_path)
        except OSError as exc:
            raise ArtifactError(
                f"Could not write {self._artifact_path}: {exc.strerror or exc}",
                path=str(self._artifact_path),
            ) from exc
        logger.debug("Wrote artifact %s", self._artifact_path)
        return result
