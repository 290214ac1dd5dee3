import asyncio
import logging
import sys

import httpx

from booker_seed.config import Settings
from booker_seed.exceptions.custom import SeedError
from booker_seed.mappers.summary_builder import build_summary
from booker_seed.schemas.booking import SeedResult
from booker_seed.services.restful_booker import RestfulBookerService
from booker_seed.services.seeder import SeederService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def seed(settings: Settings) -> SeedResult:
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        booker = RestfulBookerService(client, settings.base_url)
        seeder = SeederService(
            booker,
            settings.artifact_path,
            credentials=settings.credentials,
            templates=settings.templates,
            inter_request_delay_ms=settings.inter_request_delay_ms,
            cleanup_warn_threshold=settings.cleanup_warn_threshold,
            cleanup_filter=settings.cleanup_filter,
        )
        logger.info("Starting test data seeding against %s", settings.base_url)
        result = await seeder.run()

    logger.info("\n%s", build_summary(result, settings.artifact_path))
    return result


def main(settings: Settings | None = None) -> int:
    settings = settings or Settings()
    configure_logging(settings)

    try:
        asyncio.run(seed(settings))
    except SeedError as exc:
        logger.error("Error during test data seeding: %s (status=%s)", exc.message, exc.status_code)
        print(f"Error during test data seeding: {exc.message}", file=sys.stderr)
        return 1
    except Exception as exc:
        logger.exception("Unexpected error during test data seeding")
        print(f"Error during test data seeding: {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
