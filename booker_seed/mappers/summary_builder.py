from pathlib import Path

from booker_seed.schemas.booking import SeedResult

_RULE = "=" * 50


def build_summary(result: SeedResult, artifact_path: str | Path | None = None) -> str:
    lines = [
        _RULE,
        "Test data seeding completed successfully!",
        _RULE,
        "",
        "Created Bookings:",
    ]
    for index, created in enumerate(result.bookings, start=1):
        lines.append(f"{index}. ID: {created.bookingid} - {created.booking.guest_name}")

    lines.append("")
    lines.append("These bookings can be used in your automated tests.")
    if artifact_path is not None:
        lines.append(f"Booking IDs saved to: {artifact_path}")
    return "\n".join(lines)
