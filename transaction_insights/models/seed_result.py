from dataclasses import dataclass


@dataclass(frozen=True)
class SeedResult:
    """Outcome of one seeding run."""

    fetched: int  # Objects received from the source
    inserted: int  # New rows written
    skipped: int  # Already present (by id)
    invalid: int  # Rejected by validation
