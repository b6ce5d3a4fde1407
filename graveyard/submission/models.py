from dataclasses import dataclass
from enum import Enum

from graveyard.ingestion.models import ExtractedDeathPayload

UNKNOWN_MOURNER = "Unknown Soul"


@dataclass(frozen=True)
class Submitter:
    """Identity of the authenticated user uploading a save."""

    user_id: str
    full_name: str | None = None
    email: str | None = None

    @property
    def mourned_by(self) -> str:
        """Public attribution: full name, else the email's local part."""
        if self.full_name and self.full_name.strip():
            return self.full_name.strip()
        if self.email:
            local_part = self.email.split("@", 1)[0]
            if local_part:
                return local_part
        return UNKNOWN_MOURNER


class SubmissionStatus(str, Enum):
    SUBMITTED = "submitted"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class SubmissionResult:
    status: SubmissionStatus
    fingerprint: str
    payload: ExtractedDeathPayload
    death_id: str | None = None
