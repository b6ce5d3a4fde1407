from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from graveyard.ingestion.models import ExtractedDeathPayload
from graveyard.submission.models import Submitter, SubmissionStatus


@dataclass(slots=True)
class SubmissionContext:
    raw_text: str
    submitter: Submitter
    character_name: str = ""
    document: Any = None
    payload: ExtractedDeathPayload | None = None
    fingerprint: str = ""
    death_id: str | None = None
    status: SubmissionStatus | None = None


class SubmissionStep(ABC):
    @abstractmethod
    def run(self, context: SubmissionContext) -> SubmissionContext:
        raise NotImplementedError
