from graveyard.ingestion.exceptions import (
    BusinessRuleError,
    DocumentValidationError,
    ExtractionError,
    IngestionError,
)
from graveyard.submission.exceptions import DuplicateSubmissionError, PersistenceError
from graveyard.submission.models import SubmissionResult, SubmissionStatus

SUBMITTED_MESSAGE = "Your fallen hero has been laid to rest in The Graveyard."
DUPLICATE_MESSAGE = "This death was already submitted."
RETRY_MESSAGE = "Could not save your death right now. Please try again."


def user_message(outcome: SubmissionResult | Exception) -> str:
    """Text shown to the uploader for a result or a raised error."""
    if isinstance(outcome, SubmissionResult):
        if outcome.status is SubmissionStatus.DUPLICATE:
            return DUPLICATE_MESSAGE
        return SUBMITTED_MESSAGE
    if isinstance(outcome, DuplicateSubmissionError):
        return DUPLICATE_MESSAGE
    if isinstance(outcome, PersistenceError):
        return RETRY_MESSAGE
    if isinstance(outcome, DocumentValidationError):
        return str(outcome)
    if isinstance(outcome, (ExtractionError, BusinessRuleError)):
        return f"Validation Error: {outcome}"
    if isinstance(outcome, IngestionError):
        return f"Could not read save file: {outcome}"
    return "Unexpected error while submitting your death."
