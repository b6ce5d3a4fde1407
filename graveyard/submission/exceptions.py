class SubmissionError(Exception):
    """Base exception for failures at the persistence boundary."""

    code: str = "SUBMISSION_ERROR"


class DuplicateSubmissionError(SubmissionError):
    """Raised when the fingerprint already exists in the deaths table."""

    code = "DUPLICATE"

    def __init__(self, fingerprint: str) -> None:
        self.fingerprint = fingerprint
        super().__init__(f"Death with fingerprint {fingerprint} was already submitted")


class PersistenceError(SubmissionError):
    """Raised for any other database failure while storing a death."""

    code = "PERSISTENCE_ERROR"
