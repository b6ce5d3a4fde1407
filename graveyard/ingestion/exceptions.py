class IngestionError(Exception):
    """Base exception for everything raised while turning a save into a death record."""

    code: str = "INGESTION_ERROR"


class DocumentValidationError(IngestionError):
    """The document is not an admissible hardcore-death submission at all."""


class SaveParseError(DocumentValidationError):
    """Raised when the raw save text cannot be turned into a document."""

    code = "INVALID_JSON"


class InvalidJsonError(SaveParseError):
    """Raised when the raw text is not well-formed JSON."""


class ScientificNotationError(SaveParseError):
    """Raised when the raw text contains a number in exponent form."""

    code = "SCIENTIFIC_NOTATION"


class InvalidStructureError(DocumentValidationError):
    """Raised when the document is not an object or has no run history."""

    code = "INVALID_STRUCTURE"


class NotHardcoreError(DocumentValidationError):
    """Raised when the save was not played in hardcore mode."""

    code = "NOT_HARDCORE"


class NoDeathError(DocumentValidationError):
    """Raised when the save does not record exactly one death."""

    code = "NO_DEATH"


class ExtractionError(IngestionError):
    """The document passed validation but lacks data needed for the record."""


class MissingFieldError(ExtractionError):
    """Raised when a required field is absent or not numeric."""

    code = "MISSING_FIELD"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field '{field}'")


class NoDamageHistoryError(ExtractionError):
    """Raised when the fatal run has no damage instances."""

    code = "NO_DAMAGE_HISTORY"

    def __init__(self) -> None:
        super().__init__("No damage history found in the final run")


class BusinessRuleError(IngestionError):
    """Raised when an extracted payload violates a configured sanity rule."""

    code = "BUSINESS_RULE"

    def __init__(self, rule: str, message: str) -> None:
        self.rule = rule
        super().__init__(message)


class UnknownFieldPolicyError(IngestionError):
    """Raised when the configured field-policy version does not exist."""

    code = "UNKNOWN_FIELD_POLICY"
