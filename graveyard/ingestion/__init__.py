from graveyard.ingestion.assembler import assemble_death_payload, extract_death_payload
from graveyard.ingestion.fingerprint import compute_fingerprint
from graveyard.ingestion.models import ExtractedDeathPayload
from graveyard.ingestion.parser import parse_save_text
from graveyard.ingestion.validator import validate_save_document

__all__ = [
    "ExtractedDeathPayload",
    "assemble_death_payload",
    "compute_fingerprint",
    "extract_death_payload",
    "parse_save_text",
    "validate_save_document",
]
