"""Deduplication fingerprint for a submission.

The digest covers the submitter id and the original, unparsed save text. Two
files with the same content but different whitespace or key order therefore
produce different fingerprints; only a byte-identical re-upload by the same
submitter collides. The persistence layer's unique constraint on this value
is the authoritative duplicate check.
"""

import hashlib

FINGERPRINT_LENGTH = 64


def compute_fingerprint(submitter_id: str, raw_text: str) -> str:
    """Lowercase hex SHA-256 of ``"{submitter_id}|{raw_text}"`` (UTF-8)."""
    material = f"{submitter_id}|{raw_text}".encode("utf-8")
    return hashlib.sha256(material).hexdigest()
