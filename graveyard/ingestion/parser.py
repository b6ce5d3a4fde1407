import json
import re
from typing import Any

from graveyard.ingestion.exceptions import InvalidJsonError, ScientificNotationError

# Digit, exponent marker, optional sign, digit: 1e5, 1.2E-3.
# Scanned on the raw text, so string values are matched too.
_SCIENTIFIC_NOTATION = re.compile(r"[0-9][eE][+-]?[0-9]")


def _reject_constant(name: str) -> Any:
    raise InvalidJsonError(f"Non-finite number '{name}' is not allowed")


def parse_save_text(raw_text: str, *, reject_scientific_notation: bool = True) -> Any:
    """Parse raw save text into a generic JSON document.

    Raises:
        ScientificNotationError: if hardening is on and the text contains an
            exponent-form number.
        InvalidJsonError: if the text is not well-formed JSON, is nested too
            deeply to decode, or contains NaN/Infinity.
    """
    if reject_scientific_notation and _SCIENTIFIC_NOTATION.search(raw_text):
        raise ScientificNotationError(
            "Scientific notation is not allowed. Please use standard numbers."
        )
    try:
        return json.loads(raw_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(f"Invalid JSON: {exc.msg} at line {exc.lineno}") from exc
    except RecursionError as exc:
        raise InvalidJsonError("Invalid JSON: nesting too deep") from exc
