"""
HTTP-facing errors for the products API and formatting of validation failures.
"""

from typing import Any, Dict, Iterable
from fastapi import HTTPException, status

DEFAULT_VALIDATION_MESSAGE = "Validation fails."

# Request sections FastAPI prefixes onto error locations
_LOCATION_SECTIONS = {"body", "query", "path", "header", "cookie"}


class MalformedIdentifierError(HTTPException):
    def __init__(self, value: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid UUID")
        self.value = value


class ProductNotFoundError(HTTPException):
    def __init__(self, product_id):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        self.product_id = product_id


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_SECTIONS:
        parts = parts[1:]
    return ".".join(parts)


def validation_error_message(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Join validator error entries into a single message.

    Each entry renders as "<field>: <message>" ("Field required" for a missing
    body renders on its own). Returns the generic fallback when there is
    nothing to report.
    """
    messages = []
    for error in errors or []:
        msg = str(error.get("msg") or "").strip()
        if not msg:
            continue
        # A JSON decode error's location is a character offset, not a field
        field = "" if error.get("type") == "json_invalid" else _field_name(error.get("loc") or ())
        messages.append(f"{field}: {msg}" if field else msg)

    if not messages:
        return DEFAULT_VALIDATION_MESSAGE
    return ". ".join(messages)
