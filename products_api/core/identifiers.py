import uuid

from products_api.core.exceptions import MalformedIdentifierError

_ACCEPTED_VERSIONS = range(1, 6)


def parse_product_id(value: str) -> uuid.UUID:
    """
    Parse a path identifier as a canonical hyphenated RFC 4122 UUID (versions 1-5).

    Raises MalformedIdentifierError for anything else, including braced, URN
    and unhyphenated spellings that uuid.UUID would otherwise accept.
    """
    try:
        parsed = uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise MalformedIdentifierError(value)

    if str(parsed) != value.lower():
        raise MalformedIdentifierError(value)
    if parsed.variant != uuid.RFC_4122 or parsed.version not in _ACCEPTED_VERSIONS:
        raise MalformedIdentifierError(value)
    return parsed
