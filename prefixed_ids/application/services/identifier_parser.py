"""Split external identifiers ("prod_<body>" or bare "<body>") into prefix and body."""

from prefixed_ids.core.constants import PREFIX_SEPARATOR
from prefixed_ids.domain.value_objects import ParsedIdentifier


def parse_identifier(raw: str | int | None) -> ParsedIdentifier | None:
    """Parse raw into prefix and body, splitting on the first separator.

    Empty segments are kept ("_abc" has prefix "", "abc_" has body "");
    they simply fail to decode later. Ints are accepted as their decimal
    string for callers that still pass raw keys.

    Returns:
        ParsedIdentifier, or None for None, empty, or whitespace-only input.
    """
    if raw is None:
        return None
    text = str(raw)
    if not text.strip():
        return None
    prefix, sep, body = text.partition(PREFIX_SEPARATOR)
    if not sep:
        return ParsedIdentifier(prefix=None, body=text)
    return ParsedIdentifier(prefix=prefix, body=body)
