"""Encode an integer key or decode an identifier from the command line.

Usage:
    uv run python -m scripts.prefixed_id encode <entity_type> <key>
    uv run python -m scripts.prefixed_id decode <entity_type> <identifier>

Prefixes come from ENTITY_PREFIXES (environment or .env). Decoding also
accepts bare bodies and legacy integer keys.
"""

import sys

from prefixed_ids.application.services.prefix_registry import PrefixRegistry
from prefixed_ids.application.services.resolver import PrefixedIdResolver
from prefixed_ids.core.config import get_settings
from prefixed_ids.core.lifespan import register_configured_prefixes
from prefixed_ids.domain.exceptions import PrefixedIdException

_USAGE = "Usage: uv run python -m scripts.prefixed_id encode|decode <entity_type> <value>"


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3 or args[0] not in ("encode", "decode"):
        print(_USAGE, file=sys.stderr)
        return 1
    command, entity_type, value = args

    registry = PrefixRegistry()
    register_configured_prefixes(registry, get_settings())
    resolver = PrefixedIdResolver(entity_type, registry=registry)

    try:
        if command == "encode":
            if not value.isascii() or not value.isdigit():
                print(f"Key must be a non-negative integer: {value}", file=sys.stderr)
                return 1
            print(resolver.prefixed_id(int(value)))
        else:
            print(resolver.resolve_or_fail(value))
    except PrefixedIdException as e:
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
