"""Application layer: codec, registry, parser, resolver, and resolution strategies."""
