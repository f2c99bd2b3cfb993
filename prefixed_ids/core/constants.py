"""Core constants: identifier format and codec defaults.

Changing DIGIT_ALPHABET or DEFAULT_MIN_LENGTH after identifiers have been
issued breaks every previously issued identifier.
"""

# Separator between prefix and encoded body ("prod_<body>")
PREFIX_SEPARATOR = "_"

# Codec defaults: digits only, so encoded bodies are numeric
DIGIT_ALPHABET = "0123456789"
DEFAULT_MIN_LENGTH = 12

# Sqids refuses a minimum length above this
MAX_MIN_LENGTH = 255

# Prefix token limits
PREFIX_MAX_LENGTH = 16
