"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: RFC 2397 (data URLs), RFC 2045 (MIME tokens), RFC 2396 (URI escaping)

Usage:
    from incrusta.charsets import TOKEN_CHARS

    if char in TOKEN_CHARS:  # O(1) lookup
        ...
"""

import string

ALPHANUMERIC: frozenset[str] = frozenset(string.ascii_letters + string.digits)

# Characters allowed in media type, subtype and parameter attribute tokens
TOKEN_CHARS: frozenset[str] = ALPHANUMERIC | frozenset("!#$&-^_.+")

# RFC 2396 "mark" characters, never percent-escaped
MARK_CHARS: frozenset[str] = frozenset("-_.!~*'()")

# Unreserved characters pass through escape() unchanged
UNRESERVED_CHARS: frozenset[str] = ALPHANUMERIC | MARK_CHARS

# Marks passed as quote_from_bytes(safe=...); letters, digits and "-_.~" are always safe
ESCAPE_SAFE_MARKS = "!*'()"

# Characters of an unquoted parameter value (escaped form plus token chars)
PARAM_VALUE_CHARS: frozenset[str] = UNRESERVED_CHARS | TOKEN_CHARS | frozenset("%")

# Hex digits for %XX triplets
HEX_DIGITS: frozenset[str] = frozenset(string.hexdigits)

# Printable ASCII allowed inside a quoted parameter value
QUOTED_CHARS: frozenset[str] = frozenset(chr(c) for c in range(0x20, 0x7F)) | frozenset("\t")

# Structural characters
DATA_PREFIX = "data:"
MEDIA_SEP = "/"
PARAM_SEMICOLON = ";"
PARAM_EQUAL = "="
DATA_COMMA = ","
QUOTE = '"'
BACKSLASH = "\\"
BASE64_MARKER = "base64"
