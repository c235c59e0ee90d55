"""Well-known alphabets.

Symbols are listed in ascending order of their own character codes wherever
that is possible, so that encoded strings sort the same way as the UUIDs
they encode.
"""

BINARY = "01"
OCTAL = "01234567"
HEX = "0123456789abcdef"

# Douglas Crockford's base32: no I, L, O or U
CROCKFORD_BASE32 = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

# "Short uuid" alphabet: base58 minus the digit 1
BASE57 = "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# Bitcoin base58: no 0, O, I or l
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# URL-safe base64 digits in RFC 4648 order (not sort-preserving)
BASE64URL = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

BUILTIN_ALPHABETS: dict[str, str] = {
    "binary": BINARY,
    "octal": OCTAL,
    "hex": HEX,
    "crockford32": CROCKFORD_BASE32,
    "base36": BASE36,
    "base57": BASE57,
    "base58": BASE58,
    "base62": BASE62,
    "base64url": BASE64URL,
}
