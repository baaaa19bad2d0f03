"""Percent-encoding compatible with the legacy ECMAScript ``encodeURI``."""

from urllib.parse import quote

# Reserved and mark characters ``encodeURI`` leaves literal. ``quote`` already
# keeps ASCII alphanumerics and ``-_.~``.
ENCODE_URI_SAFE = ";,/?:@&=+$!*'()#"


def encode_uri(text: str) -> str:
    """
    Percent-encode text exactly like ``encodeURI``.

    Characters are encoded as UTF-8 with upper-case hex digits. Reserved URI
    characters stay literal, so ``"a b&c"`` becomes ``"a%20b&c"``, while ``%``
    itself is always escaped.

    Args:
        text: String to encode

    Returns:
        Encoded string

    Raises:
        UnicodeEncodeError: If text contains a lone surrogate
    """
    return quote(text, safe=ENCODE_URI_SAFE, encoding="utf-8", errors="strict")
