
import base64
import binascii

_URLSAFE = b"-_"


def b64e(data: bytes) -> str:
    """URL-safe base64 without ``=`` padding"""
    return base64.b64encode(data, altchars=_URLSAFE).rstrip(b"=").decode("ascii")


def b64d(value: str) -> bytes:
    """Strict URL-safe base64 decode; padding may be omitted.

    Characters outside the alphabet raise ``binascii.Error`` instead of being
    skipped.
    """
    try:
        raw = value.encode("ascii")
    except UnicodeEncodeError:
        raise binascii.Error("Non-ASCII character in base64 input") from None
    return base64.b64decode(raw + b"=" * (-len(raw) % 4), altchars=_URLSAFE, validate=True)
