# keypub/validation.py

import base64
import binascii
import unicodedata
import uuid
from typing import Optional

from config import ED25519_KEY_BYTES, MAX_KEY_BYTES, MAX_NOTE_BYTES


class ValidationError(ValueError):
    """A submitted value broke one of the format rules.

    The message is shown to the client as-is, so it names the rule and
    nothing else.
    """


class EmptyKey(ValidationError):
    pass


class InvalidChars(ValidationError):
    pass


class KeyTooLong(ValidationError):
    pass


class NotBase64(ValidationError):
    pass


class WrongKeyLength(ValidationError):
    pass


class NoteTooLong(ValidationError):
    pass


class InvalidId(ValidationError):
    pass


# Unicode White_Space only; str.strip() would also drop \x1c-\x1f
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)


def _is_whitespace_or_control(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch) == "Cc"


def validate_public_key(raw: str) -> str:
    """Check a submitted public key and return it trimmed.

    The key must be a single Base64 token (standard alphabet, padded)
    decoding to an Ed25519-sized key. Only the length is checked, the bytes
    are never interpreted as a curve point. The trimmed text is what gets
    stored, it is not re-encoded.
    """
    key = raw.strip(WHITESPACE)
    if not key:
        raise EmptyKey("public_key must not be empty")

    if any(_is_whitespace_or_control(ch) for ch in key):
        raise InvalidChars("public_key cannot contain whitespace or control characters")

    if len(key.encode("utf-8")) > MAX_KEY_BYTES:
        raise KeyTooLong(f"public_key must be at most {MAX_KEY_BYTES} bytes")

    try:
        decoded = base64.b64decode(key, validate=True)
    except (binascii.Error, ValueError):
        raise NotBase64("public_key must be valid base64")
    # b64decode ignores non-zero trailing bits, reject non-canonical input
    if base64.b64encode(decoded).decode("ascii") != key:
        raise NotBase64("public_key must be valid base64")

    if len(decoded) != ED25519_KEY_BYTES:
        raise WrongKeyLength(
            f"public_key must be base64 of a {ED25519_KEY_BYTES}-byte key (ED25519)"
        )

    return key


def validate_note(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    note = raw.strip(WHITESPACE)
    if not note:
        return None
    if len(note.encode("utf-8")) > MAX_NOTE_BYTES:
        raise NoteTooLong(f"note must be at most {MAX_NOTE_BYTES} bytes")
    return note


def validate_record_id(raw: str) -> uuid.UUID:
    # Path ids go straight into a query, anything that isn't a UUID is refused
    try:
        parsed = uuid.UUID(raw)
    except ValueError:
        raise InvalidId("invalid record id (must be a UUID)")
    # uuid.UUID drops hyphens anywhere, only the standard layouts are accepted
    canonical = str(parsed)
    if raw.lower() not in (canonical, parsed.hex, "{%s}" % canonical, "urn:uuid:" + canonical):
        raise InvalidId("invalid record id (must be a UUID)")
    return parsed
