"""
Login credential checks and the signed identity record kept in storage.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

import jwt

from telehealth.config import SECRET_KEY, OTP_LENGTH, MIN_PHONE_LENGTH, ROLES
from telehealth.models import Identity

_OTP_RE = re.compile(rf"[0-9]{{{OTP_LENGTH}}}")


def is_valid_code(code: Any) -> bool:
    """Simulated OTP check: any string of exactly OTP_LENGTH ASCII digits."""
    return isinstance(code, str) and _OTP_RE.fullmatch(code) is not None


def is_valid_phone(phone: Any) -> bool:
    """The login form only asks for a phone number of plausible length."""
    return isinstance(phone, str) and len(phone.strip()) >= MIN_PHONE_LENGTH


def encode_identity(identity: Identity, secret: str = SECRET_KEY) -> str:
    """Serialise an Identity into a signed record."""
    payload = identity.to_dict()
    payload["iat"] = datetime.now(timezone.utc)
    return jwt.encode(payload, secret, algorithm="HS256")


def decode_identity(record: Optional[str], secret: str = SECRET_KEY) -> Optional[Identity]:
    """Verify a stored record and rebuild the Identity (or None if unusable)."""
    if not record:
        return None
    try:
        payload = jwt.decode(record, secret, algorithms=["HS256"])
    except jwt.InvalidTokenError:
        return None

    try:
        identity = Identity(
            id=str(payload["id"]),
            display_name=str(payload["display_name"]),
            role=str(payload["role"]),
            contact_handle=payload.get("contact_handle"),
            email=payload.get("email"),
            avatar=payload.get("avatar"),
        )
    except KeyError:
        return None

    if identity.role not in ROLES:
        return None
    return identity
