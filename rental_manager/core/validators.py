"""Input shape checks shared by sign-up and registration."""

import re

_PHONE_RE = re.compile(r"[0-9]{10}")
_AADHAR_RE = re.compile(r"[0-9]{12}")
_RESET_CODE_RE = re.compile(r"[0-9]{6}")

MIN_PASSWORD_LENGTH = 6


def is_valid_phone(phone: str) -> bool:
    """Exactly 10 ASCII digits"""
    return bool(_PHONE_RE.fullmatch(phone or ""))


def is_valid_aadhar(aadhar_number: str) -> bool:
    """Exactly 12 ASCII digits"""
    return bool(_AADHAR_RE.fullmatch(aadhar_number or ""))


def is_valid_reset_code(code: str) -> bool:
    return bool(_RESET_CODE_RE.fullmatch(code or ""))


def is_strong_enough(password: str) -> bool:
    return len(password or "") >= MIN_PASSWORD_LENGTH


def all_present(*values) -> bool:
    """True when no value is None or an empty/whitespace-only string"""
    for value in values:
        if value is None:
            return False
        if isinstance(value, str) and not value.strip():
            return False
    return True
