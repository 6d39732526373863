"""Phone number helpers for contact assembly."""

import re
from typing import Any, Mapping

COUNTRY_PREFIX = "234"
PHONE_FIELDS = ("phone", "phone1", "phone2")

_NON_DIGITS = re.compile(r"\D")


def format_whatsapp_number(phone: str) -> str:
    """Normalize a local number into an international WhatsApp number.

    Non‑digits are stripped, a leading trunk ``0`` is replaced by the
    country prefix and the prefix is added when missing::

        >>> format_whatsapp_number("0803 123 4567")
        '2348031234567'
    """
    if not phone:
        return ""
    cleaned = _NON_DIGITS.sub("", phone)
    if cleaned.startswith("0"):
        return COUNTRY_PREFIX + cleaned[1:]
    if not cleaned.startswith(COUNTRY_PREFIX):
        return COUNTRY_PREFIX + cleaned
    return cleaned


def primary_phone(record: Mapping[str, Any]) -> str:
    """Return the first non‑empty of ``phone``, ``phone1`` and ``phone2``."""
    for key in PHONE_FIELDS:
        value = record.get(key)
        if value:
            return str(value)
    return ""
