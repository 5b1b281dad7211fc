# ibkr_flex/io/decoders.py
"""
Primitive decoders for FLEX attribute text.

Dialect quirks handled here:
- dates come as YYYY-MM-DD or YYYYMMDD
- an empty attribute means "no value", same as an omitted one
- booleans are Y/N
- multi-valued codes are ';'-separated
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple, Type, TypeVar

import pytz

from ibkr_flex import config
from ibkr_flex.domain.codes import FlexCode
from ibkr_flex.io.errors import InvalidValueError, MissingFieldError
from ibkr_flex.logging_setup import get_logger

logger = get_logger(__name__)

C = TypeVar("C", bound=FlexCode)

DATE_FORMATS = [
    (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d"),
    (re.compile(r"^\d{8}$"), "%Y%m%d"),
]

# Brokerage timestamp formats ("2025-01-15;093015" is the FLEX default).
# Every date form pairs with every separator and time form.
TIMESTAMP_FORMATS = [
    f"{day}{sep}{clock}"
    for day in ("%Y-%m-%d", "%Y%m%d")
    for sep in (";", ",", ", ", " ")
    for clock in ("%H%M%S", "%H:%M:%S")
]

CODE_SEPARATOR = ";"


def decode_text(text: Optional[str]) -> Optional[str]:
    """Strip text; empty or absent means no value."""
    if text is None:
        return None
    text = text.strip()
    return text or None


def decode_date(text: str) -> date:
    """Decode a date in ISO form first, then the 8-digit compact form."""
    raw = (text or "").strip()
    for pattern, fmt in DATE_FORMATS:
        if not pattern.match(raw):
            continue
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            break
    raise InvalidValueError(None, text, "expected YYYY-MM-DD or YYYYMMDD")


def decode_optional_date(text: Optional[str]) -> Optional[date]:
    raw = decode_text(text)
    return decode_date(raw) if raw is not None else None


def decode_decimal(text: str) -> Decimal:
    """Decode decimal text exactly, never through a float."""
    raw = (text or "").strip()
    if "_" in raw:
        raise InvalidValueError(None, text, "not a decimal number")
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise InvalidValueError(None, text, "not a decimal number") from None
    if not value.is_finite():
        raise InvalidValueError(None, text, "not a finite decimal number")
    return value


def decode_optional_decimal(text: Optional[str]) -> Optional[Decimal]:
    raw = decode_text(text)
    return decode_decimal(raw) if raw is not None else None


def decode_boolean(text: Optional[str]) -> Optional[bool]:
    """Strict Y/N decoding; anything but Y, y, N, n or empty is an error."""
    if text is None or text == "":
        return None
    if text in ("Y", "y"):
        return True
    if text in ("N", "n"):
        return False
    raise InvalidValueError(None, text, "expected Y or N")


def decode_code(text: Optional[str], table: Type[C]) -> Optional[C]:
    """Map one token through a code table; unknown tokens become UNKNOWN."""
    raw = decode_text(text)
    if raw is None:
        return None
    code = table(raw)
    if code is table.UNKNOWN and raw.casefold() != table.UNKNOWN.value.casefold():
        logger.warning("Unknown %s code %r, decoded as UNKNOWN", table.__name__, raw)
    return code


def decode_code_list(text: Optional[str], table: Type[C]) -> Tuple[C, ...]:
    """Split a ';'-delimited code string, keeping order and multiplicity."""
    raw = decode_text(text)
    if raw is None:
        return ()
    codes: List[C] = []
    for token in raw.split(CODE_SEPARATOR):
        code = decode_code(token, table)
        if code is not None:
            codes.append(code)
    return tuple(codes)


def decode_timestamp(ts_str: str, timezone: Optional[str] = None) -> datetime:
    """
    Parse a brokerage timestamp to an aware UTC datetime.

    Args:
        ts_str: Timestamp string (e.g., "2025-01-15;093015")
        timezone: Zone the wall time is expressed in (default from config)

    Returns:
        datetime in UTC
    """
    raw = (ts_str or "").strip()
    dt_naive = None

    for fmt in TIMESTAMP_FORMATS:
        try:
            dt_naive = datetime.strptime(raw, fmt)
            break
        except ValueError:
            continue

    if dt_naive is None:
        raise InvalidValueError(None, ts_str, "unrecognized timestamp format")

    tz = pytz.timezone(timezone or config.IBKR_TIMEZONE)
    return tz.localize(dt_naive).astimezone(pytz.UTC)


class AttributeReader:
    """Field-by-field access to one record element's attributes.

    Optional readers return None for both an omitted and an empty attribute.
    Required readers raise MissingFieldError; decode failures are re-raised
    with the element tag and attribute name attached.
    """

    def __init__(self, element: ET.Element):
        self.element = element
        self.tag = element.tag

    def raw(self, name: str) -> Optional[str]:
        return self.element.get(name)

    def has(self, name: str) -> bool:
        return name in self.element.attrib

    def _decode(self, name: str, decoder, *args):
        value = self.element.get(name)
        try:
            return decoder(value, *args)
        except InvalidValueError as e:
            raise InvalidValueError(name, e.value, e.reason, self.tag) from None

    def text(self, name: str, *fallbacks: str) -> Optional[str]:
        for attr in (name,) + fallbacks:
            value = decode_text(self.element.get(attr))
            if value is not None:
                return value
        return None

    def required_text(self, name: str) -> str:
        """Mandatory attribute: must be present, may be blank."""
        value = self.element.get(name)
        if value is None:
            raise MissingFieldError(name, self.tag)
        return value.strip()

    def decimal(self, name: str, *fallbacks: str) -> Optional[Decimal]:
        for attr in (name,) + fallbacks:
            value = self._decode(attr, decode_optional_decimal)
            if value is not None:
                return value
        return None

    def required_decimal(self, name: str) -> Decimal:
        value = self.decimal(name)
        if value is None:
            raise MissingFieldError(name, self.tag)
        return value

    def date(self, name: str) -> Optional[date]:
        return self._decode(name, decode_optional_date)

    def required_date(self, name: str) -> date:
        value = self.date(name)
        if value is None:
            raise MissingFieldError(name, self.tag)
        return value

    def boolean(self, name: str) -> Optional[bool]:
        return self._decode(name, decode_boolean)

    def code(self, name: str, table: Type[C]) -> Optional[C]:
        return decode_code(self.element.get(name), table)

    def required_code(self, name: str, table: Type[C]) -> C:
        value = self.code(name, table)
        if value is None:
            raise MissingFieldError(name, self.tag)
        return value

    def codes(self, name: str, table: Type[C]) -> Tuple[C, ...]:
        return decode_code_list(self.element.get(name), table)
