# tests/test_decoders.py
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import date, datetime
from decimal import Decimal

import pytest
import pytz

from ibkr_flex.domain.codes import AssetCategory, TransactionCode
from ibkr_flex.io.decoders import (
    AttributeReader,
    decode_boolean,
    decode_code,
    decode_code_list,
    decode_date,
    decode_decimal,
    decode_optional_date,
    decode_optional_decimal,
    decode_text,
    decode_timestamp,
)
from ibkr_flex.io.errors import FlexParseError, InvalidValueError, MissingFieldError


@pytest.mark.parametrize(
    "iso, compact",
    [
        ("2025-01-15", "20250115"),
        ("2024-02-29", "20240229"),
        ("1999-12-31", "19991231"),
    ],
)
def test_decode_date_is_form_agnostic(iso, compact):
    assert decode_date(iso) == decode_date(compact)
    assert decode_date(iso) == date.fromisoformat(iso)


@pytest.mark.parametrize("text", ["2025/01/15", "15-01-2025", "2025115", "202501150", "2025-13-01", "20250230", ""])
def test_decode_date_rejects_other_forms(text):
    with pytest.raises(InvalidValueError):
        decode_date(text)


def test_optional_date_empty_and_absent_are_no_value():
    assert decode_optional_date("") is None
    assert decode_optional_date(None) is None
    assert decode_optional_date("  ") is None
    assert decode_optional_date("20250115") == date(2025, 1, 15)


@pytest.mark.parametrize(
    "text",
    ["123456789.987654321", "-0.000001", "185.50", "100", "-18551.00", "0.123456789012345678"],
)
def test_decode_decimal_is_exact(text):
    value = decode_decimal(text)
    assert isinstance(value, Decimal)
    assert str(value) == text


@pytest.mark.parametrize("text", ["abc", "1,000.00", "NaN", "Infinity", "1_000", ""])
def test_decode_decimal_rejects_non_numbers(text):
    with pytest.raises(InvalidValueError):
        decode_decimal(text)


def test_optional_decimal_empty_and_absent_are_no_value():
    assert decode_optional_decimal("") is None
    assert decode_optional_decimal(None) is None
    assert decode_optional_decimal("-1.00") == Decimal("-1.00")


@pytest.mark.parametrize(
    "text, expected",
    [("Y", True), ("y", True), ("N", False), ("n", False), ("", None), (None, None)],
)
def test_decode_boolean_accepted_tokens(text, expected):
    assert decode_boolean(text) is expected


@pytest.mark.parametrize("text", ["X", "Yes", "true", "1", "0", " Y"])
def test_decode_boolean_is_strict(text):
    with pytest.raises(InvalidValueError):
        decode_boolean(text)


def test_decode_text_strips_and_maps_empty_to_none():
    assert decode_text("  AAPL ") == "AAPL"
    assert decode_text("") is None
    assert decode_text(None) is None


def test_code_list_keeps_order_and_multiplicity():
    assert decode_code_list("C;W;C", TransactionCode) == (
        TransactionCode.CLOSING,
        TransactionCode.WASH_SALE,
        TransactionCode.CLOSING,
    )
    assert decode_code_list("", TransactionCode) == ()
    assert decode_code_list(None, TransactionCode) == ()


def test_code_list_unknown_token_is_a_warning_not_an_error(caplog):
    with caplog.at_level(logging.WARNING, logger="ibkr_flex"):
        codes = decode_code_list("C;ZZTOP", TransactionCode)
    assert codes == (TransactionCode.CLOSING, TransactionCode.UNKNOWN)
    assert "ZZTOP" in caplog.text


def test_decode_code_single_value():
    assert decode_code("OPT", AssetCategory) is AssetCategory.OPTION
    assert decode_code("stk", AssetCategory) is AssetCategory.STOCK
    assert decode_code("", AssetCategory) is None
    assert decode_code("SPACESHIP", AssetCategory) is AssetCategory.UNKNOWN


def test_decode_timestamp_to_utc():
    ts = decode_timestamp("2025-01-15;093015")
    assert ts == datetime(2025, 1, 15, 14, 30, 15, tzinfo=pytz.UTC)
    assert ts.tzinfo == pytz.UTC


def test_decode_timestamp_respects_dst():
    # EDT is UTC-4
    assert decode_timestamp("20250715;093000").hour == 13
    assert decode_timestamp("2025-07-15 09:30:00", "UTC").hour == 9


@pytest.mark.parametrize(
    "text",
    [
        "2025-01-15;093015",
        "2025-01-15;09:30:15",
        "20250115;093015",
        "20250115;09:30:15",
        "20250115,093015",
        "2025-01-15,09:30:15",
        "2025-01-15, 09:30:15",
        "2025-01-15 093015",
        "20250115 09:30:15",
    ],
)
def test_decode_timestamp_accepts_every_date_time_pairing(text):
    assert decode_timestamp(text, "UTC") == datetime(2025, 1, 15, 9, 30, 15, tzinfo=pytz.UTC)


def test_decode_timestamp_rejects_garbage():
    with pytest.raises(InvalidValueError):
        decode_timestamp("yesterday")


def _reader(**attrs) -> AttributeReader:
    return AttributeReader(ET.Element("Trade", attrs))


def test_attribute_reader_optional_fields():
    a = _reader(quantity="", tradeDate="", symbol="")
    assert a.decimal("quantity") is None
    assert a.decimal("missing") is None
    assert a.date("tradeDate") is None
    assert a.text("symbol") is None
    assert a.boolean("isAPIOrder") is None
    assert a.codes("notes", TransactionCode) == ()


def test_attribute_reader_fallback_attributes():
    a = _reader(price="150.50", tradeTime="2025-01-15;093015")
    assert a.decimal("tradePrice", "price") == Decimal("150.50")
    assert a.text("dateTime", "tradeTime") == "2025-01-15;093015"


def test_attribute_reader_required_text_allows_blank_but_not_absent():
    a = _reader(symbol="")
    assert a.required_text("symbol") == ""
    with pytest.raises(MissingFieldError) as exc:
        a.required_text("accountId")
    assert exc.value.field == "accountId"
    assert exc.value.context == "Trade"


def test_attribute_reader_required_decimal_rejects_empty():
    with pytest.raises(MissingFieldError):
        _reader(quantity="").required_decimal("quantity")


def test_attribute_reader_errors_carry_attribute_and_tag():
    with pytest.raises(InvalidValueError) as exc:
        _reader(tradeDate="15/01/2025").date("tradeDate")
    err = exc.value
    assert err.field == "tradeDate"
    assert err.context == "Trade"
    assert err.value == "15/01/2025"
    assert isinstance(err, FlexParseError)
    assert isinstance(err, ValueError)
    assert "Trade@tradeDate" in str(err)
