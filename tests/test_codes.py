# tests/test_codes.py
from __future__ import annotations

import pytest

from ibkr_flex.domain.codes import (
    AssetCategory,
    BuySell,
    CashTransactionType,
    CorporateActionType,
    DeliveredReceived,
    InOut,
    LevelOfDetail,
    LongShort,
    OpenClose,
    OptionAction,
    OrderType,
    PutCall,
    SecurityIdType,
    SubCategory,
    ToFrom,
    TradeType,
    TransactionCode,
    TransferType,
)

ALL_TABLES = [
    AssetCategory,
    BuySell,
    CashTransactionType,
    CorporateActionType,
    DeliveredReceived,
    InOut,
    LevelOfDetail,
    LongShort,
    OpenClose,
    OptionAction,
    OrderType,
    PutCall,
    SecurityIdType,
    SubCategory,
    ToFrom,
    TradeType,
    TransactionCode,
    TransferType,
]


@pytest.mark.parametrize("table", ALL_TABLES, ids=lambda t: t.__name__)
def test_every_table_has_unknown_fallback(table):
    assert table("definitely-not-a-code") is table.UNKNOWN
    assert table.UNKNOWN.value == "UNKNOWN"


@pytest.mark.parametrize(
    "table, text, expected",
    [
        (AssetCategory, "STK", AssetCategory.STOCK),
        (AssetCategory, "FOP", AssetCategory.FUTURE_OPTION),
        (AssetCategory, "WAR", AssetCategory.WARRANT),
        (BuySell, "SELL (Ca.)", BuySell.CANCEL_SELL),
        (OpenClose, "C;O", OpenClose.CLOSE_OPEN),
        (OrderType, "STP LMT", OrderType.STOP_LIMIT),
        (CashTransactionType, "Withholding Tax", CashTransactionType.WITHHOLDING_TAX),
        (CorporateActionType, "Forward Split", CorporateActionType.FORWARD_SPLIT),
        (TransactionCode, "W", TransactionCode.WASH_SALE),
        (TransactionCode, "Ep", TransactionCode.EXPIRED),
        (LevelOfDetail, "EXECUTION", LevelOfDetail.EXECUTION),
    ],
)
def test_exact_wire_values(table, text, expected):
    assert table(text) is expected


def test_case_insensitive_match():
    assert AssetCategory("opt") is AssetCategory.OPTION
    assert OrderType("lmt") is OrderType.LIMIT
    assert LongShort("LONG") is LongShort.LONG


def test_exact_match_wins_over_case_fold():
    # "Ca" (cancelled) and "CA" are distinct only by case; "C" stays closing
    assert TransactionCode("Ca") is TransactionCode.CANCELLED
    assert TransactionCode("C") is TransactionCode.CLOSING
    assert TransactionCode("Lo") is TransactionCode.DIRECT_LOAN


@pytest.mark.parametrize(
    "table, text, expected",
    [
        (PutCall, "Put", PutCall.PUT),
        (PutCall, "CALL", PutCall.CALL),
        (CashTransactionType, "Deposits & Withdrawals", CashTransactionType.DEPOSITS_WITHDRAWALS),
        (CorporateActionType, "FS", CorporateActionType.FORWARD_SPLIT),
        (CorporateActionType, "TC", CorporateActionType.MERGER),
        (CorporateActionType, "rs", CorporateActionType.REVERSE_SPLIT),
    ],
)
def test_aliases(table, text, expected):
    assert table(text) is expected


def test_codes_compare_as_wire_strings():
    assert AssetCategory.STOCK == "STK"
    assert OptionAction.ASSIGNMENT.value == "Assignment"
    assert TransferType("acats") is TransferType.ACATS
