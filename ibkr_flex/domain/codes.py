# ibkr_flex/domain/codes.py
"""
Closed code tables of the FLEX dialect.

Every table reserves an UNKNOWN member: a value outside the modeled
vocabulary never fails a parse, it decodes to UNKNOWN.
"""

from enum import Enum
from typing import Dict


# Alternate spellings seen across FLEX schema revisions, keyed by table name
# and matched case-insensitively.
_ALIASES: Dict[str, Dict[str, str]] = {
    "PutCall": {
        "put": "P",
        "call": "C",
    },
    "CashTransactionType": {
        "deposits & withdrawals": "Deposits/Withdrawals",
        "withholdingtax": "Withholding Tax",
    },
    "CorporateActionType": {
        "bc": "Bond Conversion",
        "bm": "Bond Maturity",
        "cc": "Contract Consolidation",
        "cd": "Cash Dividend",
        "ch": "Choice Dividend",
        "ci": "Convertible Issue",
        "co": "Contract Spinoff",
        "cp": "Coupon Payment",
        "cs": "Contract Split",
        "ct": "CFD Termination",
        "di": "Dividend Rights Issue",
        "dl": "Delisted",
        "dw": "Delist (Worthless)",
        "ed": "Expired Dividend Right",
        "fa": "Fee Allocation",
        "fi": "Forward Split (Issue)",
        "fs": "Forward Split",
        "gv": "Generic Voluntary",
        "hd": "Choice Dividend (Delivery)",
        "hi": "Choice Dividend (Issue)",
        "ic": "Issue Change",
        "or": "Asset Purchase",
        "pi": "Purchase (Issue)",
        "pv": "Proxy Vote",
        "ri": "Rights Issue",
        "rs": "Reverse Split",
        "sd": "Stock Dividend",
        "so": "Spinoff",
        "sr": "Subscribe Rights",
        "tc": "Merger",
        "ti": "Tender (Issue)",
        "to": "Tender",
    },
}


class FlexCode(str, Enum):
    """Base for FLEX code tables.

    Lookup order: exact value, case-insensitive value, known alias, UNKNOWN.
    """

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return cls.UNKNOWN
        folded = value.strip().casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member
        alias = _ALIASES.get(cls.__name__, {}).get(folded)
        if alias is not None:
            return cls(alias)
        return cls.UNKNOWN


class AssetCategory(FlexCode):
    STOCK = "STK"
    OPTION = "OPT"
    FUTURE = "FUT"
    FUTURE_OPTION = "FOP"
    CASH = "CASH"
    BOND = "BOND"
    BILL = "BILL"
    COMMODITY = "CMDTY"
    CFD = "CFD"
    FOREX_CFD = "FXCFD"
    WARRANT = "WAR"
    FUND = "FUND"
    STRUCTURED_PRODUCT = "IOPT"
    BAG = "BAG"
    CRYPTOCURRENCY = "CRYPTO"
    METAL = "METAL"
    EXCHANGE_FOR_PHYSICAL = "EFP"
    EVENT_CONTRACT = "EC"
    INDEX = "IND"
    UNKNOWN = "UNKNOWN"


class BuySell(FlexCode):
    BUY = "BUY"
    SELL = "SELL"
    CANCEL_BUY = "BUY (Ca.)"
    CANCEL_SELL = "SELL (Ca.)"
    UNKNOWN = "UNKNOWN"


class OpenClose(FlexCode):
    OPEN = "O"
    CLOSE = "C"
    CLOSE_OPEN = "C;O"
    UNKNOWN = "UNKNOWN"


class OrderType(FlexCode):
    MARKET = "MKT"
    LIMIT = "LMT"
    STOP = "STP"
    STOP_LIMIT = "STP LMT"
    MARKET_ON_CLOSE = "MOC"
    LIMIT_ON_CLOSE = "LOC"
    MARKET_IF_TOUCHED = "MIT"
    LIMIT_IF_TOUCHED = "LIT"
    TRAILING_STOP = "TRAIL"
    TRAILING_LIMIT = "TRAIL LMT"
    MID_PRICE = "MIDPX"
    RELATIVE = "REL"
    MULTIPLE = "MULTIPLE"
    UNKNOWN = "UNKNOWN"


class PutCall(FlexCode):
    PUT = "P"
    CALL = "C"
    UNKNOWN = "UNKNOWN"


class LongShort(FlexCode):
    LONG = "Long"
    SHORT = "Short"
    UNKNOWN = "UNKNOWN"


class TradeType(FlexCode):
    """``transactionType`` of a Trade."""
    EXCH_TRADE = "ExchTrade"
    BOOK_TRADE = "BookTrade"
    DVP_TRADE = "DvpTrade"
    FRAC_SHARE = "FracShare"
    FRAC_SHARE_CANCEL = "FracShareCancel"
    ADJUSTMENT = "Adjustment"
    TRADE_CORRECT = "TradeCorrect"
    TRADE_CANCEL = "TradeCancel"
    IBKR_TRADE = "IBKRTrade"
    UNKNOWN = "UNKNOWN"


class CashTransactionType(FlexCode):
    DEPOSITS_WITHDRAWALS = "Deposits/Withdrawals"
    DIVIDENDS = "Dividends"
    WITHHOLDING_TAX = "Withholding Tax"
    BROKER_INTEREST_PAID = "Broker Interest Paid"
    BROKER_INTEREST_RECEIVED = "Broker Interest Received"
    BOND_INTEREST_RECEIVED = "Bond Interest Received"
    BOND_INTEREST_PAID = "Bond Interest Paid"
    BOND_INTEREST = "Bond Interest"
    PAYMENT_IN_LIEU_OF_DIVIDENDS = "Payment In Lieu Of Dividends"
    OTHER_FEES = "Other Fees"
    COMMISSION_ADJUSTMENTS = "Commission Adjustments"
    ADVISOR_FEES = "Advisor Fees"
    CASH_RECEIPTS = "Cash Receipts"
    PRICE_ADJUSTMENTS = "Price Adjustments"
    FEES = "Fees"
    UNKNOWN = "UNKNOWN"


class CorporateActionType(FlexCode):
    """Reorganization kind (``type`` of a CorporateAction)."""
    STOCK_SPLIT = "Stock Split"
    FORWARD_SPLIT_ISSUE = "Forward Split (Issue)"
    FORWARD_SPLIT = "Forward Split"
    REVERSE_SPLIT = "Reverse Split"
    MERGER = "Merger"
    SPINOFF = "Spinoff"
    CONTRACT_SPINOFF = "Contract Spinoff"
    STOCK_DIVIDEND = "Stock Dividend"
    CASH_DIVIDEND = "Cash Dividend"
    CHOICE_DIVIDEND = "Choice Dividend"
    CHOICE_DIV_DELIVERY = "Choice Dividend (Delivery)"
    CHOICE_DIV_ISSUE = "Choice Dividend (Issue)"
    DIV_RIGHTS_ISSUE = "Dividend Rights Issue"
    EXPIRED_DIV_RIGHT = "Expired Dividend Right"
    DELISTED = "Delisted"
    DELIST_WORTHLESS = "Delist (Worthless)"
    NAME_CHANGE = "Name Change"
    SYMBOL_CHANGE = "Symbol Change"
    ISSUE_CHANGE = "Issue Change"
    BOND_CONVERSION = "Bond Conversion"
    BOND_MATURITY = "Bond Maturity"
    TBILL_MATURITY = "T-Bill Maturity"
    CONVERTIBLE_ISSUE = "Convertible Issue"
    COUPON_PAYMENT = "Coupon Payment"
    CONTRACT_CONSOLIDATION = "Contract Consolidation"
    CONTRACT_SPLIT = "Contract Split"
    CFD_TERMINATION = "CFD Termination"
    FEE_ALLOCATION = "Fee Allocation"
    RIGHTS_ISSUE = "Rights Issue"
    SUBSCRIBE_RIGHTS = "Subscribe Rights"
    TENDER = "Tender"
    TENDER_ISSUE = "Tender (Issue)"
    PROXY_VOTE = "Proxy Vote"
    GENERIC_VOLUNTARY = "Generic Voluntary"
    ASSET_PURCHASE = "Asset Purchase"
    PURCHASE_ISSUE = "Purchase (Issue)"
    UNKNOWN = "UNKNOWN"


class OptionAction(FlexCode):
    """Option exercise/assignment/expiration event kind."""
    ASSIGNMENT = "Assignment"
    EXERCISE = "Exercise"
    EXPIRATION = "Expiration"
    EXPIRE = "Expire"
    CASH_SETTLEMENT = "Cash Settlement"
    BUY = "Buy"
    SELL = "Sell"
    UNKNOWN = "UNKNOWN"


class TransferType(FlexCode):
    ACATS = "ACATS"
    ATON = "ATON"
    FOP = "FOP"
    INTERNAL = "INTERNAL"
    DVP = "DVP"
    DRS = "DRS"
    UNKNOWN = "UNKNOWN"


class TransactionCode(FlexCode):
    """Note codes of the ``notes`` attribute.

    Codes combine freely (``"C;W"`` is a closing trade that is also a wash
    sale), so the attribute decodes to a tuple of these.
    """
    ASSIGNMENT = "A"
    ADR_FEE_ACCRUAL = "ADR"
    AUTO_EXERCISE = "AEx"
    ADJUSTMENT = "Adj"
    ALLOCATION = "Al"
    AWAY_TRADE = "Aw"
    BUY_IN = "B"
    DIRECT_BORROW = "Bo"
    CLOSING = "C"
    CASH_DELIVERY = "CD"
    COMPLEX_POSITION = "CP"
    CANCELLED = "Ca"
    CORRECTED = "Co"
    CROSSING = "Cx"
    ETF_CREATION_REDEMPTION = "ETF"
    EXPIRED = "Ep"
    EXERCISE = "Ex"
    GUARANTEED = "G"
    HIGHEST_COST = "HC"
    HEDGE_FUND_INVESTMENT = "HFI"
    HEDGE_FUND_REDEMPTION = "HFR"
    INTERNAL_TRANSFER = "I"
    AFFILIATE = "IA"
    INVESTOR = "INV"
    MARGIN_LIQUIDATION = "L"
    LOSS_DISALLOWED = "LD"
    LIFO = "LI"
    LONG_TERM = "LT"
    DIRECT_LOAN = "Lo"
    MANUAL_ENTRY = "M"
    MANUAL_EXERCISE = "MEx"
    MAX_LOSSES = "ML"
    MAX_LONG_TERM_GAIN = "MLG"
    MAX_LONG_TERM_LOSS = "MLL"
    MAX_SHORT_TERM_GAIN = "MSG"
    MAX_SHORT_TERM_LOSS = "MSL"
    OPENING = "O"
    PARTIAL = "P"
    PRICE_IMPROVEMENT = "PI"
    ACCRUAL_POSTING = "Po"
    PRINCIPAL = "Pr"
    REINVESTMENT = "R"
    REDEMPTION = "RED"
    ACCRUAL_REVERSAL = "Re"
    REIMBURSEMENT = "Ri"
    SOLICITED_IB = "SI"
    SPECIFIC_LOT = "SL"
    SOLICITED_OTHER = "SO"
    SHORT_SALE = "SS"
    SHORT_TERM = "ST"
    POSITIVE_YIELD = "SY"
    TRANSFER = "T"
    WASH_SALE = "W"
    UNKNOWN = "UNKNOWN"


class ToFrom(FlexCode):
    TO = "To"
    FROM = "From"
    UNKNOWN = "UNKNOWN"


class InOut(FlexCode):
    IN = "IN"
    OUT = "OUT"
    UNKNOWN = "UNKNOWN"


class DeliveredReceived(FlexCode):
    DELIVERED = "Delivered"
    RECEIVED = "Received"
    UNKNOWN = "UNKNOWN"


class LevelOfDetail(FlexCode):
    SUMMARY = "SUMMARY"
    DETAIL = "DETAIL"
    EXECUTION = "EXECUTION"
    ORDER = "ORDER"
    LOT = "LOT"
    CLOSED_LOT = "CLOSED_LOT"
    SYMBOL_SUMMARY = "SYMBOL_SUMMARY"
    ASSET_SUMMARY = "ASSET_SUMMARY"
    WASH_SALE = "WASH_SALE"
    UNKNOWN = "UNKNOWN"


class SecurityIdType(FlexCode):
    CUSIP = "CUSIP"
    ISIN = "ISIN"
    FIGI = "FIGI"
    SEDOL = "SEDOL"
    UNKNOWN = "UNKNOWN"


class SubCategory(FlexCode):
    ETF = "ETF"
    ADR = "ADR"
    REIT = "REIT"
    PREFERRED = "Preferred"
    COMMON = "Common"
    DEPOSITARY_RECEIPT = "DR"
    GDR = "GDR"
    LIMITED_PARTNERSHIP = "LP"
    MASTER_LIMITED_PARTNERSHIP = "MLP"
    RIGHT = "Right"
    UNIT = "Unit"
    WHEN_ISSUED = "WI"
    TRACKING = "Tracking"
    CLOSED_END_FUND = "CEF"
    UNKNOWN = "UNKNOWN"


class StatementType(Enum):
    """Shape selected by the root element."""
    ACTIVITY = "activity"
    TRADE_CONFIRMATION = "trade_confirmation"


class FlexSchemaVersion(Enum):
    V3 = "3"
    UNKNOWN = "unknown"
