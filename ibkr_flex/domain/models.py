# ibkr_flex/domain/models.py
"""Typed FLEX records. All values are immutable once built."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Tuple, Union

from ibkr_flex.domain.codes import (
    AssetCategory,
    BuySell,
    CashTransactionType,
    CorporateActionType,
    LevelOfDetail,
    LongShort,
    OpenClose,
    OrderType,
    PutCall,
    SecurityIdType,
    SubCategory,
    TradeType,
    TransactionCode,
)


# ---------------------------------------------------------------------------
# Derivative projection
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OptionInfo:
    strike: Decimal
    expiry: date
    put_call: PutCall
    underlying_symbol: str
    underlying_conid: Optional[str] = None


@dataclass(frozen=True)
class FutureInfo:
    expiry: date
    underlying_symbol: str
    underlying_conid: Optional[str] = None


@dataclass(frozen=True)
class FutureOptionInfo:
    strike: Decimal
    expiry: date
    put_call: PutCall
    underlying_symbol: str
    underlying_conid: Optional[str] = None


@dataclass(frozen=True)
class WarrantInfo:
    """Warrant terms; only the underlying symbol is guaranteed."""
    underlying_symbol: str
    strike: Optional[Decimal] = None
    expiry: Optional[date] = None


DerivativeInfo = Union[OptionInfo, FutureInfo, FutureOptionInfo, WarrantInfo]


def project_derivative(record) -> Optional[DerivativeInfo]:
    """
    Consolidated derivative view of a record with flat derivative fields.

    Returns None unless the asset category is a derivative one AND every
    field that category requires is present. Never fills in defaults.
    """
    category = record.asset_category
    strike = record.strike
    expiry = record.expiry
    put_call = record.put_call
    underlying = record.underlying_symbol

    if category in (AssetCategory.OPTION, AssetCategory.FUTURE_OPTION):
        if strike is None or expiry is None or put_call is None or underlying is None:
            return None
        cls = OptionInfo if category is AssetCategory.OPTION else FutureOptionInfo
        return cls(
            strike=strike,
            expiry=expiry,
            put_call=put_call,
            underlying_symbol=underlying,
            underlying_conid=record.underlying_conid,
        )

    if category is AssetCategory.FUTURE:
        if expiry is None or underlying is None:
            return None
        return FutureInfo(
            expiry=expiry,
            underlying_symbol=underlying,
            underlying_conid=record.underlying_conid,
        )

    if category is AssetCategory.WARRANT:
        if underlying is None:
            return None
        return WarrantInfo(underlying_symbol=underlying, strike=strike, expiry=expiry)

    return None


# ---------------------------------------------------------------------------
# Core records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Trade:
    """One execution (or a wash-sale adjustment sharing the same shape)."""
    # Identification (mandatory)
    account_id: str
    conid: str
    symbol: str
    asset_category: AssetCategory

    transaction_id: Optional[str] = None
    description: Optional[str] = None
    cusip: Optional[str] = None
    isin: Optional[str] = None
    figi: Optional[str] = None
    security_id: Optional[str] = None
    security_id_type: Optional[SecurityIdType] = None
    sub_category: Optional[SubCategory] = None
    listing_exchange: Optional[str] = None
    issuer: Optional[str] = None
    issuer_country_code: Optional[str] = None

    # Derivatives
    multiplier: Optional[Decimal] = None
    strike: Optional[Decimal] = None
    expiry: Optional[date] = None
    put_call: Optional[PutCall] = None
    underlying_conid: Optional[str] = None
    underlying_symbol: Optional[str] = None
    underlying_security_id: Optional[str] = None
    underlying_listing_exchange: Optional[str] = None

    # Execution
    trade_date: Optional[date] = None
    settle_date: Optional[date] = None
    report_date: Optional[date] = None
    date_time: Optional[str] = None
    order_time: Optional[str] = None
    buy_sell: Optional[BuySell] = None
    open_close: Optional[OpenClose] = None
    transaction_type: Optional[TradeType] = None
    order_type: Optional[OrderType] = None
    level_of_detail: Optional[LevelOfDetail] = None
    exchange: Optional[str] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    trade_money: Optional[Decimal] = None
    proceeds: Optional[Decimal] = None
    cost: Optional[Decimal] = None
    close_price: Optional[Decimal] = None
    commission: Optional[Decimal] = None
    commission_currency: Optional[str] = None
    taxes: Optional[Decimal] = None
    net_cash: Optional[Decimal] = None
    accrued_int: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None

    # P&L (as supplied by the brokerage)
    fifo_pnl_realized: Optional[Decimal] = None
    mtm_pnl: Optional[Decimal] = None
    fx_pnl: Optional[Decimal] = None

    # Tax lot
    orig_trade_date: Optional[date] = None
    orig_trade_price: Optional[Decimal] = None
    orig_trade_id: Optional[str] = None
    orig_transaction_id: Optional[str] = None
    orig_order_id: Optional[str] = None
    holding_period_date_time: Optional[str] = None
    open_date_time: Optional[str] = None
    when_realized: Optional[str] = None
    when_reopened: Optional[str] = None
    notes: Tuple[TransactionCode, ...] = ()

    # Order/execution references
    trade_id: Optional[str] = None
    ib_order_id: Optional[str] = None
    exec_id: Optional[str] = None
    ib_exec_id: Optional[str] = None
    brokerage_order_id: Optional[str] = None
    order_reference: Optional[str] = None
    related_trade_id: Optional[str] = None
    related_transaction_id: Optional[str] = None
    is_api_order: Optional[bool] = None
    acct_alias: Optional[str] = None
    model: Optional[str] = None

    def derivative(self) -> Optional[DerivativeInfo]:
        return project_derivative(self)

    @property
    def executed_at_utc(self) -> Optional[datetime]:
        """Execution time in UTC, derived from ``date_time``."""
        if self.date_time is None:
            return None
        from ibkr_flex.io.decoders import decode_timestamp

        return decode_timestamp(self.date_time)

    @property
    def is_wash_sale(self) -> bool:
        return TransactionCode.WASH_SALE in self.notes


@dataclass(frozen=True)
class Position:
    """Open-position snapshot; quantity sign encodes long/short.

    ``position_value`` is taken from the source as-is, never recomputed.
    """
    account_id: str
    conid: str
    symbol: str
    asset_category: AssetCategory
    quantity: Decimal
    mark_price: Decimal
    position_value: Decimal
    report_date: date

    description: Optional[str] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None
    cusip: Optional[str] = None
    isin: Optional[str] = None
    figi: Optional[str] = None
    security_id: Optional[str] = None
    security_id_type: Optional[SecurityIdType] = None
    sub_category: Optional[SubCategory] = None
    listing_exchange: Optional[str] = None
    issuer: Optional[str] = None
    multiplier: Optional[Decimal] = None
    strike: Optional[Decimal] = None
    expiry: Optional[date] = None
    put_call: Optional[PutCall] = None
    underlying_conid: Optional[str] = None
    underlying_symbol: Optional[str] = None
    side: Optional[LongShort] = None
    open_price: Optional[Decimal] = None
    cost_basis_price: Optional[Decimal] = None
    cost_basis_money: Optional[Decimal] = None
    fifo_pnl_unrealized: Optional[Decimal] = None
    percent_of_nav: Optional[Decimal] = None
    accrued_int: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None
    holding_period_date_time: Optional[str] = None
    open_date_time: Optional[str] = None
    originating_transaction_id: Optional[str] = None
    originating_order_id: Optional[str] = None
    code: Tuple[TransactionCode, ...] = ()
    vesting_date: Optional[date] = None
    acct_alias: Optional[str] = None
    model: Optional[str] = None

    def derivative(self) -> Optional[DerivativeInfo]:
        return project_derivative(self)

    @property
    def is_long(self) -> bool:
        return self.quantity > 0

    @property
    def is_short(self) -> bool:
        return self.quantity < 0


@dataclass(frozen=True)
class CashTransaction:
    """Dated cash movement, optionally linked to a security."""
    account_id: str
    amount: Decimal
    currency: str

    transaction_id: Optional[str] = None
    transaction_type: Optional[CashTransactionType] = None
    description: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None
    transaction_date: Optional[date] = None
    date_time: Optional[str] = None
    settle_date: Optional[date] = None
    ex_date: Optional[date] = None
    report_date: Optional[date] = None
    available_for_trading_date: Optional[date] = None
    conid: Optional[str] = None
    symbol: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    cusip: Optional[str] = None
    isin: Optional[str] = None
    figi: Optional[str] = None
    security_id: Optional[str] = None
    security_id_type: Optional[SecurityIdType] = None
    sub_category: Optional[SubCategory] = None
    listing_exchange: Optional[str] = None
    issuer: Optional[str] = None
    multiplier: Optional[Decimal] = None
    strike: Optional[Decimal] = None
    expiry: Optional[date] = None
    put_call: Optional[PutCall] = None
    underlying_conid: Optional[str] = None
    underlying_symbol: Optional[str] = None
    code: Tuple[TransactionCode, ...] = ()
    action_id: Optional[str] = None
    trade_id: Optional[str] = None
    client_reference: Optional[str] = None
    level_of_detail: Optional[LevelOfDetail] = None
    acct_alias: Optional[str] = None
    model: Optional[str] = None


@dataclass(frozen=True)
class CorporateAction:
    """An event altering holdings (split, merger, spinoff, ...)."""
    account_id: str
    conid: str
    symbol: str
    report_date: date

    transaction_id: Optional[str] = None
    action_type: Optional[CorporateActionType] = None
    description: Optional[str] = None
    action_date: Optional[date] = None
    date_time: Optional[str] = None
    ex_date: Optional[date] = None
    pay_date: Optional[date] = None
    record_date: Optional[date] = None
    asset_category: Optional[AssetCategory] = None
    cusip: Optional[str] = None
    isin: Optional[str] = None
    figi: Optional[str] = None
    security_id: Optional[str] = None
    security_id_type: Optional[SecurityIdType] = None
    sub_category: Optional[SubCategory] = None
    listing_exchange: Optional[str] = None
    issuer: Optional[str] = None
    multiplier: Optional[Decimal] = None
    strike: Optional[Decimal] = None
    expiry: Optional[date] = None
    put_call: Optional[PutCall] = None
    underlying_conid: Optional[str] = None
    underlying_symbol: Optional[str] = None
    quantity: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    proceeds: Optional[Decimal] = None
    value: Optional[Decimal] = None
    cost: Optional[Decimal] = None
    fifo_pnl_realized: Optional[Decimal] = None
    mtm_pnl: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None
    code: Tuple[TransactionCode, ...] = ()
    action_id: Optional[str] = None
    level_of_detail: Optional[LevelOfDetail] = None
    acct_alias: Optional[str] = None
    model: Optional[str] = None

    def derivative(self) -> Optional[DerivativeInfo]:
        return project_derivative(self)


@dataclass(frozen=True)
class SecurityInfo:
    """Static reference data for one security."""
    conid: str
    symbol: str
    asset_category: AssetCategory

    description: Optional[str] = None
    security_id: Optional[str] = None
    security_id_type: Optional[SecurityIdType] = None
    cusip: Optional[str] = None
    isin: Optional[str] = None
    figi: Optional[str] = None
    sedol: Optional[str] = None
    currency: Optional[str] = None
    listing_exchange: Optional[str] = None
    issuer: Optional[str] = None
    issuer_country_code: Optional[str] = None
    sub_category: Optional[SubCategory] = None
    multiplier: Optional[Decimal] = None
    strike: Optional[Decimal] = None
    expiry: Optional[date] = None
    put_call: Optional[PutCall] = None
    underlying_conid: Optional[str] = None
    underlying_symbol: Optional[str] = None
    underlying_security_id: Optional[str] = None
    underlying_listing_exchange: Optional[str] = None
    maturity: Optional[date] = None
    principal_adjust_factor: Optional[Decimal] = None
    delivery_month: Optional[str] = None
    code: Tuple[TransactionCode, ...] = ()

    def derivative(self) -> Optional[DerivativeInfo]:
        return project_derivative(self)


@dataclass(frozen=True)
class ConversionRate:
    """Daily FX rate."""
    report_date: date
    from_currency: str
    to_currency: str
    rate: Decimal
