# ibkr_flex/domain/extended.py
"""
Records of the account-level FLEX sections: account details, NAV change,
equity and cash summaries, option exercises, FX conversions, accruals and
position transfers.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple

from ibkr_flex.domain.codes import (
    AssetCategory,
    InOut,
    LevelOfDetail,
    OptionAction,
    PutCall,
    TransactionCode,
    TransferType,
)


@dataclass(frozen=True)
class AccountInformation:
    account_id: str
    account_type: Optional[str] = None
    customer_type: Optional[str] = None
    acct_alias: Optional[str] = None
    currency: Optional[str] = None
    name: Optional[str] = None
    master_name: Optional[str] = None
    date_opened: Optional[date] = None
    date_funded: Optional[date] = None
    date_closed: Optional[date] = None
    primary_email: Optional[str] = None
    street_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    trading_permissions: Optional[str] = None
    ib_entity: Optional[str] = None


@dataclass(frozen=True)
class ChangeInNAV:
    """Net asset value movement over the statement period."""
    account_id: str
    from_date: date
    to_date: date
    starting_value: Decimal
    ending_value: Decimal
    currency: Optional[str] = None
    mtm: Optional[Decimal] = None
    realized: Optional[Decimal] = None
    change_in_unrealized: Optional[Decimal] = None
    deposits_withdrawals: Optional[Decimal] = None
    dividends: Optional[Decimal] = None
    withholding_tax: Optional[Decimal] = None
    change_in_dividend_accruals: Optional[Decimal] = None
    interest: Optional[Decimal] = None
    change_in_interest_accruals: Optional[Decimal] = None
    advisor_fees: Optional[Decimal] = None
    client_fees: Optional[Decimal] = None
    other_fees: Optional[Decimal] = None
    commissions: Optional[Decimal] = None
    fx_translation: Optional[Decimal] = None
    corporate_action_proceeds: Optional[Decimal] = None
    twr: Optional[Decimal] = None


@dataclass(frozen=True)
class EquitySummary:
    """Equity by asset class for one report date, in base currency."""
    account_id: str
    report_date: date
    cash: Optional[Decimal] = None
    cash_long: Optional[Decimal] = None
    cash_short: Optional[Decimal] = None
    stock: Optional[Decimal] = None
    stock_long: Optional[Decimal] = None
    stock_short: Optional[Decimal] = None
    options: Optional[Decimal] = None
    options_long: Optional[Decimal] = None
    options_short: Optional[Decimal] = None
    bonds: Optional[Decimal] = None
    funds: Optional[Decimal] = None
    futures: Optional[Decimal] = None
    commodities: Optional[Decimal] = None
    interest_accruals: Optional[Decimal] = None
    dividend_accruals: Optional[Decimal] = None
    total: Optional[Decimal] = None
    total_long: Optional[Decimal] = None
    total_short: Optional[Decimal] = None


@dataclass(frozen=True)
class CashReportCurrency:
    account_id: str
    currency: str
    starting_cash: Decimal
    ending_cash: Decimal
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    commissions: Optional[Decimal] = None
    deposits: Optional[Decimal] = None
    withdrawals: Optional[Decimal] = None
    dividends: Optional[Decimal] = None
    broker_interest: Optional[Decimal] = None
    bond_interest: Optional[Decimal] = None
    withholding_tax: Optional[Decimal] = None
    net_trades_sales: Optional[Decimal] = None
    net_trades_purchases: Optional[Decimal] = None
    other_fees: Optional[Decimal] = None
    fx_translation_pnl: Optional[Decimal] = None
    ending_settled_cash: Optional[Decimal] = None


@dataclass(frozen=True)
class OptionEAE:
    """Option exercise, assignment or expiration."""
    account_id: str
    symbol: str
    event_date: date
    quantity: Decimal
    action_type: Optional[OptionAction] = None
    transaction_id: Optional[str] = None
    conid: Optional[str] = None
    description: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    strike: Optional[Decimal] = None
    expiry: Optional[date] = None
    put_call: Optional[PutCall] = None
    multiplier: Optional[Decimal] = None
    underlying_symbol: Optional[str] = None
    underlying_conid: Optional[str] = None
    trade_price: Optional[Decimal] = None
    proceeds: Optional[Decimal] = None
    commission: Optional[Decimal] = None
    currency: Optional[str] = None
    fifo_pnl_realized: Optional[Decimal] = None
    notes: Tuple[TransactionCode, ...] = ()


@dataclass(frozen=True)
class FxTransaction:
    account_id: str
    from_currency: str
    to_currency: str
    quantity: Decimal
    proceeds: Decimal
    transaction_id: Optional[str] = None
    report_date: Optional[date] = None
    date_time: Optional[str] = None
    description: Optional[str] = None
    functional_currency: Optional[str] = None
    cost: Optional[Decimal] = None
    realized_pl: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None


@dataclass(frozen=True)
class DividendAccrual:
    """A dividend accrual line, either a change or a still-open accrual."""
    account_id: str
    symbol: str
    ex_date: date
    gross_rate: Decimal
    conid: Optional[str] = None
    currency: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    pay_date: Optional[date] = None
    accrual_date: Optional[date] = None
    quantity: Optional[Decimal] = None
    tax: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    gross_amount: Optional[Decimal] = None
    net_amount: Optional[Decimal] = None
    code: Tuple[TransactionCode, ...] = ()


@dataclass(frozen=True)
class InterestAccrual:
    account_id: str
    currency: str
    starting_balance: Decimal
    interest_accrued: Decimal
    ending_balance: Decimal
    from_date: Optional[date] = None
    to_date: Optional[date] = None


@dataclass(frozen=True)
class Transfer:
    """Position transfer in or out of the account."""
    account_id: str
    symbol: str
    transfer_date: date
    quantity: Decimal
    transfer_type: Optional[TransferType] = None
    transaction_id: Optional[str] = None
    conid: Optional[str] = None
    description: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    direction: Optional[InOut] = None
    transfer_price: Optional[Decimal] = None
    position_amount: Optional[Decimal] = None
    cash_transfer: Optional[Decimal] = None
    currency: Optional[str] = None
    delivering_receiving_broker: Optional[str] = None
