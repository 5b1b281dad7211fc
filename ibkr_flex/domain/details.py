# ibkr_flex/domain/details.py
"""
Records of the detail sections: statement of funds, performance summaries,
commission and fee breakdowns, securities lending, lots and transfers in
flight, tiered interest, debit card spending and sales tax.

Only ``account_id`` is guaranteed on these rows. Which other attributes
appear depends on the query configuration, so every other field is
optional.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ibkr_flex.domain.codes import (
    AssetCategory,
    DeliveredReceived,
    InOut,
    LevelOfDetail,
    ToFrom,
)


@dataclass(frozen=True)
class StatementOfFundsLine:
    """One cash movement of the statement of funds, with running balance."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    report_date: Optional[date] = None
    activity_date: Optional[date] = None
    currency: Optional[str] = None
    activity_code: Optional[str] = None
    activity_description: Optional[str] = None
    trade_id: Optional[str] = None
    symbol: Optional[str] = None
    conid: Optional[str] = None
    debit: Optional[Decimal] = None
    credit: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    balance: Optional[Decimal] = None
    fx_rate_to_base: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None


@dataclass(frozen=True)
class PriorPeriodPosition:
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    prior_mtm_pnl: Optional[Decimal] = None
    position_date: Optional[date] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class FxLot:
    """Open lot of a non-base currency balance."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    asset_category: Optional[str] = None
    report_date: Optional[date] = None
    functional_currency: Optional[str] = None
    fx_currency: Optional[str] = None
    quantity: Optional[Decimal] = None
    cost_price: Optional[Decimal] = None
    cost_basis: Optional[Decimal] = None
    close_price: Optional[Decimal] = None
    value: Optional[Decimal] = None
    unrealized_pl: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None


@dataclass(frozen=True)
class UnbundledCommissionDetail:
    """Per-execution commission split into its broker, exchange and regulatory parts."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    exec_id: Optional[str] = None
    order_id: Optional[str] = None
    trade_id: Optional[str] = None
    date_time: Optional[str] = None
    exchange: Optional[str] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    execution_commission: Optional[Decimal] = None
    clearing_commission: Optional[Decimal] = None
    regulatory_commission: Optional[Decimal] = None
    third_party_commission: Optional[Decimal] = None
    third_party_regulatory_commission: Optional[Decimal] = None
    total_commission: Optional[Decimal] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class MTMPerformanceSummary:
    """Mark-to-market performance of one underlying, in base currency."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    report_date: Optional[date] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    cusip: Optional[str] = None
    isin: Optional[str] = None
    listing_exchange: Optional[str] = None
    underlying_symbol: Optional[str] = None
    underlying_conid: Optional[str] = None
    underlying_listing_exchange: Optional[str] = None
    cost_adj: Optional[Decimal] = None
    realized_st_profit: Optional[Decimal] = None
    realized_st_loss: Optional[Decimal] = None
    realized_lt_profit: Optional[Decimal] = None
    realized_lt_loss: Optional[Decimal] = None
    unrealized_st_profit: Optional[Decimal] = None
    unrealized_st_loss: Optional[Decimal] = None
    unrealized_lt_profit: Optional[Decimal] = None
    unrealized_lt_loss: Optional[Decimal] = None
    transaction_mtm: Optional[Decimal] = None
    commissions: Optional[Decimal] = None
    other: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None


@dataclass(frozen=True)
class FIFOPerformanceSummary:
    """FIFO realized and unrealized P&L of one underlying, in base currency."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    report_date: Optional[date] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    cusip: Optional[str] = None
    isin: Optional[str] = None
    listing_exchange: Optional[str] = None
    underlying_symbol: Optional[str] = None
    underlying_conid: Optional[str] = None
    realized_short_term_pnl: Optional[Decimal] = None
    realized_long_term_pnl: Optional[Decimal] = None
    realized_total_pnl: Optional[Decimal] = None
    unrealized_short_term_pnl: Optional[Decimal] = None
    unrealized_long_term_pnl: Optional[Decimal] = None
    unrealized_total_pnl: Optional[Decimal] = None
    total_income: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None


@dataclass(frozen=True)
class MTDYTDPerformanceSummary:
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    mtd_realized_pnl: Optional[Decimal] = None
    mtd_unrealized_pnl: Optional[Decimal] = None
    mtd_commissions: Optional[Decimal] = None
    mtd_fees: Optional[Decimal] = None
    ytd_realized_pnl: Optional[Decimal] = None
    ytd_unrealized_pnl: Optional[Decimal] = None
    ytd_commissions: Optional[Decimal] = None
    ytd_fees: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None


@dataclass(frozen=True)
class ChangeInPositionValue:
    """Roll-forward of position value from the prior period to the end of this one."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    report_date: Optional[date] = None
    symbol: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    currency: Optional[str] = None
    prior_period_value: Optional[Decimal] = None
    transactions: Optional[Decimal] = None
    mtm_prior_period_positions: Optional[Decimal] = None
    mtm_transactions: Optional[Decimal] = None
    corporate_actions: Optional[Decimal] = None
    fx_translation: Optional[Decimal] = None
    other: Optional[Decimal] = None
    ending_value: Optional[Decimal] = None
    level_of_detail: Optional[LevelOfDetail] = None


@dataclass(frozen=True)
class ClientFee:
    """Advisor client fee. ClientFeesDetail rows also fill ``fee_type`` and the FX rate."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    fee_date: Optional[date] = None
    currency: Optional[str] = None
    fee_type: Optional[str] = None
    revenue: Optional[Decimal] = None
    expense: Optional[Decimal] = None
    net: Optional[Decimal] = None
    description: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None


@dataclass(frozen=True)
class SLBActivity:
    """Securities lending or borrowing event."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    activity_date: Optional[date] = None
    activity_type: Optional[str] = None
    quantity: Optional[Decimal] = None
    collateral_amount: Optional[Decimal] = None
    fee_rate: Optional[Decimal] = None
    net_lend_fee: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None


@dataclass(frozen=True)
class SLBFee:
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    value_date: Optional[date] = None
    start_date: Optional[date] = None
    quantity: Optional[Decimal] = None
    collateral_amount: Optional[Decimal] = None
    fee_rate: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    carry_charge: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None


@dataclass(frozen=True)
class HardToBorrowDetail:
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    value_date: Optional[date] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    value: Optional[Decimal] = None
    borrow_fee_rate: Optional[Decimal] = None
    borrow_fee: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None


@dataclass(frozen=True)
class UnsettledTransfer:
    """Position transfer initiated but not yet settled."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    direction: Optional[InOut] = None
    transfer_date: Optional[date] = None
    expected_date: Optional[date] = None
    quantity: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None


@dataclass(frozen=True)
class TradeTransfer:
    """Execution given up to, or taken up from, another broker."""
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    transfer_type: Optional[str] = None
    direction: Optional[ToFrom] = None
    delivery_type: Optional[DeliveredReceived] = None
    quantity: Optional[Decimal] = None
    transfer_price: Optional[Decimal] = None
    transfer_date: Optional[date] = None
    executing_broker: Optional[str] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None


@dataclass(frozen=True)
class TierInterestDetail:
    """Interest for one balance tier.

    Older exports use the short form (``date``, ``balance``,
    ``interestRate``, ``interest``), newer ones the principal and interest
    breakdown; both sets are kept as found.
    """
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None
    interest_type: Optional[str] = None
    report_date: Optional[date] = None
    value_date: Optional[date] = None
    tier_break: Optional[str] = None
    balance_threshold: Optional[Decimal] = None
    securities_principal: Optional[Decimal] = None
    commodities_principal: Optional[Decimal] = None
    ibukl_principal: Optional[Decimal] = None
    total_principal: Optional[Decimal] = None
    rate: Optional[Decimal] = None
    securities_interest: Optional[Decimal] = None
    commodities_interest: Optional[Decimal] = None
    ibukl_interest: Optional[Decimal] = None
    total_interest: Optional[Decimal] = None
    code: Optional[str] = None
    from_acct: Optional[str] = None
    to_acct: Optional[str] = None
    margin_balance: Optional[str] = None
    interest_date: Optional[date] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    balance: Optional[Decimal] = None
    interest_rate: Optional[Decimal] = None
    interest: Optional[Decimal] = None


@dataclass(frozen=True)
class DebitCardActivity:
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    activity_date: Optional[date] = None
    merchant: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    transaction_type: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None


@dataclass(frozen=True)
class SalesTax:
    account_id: str
    acct_alias: Optional[str] = None
    model: Optional[str] = None
    tax_date: Optional[date] = None
    symbol: Optional[str] = None
    description: Optional[str] = None
    conid: Optional[str] = None
    tax_type: Optional[str] = None
    tax_amount: Optional[Decimal] = None
    proceeds: Optional[Decimal] = None
    currency: Optional[str] = None
    fx_rate_to_base: Optional[Decimal] = None
