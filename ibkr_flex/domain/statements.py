# ibkr_flex/domain/statements.py
"""Assembled statement values."""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple, Union

from ibkr_flex.domain.codes import FlexSchemaVersion, StatementType
from ibkr_flex.domain.details import (
    ChangeInPositionValue,
    ClientFee,
    DebitCardActivity,
    FIFOPerformanceSummary,
    FxLot,
    HardToBorrowDetail,
    MTDYTDPerformanceSummary,
    MTMPerformanceSummary,
    PriorPeriodPosition,
    SalesTax,
    SLBActivity,
    SLBFee,
    StatementOfFundsLine,
    TierInterestDetail,
    TradeTransfer,
    UnbundledCommissionDetail,
    UnsettledTransfer,
)
from ibkr_flex.domain.extended import (
    AccountInformation,
    CashReportCurrency,
    ChangeInNAV,
    DividendAccrual,
    EquitySummary,
    FxTransaction,
    InterestAccrual,
    OptionEAE,
    Transfer,
)
from ibkr_flex.domain.models import (
    CashTransaction,
    ConversionRate,
    CorporateAction,
    Position,
    SecurityInfo,
    Trade,
)


@dataclass(frozen=True)
class ActivityStatement:
    """One per-account, per-period activity statement.

    A section missing from the document and an empty section both give an
    empty tuple.
    ``trade_confirms`` mirrors the TradeConfirms section; only ``trades`` are
    executions.
    """
    account_id: str
    from_date: date
    to_date: date
    when_generated: Optional[str] = None
    period: Optional[str] = None

    trades: Tuple[Trade, ...] = ()
    wash_sales: Tuple[Trade, ...] = ()
    positions: Tuple[Position, ...] = ()
    cash_transactions: Tuple[CashTransaction, ...] = ()
    corporate_actions: Tuple[CorporateAction, ...] = ()
    securities_info: Tuple[SecurityInfo, ...] = ()
    conversion_rates: Tuple[ConversionRate, ...] = ()

    account_information: Optional[AccountInformation] = None
    change_in_nav: Optional[ChangeInNAV] = None
    equity_summary: Tuple[EquitySummary, ...] = ()
    cash_report: Tuple[CashReportCurrency, ...] = ()
    option_eae: Tuple[OptionEAE, ...] = ()
    fx_transactions: Tuple[FxTransaction, ...] = ()
    change_in_dividend_accruals: Tuple[DividendAccrual, ...] = ()
    open_dividend_accruals: Tuple[DividendAccrual, ...] = ()
    interest_accruals: Tuple[InterestAccrual, ...] = ()
    transfers: Tuple[Transfer, ...] = ()

    trade_confirms: Tuple[Trade, ...] = ()
    mtm_performance_summary: Tuple[MTMPerformanceSummary, ...] = ()
    fifo_performance_summary: Tuple[FIFOPerformanceSummary, ...] = ()
    mtd_ytd_performance_summary: Tuple[MTDYTDPerformanceSummary, ...] = ()
    statement_of_funds: Tuple[StatementOfFundsLine, ...] = ()
    change_in_position_values: Tuple[ChangeInPositionValue, ...] = ()
    unbundled_commission_details: Tuple[UnbundledCommissionDetail, ...] = ()
    client_fees: Tuple[ClientFee, ...] = ()
    client_fees_details: Tuple[ClientFee, ...] = ()
    slb_activities: Tuple[SLBActivity, ...] = ()
    slb_fees: Tuple[SLBFee, ...] = ()
    hard_to_borrow_details: Tuple[HardToBorrowDetail, ...] = ()
    fx_lots: Tuple[FxLot, ...] = ()
    unsettled_transfers: Tuple[UnsettledTransfer, ...] = ()
    trade_transfers: Tuple[TradeTransfer, ...] = ()
    prior_period_positions: Tuple[PriorPeriodPosition, ...] = ()
    tier_interest_details: Tuple[TierInterestDetail, ...] = ()
    debit_card_activities: Tuple[DebitCardActivity, ...] = ()
    sales_taxes: Tuple[SalesTax, ...] = ()

    def __post_init__(self):
        if self.from_date > self.to_date:
            raise ValueError(
                f"Statement date range is inverted: {self.from_date} > {self.to_date}"
            )

    @property
    def date_range(self) -> Tuple[date, date]:
        return self.from_date, self.to_date


@dataclass(frozen=True)
class TradeConfirmationStatement:
    """Real-time trade confirmation: trades only, reduced field set."""
    account_id: str
    trades: Tuple[Trade, ...] = ()
    wash_sales: Tuple[Trade, ...] = ()


Statement = Union[ActivityStatement, TradeConfirmationStatement]


@dataclass(frozen=True)
class FlexResponse:
    """Everything decoded from one document, statements in document order."""
    statement_type: StatementType
    statements: Tuple[Statement, ...] = ()
    query_name: Optional[str] = None
    query_type: Optional[str] = None
    schema_version: FlexSchemaVersion = FlexSchemaVersion.V3
