# ibkr_flex/io/ibkr_flex_parser.py
"""
IBKR Flex Query XML parser.
Dispatches on the root element and assembles typed statements.
"""

import xml.etree.ElementTree as ET
from functools import partial
from typing import Dict, List, Union

from ibkr_flex.domain.codes import FlexSchemaVersion, StatementType
from ibkr_flex.domain.statements import (
    ActivityStatement,
    FlexResponse,
    TradeConfirmationStatement,
)
from ibkr_flex.io.decoders import AttributeReader
from ibkr_flex.io.detail_records import (
    decode_change_in_position_value,
    decode_client_fee,
    decode_debit_card_activity,
    decode_fifo_performance,
    decode_fx_lot,
    decode_hard_to_borrow,
    decode_mtd_ytd_performance,
    decode_mtm_performance,
    decode_prior_period_position,
    decode_sales_tax,
    decode_slb_activity,
    decode_slb_fee,
    decode_statement_of_funds_line,
    decode_tier_interest,
    decode_trade_transfer,
    decode_unbundled_commission,
    decode_unsettled_transfer,
)
from ibkr_flex.io.errors import (
    InvalidValueError,
    MissingFieldError,
    UnknownRootError,
    XmlStructureError,
)
from ibkr_flex.io.extended_records import (
    decode_account_information,
    decode_cash_report_currency,
    decode_change_in_nav,
    decode_dividend_accrual,
    decode_equity_summary,
    decode_fx_transaction,
    decode_interest_accrual,
    decode_option_eae,
    decode_transfer,
)
from ibkr_flex.io.records import (
    decode_cash_transaction,
    decode_conversion_rate,
    decode_corporate_action,
    decode_position,
    decode_security_info,
    decode_trade,
)
from ibkr_flex.io.sections import classify_trades, decode_items, decode_single
from ibkr_flex.logging_setup import get_logger

logger = get_logger(__name__)

XmlInput = Union[str, bytes]

ACTIVITY_ROOTS = ("FlexQueryResponse", "FlexStatement")
CONFIRMATION_ROOT = "TradeConfirmationStatement"

SUPPORTED_VERSIONS = {"3": FlexSchemaVersion.V3}

# Section tag -> (statement field, section decoder). Trades is classified separately.
SECTION_DECODERS = {
    "OpenPositions": ("positions", partial(decode_items, item_tag="OpenPosition", decoder=decode_position)),
    "CashTransactions": ("cash_transactions", partial(decode_items, item_tag="CashTransaction", decoder=decode_cash_transaction)),
    "CorporateActions": ("corporate_actions", partial(decode_items, item_tag="CorporateAction", decoder=decode_corporate_action)),
    "SecuritiesInfo": ("securities_info", partial(decode_items, item_tag="SecurityInfo", decoder=decode_security_info)),
    "ConversionRates": ("conversion_rates", partial(decode_items, item_tag="ConversionRate", decoder=decode_conversion_rate)),
    "AccountInformation": ("account_information", partial(decode_single, decoder=decode_account_information)),
    "ChangeInNAV": ("change_in_nav", partial(decode_single, decoder=decode_change_in_nav)),
    "EquitySummaryInBase": ("equity_summary", partial(decode_items, item_tag="EquitySummaryByReportDateInBase", decoder=decode_equity_summary)),
    "CashReport": ("cash_report", partial(decode_items, item_tag="CashReportCurrency", decoder=decode_cash_report_currency)),
    "OptionEAE": ("option_eae", partial(decode_items, item_tag="OptionEAE", decoder=decode_option_eae)),
    "FxTransactions": ("fx_transactions", partial(decode_items, item_tag="FxTransaction", decoder=decode_fx_transaction)),
    "ChangeInDividendAccruals": ("change_in_dividend_accruals", partial(decode_items, item_tag="ChangeInDividendAccrual", decoder=decode_dividend_accrual)),
    "OpenDividendAccruals": ("open_dividend_accruals", partial(decode_items, item_tag="OpenDividendAccrual", decoder=decode_dividend_accrual)),
    "InterestAccruals": ("interest_accruals", partial(decode_items, item_tag="InterestAccrualsCurrency", decoder=decode_interest_accrual)),
    "Transfers": ("transfers", partial(decode_items, item_tag="Transfer", decoder=decode_transfer)),
    "TradeConfirms": ("trade_confirms", partial(decode_items, item_tag="TradeConfirm", decoder=decode_trade)),
    "MTMPerformanceSummaryInBase": ("mtm_performance_summary", partial(decode_items, item_tag="MTMPerformanceSummaryUnderlying", decoder=decode_mtm_performance)),
    "FIFOPerformanceSummaryInBase": ("fifo_performance_summary", partial(decode_items, item_tag="FIFOPerformanceSummaryUnderlying", decoder=decode_fifo_performance)),
    "MTDYTDPerformanceSummary": ("mtd_ytd_performance_summary", partial(decode_items, item_tag="MTDYTDPerformanceSummaryUnderlying", decoder=decode_mtd_ytd_performance)),
    "StmtFunds": ("statement_of_funds", partial(decode_items, item_tag="StatementOfFundsLine", decoder=decode_statement_of_funds_line)),
    "ChangeInPositionValues": ("change_in_position_values", partial(decode_items, item_tag="ChangeInPositionValue", decoder=decode_change_in_position_value)),
    "UnbundledCommissionDetails": ("unbundled_commission_details", partial(decode_items, item_tag="UnbundledCommissionDetail", decoder=decode_unbundled_commission)),
    "ClientFees": ("client_fees", partial(decode_items, item_tag="ClientFee", decoder=decode_client_fee)),
    "ClientFeesDetails": ("client_fees_details", partial(decode_items, item_tag="ClientFeesDetail", decoder=decode_client_fee)),
    "SLBActivities": ("slb_activities", partial(decode_items, item_tag="SLBActivity", decoder=decode_slb_activity)),
    "SLBFees": ("slb_fees", partial(decode_items, item_tag="SLBFee", decoder=decode_slb_fee)),
    "HardToBorrowDetails": ("hard_to_borrow_details", partial(decode_items, item_tag="HardToBorrowDetail", decoder=decode_hard_to_borrow)),
    "FxLots": ("fx_lots", partial(decode_items, item_tag="FxLot", decoder=decode_fx_lot)),
    "UnsettledTransfers": ("unsettled_transfers", partial(decode_items, item_tag="UnsettledTransfer", decoder=decode_unsettled_transfer)),
    "TradeTransfers": ("trade_transfers", partial(decode_items, item_tag="TradeTransfer", decoder=decode_trade_transfer)),
    "PriorPeriodPositions": ("prior_period_positions", partial(decode_items, item_tag="PriorPeriodPosition", decoder=decode_prior_period_position)),
    "TierInterestDetails": ("tier_interest_details", partial(decode_items, item_tag="TierInterestDetail", decoder=decode_tier_interest)),
    "DebitCardActivities": ("debit_card_activities", partial(decode_items, item_tag="DebitCardActivity", decoder=decode_debit_card_activity)),
    "SalesTaxes": ("sales_taxes", partial(decode_items, item_tag="SalesTax", decoder=decode_sales_tax)),
}

TRADES_SECTION = "Trades"

# Known sections that are read past without being modeled
IGNORED_SECTIONS = frozenset({
    "SLBCollaterals",
    "SLBOpenContracts",
    "DepositsOnHold",
    "FxPositions",
    "NetStockPositions",
    "NetStockPositionSummary",
    "ComplexPositions",
    "CFDCharges",
    "CommissionCredits",
    "FdicInsuredDepositsByBank",
    "HKIPOOpenSubscriptions",
    "HKIPOSubscriptionActivity",
    "IBGNoteTransactions",
    "IncentiveCouponAccrualDetails",
    "MutualFundDividendDetails",
    "PendingExcercises",
    "RoutingCommissions",
    "SoftDollars",
    "StockGrantActivities",
    "TransactionTaxes",
    "UnbookedTrades",
})


def _strip_prolog_whitespace(xml_content: XmlInput) -> XmlInput:
    if xml_content is None:
        raise XmlStructureError("Empty FLEX document")
    stripped = xml_content.lstrip()
    if not stripped:
        raise XmlStructureError("Empty FLEX document")
    return stripped


def _first_element(xml_content: XmlInput) -> ET.Element:
    """Return the root element as soon as its start tag has been read."""
    parser = ET.XMLPullParser(events=("start",))
    try:
        parser.feed(_strip_prolog_whitespace(xml_content))
        for _event, elem in parser.read_events():
            return elem
        parser.close()
    except ET.ParseError as e:
        raise XmlStructureError(f"Malformed FLEX XML: {e}") from e
    raise XmlStructureError("FLEX document has no root element")


def _parse_document(xml_content: XmlInput) -> ET.Element:
    try:
        return ET.fromstring(_strip_prolog_whitespace(xml_content))
    except ET.ParseError as e:
        raise XmlStructureError(f"Malformed FLEX XML: {e}") from e


def _statement_type_of(tag: str) -> StatementType:
    if tag in ACTIVITY_ROOTS:
        return StatementType.ACTIVITY
    if tag == CONFIRMATION_ROOT:
        return StatementType.TRADE_CONFIRMATION
    raise UnknownRootError(tag)


def _version_of(root: ET.Element) -> FlexSchemaVersion:
    raw = root.get("version")
    if raw is None:
        return FlexSchemaVersion.V3
    version = SUPPORTED_VERSIONS.get(raw.strip(), FlexSchemaVersion.UNKNOWN)
    if version is FlexSchemaVersion.UNKNOWN:
        logger.warning("Unrecognized FLEX schema version %r, parsing as version 3", raw)
    return version


def _assemble_statement(elem: ET.Element) -> ActivityStatement:
    """Build one ActivityStatement from a <FlexStatement> element."""
    a = AttributeReader(elem)
    account_id = a.required_text("accountId")
    from_date = a.required_date("fromDate")
    to_date = a.required_date("toDate")
    if from_date > to_date:
        raise InvalidValueError("toDate", elem.get("toDate"), f"precedes fromDate {from_date}", elem.tag)

    found: Dict[str, ET.Element] = {}
    for child in elem:
        tag = child.tag
        if tag == TRADES_SECTION or tag in SECTION_DECODERS:
            if tag in found:
                raise XmlStructureError(f"Duplicate <{tag}> section in statement for {account_id}")
            found[tag] = child
        elif tag in IGNORED_SECTIONS:
            logger.debug("Ignoring <%s> section", tag)
        else:
            logger.info("Skipping unrecognized <%s> section", tag)

    trades, wash_sales = classify_trades(found.get(TRADES_SECTION))
    sections = {
        field: decode(found.get(tag))
        for tag, (field, decode) in SECTION_DECODERS.items()
    }

    statement = ActivityStatement(
        account_id=account_id,
        from_date=from_date,
        to_date=to_date,
        when_generated=a.text("whenGenerated"),
        period=a.text("period"),
        trades=trades,
        wash_sales=wash_sales,
        **sections,
    )
    logger.info(
        "Parsed statement for %s (%s to %s): %d trades, %d wash sales, %d positions, %d cash transactions",
        account_id,
        from_date,
        to_date,
        len(statement.trades),
        len(statement.wash_sales),
        len(statement.positions),
        len(statement.cash_transactions),
    )
    return statement


def _assemble_confirmation(root: ET.Element) -> TradeConfirmationStatement:
    a = AttributeReader(root)
    account_id = a.required_text("accountId")
    section = None
    for child in root:
        if child.tag != TRADES_SECTION:
            logger.info("Skipping unrecognized <%s> section in trade confirmation", child.tag)
        elif section is not None:
            raise XmlStructureError(f"Duplicate <{TRADES_SECTION}> section in trade confirmation for {account_id}")
        else:
            section = child
    trades, wash_sales = classify_trades(section)
    logger.info("Parsed trade confirmation for %s: %d trades", account_id, len(trades))
    return TradeConfirmationStatement(account_id=account_id, trades=trades, wash_sales=wash_sales)


class IBKRFlexParser:
    """Parse IBKR Flex Query XML exports."""

    @staticmethod
    def detect_statement_type(xml_content: XmlInput) -> StatementType:
        """
        Classify a document by its first element, without reading the rest.

        Raises:
            XmlStructureError: empty or malformed input
            UnknownRootError: root is neither an activity nor a confirmation shape
        """
        return _statement_type_of(_first_element(xml_content).tag)

    @staticmethod
    def detect_version(xml_content: XmlInput) -> FlexSchemaVersion:
        """Schema version from the root version attribute; absent means 3."""
        return _version_of(_first_element(xml_content))

    @staticmethod
    def parse(xml_content: XmlInput) -> FlexResponse:
        """
        Parse IBKR Flex Query XML.

        Args:
            xml_content: Raw XML from IBKR, as str or UTF-8 bytes

        Returns:
            FlexResponse with every statement in document order
        """
        root = _parse_document(xml_content)
        statement_type = _statement_type_of(root.tag)
        version = _version_of(root)

        if root.tag == CONFIRMATION_ROOT:
            statements = (_assemble_confirmation(root),)
        elif root.tag == "FlexStatement":
            statements = (_assemble_statement(root),)
        else:
            wrapper = root.find("FlexStatements")
            if wrapper is None:
                raise MissingFieldError("FlexStatements", root.tag)
            statements = tuple(_assemble_statement(e) for e in wrapper.findall("FlexStatement"))

        return FlexResponse(
            statement_type=statement_type,
            statements=statements,
            query_name=root.get("queryName"),
            query_type=root.get("type"),
            schema_version=version,
        )

    @staticmethod
    def parse_activity_flex_all(xml_content: XmlInput) -> List[ActivityStatement]:
        """All activity statements in document order; may be empty."""
        response = IBKRFlexParser.parse(xml_content)
        if response.statement_type is not StatementType.ACTIVITY:
            raise XmlStructureError("Expected an Activity FLEX document, got a trade confirmation")
        return list(response.statements)

    @staticmethod
    def parse_activity_flex(xml_content: XmlInput) -> ActivityStatement:
        """First activity statement of the document."""
        statements = IBKRFlexParser.parse_activity_flex_all(xml_content)
        if not statements:
            raise MissingFieldError("FlexStatement", "FlexQueryResponse")
        return statements[0]

    @staticmethod
    def parse_trade_confirmation(xml_content: XmlInput) -> TradeConfirmationStatement:
        response = IBKRFlexParser.parse(xml_content)
        if response.statement_type is not StatementType.TRADE_CONFIRMATION:
            raise XmlStructureError("Expected a Trade Confirmation FLEX document, got an activity statement")
        return response.statements[0]
