# ibkr_flex/io/detail_records.py
"""Decoders for the detail sections (see domain/details.py)."""

import xml.etree.ElementTree as ET

from ibkr_flex.domain.codes import (
    AssetCategory,
    DeliveredReceived,
    InOut,
    LevelOfDetail,
    ToFrom,
)
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
from ibkr_flex.io.decoders import AttributeReader


def decode_statement_of_funds_line(elem: ET.Element) -> StatementOfFundsLine:
    a = AttributeReader(elem)
    return StatementOfFundsLine(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        report_date=a.date("reportDate"),
        activity_date=a.date("date"),
        currency=a.text("currency"),
        activity_code=a.text("activityCode"),
        activity_description=a.text("activityDescription"),
        trade_id=a.text("tradeID"),
        symbol=a.text("symbol"),
        conid=a.text("conid"),
        debit=a.decimal("debit"),
        credit=a.decimal("credit"),
        amount=a.decimal("amount"),
        balance=a.decimal("balance"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
    )


def decode_prior_period_position(elem: ET.Element) -> PriorPeriodPosition:
    a = AttributeReader(elem)
    return PriorPeriodPosition(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        prior_mtm_pnl=a.decimal("priorMtmPnl"),
        position_date=a.date("date"),
        quantity=a.decimal("quantity"),
        price=a.decimal("price"),
        currency=a.text("currency"),
    )


def decode_fx_lot(elem: ET.Element) -> FxLot:
    a = AttributeReader(elem)
    return FxLot(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        # "CASH" on every lot; kept as text
        asset_category=a.text("assetCategory"),
        report_date=a.date("reportDate"),
        functional_currency=a.text("functionalCurrency"),
        fx_currency=a.text("fxCurrency"),
        quantity=a.decimal("quantity"),
        cost_price=a.decimal("costPrice"),
        cost_basis=a.decimal("costBasis"),
        close_price=a.decimal("closePrice"),
        value=a.decimal("value"),
        unrealized_pl=a.decimal("unrealizedPL"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
    )


def decode_unbundled_commission(elem: ET.Element) -> UnbundledCommissionDetail:
    a = AttributeReader(elem)
    return UnbundledCommissionDetail(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        exec_id=a.text("execID"),
        order_id=a.text("orderID"),
        trade_id=a.text("tradeID"),
        date_time=a.text("dateTime"),
        exchange=a.text("exchange"),
        quantity=a.decimal("quantity"),
        price=a.decimal("price"),
        execution_commission=a.decimal("executionCommission"),
        clearing_commission=a.decimal("clearingCommission"),
        regulatory_commission=a.decimal("regulatoryCommission"),
        third_party_commission=a.decimal("thirdPartyCommission"),
        third_party_regulatory_commission=a.decimal("thirdPartyRegulatoryCommission"),
        total_commission=a.decimal("totalCommission"),
        currency=a.text("currency"),
    )


def decode_mtm_performance(elem: ET.Element) -> MTMPerformanceSummary:
    a = AttributeReader(elem)
    return MTMPerformanceSummary(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        report_date=a.date("reportDate"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        cusip=a.text("cusip"),
        isin=a.text("isin"),
        listing_exchange=a.text("listingExchange"),
        underlying_symbol=a.text("underlyingSymbol"),
        underlying_conid=a.text("underlyingConid"),
        underlying_listing_exchange=a.text("underlyingListingExchange"),
        cost_adj=a.decimal("costAdj"),
        realized_st_profit=a.decimal("realizedSTProfit"),
        realized_st_loss=a.decimal("realizedSTLoss"),
        realized_lt_profit=a.decimal("realizedLTProfit"),
        realized_lt_loss=a.decimal("realizedLTLoss"),
        unrealized_st_profit=a.decimal("unrealizedSTProfit"),
        unrealized_st_loss=a.decimal("unrealizedSTLoss"),
        unrealized_lt_profit=a.decimal("unrealizedLTProfit"),
        unrealized_lt_loss=a.decimal("unrealizedLTLoss"),
        transaction_mtm=a.decimal("transactionMtm"),
        commissions=a.decimal("commissions"),
        other=a.decimal("other"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
    )


def decode_fifo_performance(elem: ET.Element) -> FIFOPerformanceSummary:
    a = AttributeReader(elem)
    return FIFOPerformanceSummary(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        report_date=a.date("reportDate"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        cusip=a.text("cusip"),
        isin=a.text("isin"),
        listing_exchange=a.text("listingExchange"),
        underlying_symbol=a.text("underlyingSymbol"),
        underlying_conid=a.text("underlyingConid"),
        realized_short_term_pnl=a.decimal("realizedShortTermPnl"),
        realized_long_term_pnl=a.decimal("realizedLongTermPnl"),
        realized_total_pnl=a.decimal("realizedTotalPnl"),
        unrealized_short_term_pnl=a.decimal("unrealizedShortTermPnl"),
        unrealized_long_term_pnl=a.decimal("unrealizedLongTermPnl"),
        unrealized_total_pnl=a.decimal("unrealizedTotalPnl"),
        total_income=a.decimal("totalIncome"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
    )


def decode_mtd_ytd_performance(elem: ET.Element) -> MTDYTDPerformanceSummary:
    a = AttributeReader(elem)
    return MTDYTDPerformanceSummary(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        mtd_realized_pnl=a.decimal("mtdRealizedPnl"),
        mtd_unrealized_pnl=a.decimal("mtdUnrealizedPnl"),
        mtd_commissions=a.decimal("mtdCommissions"),
        mtd_fees=a.decimal("mtdFees"),
        ytd_realized_pnl=a.decimal("ytdRealizedPnl"),
        ytd_unrealized_pnl=a.decimal("ytdUnrealizedPnl"),
        ytd_commissions=a.decimal("ytdCommissions"),
        ytd_fees=a.decimal("ytdFees"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
    )


def decode_change_in_position_value(elem: ET.Element) -> ChangeInPositionValue:
    a = AttributeReader(elem)
    return ChangeInPositionValue(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        report_date=a.date("reportDate"),
        symbol=a.text("symbol"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        currency=a.text("currency"),
        prior_period_value=a.decimal("priorPeriodValue"),
        transactions=a.decimal("transactions"),
        mtm_prior_period_positions=a.decimal("mtmPriorPeriodPositions"),
        mtm_transactions=a.decimal("mtmTransactions"),
        corporate_actions=a.decimal("corporateActions"),
        fx_translation=a.decimal("fxTranslation"),
        other=a.decimal("other"),
        ending_value=a.decimal("endingValue"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
    )


def decode_client_fee(elem: ET.Element) -> ClientFee:
    """Shared by ClientFee and ClientFeesDetail rows."""
    a = AttributeReader(elem)
    return ClientFee(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        fee_date=a.date("date"),
        currency=a.text("currency"),
        fee_type=a.text("feeType"),
        revenue=a.decimal("revenue"),
        expense=a.decimal("expense"),
        net=a.decimal("net"),
        description=a.text("description"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )


def decode_slb_activity(elem: ET.Element) -> SLBActivity:
    a = AttributeReader(elem)
    return SLBActivity(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        activity_date=a.date("date"),
        activity_type=a.text("type"),
        quantity=a.decimal("quantity"),
        collateral_amount=a.decimal("collateralAmount"),
        fee_rate=a.decimal("feeRate"),
        net_lend_fee=a.decimal("netLendFee"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )


def decode_slb_fee(elem: ET.Element) -> SLBFee:
    a = AttributeReader(elem)
    return SLBFee(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        value_date=a.date("valueDate"),
        start_date=a.date("startDate"),
        quantity=a.decimal("quantity"),
        collateral_amount=a.decimal("collateralAmount"),
        fee_rate=a.decimal("feeRate"),
        fee=a.decimal("fee"),
        carry_charge=a.decimal("carryCharge"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )


def decode_hard_to_borrow(elem: ET.Element) -> HardToBorrowDetail:
    a = AttributeReader(elem)
    return HardToBorrowDetail(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        value_date=a.date("valueDate"),
        quantity=a.decimal("quantity"),
        price=a.decimal("price"),
        value=a.decimal("value"),
        borrow_fee_rate=a.decimal("borrowFeeRate"),
        borrow_fee=a.decimal("borrowFee"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )


def decode_unsettled_transfer(elem: ET.Element) -> UnsettledTransfer:
    a = AttributeReader(elem)
    return UnsettledTransfer(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        direction=a.code("direction", InOut),
        transfer_date=a.date("date"),
        expected_date=a.date("expectedDate"),
        quantity=a.decimal("quantity"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )


def decode_trade_transfer(elem: ET.Element) -> TradeTransfer:
    a = AttributeReader(elem)
    return TradeTransfer(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        asset_category=a.code("assetCategory", AssetCategory),
        transfer_type=a.text("transferType"),
        direction=a.code("direction", ToFrom),
        delivery_type=a.code("deliveryType", DeliveredReceived),
        quantity=a.decimal("quantity"),
        transfer_price=a.decimal("transferPrice"),
        transfer_date=a.date("date"),
        executing_broker=a.text("executingBroker"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )


def decode_tier_interest(elem: ET.Element) -> TierInterestDetail:
    a = AttributeReader(elem)
    return TierInterestDetail(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
        interest_type=a.text("interestType"),
        report_date=a.date("reportDate"),
        value_date=a.date("valueDate"),
        tier_break=a.text("tierBreak"),
        balance_threshold=a.decimal("balanceThreshold"),
        securities_principal=a.decimal("securitiesPrincipal"),
        commodities_principal=a.decimal("commoditiesPrincipal"),
        ibukl_principal=a.decimal("ibuklPrincipal"),
        total_principal=a.decimal("totalPrincipal"),
        rate=a.decimal("rate"),
        securities_interest=a.decimal("securitiesInterest"),
        commodities_interest=a.decimal("commoditiesInterest"),
        ibukl_interest=a.decimal("ibuklInterest"),
        total_interest=a.decimal("totalInterest"),
        code=a.text("code"),
        from_acct=a.text("fromAcct"),
        to_acct=a.text("toAcct"),
        margin_balance=a.text("marginBalance"),
        interest_date=a.date("date"),
        from_date=a.date("fromDate"),
        to_date=a.date("toDate"),
        balance=a.decimal("balance"),
        interest_rate=a.decimal("interestRate"),
        interest=a.decimal("interest"),
    )


def decode_debit_card_activity(elem: ET.Element) -> DebitCardActivity:
    a = AttributeReader(elem)
    return DebitCardActivity(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        activity_date=a.date("date"),
        merchant=a.text("merchant"),
        category=a.text("category"),
        status=a.text("status"),
        transaction_type=a.text("transactionType"),
        amount=a.decimal("amount"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )


def decode_sales_tax(elem: ET.Element) -> SalesTax:
    a = AttributeReader(elem)
    return SalesTax(
        account_id=a.required_text("accountId"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
        tax_date=a.date("date"),
        symbol=a.text("symbol"),
        description=a.text("description"),
        conid=a.text("conid"),
        tax_type=a.text("taxType"),
        tax_amount=a.decimal("taxAmount"),
        proceeds=a.decimal("proceeds"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
    )
