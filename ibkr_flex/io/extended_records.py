# ibkr_flex/io/extended_records.py
"""Decoders for the account-level sections (see domain/extended.py)."""

import xml.etree.ElementTree as ET

from ibkr_flex.domain.codes import (
    AssetCategory,
    InOut,
    LevelOfDetail,
    OptionAction,
    PutCall,
    TransactionCode,
    TransferType,
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
from ibkr_flex.io.decoders import AttributeReader


def decode_account_information(elem: ET.Element) -> AccountInformation:
    a = AttributeReader(elem)
    return AccountInformation(
        account_id=a.required_text("accountId"),
        account_type=a.text("accountType"),
        customer_type=a.text("customerType"),
        acct_alias=a.text("acctAlias"),
        currency=a.text("currency"),
        name=a.text("name"),
        master_name=a.text("masterName"),
        date_opened=a.date("dateOpened"),
        date_funded=a.date("dateFunded"),
        date_closed=a.date("dateClosed"),
        primary_email=a.text("primaryEmail"),
        street_address=a.text("streetAddress"),
        city=a.text("city"),
        state=a.text("state"),
        country=a.text("country"),
        postal_code=a.text("postalCode"),
        trading_permissions=a.text("tradingPermissions"),
        ib_entity=a.text("ibEntity"),
    )


def decode_change_in_nav(elem: ET.Element) -> ChangeInNAV:
    a = AttributeReader(elem)
    return ChangeInNAV(
        account_id=a.required_text("accountId"),
        from_date=a.required_date("fromDate"),
        to_date=a.required_date("toDate"),
        starting_value=a.required_decimal("startingValue"),
        ending_value=a.required_decimal("endingValue"),
        currency=a.text("currency"),
        mtm=a.decimal("mtm"),
        realized=a.decimal("realized"),
        change_in_unrealized=a.decimal("changeInUnrealized"),
        deposits_withdrawals=a.decimal("depositsWithdrawals"),
        dividends=a.decimal("dividends"),
        withholding_tax=a.decimal("withholdingTax"),
        change_in_dividend_accruals=a.decimal("changeInDividendAccruals"),
        interest=a.decimal("interest"),
        change_in_interest_accruals=a.decimal("changeInInterestAccruals"),
        advisor_fees=a.decimal("advisorFees"),
        client_fees=a.decimal("clientFees"),
        other_fees=a.decimal("otherFees"),
        commissions=a.decimal("commissions"),
        fx_translation=a.decimal("fxTranslation"),
        corporate_action_proceeds=a.decimal("corporateActionProceeds"),
        twr=a.decimal("twr"),
    )


def decode_equity_summary(elem: ET.Element) -> EquitySummary:
    a = AttributeReader(elem)
    return EquitySummary(
        account_id=a.required_text("accountId"),
        report_date=a.required_date("reportDate"),
        cash=a.decimal("cash"),
        cash_long=a.decimal("cashLong"),
        cash_short=a.decimal("cashShort"),
        stock=a.decimal("stock"),
        stock_long=a.decimal("stockLong"),
        stock_short=a.decimal("stockShort"),
        options=a.decimal("options"),
        options_long=a.decimal("optionsLong"),
        options_short=a.decimal("optionsShort"),
        bonds=a.decimal("bonds"),
        funds=a.decimal("funds"),
        futures=a.decimal("futures"),
        commodities=a.decimal("commodities"),
        interest_accruals=a.decimal("interestAccruals"),
        dividend_accruals=a.decimal("dividendAccruals"),
        total=a.decimal("total"),
        total_long=a.decimal("totalLong"),
        total_short=a.decimal("totalShort"),
    )


def decode_cash_report_currency(elem: ET.Element) -> CashReportCurrency:
    a = AttributeReader(elem)
    return CashReportCurrency(
        account_id=a.required_text("accountId"),
        currency=a.required_text("currency"),
        starting_cash=a.required_decimal("startingCash"),
        ending_cash=a.required_decimal("endingCash"),
        from_date=a.date("fromDate"),
        to_date=a.date("toDate"),
        commissions=a.decimal("commissions"),
        deposits=a.decimal("deposits"),
        withdrawals=a.decimal("withdrawals"),
        dividends=a.decimal("dividends"),
        broker_interest=a.decimal("brokerInterest"),
        bond_interest=a.decimal("bondInterest"),
        withholding_tax=a.decimal("withholdingTax"),
        net_trades_sales=a.decimal("netTradesSales"),
        net_trades_purchases=a.decimal("netTradesPurchases"),
        other_fees=a.decimal("otherFees"),
        fx_translation_pnl=a.decimal("fxTranslationPnl"),
        ending_settled_cash=a.decimal("endingSettledCash"),
    )


def decode_option_eae(elem: ET.Element) -> OptionEAE:
    a = AttributeReader(elem)
    return OptionEAE(
        account_id=a.required_text("accountId"),
        symbol=a.required_text("symbol"),
        event_date=a.required_date("date"),
        quantity=a.required_decimal("quantity"),
        action_type=a.code("transactionType", OptionAction) or a.code("type", OptionAction),
        transaction_id=a.text("transactionID"),
        conid=a.text("conid"),
        description=a.text("description"),
        asset_category=a.code("assetCategory", AssetCategory),
        strike=a.decimal("strike"),
        expiry=a.date("expiry"),
        put_call=a.code("putCall", PutCall),
        multiplier=a.decimal("multiplier"),
        underlying_symbol=a.text("underlyingSymbol"),
        underlying_conid=a.text("underlyingConid"),
        trade_price=a.decimal("tradePrice"),
        proceeds=a.decimal("proceeds"),
        commission=a.decimal("commisionsAndTax", "commission"),
        currency=a.text("currency"),
        fifo_pnl_realized=a.decimal("realizedPnl", "fifoPnlRealized"),
        notes=a.codes("notes", TransactionCode),
    )


def decode_fx_transaction(elem: ET.Element) -> FxTransaction:
    a = AttributeReader(elem)
    return FxTransaction(
        account_id=a.required_text("accountId"),
        from_currency=a.required_text("fromCurrency"),
        to_currency=a.required_text("toCurrency"),
        quantity=a.required_decimal("quantity"),
        proceeds=a.required_decimal("proceeds"),
        transaction_id=a.text("transactionID"),
        report_date=a.date("reportDate"),
        date_time=a.text("dateTime"),
        description=a.text("description"),
        functional_currency=a.text("functionalCurrency"),
        cost=a.decimal("cost"),
        realized_pl=a.decimal("realizedPL"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
    )


def decode_dividend_accrual(elem: ET.Element) -> DividendAccrual:
    """Shared by ChangeInDividendAccrual and OpenDividendAccrual rows."""
    a = AttributeReader(elem)
    return DividendAccrual(
        account_id=a.required_text("accountId"),
        symbol=a.required_text("symbol"),
        ex_date=a.required_date("exDate"),
        gross_rate=a.required_decimal("grossRate"),
        conid=a.text("conid"),
        currency=a.text("currency"),
        asset_category=a.code("assetCategory", AssetCategory),
        pay_date=a.date("payDate"),
        accrual_date=a.date("date"),
        quantity=a.decimal("quantity"),
        tax=a.decimal("tax"),
        fee=a.decimal("fee"),
        gross_amount=a.decimal("grossAmount"),
        net_amount=a.decimal("netAmount"),
        code=a.codes("code", TransactionCode),
    )


def decode_interest_accrual(elem: ET.Element) -> InterestAccrual:
    a = AttributeReader(elem)
    return InterestAccrual(
        account_id=a.required_text("accountId"),
        currency=a.required_text("currency"),
        starting_balance=a.required_decimal("startingAccrualBalance"),
        interest_accrued=a.required_decimal("interestAccrued"),
        ending_balance=a.required_decimal("endingAccrualBalance"),
        from_date=a.date("fromDate"),
        to_date=a.date("toDate"),
    )


def decode_transfer(elem: ET.Element) -> Transfer:
    a = AttributeReader(elem)
    return Transfer(
        account_id=a.required_text("accountId"),
        symbol=a.required_text("symbol"),
        transfer_date=a.required_date("date"),
        quantity=a.required_decimal("quantity"),
        transfer_type=a.code("type", TransferType),
        transaction_id=a.text("transactionID"),
        conid=a.text("conid"),
        description=a.text("description"),
        asset_category=a.code("assetCategory", AssetCategory),
        direction=a.code("direction", InOut),
        transfer_price=a.decimal("transferPrice"),
        position_amount=a.decimal("positionAmount"),
        cash_transfer=a.decimal("cashTransfer"),
        currency=a.text("currency"),
        delivering_receiving_broker=a.text("deliveringReceivingBroker"),
    )
