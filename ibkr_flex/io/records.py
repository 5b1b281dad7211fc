# ibkr_flex/io/records.py
"""
Per-record decoders for the core FLEX sections.

Each decoder maps attributes to fields one by one. Optional attributes that
the query configuration did not export default to None; the identity
attributes the dialect always emits are mandatory.
"""

import xml.etree.ElementTree as ET

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
from ibkr_flex.domain.models import (
    CashTransaction,
    ConversionRate,
    CorporateAction,
    Position,
    SecurityInfo,
    Trade,
)
from ibkr_flex.io.decoders import AttributeReader


def decode_trade(elem: ET.Element) -> Trade:
    """
    Decode one element of the trades section.

    Shared by every tag kind found there (Trade, WashSale, Order, Lot,
    SymbolSummary, AssetSummary): they carry the same attribute dictionary.
    TradeConfirm rows of an activity statement use it too.
    """
    a = AttributeReader(elem)
    return Trade(
        account_id=a.required_text("accountId"),
        conid=a.required_text("conid"),
        symbol=a.required_text("symbol"),
        asset_category=a.required_code("assetCategory", AssetCategory),
        transaction_id=a.text("transactionID"),
        description=a.text("description"),
        cusip=a.text("cusip"),
        isin=a.text("isin"),
        figi=a.text("figi"),
        security_id=a.text("securityID"),
        security_id_type=a.code("securityIDType", SecurityIdType),
        sub_category=a.code("subCategory", SubCategory),
        listing_exchange=a.text("listingExchange"),
        issuer=a.text("issuer"),
        issuer_country_code=a.text("issuerCountryCode"),
        multiplier=a.decimal("multiplier"),
        strike=a.decimal("strike"),
        expiry=a.date("expiry"),
        put_call=a.code("putCall", PutCall),
        underlying_conid=a.text("underlyingConid"),
        underlying_symbol=a.text("underlyingSymbol"),
        underlying_security_id=a.text("underlyingSecurityID"),
        underlying_listing_exchange=a.text("underlyingListingExchange"),
        trade_date=a.date("tradeDate"),
        settle_date=a.date("settleDateTarget"),
        report_date=a.date("reportDate"),
        # Activity exports use dateTime; older configurations only tradeTime
        date_time=a.text("dateTime", "tradeTime"),
        order_time=a.text("orderTime"),
        buy_sell=a.code("buySell", BuySell),
        open_close=a.code("openCloseIndicator", OpenClose),
        transaction_type=a.code("transactionType", TradeType),
        order_type=a.code("orderType", OrderType),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
        exchange=a.text("exchange"),
        quantity=a.decimal("quantity"),
        price=a.decimal("tradePrice", "price"),
        amount=a.decimal("amount"),
        trade_money=a.decimal("tradeMoney"),
        proceeds=a.decimal("proceeds"),
        cost=a.decimal("cost"),
        close_price=a.decimal("closePrice"),
        commission=a.decimal("ibCommission", "commission"),
        commission_currency=a.text("ibCommissionCurrency"),
        taxes=a.decimal("taxes"),
        net_cash=a.decimal("netCash"),
        accrued_int=a.decimal("accruedInt"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
        fifo_pnl_realized=a.decimal("fifoPnlRealized"),
        mtm_pnl=a.decimal("mtmPnl"),
        fx_pnl=a.decimal("fxPnl"),
        orig_trade_date=a.date("origTradeDate"),
        orig_trade_price=a.decimal("origTradePrice"),
        orig_trade_id=a.text("origTradeID"),
        orig_transaction_id=a.text("origTransactionID"),
        orig_order_id=a.text("origOrderID"),
        holding_period_date_time=a.text("holdingPeriodDateTime"),
        open_date_time=a.text("openDateTime"),
        when_realized=a.text("whenRealized"),
        when_reopened=a.text("whenReopened"),
        notes=a.codes("notes", TransactionCode),
        trade_id=a.text("tradeID"),
        ib_order_id=a.text("ibOrderID"),
        exec_id=a.text("execID"),
        ib_exec_id=a.text("ibExecID"),
        brokerage_order_id=a.text("brokerageOrderID"),
        order_reference=a.text("orderReference"),
        related_trade_id=a.text("relatedTradeID"),
        related_transaction_id=a.text("relatedTransactionID"),
        is_api_order=a.boolean("isAPIOrder"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
    )


def decode_position(elem: ET.Element) -> Position:
    a = AttributeReader(elem)
    return Position(
        account_id=a.required_text("accountId"),
        conid=a.required_text("conid"),
        symbol=a.required_text("symbol"),
        asset_category=a.required_code("assetCategory", AssetCategory),
        quantity=a.required_decimal("position"),
        mark_price=a.required_decimal("markPrice"),
        position_value=a.required_decimal("positionValue"),
        report_date=a.required_date("reportDate"),
        description=a.text("description"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
        cusip=a.text("cusip"),
        isin=a.text("isin"),
        figi=a.text("figi"),
        security_id=a.text("securityID"),
        security_id_type=a.code("securityIDType", SecurityIdType),
        sub_category=a.code("subCategory", SubCategory),
        listing_exchange=a.text("listingExchange"),
        issuer=a.text("issuer"),
        multiplier=a.decimal("multiplier"),
        strike=a.decimal("strike"),
        expiry=a.date("expiry"),
        put_call=a.code("putCall", PutCall),
        underlying_conid=a.text("underlyingConid"),
        underlying_symbol=a.text("underlyingSymbol"),
        side=a.code("side", LongShort),
        open_price=a.decimal("openPrice"),
        cost_basis_price=a.decimal("costBasisPrice"),
        cost_basis_money=a.decimal("costBasisMoney"),
        fifo_pnl_unrealized=a.decimal("fifoPnlUnrealized"),
        percent_of_nav=a.decimal("percentOfNAV"),
        accrued_int=a.decimal("accruedInt"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
        holding_period_date_time=a.text("holdingPeriodDateTime"),
        open_date_time=a.text("openDateTime"),
        originating_transaction_id=a.text("originatingTransactionID"),
        originating_order_id=a.text("originatingOrderID"),
        code=a.codes("code", TransactionCode),
        vesting_date=a.date("vestingDate"),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
    )


def decode_cash_transaction(elem: ET.Element) -> CashTransaction:
    a = AttributeReader(elem)
    return CashTransaction(
        account_id=a.required_text("accountId"),
        amount=a.required_decimal("amount"),
        currency=a.required_text("currency"),
        transaction_id=a.text("transactionID"),
        transaction_type=a.code("type", CashTransactionType),
        description=a.text("description"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
        transaction_date=a.date("date"),
        date_time=a.text("dateTime"),
        settle_date=a.date("settleDate"),
        ex_date=a.date("exDate"),
        report_date=a.date("reportDate"),
        available_for_trading_date=a.date("availableForTradingDate"),
        conid=a.text("conid"),
        symbol=a.text("symbol"),
        asset_category=a.code("assetCategory", AssetCategory),
        cusip=a.text("cusip"),
        isin=a.text("isin"),
        figi=a.text("figi"),
        security_id=a.text("securityID"),
        security_id_type=a.code("securityIDType", SecurityIdType),
        sub_category=a.code("subCategory", SubCategory),
        listing_exchange=a.text("listingExchange"),
        issuer=a.text("issuer"),
        multiplier=a.decimal("multiplier"),
        strike=a.decimal("strike"),
        expiry=a.date("expiry"),
        put_call=a.code("putCall", PutCall),
        underlying_conid=a.text("underlyingConid"),
        underlying_symbol=a.text("underlyingSymbol"),
        code=a.codes("code", TransactionCode),
        action_id=a.text("actionID"),
        trade_id=a.text("tradeID"),
        client_reference=a.text("clientReference"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
    )


def decode_corporate_action(elem: ET.Element) -> CorporateAction:
    a = AttributeReader(elem)
    return CorporateAction(
        account_id=a.required_text("accountId"),
        conid=a.required_text("conid"),
        symbol=a.required_text("symbol"),
        report_date=a.required_date("reportDate"),
        transaction_id=a.text("transactionID"),
        action_type=a.code("type", CorporateActionType),
        description=a.text("description"),
        action_date=a.date("date"),
        date_time=a.text("dateTime"),
        ex_date=a.date("exDate"),
        pay_date=a.date("payDate"),
        record_date=a.date("recordDate"),
        asset_category=a.code("assetCategory", AssetCategory),
        cusip=a.text("cusip"),
        isin=a.text("isin"),
        figi=a.text("figi"),
        security_id=a.text("securityID"),
        security_id_type=a.code("securityIDType", SecurityIdType),
        sub_category=a.code("subCategory", SubCategory),
        listing_exchange=a.text("listingExchange"),
        issuer=a.text("issuer"),
        multiplier=a.decimal("multiplier"),
        strike=a.decimal("strike"),
        expiry=a.date("expiry"),
        put_call=a.code("putCall", PutCall),
        underlying_conid=a.text("underlyingConid"),
        underlying_symbol=a.text("underlyingSymbol"),
        quantity=a.decimal("quantity"),
        amount=a.decimal("amount"),
        proceeds=a.decimal("proceeds"),
        value=a.decimal("value"),
        cost=a.decimal("cost"),
        fifo_pnl_realized=a.decimal("fifoPnlRealized"),
        mtm_pnl=a.decimal("mtmPnl"),
        currency=a.text("currency"),
        fx_rate_to_base=a.decimal("fxRateToBase"),
        code=a.codes("code", TransactionCode),
        action_id=a.text("actionID"),
        level_of_detail=a.code("levelOfDetail", LevelOfDetail),
        acct_alias=a.text("acctAlias"),
        model=a.text("model"),
    )


def decode_security_info(elem: ET.Element) -> SecurityInfo:
    a = AttributeReader(elem)
    return SecurityInfo(
        conid=a.required_text("conid"),
        symbol=a.required_text("symbol"),
        asset_category=a.required_code("assetCategory", AssetCategory),
        description=a.text("description"),
        security_id=a.text("securityID"),
        security_id_type=a.code("securityIDType", SecurityIdType),
        cusip=a.text("cusip"),
        isin=a.text("isin"),
        figi=a.text("figi"),
        sedol=a.text("sedol"),
        currency=a.text("currency"),
        listing_exchange=a.text("listingExchange"),
        issuer=a.text("issuer"),
        issuer_country_code=a.text("issuerCountryCode"),
        sub_category=a.code("subCategory", SubCategory),
        multiplier=a.decimal("multiplier"),
        strike=a.decimal("strike"),
        expiry=a.date("expiry"),
        put_call=a.code("putCall", PutCall),
        underlying_conid=a.text("underlyingConid"),
        underlying_symbol=a.text("underlyingSymbol"),
        underlying_security_id=a.text("underlyingSecurityID"),
        underlying_listing_exchange=a.text("underlyingListingExchange"),
        maturity=a.date("maturity"),
        principal_adjust_factor=a.decimal("principalAdjustFactor"),
        delivery_month=a.text("deliveryMonth"),
        code=a.codes("code", TransactionCode),
    )


def decode_conversion_rate(elem: ET.Element) -> ConversionRate:
    a = AttributeReader(elem)
    return ConversionRate(
        report_date=a.required_date("reportDate"),
        from_currency=a.required_text("fromCurrency"),
        to_currency=a.required_text("toCurrency"),
        rate=a.required_decimal("rate"),
    )
