# tests/conftest.py
"""Test configuration and fixtures."""

import pytest
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from ibkr_flex.db.models import Account
from ibkr_flex.io.ibkr_flex_parser import IBKRFlexParser


@pytest.fixture(name="session")
def session_fixture():
    """Create in-memory SQLite test database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="test_account")
def test_account_fixture(session: Session):
    """Create test account."""
    account = Account(account_number="U1234567", currency="USD")
    session.add(account)
    session.commit()
    session.refresh(account)
    return account


@pytest.fixture(name="sample_xml")
def sample_xml_fixture():
    """One statement, one AAPL execution, every other section empty."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<FlexQueryResponse queryName="Daily Activity" type="AF" version="3">
    <FlexStatements count="1">
        <FlexStatement accountId="U1234567" fromDate="2025-01-15" toDate="2025-01-15" period="LastBusinessDay" whenGenerated="2025-01-16;083000">
            <Trades>
                <Trade accountId="U1234567" currency="USD" assetCategory="STK" symbol="AAPL"
                       description="APPLE INC" conid="265598" transactionID="1000001" tradeID="0000a1"
                       tradeDate="2025-01-15" dateTime="2025-01-15;093015" settleDateTarget="20250117"
                       buySell="BUY" openCloseIndicator="O" quantity="100" price="185.50"
                       proceeds="-18550" ibCommission="-1.00" ibCommissionCurrency="USD"
                       netCash="-18551.00" exchange="NASDAQ" orderType="LMT" notes=""
                       isAPIOrder="N" levelOfDetail="EXECUTION" />
            </Trades>
            <OpenPositions />
            <CashTransactions />
            <CorporateActions />
        </FlexStatement>
    </FlexStatements>
</FlexQueryResponse>
"""


@pytest.fixture(name="multi_statement_xml")
def multi_statement_xml_fixture():
    """Backfill export wrapping two per-day statements."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<FlexQueryResponse queryName="Backfill" type="AF">
    <FlexStatements count="2">
        <FlexStatement accountId="U1234567" fromDate="20250113" toDate="20250113" whenGenerated="20250114;083000">
            <Trades>
                <Trade accountId="U1234567" assetCategory="STK" symbol="MSFT" conid="272093"
                       transactionID="2000001" buySell="BUY" quantity="10" tradePrice="420.10"
                       dateTime="20250113;100000" currency="USD" />
            </Trades>
            <OpenPositions>
                <OpenPosition accountId="U1234567" assetCategory="STK" symbol="MSFT" conid="272093"
                              position="10" markPrice="421.00" positionValue="4210" reportDate="20250113"
                              side="Long" currency="USD" />
            </OpenPositions>
        </FlexStatement>
        <FlexStatement accountId="U1234567" fromDate="2025-01-14" toDate="2025-01-14" whenGenerated="2025-01-15;083000">
            <Trades>
                <Trade accountId="U1234567" assetCategory="STK" symbol="MSFT" conid="272093"
                       transactionID="2000002" buySell="SELL" quantity="-4" tradePrice="425.00"
                       dateTime="2025-01-14;110000" currency="USD" notes="C;P" />
                <Trade accountId="U1234567" assetCategory="STK" symbol="MSFT" conid="272093"
                       transactionID="2000003" buySell="SELL" quantity="-6" tradePrice="425.20"
                       dateTime="2025-01-14;110005" currency="USD" notes="C" />
            </Trades>
            <OpenPositions />
        </FlexStatement>
    </FlexStatements>
</FlexQueryResponse>
"""


@pytest.fixture(name="interleaved_trades_xml")
def interleaved_trades_xml_fixture():
    """Trades section with every row kind, ordered by symbol rather than tag."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<FlexQueryResponse queryName="Trades" type="AF" version="3">
    <FlexStatements count="1">
        <FlexStatement accountId="U1234567" fromDate="2025-01-01" toDate="2025-01-31">
            <Trades>
                <Order accountId="U1234567" assetCategory="STK" symbol="AAPL" conid="265598"
                       buySell="BUY" quantity="100" levelOfDetail="ORDER" />
                <Trade accountId="U1234567" assetCategory="STK" symbol="AAPL" conid="265598"
                       transactionID="T1" buySell="BUY" quantity="60" tradePrice="185.00" />
                <Trade accountId="U1234567" assetCategory="STK" symbol="AAPL" conid="265598"
                       transactionID="T2" buySell="BUY" quantity="40" tradePrice="185.10" />
                <WashSale accountId="U1234567" assetCategory="STK" symbol="AAPL" conid="265598"
                          transactionID="W1" quantity="-20" notes="W" levelOfDetail="WASH_SALE" />
                <Lot accountId="U1234567" assetCategory="STK" symbol="AAPL" conid="265598"
                     quantity="60" levelOfDetail="CLOSED_LOT" />
                <SymbolSummary accountId="U1234567" assetCategory="STK" symbol="AAPL" conid="265598"
                               quantity="100" levelOfDetail="SYMBOL_SUMMARY" />
                <Trade accountId="U1234567" assetCategory="OPT" symbol="TSLA  250117C00250000" conid="7001"
                       transactionID="T3" buySell="SELL" quantity="-1" tradePrice="12.35" multiplier="100"
                       strike="250" expiry="20250117" putCall="C" underlyingSymbol="TSLA" underlyingConid="76792991"
                       notes="C;W" />
                <WashSale accountId="U1234567" assetCategory="OPT" symbol="TSLA  250117C00250000" conid="7001"
                          transactionID="W2" quantity="1" notes="W" />
                <AssetSummary accountId="U1234567" assetCategory="STK" symbol="" conid="" quantity="100"
                              levelOfDetail="ASSET_SUMMARY" />
            </Trades>
        </FlexStatement>
    </FlexStatements>
</FlexQueryResponse>
"""


@pytest.fixture(name="trade_confirmation_xml")
def trade_confirmation_xml_fixture():
    """Real-time trade confirmation with a reduced field set."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<TradeConfirmationStatement accountId="U1234567">
    <Trades>
        <Trade accountId="U1234567" symbol="AAPL" conid="265598" assetCategory="STK"
               tradeDate="2025-01-15" dateTime="2025-01-15;093015" settleDateTarget="2025-01-17"
               quantity="100" price="150.50" amount="-15050.00" proceeds="-15050.00"
               ibCommission="-1.00" ibCommissionCurrency="USD" netCash="-15051.00"
               currency="USD" fxRateToBase="1" multiplier="1" />
    </Trades>
</TradeConfirmationStatement>
"""


@pytest.fixture(name="statement")
def statement_fixture(sample_xml):
    """The single statement of ``sample_xml``."""
    return IBKRFlexParser.parse_activity_flex(sample_xml)
