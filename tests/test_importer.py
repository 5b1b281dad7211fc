# tests/test_importer.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from sqlmodel import select

from ibkr_flex.db.models import Account, Execution
from ibkr_flex.io.ibkr_flex_parser import IBKRFlexParser
from ibkr_flex.io.importer import FlexImporter


def test_import_statement_stores_executions(session, test_account, statement):
    total, new, warnings = FlexImporter.import_statement(session, test_account, statement)

    assert (total, new, warnings) == (1, 1, [])
    rows = session.exec(select(Execution)).all()
    assert len(rows) == 1
    row = rows[0]
    assert row.transaction_id == "1000001"
    assert row.symbol == "AAPL"
    assert row.side == "BUY"
    assert row.asset_category == "STK"
    assert Decimal(row.price) == Decimal("185.50")
    assert row.ts_raw == "2025-01-15;093015"


def test_import_is_idempotent(session, test_account, statement):
    FlexImporter.import_statement(session, test_account, statement)
    total, new, warnings = FlexImporter.import_statement(session, test_account, statement)

    assert total == 1
    assert new == 0
    assert warnings == ["Skipped duplicate in DB: AAPL 1000001"]
    assert len(session.exec(select(Execution)).all()) == 1


def test_import_skips_batch_duplicates_and_missing_ids(session, test_account, multi_statement_xml, sample_xml):
    statements = IBKRFlexParser.parse_activity_flex_all(multi_statement_xml)
    trades = list(statements[1].trades) + list(statements[1].trades)
    anonymous = IBKRFlexParser.parse_activity_flex(sample_xml.replace('transactionID="1000001"', ""))
    trades += list(anonymous.trades)

    total, new, warnings = FlexImporter.import_trades(session, test_account, trades)

    assert total == 5
    assert new == 2
    assert len(warnings) == 3
    assert any("missing transaction id" in w for w in warnings)


def test_wash_sales_are_not_imported(session, test_account, interleaved_trades_xml):
    statement = IBKRFlexParser.parse_activity_flex(interleaved_trades_xml)
    FlexImporter.import_statement(session, test_account, statement)

    stored = {row.transaction_id for row in session.exec(select(Execution)).all()}
    assert stored == {"T1", "T2", "T3"}


def test_same_transaction_id_in_other_account(session, test_account, statement):
    other = Account(account_number="U7654321")
    session.add(other)
    session.commit()
    session.refresh(other)

    FlexImporter.import_statement(session, test_account, statement)
    _, new, _ = FlexImporter.import_trades(session, other, statement.trades)
    assert new == 1


def test_import_statement_rejects_foreign_account(session, statement):
    other = Account(account_number="U0000000")
    session.add(other)
    session.commit()
    with pytest.raises(ValueError):
        FlexImporter.import_statement(session, other, statement)


def test_session_factory_creates_tables(monkeypatch):
    from sqlmodel import create_engine
    from sqlmodel.pool import StaticPool

    from ibkr_flex.db import session as db_session

    engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    monkeypatch.setattr(db_session, "engine", engine)

    db_session.create_db_and_tables()
    with db_session.get_session() as s:
        s.add(Account(account_number="U5550001"))
        s.commit()
        assert s.exec(select(Account)).one().account_number == "U5550001"


def test_account_created_at_is_timezone_aware():
    account = Account(account_number="U5550002")
    assert account.created_at.tzinfo is not None
    assert account.created_at.utcoffset().total_seconds() == 0


def test_import_compact_date_with_colon_time(session, test_account, sample_xml):
    xml = sample_xml.replace('dateTime="2025-01-15;093015"', 'dateTime="20250115;09:30:15"')
    statement = IBKRFlexParser.parse_activity_flex(xml)

    total, new, warns = FlexImporter.import_statement(session, test_account, statement)

    assert (total, new, warns) == (1, 1, [])
    row = session.exec(select(Execution)).one()
    assert row.ts_raw == "20250115;09:30:15"
    assert row.ts_utc.replace(tzinfo=None) == datetime(2025, 1, 15, 14, 30, 15)


def test_unparseable_timestamp_keeps_execution(session, test_account, multi_statement_xml, sample_xml):
    xml = sample_xml.replace('dateTime="2025-01-15;093015"', 'dateTime="mid-morning"')
    bad = IBKRFlexParser.parse_activity_flex(xml).trades
    good = IBKRFlexParser.parse_activity_flex_all(multi_statement_xml)[1].trades

    total, new, warns = FlexImporter.import_trades(session, test_account, list(bad) + list(good))

    assert (total, new) == (3, 3)
    assert warns == ["Unparsed timestamp for AAPL 1000001: mid-morning"]
    rows = {row.transaction_id: row for row in session.exec(select(Execution)).all()}
    assert rows["1000001"].ts_utc is None
    assert rows["1000001"].ts_raw == "mid-morning"
    assert all(rows[t.transaction_id].ts_utc is not None for t in good)
