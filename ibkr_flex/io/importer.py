# ibkr_flex/io/importer.py
"""Idempotent import logic for decoded IBKR trades."""

from datetime import datetime
from typing import List, Optional, Sequence, Tuple, Union

from sqlmodel import Session, select

from ibkr_flex.db.models import Account, Execution
from ibkr_flex.domain.models import Trade
from ibkr_flex.domain.statements import ActivityStatement, TradeConfirmationStatement
from ibkr_flex.io.errors import InvalidValueError
from ibkr_flex.logging_setup import get_logger

logger = get_logger(__name__)


def _code_value(code) -> Optional[str]:
    return code.value if code is not None else None


class FlexImporter:
    """Handles idempotent import of executions."""

    @staticmethod
    def to_execution(account: Account, trade: Trade, ts_utc: Optional[datetime] = None) -> Execution:
        """Map a trade onto a row; ``ts_utc`` is the already-resolved execution time."""
        return Execution(
            account_id=account.id,
            transaction_id=trade.transaction_id,
            trade_id=trade.trade_id,
            conid=trade.conid,
            symbol=trade.symbol,
            asset_category=trade.asset_category.value,
            ts_utc=ts_utc,
            ts_raw=trade.date_time,
            trade_date=trade.trade_date,
            side=_code_value(trade.buy_sell),
            quantity=trade.quantity,
            price=trade.price,
            proceeds=trade.proceeds,
            commission=trade.commission,
            fifo_pnl_realized=trade.fifo_pnl_realized,
            exchange=trade.exchange,
            order_type=_code_value(trade.order_type),
            currency=trade.currency,
            notes=";".join(code.value for code in trade.notes),
        )

    @staticmethod
    def import_trades(
        session: Session,
        account: Account,
        trades: Sequence[Trade],
    ) -> Tuple[int, int, List[str]]:
        """
        Import decoded trades into database.

        Idempotent rules:
        - Skip if execution already exists in DB for this account (account_id, transaction_id).
        - Skip duplicates within the same batch.
        - Skip trades without a transaction id; they cannot be deduplicated.
        - Only executions are stored: pass ``statement.trades``, never wash sales.
        - An unparseable ``dateTime`` keeps the row with ``ts_utc`` unset and a warning.
        """
        warnings: List[str] = []
        newly_inserted = 0

        stmt = select(Execution.transaction_id).where(Execution.account_id == account.id)
        existing_ids = set(session.exec(stmt).all())

        seen_in_batch = set()

        for trade in trades:
            txn_id = (trade.transaction_id or "").strip()
            if not txn_id:
                warnings.append(f"Skipped trade with missing transaction id: {trade.symbol}")
                continue

            if txn_id in seen_in_batch:
                warnings.append(f"Skipped duplicate in batch: {trade.symbol} {txn_id}")
                continue
            seen_in_batch.add(txn_id)

            if txn_id in existing_ids:
                warnings.append(f"Skipped duplicate in DB: {trade.symbol} {txn_id}")
                continue

            try:
                ts_utc = trade.executed_at_utc
            except InvalidValueError:
                warnings.append(f"Unparsed timestamp for {trade.symbol} {txn_id}: {trade.date_time}")
                ts_utc = None

            session.add(FlexImporter.to_execution(account, trade, ts_utc))
            newly_inserted += 1
            existing_ids.add(txn_id)

        if newly_inserted:
            session.commit()

        logger.info(
            "Imported %d of %d trades for %s (%d warnings)",
            newly_inserted,
            len(trades),
            account.account_number,
            len(warnings),
        )
        return len(trades), newly_inserted, warnings

    @staticmethod
    def import_statement(
        session: Session,
        account: Account,
        statement: Union[ActivityStatement, TradeConfirmationStatement],
    ) -> Tuple[int, int, List[str]]:
        """Import the execution bucket of a parsed statement; wash sales stay out."""
        if statement.account_id != account.account_number:
            raise ValueError(
                f"Statement account {statement.account_id} does not match {account.account_number}"
            )
        return FlexImporter.import_trades(session, account, statement.trades)
