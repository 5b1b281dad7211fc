# ibkr_flex/db/models.py
"""
SQLModel definitions for storing decoded executions.
Designed for SQLite locally, PostgreSQL in production.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional
import uuid

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel


class Account(SQLModel, table=True):
    """IBKR account the executions belong to."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    account_number: str = Field(unique=True, index=True)  # e.g., U12345678
    currency: str = Field(default="USD")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    executions: List["Execution"] = Relationship(back_populates="account", cascade_delete=True)


class Execution(SQLModel, table=True):
    """One stored trade execution, keyed by its IBKR transaction id."""
    __tablename__ = "execution"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    account_id: str = Field(foreign_key="account.id", index=True)

    # IBKR identifiers (unique constraint on account + transaction id prevents duplicates)
    transaction_id: str = Field(index=True)
    trade_id: Optional[str] = Field(default=None)
    conid: str = Field(index=True)
    symbol: str = Field(index=True)
    asset_category: str = Field()

    # Timestamp (stored in UTC)
    ts_utc: Optional[datetime] = Field(default=None, index=True)
    ts_raw: Optional[str] = Field(default=None)  # Raw string from IBKR (for audit)
    trade_date: Optional[date] = Field(default=None)

    # Execution details, exact decimals
    side: Optional[str] = Field(default=None)  # BUY or SELL
    quantity: Optional[Decimal] = Field(default=None, max_digits=28, decimal_places=10)
    price: Optional[Decimal] = Field(default=None, max_digits=28, decimal_places=10)
    proceeds: Optional[Decimal] = Field(default=None, max_digits=28, decimal_places=10)
    commission: Optional[Decimal] = Field(default=None, max_digits=28, decimal_places=10)  # Negative in IBKR data
    fifo_pnl_realized: Optional[Decimal] = Field(default=None, max_digits=28, decimal_places=10)

    exchange: Optional[str] = Field(default=None)
    order_type: Optional[str] = Field(default=None)
    currency: Optional[str] = Field(default=None)
    notes: str = Field(default="")  # ';'-joined note codes

    __table_args__ = (
        UniqueConstraint("account_id", "transaction_id", name="uq_account_transaction"),
    )

    account: Account = Relationship(back_populates="executions")
