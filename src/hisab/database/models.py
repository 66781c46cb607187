"""SQLAlchemy models for hisab database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Account (tenant) model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    wallets = relationship("Wallet", back_populates="account", cascade="all, delete-orphan")
    categories = relationship("Category", back_populates="account", cascade="all, delete-orphan")


class Wallet(Base):
    """Wallet model.

    ``version`` is bumped on every UPDATE and checked in its WHERE clause, so
    a balance write based on a stale read fails instead of clobbering.
    """

    __tablename__ = "wallets"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    wallet_type = Column(String, nullable=False)
    name = Column(String, nullable=False)
    balance = Column(Numeric(14, 2), default=0, nullable=False)
    opening_balance = Column(Numeric(14, 2), default=0, nullable=False)
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __mapper_args__ = {"version_id_col": version}

    # Relationships
    account = relationship("Account", back_populates="wallets")
    transactions = relationship("Transaction", back_populates="wallet")


class Category(Base):
    """Transaction category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    name = Column(String, nullable=False)
    kind = Column(String, nullable=False)
    icon = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    account = relationship("Account", back_populates="categories")
    transactions = relationship("Transaction", back_populates="category")


class Transaction(Base):
    """Transaction model. Rows are soft-deleted through ``deleted_at``."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    amount = Column(Numeric(14, 2), nullable=False)
    kind = Column(String, nullable=False)
    note = Column(String, nullable=True)
    transaction_date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    # Relationships
    wallet = relationship("Wallet", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")


class _DebtEntryColumns:
    """Columns shared by the debt and receivable tables.

    Each table declares its own ``version`` so that settlement and write-off
    updates are checked against the row they were decided on.
    """

    id = Column(Integer, primary_key=True)
    person_name = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    status = Column(String, default="pending", nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class DebtTaken(_DebtEntryColumns, Base):
    """Money the user owes to someone."""

    __tablename__ = "debts_taken"

    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}


class DebtGiven(_DebtEntryColumns, Base):
    """Money someone owes to the user."""

    __tablename__ = "debts_given"

    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
