"""SQLAlchemy ORM models."""
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from digiwallet.infrastructure.database.base import Base
from digiwallet.infrastructure.database.types import Money
from digiwallet.modules.common.types import (
    CardStatus,
    EntityStatus,
    TransactionStatus,
    UserRole,
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Relationships are declared with lazy="raise": every cross-entity read goes
# through an explicit repository query instead of on-access I/O.


class User(Base):
    __tablename__ = "user_table"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    full_name = Column(String(100))
    email = Column(String(100))
    role = Column(String(20), nullable=False, default=UserRole.USER.value)
    status = Column(String(20), nullable=False, default=EntityStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    wallet = relationship("Wallet", back_populates="user", uselist=False, lazy="raise")


class Wallet(Base):
    __tablename__ = "wallet"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user_table.id"), nullable=False, unique=True, index=True)
    balance = Column(Money, nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="INR")
    status = Column(String(20), nullable=False, default=EntityStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    user = relationship("User", back_populates="wallet", lazy="raise")
    cards = relationship("Card", back_populates="wallet", lazy="raise")
    transactions = relationship("Transaction", back_populates="wallet", lazy="raise")


class Card(Base):
    __tablename__ = "card"

    id = Column(Integer, primary_key=True, autoincrement=True)
    wallet_id = Column(Integer, ForeignKey("wallet.id"), nullable=False, index=True)
    card_number = Column(String(16), unique=True, nullable=False)
    card_type = Column(String(20), nullable=False)
    expiry_date = Column(Date)
    status = Column(String(20), nullable=False, default=CardStatus.ACTIVE.value)
    issued_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    wallet = relationship("Wallet", back_populates="cards", lazy="raise")


class Category(Base):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)


class Transaction(Base):
    __tablename__ = "transaction"

    id = Column(Integer, primary_key=True, autoincrement=True)
    wallet_id = Column(Integer, ForeignKey("wallet.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=True)
    amount = Column(Money, nullable=False)
    type = Column(String(10), nullable=False)
    status = Column(String(20), nullable=False, default=TransactionStatus.COMPLETED.value)
    reference_id = Column(String(100))
    transaction_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    wallet = relationship("Wallet", back_populates="transactions", lazy="raise")
    category = relationship("Category", lazy="raise")
