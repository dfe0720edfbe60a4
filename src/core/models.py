"""SQLAlchemy ORM models for the seeded entities."""
from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from core.db import Base


# =============================================================================
# Enums
# =============================================================================


class AccountRole(str, enum.Enum):
    """Account roles for authorization."""
    ADMIN = "admin"
    USER = "user"


# =============================================================================
# Account Model
# =============================================================================


class Account(Base):
    """Application account. The email is the natural key."""
    __tablename__ = "account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default=AccountRole.USER.value, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


# =============================================================================
# CatalogItem Model
# =============================================================================


class CatalogItem(Base):
    """
    A product in the catalog.

    Prices are stored as fixed-point decimals; stock counts are whole units.
    """
    __tablename__ = "catalog_item"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Pricing
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Inventory
    stock_current: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_minimum: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_catalog_item_price_non_negative"),
        CheckConstraint("cost >= 0", name="ck_catalog_item_cost_non_negative"),
        CheckConstraint("stock_current >= 0", name="ck_catalog_item_stock_current_non_negative"),
        CheckConstraint("stock_minimum >= 0", name="ck_catalog_item_stock_minimum_non_negative"),
    )


# =============================================================================
# Contact Model
# =============================================================================


class Contact(Base):
    """A customer contact."""
    __tablename__ = "contact"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
