"""
ORM models for cash desks, employees, payments and payment items.

Employees live in a single table; the ``type`` column is the
discriminator ('Manager' or 'Cashier'). Timestamps are stored as naive
UTC values.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Integer, MetaData, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class CashDeskRecord(Base):
    __tablename__ = "cash_desks"

    number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    def __repr__(self) -> str:
        return f"<CashDeskRecord(number={self.number})>"


class EmployeeRecord(Base):
    __tablename__ = "employees"

    registration_number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False, index=True)

    address_street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address_zip: Mapped[str | None] = mapped_column(String(16), nullable=True)
    address_city: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<EmployeeRecord(registration_number={self.registration_number}, "
            f"type={self.type})>"
        )


class PaymentRecord(Base):
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cash_desk_number: Mapped[int] = mapped_column(
        ForeignKey("cash_desks.number"), nullable=False, index=True
    )
    employee_registration_number: Mapped[int] = mapped_column(
        ForeignKey("employees.registration_number"), nullable=False, index=True
    )
    payment_date_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    payment_type: Mapped[str] = mapped_column(String(16), nullable=False)
    confirmed: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    cash_desk: Mapped[CashDeskRecord] = relationship(lazy="joined", innerjoin=True)
    employee: Mapped[EmployeeRecord] = relationship(lazy="joined", innerjoin=True)

    __table_args__ = (
        Index("idx_payments_cash_desk_date", "cash_desk_number", "payment_date_time"),
    )

    def __repr__(self) -> str:
        return (
            f"<PaymentRecord(id={self.id}, cash_desk={self.cash_desk_number}, "
            f"confirmed={self.confirmed})>"
        )


class PaymentItemRecord(Base):
    __tablename__ = "payment_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    payment_id: Mapped[int] = mapped_column(
        ForeignKey("payments.id"), nullable=False, index=True
    )
    article_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<PaymentItemRecord(id={self.id}, payment_id={self.payment_id})>"


__all__ = [
    "Base",
    "CashDeskRecord",
    "EmployeeRecord",
    "PaymentItemRecord",
    "PaymentRecord",
]
