# milkbook/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Numeric, Date, ForeignKey, CheckConstraint, Text, UniqueConstraint
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("sl_no", Integer, nullable=False, unique=True),
    Column("name", String, nullable=False),
    Column("phone", String, nullable=True),
    Column("village", String, nullable=True),
    CheckConstraint("sl_no > 0", name="ck_customers_sl_no_positive"),
)

entries = Table(
    "entries",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("customer_id", Integer, ForeignKey("customers.id"), nullable=False),
    Column("date", Date, nullable=False),
    Column("shift", String(10), nullable=False),
    Column("milk_type", String(10), nullable=False),
    Column("quantity_l", Numeric(12, 3), nullable=False),
    Column("fat", Numeric(5, 2)),
    Column("snf", Numeric(5, 2)),
    Column("rate", Numeric(10, 2), nullable=False),
    Column("rate_source", String(10), nullable=False),
    Column("amount", Numeric(18, 2), nullable=False),
    Column("note", Text),
    # One delivery per customer per collection window.
    UniqueConstraint("customer_id", "date", "shift", name="uq_entries_customer_date_shift"),
    CheckConstraint("shift IN ('MORNING', 'EVENING')", name="ck_entries_shift"),
    CheckConstraint("milk_type IN ('COW', 'BUFFALO', 'MIX')", name="ck_entries_milk_type"),
    CheckConstraint("rate_source IN ('AUTO', 'MANUAL')", name="ck_entries_rate_source"),
    CheckConstraint("quantity_l >= 0", name="ck_entries_quantity_nonneg"),
    CheckConstraint("rate > 0", name="ck_entries_rate_positive"),
)

payments = Table(
    "payments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("customer_id", Integer, ForeignKey("customers.id"), nullable=False),
    Column("date", Date, nullable=False),
    Column("amount", Numeric(18, 2), nullable=False),
    Column("mode", String(10), nullable=False),
    Column("note", Text),
    CheckConstraint("amount >= 0", name="ck_payments_amount_nonneg"),
    CheckConstraint("mode IN ('Cash', 'UPI')", name="ck_payments_mode"),
)

rate_chart = Table(
    "rate_chart",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("milk_type", String(10), nullable=False),
    Column("fat_min", Numeric(5, 2), nullable=False),
    Column("fat_max", Numeric(5, 2), nullable=False),
    Column("snf_min", Numeric(5, 2), nullable=False),
    Column("snf_max", Numeric(5, 2), nullable=False),
    Column("rate", Numeric(10, 2), nullable=False),
    CheckConstraint("fat_min <= fat_max", name="ck_rate_chart_fat_bounds"),
    CheckConstraint("snf_min <= snf_max", name="ck_rate_chart_snf_bounds"),
    CheckConstraint("rate > 0", name="ck_rate_chart_rate_positive"),
)
