"""init schema

Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "properties",
        sa.Column("property_id", sa.Integer(), primary_key=True),
        sa.Column("property_name", sa.String(length=255), nullable=False),
        sa.Column("owner", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("city", sa.Text(), nullable=True),
        sa.Column("state", sa.Text(), nullable=True),
        sa.Column("zipcode", sa.String(length=10), nullable=True),
        sa.Column("county", sa.Text(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("type", sa.Text(), nullable=True),
        sa.Column("status", sa.Text(), nullable=True),
        sa.Column("income_producing", sa.String(length=3), nullable=True),
        sa.Column("market_value", sa.Float(), nullable=True),
        sa.Column("lat", sa.Float(), nullable=True),
        sa.Column("lng", sa.Float(), nullable=True),
        sa.Column("geocoded_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("address", "city", "state", "zipcode", name="uniq_prop_address"),
    )
    op.create_index("properties_city_state_idx", "properties", ["city", "state"])
    op.create_index("idx_property_lat_lng", "properties", ["lat", "lng"])

    op.create_table(
        "purchase_details",
        sa.Column("purchase_id", sa.Integer(), primary_key=True),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("properties.property_id"), nullable=False, unique=True),
        sa.Column("purchase_price", sa.Float(), nullable=False),
        sa.Column("down_payment", sa.Float(), nullable=True),
        sa.Column("financing_type", sa.Text(), nullable=False),
        sa.Column("acquisition_type", sa.Text(), nullable=False),
        sa.Column("buyer", sa.Text(), nullable=False),
        sa.Column("seller", sa.Text(), nullable=False),
        sa.Column("closing_date", sa.Date(), nullable=False),
        sa.Column("closing_costs", sa.Float(), nullable=False),
        sa.Column("earnest_money", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
    )

    op.create_table(
        "loan_details",
        sa.Column("loan_id", sa.String(length=80), primary_key=True),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("properties.property_id"), nullable=False),
        sa.Column("purchase_id", sa.Integer(), sa.ForeignKey("purchase_details.purchase_id"), nullable=False),
        sa.Column("loan_amount", sa.Float(), nullable=True),
        sa.Column("lender", sa.Text(), nullable=True),
        sa.Column("interest_rate", sa.Float(), nullable=True),
        sa.Column("loan_term", sa.Integer(), nullable=True),
        sa.Column("loan_start", sa.Date(), nullable=True),
        sa.Column("loan_end", sa.Date(), nullable=True),
        sa.Column("amortization_period", sa.Integer(), nullable=True),
        sa.Column("monthly_payment", sa.Float(), nullable=True),
        sa.Column("loan_type", sa.Text(), nullable=True),
        sa.Column("balloon_payment", sa.Boolean(), nullable=True),
        sa.Column("prepayment_penalty", sa.Boolean(), nullable=True),
        sa.Column("refinanced", sa.Boolean(), nullable=True),
        sa.Column("loan_status", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("property_id", "purchase_id", name="loan_details_property_id_purchase_id_key"),
        sa.UniqueConstraint("loan_id", "property_id", name="loan_details_loan_id_property_id_key"),
    )
    op.create_index("ix_loan_details_property_id", "loan_details", ["property_id"])

    op.create_table(
        "rent_log",
        sa.Column("rent_id", sa.Integer(), primary_key=True),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("properties.property_id"), nullable=False),
        sa.Column("month", sa.String(length=20), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("rent_amount", sa.Float(), nullable=False, server_default="0"),
        sa.Column("date_deposited", sa.Date(), nullable=False),
        sa.Column("check_number", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("property_id", "month", "year", name="rent_log_property_id_month_year_key"),
    )

    op.create_table(
        "payment_log",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("properties.property_id"), nullable=False),
        sa.Column("month", sa.String(length=20), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("payment_amount", sa.Float(), nullable=True),
        sa.Column("check_number", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("date_paid", sa.Date(), nullable=True),
        sa.UniqueConstraint("property_id", "month", "year", name="payment_log_property_id_month_year_key"),
    )

    op.create_table(
        "transactions",
        sa.Column("transaction_id", sa.Integer(), primary_key=True),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("properties.property_id"), nullable=False),
        sa.Column("transaction_type", sa.String(length=100), nullable=True),
        sa.Column("notes", sa.String(length=255), nullable=True),
        sa.Column("transaction_amount", sa.Float(), nullable=False),
        sa.Column("transaction_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_transactions_property_id", "transactions", ["property_id"])

    op.create_table(
        "contacts",
        sa.Column("contact_id", sa.Integer(), primary_key=True),
        sa.Column("contact_name", sa.String(length=255), nullable=False),
        sa.Column("contact_phone", sa.String(length=20), nullable=False),
        sa.Column("contact_email", sa.String(length=255), nullable=True),
        sa.Column("contact_type", sa.String(length=100), nullable=True),
        sa.Column("contact_notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "tenant",
        sa.Column("tenant_id", sa.Integer(), primary_key=True),
        sa.Column("property_id", sa.Integer(), sa.ForeignKey("properties.property_id"), nullable=False),
        sa.Column("tenant_name", sa.String(length=255), nullable=True),
        sa.Column("tenant_status", sa.String(length=50), nullable=True, server_default="Inactive"),
        sa.Column("lease_start", sa.Date(), nullable=True),
        sa.Column("lease_end", sa.Date(), nullable=True),
        sa.Column("rent_amount", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("property_id", "tenant_name", "lease_start", name="unique_property_tenant_start"),
    )
    op.create_index("tenant_tenant_status_idx", "tenant", ["tenant_status"])
    op.create_index("tenant_lease_start_lease_end_idx", "tenant", ["lease_start", "lease_end"])


def downgrade():
    op.drop_index("tenant_lease_start_lease_end_idx", table_name="tenant")
    op.drop_index("tenant_tenant_status_idx", table_name="tenant")
    op.drop_table("tenant")
    op.drop_table("contacts")
    op.drop_index("ix_transactions_property_id", table_name="transactions")
    op.drop_table("transactions")
    op.drop_table("payment_log")
    op.drop_table("rent_log")
    op.drop_index("ix_loan_details_property_id", table_name="loan_details")
    op.drop_table("loan_details")
    op.drop_table("purchase_details")
    op.drop_index("idx_property_lat_lng", table_name="properties")
    op.drop_index("properties_city_state_idx", table_name="properties")
    op.drop_table("properties")
