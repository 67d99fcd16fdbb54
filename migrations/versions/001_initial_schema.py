"""Initial schema - create all ledger tables

Revision ID: 001
Revises:
Create Date: 2025-10-27 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create locations table
    op.create_table(
        'locations',
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('province', sa.Text(), nullable=False),
        sa.Column('city', sa.Text(), nullable=False),
        sa.Column('zip_code', sa.Text(), nullable=False),
        sa.Column('street_address', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('location_id', name='pk_locations'),
        sqlite_autoincrement=True
    )

    # Create users table
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('user_fullname', sa.Text(), nullable=False),
        sa.Column('occupation', sa.Text(), nullable=True),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('contact_number', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('password', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.CheckConstraint(
            "occupation IN ('Restaurant', 'Grocery Store', 'Farm', 'Bakery', 'Manufacturer', 'Other', '')",
            name='ck_users_occupation'
        ),
        sa.CheckConstraint(
            "contact_number GLOB '[0-9]*' OR contact_number GLOB '+[0-9]*'",
            name='ck_users_contact_number'
        ),
        sa.ForeignKeyConstraint(['location_id'], ['locations.location_id'],
                                name='fk_users_location_id_locations', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('user_id', name='pk_users'),
        sa.UniqueConstraint('email', name='uq_users_email'),
        sqlite_autoincrement=True
    )

    # Create user_roles table
    op.create_table(
        'user_roles',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('role', sa.Text(), nullable=False),
        sa.CheckConstraint("role IN ('Supplier', 'Recipient')", name='ck_user_roles_role'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'],
                                name='fk_user_roles_user_id_users', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', 'role', name='pk_user_roles')
    )
    op.create_index('idx_user_roles_user_id', 'user_roles', ['user_id'])

    # Create food_items table
    op.create_table(
        'food_items',
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('food_type', sa.Text(), nullable=False),
        sa.Column('food_name', sa.Text(), nullable=False),
        sa.Column('quantity_available', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('expiry_date', sa.Date(), nullable=False),
        sa.Column('delivery_option', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.Text(), server_default='Unselected', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.CheckConstraint(
            "food_type IN ('Vegetables', 'Fruits', 'Dairy', 'Bakery', 'Meat', 'Grains', 'Beverages', 'Other')",
            name='ck_food_items_food_type'
        ),
        sa.CheckConstraint("delivery_option IN ('Pickup', 'Delivery')", name='ck_food_items_delivery_option'),
        sa.CheckConstraint(
            "status IN ('Unselected', 'Pending', 'Selected', 'Completed')",
            name='ck_food_items_status'
        ),
        sa.CheckConstraint("quantity_available >= 0", name='ck_food_items_quantity_available'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'],
                                name='fk_food_items_user_id_users', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['location_id'], ['locations.location_id'],
                                name='fk_food_items_location_id_locations', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('item_id', name='pk_food_items'),
        sqlite_autoincrement=True
    )
    op.create_index('idx_food_items_status', 'food_items', ['status'])
    op.create_index('idx_food_items_user_id', 'food_items', ['user_id'])

    # Create requests table
    op.create_table(
        'requests',
        sa.Column('request_id', sa.Integer(), nullable=False),
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('recipient_id', sa.Integer(), nullable=False),
        sa.Column('quantity_needed', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('urgency_level', sa.Text(), server_default='Medium', nullable=True),
        sa.Column('status', sa.Text(), server_default='Pending', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.CheckConstraint("urgency_level IN ('Low', 'Medium', 'High')", name='ck_requests_urgency_level'),
        sa.CheckConstraint(
            "status IN ('Pending', 'Selected', 'Completed', 'Cancelled')",
            name='ck_requests_status'
        ),
        sa.ForeignKeyConstraint(['item_id'], ['food_items.item_id'],
                                name='fk_requests_item_id_food_items', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['recipient_id'], ['users.user_id'],
                                name='fk_requests_recipient_id_users', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('request_id', name='pk_requests'),
        sqlite_autoincrement=True
    )
    op.create_index('idx_requests_item_id', 'requests', ['item_id'])
    op.create_index('idx_requests_recipient_id', 'requests', ['recipient_id'])

    # Create transactions table
    op.create_table(
        'transactions',
        sa.Column('transaction_id', sa.Integer(), nullable=False),
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('recipient_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('status', sa.Text(), server_default='In-Progress', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.CheckConstraint("status IN ('In-Progress', 'Completed')", name='ck_transactions_status'),
        sa.ForeignKeyConstraint(['item_id'], ['food_items.item_id'],
                                name='fk_transactions_item_id_food_items', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['supplier_id'], ['users.user_id'],
                                name='fk_transactions_supplier_id_users', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['recipient_id'], ['users.user_id'],
                                name='fk_transactions_recipient_id_users', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('transaction_id', name='pk_transactions'),
        sa.UniqueConstraint('item_id', name='uq_transactions_item_id'),
        sqlite_autoincrement=True
    )
    op.create_index('idx_transactions_item_id', 'transactions', ['item_id'])


def downgrade() -> None:
    # Drop tables in reverse order
    op.drop_table('transactions')
    op.drop_table('requests')
    op.drop_table('food_items')
    op.drop_table('user_roles')
    op.drop_table('users')
    op.drop_table('locations')
