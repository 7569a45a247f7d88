"""
Create the inventory schema: categories, suppliers, products, orders, roles, users.

All primary keys are plain integers assigned by the application. Foreign keys
restrict deletion of referenced rows.
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_inventory_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('category_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('category_type', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('category_id'),
    )
    op.create_table(
        'suppliers',
        sa.Column('supplier_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('contact_info', sa.String(length=255), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('supplier_id'),
    )
    op.create_table(
        'roles',
        sa.Column('role_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('role_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('role_id'),
    )
    op.create_table(
        'products',
        sa.Column('product_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('sku', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('stock_level', sa.Integer(), nullable=False),
        sa.Column('reorder_level', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['categories.category_id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['supplier_id'], ['suppliers.supplier_id'], ondelete='RESTRICT'),
        sa.CheckConstraint('stock_level >= 0', name='ck_products_stock_level_non_negative'),
        sa.CheckConstraint('reorder_level >= 0', name='ck_products_reorder_level_non_negative'),
        sa.PrimaryKeyConstraint('product_id'),
    )
    op.create_index('idx_products_category_id', 'products', ['category_id'])
    op.create_index('idx_products_supplier_id', 'products', ['supplier_id'])
    op.create_table(
        'orders',
        sa.Column('order_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('order_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(['product_id'], ['products.product_id'], ondelete='RESTRICT'),
        sa.CheckConstraint('quantity > 0', name='ck_orders_quantity_positive'),
        sa.PrimaryKeyConstraint('order_id'),
    )
    op.create_index('idx_orders_product_id', 'orders', ['product_id'])
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['role_id'], ['roles.role_id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index('idx_users_role_id', 'users', ['role_id'])


def downgrade() -> None:
    op.drop_index('idx_users_role_id', table_name='users')
    op.drop_table('users')
    op.drop_index('idx_orders_product_id', table_name='orders')
    op.drop_table('orders')
    op.drop_index('idx_products_supplier_id', table_name='products')
    op.drop_index('idx_products_category_id', table_name='products')
    op.drop_table('products')
    op.drop_table('roles')
    op.drop_table('suppliers')
    op.drop_table('categories')
