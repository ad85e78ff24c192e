from alembic import op
import sqlalchemy as sa

revision = "20261017120000"
down_revision = None

order_status = sa.Enum("PENDING", "PAID", name="orderstatus")

def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('name', sa.String(length=240), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False, server_default=''),
        sa.Column('price', sa.BigInteger(), nullable=False),
    )
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user', sa.String(length=255), index=True, nullable=False),
        sa.Column('status', order_status, nullable=False, server_default='PENDING'),
        sa.Column('subtotal', sa.BigInteger(), nullable=False),
        sa.Column('tax', sa.BigInteger(), nullable=False),
        sa.Column('shipping_fee', sa.BigInteger(), nullable=False),
        sa.Column('total', sa.BigInteger(), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False, server_default='usd'),
        sa.Column('client_secret', sa.String(length=255), nullable=False),
        sa.Column('payment_intent_id', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text("(now() at time zone 'utc')")),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text("(now() at time zone 'utc')")),
    )
    op.create_table(
        'order_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.String(length=64), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=240), nullable=False),
        sa.Column('price', sa.BigInteger(), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False, server_default=''),
    )

def downgrade():
    op.drop_table('order_items')
    op.drop_table('orders')
    op.drop_table('products')
    order_status.drop(op.get_bind(), checkfirst=True)
