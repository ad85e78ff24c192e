from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, DateTime, ForeignKey, BigInteger, Enum as SAEnum
from datetime import datetime
from enum import Enum
from order_service.db.session import Base

class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"

class Product(Base):
    # Priced against at checkout; loaded by scripts/seed.py, never written by the order handlers.
    __tablename__ = "products"
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(240), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), default="")
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)  # cents

class Order(Base):
    __tablename__ = "orders"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user: Mapped[str] = mapped_column(String(255), index=True)
    status: Mapped[OrderStatus] = mapped_column(SAEnum(OrderStatus), default=OrderStatus.PENDING)
    subtotal: Mapped[int] = mapped_column(BigInteger)
    tax: Mapped[int] = mapped_column(BigInteger)
    shipping_fee: Mapped[int] = mapped_column(BigInteger)
    total: Mapped[int] = mapped_column(BigInteger)
    currency: Mapped[str] = mapped_column(String(3), default="usd")
    client_secret: Mapped[str] = mapped_column(String(255))
    payment_intent_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(), default=lambda: datetime.utcnow())
    updated_at: Mapped[datetime] = mapped_column(DateTime(), default=lambda: datetime.utcnow())

    order_items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.position")

class OrderItem(Base):
    __tablename__ = "order_items"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id", ondelete="CASCADE"))
    position: Mapped[int] = mapped_column(Integer)  # index within the submitted cart
    product_id: Mapped[str] = mapped_column(String(64))
    amount: Mapped[int] = mapped_column(Integer)
    name: Mapped[str] = mapped_column(String(240))
    price: Mapped[int] = mapped_column(BigInteger)
    image: Mapped[str] = mapped_column(String(1024), default="")

    order = relationship("Order", back_populates="order_items")
