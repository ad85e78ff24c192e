from pydantic import AliasChoices, BaseModel, Field
from typing import Optional, List
from datetime import datetime
from order_service.db.models import OrderStatus

# Wire format is camelCase; attributes stay snake_case.

class CartItem(BaseModel):
    product: str
    amount: int = Field(ge=1)

class CreateOrder(BaseModel):
    items: Optional[List[CartItem]] = None
    tax: Optional[int] = Field(default=None, ge=0)
    shipping_fee: Optional[int] = Field(default=None, ge=0, alias="shippingFee")
    class Config: populate_by_name = True

class UpdateOrder(BaseModel):
    payment_intent_id: str = Field(alias="paymentIntentId")
    class Config: populate_by_name = True

class OrderItemRead(BaseModel):
    amount: int
    name: str
    price: int
    image: str
    product: str = Field(validation_alias=AliasChoices("product", "product_id"))
    class Config: from_attributes = True

class OrderRead(BaseModel):
    id: int
    order_items: List[OrderItemRead] = Field(alias="orderItems")
    subtotal: int
    tax: int
    shipping_fee: int = Field(alias="shippingFee")
    total: int
    currency: str
    client_secret: str = Field(alias="clientSecret")
    status: OrderStatus
    payment_intent_id: Optional[str] = Field(default=None, alias="paymentIntentId")
    user: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    class Config:
        from_attributes = True
        populate_by_name = True

class OrderEnvelope(BaseModel):
    order: OrderRead

class CreateOrderResponse(OrderEnvelope):
    client_secret: str = Field(alias="clientSecret")
    class Config: populate_by_name = True

class OrderList(BaseModel):
    orders: List[OrderRead] = []
    count: int
