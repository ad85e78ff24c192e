from datetime import datetime
from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session
from order_service.api.deps import get_db
from order_service.api.schemas import CreateOrder, UpdateOrder, OrderRead, OrderEnvelope, CreateOrderResponse, OrderList
from order_service.core.auth import CurrentUser, get_current_user, require_admin, check_permissions
from order_service.core.config import settings
from order_service.core.errors import BadRequestError, NotFoundError
from order_service.core.logging import get_logger
from order_service.db import models
from order_service.kafka.producer import publish_order_event
from order_service.services.payments import PaymentGateway, get_payment_gateway

log = get_logger(__name__)

router = APIRouter()

def _get_order_or_404(db: Session, order_id: int, detail: str) -> models.Order:
    order = db.get(models.Order, order_id)
    if not order:
        raise NotFoundError(detail)
    return order

def _order_list(orders) -> OrderList:
    return OrderList(orders=[OrderRead.model_validate(o) for o in orders], count=len(orders))

@router.post("/v1/orders", response_model=CreateOrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: CreateOrder,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    if not payload.items:
        raise BadRequestError("No cart items provided.")
    # zero is a valid tax / shipping fee; only absence is rejected
    if payload.tax is None or payload.shipping_fee is None:
        raise BadRequestError("Please provide tax and shipping fee.")

    # One lookup per cart item, in cart order; nothing is written until all resolve.
    order_items = []
    subtotal = 0
    for position, item in enumerate(payload.items):
        product = db.get(models.Product, item.product)
        if not product:
            log.info("order rejected for %s: unknown product %s", user.sub, item.product)
            raise NotFoundError(f"Product with id {item.product} is not found.")
        order_items.append(models.OrderItem(
            position=position,
            product_id=product.id,
            amount=item.amount,
            name=product.name,
            price=product.price,
            image=product.image or "",
        ))
        subtotal += item.amount * product.price

    total = payload.tax + payload.shipping_fee + subtotal

    intent = gateway.charge(amount=total, currency=settings.ORDER_CURRENCY)

    now = datetime.utcnow()
    order = models.Order(
        user=user.sub,
        status=models.OrderStatus.PENDING,
        subtotal=subtotal,
        tax=payload.tax,
        shipping_fee=payload.shipping_fee,
        total=total,
        currency=settings.ORDER_CURRENCY,
        client_secret=intent.client_secret,
        order_items=order_items,
        created_at=now,
        updated_at=now,
    )
    db.add(order); db.commit(); db.refresh(order)
    log.info("order %s created for %s: total=%s %s", order.id, order.user, order.total, order.currency)

    publish_order_event({
        "type": "order.created",
        "order_id": order.id,
        "user": order.user,
        "amount_cents": order.total,
        "currency": order.currency,
        "items": [
            {"product_id": it.product_id, "amount": it.amount, "price": it.price}
            for it in order.order_items
        ],
    })

    return CreateOrderResponse(order=OrderRead.model_validate(order), client_secret=order.client_secret)

@router.get("/v1/orders", response_model=OrderList)
def get_all_orders(_: CurrentUser = Depends(require_admin), db: Session = Depends(get_db)):
    orders = db.execute(select(models.Order).order_by(models.Order.id)).scalars().all()
    return _order_list(orders)

@router.get("/v1/orders/showAllMyOrders", response_model=OrderList)
def get_current_user_orders(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    stmt = select(models.Order).where(models.Order.user == user.sub).order_by(models.Order.id)
    orders = db.execute(stmt).scalars().all()
    return _order_list(orders)

@router.get("/v1/orders/{order_id}", response_model=OrderEnvelope)
def get_single_order(order_id: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    order = _get_order_or_404(db, order_id, f"Order id {order_id} is not found")
    check_permissions(user, order.user)
    return OrderEnvelope(order=OrderRead.model_validate(order))

@router.patch("/v1/orders/{order_id}", response_model=OrderEnvelope)
def update_order(order_id: int, payload: UpdateOrder, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    order = _get_order_or_404(db, order_id, f"Order with id {order_id} is not found.")
    check_permissions(user, order.user)

    # Payment outcome is not verified here; the caller's intent id is trusted.
    order.payment_intent_id = payload.payment_intent_id
    order.status = models.OrderStatus.PAID
    order.updated_at = datetime.utcnow()
    db.add(order); db.commit(); db.refresh(order)
    log.info("order %s marked paid (intent %s)", order.id, order.payment_intent_id)

    publish_order_event({
        "type": "order.paid",
        "order_id": order.id,
        "user": order.user,
        "payment_intent_id": order.payment_intent_id,
    })

    return OrderEnvelope(order=OrderRead.model_validate(order))
