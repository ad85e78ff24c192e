import json
from kafka import KafkaProducer
from kafka.errors import KafkaError
from order_service.core.config import settings
from order_service.core.logging import get_logger

log = get_logger(__name__)

_producer: KafkaProducer | None = None

def _encode_json(value: dict) -> bytes:
    return json.dumps(value).encode("utf-8")

def get_producer() -> KafkaProducer:
    global _producer
    if _producer is None:
        _producer = KafkaProducer(
            bootstrap_servers=[settings.KAFKA_BOOTSTRAP],
            key_serializer=str.encode,
            value_serializer=_encode_json,
            retries=3,
        )
    return _producer

def publish_order_event(event: dict):
    """Emit to order.events, keyed by order id.

    Events follow an already committed write, so a broker failure is logged
    and dropped rather than failing the request.
    """
    if not settings.ORDER_EVENTS_ENABLED:
        log.debug("order events disabled, dropping %s", event.get("type"))
        return
    try:
        p = get_producer()
        p.send(settings.TOPIC_ORDER_EVENTS, key=str(event.get("order_id", "")), value=event)
        p.flush(5)
    except KafkaError:
        log.exception("could not publish %s for order %s", event.get("type"), event.get("order_id"))

def close():
    global _producer
    if _producer is not None:
        _producer.close()
        _producer = None
