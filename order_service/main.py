from fastapi import FastAPI
from order_service.version import VERSION
from order_service.api import routes
from order_service.core.errors import OrderServiceError, order_service_error_handler
from order_service.core.logging import setup_logging, get_logger
from order_service.kafka import producer
from prometheus_fastapi_instrumentator import Instrumentator

setup_logging()
log = get_logger(__name__)

app = FastAPI(title="Order Service", version=VERSION)

instrumentator = Instrumentator()
instrumentator.instrument(app).expose(
    app,
    include_in_schema=False,
    endpoint="/order/metrics",
    should_gzip=True,
)

app.add_exception_handler(OrderServiceError, order_service_error_handler)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/order/health")
def order_health():
    return {"status": "ok"}

@app.get("/v1/_info")
def info():
    return {"service": "order", "version": VERSION}

@app.on_event("startup")
async def startup_event():
    for route in app.routes:
        if hasattr(route, "methods") and hasattr(route, "path"):
            log.info("route %s %s", sorted(route.methods), route.path)

@app.on_event("shutdown")
async def shutdown_event():
    producer.close()

app.include_router(routes.router, prefix="/order", tags=["orders"])
