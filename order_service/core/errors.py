from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status


class OrderServiceError(Exception):
    """Base for errors raised by handlers; rendered as ``{"detail": ...}``."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class BadRequestError(OrderServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(OrderServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthenticatedError(OrderServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class UnauthorizedError(OrderServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class PaymentGatewayError(OrderServiceError):
    status_code = status.HTTP_502_BAD_GATEWAY


class PaymentGatewayUnavailable(PaymentGatewayError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


async def order_service_error_handler(request: Request, exc: OrderServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
