from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse


class AppError(Exception):
    """Base application error; rendered as {"error": message}."""

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class StorageUnavailable(AppError):
    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message, code="STORAGE_UNAVAILABLE", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class InvalidSignature(AppError):
    def __init__(self, message: str = "Invalid signature"):
        super().__init__(message, code="INVALID_SIGNATURE", status_code=status.HTTP_400_BAD_REQUEST)


class EventNotHandled(AppError):
    def __init__(self, message: str = "Event not handled"):
        super().__init__(message, code="EVENT_NOT_HANDLED", status_code=status.HTTP_400_BAD_REQUEST)


class MalformedPayload(AppError):
    def __init__(self, message: str = "Malformed payload"):
        super().__init__(message, code="MALFORMED_PAYLOAD", status_code=status.HTTP_400_BAD_REQUEST)


class UpdateFailed(AppError):
    def __init__(self, message: str = "Error updating balance"):
        super().__init__(message, code="UPDATE_FAILED", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class FetchFailed(AppError):
    def __init__(self, message: str = "Error fetching balance"):
        super().__init__(message, code="FETCH_FAILED", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class WebhookNotConfigured(AppError):
    def __init__(self, message: str = "Webhook secret not configured"):
        super().__init__(message, code="WEBHOOK_NOT_CONFIGURED", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(exc: AppError) -> ORJSONResponse:
    return ORJSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def app_exception_handler(request: Request, exc: AppError) -> ORJSONResponse:
    from balance_hook.core.logging import get_logger
    get_logger(__name__).info(
        "app_error",
        code=exc.code,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return error_response(exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Validation error", "details": jsonable_encoder(exc.errors())},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    from balance_hook.core.logging import get_logger
    get_logger(__name__).exception("unhandled_exception", exc_info=exc)
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
