"""
Uniform JSON envelope for every API response.

    { "success": bool, "data": ..., "error": str | [str], "count": int }

register_exception_handlers() wires the error taxonomy from
apps.core.exceptions (plus Django/Ninja validation errors) onto a NinjaAPI
instance so that views only ever return the success shape.
"""
import logging
from typing import Any, List, Optional, Union

from django.core.exceptions import ValidationError as ModelValidationError
from django.http import Http404, HttpRequest
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError as RequestValidationError

from .exceptions import InvalidIdentifier, NotFound

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


def success(data: Any, count: Optional[int] = None) -> dict:
    body = {"success": True, "data": data}
    if count is not None:
        body["count"] = count
    return body


def failure(error: Union[str, List[str]]) -> dict:
    return {"success": False, "error": error}


def _request_error_messages(exc: RequestValidationError) -> List[str]:
    """Flatten pydantic error dicts into "<field>: <message>" strings."""
    messages = []
    for error in exc.errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "payload")]
        field = ".".join(loc)
        msg = error.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return messages or ["Invalid request"]


def register_exception_handlers(api: NinjaAPI) -> None:
    """
    Map exceptions to enveloped error responses.

    Handlers are looked up along the exception's MRO, so InvalidIdentifier
    (a NotFound subclass) resolves to 400 before NotFound's 404.
    """

    @api.exception_handler(InvalidIdentifier)
    def invalid_identifier(request: HttpRequest, exc: InvalidIdentifier):
        return api.create_response(request, failure(exc.message), status=400)

    @api.exception_handler(NotFound)
    def not_found(request: HttpRequest, exc: NotFound):
        return api.create_response(request, failure(exc.message), status=404)

    @api.exception_handler(Http404)
    def http_404(request: HttpRequest, exc: Http404):
        return api.create_response(request, failure("Not found"), status=404)

    @api.exception_handler(ModelValidationError)
    def model_validation_error(request: HttpRequest, exc: ModelValidationError):
        logger.debug(f"Validation failed on {request.method} {request.path}: {exc.messages}")
        return api.create_response(request, failure(exc.messages), status=400)

    @api.exception_handler(RequestValidationError)
    def request_validation_error(request: HttpRequest, exc: RequestValidationError):
        return api.create_response(request, failure(_request_error_messages(exc)), status=400)

    @api.exception_handler(HttpError)
    def http_error(request: HttpRequest, exc: HttpError):
        return api.create_response(request, failure(str(exc)), status=exc.status_code)

    @api.exception_handler(Exception)
    def server_error(request: HttpRequest, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}: {exc}")
        return api.create_response(request, failure(SERVER_ERROR_MESSAGE), status=500)
