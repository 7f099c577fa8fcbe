# backend/errors.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("errors")

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


# =====================================================
# 🔹 Errores de la aplicación
# =====================================================
class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Solicitud inválida"
    first = errors[0]
    # loc viene como ("body", "title") o ("query", "status")
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    msg = first.get("msg", "valor inválido")
    return f"{field}: {msg}" if field else msg


# =====================================================
# 🔹 Handlers globales
# =====================================================
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
        return error_response(exc.status_code, INTERNAL_ERROR_MESSAGE)
    logger.warning(f"⚠️ {request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = _describe_validation_error(exc)
    logger.info(f"🧩 Validación fallida en {request.method} {request.url.path}: {message}")
    return error_response(400, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Error inesperado en {request.method} {request.url.path}")
    return error_response(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PyMongoError, unexpected_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
