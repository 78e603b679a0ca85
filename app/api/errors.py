"""
Mapowanie błędów na odpowiedzi JSON {message, error?}.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.errors import UserServiceError
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def user_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # zły json / zły typ / złe id w ścieżce -> 400 zamiast domyślnego 422
    logger.info(f"Rejected request {request.method} {request.url.path}: {exc.errors()}")
    if any(err.get("loc", ())[:1] == ("path",) for err in exc.errors()):
        message = "Invalid user id"
    else:
        message = "Name and email are required"
    return JSONResponse(status_code=400, content={"message": message})


def setup_error_handling(app: FastAPI):
    app.add_exception_handler(UserServiceError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
