from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.core.errors import InvalidInputError, NotFoundError, ServiceError


def _error_body(exc: ServiceError) -> dict:
    return {"success": False, "error_code": exc.code, "message": exc.message}


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """NotFoundError를 404 응답으로 변환"""
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_error_body(exc))


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """InvalidInputError를 422 응답으로 변환"""
    return JSONResponse(
        status_code=422, content=_error_body(exc)
    )
