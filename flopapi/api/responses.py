from fastapi.responses import JSONResponse

from flopapi.schemas import ErrorResponse


def error_response(exc: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=str(exc)).model_dump())
