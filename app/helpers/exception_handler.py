import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CustomException(Exception):
    http_code: int
    code: str
    message: str

    def __init__(self, http_code: int = None, code: str = None, message: str = None):
        self.http_code = http_code if http_code else 500
        self.code = code if code else str(self.http_code)
        self.message = message


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: CustomException):
    return error_response(exc.http_code, exc.message)


async def starlette_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and request.url.path.startswith('/api'):
        return error_response(404, 'API endpoint not found')
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        # drop the leading "body"/"query"/"path" segment
        location = [str(part) for part in error.get('loc', ())[1:]]
        message = error.get('msg', 'Invalid value')
        if error.get('type') == 'value_error' and 'error' in error.get('ctx', {}):
            message = str(error['ctx']['error'])
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    logger.info(f"Validation failed on {request.method} {request.url.path}: {messages}")
    return error_response(400, '; '.join(messages) or 'Invalid request')


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(500, 'Internal server error')
