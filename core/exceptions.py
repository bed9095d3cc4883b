from fastapi import HTTPException, Request, status
from utils.logger import get_logger
from fastapi.responses import JSONResponse

logger = get_logger("Global_Exception")

async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path}
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

class AppException(HTTPException):
    def __init__(self, status_code: int, detail):
        super().__init__(status_code=status_code, detail=detail)

class NotFoundException(AppException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class ForbiddenException(AppException):
    def __init__(self, detail: str = "Forbidden"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

class ConflictException(AppException):
    def __init__(self, detail):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)

class MenuValidationError(AppException):
    """Wraps a pydantic ValidationError raised while rebuilding a menu entry from merged fields."""
    def __init__(self, error):
        errors = [{"loc": list(e["loc"]), "msg": e["msg"]} for e in error.errors()]
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=errors)

class VersionConflict(ConflictException):
    """Raised when a menu write was based on a stale version of the document."""
    def __init__(self, expected: int, current: int):
        self.expected = expected
        self.current = current
        super().__init__(detail={
            "message": "Menu was changed by someone else, reload and try again",
            "expected_version": expected,
            "current_version": current
        })
