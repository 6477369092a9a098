"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the catalog's error
taxonomy. Services raise BadRequestError and DuplicateError; NotFoundError is
raised only by routers, since service reads return None for missing records.

Usage:
    from catalog.utils.exceptions import BadRequestError
    raise BadRequestError("Creator name cannot be empty")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised by routers when a service read returns None.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 작품 식별 코드 중복 시 사용.

    409 Conflict exception.
    Raised when a work's identifying code is already used by another work.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 검증/전제 조건 실패 시 사용.

    400 Bad Request exception.
    Raised for validation and precondition failures: blank required text,
    a missing or unknown creator reference, or an update targeting an id
    that does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
