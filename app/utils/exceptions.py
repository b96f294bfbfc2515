"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error cases the
service layer reports. Repository-level failures (integrity errors, lock
timeouts, multiple rows for a single-result query) are raised as SQLAlchemy
exceptions; services translate the ones a client can cause.

Usage:
    from app.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Member not found")
    raise BadRequestError("No property 'foo' found for type Member")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested member or team does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    """409 Conflict 예외 — 단건 조회에 여러 리소스가 일치할 때 사용.

    409 Conflict exception.
    Raised when a lookup that expects one resource matches several
    (e.g. a username shared by two members).

    Args:
        detail: 오류 메시지 (Error message, default: "Multiple resources match")
    """

    def __init__(self, detail: str = "Multiple resources match") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. unknown sort property, reference to a team that does not exist).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
