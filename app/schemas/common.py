"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions.
Includes paging wrappers and the count response shared across API domains.
"""

from typing import Any

from pydantic import BaseModel


class PageResponse(BaseModel):
    """페이지네이션 응답 스키마.

    Paginated response wrapper schema.
    Wraps a list of items with total-count pagination metadata.

    Attributes:
        content: 항목 목록 (List of result items)
        total_elements: 전체 항목 수 (Total count across all pages)
        total_pages: 전체 페이지 수 (Total number of pages)
        number: 현재 페이지 번호 (Current page number, 0-based)
        size: 페이지당 항목 수 (Items per page)
        first: 첫 페이지 여부 (Whether this is the first page)
        last: 마지막 페이지 여부 (Whether this is the last page)
        has_next: 다음 페이지 존재 여부 (Whether a next page exists)
    """

    content: list[Any]  # 결과 항목 목록 (List of items for the current page)
    total_elements: int  # 전체 항목 수 (Total item count)
    total_pages: int  # 전체 페이지 수 (Total pages)
    number: int  # 현재 페이지 — 0부터 시작 (Current page, 0-indexed)
    size: int  # 페이지당 항목 수 (Items per page)
    first: bool
    last: bool
    has_next: bool


class SliceResponse(BaseModel):
    """카운트 없는 페이지 응답 스키마.

    Slice response schema — a page without total-count metadata.
    """

    content: list[Any]
    number: int
    size: int
    first: bool
    last: bool
    has_next: bool


class CountResponse(BaseModel):
    """개수 응답 스키마 (Record count)."""

    count: int
