"""페이지 요청 / 정렬 / 결과 컨테이너 단위 테스트.

Unit tests for PageRequest, Sort, Page, Slice and OptionalResult.
"""

import pytest

from app.utils.optional import OptionalResult
from app.utils.pagination import Direction, Order, Page, PageRequest, Slice, Sort


class TestSort:
    """정렬 조건 테스트."""

    def test_by_direction(self):
        sort = Sort.by(Direction.DESC, "username", "age")
        assert sort.orders == [
            Order(property="username", direction=Direction.DESC),
            Order(property="age", direction=Direction.DESC),
        ]
        assert sort.is_sorted

    def test_unsorted(self):
        assert not Sort.unsorted().is_sorted

    def test_parse(self):
        sort = Sort.parse(["username,desc", "age", "id, ASC"])
        assert sort.orders == [
            Order(property="username", direction=Direction.DESC),
            Order(property="age", direction=Direction.ASC),
            Order(property="id", direction=Direction.ASC),
        ]

    def test_parse_none(self):
        assert Sort.parse(None) == Sort()

    def test_parse_single_string(self):
        assert Sort.parse("username,desc") == Sort.by(Direction.DESC, "username")

    @pytest.mark.parametrize("expr", [",desc", "username,sideways"])
    def test_parse_invalid(self, expr):
        with pytest.raises(ValueError):
            Sort.parse([expr])


class TestPageRequest:
    """페이지 요청 테스트."""

    def test_of(self):
        request = PageRequest.of(2, 10, Sort.by_properties("username"))
        assert request.offset == 20
        assert request.sort.is_sorted
        assert request.next().page == 3

    def test_default_sort_is_unsorted(self):
        assert not PageRequest.of(0, 5).sort.is_sorted

    @pytest.mark.parametrize("page,size", [(-1, 10), (0, 0)])
    def test_invalid(self, page, size):
        with pytest.raises(ValueError):
            PageRequest.of(page, size)


class TestPage:
    """Page 메타데이터 테스트."""

    def test_metadata(self):
        page = Page(content=[1, 2, 3], total_elements=5, number=0, size=3)
        assert page.total_pages == 2
        assert page.is_first and not page.is_last
        assert page.has_next and not page.has_previous
        assert page.number_of_elements == 3

    def test_empty(self):
        page = Page(content=[], total_elements=0, number=0, size=3)
        assert page.total_pages == 0
        assert page.is_first and page.is_last
        assert not page.has_next

    def test_map_keeps_metadata(self):
        page = Page(content=[1, 2], total_elements=5, number=2, size=2)
        mapped = page.map(str)
        assert mapped.content == ["1", "2"]
        assert (mapped.total_elements, mapped.number, mapped.size) == (5, 2, 2)
        assert mapped.has_previous and not mapped.has_next


class TestSlice:
    """Slice 테스트."""

    def test_map(self):
        slice_ = Slice(content=[1, 2], number=1, size=2, has_next=True)
        mapped = slice_.map(lambda x: x * 10)
        assert mapped.content == [10, 20]
        assert mapped.has_next and not mapped.is_last
        assert mapped.has_previous and not mapped.is_first


class TestOptionalResult:
    """OptionalResult 테스트."""

    def test_present(self):
        result = OptionalResult.of("memberA")
        assert result.is_present() and bool(result)
        assert result.get() == "memberA"
        assert result.or_else("x") == "memberA"
        assert result.map(str.upper) == OptionalResult.of("MEMBERA")

    def test_empty(self):
        result = OptionalResult.empty()
        assert result.is_empty() and not result
        assert result.or_else("x") == "x"
        assert result.map(str.upper).is_empty()
        with pytest.raises(LookupError):
            result.get()
        with pytest.raises(KeyError):
            result.or_else_raise(KeyError("missing"))
