"""Unit tests for the response normalizer."""

import pytest

from storeadmin.domain.model.envelope import EnvelopeShape
from storeadmin.domain.model.value_objects import PageInfo
from storeadmin.domain.service.response_normalizer import normalize

PREVIOUS = PageInfo(page=3, page_size=10, total_pages=7, total_items=64)


# ── Spring pages ─────────────────────────────────────────────────────────────


class TestSpringPage:

    def test_zero_based_page_becomes_one_based(self):
        raw = {
            "content": [{"id": 1}, {"id": 2}],
            "pageable": {"pageNumber": 0, "pageSize": 2},
            "totalPages": 5,
            "totalElements": 9,
        }
        result = normalize(raw, PREVIOUS)
        assert result.items == [{"id": 1}, {"id": 2}]
        assert result.page_info == PageInfo(page=1, page_size=2, total_pages=5, total_items=9)
        assert result.shape is EnvelopeShape.SPRING_PAGE

    def test_missing_pagination_uses_defaults(self):
        result = normalize({"content": [{"id": 1}]}, PREVIOUS)
        assert result.page_info == PageInfo(page=1, page_size=10, total_pages=1, total_items=1)

    def test_garbage_pagination_never_raises(self):
        raw = {
            "content": [],
            "pageable": {"pageNumber": -4, "pageSize": "ten"},
            "totalPages": None,
            "totalElements": True,
        }
        result = normalize(raw, PREVIOUS)
        assert result.page_info == PageInfo(page=1, page_size=10, total_pages=1, total_items=0)

    def test_integral_floats_accepted(self):
        raw = {"content": [], "pageable": {"pageNumber": 1.0, "pageSize": 20.0}}
        result = normalize(raw, PREVIOUS)
        assert result.page_info.page == 2
        assert result.page_info.page_size == 20


# ── Envelopes with and without metadata ──────────────────────────────────────


class TestEnveloped:

    def test_metadata_is_trusted(self):
        raw = {
            "data": [{"id": 1}],
            "metadata": {"page": 2, "pageSize": 1, "totalPages": 6, "totalItems": 6},
        }
        result = normalize(raw, PREVIOUS)
        assert result.page_info == PageInfo(page=2, page_size=1, total_pages=6, total_items=6)

    def test_partial_metadata_falls_back(self):
        raw = {"data": [{"id": 1}, {"id": 2}], "metadata": {}}
        result = normalize(raw, PREVIOUS)
        assert result.page_info == PageInfo(page=3, page_size=10, total_pages=1, total_items=2)

    def test_without_metadata_totals_are_derived(self):
        raw = {"data": {"items": [{"id": n} for n in range(25)]}}
        result = normalize(raw, PREVIOUS)
        assert result.page_info.total_items == 25
        assert result.page_info.total_pages == 3
        assert result.page_info.page == PREVIOUS.page
        assert result.page_info.page_size == PREVIOUS.page_size


class TestBareArray:

    def test_totals_derived_from_length(self):
        result = normalize([{"id": n} for n in range(11)], PREVIOUS)
        assert len(result.items) == 11
        assert result.page_info == PageInfo(page=3, page_size=10, total_pages=2, total_items=11)
        assert result.shape is EnvelopeShape.BARE_ARRAY

    def test_empty_array_has_zero_pages(self):
        result = normalize([], PREVIOUS)
        assert result.items == []
        assert result.page_info.total_pages == 0
        assert result.page_info.total_items == 0
        assert result.recognized


class TestResultList:

    def test_result_list_with_extra_shape(self):
        raw = {"result": [{"id": "u1"}]}
        result = normalize(raw, PREVIOUS, (EnvelopeShape.RESULT_LIST,))
        assert result.items == [{"id": "u1"}]
        assert result.shape is EnvelopeShape.RESULT_LIST
        assert result.page_info.total_items == 1


# ── Fallback ─────────────────────────────────────────────────────────────────


class TestUnrecognized:

    @pytest.mark.parametrize("raw", [None, "", 0, "oops", {"message": "hi"}, {"data": None}])
    def test_unrecognized_keeps_previous_page_info(self, raw):
        result = normalize(raw, PREVIOUS)
        assert result.items == []
        assert result.page_info is PREVIOUS
        assert not result.recognized

    def test_items_are_copied(self):
        source = [{"id": 1}]
        result = normalize(source, PREVIOUS)
        result.items.append({"id": 2})
        assert source == [{"id": 1}]


class TestItemsPreserved:

    ITEMS = [{"id": 3}, {"id": 1}, {"id": 2}]

    @pytest.mark.parametrize(
        "raw, extra",
        [
            ({"content": ITEMS}, ()),
            ({"data": ITEMS}, ()),
            ({"data": {"content": ITEMS}}, ()),
            ({"data": {"items": ITEMS}}, ()),
            ({"data": {"result": ITEMS}}, ()),
            (ITEMS, ()),
            ({"result": ITEMS}, (EnvelopeShape.RESULT_LIST,)),
        ],
    )
    def test_items_in_original_order(self, raw, extra):
        assert normalize(raw, PREVIOUS, extra).items == self.ITEMS
