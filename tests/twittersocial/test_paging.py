"""Tests for pagination parameter encoding."""

import pytest

from twittersocial.paging import build_paging_params


class TestBuildPagingParams:
    def test_page_and_count_only(self):
        assert build_paging_params(1, 20) == {"page": 1, "count": 20}

    def test_since_and_max_id(self):
        assert build_paging_params(3, 12, 112233, 332211) == {
            "page": 3,
            "count": 12,
            "since_id": 112233,
            "max_id": 332211,
        }

    def test_zero_ids_are_omitted(self):
        assert build_paging_params(2, 5, since_id=0, max_id=99) == {
            "page": 2,
            "count": 5,
            "max_id": 99,
        }

    def test_negative_ids_are_omitted(self):
        assert build_paging_params(1, 5, since_id=-1) == {"page": 1, "count": 5}

    def test_custom_size_param(self):
        assert build_paging_params(1, 50, size_param="rpp") == {"page": 1, "rpp": 50}

    def test_param_order(self):
        params = build_paging_params(1, 20, 1, 2)
        assert list(params) == ["page", "count", "since_id", "max_id"]

    @pytest.mark.parametrize(("page", "page_size"), [(0, 20), (-1, 20), (1, 0)])
    def test_invalid_values(self, page, page_size):
        with pytest.raises(ValueError):
            build_paging_params(page, page_size)
