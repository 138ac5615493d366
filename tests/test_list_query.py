import pytest

from core.domain.models import ListRequestParams
from core.services.list_query import (
    CATEGORY_FILTER_KEY,
    LIKE_SORT_KEY,
    build_list_query,
    populate_directives,
)


def test_default_scenario_matches_expected_map():
    query = build_list_query(ListRequestParams(start=1, limit=3))

    assert query == {
        "populate[0]": "author.avatar",
        "populate[1]": "categories",
        "populate[2]": "cover",
        "populate[3]": "video",
        "pagination[page]": 1,
        "pagination[pageSize]": 3,
    }


def test_no_params_uses_model_defaults():
    assert build_list_query() == build_list_query(ListRequestParams(start=1, limit=3))


@pytest.mark.parametrize("start,limit", [(1, 1), (2, 5), (40, 100)])
def test_pagination_keys_are_exact_ints(start, limit):
    query = build_list_query(ListRequestParams(start=start, limit=limit))

    assert query["pagination[page]"] == start
    assert query["pagination[pageSize]"] == limit
    assert isinstance(query["pagination[page]"], int)


def test_category_adds_equality_filter():
    query = build_list_query(ListRequestParams(start=2, limit=5, category="Travel"))

    assert query[CATEGORY_FILTER_KEY] == "Travel"
    assert query["pagination[page]"] == 2
    assert query["pagination[pageSize]"] == 5
    assert LIKE_SORT_KEY not in query


@pytest.mark.parametrize("category", [None, ""])
def test_missing_or_empty_category_has_no_filter(category):
    query = build_list_query(ListRequestParams(category=category))

    assert CATEGORY_FILTER_KEY not in query


def test_like_adds_sort_expression():
    assert build_list_query(ListRequestParams(like="asc"))[LIKE_SORT_KEY] == "like:asc"
    assert build_list_query(ListRequestParams(like="desc"))[LIKE_SORT_KEY] == "like:desc"


@pytest.mark.parametrize("like", [None, ""])
def test_missing_or_empty_like_has_no_sort(like):
    query = build_list_query(ListRequestParams(like=like))

    assert LIKE_SORT_KEY not in query


def test_populate_order_is_fixed():
    query = build_list_query(ListRequestParams(category="Nature", like="desc"))

    assert [query[f"populate[{i}]"] for i in range(3)] == ["author.avatar", "categories", "cover"]


def test_without_video_population_indices_stay_contiguous():
    query = build_list_query(ListRequestParams(), include_video=False)

    populate_keys = sorted(k for k in query if k.startswith("populate["))
    assert populate_keys == ["populate[0]", "populate[1]", "populate[2]"]
    assert "video" not in query.values()
    assert populate_directives(include_video=False) == ["author.avatar", "categories", "cover"]


def test_build_is_deterministic():
    params = ListRequestParams(start=3, limit=4, category="Nature", like="desc")

    first = build_list_query(params)
    second = build_list_query(params)

    assert first == second
    assert list(first) == list(second)
    assert first is not second
