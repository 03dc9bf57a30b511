import pytest
from pydantic import ValidationError

from granular_search.db.filters import (
    BooleanOperator,
    Equals,
    Group,
    In,
    Like,
    build_column_predicate,
    build_global_search_predicate,
    build_predicate,
    classify_keys,
)
from granular_search.request import RequestParameters
from granular_search.types import Scalar, ValueList

USER_COLUMNS = ["id", "name", "email", "status"]

AND = BooleanOperator.AND
OR = BooleanOperator.OR


def _classify(params: RequestParameters, excluded_keys=None, like_keys=None):
    return classify_keys(params.keys(), USER_COLUMNS, excluded_keys, like_keys)


def test_column_predicate_like_and_membership():
    params = RequestParameters({"name": "Jo", "status": ["active", "pending"]})

    predicate = build_predicate(params, _classify(params, like_keys=["name"]))

    assert predicate == Group(
        op=AND,
        items=(
            Like(column="name", value="Jo"),
            In(column="status", values=("active", "pending")),
        ),
    )


def test_column_predicate_like_with_list_is_or_group():
    params = RequestParameters({"name": ["Jo", "Ma"], "email": "john@example.com"})

    predicate = build_predicate(params, _classify(params, like_keys=["name"]))

    assert predicate == Group(
        op=AND,
        items=(
            Group(op=OR, items=(Like(column="name", value="Jo"), Like(column="name", value="Ma"))),
            Equals(column="email", value="john@example.com"),
        ),
    )


def test_column_predicate_equality_in_table_column_order():
    params = RequestParameters({"status": "active", "id": 3})

    predicate = build_column_predicate(params, _classify(params))

    assert predicate == Group(op=AND, items=(Equals(column="id", value="3"), Equals(column="status", value="active")))


@pytest.mark.parametrize("empty_value", ["", [], None])
def test_column_predicate_skips_empty_values(empty_value):
    params = RequestParameters({"name": empty_value, "status": "active"})

    predicate = build_predicate(params, _classify(params, like_keys=["name"]))

    assert predicate == Group(op=AND, items=(Equals(column="status", value="active"),))


def test_column_predicate_without_conditions_is_none():
    params = RequestParameters({"name": "", "status": [], "page": "2"})

    assert build_predicate(params, _classify(params, like_keys=["name"])) is None


def test_global_search_scalar():
    params = RequestParameters({"q": "jo"})

    predicate = build_predicate(params, _classify(params), params["q"])

    assert predicate == Group(
        op=OR,
        items=(
            Group(op=OR, items=tuple(Like(column=column, value="jo") for column in USER_COLUMNS)),
            Group(op=OR, items=tuple(Equals(column=column, value="jo") for column in USER_COLUMNS)),
        ),
    )


def test_global_search_list_uses_or_groups_and_membership():
    search = ValueList(values=("jo", "ma"))
    classification = classify_keys([], ["id", "name"])

    predicate = build_global_search_predicate(search, classification)

    assert predicate == Group(
        op=OR,
        items=(
            Group(
                op=OR,
                items=(
                    Group(op=OR, items=(Like(column="id", value="jo"), Like(column="id", value="ma"))),
                    Group(op=OR, items=(Like(column="name", value="jo"), Like(column="name", value="ma"))),
                ),
            ),
            Group(op=OR, items=(In(column="id", values=("jo", "ma")), In(column="name", values=("jo", "ma")))),
        ),
    )


def test_global_search_like_columns_only_match_on_substring():
    params = RequestParameters({"q": "jo"})

    predicate = build_predicate(params, _classify(params, excluded_keys=["id"], like_keys=["name"]), params["q"])

    assert predicate == Group(
        op=OR,
        items=(
            Group(
                op=OR,
                items=(
                    Like(column="email", value="jo"),
                    Like(column="status", value="jo"),
                    Like(column="name", value="jo"),
                ),
            ),
            Group(op=OR, items=(Equals(column="email", value="jo"), Equals(column="status", value="jo"))),
        ),
    )


def test_global_search_ignores_column_values():
    params = RequestParameters({"q": "jo", "status": "active", "name": "Mary"})
    classification = _classify(params, like_keys=["name"])

    predicate = build_predicate(params, classification, params["q"])

    assert predicate == build_global_search_predicate(Scalar(value="jo"), classification)
    assert Equals(column="status", value="active") not in predicate.items[1].items


def test_empty_global_search_falls_back_to_column_filters():
    params = RequestParameters({"q": "", "status": "active"})

    predicate = build_predicate(params, _classify(params), params["q"])

    assert predicate == Group(op=AND, items=(Equals(column="status", value="active"),))


def test_global_search_without_searchable_columns_is_none():
    classification = classify_keys([], USER_COLUMNS, excluded_keys=USER_COLUMNS)

    assert build_global_search_predicate(Scalar(value="jo"), classification) is None


def test_empty_group_is_rejected():
    with pytest.raises(ValidationError):
        Group(op=AND, items=())


def test_predicate_is_immutable():
    like = Like(column="name", value="Jo")

    with pytest.raises(ValidationError):
        like.value = "Ma"
