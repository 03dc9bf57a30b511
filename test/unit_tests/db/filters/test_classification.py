import pytest

from granular_search.db.filters import KeyClassification, classify_keys

USER_COLUMNS = ["id", "name", "email", "status"]


def test_classify_like_and_equality_keys():
    classification = classify_keys({"name", "status"}, USER_COLUMNS, like_keys=["name"])

    assert classification == KeyClassification(
        like_keys=("name",),
        equality_keys=("status",),
        like_diff_columns=("id", "email", "status"),
        like_intersect_columns=("name",),
    )


def test_classify_without_configuration():
    classification = classify_keys(["status", "email"], USER_COLUMNS)

    assert classification.like_keys == ()
    assert classification.equality_keys == ("email", "status")
    assert classification.like_diff_columns == tuple(USER_COLUMNS)
    assert classification.like_intersect_columns == ()


def test_classify_keeps_table_column_order():
    classification = classify_keys(["status", "name", "id"], USER_COLUMNS)

    assert classification.equality_keys == ("id", "name", "status")


def test_classify_ignores_keys_that_are_not_columns():
    classification = classify_keys(
        ["name", "page", "token"], USER_COLUMNS, excluded_keys=["password"], like_keys=["bio", "name"]
    )

    assert classification.like_keys == ("name",)
    assert classification.equality_keys == ()
    assert classification.like_diff_columns == ("id", "email", "status")
    assert classification.like_intersect_columns == ("name",)


def test_excluded_key_wins_over_like_key_and_request():
    classification = classify_keys(["name", "email"], USER_COLUMNS, excluded_keys=["name"], like_keys=["name"])

    assert "name" not in classification.like_keys
    assert "name" not in classification.equality_keys
    assert "name" not in classification.like_diff_columns
    assert "name" not in classification.like_intersect_columns
    assert classification.equality_keys == ("email",)


def test_like_key_missing_from_request_is_not_resolved():
    classification = classify_keys(["status"], USER_COLUMNS, like_keys=["name", "email"])

    assert classification.like_keys == ()
    assert classification.equality_keys == ("status",)
    assert classification.like_intersect_columns == ("name", "email")


@pytest.mark.parametrize(
    "request_keys, excluded_keys, like_keys",
    [
        (["id", "name", "email", "status"], None, None),
        (["id", "name", "email", "status"], ["id"], ["name", "email"]),
        (["name", "unknown"], ["status"], ["name", "status", "unknown"]),
        ([], ["id"], ["email"]),
        (["email"], ["email"], ["email"]),
    ],
)
def test_classification_groups_are_disjoint_subsets_of_columns(request_keys, excluded_keys, like_keys):
    classification = classify_keys(request_keys, USER_COLUMNS, excluded_keys, like_keys)

    assert not set(classification.like_keys) & set(classification.equality_keys)
    assert set(classification.like_keys) <= set(USER_COLUMNS)
    assert set(classification.equality_keys) <= set(USER_COLUMNS)
    assert not set(classification.like_diff_columns) & set(excluded_keys or ())
