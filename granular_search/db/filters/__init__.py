from granular_search.db.filters.classification import KeyClassification, classify_keys
from granular_search.db.filters.clauses import apply_predicate, column_resolver
from granular_search.db.filters.predicate import (
    BooleanOperator,
    Equals,
    Group,
    In,
    Like,
    Predicate,
    build_column_predicate,
    build_global_search_predicate,
    build_predicate,
)

__all__ = [
    "BooleanOperator",
    "Equals",
    "Group",
    "In",
    "KeyClassification",
    "Like",
    "Predicate",
    "apply_predicate",
    "build_column_predicate",
    "build_global_search_predicate",
    "build_predicate",
    "classify_keys",
    "column_resolver",
]
