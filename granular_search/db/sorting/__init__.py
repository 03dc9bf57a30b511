from granular_search.db.sorting.sorting import Sort, SortOrder, apply_sorting, sorts_from_request, sorts_validate

__all__ = [
    "Sort",
    "SortOrder",
    "apply_sorting",
    "sorts_from_request",
    "sorts_validate",
]
