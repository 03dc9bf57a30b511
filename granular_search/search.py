# Copyright 2019-2025 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import structlog
from sqlalchemy import Select

from granular_search.db.filters import apply_predicate, build_predicate, classify_keys
from granular_search.db.schema import SchemaInspector
from granular_search.db.sorting import apply_sorting, sorts_from_request
from granular_search.request import RequestParameters
from granular_search.settings import app_settings
from granular_search.utils.errors import InvalidQueryError

logger = structlog.get_logger(__name__)

RequestInput = RequestParameters | Mapping[str, Any]


def granular_search(
    request: RequestInput,
    stmt: Select,
    table_name: str,
    schema: SchemaInspector,
    excluded_keys: Iterable[str] | None = None,
    like_keys: Iterable[str] | None = None,
) -> Select:
    """Filter and sort `stmt` using the request keys that are columns of `table_name`.

    Request keys that are not columns of the table are ignored, as are empty values. Keys in `like_keys` are
    matched on substring instead of equality and keys in `excluded_keys` are never searched. The global search
    parameter (`q`) matches its value against all searchable columns instead; the sort parameters (`sortBy`,
    `sortByDesc`) add ORDER BY clauses for existing columns.

    The filter is added as one bracketed group with `Select.where`, so conditions already present on `stmt` are
    kept. An unknown table raises the error of the schema inspector.

    Args:
        request: The request parameters, or a plain mapping of them.
        stmt: The statement to filter, e.g. `select(UserTable)`.
        table_name: The table whose columns are the filter whitelist.
        schema: Lists the columns of the table.
        excluded_keys: Columns that may never be searched.
        like_keys: Columns matched with LIKE '%value%' instead of '='.

    Returns the filtered and sorted statement.
    """
    if not isinstance(stmt, Select):
        raise InvalidQueryError(stmt)

    params = RequestParameters.from_mapping(request)
    table_columns = schema.list_columns(table_name)

    classification = classify_keys(
        params.except_(app_settings.control_params).keys(), table_columns, excluded_keys, like_keys
    )
    predicate = build_predicate(params, classification, params.get(app_settings.GLOBAL_SEARCH_PARAM))
    stmt = apply_predicate(stmt, table_name, predicate, case_insensitive=app_settings.CASE_INSENSITIVE_LIKE)

    sort_by = sorts_from_request(params, table_name, schema)
    return apply_sorting(stmt, table_name, sort_by)


def granular_search_for(
    table_name: str,
    schema: SchemaInspector,
    excluded_keys: Iterable[str] | None = None,
    like_keys: Iterable[str] | None = None,
) -> Callable[[Select, RequestInput], Select]:
    """Bind the search configuration of one table, e.g. `search_users = granular_search_for("users", schema)`."""
    excluded = tuple(excluded_keys or ())
    like = tuple(like_keys or ())

    def _search(stmt: Select, request: RequestInput) -> Select:
        return granular_search(request, stmt, table_name, schema, excluded, like)

    return _search
