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

from collections.abc import Callable, Iterable
from enum import Enum

import structlog
from more_itertools import partition
from pydantic import BaseModel
from sqlalchemy import Select
from sqlalchemy.sql import expression

from granular_search.db.filters.clauses import column_resolver
from granular_search.db.schema import SchemaInspector
from granular_search.request import RequestParameters
from granular_search.settings import app_settings
from granular_search.types import RequestValue, Scalar, ValueList

logger = structlog.get_logger(__name__)


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    field: str
    order: SortOrder


def _fields(value: RequestValue) -> tuple[str, ...]:
    match value:
        case ValueList(values=values):
            return values
        case Scalar(value=v):
            return (v,)


def sorts_validate(
    is_valid_column: Callable[[str], bool],
) -> Callable[[list[Sort]], tuple[Iterable[Sort], Iterable[Sort]]]:
    """Create a validate function that splits sort items into invalid and valid ones.

    Args:
        is_valid_column: Tells whether a column exists on the table

    Returns function that takes sort items and returns a tuple of invalid and valid Sort items.
    """

    def validate_sort_items(sort_by: list[Sort]) -> tuple[Iterable[Sort], Iterable[Sort]]:
        def _is_valid_sort(item: Sort) -> bool:
            return is_valid_column(item.field)

        return partition(_is_valid_sort, sort_by)

    return validate_sort_items


def sorts_from_request(
    request: RequestParameters,
    table_name: str,
    schema: SchemaInspector,
    *,
    asc_param: str | None = None,
    desc_param: str | None = None,
) -> list[Sort]:
    """Read the sort directives of a request.

    The ascending parameter wins over the descending one when both are filled; they are never merged.
    Columns that do not exist on the table are skipped.
    """
    asc_param = asc_param or app_settings.SORT_ASC_PARAM
    desc_param = desc_param or app_settings.SORT_DESC_PARAM

    if request.filled(asc_param):
        sort_by = [Sort(field=field, order=SortOrder.ASC) for field in _fields(request[asc_param])]
    elif request.filled(desc_param):
        sort_by = [Sort(field=field, order=SortOrder.DESC) for field in _fields(request[desc_param])]
    else:
        return []

    _validate_sorts = sorts_validate(lambda field: schema.has_column(table_name, field))
    invalid_sort_items, valid_sort_items = _validate_sorts(sort_by)
    valid_list = list(valid_sort_items)
    if invalid_list := [item.field for item in invalid_sort_items]:
        logger.debug("Ignoring unknown sort columns", table=table_name, invalid_sorting=invalid_list)
    return valid_list


def apply_sorting(stmt: Select, table_name: str, sort_by: Iterable[Sort]) -> Select:
    """Append one ORDER BY clause per sort item, in the given order."""
    resolve = column_resolver(stmt, table_name)
    for item in sort_by:
        sa_sort = expression.desc if item.order == SortOrder.DESC else expression.asc
        stmt = stmt.order_by(sa_sort(resolve(item.field)))
    return stmt
