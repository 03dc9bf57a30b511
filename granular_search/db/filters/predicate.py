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

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

import structlog
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import String, and_, cast, or_
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.sqltypes import NullType

from granular_search.db.filters.classification import KeyClassification
from granular_search.request import RequestParameters
from granular_search.types import RequestValue, Scalar, ValueList

logger = structlog.get_logger(__name__)

ColumnResolver = Callable[[str], ColumnElement]


class BooleanOperator(str, Enum):
    AND = "AND"
    OR = "OR"


class Like(BaseModel):
    """Substring match: `column LIKE '%value%'`."""

    model_config = ConfigDict(frozen=True)

    column: str
    value: str

    def to_expression(self, resolve: ColumnResolver, *, case_insensitive: bool = False) -> ColumnElement[bool]:
        column = resolve(self.column)
        if not isinstance(column.type, String | NullType):
            column = cast(column, String)
        pattern = f"%{self.value}%"
        return column.ilike(pattern) if case_insensitive else column.like(pattern)


class Equals(BaseModel):
    model_config = ConfigDict(frozen=True)

    column: str
    value: str

    def to_expression(self, resolve: ColumnResolver, *, case_insensitive: bool = False) -> ColumnElement[bool]:
        return resolve(self.column) == self.value


class In(BaseModel):
    model_config = ConfigDict(frozen=True)

    column: str
    values: tuple[str, ...] = Field(min_length=1)

    def to_expression(self, resolve: ColumnResolver, *, case_insensitive: bool = False) -> ColumnElement[bool]:
        return resolve(self.column).in_(self.values)


class Group(BaseModel):
    """A bracketed AND/OR combination of conditions."""

    model_config = ConfigDict(frozen=True)

    op: BooleanOperator
    items: tuple[Predicate, ...] = Field(min_length=1)

    def to_expression(self, resolve: ColumnResolver, *, case_insensitive: bool = False) -> ColumnElement[bool]:
        combine = and_ if self.op == BooleanOperator.AND else or_
        return combine(*(item.to_expression(resolve, case_insensitive=case_insensitive) for item in self.items))


Predicate = Like | Equals | In | Group

Group.model_rebuild()


def like_condition(column: str, value: RequestValue) -> Predicate:
    match value:
        case ValueList(values=values):
            return Group(op=BooleanOperator.OR, items=tuple(Like(column=column, value=v) for v in values))
        case Scalar(value=v):
            return Like(column=column, value=v)


def equality_condition(column: str, value: RequestValue) -> Predicate:
    match value:
        case ValueList(values=values):
            return In(column=column, values=values)
        case Scalar(value=v):
            return Equals(column=column, value=v)


def build_global_search_predicate(search: RequestValue, classification: KeyClassification) -> Group | None:
    """Match one search value against many columns.

    Substring matches cover every searchable column and every like column, exact (or set membership) matches
    cover the searchable columns. Everything is OR-ed together.
    """
    like_columns = classification.like_diff_columns + classification.like_intersect_columns
    likes = [like_condition(column, search) for column in like_columns]
    equalities = [equality_condition(column, search) for column in classification.like_diff_columns]

    groups = [Group(op=BooleanOperator.OR, items=tuple(items)) for items in (likes, equalities) if items]
    return Group(op=BooleanOperator.OR, items=tuple(groups)) if groups else None


def build_column_predicate(request: RequestParameters, classification: KeyClassification) -> Group | None:
    """AND together one condition per filled like key and equality key; empty values are skipped."""
    likes = [like_condition(key, request[key]) for key in classification.like_keys if request.filled(key)]
    equalities = [equality_condition(key, request[key]) for key in classification.equality_keys if request.filled(key)]

    conditions = likes + equalities
    return Group(op=BooleanOperator.AND, items=tuple(conditions)) if conditions else None


def build_predicate(
    request: RequestParameters,
    classification: KeyClassification,
    global_search: RequestValue | None = None,
) -> Group | None:
    """Build the filter for a request, or None when no condition applies.

    A filled `global_search` value switches to global search mode, in which the per-column values of the request
    are ignored.
    """
    if global_search is not None and global_search.filled:
        logger.debug("Building global search predicate", search=global_search)
        return build_global_search_predicate(global_search, classification)
    return build_column_predicate(request, classification)
