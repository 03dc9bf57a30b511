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

import structlog
from more_itertools import first_true
from sqlalchemy import Select, column
from sqlalchemy.sql.elements import ColumnElement

from granular_search.db.filters.predicate import ColumnResolver, Group

logger = structlog.get_logger(__name__)


def column_resolver(stmt: Select, table_name: str) -> ColumnResolver:
    """Resolve column names against the table of that name in the FROM clause of `stmt`.

    Falls back to an unqualified column when the table is not selected from (e.g. a textual FROM).
    """
    from_clause = first_true(stmt.get_final_froms(), pred=lambda from_: getattr(from_, "name", None) == table_name)

    def _resolve(name: str) -> ColumnElement:
        if from_clause is not None and name in from_clause.c:
            return from_clause.c[name]
        return column(name)

    return _resolve


def apply_predicate(
    stmt: Select, table_name: str, predicate: Group | None, *, case_insensitive: bool = False
) -> Select:
    """Add the predicate to the WHERE clause of `stmt`.

    `Select.where` AND-s the new clause with the conditions already on the statement, so earlier filters stay.
    """
    if predicate is None:
        return stmt

    clause = predicate.to_expression(column_resolver(stmt, table_name), case_insensitive=case_insensitive)
    logger.debug("Applying filter", table=table_name, predicate=predicate.model_dump())
    return stmt.where(clause)
