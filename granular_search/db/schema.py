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
from typing import Protocol

from sqlalchemy import Connection, Engine, MetaData, inspect
from sqlalchemy.exc import NoSuchTableError


class SchemaInspector(Protocol):
    """Lists the columns of a table; the whitelist for filtering and sorting."""

    def list_columns(self, table_name: str) -> list[str]: ...

    def has_column(self, table_name: str, column_name: str) -> bool: ...


class DatabaseSchema:
    """Introspects tables of a live database.

    Every call goes to the database catalog, nothing is cached. An unknown table raises `NoSuchTableError`.
    """

    def __init__(self, bind: Engine | Connection) -> None:
        self.bind = bind

    def list_columns(self, table_name: str) -> list[str]:
        return [column["name"] for column in inspect(self.bind).get_columns(table_name)]

    def has_column(self, table_name: str, column_name: str) -> bool:
        return column_name in self.list_columns(table_name)


class MetadataSchema:
    """Introspects tables declared on a `MetaData`, e.g. the metadata of a declarative base."""

    def __init__(self, metadata: MetaData) -> None:
        self.metadata = metadata

    def list_columns(self, table_name: str) -> list[str]:
        if (table := self.metadata.tables.get(table_name)) is None:
            raise NoSuchTableError(table_name)
        return [column.name for column in table.columns]

    def has_column(self, table_name: str, column_name: str) -> bool:
        return column_name in self.list_columns(table_name)
