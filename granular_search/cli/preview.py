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

import typer
from sqlalchemy import MetaData, Table, create_engine, select
from sqlalchemy.exc import NoSuchTableError
from structlog import get_logger

from granular_search.db.helpers import to_sql_string
from granular_search.db.schema import DatabaseSchema
from granular_search.request import RequestParameters
from granular_search.search import granular_search
from granular_search.settings import app_settings

logger = get_logger(__name__)


def _split_param(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"Expected key=value, got '{raw}'", param_hint="--param")
    return key, value


def preview(
    table_name: str = typer.Argument(..., help="Table whose columns are used as filter whitelist"),
    param: list[str] = typer.Option(
        [], "--param", "-p", help="Request parameter as key=value. Repeat the key or use key[]=value for a list"
    ),
    exclude: list[str] = typer.Option([], "--exclude", "-x", help="Column that may never be searched"),
    like: list[str] = typer.Option([], "--like", "-l", help="Column matched with LIKE instead of '='"),
    database_uri: str = typer.Option(app_settings.DATABASE_URI, "--database-uri", help="Database to reflect"),
) -> None:
    """Print the SQL that the given request parameters produce for a table."""
    request = RequestParameters.from_multi_items(_split_param(raw) for raw in param)

    engine = create_engine(database_uri)
    try:
        table = Table(table_name, MetaData(), autoload_with=engine)
    except NoSuchTableError:
        typer.echo(f"Table '{table_name}' does not exist", err=True)
        raise typer.Exit(code=1) from None

    stmt = granular_search(request, select(table), table_name, DatabaseSchema(engine), exclude, like)
    logger.debug("Built preview statement", table=table_name, params=len(request))
    typer.echo(to_sql_string(stmt, engine.dialect))
