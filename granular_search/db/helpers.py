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
from sqlalchemy.dialects import postgresql
from sqlalchemy.engine import Dialect
from sqlalchemy.sql.elements import CompilerElement

PYFORMAT_STYLES = {"format", "pyformat"}


def to_sql_string(stmt: CompilerElement, dialect: Dialect | None = None) -> str:
    """Render a statement with its bound values inlined, for display and debugging only.

    The doubled `%` that format/pyformat dialects (e.g. psycopg) emit in literals is undone, so the output
    reads like the SQL that runs.
    """
    dialect = dialect or postgresql.dialect()  # type: ignore
    sql = str(stmt.compile(dialect=dialect, compile_kwargs={"literal_binds": True, "render_postcompile": True}))
    return sql.replace("%%", "%") if dialect.paramstyle in PYFORMAT_STYLES else sql
