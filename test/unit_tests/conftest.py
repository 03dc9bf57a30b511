from collections.abc import Callable

import pytest
from sqlalchemy import Column, Engine, Integer, MetaData, Select, String, Table, create_engine, insert
from sqlalchemy.exc import NoSuchTableError

USER_COLUMNS = ["id", "name", "email", "status"]

USERS = [
    {"id": 1, "name": "John", "email": "john@example.com", "status": "active"},
    {"id": 2, "name": "Joanna", "email": "joanna@example.org", "status": "pending"},
    {"id": 3, "name": "Mary", "email": "mary@example.com", "status": "inactive"},
    {"id": 4, "name": "Peter", "email": "peter@jo.example", "status": "active"},
]


class FakeSchema:
    """In-memory stand-in for the database catalog."""

    def __init__(self, tables: dict[str, list[str]]) -> None:
        self.tables = tables

    def list_columns(self, table_name: str) -> list[str]:
        if table_name not in self.tables:
            raise NoSuchTableError(table_name)
        return list(self.tables[table_name])

    def has_column(self, table_name: str, column_name: str) -> bool:
        return column_name in self.list_columns(table_name)


@pytest.fixture
def schema() -> FakeSchema:
    return FakeSchema({"users": list(USER_COLUMNS)})


@pytest.fixture
def metadata() -> MetaData:
    return MetaData()


@pytest.fixture
def users_table(metadata: MetaData) -> Table:
    return Table(
        "users",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("name", String(100)),
        Column("email", String(255)),
        Column("status", String(20)),
    )


@pytest.fixture
def engine(metadata: MetaData, users_table: Table):
    engine = create_engine("sqlite://")
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(insert(users_table), USERS)
    yield engine
    engine.dispose()


@pytest.fixture
def fetch_ids(engine: Engine) -> Callable[[Select], list[int]]:
    def _fetch_ids(stmt: Select) -> list[int]:
        with engine.connect() as conn:
            return [row.id for row in conn.execute(stmt)]

    return _fetch_ids
