import pytest

from src.constants import MAX_LENGTH
from src.enums import Dialect
from src.spanner_ddl.config import Config
from src.spanner_ddl.models import (
    ColumnDef,
    CreateIndex,
    CreateTable,
    DefaultValue,
    Expression,
    Foreignkey,
    IndexKey,
    InterleavedParent,
)
from src.spanner_ddl.types import Type, TypeName


class FakeLogger:
    """Collects %-formatted messages per level, matching the logging API."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def _record(self, level: str, msg: str, *args) -> None:
        self.messages.append((level, msg % args if args else msg))

    def debug(self, msg: str, *args) -> None:
        self._record("debug", msg, *args)

    def info(self, msg: str, *args) -> None:
        self._record("info", msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._record("warning", msg, *args)


@pytest.fixture
def fake_logger() -> FakeLogger:
    return FakeLogger()


@pytest.fixture
def google_config() -> Config:
    return Config(protect_ids=True, dialect=Dialect.GOOGLE_STANDARD_SQL)


@pytest.fixture
def pg_config() -> Config:
    return Config(protect_ids=True, dialect=Dialect.POSTGRESQL)


@pytest.fixture
def orders_schema() -> dict[str, CreateTable]:
    """
    Two tables: `Orders` and `OrderItems` interleaved in it, with a foreign key
    and a secondary index on the child. The child is inserted first on purpose.
    """
    orders = CreateTable(
        name="Orders",
        id="t1",
        col_ids=["c1", "c2"],
        col_defs={
            "c1": ColumnDef(name="order_id", type=Type(TypeName.INT64), not_null=True, id="c1"),
            "c2": ColumnDef(
                name="customer",
                type=Type(TypeName.STRING, length=MAX_LENGTH),
                comment="who ordered",
                id="c2",
            ),
        },
        primary_keys=[IndexKey(col_id="c1", order=1)],
        comment="Customer orders",
    )
    order_items = CreateTable(
        name="OrderItems",
        id="t2",
        col_ids=["c3", "c4", "c5", "c6"],
        col_defs={
            "c3": ColumnDef(name="order_id", type=Type(TypeName.INT64), not_null=True, id="c3"),
            "c4": ColumnDef(name="item_id", type=Type(TypeName.INT64), not_null=True, id="c4"),
            "c5": ColumnDef(
                name="price",
                type=Type(TypeName.FLOAT32),
                id="c5",
                default_value=DefaultValue(is_present=True, value=Expression("e1", "0")),
            ),
            "c6": ColumnDef(name="quantity", type=Type(TypeName.INT64), id="c6"),
        },
        # declared out of order: `order` decides
        primary_keys=[IndexKey(col_id="c4", order=2), IndexKey(col_id="c3", order=1)],
        foreign_keys=[
            Foreignkey(
                name="fk_items_orders",
                col_ids=["c3"],
                refer_table_id="t1",
                refer_column_ids=["c1"],
                id="fk1",
            )
        ],
        indexes=[
            CreateIndex(
                name="idx_price",
                table_id="t2",
                keys=[IndexKey(col_id="c5", desc=True, order=1)],
                id="i1",
                stored_column_ids=["c3", "c6"],
            )
        ],
        parent_table=InterleavedParent(id="t1", on_delete="CASCADE"),
    )
    return {"t2": order_items, "t1": orders}
