from __future__ import annotations

import pytest

import src.spanner_ddl.printer as printer_mod
from src.enums import Dialect
from src.spanner_ddl.config import Config
from src.spanner_ddl.errors import InterleaveCycleError
from src.spanner_ddl.models import CreateSequence, CreateTable, InterleavedParent
from src.spanner_ddl.ordering import order_table_ids
from src.spanner_ddl.printer import SchemaPrinter, get_ddl

# ---------- fakes ----------


class FakeOrderer:
    def __init__(self, order: list[str]) -> None:
        self.order = order
        self.calls: list[object] = []

    def __call__(self, schema) -> list[str]:
        self.calls.append(schema)
        return list(self.order)


# ---------- helpers ----------


def sequences() -> dict[str, CreateSequence]:
    return {
        "s2": CreateSequence(id="s2", name="z_seq"),
        "s1": CreateSequence(id="s1", name="a_seq"),
    }


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch, fake_logger):
    monkeypatch.setattr(printer_mod, "LOGGER", fake_logger, raising=True)
    return fake_logger


# ---------- tests ----------


def test_full_google_ddl(orders_schema, google_config):
    assert get_ddl(google_config, orders_schema, sequences()) == [
        "CREATE SEQUENCE `a_seq`",
        "CREATE SEQUENCE `z_seq`",
        "CREATE TABLE `Orders` (\n"
        "\t`order_id` INT64 NOT NULL ,\n"
        "\t`customer` STRING(MAX),\n"
        ") PRIMARY KEY (`order_id`)",
        "CREATE TABLE `OrderItems` (\n"
        "\t`order_id` INT64 NOT NULL ,\n"
        "\t`item_id` INT64 NOT NULL ,\n"
        "\t`price` FLOAT32 DEFAULT (CAST(0 AS FLOAT32)),\n"
        "\t`quantity` INT64,\n"
        ") PRIMARY KEY (`order_id`, `item_id`),\n"
        "INTERLEAVE IN PARENT `Orders` ON DELETE CASCADE",
        "CREATE INDEX `idx_price` ON `OrderItems` (`price` DESC) STORING (`quantity`)",
        "ALTER TABLE `OrderItems` ADD CONSTRAINT `fk_items_orders` "
        "FOREIGN KEY (`order_id`) REFERENCES `Orders` (`order_id`)",
    ]


def test_full_pg_ddl(orders_schema, pg_config):
    assert get_ddl(pg_config, orders_schema) == [
        "CREATE TABLE Orders (\n"
        "\torder_id INT8 NOT NULL ,\n"
        "\tcustomer VARCHAR(2621440),\n"
        "\tPRIMARY KEY (order_id)\n"
        ")",
        "CREATE TABLE OrderItems (\n"
        "\torder_id INT8 NOT NULL ,\n"
        "\titem_id INT8 NOT NULL ,\n"
        "\tprice FLOAT4 DEFAULT (CAST(0 AS FLOAT4)),\n"
        "\tquantity INT8,\n"
        "\tPRIMARY KEY (order_id, item_id)\n"
        ") INTERLEAVE IN PARENT Orders ON DELETE CASCADE",
        "CREATE INDEX idx_price ON OrderItems (price DESC) INCLUDE (quantity)",
        "ALTER TABLE OrderItems ADD CONSTRAINT fk_items_orders "
        "FOREIGN KEY (order_id) REFERENCES Orders (order_id)",
    ]


def test_foreign_keys_trail_all_create_statements(orders_schema, google_config):
    ddl = get_ddl(google_config, orders_schema)
    alter_positions = [i for i, s in enumerate(ddl) if s.startswith("ALTER TABLE")]
    create_positions = [i for i, s in enumerate(ddl) if s.startswith("CREATE")]
    assert alter_positions and create_positions
    assert min(alter_positions) > max(create_positions)
    assert not any("FOREIGN KEY" in s for s in ddl if s.startswith("CREATE TABLE"))


def test_tables_disabled_emits_only_sequences_and_foreign_keys(orders_schema):
    config = Config(tables=False)
    ddl = get_ddl(config, orders_schema, sequences())
    assert ddl[:2] == ["CREATE SEQUENCE `a_seq`", "CREATE SEQUENCE `z_seq`"]
    assert len(ddl) == 3
    assert ddl[2].startswith("ALTER TABLE `OrderItems`")


def test_foreign_keys_disabled(orders_schema):
    ddl = get_ddl(Config(foreign_keys=False), orders_schema)
    assert not any(s.startswith("ALTER TABLE") for s in ddl)
    assert len(ddl) == 3


def test_sequences_sorted_by_name_regardless_of_mapping_order(google_config):
    forward = get_ddl(google_config, {}, sequences())
    backward = get_ddl(google_config, {}, dict(reversed(sequences().items())))
    assert forward == backward == ["CREATE SEQUENCE `a_seq`", "CREATE SEQUENCE `z_seq`"]


def test_output_is_idempotent(orders_schema):
    config = Config(comments=True, dialect=Dialect.POSTGRESQL)
    first = get_ddl(config, orders_schema, sequences())
    assert first == get_ddl(config, orders_schema, sequences())


def test_no_interleaving_gives_lexicographic_table_order(google_config):
    schema = {
        table_id: CreateTable(name=name, id=table_id, col_ids=[], col_defs={})
        for table_id, name in [("t1", "Zoo"), ("t2", "Bar"), ("t3", "Foo")]
    }
    ddl = get_ddl(google_config, schema)
    assert [s.split("`")[1] for s in ddl] == ["Bar", "Foo", "Zoo"]


def test_cycle_surfaces_as_ordering_error(google_config):
    schema = {
        "t1": CreateTable(
            name="a", id="t1", col_ids=[], col_defs={}, parent_table=InterleavedParent(id="t2")
        ),
        "t2": CreateTable(
            name="b", id="t2", col_ids=[], col_defs={}, parent_table=InterleavedParent(id="t1")
        ),
    }
    with pytest.raises(InterleaveCycleError):
        get_ddl(google_config, schema)


def test_default_orderer(google_config):
    assert SchemaPrinter(google_config).orderer is order_table_ids


def test_injected_orderer_decides_table_order(orders_schema, google_config):
    orderer = FakeOrderer(["t2", "t1"])
    ddl = SchemaPrinter(google_config, orderer=orderer).print_ddl(orders_schema)
    assert orderer.calls == [orders_schema]
    assert ddl[0].startswith("CREATE TABLE `OrderItems`")
    assert ddl[2].startswith("CREATE TABLE `Orders`")


def test_logs_statement_counts(orders_schema, google_config, quiet_logger):
    get_ddl(google_config, orders_schema, sequences())
    assert quiet_logger.messages == [
        (
            "info",
            "DDL generated (google_standard_sql): sequences=2, tables/indexes=3, foreign keys=1",
        )
    ]
