"""
Deterministic table ordering for DDL output.

Tables are printed in lexicographic order of their display names, with one
exception: an interleaved table must come after its parent, so it is deferred
until the parent has been emitted. A parent that is not in the schema does not
hold its child back.

`check_interleave_hierarchy` runs first and rejects inputs the ordering pass
could never finish: interleave cycles and duplicate display names.
"""

from __future__ import annotations

from collections import deque

from src.logger import LOGGER
from src.spanner_ddl.errors import DuplicateTableNameError, InterleaveCycleError
from src.spanner_ddl.models import Schema


def check_interleave_hierarchy(schema: Schema) -> None:
    """
    Raise if the tables of `schema` cannot be ordered.

    Raises:
        DuplicateTableNameError: two table ids share a display name.
        InterleaveCycleError: following interleave parents leads back to a table
            already on the chain.
    """
    seen_names: dict[str, str] = {}
    for table_id in sorted(schema):
        name = schema[table_id].name
        if name in seen_names:
            raise DuplicateTableNameError(
                f"Tables {seen_names[name]!r} and {table_id!r} share the name {name!r}."
            )
        seen_names[name] = table_id

    for table_id in sorted(schema):
        chain = [table_id]
        parent_id = schema[table_id].parent_table.id
        while parent_id and parent_id in schema:
            if parent_id in chain:
                cycle = chain[chain.index(parent_id):] + [parent_id]
                names = " -> ".join(schema[i].name for i in cycle)
                raise InterleaveCycleError(f"Interleaved tables form a cycle: {names}")
            chain.append(parent_id)
            parent_id = schema[parent_id].parent_table.id


def order_table_ids(schema: Schema) -> list[str]:
    """
    Table ids in print order: by name, with interleaved tables after their parents.

    Raises:
        SchemaOrderingError: see `check_interleave_hierarchy`.
    """
    check_interleave_hierarchy(schema)

    id_by_name = {table.name: table_id for table_id, table in schema.items()}
    queue = deque(sorted(id_by_name))
    LOGGER.debug("Getting sorted table ids by table name: %s", list(queue))

    emitted: set[str] = set()
    ordered: list[str] = []
    while queue:
        name = queue.popleft()
        table_id = id_by_name[name]
        parent_id = schema[table_id].parent_table.id
        if not parent_id or parent_id not in schema or parent_id in emitted:
            ordered.append(table_id)
            emitted.add(table_id)
        else:
            # Parent not emitted yet; retry once the rest of the queue has had a turn.
            queue.append(name)
    return ordered
