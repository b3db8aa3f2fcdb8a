import logging
from typing import TYPE_CHECKING

from .chain import iter_chain

if TYPE_CHECKING:
    from .table import Table


logger = logging.getLogger(__name__)

_debug_trace_table = False


def set_debug_trace_table(b: bool):
    global _debug_trace_table
    _debug_trace_table = b


def trace_entry(action: str, index: int, link: int, key: str, value: str):
    if not _debug_trace_table:
        return
    logger.debug("%s %d-%d: '%s'->'%s'", action, index, link, key, value)


def dump_table(table: "Table", name: str):
    print(f"== {name} ==")
    print(f"{len(table)} entries in {table.bucket_count} buckets")

    for index, head in enumerate(table.buckets):
        if head is None:
            continue
        for link, entry in enumerate(iter_chain(head)):
            if link == 0:
                prefix = f"{index:04d} "
            else:
                prefix = "   | "
            print(f"{prefix}'{entry.key}' -> '{entry.value}'")
