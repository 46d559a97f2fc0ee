import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .table import Table


ARRAY_INFORMATION = "Underlying array usage / length: {0:d}/{1:d}"
NODES_INFORMATION = "\nTotal number of nodes: {0:d}"
LINKED_LIST_HEADER = "\n[ {0:2d} ]: "
EMPTY_LIST_MESSAGE = "null"
NODE_CONTENT = "{0!s} --> "


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def format_table(table: "Table") -> str:
    parts = [
        ARRAY_INFORMATION.format(table.usage, table.capacity),
        NODES_INFORMATION.format(table.total_entries),
    ]

    for i, head in enumerate(table.buckets):
        parts.append(LINKED_LIST_HEADER.format(i))
        if head is None:
            parts.append(EMPTY_LIST_MESSAGE)
            continue

        entry = head
        while entry is not None:
            parts.append(NODE_CONTENT.format(entry))
            entry = entry.next

    return "".join(parts)


def print_table(table: "Table"):
    printf("{0:s}\n", format_table(table))


def trace_resize(old_capacity: int, new_capacity: int, count: int):
    printf_err(
        "== resize {0:d} -> {1:d} ({2:d} entries) ==\n",
        old_capacity,
        new_capacity,
        count,
    )
