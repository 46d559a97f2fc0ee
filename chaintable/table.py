from dataclasses import dataclass, field
from typing import Any, Iterable

from .debug import format_table, trace_resize


DEFAULT_CAPACITY = 4
TABLE_MAX_LOAD = 0.75


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass(eq=False)
class Entry:
    value: Any
    next: "Entry | None" = field(default=None, repr=False)

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Table:
    """Separate chaining hash table without removal.

    Each slot of `buckets` is either empty or the head of a chain of
    entries whose values hash to that slot. New entries are prepended.
    """

    buckets: list[Entry | None]
    usage: int
    total_entries: int
    load_factor: float

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            capacity = DEFAULT_CAPACITY
        self.buckets = [None] * capacity
        self.usage = 0
        self.total_entries = 0
        self.load_factor = 0.0

    @property
    def capacity(self) -> int:
        return len(self.buckets)

    def insert(self, value: Any):
        _check_value(value)

        self.load_factor = self.usage / self.capacity
        if self.load_factor >= TABLE_MAX_LOAD:
            self._adjust_capacity()

        self._place(value)
        # may sit above the threshold until the next insert
        self.load_factor = self.usage / self.capacity

    def insert_all(self, values: Iterable[Any]):
        for value in values:
            self.insert(value)

    def contains(self, target: Any) -> bool:
        _check_value(target)

        entry = self.buckets[bucket_index(target, self.capacity)]
        while entry is not None:
            if entry.value == target:
                return True
            entry = entry.next

        return False

    def __contains__(self, target: Any) -> bool:
        return self.contains(target)

    def __str__(self) -> str:
        return format_table(self)

    def _place(self, value: Any):
        index = bucket_index(value, self.capacity)
        head = self.buckets[index]
        if head is None:
            self.usage += 1

        self.buckets[index] = Entry(value, head)
        self.total_entries += 1

    def _adjust_capacity(self):
        old_buckets = self.buckets
        self.buckets = [None] * (len(old_buckets) * 2)
        self.usage = 0
        self.total_entries = 0

        for head in old_buckets:
            entry = head
            while entry is not None:
                self._place(entry.value)
                entry = entry.next

        if _debug_trace_resize:
            trace_resize(len(old_buckets), self.capacity, self.total_entries)


def bucket_index(value: Any, capacity: int) -> int:
    return abs(hash(value)) % capacity


def _check_value(value: Any):
    if value is None:
        raise ValueError("None is not a storable value", value)
    # unhashable values fail here, before any resize
    hash(value)
