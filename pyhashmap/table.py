from dataclasses import dataclass

from .chain import (
    Entry,
    chain_length,
    chain_tail,
    find_in_chain,
    iter_chain,
    unlink_chain,
)
from .debug import trace_entry
from .hashing import hash_string, reduce_hash


# Fixed for the life of a table, there is no resize. Tuned for configs in
# the tens of keys; chains grow linearly past a load factor of 1.
NUM_BUCKETS = 256


@dataclass(frozen=True)
class NotFound:
    pass


class TableError(Exception):
    pass


class InvalidKeyError(TableError, ValueError):
    pass


class AllocationError(TableError, MemoryError):
    pass


class FreedTableError(TableError, RuntimeError):
    pass


def check_key(key: str):
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a string, got {type(key).__name__}")
    if key == "":
        raise InvalidKeyError("key must not be empty")
    try:
        key.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidKeyError(f"key {key!r} is not encodable as UTF-8") from e


def new_entry(key: str, value: str) -> Entry:
    try:
        return Entry(key, value)
    except MemoryError as e:
        raise AllocationError(f"cannot allocate entry for '{key}'") from e


@dataclass
class Table:
    buckets: list[Entry | None]
    bucket_count: int
    entry_count: int
    freed: bool

    def __init__(self, bucket_count: int = NUM_BUCKETS) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")

        try:
            self.buckets = [None] * bucket_count
        except MemoryError as e:
            raise AllocationError(f"cannot allocate {bucket_count} buckets") from e

        self.bucket_count = bucket_count
        self.entry_count = 0
        self.freed = False

    def __len__(self) -> int:
        self._check_live()
        return self.entry_count

    def __contains__(self, key: str) -> bool:
        return not isinstance(self.get(key), NotFound)

    def bucket_index(self, key: str) -> int:
        check_key(key)
        return self._bucket_for(key)

    def set(self, key: str, value: str) -> bool:
        """
        Insert `key`, or overwrite its value if the key is already stored.

        Returns True if a new key was added, False on overwrite.
        """
        self._check_live()
        check_key(key)
        if not isinstance(value, str):
            raise TypeError(f"value must be a string, got {type(value).__name__}")

        index = self._bucket_for(key)
        head = self.buckets[index]

        entry, link = find_in_chain(head, key)
        if entry is not None:
            entry.value = value
            trace_entry("Overwriting", index, link, key, value)
            return False

        entry = new_entry(key, value)
        if head is None:
            self.buckets[index] = entry
        else:
            chain_tail(head).next = entry
        self.entry_count += 1

        trace_entry("Adding", index, link, key, value)
        return True

    def add_all(self, from_t: "Table"):
        from_t._check_live()
        for head in from_t.buckets:
            for entry in iter_chain(head):
                self.set(entry.key, entry.value)

    def get(self, key: str) -> str | NotFound:
        self._check_live()
        check_key(key)

        index = self._bucket_for(key)
        entry, link = find_in_chain(self.buckets[index], key)
        if entry is None:
            return NotFound()

        trace_entry("Getting", index, link, key, entry.value)
        return entry.value

    def keys(self) -> list[str]:
        self._check_live()

        # sized by entry count, a bucket may hold more than one key
        keys = [""] * self.entry_count
        key_index = 0
        for head in self.buckets:
            for entry in iter_chain(head):
                keys[key_index] = entry.key
                key_index += 1

        assert key_index == self.entry_count
        return keys

    def chain_length(self, index: int) -> int:
        self._check_live()
        if not 0 <= index < self.bucket_count:
            raise IndexError(
                f"bucket index {index} out of range for {self.bucket_count} buckets"
            )
        return chain_length(self.buckets[index])

    def free(self):
        self._check_live()

        released = 0
        for index, head in enumerate(self.buckets):
            released += unlink_chain(head)
            self.buckets[index] = None
        assert released == self.entry_count

        self.buckets = []
        self.entry_count = 0
        self.freed = True

    def _bucket_for(self, key: str) -> int:
        return reduce_hash(hash_string(key), self.bucket_count)

    def _check_live(self):
        if self.freed:
            raise FreedTableError("table has been freed")
