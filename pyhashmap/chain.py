from dataclasses import dataclass
from typing import Iterator


@dataclass
class Entry:
    key: str
    value: str
    next: "Entry | None" = None


def iter_chain(head: Entry | None) -> Iterator[Entry]:
    entry = head
    while entry is not None:
        yield entry
        entry = entry.next


def find_in_chain(head: Entry | None, key: str) -> tuple[Entry | None, int]:
    """
    Scan a bucket's chain for `key`.

    Returns the matching entry and its link position, or (None, n) where n
    is the chain length when nothing matches.
    """
    link = 0
    for entry in iter_chain(head):
        if entry.key == key:
            return entry, link
        link += 1
    return None, link


def chain_tail(head: Entry) -> Entry:
    entry = head
    while entry.next is not None:
        entry = entry.next
    return entry


def chain_length(head: Entry | None) -> int:
    return sum(1 for _ in iter_chain(head))


def unlink_chain(head: Entry | None) -> int:
    # walk with a saved next pointer, the current node is cut loose first
    count = 0
    entry = head
    while entry is not None:
        next_entry = entry.next
        entry.key = ""
        entry.value = ""
        entry.next = None
        entry = next_entry
        count += 1
    return count
