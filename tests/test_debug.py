import logging

import pytest

from pyhashmap.debug import dump_table, set_debug_trace_table
from pyhashmap.table import Table


@pytest.fixture
def tracing():
    set_debug_trace_table(True)
    yield
    set_debug_trace_table(False)


def test_trace_off_by_default(caplog):
    caplog.set_level(logging.DEBUG, logger="pyhashmap.debug")
    t = Table()
    t.set("Host", "example.com")
    t.get("Host")
    assert caplog.records == []


def test_trace_set_and_get(caplog, tracing):
    caplog.set_level(logging.DEBUG, logger="pyhashmap.debug")
    t = Table(bucket_count=1)
    t.set("Host", "example.com")
    t.set("Port", "22")
    t.set("Port", "2222")
    t.get("Port")
    t.get("User")

    assert [r.getMessage() for r in caplog.records] == [
        "Adding 0-0: 'Host'->'example.com'",
        "Adding 0-1: 'Port'->'22'",
        "Overwriting 0-1: 'Port'->'2222'",
        "Getting 0-1: 'Port'->'2222'",
    ]


def test_dump_table(capsys):
    t = Table(bucket_count=1)
    t.set("a", "1")
    t.set("b", "2")

    dump_table(t, "config")

    assert capsys.readouterr().out.splitlines() == [
        "== config ==",
        "2 entries in 1 buckets",
        "0000 'a' -> '1'",
        "   | 'b' -> '2'",
    ]
