import pytest

from rmsgateway import syslogmap
from rmsgateway.syslogmap import map_facility, map_priority


def test_priority_extremes():
    assert map_priority("emerg") == 0
    assert map_priority("debug") == 7


def test_priority_rank_order():
    names = ["emerg", "alert", "crit", "err", "warning", "notice", "info", "debug"]
    values = [map_priority(n) for n in names]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("alias, name", [("error", "err"), ("warn", "warning"), ("panic", "emerg")])
def test_priority_aliases(alias, name):
    assert map_priority(alias) == map_priority(name)


@pytest.mark.parametrize("name", ["bogus", "INFO", ""])
def test_unknown_priority_defaults_to_info(name):
    assert map_priority(name) == syslogmap.LOG_INFO


def test_facility_local0():
    assert map_facility("local0") == 128


def test_local_facilities_are_consecutive():
    values = [map_facility(f"local{i}") for i in range(8)]
    steps = {b - a for a, b in zip(values, values[1:])}
    assert steps == {syslogmap.LOG_USER}


def test_security_is_auth():
    assert map_facility("security") == map_facility("auth")


@pytest.mark.parametrize("name", ["nonsense", "Daemon"])
def test_unknown_facility_defaults_to_local0(name):
    assert map_facility(name) == syslogmap.LOG_LOCAL0