import io

import pytest

from memkit.unit import (
    MAX_TESTS,
    AssertionFailure,
    TestRegistry,
    TestRunFailed,
    check,
    fail,
)


def test_check_passes_on_true_and_reports_expression_on_false():
    check(1 + 1 == 2, "1 + 1 == 2")
    with pytest.raises(AssertionFailure) as info:
        check(False, "x > 0")
    text = str(info.value)
    assert text.startswith('"x > 0" in ')
    assert "test_unit.py:" in text


def test_fail_reports_location():
    with pytest.raises(AssertionFailure) as info:
        fail()
    text = str(info.value)
    assert text.startswith("in ")
    assert "test_unit.py:" in text


def test_fail_with_message():
    with pytest.raises(AssertionFailure) as info:
        fail("bad pointer")
    assert str(info.value).startswith("bad pointer in ")


def test_run_all_passing():
    registry = TestRegistry()
    calls = []

    @registry.register
    def first():
        calls.append("first")

    registry.add("second", lambda: calls.append("second"))
    out = io.StringIO()
    assert registry.run(out) == (2, 2)
    assert calls == ["first", "second"]
    assert out.getvalue().splitlines() == [
        "[1] first running",
        "  ->passed",
        "[2] second running",
        "  ->passed",
        "2 out of 2 tests passed",
    ]


def test_register_returns_function_unchanged():
    registry = TestRegistry()

    def sample():
        return None

    assert registry.register(sample) is sample
    assert len(registry) == 1


def test_run_reports_failures_and_headings():
    registry = TestRegistry()

    def ok():
        pass

    def bad():
        check(False, "value == 3")

    def boom():
        raise ValueError("kaboom")

    registry.add("ok", ok)
    registry.add("-- section --", None)
    registry.add("bad", bad)
    registry.add("boom", boom)

    out = io.StringIO()
    with pytest.raises(TestRunFailed) as info:
        registry.run(out)
    assert info.value.passed == 1
    assert info.value.total == 3

    lines = out.getvalue().splitlines()
    assert lines[0] == "[1] ok running"
    assert lines[1] == "  ->passed"
    assert lines[2] == "-- section --"
    assert lines[3] == "[2] bad running"
    assert lines[4].startswith('  ->failed assertion: "value == 3" in ')
    assert lines[5] == "[3] boom running"
    assert lines[6] == "  ->exception encountered: kaboom"
    assert lines[7] == "1 out of 3 tests passed"


def test_registry_limit():
    registry = TestRegistry()
    for i in range(MAX_TESTS):
        registry.add(f"t{i}", None)
    with pytest.raises(OverflowError):
        registry.add("one too many", None)
    assert len(registry) == MAX_TESTS