"""A small registry that runs named test functions and reports results."""

from __future__ import annotations

import inspect
import sys
from typing import Callable, Optional, TextIO

MAX_TESTS = 256

TestFunc = Callable[[], None]


class AssertionFailure(Exception):
    """Raised by :func:`check` and :func:`fail` when a test assertion fails."""


class TestRunFailed(Exception):
    """Raised by :meth:`TestRegistry.run` when any test did not pass."""

    __test__ = False

    def __init__(self, passed: int, total: int) -> None:
        super().__init__(f"{passed} out of {total} tests passed")
        self.passed = passed
        self.total = total


def _caller_location() -> str:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "<unknown>:0"
        return f"{caller.f_code.co_filename}:{caller.f_lineno}"
    finally:
        del frame


def check(condition: object, message: str) -> None:
    """Raise :class:`AssertionFailure` unless ``condition`` is true."""
    if not condition:
        raise AssertionFailure(f'"{message}" in {_caller_location()}')


def fail(message: Optional[str] = None) -> None:
    """Raise :class:`AssertionFailure` unconditionally."""
    location = _caller_location()
    if message:
        raise AssertionFailure(f"{message} in {location}")
    raise AssertionFailure(f"in {location}")


class TestRegistry:
    """An ordered collection of named tests, run in registration order.

    An entry without a function is a heading: it is printed but not counted.
    """

    __test__ = False

    def __init__(self) -> None:
        self._entries: list[tuple[str, Optional[TestFunc]]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, name: str, func: Optional[TestFunc]) -> None:
        """Register ``func`` under ``name``."""
        if len(self._entries) >= MAX_TESTS:
            raise OverflowError(f"at most {MAX_TESTS} tests can be registered")
        self._entries.append((name, func))

    def register(self, func: TestFunc) -> TestFunc:
        """Decorator that registers ``func`` under its own name."""
        self.add(func.__name__, func)
        return func

    def run(self, out: Optional[TextIO] = None) -> tuple[int, int]:
        """Run every test, writing a report to ``out``.

        Returns ``(passed, total)``; raises :class:`TestRunFailed` if any test
        did not pass.
        """
        stream = sys.stdout if out is None else out
        total = 0
        passed = 0

        for name, func in self._entries:
            if func is None:
                print(name, file=stream)
                continue

            total += 1
            print(f"[{total}] {name} running", file=stream)
            try:
                func()
            except AssertionFailure as exc:
                print(f"  ->failed assertion: {exc}", file=stream)
            except Exception as exc:
                print(f"  ->exception encountered: {exc}", file=stream)
            else:
                print("  ->passed", file=stream)
                passed += 1

        print(f"{passed} out of {total} tests passed", file=stream)

        if passed < total:
            raise TestRunFailed(passed, total)
        return passed, total