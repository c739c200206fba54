"""Singleton pattern: one shared instance created safely across threads."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable, Sequence


class Single:
    """The object of which only one is ever made."""


class _Once:
    """Runs a function at most once; late callers wait for it to finish."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    def do(self, func: Callable[[], None]) -> None:
        if self._done:
            return
        with self._lock:
            if not self._done:
                try:
                    func()
                finally:
                    self._done = True


_lock = threading.Lock()
_instance: Single | None = None

_once = _Once()
_once_instance: Single | None = None


def get_instance() -> Single:
    """Return the shared instance, creating it under double-checked locking."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                print("Creating single instance now.")
                _instance = Single()
            else:
                print("Single instance already created.")
    else:
        print("Single instance already created.")
    return _instance


def _create_once_instance() -> None:
    global _once_instance
    print("Creating single instance now.")
    _once_instance = Single()


def get_instance_once() -> Single:
    """Return a second shared instance, created through a run-once guard."""
    if _once_instance is None:
        _once.do(_create_once_instance)
    else:
        print("Single instance already created.")
    assert _once_instance is not None
    return _once_instance


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the instance from many threads at once."""
    parser = argparse.ArgumentParser(description="Request a singleton from many threads.")
    parser.add_argument("--once", action="store_true", help="use the run-once guard")
    parser.add_argument("--count", type=int, default=50, help="number of threads")
    args = parser.parse_args(argv)

    target = get_instance_once if args.once else get_instance
    threads = [threading.Thread(target=target) for _ in range(args.count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0