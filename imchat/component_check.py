"""Waiting for the components a service depends on to become reachable."""

from __future__ import annotations

import time
from typing import Callable, Mapping


def perform_checks(
    checks: Mapping[str, Callable[[], object]],
    max_retry: int = 180,
    interval: float = 1.0,
) -> None:
    """Run each named check until all have passed once.

    A check fails by raising. Checks that have passed are not run again.
    Rounds are separated by ``interval`` seconds; after ``max_retry`` rounds
    without every check passing, RuntimeError is raised.
    """
    done: set[str] = set()
    for _ in range(max_retry):
        all_success = True
        for name, check in checks.items():
            if name in done:
                continue
            try:
                check()
            except Exception as exc:  # any failure means "not ready yet"
                print(f"{name} check failed: {exc}")
                all_success = False
            else:
                print(f"{name} check succeeded.")
                done.add(name)
        if all_success:
            print("All components checks passed successfully.")
            return
        time.sleep(interval)
    raise RuntimeError(
        f"not all components checks passed successfully after {max_retry} attempts"
    )