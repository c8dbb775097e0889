"""
Step ordering and early exit, independent of the database.
"""

import pytest

from handlers.step_handlers import DEMO_STEPS
from services.demo_runner import Step, run_steps


def _recorder(calls, name, fail=False):
    def action(ctx):
        calls.append((name, ctx))
        if fail:
            raise RuntimeError(f"{name} failed")
    return action


def test_runs_steps_in_order_with_shared_context():
    calls = []
    ctx = object()
    steps = [Step(n, _recorder(calls, n)) for n in ("a", "b", "c")]

    assert run_steps(steps, ctx) == ["a", "b", "c"]
    assert calls == [("a", ctx), ("b", ctx), ("c", ctx)]


def test_first_failure_stops_the_run():
    calls = []
    steps = [
        Step("a", _recorder(calls, "a")),
        Step("b", _recorder(calls, "b", fail=True)),
        Step("c", _recorder(calls, "c")),
    ]

    with pytest.raises(RuntimeError, match="b failed"):
        run_steps(steps, None)

    assert [name for name, _ in calls] == ["a", "b"]


def test_empty_step_list():
    assert run_steps([], None) == []


def test_demo_step_order():
    assert [s.name for s in DEMO_STEPS] == [
        "Setup", "Insert", "Select", "Update", "Delete", "Aggregate", "Transaction", "FinalDump",
    ]
