"""
services/demo_runner.py
------------------------
Drives an ordered list of named steps. The first failing step ends the
run; nothing is retried and no later step is attempted.
"""

import sqlite3
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from services.demo_service import DemoService
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class DemoContext:
    """Everything a step needs: the run's connection and the service built on it."""
    conn: sqlite3.Connection
    service: DemoService = field(init=False)

    def __post_init__(self):
        self.service = DemoService(self.conn)


@dataclass(frozen=True)
class Step:
    name: str
    action: Callable[[Any], None]


def run_steps(steps: Sequence[Step], context) -> list[str]:
    """
    Invoke each step with `context`, in order.

    Returns:
        Names of the steps that completed, in order.

    Raises:
        Whatever the first failing step raised.
    """
    completed: list[str] = []
    for step in steps:
        logger.info(f"Running step {step.name}")
        try:
            step.action(context)
        except Exception as e:
            logger.error(f"Step {step.name} failed: {e}")
            raise
        completed.append(step.name)
    logger.info(f"All {len(completed)} steps completed")
    return completed
