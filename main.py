"""
main.py
-------
Entry point for the SQLite demo.

Responsibilities:
    - Open the single database connection and guarantee it is closed.
    - Run the demo steps in their fixed order.
    - Report the first fatal error and exit with a non-zero status.
"""

import sys
from typing import Optional, Sequence

from db.connection import open_database
from db.errors import DatabaseConnectionError, DemoError
from handlers.step_handlers import DEMO_STEPS
from services.demo_runner import DemoContext, Step, run_steps
from utils.logger import get_logger

logger = get_logger(__name__)


def run_demo(db_path: Optional[str] = None, steps: Sequence[Step] = DEMO_STEPS) -> list[str]:
    """
    Connect, run every step, and close the connection.

    Returns:
        Names of the completed steps.
    """
    with open_database(db_path) as conn:
        return run_steps(steps, DemoContext(conn))


def main(db_path: Optional[str] = None) -> int:
    """Run the demo and return the process exit status."""
    try:
        run_demo(db_path)
    except DatabaseConnectionError as e:
        logger.error(f"Connection failed: {e}")
        print(f"Failed to connect to database: {e}", file=sys.stderr)
        return 1
    except DemoError as e:
        print(f"Demo failed: {e}", file=sys.stderr)
        return 1
    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
