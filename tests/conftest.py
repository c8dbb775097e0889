import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from db.connection import connect  # noqa: E402
from db.init_db import create_tables  # noqa: E402
from services.demo_service import DemoService  # noqa: E402


@pytest.fixture()
def db_path(tmp_path):
    return str(tmp_path / "sqlite1_test.db")


@pytest.fixture()
def conn(db_path):
    connection = connect(db_path)
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture()
def seeded_conn(conn):
    create_tables(conn)
    return conn


@pytest.fixture()
def service(seeded_conn):
    return DemoService(seeded_conn)
