"""
db/errors.py
------------
Error taxonomy for the demo. Each error wraps the underlying
sqlite3 exception through ``raise ... from``.
"""


class DemoError(Exception):
    """Base class for every failure that ends the demo run."""


class DatabaseConnectionError(DemoError):
    """The database path could not be resolved or the store could not be opened."""


class TableSetupError(DemoError):
    """Creating a table or inserting its seed rows failed."""


class QueryError(DemoError):
    """A read statement failed."""


class MutationError(DemoError):
    """An insert, update or delete statement failed."""


class TransactionError(DemoError):
    """A statement inside a transaction scope failed; the scope was rolled back."""
