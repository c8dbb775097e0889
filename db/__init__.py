"""
db/ - Database Layer
====================
Handles the SQLite connection, transaction scope, schema initialization,
and the error types raised by every layer that touches the store.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
