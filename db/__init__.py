"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool that callers borrow connections from.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
