"""Infrastructure - database sessions, the expense store, logging setup.

Invariants:
    - Only this layer talks to SQLAlchemy engines and sessions
"""
