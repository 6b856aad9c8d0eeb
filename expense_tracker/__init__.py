"""Expense Tracker - HTTP/JSON CRUD backend for expense records."""

__version__ = "1.0.0"
