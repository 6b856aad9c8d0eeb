"""Run the API with ``python -m expense_tracker``."""

from expense_tracker.main import run

run()
