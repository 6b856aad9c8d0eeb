"""Core - pure domain logic with no IO.

Invariants:
    - Nothing in core imports from infrastructure, api or models
    - Date parsing and error types are defined once here and shared by every layer
"""
