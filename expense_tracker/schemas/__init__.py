"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)

Design Decisions:
    - Schemas are API contracts; models are persistence
"""
