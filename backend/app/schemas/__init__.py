"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary (user input, API responses)
    - Business rules are not duplicated here; they run in app.core
"""
