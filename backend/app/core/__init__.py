"""Core Layer - pure validation logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - All functions are pure and deterministic given their arguments (including `today`)
"""
