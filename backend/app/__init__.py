"""VbApi Application Package - employee and staff record validation service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
