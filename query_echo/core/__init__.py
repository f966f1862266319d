"""Core Layer — pure request logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, client/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell
"""
