"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas serialize by alias: wire names are camelCase, Python names snake_case
"""
