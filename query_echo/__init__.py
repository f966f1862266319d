"""query-echo — query-parameter echo service and URI-encoding client.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
