"""Shared utilities — application-wide constants.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
