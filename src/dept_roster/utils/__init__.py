"""Shared utilities — logging helpers and other cross-cutting concerns.

Rules
-----
* No business logic.
* No stdin/stdout access.
* Importable by any layer.
"""
