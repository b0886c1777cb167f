"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core/ domain logic, only core/errors.py for error mapping
    - All external calls wrapped with timeout/error mapping

Design Decisions:
    - Thin wrappers over raw clients (SQLAlchemy, httpx) so the rest of the app
      only sees Ignite error types
"""
