"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure imports core/ only for errors, ids and protocol shapes
    - SQLAlchemy failures surface as DatabaseError, never raw driver errors
"""
