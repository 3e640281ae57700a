"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Reconciliation functions are pure: snapshot in, new snapshot out

Design Decisions:
    - Functional core separated from imperative shell: services do the IO
      (lookups, integrity checks, commits) around the pure merge rules
"""
