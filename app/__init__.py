"""Task Tracker Application Package — users, tasks, and task reconciliation.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
