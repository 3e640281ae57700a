"""Services Layer — imperative shell around the pure core.

Invariants:
    - One service class per aggregate (TaskService, UserService), bound to one AsyncSession
    - Services commit; stores only flush

Design Decisions:
    - Integrity check extracted to its own module: shared by both services
"""
