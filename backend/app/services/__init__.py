"""Services Layer - student/course accessors, enrollment workflow, and course seeding.

Invariants:
    - Every service receives its AsyncSession in the constructor (no global handles)
    - Services raise core/errors.py types; routes never build error responses themselves

Design Decisions:
    - One service per resource for locality
"""
