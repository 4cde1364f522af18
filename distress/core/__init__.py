"""Core Layer — pure domain logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/ or cli
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (parse -> compare -> reduce)
"""
