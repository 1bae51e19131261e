"""Core Layer: pure listing logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic (no randomness, no clock reads)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
