"""Core Layer — pure helpers, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Text helpers are pure and deterministic
    - Host capabilities (query string, drawing surface) reached only through Protocols

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
