"""Infrastructure Layer — host capabilities and cross-cutting concerns.

Invariants:
    - Implements the core/boundary_protocols contracts (drawing surface, query provider)
    - Library failures mapped to core/errors types before leaving this layer

Design Decisions:
    - Thin adapters over Pillow / urllib: core stays free of third-party imports
"""
