"""Service Layer — async orchestration around the pure core.

Invariants:
    - Services load state through repositories, call core functions, then persist
    - Every mutation of one user's cards or progress runs under that user's lock

Design Decisions:
    - Impure shell / functional core: services hold no domain rules of their own
"""
