"""Infrastructure Layer — persistence adapters, clock and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - All SQLAlchemy failures surface as DatabaseError

Design Decisions:
    - Thin adapters over raw clients: mapping rows to core values is their only job
"""
