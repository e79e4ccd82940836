"""Pydantic Schemas — the single serialization contract for cards and progress.

Invariants:
    - Schemas validate at the system boundary (catalog/generator input, persisted records)
    - Domain types from core/ used for enum fields
    - Field names serialize in camelCase, matching every front-end's record shape

Design Decisions:
    - Separate from models: schemas are the exchange contract, models are persistence
"""
