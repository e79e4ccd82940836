"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/, models/ or db/
    - All functions are deterministic: "now" is always passed in, never read from a clock

Design Decisions:
    - Functional core separated from imperative shell: services/ loads state,
      calls into core, then persists the result
"""
