"""Core Layer — validation pipeline, fault policy and record store, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Only the injector decides whether a failed check raises

Design Decisions:
    - Functional core (parser, sanitizer, validator) around one stateful object (store)
"""
