"""Pydantic Schemas — validation for resource definition files.

Invariants:
    - Schemas validate at the configuration boundary, before any core object is built

Design Decisions:
    - Separate from core.resource_schema: these are file contracts, core holds compiled schemas
"""
