"""Pydantic Schemas - request/response contracts for the products API.

Invariants:
    - Schemas describe the API boundary; ORM models describe persistence
    - Request schemas are applied only after the rule set has passed
"""
