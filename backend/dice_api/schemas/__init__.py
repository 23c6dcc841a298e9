"""Pydantic Schemas — response validation for API endpoints.

Invariants:
    - Schemas describe the public JSON contract, nothing else
"""
