"""Core Layer — dice rules, error types and formatting, no HTTP.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Randomness is the only non-determinism, and it is injectable
"""
