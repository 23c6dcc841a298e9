"""API Layer — FastAPI routes, cross-origin policy and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response is a JSON envelope, except /test (text) and preflight (empty)

Design Decisions:
    - Thin routes delegate to core/ (dice rules) and infrastructure/ (metrics)
"""
