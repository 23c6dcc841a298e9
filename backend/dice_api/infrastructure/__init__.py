"""Infrastructure Layer — logging setup and process introspection.

Invariants:
    - Only module that touches the OS for metrics is process_metrics
"""
