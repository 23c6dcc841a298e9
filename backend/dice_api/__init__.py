"""Dice Roller API Package — stateless dice and health endpoints over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
