"""Core Layer - pure rules and contracts, no IO, no async work, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
"""
