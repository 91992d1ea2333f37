"""Products API - REST CRUD service for a single product catalogue table.

Invariants:
    - Package root has no import side effects
"""

__version__ = "1.0.0"
