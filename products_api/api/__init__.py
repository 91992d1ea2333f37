"""API Layer - FastAPI routes, validation gate and error handlers.

Invariants:
    - All endpoints return JSON: {"data": ...} on success,
      {"errores": [...]} or {"error": str} on failure
"""
