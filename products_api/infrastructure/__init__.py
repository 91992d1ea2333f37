"""Infrastructure Layer - database access, repositories and logging.

Invariants:
    - Infrastructure implements the protocols declared in core/
    - Storage failures are mapped to core errors before leaving this layer
"""
