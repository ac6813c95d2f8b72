"""
Endpoint modules for API v1.

Each module defines a ``router`` for one resource family.  Handlers
obtain the entity store through the ``get_storage`` dependency and
delegate to the matching service.
"""
