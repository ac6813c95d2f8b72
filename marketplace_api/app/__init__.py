"""
Application package initializer.

The project is organised by layer: ``core`` holds configuration,
logging and the entity store, ``schemas`` the pydantic models,
``services`` the business rules and ``api`` the versioned routers.
Each domain (users, jobs, marketplace, events, reviews,
notifications, wallet) has its own schema, service and endpoint
module.
"""

from .main import app  # noqa: F401
