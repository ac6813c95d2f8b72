"""
Pydantic schema definitions for API payloads and stored entities.

Each domain (users, jobs, marketplace, events, reviews,
notifications, wallet) defines its own models.  Stored entities are
plain pydantic models owned by the entity store; partial updates use
dedicated ``*Update`` models that reject unknown fields.
"""
