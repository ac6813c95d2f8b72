"""
Top‑level package for the Local Services Marketplace API.

All functionality lives in submodules under ``app``: the in‑memory
entity store, the service layer holding business rules and the
versioned HTTP routers.  The package itself provides no public
exports.
"""

__all__ = []
