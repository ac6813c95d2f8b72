"""
HTTP layer of the marketplace.

Routes are grouped by API version; ``v1`` is mounted by ``create_app``
under the ``/api`` prefix through its aggregated ``router``.
"""
