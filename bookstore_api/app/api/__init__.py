"""
API package containing versioned routes.

Versions live in subpackages such as ``v1``; each exposes a top-level
``router`` which includes its entity routers.  ``deps`` hands the
services built in ``create_app`` to the route handlers.
"""
