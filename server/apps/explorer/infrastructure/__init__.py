"""Infrastructure layer for explorer app.

This package contains the adapters to the outside world:
- Cookie-backed session store for the auth token
- Navigation locations and the client instruction channel

Keep infrastructure concerns separate from business logic.
"""
