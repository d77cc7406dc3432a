"""
Application package initializer.

This package contains the main entrypoint for the web application and
all of its submodules: ``core`` (configuration, logging, the in‑memory
post store and view rendering), ``schemas`` (pydantic models),
``services`` (business logic in front of the store) and ``api`` (the
routers that map HTTP requests onto services and views).
"""

from .main import app  # noqa: F401
