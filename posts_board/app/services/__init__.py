"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Handlers talk
to services rather than to the store so that the in‑memory list could
be replaced by a database without changing the routes.
"""
