"""
Pydantic schema definitions for request payloads and stored records.

Schemas are kept apart from the store so that the representation used
by forms and templates is decoupled from how posts are held in memory.
"""
