"""
Core infrastructure: settings, logging, the post store, templating and
request preprocessing middleware.
"""
