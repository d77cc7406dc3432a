"""
HTTP routes of the application.

``router.py`` exposes a top‑level ``router`` which includes the
domain‑specific routers defined in ``endpoints``.  The main
application includes it without a prefix so that the public paths
(``/posts``, ``/posts/{id}``...) are served exactly as documented.
"""
