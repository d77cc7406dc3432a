"""
Top‑level package for the Posts Board application.

This file makes ``posts_board`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``posts_board.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
