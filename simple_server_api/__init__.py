"""
Top‑level package for the Simple Server API.

This file makes ``simple_server_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``simple_server_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
