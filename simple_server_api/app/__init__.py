"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings and logging), ``schemas`` (Pydantic
models), ``services`` (the in‑memory dataset and its filtering logic)
and ``api`` (routers and endpoints).
"""

from .main import app  # noqa: F401
