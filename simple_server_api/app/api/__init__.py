"""
API package containing the routes served under ``/api``.

The package exposes a top‑level ``router`` in ``router.py`` which
includes every endpoint router defined in ``endpoints``.
"""
