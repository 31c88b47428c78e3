"""
Service layer abstraction.

Each service encapsulates the logic behind an endpoint so that the
API handlers stay thin.  The data service holds the read‑only dataset
in memory; it could be swapped for a real store without changing the
handlers.
"""
