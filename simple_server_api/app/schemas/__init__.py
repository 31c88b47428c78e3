"""
Pydantic schema definitions for API payloads.

Schemas describe the shape of response bodies and are kept separate
from the services that produce them.
"""
