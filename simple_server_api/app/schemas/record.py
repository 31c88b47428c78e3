"""
Pydantic schema for dataset records.

A record carries a single ``name`` attribute.  Records are frozen so
the shared dataset cannot be modified by any request handler.
"""

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """Schema for reading a dataset record."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name held by the record")
