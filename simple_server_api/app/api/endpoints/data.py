"""
Data listing endpoint.

Returns the static dataset, optionally narrowed to the records whose
``name`` matches the ``filter`` query parameter exactly.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from simple_server_api.app.schemas.record import Record
from simple_server_api.app.services.data_service import DataService

router = APIRouter()


@router.get("/data", response_model=List[Record])
async def serve_data(
    name_filter: Optional[str] = Query(None, alias="filter"),
) -> List[Record]:
    """Return all records, or only those named exactly ``filter``.

    An unmatched filter is not an error and yields an empty list.
    """
    return await DataService.list_records(name_filter)
