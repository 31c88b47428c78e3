"""
Greeting endpoint.

Echoes the ``first`` and ``last`` query parameters back in a plain
text greeting.  Missing or empty parameters are not an error; the
caller is simply greeted as a stranger.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def build_greeting(first: Optional[str], last: Optional[str]) -> str:
    """Return ``hello {first} {last}!`` or ``hello stranger!``.

    Values are substituted verbatim, without trimming or escaping.
    """
    if not first or not last:
        return "hello stranger!"
    return f"hello {first} {last}!"


@router.get("/hello", response_class=PlainTextResponse)
async def serve_hello(
    first: Optional[str] = Query(None),
    last: Optional[str] = Query(None),
) -> str:
    """Greet the caller by name."""
    logger.debug("Greeting requested with first=%r last=%r", first, last)
    return build_greeting(first, last)
