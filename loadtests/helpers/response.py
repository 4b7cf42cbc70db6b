"""Response error extraction for load test observability.

The storefront answers with HTML. A failed listing carries its message in a
``catalogue-unavailable`` paragraph; FastAPI errors come back as
``{"detail": ...}`` JSON.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

_UNAVAILABLE = re.compile(r'<p class="catalogue-unavailable">(.*?)</p>', re.DOTALL)


def extract_error_detail(response: Response) -> str:
    """Extract a compact, human-readable error message from a response."""
    text = getattr(response, "text", "") or ""

    match = _UNAVAILABLE.search(text)
    if match:
        return match.group(1).strip()

    try:
        body = response.json()
    except ValueError:
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])[:300]

    return str(body)[:300]
