"""Risk register REST API client."""

from __future__ import annotations

import logging

import httpx

from risktrack.models import Risk
from risktrack.sources import RegisterError
from risktrack.sources.files import to_risk

logger = logging.getLogger(__name__)

RISKS_PATH = "/api/risks"


async def fetch_risks(
    base_url: str,
    project_id: int | None = None,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Risk]:
    """Fetch a project's risks from ``GET {base_url}/api/risks``."""
    params = {"projectId": project_id} if project_id is not None else None

    try:
        async with httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        ) as client:
            resp = await client.get(RISKS_PATH, params=params)
            resp.raise_for_status()
            data = resp.json()
    except httpx.HTTPStatusError as exc:
        raise RegisterError(
            f"Register API returned {exc.response.status_code} for {exc.request.url}"
        ) from exc
    except (httpx.HTTPError, ValueError) as exc:
        raise RegisterError(f"Cannot fetch risks from {base_url}: {exc}") from exc

    if not isinstance(data, list):
        raise RegisterError("Register API did not return a list of risks")

    logger.info("Fetched %d risk(s) from %s", len(data), base_url)
    return [to_risk(item, index) for index, item in enumerate(data, start=1)]
