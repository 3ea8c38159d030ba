"""
OpenFDA NDC directory lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from .core.ndc import ndc_search_queries
from .settings import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


@dataclass
class LookupResult:
    """Outcome of an NDC lookup."""
    success: bool
    search_query: Optional[str] = None
    result: Optional[Dict[str, Any]] = None
    all_results: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None


def _query(
    session: requests.Session,
    search: str,
    settings: Dict[str, Any],
) -> List[Dict[str, Any]]:
    """Run one search; an empty list means no match."""
    response = session.get(
        settings["openfda_url"],
        params={"search": search, "limit": settings["openfda_limit"]},
        timeout=settings["openfda_timeout"],
    )
    if response.status_code == 404:
        logger.info("No results for query: %s", search)
        return []
    response.raise_for_status()
    return response.json().get("results") or []


def lookup_ndc(
    ndc: str,
    *,
    settings: Optional[Dict[str, Any]] = None,
    session: Optional[requests.Session] = None,
) -> LookupResult:
    """
    Look up drug records for an NDC, widening the search on no match.

    Queries, in order: exact NDC, labeler-product without package code,
    labeler prefix wildcard. The first query returning results wins.

    Args:
        ndc: NDC in LLLLL-PPPP-SS form
        settings: Settings dict (DEFAULT_SETTINGS if None)
        session: Optional requests session to reuse

    Returns:
        LookupResult; ``success`` is False when nothing matched
    """
    if not ndc:
        return LookupResult(success=False, error="Empty NDC")

    settings = settings or DEFAULT_SETTINGS
    own_session = session is None
    session = session or requests.Session()

    try:
        for search in ndc_search_queries(ndc):
            logger.debug("Trying OpenFDA query: %s", search)
            try:
                results = _query(session, search, settings)
            except (requests.RequestException, ValueError) as exc:
                logger.warning("OpenFDA query %r failed: %s", search, exc)
                continue

            if results:
                logger.info("Found %d result(s) with query: %s", len(results), search)
                return LookupResult(
                    success=True,
                    search_query=search,
                    result=results[0],
                    all_results=results,
                )
    finally:
        if own_session:
            session.close()

    return LookupResult(
        success=False,
        error="No matching drug information found in OpenFDA database",
    )
