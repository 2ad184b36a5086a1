"""Cluster lookups."""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

from ..config import CLUSTERS_ENDPOINT, cluster_by_id_url, endpoint_url
from ..errors import ValidationError
from ..models import Cluster
from ..serialization import cluster_from_wire, clusters_from_wire
from ._http import decode, send

logger = logging.getLogger(__name__)


def get_clusters(*, base_url: Optional[str] = None) -> List[Cluster]:
    """Return all active clusters; an empty list is a normal answer."""
    body = send("GET", endpoint_url(CLUSTERS_ENDPOINT, base_url), action="Get clusters")
    clusters = decode(body, clusters_from_wire, "Get clusters")
    logger.info("Fetched %d clusters", len(clusters))
    return clusters


def get_cluster_by_id(cluster_id: str, *, base_url: Optional[str] = None) -> Cluster:
    """Return one cluster.

    Raises
    ------
    ValidationError
        If *cluster_id* is blank; nothing is sent.
    NotFoundError
        If the backend has no cluster under that identifier.
    """
    if not cluster_id or not cluster_id.strip():
        raise ValidationError("Cluster id is required")
    body = send(
        "GET",
        cluster_by_id_url(quote(cluster_id.strip(), safe=""), base_url),
        action="Get cluster",
        not_found_message=f"Cluster not found: {cluster_id}",
    )
    return decode(body, cluster_from_wire, "Get cluster")

__all__ = ["get_clusters", "get_cluster_by_id"]
