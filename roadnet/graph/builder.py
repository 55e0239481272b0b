"""Distance-matrix construction from parsed edge records."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..domain.models import DISTANCE_DTYPE, NO_EDGE, EdgeRecord, NetworkState, VertexIndex

logger = logging.getLogger(__name__)


def build_network(records: Sequence[EdgeRecord]) -> NetworkState:
    """Build the vertex index and direct-distance matrix.

    Parameters
    ----------
    records:
        Validated edge records, in input order.

    Returns
    -------
    NetworkState
        The sorted intersections and an ``n x n`` matrix where absent
        edges and the diagonal hold ``NO_EDGE``. When several records
        name the same ordered pair, the last one wins. The matrix is
        flagged read-only.
    """
    index = VertexIndex.from_labels(
        label for record in records for label in (record.source, record.target)
    )
    distances = np.full((len(index), len(index)), NO_EDGE, dtype=DISTANCE_DTYPE)

    for record in records:
        if record.is_self_loop:
            logger.debug("Ignoring self-loop", extra={"vertex": record.source})
            continue
        i = index.position(record.source)
        j = index.position(record.target)
        distances[i, j] = record.weight

    distances.flags.writeable = False

    logger.debug(
        "Network built",
        extra={"vertices": len(index), "records": len(records)},
    )
    return NetworkState(index=index, distances=distances)
