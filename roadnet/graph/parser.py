"""Edge-list parsing.

Each line of an edge list describes one directed road segment as
``source,target,weight``. Parsing is all-or-nothing: a single bad line
rejects the whole list.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from ..domain.errors import MalformedRecordError
from ..domain.models import MAX_WEIGHT, MIN_WEIGHT, EdgeRecord

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
WEIGHT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_weight(raw: str) -> Optional[int]:
    # ASCII digits only: no digit grouping, no other scripts.
    if WEIGHT_PATTERN.fullmatch(raw) is None:
        return None
    weight = int(raw)
    if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
        return None
    return weight


def parse_edge_records(
    lines: Iterable[str], source_path: Optional[str] = None
) -> List[EdgeRecord]:
    """Parse edge-list lines into validated records.

    Parameters
    ----------
    lines:
        Raw lines, without their line terminators.
    source_path:
        Where the lines came from, reported in errors.

    Returns
    -------
    list[EdgeRecord]
        One record per line, in input order.

    Raises
    ------
    MalformedRecordError
        If any line does not split into exactly three fields or its
        third field is not a plain base-10 integer within
        ``MIN_WEIGHT``..``MAX_WEIGHT``. No records are returned in that
        case.
    """
    records: List[EdgeRecord] = []

    for line_number, line in enumerate(lines, start=1):
        parts = line.split(FIELD_SEPARATOR)
        weight = _parse_weight(parts[2].strip()) if len(parts) == 3 else None
        if weight is None:
            raise MalformedRecordError(
                f"Malformed record on line {line_number}: {line!r}",
                source_path=source_path,
                line_number=line_number,
                line=line,
            )
        records.append(EdgeRecord(parts[0].strip(), parts[1].strip(), weight))

    logger.debug("Parsed edge list", extra={"records": len(records)})
    return records


def parse_edge_text(text: str, source_path: Optional[str] = None) -> List[EdgeRecord]:
    """Parse a whole edge-list document.

    A trailing line terminator does not produce an extra (empty) record.
    """
    return parse_edge_records(text.splitlines(), source_path=source_path)
