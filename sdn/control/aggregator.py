"""Size aggregation over the pairs of a batch."""
from __future__ import annotations

import logging
from typing import Optional

from ..common.pairs import PairRegistry
from ..logging_utils import setup_logging
from ..metadata.base import MetadataQuery

_LOGGER = setup_logging(__name__)


def aggregate(
    registry: PairRegistry,
    metadata_query: MetadataQuery,
    *,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Return the combined size of every source in *registry*.

    The total is recomputed from zero. A failed lookup is logged and counts
    as zero; it never aborts the pass.
    """

    log = logger or _LOGGER
    total = 0
    for pair in registry:
        try:
            total += int(metadata_query(pair.source))
        except Exception as exc:  # backends fail in their own ways
            detail = str(getattr(exc, "detail", exc))
            log.error(
                "Could not stat %s (%s)",
                pair.source,
                detail,
                extra={"_sdn_path": pair.source, "_sdn_detail": detail},
            )
    return total


__all__ = ["aggregate"]
