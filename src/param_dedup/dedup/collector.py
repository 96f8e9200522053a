"""Collect every distinct inline parameter and give it a stable shared name."""

import logging

from param_dedup.dedup.canonical import canonical_key, short_hash
from param_dedup.model.base import Parameter, SwaggerDoc

logger = logging.getLogger(__name__)

FALLBACK_NAME = "param"


def collect_shared_parameters(doc: SwaggerDoc | None) -> tuple[dict[str, str], dict[str, Parameter]]:
    """Scan all path-level and operation-level parameters of `doc`.

    Returns (names_by_key, shared): canonical key -> assigned name, and
    assigned name -> a copy of the first parameter seen with that key.
    Every distinct inline parameter is included, including those that
    occur only once. References are skipped.

    Raises CanonicalizationError if any parameter cannot be serialized.
    """
    if doc is None or doc.paths is None:
        return {}, {}

    first_seen: dict[str, Parameter] = {}
    counts: dict[str, int] = {}

    for path_item in doc.paths.values():
        param_lists = [op.parameters or [] for _, op in path_item.operations()]
        param_lists.append(path_item.parameters or [])
        for params in param_lists:
            for p in params:
                if p.is_reference:
                    continue
                key = canonical_key(p)
                counts[key] = counts.get(key, 0) + 1
                if key not in first_seen:
                    first_seen[key] = p.model_copy(deep=True)

    names_by_key: dict[str, str] = {}
    shared: dict[str, Parameter] = {}
    for key in sorted(first_seen):
        param = first_seen[key]
        base = param.name or FALLBACK_NAME
        name = f"{base}-{short_hash(key)}"
        i = 0
        while name in shared:
            # only on a hash collision between different keys
            logger.warning("Shared parameter name %s already taken, trying %s-%d", name, base, i)
            name = f"{base}-{i}"
            i += 1
        shared[name] = param
        names_by_key[key] = name
        logger.debug("Shared parameter %s (%d occurrences)", name, counts[key])

    return names_by_key, shared
