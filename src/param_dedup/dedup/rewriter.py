"""Replace inline parameters with references to their shared definitions.

The input document is never mutated. A container is copied only when
something below it changes; everything else in the result is the very
same object as in the input.
"""

import logging

from param_dedup.dedup.canonical import canonical_key
from param_dedup.model.base import Operation, Parameter, PathItem, SwaggerDoc

logger = logging.getLogger(__name__)


def replace_shared_parameters(names_by_key: dict[str, str], doc: SwaggerDoc | None) -> SwaggerDoc | None:
    """Return `doc` with every inline parameter found in `names_by_key` replaced
    by a `#/parameters/<name>` reference.

    If nothing needs replacing, `doc` itself is returned.
    Raises CanonicalizationError if any inline parameter cannot be serialized.
    """
    if doc is None or doc.paths is None:
        return doc

    ret = doc
    changed_paths = 0
    for path, path_item in doc.paths.items():
        new_item = _replace_in_path_item(names_by_key, path_item)
        if new_item is None:
            continue
        if ret is doc:
            ret = doc.model_copy(update={"paths": dict(doc.paths)})
        ret.paths[path] = new_item
        changed_paths += 1

    logger.debug("Rewrote parameters in %d of %d paths", changed_paths, len(doc.paths))
    return ret


def _replace_in_path_item(names_by_key: dict[str, str], path_item: PathItem) -> PathItem | None:
    """Return a rewritten copy of `path_item`, or None if nothing changed."""
    updates = {}
    for slot, op in path_item.operations():
        new_op = _replace_in_operation(names_by_key, op)
        if new_op is not None:
            updates[slot] = new_op

    new_params = _replace_in_list(names_by_key, path_item.parameters)
    if new_params is not None:
        updates["parameters"] = new_params

    if not updates:
        return None
    return path_item.model_copy(update=updates)


def _replace_in_operation(names_by_key: dict[str, str], op: Operation) -> Operation | None:
    new_params = _replace_in_list(names_by_key, op.parameters)
    if new_params is None:
        return None
    return op.model_copy(update={"parameters": new_params})


def _replace_in_list(names_by_key: dict[str, str], params: list[Parameter] | None) -> list[Parameter] | None:
    """Return a new list with shared parameters swapped for references,
    or None if no entry matched."""
    if not params:
        return None

    result = None
    for i, p in enumerate(params):
        if p.is_reference:
            continue
        name = names_by_key.get(canonical_key(p))
        if name is None:
            continue
        if result is None:
            result = list(params)
        result[i] = Parameter.reference(name)
    return result
