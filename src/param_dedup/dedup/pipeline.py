"""Run both passes and merge the shared table into the document."""

import logging

from param_dedup.dedup.collector import collect_shared_parameters
from param_dedup.dedup.rewriter import replace_shared_parameters
from param_dedup.errors import ParameterConflictError
from param_dedup.model.base import Parameter, SwaggerDoc

logger = logging.getLogger(__name__)


def merge_shared_parameters(doc: SwaggerDoc, shared: dict[str, Parameter]) -> SwaggerDoc:
    """Return a copy of `doc` whose `parameters` section also holds `shared`.

    A name that already exists with identical content is kept; a name that
    exists with different content raises ParameterConflictError.
    """
    if not shared:
        return doc

    merged = dict(doc.parameters or {})
    for name, param in shared.items():
        existing = merged.get(name)
        if existing is not None and _content(existing) != _content(param):
            raise ParameterConflictError(f"shared parameter {name!r} already defined with different content")
        merged[name] = param
    return doc.model_copy(update={"parameters": merged})


def share_parameters(doc: SwaggerDoc) -> tuple[SwaggerDoc, dict[str, Parameter]]:
    """Deduplicate all inline parameters of `doc`.

    Returns the rewritten document (with the shared definitions merged in)
    and the shared table itself.
    """
    names_by_key, shared = collect_shared_parameters(doc)
    if not shared:
        return doc, shared

    rewritten = replace_shared_parameters(names_by_key, doc)
    logger.debug("Merging %d shared parameters", len(shared))
    return merge_shared_parameters(rewritten, shared), shared


def _content(param: Parameter) -> dict:
    return param.model_dump(by_alias=True, exclude_none=True)
