"""Exceptions raised by the parameter deduplication passes."""


class DedupError(Exception):
    """Base class for all param-dedup errors."""


class CanonicalizationError(DedupError):
    """A parameter could not be serialized into a canonical key."""


class ParameterConflictError(DedupError):
    """A shared name already exists in the document with different content."""


class DocumentLoadError(DedupError):
    """The input file is not a readable Swagger 2.0 document."""
