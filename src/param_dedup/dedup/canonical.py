"""Canonical keys and short content hashes for inline parameters."""

import base64
import hashlib
import json

from param_dedup.errors import CanonicalizationError
from param_dedup.model.base import Parameter

HASH_BYTES = 6  # 6 bytes -> 8 base64 characters


def canonical_key(param: Parameter) -> str:
    """Serialize an inline parameter into a deterministic JSON string.

    Keys are sorted at every level and `$ref` is left out, so two parameters
    get the same key iff their content is structurally identical. The output
    is pure ASCII, which makes string order the same as byte order.
    """
    data = param.model_dump(by_alias=True, exclude_none=True, exclude={"ref"})
    try:
        return json.dumps(data, sort_keys=True, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise CanonicalizationError(f"cannot canonicalize parameter {param.name!r}: {e}") from e


def short_hash(key: str) -> str:
    """URL-safe base64 of the first 6 bytes of SHA-224(key)."""
    digest = hashlib.sha224(key.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest[:HASH_BYTES]).decode("ascii")
