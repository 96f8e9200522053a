import pytest

from param_dedup.model.base import SwaggerDoc

LIMIT = {"name": "limit", "in": "query", "type": "integer"}
OFFSET = {"name": "offset", "in": "query", "type": "integer"}


def make_doc(paths: dict) -> SwaggerDoc:
    return SwaggerDoc.model_validate({"swagger": "2.0", "paths": paths})


@pytest.fixture
def scenario_doc() -> SwaggerDoc:
    """/a and /b share `limit`, /c uses `offset` once."""
    return make_doc({
        "/a": {"get": {"parameters": [dict(LIMIT)]}},
        "/b": {"get": {"parameters": [dict(LIMIT)]}},
        "/c": {"get": {"parameters": [dict(OFFSET)]}},
    })
