from unittest.mock import patch

import pytest

from conftest import LIMIT, OFFSET, make_doc
from param_dedup.dedup.canonical import canonical_key
from param_dedup.dedup.collector import collect_shared_parameters
from param_dedup.errors import CanonicalizationError
from param_dedup.model.base import Parameter, SwaggerDoc

LIMIT_KEY = '{"in":"query","name":"limit","type":"integer"}'
OFFSET_KEY = '{"in":"query","name":"offset","type":"integer"}'


class TestCollectNoop:
    def test_none_document(self):
        assert collect_shared_parameters(None) == ({}, {})

    def test_missing_paths(self):
        assert collect_shared_parameters(SwaggerDoc(swagger="2.0")) == ({}, {})

    def test_no_parameters(self):
        doc = make_doc({"/a": {"get": {}}, "/b": {}})
        assert collect_shared_parameters(doc) == ({}, {})


class TestCollect:
    def test_scenario_names(self, scenario_doc):
        names_by_key, shared = collect_shared_parameters(scenario_doc)
        assert names_by_key == {LIMIT_KEY: "limit-1JAuMIHu", OFFSET_KEY: "offset-Yl7ocO9w"}
        assert set(shared) == {"limit-1JAuMIHu", "offset-Yl7ocO9w"}
        assert shared["offset-Yl7ocO9w"].name == "offset"

    def test_singletons_are_shared(self):
        doc = make_doc({"/c": {"get": {"parameters": [dict(OFFSET)]}}})
        names_by_key, shared = collect_shared_parameters(doc)
        assert list(shared) == ["offset-Yl7ocO9w"]

    def test_path_level_and_all_slots(self):
        doc = make_doc({
            "/x": {
                "parameters": [{"name": "p", "in": "path", "required": True, "type": "string"}],
                "put": {"parameters": [{"name": "a", "in": "query", "type": "string"}]},
                "options": {"parameters": [{"name": "b", "in": "query", "type": "string"}]},
                "head": {"parameters": [{"name": "c", "in": "query", "type": "string"}]},
                "patch": {"parameters": [{"name": "d", "in": "query", "type": "string"}]},
            }
        })
        _, shared = collect_shared_parameters(doc)
        assert sorted(p.name for p in shared.values()) == ["a", "b", "c", "d", "p"]

    def test_references_skipped(self):
        doc = make_doc({"/a": {"get": {"parameters": [{"$ref": "#/parameters/limit"}]}}})
        assert collect_shared_parameters(doc) == ({}, {})

    def test_unnamed_parameter_uses_fallback(self):
        doc = make_doc({"/a": {"get": {"parameters": [{"in": "body", "schema": {"type": "string"}}]}}})
        _, shared = collect_shared_parameters(doc)
        (name,) = shared
        assert name.startswith("param-")
        assert len(name) == len("param-") + 8

    def test_shared_value_is_a_copy(self, scenario_doc):
        _, shared = collect_shared_parameters(scenario_doc)
        original = scenario_doc.paths["/a"].get.parameters[0]
        assert shared["limit-1JAuMIHu"] is not original
        assert canonical_key(shared["limit-1JAuMIHu"]) == canonical_key(original)

    def test_deterministic_across_path_order(self):
        paths = {
            "/a": {"get": {"parameters": [dict(LIMIT)]}},
            "/b": {"post": {"parameters": [dict(OFFSET), dict(LIMIT)]}},
        }
        reversed_paths = dict(reversed(list(paths.items())))
        first = collect_shared_parameters(make_doc(paths))
        second = collect_shared_parameters(make_doc(reversed_paths))
        assert first[0] == second[0]
        assert {n: p.model_dump() for n, p in first[1].items()} == {n: p.model_dump() for n, p in second[1].items()}

    def test_names_unique(self):
        params = [{"name": "id", "in": loc, "type": "string"} for loc in ("path", "query", "header")]
        names_by_key, shared = collect_shared_parameters(make_doc({"/a": {"get": {"parameters": params}}}))
        assert len(set(names_by_key.values())) == 3
        assert len(shared) == 3

    def test_canonicalization_failure_aborts(self):
        doc = make_doc({"/a": {"get": {"parameters": [dict(LIMIT)]}}})
        doc.paths["/a"].get.parameters.append(Parameter.model_validate({"name": "x", "x-bad": object()}))
        with pytest.raises(CanonicalizationError):
            collect_shared_parameters(doc)


class TestHashCollision:
    @patch("param_dedup.dedup.collector.short_hash", return_value="AAAAAAAA")
    def test_collision_falls_back_to_numeric_suffix(self, _mock):
        params = [{"name": "id", "in": loc, "type": "string"} for loc in ("query", "header", "path")]
        names_by_key, shared = collect_shared_parameters(make_doc({"/a": {"get": {"parameters": params}}}))
        # keys sort as header < path < query
        assert shared["id-AAAAAAAA"].location == "header"
        assert shared["id-0"].location == "path"
        assert shared["id-1"].location == "query"
        assert len(set(names_by_key.values())) == 3

    @patch("param_dedup.dedup.collector.short_hash", return_value="AAAAAAAA")
    def test_collision_without_name(self, _mock):
        params = [{"in": "body", "schema": {"type": t}} for t in ("string", "integer")]
        _, shared = collect_shared_parameters(make_doc({"/a": {"post": {"parameters": params}}}))
        assert set(shared) == {"param-AAAAAAAA", "param-0"}

    @patch("param_dedup.dedup.collector.short_hash", return_value="AAAAAAAA")
    def test_different_names_do_not_collide(self, _mock, scenario_doc):
        _, shared = collect_shared_parameters(scenario_doc)
        assert set(shared) == {"limit-AAAAAAAA", "offset-AAAAAAAA"}
