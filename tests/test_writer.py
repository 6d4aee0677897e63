import json
from pathlib import Path

import pytest

from openapi_dedupe.errors import WriteError
from openapi_dedupe.normalizer.document import process_document
from openapi_dedupe.writer import count_parameters, write_document

FIXTURES = Path(__file__).parent / "fixtures"


class TestWriteDocument:
    def test_writes_pretty_json(self, tmp_path):
        out = tmp_path / "api" / "openapi.public.json"
        write_document({"paths": {"/a": {}}, "info": {"title": "Ünïcode"}}, out)

        text = out.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert '  "paths"' in text
        assert "Ünïcode" in text
        assert json.loads(text) == {"paths": {"/a": {}}, "info": {"title": "Ünïcode"}}

    def test_no_temp_files_left(self, tmp_path):
        out = tmp_path / "out.json"
        write_document({}, out)
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]

    def test_unwritable_target(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(WriteError):
            write_document({}, blocker / "out.json")

    def test_unserializable_value_raises_write_error(self, tmp_path):
        out = tmp_path / "out.json"
        with pytest.raises(WriteError):
            write_document({"value": object()}, out)
        assert not out.exists()


class TestCountParameters:
    def test_no_paths(self):
        assert count_parameters({}) == 0

    def test_raw_counts_path_params_per_operation(self):
        doc = json.loads((FIXTURES / "items.json").read_text(encoding="utf-8"))
        assert count_parameters(doc) == 9

    def test_processed_counts(self):
        doc = json.loads((FIXTURES / "items.json").read_text(encoding="utf-8"))
        assert count_parameters(process_document(doc), merged=True) == 6

    def test_empty_operations_are_counted(self):
        doc = {"paths": {"/a": {"parameters": [{"in": "query", "name": "x"}], "get": {}}}}
        assert count_parameters(doc) == 1
        assert count_parameters(process_document(doc), merged=True) == 1
