import json

import pytest

from json_schema_to_dts.pipeline.errors import OutputValidationError, SchemaLoadError
from json_schema_to_dts.pipeline.schema_ast import ObjectNode
from json_schema_to_dts.storage import AtomicWriter, load_schema, read_schema, write_output

VALID_OUTPUT = "/** Types with {braces} in comments. */\nexport module M {\n\texport interface A {\n\t}\n}\n\n"


class TestSchemaLoader:
    def test_load_schema(self, tmp_path):
        path = tmp_path / "protocol.json"
        path.write_text(json.dumps({"definitions": {"A": {"type": "object"}}}))

        document = load_schema(path)
        assert [d.name for d in document.definitions] == ["A"]
        assert isinstance(document.definitions[0].body, ObjectNode)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ not json")
        with pytest.raises(SchemaLoadError, match="not valid JSON"):
            read_schema(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(SchemaLoadError, match="JSON object"):
            read_schema(path)

    def test_missing_definitions(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}")
        with pytest.raises(SchemaLoadError, match="definitions"):
            read_schema(path)

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema(tmp_path / "missing.json")


class TestAtomicWriter:
    def test_write_creates_parent_directories(self, tmp_path):
        target = tmp_path / "protocol" / "src" / "out.d.ts"
        write_output(VALID_OUTPUT, target)
        assert target.read_text(encoding="utf-8") == VALID_OUTPUT

    def test_write_overwrites(self, tmp_path):
        target = tmp_path / "out.d.ts"
        target.write_text("old")
        AtomicWriter().write(target, VALID_OUTPUT)
        assert target.read_text(encoding="utf-8") == VALID_OUTPUT

    def test_unbalanced_output_is_not_written(self, tmp_path):
        target = tmp_path / "out.d.ts"
        target.write_text("old")
        with pytest.raises(OutputValidationError, match="unbalanced"):
            AtomicWriter().write(target, "export module M {\n")
        assert target.read_text() == "old"
        assert list(tmp_path.iterdir()) == [target]

    def test_braces_inside_literals_are_ignored(self, tmp_path):
        target = tmp_path / "out.d.ts"
        content = "export module M {\n\n\texport type Brace = '{' | '}}' | 'x';\n}\n\n"
        write_output(content, target)
        assert target.read_text(encoding="utf-8") == content

    def test_validation_can_be_skipped(self, tmp_path):
        target = tmp_path / "out.d.ts"
        write_output("partial {", target, validate=False)
        assert target.read_text() == "partial {"

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate_declarations=seen.append).write(tmp_path / "out.d.ts", "anything")
        assert seen == ["anything"]
