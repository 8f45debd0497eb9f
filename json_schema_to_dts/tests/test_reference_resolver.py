import logging

import pytest

from json_schema_to_dts.pipeline.analyzer import ReferenceResolver, resolve
from json_schema_to_dts.pipeline.schema_ast import RefNode


class TestResolve:
    def test_two_segment_pointer(self):
        assert resolve("#/definitions/Foo") == "Foo"

    def test_section_name_is_not_checked(self):
        assert resolve("#/$defs/Bar") == "Bar"

    def test_dangling_reference_is_returned_unchanged(self):
        # The resolver never looks the name up
        assert resolve("#/definitions/DoesNotExist") == "DoesNotExist"

    @pytest.mark.parametrize(
        "pointer",
        ["#/a/b/c", "Foo", "#/definitions", "#/definitions/", "definitions/Foo"],
    )
    def test_malformed_pointer_falls_back_to_raw_text(self, pointer, caplog):
        with caplog.at_level(logging.WARNING, logger="json_schema_to_dts.pipeline.analyzer.reference_resolver"):
            assert resolve(pointer) == pointer

        assert any(pointer in record.getMessage() for record in caplog.records)
        assert all(record.levelno == logging.WARNING for record in caplog.records)

    @pytest.mark.parametrize("pointer,expected", [(5, "5"), (None, "None"), (["#/definitions/A"], "['#/definitions/A']")])
    def test_non_string_pointer_falls_back_to_text(self, pointer, expected, caplog):
        with caplog.at_level(logging.WARNING, logger="json_schema_to_dts.pipeline.analyzer.reference_resolver"):
            assert resolve(pointer) == expected

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING

    def test_well_formed_pointer_logs_nothing(self, caplog):
        with caplog.at_level(logging.DEBUG):
            resolve("#/definitions/Foo")
        assert caplog.records == []


def test_resolver_resolves_ref_nodes():
    resolver = ReferenceResolver()
    assert resolver.resolve(RefNode(ref_path="#/definitions/Request")) == "Request"
