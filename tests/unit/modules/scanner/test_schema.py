from typing import Annotated, Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Set, Tuple, Union

import pytest
from src.modules.openapi import SchemaKind
from src.modules.scanner import SchemaCache, SchemaSynthesizer, MAX_DEPTH, exported_bean, exported
from src.modules.scanner.schema import TRUNCATED_DESCRIPTION, describe_shape, is_primitive
from tests.fixtures.sample_host.model import Build, BuildResult, Node, Unexported, Widget


@pytest.fixture
def synthesizer(inspector):
    return SchemaSynthesizer(inspector)


class TestLeaves:
    """Test cases for primitive shapes."""

    def test_string(self, synthesizer):
        node = synthesizer.synthesize(str)
        assert node.kind == SchemaKind.STRING
        assert node.model_dump(by_alias=True, exclude_none=True) == {"type": "string"}

    def test_boolean(self, synthesizer):
        assert synthesizer.synthesize(bool).type == "boolean"

    @pytest.mark.parametrize("shape_name, expected_format", [
        ("Int32", "int32"),
        ("Int64", "int64"),
        ("Float32", "float"),
        ("Float64", "double"),
    ])
    def test_number_widths(self, synthesizer, shape_name, expected_format):
        from src.modules import scanner
        node = synthesizer.synthesize(getattr(scanner, shape_name))
        assert node.type == "number"
        assert node.format == expected_format

    def test_builtin_numbers(self, synthesizer):
        assert synthesizer.synthesize(int).format == "int64"
        assert synthesizer.synthesize(float).format == "double"

    def test_none_and_any_are_generic_objects(self, synthesizer):
        for shape in (None, type(None), Any):
            node = synthesizer.synthesize(shape)
            assert node.kind == SchemaKind.OBJECT
            assert node.properties is None

    def test_unknown_shapes_degrade_to_object(self, synthesizer):
        for shape in (Unexported, "NotResolvable", Union[int, str], object):
            node = synthesizer.synthesize(shape)
            assert node.type == "object"
            assert node.kind == SchemaKind.OBJECT

    def test_optional_and_annotated_unwrap(self, synthesizer):
        assert synthesizer.synthesize(Optional[str]).type == "string"
        assert synthesizer.synthesize(Annotated[bool, "flag"]).type == "boolean"
        assert synthesizer.synthesize(int | None).format == "int64"

    def test_enum(self, synthesizer):
        node = synthesizer.synthesize(BuildResult)
        assert node.kind == SchemaKind.ENUM
        assert node.type == "string"
        assert "SUCCESS" in node.description
        assert "ABORTED" in node.description


class TestContainers:
    """Test cases for sequences and maps."""

    @pytest.mark.parametrize("shape", [
        List[str], Set[str], FrozenSet[str], Sequence[str], Tuple[str, ...], list[str], set[str]
    ])
    def test_sequences(self, synthesizer, shape):
        node = synthesizer.synthesize(shape)
        assert node.kind == SchemaKind.ARRAY
        assert node.type == "array"
        assert node.items.type == "string"

    def test_unknown_element(self, synthesizer):
        for shape in (list, List, Tuple[int, str]):
            node = synthesizer.synthesize(shape)
            assert node.type == "array"
            assert node.items.type == "object"

    def test_maps(self, synthesizer):
        for shape in (Dict[str, int], Mapping[str, int], dict[str, int]):
            node = synthesizer.synthesize(shape)
            assert node.kind == SchemaKind.MAP
            assert node.type == "object"
            assert node.additional_properties.format == "int64"

    def test_bare_map(self, synthesizer):
        node = synthesizer.synthesize(dict)
        assert node.additional_properties.type == "object"

    def test_wire_form_uses_additional_properties(self, synthesizer):
        dumped = synthesizer.synthesize(Dict[str, str]).model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"type": "object", "additionalProperties": {"type": "string"}}

    def test_nested_containers_count_depth(self, synthesizer):
        node = synthesizer.synthesize(List[List[List[List[str]]]])
        assert node.items.items.items.items.is_truncated


class TestBeans:
    """Test cases for exported composite types."""

    def test_properties_follow_naming(self, synthesizer):
        node = synthesizer.synthesize(Widget)
        assert node.kind == SchemaKind.OBJECT
        assert node.description == "Bean: 1"
        assert set(node.properties) == {"name", "enabled", "deleteWidget", "tags"}
        assert node.properties["name"].type == "string"
        assert node.properties["tags"].type == "array"

    def test_nested_bean(self, synthesizer):
        node = synthesizer.synthesize(Build)
        assert node.properties["number"].format == "int32"
        assert node.properties["weight"].format == "float"
        assert node.properties["result"].kind == SchemaKind.ENUM
        assert node.properties["node"].properties["next"].type == "object"

    def test_self_reference_terminates(self, synthesizer):
        node = synthesizer.synthesize(Node)
        depth_one = node.properties["next"]
        depth_two = depth_one.properties["next"]
        depth_three = depth_two.properties["next"]
        assert depth_two.kind == SchemaKind.OBJECT
        assert depth_three.is_truncated
        assert depth_three.description == TRUNCATED_DESCRIPTION
        assert depth_three.properties is None

    def test_mutual_reference_terminates(self, synthesizer):
        @exported_bean
        class Parent:
            @exported
            def getChildren(self) -> List["Child"]:
                return []

        @exported_bean
        class Child:
            @exported
            def getParent(self) -> Parent:
                return Parent()

        Parent.getChildren.__annotations__["return"] = List[Child]
        node = synthesizer.synthesize(Parent)
        child = node.properties["children"].items
        assert child.properties["parent"].is_truncated

    def test_explicit_name(self, synthesizer):
        from tests.fixtures.sample_host.jobs.job import FreeStyleJob
        node = synthesizer.synthesize(FreeStyleJob)
        assert "displayName" in node.properties
        assert "fullDisplayName" not in node.properties
        assert node.properties["url"].type == "string"


class TestDepthBound:
    """Test cases for the recursion limit."""

    @pytest.mark.parametrize("shape", [str, int, Widget, Node, List[str], Dict[str, Node], BuildResult, None])
    @pytest.mark.parametrize("depth", [MAX_DEPTH + 1, MAX_DEPTH + 2, 10])
    def test_beyond_the_bound_is_truncated(self, synthesizer, shape, depth):
        node = synthesizer.synthesize(shape, depth)
        assert node.is_truncated
        assert node.type == "object"

    def test_at_the_bound_is_synthesized(self, synthesizer):
        assert synthesizer.synthesize(str, MAX_DEPTH).type == "string"
        assert synthesizer.synthesize(List[str], MAX_DEPTH).items.is_truncated

    def test_bean_at_the_bound_is_truncated(self, synthesizer):
        assert synthesizer.synthesize(Widget, MAX_DEPTH).is_truncated
        assert synthesizer.synthesize(Widget, MAX_DEPTH - 1).properties["name"].type == "string"
        assert (Widget, MAX_DEPTH) not in synthesizer.cache


class TestSchemaCache:
    """Test cases for the per-session cache."""

    def test_placeholder_is_registered_before_fill(self, inspector):
        cache = SchemaCache()
        seen = []

        class SpyInspector:
            def is_exported(self, shape):
                return inspector.is_exported(shape)

            def operations(self, cls):
                seen.append((cls, cache.get(cls, 0) is not None))
                return inspector.operations(cls)

            def property_name(self, operation):
                return inspector.property_name(operation)

        SchemaSynthesizer(SpyInspector(), cache).synthesize(Widget)
        assert seen == [(Widget, True)]

    def test_hit_returns_same_node(self, synthesizer):
        first = synthesizer.synthesize(Widget)
        assert synthesizer.synthesize(Widget) is first
        assert len(synthesizer.cache) == 1
        assert (Widget, 0) in synthesizer.cache

    def test_sessions_do_not_share_nodes(self, inspector):
        first = SchemaSynthesizer(inspector).synthesize(Widget)
        second = SchemaSynthesizer(inspector).synthesize(Widget)
        assert first is not second


def test_describe_shape():
    assert describe_shape(str) == "str"
    assert describe_shape(List[Widget]) == "list[Widget]"
    assert describe_shape(Dict[str, int]) == "dict[str, int]"


def test_is_primitive():
    assert is_primitive(str)
    assert is_primitive(Annotated[int, "x"])
    assert not is_primitive(Widget)
    assert not is_primitive(List[str])
