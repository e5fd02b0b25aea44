from func_swagger.generator.parameters import (
    build_parameters,
    classify_parameter,
    flatten_query_object,
    has_placeholder,
)
from func_swagger.generator.schema import DefinitionRegistry
from func_swagger.metadata.base import (
    EndpointCandidate,
    EnumMember,
    HttpTrigger,
    ParameterDeclaration,
    PropertyDeclaration,
    TypeReference,
    array_of,
    enum_of,
    object_of,
    primitive,
)


def _param(name, declared_type, **kwargs):
    return ParameterDeclaration(name=name, declared_type=declared_type, **kwargs)


def _foo():
    return object_of(
        "Foo",
        [
            PropertyDeclaration(name="Bar", declared_type=primitive("int32"), is_required=True),
            PropertyDeclaration(name="Baz", declared_type=primitive("string"), description="The baz"),
        ],
    )


class TestPlaceholders:
    def test_plain_placeholder(self):
        assert has_placeholder("/api/widgets/{id}", "id")

    def test_constrained_and_optional_placeholders(self):
        assert has_placeholder("/api/widgets/{id:int}", "id")
        assert has_placeholder("/api/widgets/{id?}", "id")

    def test_prefix_is_not_a_match(self):
        assert not has_placeholder("/api/widgets/{idx}", "id")


class TestClassifyParameter:
    def test_injected_parameter_is_excluded(self):
        param = _param("log", object_of("Logger", []), is_framework_injected=True)
        assert classify_parameter(param, "/api/widgets", DefinitionRegistry()) == []

    def test_trigger_parameter_is_excluded(self):
        param = _param("req", object_of("HttpRequest", []), trigger=HttpTrigger(route="widgets"))
        assert classify_parameter(param, "/api/widgets", DefinitionRegistry()) == []

    def test_path_parameter(self):
        param = _param("widgetId", primitive("int32"))
        result = classify_parameter(param, "/api/widgets/{widgetId}", DefinitionRegistry())
        assert result == [{"name": "widgetId", "in": "path", "required": True, "type": "integer", "format": "int32"}]

    def test_path_takes_priority_over_query_marker(self):
        param = _param("widgetId", primitive("string"), source_hint="query")
        assert classify_parameter(param, "/api/widgets/{widgetId}", DefinitionRegistry())[0]["in"] == "path"

    def test_query_parameter_required_from_marker(self):
        optional = _param("limit", primitive("int32"), source_hint="query")
        required = _param("limit", primitive("int32"), source_hint="query", is_required=True)
        assert classify_parameter(optional, "/api/widgets", DefinitionRegistry())[0]["required"] is False
        assert classify_parameter(required, "/api/widgets", DefinitionRegistry())[0]["required"] is True

    def test_query_enum_is_expanded(self):
        colour = enum_of("Colour", [EnumMember(value=1, name="Red"), EnumMember(value=2, name="Blue")])
        result = classify_parameter(_param("colour", colour, source_hint="query"), "/api/widgets", DefinitionRegistry())
        assert result[0]["in"] == "query"
        assert result[0]["enum"] == ["1 - Red", "2 - Blue"]

    def test_query_array_of_primitives(self):
        param = _param("ids", array_of(primitive("int64")), source_hint="query")
        result = classify_parameter(param, "/api/widgets", DefinitionRegistry())
        assert result[0]["type"] == "array"
        assert result[0]["items"] == {"type": "integer", "format": "int64"}

    def test_query_array_of_enums(self):
        colour = enum_of("Colour", [EnumMember(value=1, name="Red")])
        param = _param("colours", array_of(colour), source_hint="query")
        result = classify_parameter(param, "/api/widgets", DefinitionRegistry())
        assert result[0]["in"] == "query"
        assert result[0]["items"] == {"type": "string", "enum": ["1 - Red"]}

    def test_query_array_of_objects_goes_to_body(self):
        definitions = DefinitionRegistry()
        param = _param("widgets", array_of(_foo()), source_hint="query")
        result = classify_parameter(param, "/api/widgets", definitions)
        assert result == [
            {
                "name": "widgets",
                "in": "body",
                "required": True,
                "schema": {"type": "array", "items": {"$ref": "#/definitions/Foo"}},
            }
        ]
        assert "Foo" in definitions

    def test_query_bound_void_is_never_a_query_parameter(self):
        param = _param("flag", TypeReference(kind="void"), source_hint="query")
        result = classify_parameter(param, "/api/widgets", DefinitionRegistry())
        assert result[0]["in"] == "body"
        assert not any(p["in"] == "query" for p in result)

    def test_structured_query_parameter_is_flattened(self):
        param = _param("filter", _foo(), source_hint="query")
        definitions = DefinitionRegistry()
        result = classify_parameter(param, "/api/widgets", definitions)
        assert [p["name"] for p in result] == ["Bar", "Baz"]
        assert result[0] == {
            "name": "Bar",
            "in": "query",
            "required": True,
            "description": "This returns int32",
            "type": "integer",
            "format": "int32",
        }
        assert result[1]["description"] == "The baz"
        assert len(definitions) == 0

    def test_body_parameter_with_object(self):
        definitions = DefinitionRegistry()
        result = classify_parameter(_param("widget", _foo()), "/api/widgets", definitions)
        assert result == [
            {"name": "widget", "in": "body", "required": True, "schema": {"$ref": "#/definitions/Foo"}}
        ]
        assert "Foo" in definitions

    def test_body_parameter_with_primitive(self):
        result = classify_parameter(_param("note", primitive("string")), "/api/widgets", DefinitionRegistry())
        assert result[0]["schema"] == {"type": "string"}


class TestFlattenQueryObject:
    def test_nested_names_are_dot_joined(self):
        parent = object_of(
            "Parent",
            [
                PropertyDeclaration(name="Foo", declared_type=_foo()),
                PropertyDeclaration(name="Top", declared_type=primitive("boolean")),
            ],
        )
        names = [p["name"] for p in flatten_query_object(parent, DefinitionRegistry())]
        assert names == ["Foo.Bar", "Foo.Baz", "Top"]

    def test_two_levels_deep(self):
        outer = object_of("Outer", [PropertyDeclaration(name="Parent", declared_type=object_of(
            "Parent", [PropertyDeclaration(name="Child", declared_type=_foo())]
        ))])
        names = [p["name"] for p in flatten_query_object(outer, DefinitionRegistry())]
        assert names == ["Parent.Child.Bar", "Parent.Child.Baz"]

    def test_array_of_object_properties_are_left_out(self):
        holder = object_of(
            "Holder",
            [
                PropertyDeclaration(name="Items", declared_type=array_of(_foo())),
                PropertyDeclaration(name="Ids", declared_type=array_of(primitive("int32"))),
            ],
        )
        names = [p["name"] for p in flatten_query_object(holder, DefinitionRegistry())]
        assert names == ["Ids"]

    def test_cycles_are_not_re_entered(self):
        node = object_of("Node", [PropertyDeclaration(name="Label", declared_type=primitive("string"))])
        node.properties.append(PropertyDeclaration(name="Parent", declared_type=node))
        names = [p["name"] for p in flatten_query_object(node, DefinitionRegistry())]
        assert names == ["Label"]


class TestBuildParameters:
    def test_tenant_header_comes_first(self):
        candidate = EndpointCandidate(
            name="GetWidget",
            parameters=[
                _param("req", object_of("HttpRequest", []), trigger=HttpTrigger(route="widgets/{id}")),
                _param("id", primitive("string")),
            ],
        )
        params = build_parameters(candidate, "/api/widgets/{id}", DefinitionRegistry())
        assert params[0] == {"name": "TouchpointId", "in": "header", "required": True, "type": "string"}
        assert [p["name"] for p in params] == ["TouchpointId", "id"]

    def test_header_present_without_parameters(self):
        params = build_parameters(EndpointCandidate(name="Ping"), "/api/Ping", DefinitionRegistry())
        assert len(params) == 1
