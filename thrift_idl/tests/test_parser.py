# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.

"""Tests for the Thrift IDL grammar."""

import pytest

from thrift_idl import ast, parse_source
from thrift_idl.errors import IdlSyntaxError
from thrift_idl.types import BaseType, NamespaceScope


def test_namespace_and_struct():
    document = parse_source(
        "namespace cpp foo.bar\nstruct S { 1: required string name }"
    )

    assert document.headers == (ast.Namespace(NamespaceScope.CPP, "foo.bar"),)
    assert len(document.definitions) == 1
    struct = document.definitions[0]
    assert isinstance(struct, ast.Struct)
    assert struct.name == "S"
    assert struct.fields == (
        ast.Field("name", BaseType.STRING, field_id=1, optional=False),
    )
    assert struct.fields[0].required is True


def test_enum_values():
    document = parse_source("enum Color { RED = 1, GREEN, BLUE = 3 }")

    color = document.definitions[0]
    assert isinstance(color, ast.Enum)
    assert color.name == "Color"
    assert color.values == (
        ast.Enumerator("RED", 1),
        ast.Enumerator("GREEN"),
        ast.Enumerator("BLUE", 3),
    )
    assert color.values[1].value is None


def test_service_functions():
    document = parse_source(
        "service Foo { void ping() oneway void fireAndForget(1: string msg) }"
    )

    service = document.definitions[0]
    assert isinstance(service, ast.Service)
    assert service.name == "Foo"
    ping, fire = service.functions
    assert ping.name == "ping"
    assert ping.return_type == ast.VOID
    assert ping.oneway is False
    assert ping.parameters == ()
    assert ping.throws is None

    assert fire.name == "fireAndForget"
    assert fire.oneway is True
    assert fire.return_type == ast.VOID
    assert fire.parameters == (ast.Parameter("msg", BaseType.STRING, field_id=1),)


def test_const_map():
    document = parse_source('const map<string,i32> M = {"a": 1, "b": 2}')

    const = document.definitions[0]
    assert isinstance(const, ast.Const)
    assert const.name == "M"
    assert const.field_type == ast.MapType(BaseType.STRING, BaseType.I32)
    assert isinstance(const.value, ast.ConstMap)
    assert const.value.entries == (
        ("a", ast.IntConstant(1)),
        ("b", ast.IntConstant(2)),
    )
    assert const.value.as_dict() == {
        "a": ast.IntConstant(1),
        "b": ast.IntConstant(2),
    }


def test_headers_keep_order():
    source = """
    include "shared.thrift"
    cpp_include "<vector>"
    namespace * example
    namespace java org.example
    include "other.thrift"
    """
    document = parse_source(source)

    assert document.headers == (
        ast.Include("shared.thrift"),
        ast.CppInclude("<vector>"),
        ast.Namespace(NamespaceScope.ALL, "example"),
        ast.Namespace(NamespaceScope.JAVA, "org.example"),
        ast.Include("other.thrift"),
    )
    assert [n.scope for n in document.namespaces] == [
        NamespaceScope.ALL,
        NamespaceScope.JAVA,
    ]
    assert len(document.includes) == 3
    assert document.definitions == ()


@pytest.mark.parametrize(
    "scope, expected",
    [
        ("*", NamespaceScope.ALL),
        ("py", NamespaceScope.PY),
        ("perl", NamespaceScope.PERL),
        ("rb", NamespaceScope.RB),
        ("cocoa", NamespaceScope.COCOA),
        ("csharp", NamespaceScope.CSHARP),
        ("c_glib", NamespaceScope.C_GLIB),
        ("js", NamespaceScope.JS),
        ("st", NamespaceScope.ST),
    ],
)
def test_namespace_scopes(scope, expected):
    document = parse_source(f"namespace {scope} demo")
    assert document.headers[0].scope == expected


def test_nested_container_types():
    source = """
    typedef map<string,list<i32>> Index
    typedef list<map<i64, set<Point>>> Nested
    typedef set<binary> Blobs
    """
    index, nested, blobs = parse_source(source).definitions

    assert index.field_type == ast.MapType(
        BaseType.STRING, ast.ListType(BaseType.I32)
    )
    assert nested.field_type == ast.ListType(
        ast.MapType(BaseType.I64, ast.SetType(ast.NamedType("Point")))
    )
    assert blobs.field_type == ast.SetType(BaseType.BINARY)


def test_base_types():
    source = """
    struct AllTypes {
        1: bool a
        2: byte b
        3: i8 c
        4: i16 d
        5: i32 e
        6: i64 f
        7: double g
        8: string h
        9: binary i
    }
    """
    struct = parse_source(source).definitions[0]
    assert [f.field_type for f in struct.fields] == [
        BaseType.BOOL,
        BaseType.I8,
        BaseType.I8,
        BaseType.I16,
        BaseType.I32,
        BaseType.I64,
        BaseType.DOUBLE,
        BaseType.STRING,
        BaseType.BINARY,
    ]


def test_keywords_need_word_boundary():
    source = """
    typedef listing Listing
    typedef stringValue Value
    struct S { 1: mapping m }
    """
    listing, value, struct = parse_source(source).definitions

    assert listing.field_type == ast.NamedType("listing")
    assert value.field_type == ast.NamedType("stringValue")
    assert struct.fields[0].field_type == ast.NamedType("mapping")


def test_field_requiredness_and_defaults():
    source = """
    struct Options {
        1: i32 plain
        2: required i32 strict
        3: optional i32 count = 10
        4: double ratio = 1.5
        5: list<string> tags = ["a", "b"]
        6: Color color = Color.RED
        i32 untagged
    }
    """
    fields = parse_source(source).definitions[0].fields

    assert [f.required for f in fields] == [True, True, False, True, True, True, True]
    assert fields[0] == ast.Field("plain", BaseType.I32, field_id=1)
    assert fields[1] == ast.Field("strict", BaseType.I32, field_id=2)
    assert fields[2].default == ast.IntConstant(10)
    assert fields[3].default == ast.DoubleConstant(1.5)
    assert fields[4].default == ast.ConstList(("a", "b"))
    assert fields[5].field_type == ast.NamedType("Color")
    assert fields[5].default == ast.Identifier("Color.RED")
    assert fields[6].field_id is None


def test_list_separators_are_optional_and_mixed():
    source = """
    struct S {
        1: i32 a,
        2: i32 b;
        3: i32 c
    }
    enum E { A; B, C }
    service Svc {
        void one(1: i32 x, 2: i32 y);
        void two(1: i32 x; 2: i32 y),
        void three(1: i32 x 2: i32 y)
    }
    const i32 X = 1;
    typedef i32 Id,
    """
    struct, enum, service, const, typedef = parse_source(source).definitions

    assert [f.name for f in struct.fields] == ["a", "b", "c"]
    assert [v.name for v in enum.values] == ["A", "B", "C"]
    assert [len(f.parameters) for f in service.functions] == [2, 2, 2]
    assert const.value == ast.IntConstant(1)
    assert typedef.name == "Id"


def test_union_and_exception():
    source = """
    union Value {
        1: string text
        2: i64 number
    }
    exception NotFound {
        1: string message
    }
    """
    value, not_found = parse_source(source).definitions

    assert isinstance(value, ast.Union)
    assert [f.name for f in value.fields] == ["text", "number"]
    assert isinstance(not_found, ast.Exception)
    assert not_found.fields == (ast.Field("message", BaseType.STRING, field_id=1),)


def test_function_throws():
    source = """
    service Calculator {
        i32 divide(1: i32 a, 2: i32 b) throws (1: DivideByZero error)
        list<i64> history()
    }
    """
    divide, history = parse_source(source).definitions[0].functions

    assert divide.return_type == BaseType.I32
    assert [p.name for p in divide.parameters] == ["a", "b"]
    assert divide.throws == ast.Throws(
        (ast.Field("error", ast.NamedType("DivideByZero"), field_id=1),)
    )
    assert history.return_type == ast.ListType(BaseType.I64)
    assert history.throws is None


def test_oneway_with_result_and_throws_is_accepted():
    source = "service S { oneway i32 f() throws (1: E e) }"
    function = parse_source(source).definitions[0].functions[0]

    assert function.oneway is True
    assert function.return_type == BaseType.I32
    assert function.throws is not None


def test_const_values():
    source = """
    const i32 NEG = -7
    const i32 HEX = 0x1F
    const i32 MAX = 2147483647
    const i32 MIN = -2147483648
    const i64 BIG = 9223372036854775807
    const double HUGE = 9223372036854775808
    const double EXP = -2.5e3
    const string NAME = "thrift"
    const string SINGLE = 'quoted'
    const Color DEFAULT_COLOR = Color.RED
    const list<i32> PRIMES = [2; 3, 5 7]
    const map<string, list<i32>> NESTED = {"a": [1, 2], "b": []}
    const list<i32> EMPTY = []
    const map<i32, string> NONE = {}
    """
    values = {c.name: c.value for c in parse_source(source).definitions}

    assert values["NEG"] == ast.IntConstant(-7)
    assert values["HEX"] == ast.IntConstant(31)
    assert values["MAX"] == ast.IntConstant(2**31 - 1)
    assert values["MIN"] == ast.IntConstant(-(2**31))
    assert values["BIG"] == ast.DoubleConstant(float(2**63 - 1))
    assert values["HUGE"] == ast.DoubleConstant(float(2**63))
    assert values["EXP"] == ast.DoubleConstant(-2500.0)
    assert values["NAME"] == "thrift"
    assert values["SINGLE"] == "quoted"
    assert values["DEFAULT_COLOR"] == ast.Identifier("Color.RED")
    assert values["PRIMES"] == ast.ConstList(
        tuple(ast.IntConstant(n) for n in (2, 3, 5, 7))
    )
    assert values["NESTED"] == ast.ConstMap(
        (
            ("a", ast.ConstList((ast.IntConstant(1), ast.IntConstant(2)))),
            ("b", ast.ConstList()),
        ),
    )
    assert values["EMPTY"] == ast.ConstList()
    assert len(values["NONE"]) == 0


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "3000000000"])
def test_integer_outside_int32_is_double(text):
    const = parse_source(f"const i64 BIG = {text}").definitions[0]

    assert const.value == ast.DoubleConstant(float(int(text)))
    assert isinstance(const.value.value, float)


def test_int_and_double_constants_differ():
    one = parse_source("const double D = 1").definitions[0]
    one_point_zero = parse_source("const double D = 1.0").definitions[0]

    assert one.value == ast.IntConstant(1)
    assert one_point_zero.value == ast.DoubleConstant(1.0)
    assert one != one_point_zero


def test_deep_nesting_is_a_syntax_error():
    depth = 1000
    source = "typedef " + "list<" * depth + "i32" + ">" * depth + " Deep"

    with pytest.raises(IdlSyntaxError) as exc_info:
        parse_source(source)
    assert str(exc_info.value).startswith("Nesting too deep: 1,")


def test_definitions_keep_source_order():
    source = """
    struct B {}
    const i32 A = 1
    enum C {}
    typedef i32 D
    service E {}
    exception F {}
    union G {}
    struct H {}
    """
    document = parse_source(source)

    assert [d.name for d in document.definitions] == list("BACDEFGH")
    assert [type(d) for d in document.definitions] == [
        ast.Struct,
        ast.Const,
        ast.Enum,
        ast.Typedef,
        ast.Service,
        ast.Exception,
        ast.Union,
        ast.Struct,
    ]
    assert [s.name for s in document.definitions_of(ast.Struct)] == ["B", "H"]
    assert document.get_definition("D").field_type == BaseType.I32
    assert document.get_definition("missing") is None


def test_comments_are_skipped():
    source = """
    # hash comment
    // line comment
    /* block
       comment */
    struct S { // trailing
        1: i32 a # trailing
        /**/ 2: i32 b
        //// banner
    }
    """
    struct = parse_source(source).definitions[0]

    assert [f.name for f in struct.fields] == ["a", "b"]
    assert struct.documentation is None
    assert all(f.documentation is None for f in struct.fields)


def test_definition_positions():
    document = parse_source("namespace cpp a\n\n/// doc\n  struct S {\n  1: i32 x\n}")

    namespace = document.headers[0]
    assert (namespace.line, namespace.column) == (1, 1)
    struct = document.definitions[0]
    assert (struct.line, struct.column) == (4, 3)
    assert (struct.fields[0].line, struct.fields[0].column) == (5, 3)


def test_empty_document():
    document = parse_source("  \n// nothing here\n")

    assert document.headers == ()
    assert document.definitions == ()
    assert document.documentation is None
