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

"""Recursive descent parser for Thrift IDL.

Each ``parse_*`` method is one grammar rule. A rule returns its node, or
None when its leading token does not match, in which case nothing has been
consumed and the caller may try the next alternative. Once a rule's leading
keyword or token has matched, the rest of the rule is mandatory: a missing
piece raises ``ExpectationError`` at once instead of backtracking.
"""

from typing import Callable, List, Optional, Tuple, TypeVar

from thrift_idl import ast
from thrift_idl.errors import ExpectationError, IdlSyntaxError, TrailingInputError
from thrift_idl.scanner import Scanner
from thrift_idl.types import BASE_TYPES, FIELD_REQUIREDNESS, NAMESPACE_SCOPES

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

DEFINITION_KEYWORDS = (
    "const",
    "typedef",
    "enum",
    "struct",
    "union",
    "exception",
    "service",
)

T = TypeVar("T")


def _to_int(text: str) -> int:
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-")
    if digits[:2].lower() == "0x":
        return sign * int(digits[2:], 16)
    return sign * int(digits)


def _is_integer_text(text: str) -> bool:
    digits = text.lstrip("+-")
    return digits[:2].lower() == "0x" or digits.isdigit()


class Parser:
    """Recursive descent parser for Thrift IDL."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.scanner = Scanner(source, filename)
        self.filename = filename
        self._definition_rules = {
            "const": self.parse_const,
            "typedef": self.parse_typedef,
            "enum": self.parse_enum,
            "struct": self.parse_struct,
            "union": self.parse_union,
            "exception": self.parse_exception,
            "service": self.parse_service,
        }

    def expect(self, result: Optional[T], expected: str) -> T:
        """Return ``result``, or fail the committed rule if it is missing."""
        if result is None or result is False:
            raise self.scanner.error(expected)
        return result

    def expect_symbol(self, ch: str) -> None:
        self.expect(self.scanner.symbol(ch), f"'{ch}'")

    def repeat(self, rule: Callable[[], Optional[T]]) -> Tuple[T, ...]:
        items: List[T] = []
        while True:
            item = rule()
            if item is None:
                return tuple(items)
            items.append(item)

    def position(self) -> Tuple[int, int]:
        self.scanner.skip()
        return self.scanner.line, self.scanner.column

    def parse(self) -> ast.Document:
        try:
            documentation = self.parse_document_documentation()
            headers = self.repeat(self.parse_header)
            definitions = self.repeat(self.parse_definition)
        except RecursionError:
            line, column = self.scanner.line, self.scanner.column
            raise IdlSyntaxError(
                f"Nesting too deep: {line},{column}", line, column, self.filename
            ) from None
        self.scanner.skip()
        if not self.scanner.at_end():
            raise TrailingInputError(
                self.scanner.line, self.scanner.column, self.filename
            )
        return ast.Document(
            headers=headers,
            definitions=definitions,
            documentation=documentation,
            source_file=self.filename,
        )

    def parse_document_documentation(self) -> Optional[str]:
        """Leading documentation of the file.

        A doc comment directly followed by a definition documents that
        definition instead.
        """
        start = self.scanner.mark()
        documentation = self.scanner.documentation()
        if documentation is None:
            return None
        after = self.scanner.mark()
        if self.scanner.choice(DEFINITION_KEYWORDS) is not None:
            self.scanner.reset(start)
            return None
        self.scanner.reset(after)
        return documentation

    # Headers

    def parse_header(self) -> Optional[ast.Header]:
        line, column = self.position()
        if self.scanner.keyword("include"):
            path = self.expect(self.scanner.literal(), "Literal")
            return ast.Include(path, line=line, column=column)
        if self.scanner.keyword("cpp_include"):
            path = self.expect(self.scanner.literal(), "Literal")
            return ast.CppInclude(path, line=line, column=column)
        if self.scanner.keyword("namespace"):
            scope = self.expect(
                self.scanner.choice(NAMESPACE_SCOPES), "NamespaceScope"
            )
            name = self.expect(self.scanner.identifier(), "Identifier")
            return ast.Namespace(
                NAMESPACE_SCOPES[scope], name, line=line, column=column
            )
        return None

    # Definitions

    def parse_definition(self) -> Optional[ast.Definition]:
        start = self.scanner.mark()
        documentation = self.scanner.documentation()
        line, column = self.position()
        keyword = self.scanner.choice(DEFINITION_KEYWORDS)
        if keyword is None:
            self.scanner.reset(start)
            return None
        rule = self._definition_rules[keyword]
        return rule(documentation, line, column)

    def parse_const(
        self, documentation: Optional[str], line: int, column: int
    ) -> ast.Const:
        field_type = self.expect(self.parse_field_type(), "FieldType")
        name = self.expect(self.scanner.identifier(), "Identifier")
        self.expect_symbol("=")
        value = self.expect(self.parse_const_value(), "ConstValue")
        self.scanner.list_separator()
        return ast.Const(
            name, field_type, value, documentation, line=line, column=column
        )

    def parse_typedef(
        self, documentation: Optional[str], line: int, column: int
    ) -> ast.Typedef:
        field_type = self.expect(self.parse_field_type(), "FieldType")
        name = self.expect(self.scanner.identifier(), "Identifier")
        self.scanner.list_separator()
        return ast.Typedef(name, field_type, documentation, line=line, column=column)

    def parse_enum(
        self, documentation: Optional[str], line: int, column: int
    ) -> ast.Enum:
        name = self.expect(self.scanner.identifier(), "Identifier")
        self.expect_symbol("{")
        values = self.repeat(self.parse_enumerator)
        self.expect_symbol("}")
        return ast.Enum(name, values, documentation, line=line, column=column)

    def parse_enumerator(self) -> Optional[ast.Enumerator]:
        start = self.scanner.mark()
        documentation = self.scanner.documentation()
        line, column = self.position()
        name = self.scanner.identifier()
        if name is None:
            self.scanner.reset(start)
            return None
        value = None
        if self.scanner.symbol("="):
            value = self.expect(self.parse_int32(), "Integer")
        self.scanner.list_separator()
        return ast.Enumerator(name, value, documentation, line=line, column=column)

    def parse_struct(
        self, documentation: Optional[str], line: int, column: int
    ) -> ast.Struct:
        name, fields = self._parse_field_block()
        return ast.Struct(name, fields, documentation, line=line, column=column)

    def parse_union(
        self, documentation: Optional[str], line: int, column: int
    ) -> ast.Union:
        name, fields = self._parse_field_block()
        return ast.Union(name, fields, documentation, line=line, column=column)

    def parse_exception(
        self, documentation: Optional[str], line: int, column: int
    ) -> ast.Exception:
        name, fields = self._parse_field_block()
        return ast.Exception(name, fields, documentation, line=line, column=column)

    def _parse_field_block(self) -> Tuple[str, Tuple[ast.Field, ...]]:
        name = self.expect(self.scanner.identifier(), "Identifier")
        self.expect_symbol("{")
        fields = self.repeat(self.parse_field)
        self.expect_symbol("}")
        return name, fields

    def parse_service(
        self, documentation: Optional[str], line: int, column: int
    ) -> ast.Service:
        name = self.expect(self.scanner.identifier(), "Identifier")
        self.expect_symbol("{")
        functions = self.repeat(self.parse_function)
        self.expect_symbol("}")
        return ast.Service(name, functions, documentation, line=line, column=column)

    # Members

    def parse_field(self) -> Optional[ast.Field]:
        start = self.scanner.mark()
        documentation = self.scanner.documentation()
        line, column = self.position()
        field_id = self.parse_field_id()
        requiredness = self.scanner.choice(FIELD_REQUIREDNESS)
        field_type = self.parse_field_type()
        if field_type is None:
            self.scanner.reset(start)
            return None
        name = self.expect(self.scanner.identifier(), "Identifier")
        default = None
        if self.scanner.symbol("="):
            default = self.expect(self.parse_const_value(), "ConstValue")
        self.scanner.list_separator()
        return ast.Field(
            name,
            field_type,
            field_id=field_id,
            optional=FIELD_REQUIREDNESS.get(requiredness, False),
            default=default,
            documentation=documentation,
            line=line,
            column=column,
        )

    def parse_field_id(self) -> Optional[int]:
        field_id = self.parse_int32()
        if field_id is None:
            return None
        self.expect_symbol(":")
        return field_id

    def parse_parameter(self) -> Optional[ast.Parameter]:
        start = self.scanner.mark()
        documentation = self.scanner.documentation()
        line, column = self.position()
        field_id = self.parse_field_id()
        field_type = self.parse_field_type()
        if field_type is None:
            self.scanner.reset(start)
            return None
        name = self.expect(self.scanner.identifier(), "Identifier")
        self.scanner.list_separator()
        return ast.Parameter(
            name,
            field_type,
            field_id=field_id,
            documentation=documentation,
            line=line,
            column=column,
        )

    def parse_function(self) -> Optional[ast.Function]:
        start = self.scanner.mark()
        documentation = self.scanner.documentation()
        line, column = self.position()
        # oneway with a non-void result or throws is accepted here; rejecting
        # it belongs to semantic checks.
        oneway = self.scanner.keyword("oneway")
        return_type = self.parse_function_type()
        if return_type is None:
            self.scanner.reset(start)
            return None
        name = self.expect(self.scanner.identifier(), "Identifier")
        self.expect_symbol("(")
        parameters = self.repeat(self.parse_parameter)
        self.expect_symbol(")")
        throws = self.parse_throws()
        self.scanner.list_separator()
        return ast.Function(
            name,
            return_type,
            parameters=parameters,
            throws=throws,
            oneway=oneway,
            documentation=documentation,
            line=line,
            column=column,
        )

    def parse_throws(self) -> Optional[ast.Throws]:
        if not self.scanner.keyword("throws"):
            return None
        self.expect_symbol("(")
        fields = self.repeat(self.parse_field)
        self.expect_symbol(")")
        return ast.Throws(fields)

    # Types

    def parse_function_type(self) -> Optional[ast.FunctionType]:
        if self.scanner.keyword("void"):
            return ast.VOID
        return self.parse_field_type()

    def parse_field_type(self) -> Optional[ast.FieldType]:
        container = self.parse_container_type()
        if container is not None:
            return container
        base_type = self.scanner.choice(BASE_TYPES)
        if base_type is not None:
            return BASE_TYPES[base_type]
        name = self.scanner.identifier()
        if name is not None:
            return ast.NamedType(name)
        return None

    def parse_container_type(self) -> Optional[ast.ContainerType]:
        if self.scanner.keyword("list"):
            return ast.ListType(self._parse_type_arguments(1)[0])
        if self.scanner.keyword("set"):
            return ast.SetType(self._parse_type_arguments(1)[0])
        if self.scanner.keyword("map"):
            key_type, value_type = self._parse_type_arguments(2)
            return ast.MapType(key_type, value_type)
        return None

    def _parse_type_arguments(self, count: int) -> List[ast.FieldType]:
        self.expect_symbol("<")
        arguments = [self.expect(self.parse_field_type(), "FieldType")]
        while len(arguments) < count:
            self.expect_symbol(",")
            arguments.append(self.expect(self.parse_field_type(), "FieldType"))
        self.expect_symbol(">")
        return arguments

    # Values

    def parse_int32(self) -> Optional[int]:
        start = self.scanner.mark()
        text = self.scanner.integer()
        if text is None:
            return None
        value = _to_int(text)
        if not INT32_MIN <= value <= INT32_MAX:
            self.scanner.reset(start)
            raise self.scanner.error("Integer")
        return value

    def parse_const_value(self) -> Optional[ast.ConstValue]:
        name = self.scanner.identifier()
        if name is not None:
            return ast.Identifier(name)
        literal = self.scanner.literal()
        if literal is not None:
            return literal
        number = self.scanner.number()
        if number is not None:
            if _is_integer_text(number):
                value = _to_int(number)
                if INT32_MIN <= value <= INT32_MAX:
                    return ast.IntConstant(value)
                return ast.DoubleConstant(float(value))
            return ast.DoubleConstant(float(number))
        if self.scanner.symbol("["):
            return self._parse_const_list()
        if self.scanner.symbol("{"):
            return self._parse_const_map()
        return None

    def _parse_const_list(self) -> ast.ConstList:
        values = []
        while True:
            value = self.parse_const_value()
            if value is None:
                break
            values.append(value)
            self.scanner.list_separator()
        self.expect_symbol("]")
        return ast.ConstList(tuple(values))

    def _parse_const_map(self) -> ast.ConstMap:
        entries = []
        while True:
            key = self.parse_const_value()
            if key is None:
                break
            self.expect_symbol(":")
            value = self.expect(self.parse_const_value(), "ConstValue")
            entries.append((key, value))
            self.scanner.list_separator()
        self.expect_symbol("}")
        return ast.ConstMap(tuple(entries))


__all__ = ["Parser", "ExpectationError", "TrailingInputError"]
