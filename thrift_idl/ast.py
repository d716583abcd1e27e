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

"""AST node definitions for Thrift IDL documents.

Nodes are frozen dataclasses built bottom-up by the parser. Sequences are
tuples, so a parsed document is immutable and hashable. Source positions
are recorded on declarations but do not take part in equality.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Type, TypeVar, Union as TypingUnion

from thrift_idl.types import BaseType, NamespaceScope


def _position():
    return field(default=0, compare=False)


# Headers


@dataclass(frozen=True)
class Include:
    """An ``include "path"`` directive."""

    path: str
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f'Include("{self.path}")'


@dataclass(frozen=True)
class CppInclude:
    """A ``cpp_include "path"`` directive."""

    path: str
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f'CppInclude("{self.path}")'


@dataclass(frozen=True)
class Namespace:
    """A ``namespace <scope> <name>`` directive."""

    scope: NamespaceScope
    name: str
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Namespace({self.scope.value} {self.name})"


Header = TypingUnion[Include, CppInclude, Namespace]


# Types


@dataclass(frozen=True)
class NamedType:
    """A reference to a typedef, enum, struct or other declared type.

    The name is not resolved by the parser.
    """

    name: str

    def __repr__(self) -> str:
        return f"NamedType({self.name})"


@dataclass(frozen=True)
class ListType:
    element_type: "FieldType"

    def __repr__(self) -> str:
        return f"ListType({self.element_type})"


@dataclass(frozen=True)
class SetType:
    element_type: "FieldType"

    def __repr__(self) -> str:
        return f"SetType({self.element_type})"


@dataclass(frozen=True)
class MapType:
    key_type: "FieldType"
    value_type: "FieldType"

    def __repr__(self) -> str:
        return f"MapType({self.key_type}, {self.value_type})"


@dataclass(frozen=True)
class VoidType:
    """Return type of a function that returns nothing."""

    def __repr__(self) -> str:
        return "VoidType()"


VOID = VoidType()

ContainerType = TypingUnion[ListType, SetType, MapType]
FieldType = TypingUnion[BaseType, NamedType, ListType, SetType, MapType]
FunctionType = TypingUnion[BaseType, NamedType, ListType, SetType, MapType, VoidType]


# Constant values


@dataclass(frozen=True)
class Identifier:
    """A constant value referring to another constant or an enum value."""

    name: str

    def __repr__(self) -> str:
        return f"Identifier({self.name})"


@dataclass(frozen=True)
class IntConstant:
    """A signed 32-bit integer constant."""

    value: int

    def __repr__(self) -> str:
        return f"IntConstant({self.value})"


@dataclass(frozen=True)
class DoubleConstant:
    """A floating-point constant, including integers too wide for 32 bits."""

    value: float

    def __repr__(self) -> str:
        return f"DoubleConstant({self.value!r})"


@dataclass(frozen=True)
class ConstList:
    """An ordered ``[a, b, ...]`` constant."""

    values: Tuple["ConstValue", ...] = ()

    def __repr__(self) -> str:
        return f"ConstList({list(self.values)})"


@dataclass(frozen=True, eq=False)
class ConstMap:
    """A ``{key: value, ...}`` constant.

    Entries keep their source order, but two maps with the same entries
    compare equal regardless of order.
    """

    entries: Tuple[Tuple["ConstValue", "ConstValue"], ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstMap):
            return NotImplemented
        return Counter(self.entries) == Counter(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.entries)
        return f"ConstMap({{{body}}})"

    def as_dict(self) -> Dict["ConstValue", "ConstValue"]:
        """Return the entries as a dict; later duplicate keys win."""
        return dict(self.entries)


# A str is a string literal.
ConstValue = TypingUnion[
    Identifier, str, IntConstant, DoubleConstant, ConstList, ConstMap
]


# Members


@dataclass(frozen=True)
class Field:
    """A struct, union or exception member, or an element of ``throws``."""

    name: str
    field_type: FieldType
    field_id: Optional[int] = None
    optional: bool = False
    default: Optional[ConstValue] = None
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    @property
    def required(self) -> bool:
        return not self.optional

    def __repr__(self) -> str:
        id_str = f"{self.field_id}: " if self.field_id is not None else ""
        req_str = "optional " if self.optional else ""
        default_str = f" = {self.default!r}" if self.default is not None else ""
        return f"Field({id_str}{req_str}{self.field_type} {self.name}{default_str})"


@dataclass(frozen=True)
class Parameter:
    """A function argument."""

    name: str
    field_type: FieldType
    field_id: Optional[int] = None
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        id_str = f"{self.field_id}: " if self.field_id is not None else ""
        return f"Parameter({id_str}{self.field_type} {self.name})"


@dataclass(frozen=True)
class Enumerator:
    """A value inside an enum. ``value`` is None when not given explicitly."""

    name: str
    value: Optional[int] = None
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        if self.value is None:
            return f"Enumerator({self.name})"
        return f"Enumerator({self.name} = {self.value})"


@dataclass(frozen=True)
class Throws:
    fields: Tuple[Field, ...] = ()

    def __repr__(self) -> str:
        return f"Throws({list(self.fields)})"


@dataclass(frozen=True)
class Function:
    """A service method."""

    name: str
    return_type: FunctionType
    parameters: Tuple[Parameter, ...] = ()
    throws: Optional[Throws] = None
    oneway: bool = False
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        oneway_str = "oneway " if self.oneway else ""
        throws_str = f" {self.throws!r}" if self.throws is not None else ""
        return (
            f"Function({oneway_str}{self.return_type} {self.name}"
            f"({', '.join(repr(p) for p in self.parameters)}){throws_str})"
        )


# Definitions


@dataclass(frozen=True)
class Const:
    name: str
    field_type: FieldType
    value: ConstValue
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Const({self.field_type} {self.name} = {self.value!r})"


@dataclass(frozen=True)
class Typedef:
    name: str
    field_type: FieldType
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Typedef({self.field_type} {self.name})"


@dataclass(frozen=True)
class Enum:
    name: str
    values: Tuple[Enumerator, ...] = ()
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Enum({self.name}, values={list(self.values)})"


@dataclass(frozen=True)
class Struct:
    name: str
    fields: Tuple[Field, ...] = ()
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Struct({self.name}, fields={list(self.fields)})"


@dataclass(frozen=True)
class Union:
    """A union. Exclusivity of members is not checked by the parser."""

    name: str
    fields: Tuple[Field, ...] = ()
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Union({self.name}, fields={list(self.fields)})"


@dataclass(frozen=True)
class Exception:
    name: str
    fields: Tuple[Field, ...] = ()
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Exception({self.name}, fields={list(self.fields)})"


@dataclass(frozen=True)
class Service:
    name: str
    functions: Tuple[Function, ...] = ()
    documentation: Optional[str] = None
    line: int = _position()
    column: int = _position()

    def __repr__(self) -> str:
        return f"Service({self.name}, functions={list(self.functions)})"


Definition = TypingUnion[Const, Typedef, Enum, Struct, Union, Exception, Service]

D = TypeVar("D", Const, Typedef, Enum, Struct, Union, Exception, Service)


@dataclass(frozen=True)
class Document:
    """The root node representing a complete IDL file."""

    headers: Tuple[Header, ...] = ()
    definitions: Tuple[Definition, ...] = ()
    documentation: Optional[str] = None
    source_file: Optional[str] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return (
            f"Document(headers={len(self.headers)}, "
            f"definitions={len(self.definitions)})"
        )

    @property
    def namespaces(self) -> Tuple[Namespace, ...]:
        return tuple(h for h in self.headers if isinstance(h, Namespace))

    @property
    def includes(self) -> Tuple[TypingUnion[Include, CppInclude], ...]:
        return tuple(h for h in self.headers if not isinstance(h, Namespace))

    def definitions_of(self, kind: Type[D]) -> Tuple[D, ...]:
        """Return the definitions of one node class, in source order."""
        return tuple(d for d in self.definitions if type(d) is kind)

    def get_definition(self, name: str) -> Optional[Definition]:
        """Look up a definition by name; the first match wins."""
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None
