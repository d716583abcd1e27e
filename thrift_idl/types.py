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

"""Keyword tables for the Thrift IDL grammar."""

from enum import Enum as PyEnum


class BaseType(PyEnum):
    """Built-in scalar types."""

    BOOL = "bool"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    DOUBLE = "double"
    STRING = "string"
    BINARY = "binary"


class NamespaceScope(PyEnum):
    """Target scopes of a namespace directive."""

    ALL = "all"
    CPP = "cpp"
    JAVA = "java"
    PY = "py"
    PERL = "perl"
    RB = "rb"
    COCOA = "cocoa"
    CSHARP = "csharp"
    C_GLIB = "c_glib"
    JS = "js"
    ST = "st"


BASE_TYPES = {
    "bool": BaseType.BOOL,
    "byte": BaseType.I8,
    "i8": BaseType.I8,
    "i16": BaseType.I16,
    "i32": BaseType.I32,
    "i64": BaseType.I64,
    "double": BaseType.DOUBLE,
    "string": BaseType.STRING,
    "binary": BaseType.BINARY,
}

NAMESPACE_SCOPES = {
    "*": NamespaceScope.ALL,
    "cpp": NamespaceScope.CPP,
    "java": NamespaceScope.JAVA,
    "py": NamespaceScope.PY,
    "perl": NamespaceScope.PERL,
    "rb": NamespaceScope.RB,
    "cocoa": NamespaceScope.COCOA,
    "csharp": NamespaceScope.CSHARP,
    "c_glib": NamespaceScope.C_GLIB,
    "js": NamespaceScope.JS,
    "st": NamespaceScope.ST,
}

# Value is the field's ``optional`` flag.
FIELD_REQUIREDNESS = {
    "required": False,
    "optional": True,
}


__all__ = [
    "BaseType",
    "NamespaceScope",
    "BASE_TYPES",
    "NAMESPACE_SCOPES",
    "FIELD_REQUIREDNESS",
]
