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

"""Thrift IDL parser producing an immutable AST."""

__version__ = "0.1.0"

from thrift_idl.ast import (
    Const,
    Document,
    Enum,
    Enumerator,
    Field,
    Function,
    Service,
    Struct,
    Typedef,
)
from thrift_idl.errors import (
    ExpectationError,
    IdlError,
    IdlSyntaxError,
    TrailingInputError,
)
from thrift_idl.frontend import ThriftFrontend, parse, parse_source
from thrift_idl.types import BaseType, NamespaceScope

__all__ = [
    "Const",
    "Document",
    "Enum",
    "Enumerator",
    "Field",
    "Function",
    "Service",
    "Struct",
    "Typedef",
    "ExpectationError",
    "IdlError",
    "IdlSyntaxError",
    "TrailingInputError",
    "ThriftFrontend",
    "parse",
    "parse_source",
    "BaseType",
    "NamespaceScope",
]
