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

"""Errors raised while parsing Thrift IDL."""


class IdlError(Exception):
    pass


class IdlSyntaxError(IdlError):
    """Malformed input, located at a 1-based line and column."""

    def __init__(
        self, message: str, line: int, column: int, filename: str = "<input>"
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename

    @property
    def location(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


class ExpectationError(IdlSyntaxError):
    """A rule failed after committing on its leading keyword or token."""

    def __init__(
        self, expected: str, line: int, column: int, filename: str = "<input>"
    ):
        message = f"{expected} expected: {line},{column}"
        super().__init__(message, line, column, filename)
        self.expected = expected


class TrailingInputError(IdlSyntaxError):
    """The document grammar matched without consuming the whole input."""

    def __init__(self, line: int, column: int, filename: str = "<input>"):
        super().__init__(f"Parsing failed: {line},{column}", line, column, filename)


__all__ = ["IdlError", "IdlSyntaxError", "ExpectationError", "TrailingInputError"]
