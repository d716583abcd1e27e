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

"""Character cursor and skip layer for the scannerless Thrift IDL parser.

There is no separate token stream: the parser pulls tokens straight from the
source text. Before every token the scanner skips whitespace and ordinary
comments; documentation comments (``///`` and ``/** */``) are left in place
so the grammar can attach them to the declaration that follows.
"""

import re
from typing import Iterable, List, Optional, Tuple

from thrift_idl.errors import ExpectationError

_WHITESPACE = re.compile(r"\s+")
_INDENT = re.compile(r"[ \t]*")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_INTEGER = re.compile(r"[+-]?(?:0[xX][0-9a-fA-F]+|[0-9]+)")
_NUMBER = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F]+|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_IDENTIFIER_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_."
)

Mark = Tuple[int, int, int]


def _clean_block_documentation(text: str) -> str:
    lines = [line.strip() for line in text.split("\n")]
    cleaned: List[str] = []
    for index, line in enumerate(lines):
        if index > 0 and line.startswith("*"):
            line = line[1:].strip()
        cleaned.append(line)
    return "\n".join(cleaned).strip()


class Scanner:
    """A position in the source with running line and column counters."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos >= len(self.source):
            return "\0"
        return self.source[pos]

    def startswith(self, text: str) -> bool:
        return self.source.startswith(text, self.pos)

    def consume(self, length: int) -> str:
        """Advance over ``length`` characters and return them."""
        text = self.source[self.pos : self.pos + length]
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)
        self.pos += len(text)
        return text

    def mark(self) -> Mark:
        return (self.pos, self.line, self.column)

    def reset(self, mark: Mark) -> None:
        self.pos, self.line, self.column = mark

    def error(self, expected: str) -> ExpectationError:
        """Build an error for a missing ``expected`` at the next token."""
        self.skip()
        return ExpectationError(expected, self.line, self.column, self.filename)

    # Skip layer

    def at_line_documentation(self) -> bool:
        return self.startswith("///") and not self.startswith("////")

    def at_block_documentation(self) -> bool:
        return self.startswith("/**") and not self.startswith("/**/")

    def skip(self) -> None:
        """Skip whitespace, line comments and block comments."""
        while not self.at_end():
            ch = self.peek()
            if ch.isspace():
                self.consume(_WHITESPACE.match(self.source, self.pos).end() - self.pos)
            elif ch == "#" or (
                self.startswith("//") and not self.at_line_documentation()
            ):
                self._skip_to_end_of_line()
            elif self.startswith("/*") and not self.at_block_documentation():
                self.consume(2)
                self._read_until("*/")
            else:
                break

    def _skip_to_end_of_line(self) -> str:
        end = self.source.find("\n", self.pos)
        if end < 0:
            end = len(self.source)
        text = self.consume(end - self.pos)
        self.consume(1)
        return text

    def _read_until(self, terminator: str) -> str:
        end = self.source.find(terminator, self.pos)
        if end < 0:
            self.consume(len(self.source) - self.pos)
            raise ExpectationError(
                f"'{terminator}'", self.line, self.column, self.filename
            )
        text = self.consume(end - self.pos)
        self.consume(len(terminator))
        return text

    def documentation(self) -> Optional[str]:
        """Read one documentation comment and return its text.

        ``///`` lines on consecutive lines form a single comment; a blank
        line ends it. Returns None, with only whitespace and ordinary comments
        consumed, when no documentation comment comes next.
        """
        self.skip()
        if self.at_line_documentation():
            lines = []
            while True:
                self.consume(3)
                lines.append(self._skip_to_end_of_line().strip())
                after = self.mark()
                self.consume(_INDENT.match(self.source, self.pos).end() - self.pos)
                if not self.at_line_documentation():
                    self.reset(after)
                    break
            return "\n".join(lines).strip()
        if self.at_block_documentation():
            self.consume(3)
            return _clean_block_documentation(self._read_until("*/"))
        return None

    # Tokens

    def keyword(self, word: str) -> bool:
        """Consume ``word`` unless it is only the prefix of a longer name."""
        self.skip()
        if not self.startswith(word):
            return False
        if word[-1] in _IDENTIFIER_CHARS and self.peek(len(word)) in _IDENTIFIER_CHARS:
            return False
        self.consume(len(word))
        return True

    def symbol(self, ch: str) -> bool:
        self.skip()
        if self.peek() != ch:
            return False
        self.consume(1)
        return True

    def choice(self, words: Iterable[str]) -> Optional[str]:
        """Consume the first of ``words`` that matches, in order."""
        for word in words:
            if self.keyword(word):
                return word
        return None

    def list_separator(self) -> Optional[str]:
        return self.choice((",", ";"))

    def _pattern(self, pattern: "re.Pattern") -> Optional[str]:
        self.skip()
        match = pattern.match(self.source, self.pos)
        if match is None:
            return None
        return self.consume(match.end() - self.pos)

    def identifier(self) -> Optional[str]:
        return self._pattern(_IDENTIFIER)

    def integer(self) -> Optional[str]:
        return self._pattern(_INTEGER)

    def number(self) -> Optional[str]:
        """Read an integer or floating-point literal as text."""
        return self._pattern(_NUMBER)

    def literal(self) -> Optional[str]:
        """Read a quoted string literal. There are no escape sequences."""
        self.skip()
        quote = self.peek()
        if quote not in "\"'":
            return None
        self.consume(1)
        return self._read_until(quote)
