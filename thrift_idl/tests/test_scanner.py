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

"""Tests for the scanner cursor and skip layer."""

from thrift_idl.scanner import Scanner


def test_consume_tracks_line_and_column():
    scanner = Scanner("ab\ncd\n\nef")

    scanner.consume(1)
    assert (scanner.line, scanner.column) == (1, 2)
    scanner.consume(3)
    assert (scanner.line, scanner.column) == (2, 2)
    scanner.consume(4)
    assert (scanner.line, scanner.column) == (4, 2)
    scanner.consume(10)
    assert (scanner.line, scanner.column) == (4, 3)
    assert scanner.at_end()


def test_mark_and_reset():
    scanner = Scanner("struct\nFoo")
    start = scanner.mark()
    assert scanner.keyword("struct")
    assert scanner.identifier() == "Foo"
    assert (scanner.line, scanner.column) == (2, 4)

    scanner.reset(start)
    assert (scanner.pos, scanner.line, scanner.column) == (0, 1, 1)


def test_skip_leaves_documentation_in_place():
    scanner = Scanner("  // c\n # c\n /* c */ /// doc\n")
    scanner.skip()
    assert scanner.startswith("/// doc")
    assert (scanner.line, scanner.column) == (3, 10)

    scanner = Scanner("/* c */ /** doc */")
    scanner.skip()
    assert scanner.startswith("/** doc */")


def test_documentation_returns_none_without_doc_comment():
    scanner = Scanner("  // plain\nstruct")
    assert scanner.documentation() is None
    assert scanner.keyword("struct")


def test_line_documentation_at_end_of_input():
    scanner = Scanner("/// trailing")
    assert scanner.documentation() == "trailing"
    assert scanner.at_end()


def test_keyword_requires_word_boundary():
    scanner = Scanner("services service")
    assert not scanner.keyword("service")
    assert scanner.identifier() == "services"
    assert scanner.keyword("service")


def test_identifier_allows_dots_and_underscores():
    scanner = Scanner("_private.name_2 9lives")
    assert scanner.identifier() == "_private.name_2"
    assert scanner.identifier() is None


def test_numbers():
    scanner = Scanner("-12 0x1f +3.5 1e3 .25")
    assert scanner.integer() == "-12"
    assert scanner.number() == "0x1f"
    assert scanner.number() == "+3.5"
    assert scanner.number() == "1e3"
    assert scanner.number() == ".25"
    assert scanner.number() is None


def test_literal_has_no_escapes():
    scanner = Scanner(r'"a\b" x')
    assert scanner.literal() == r"a\b"
    assert scanner.literal() is None


def test_choice_tries_words_in_order():
    scanner = Scanner("; ,")
    assert scanner.list_separator() == ";"
    assert scanner.list_separator() == ","
    assert scanner.list_separator() is None
