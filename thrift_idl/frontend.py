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

"""Entry points for parsing Thrift IDL files."""

import logging
from pathlib import Path
from typing import List, Union

from thrift_idl.ast import Document
from thrift_idl.errors import IdlSyntaxError
from thrift_idl.parser import Parser

logger = logging.getLogger(__name__)

# Every byte is read as one character, so columns count bytes.
DEFAULT_ENCODING = "latin-1"


class ThriftFrontend:
    """Frontend for Thrift IDL (.thrift)."""

    extensions: List[str] = [".thrift"]

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self.encoding = encoding

    def parse(self, source: str, filename: str = "<input>") -> Document:
        """Parse source text and return its document."""
        try:
            document = Parser(source, filename).parse()
        except IdlSyntaxError as exc:
            logger.debug("Failed to parse %s at %s", filename, exc.location)
            raise
        logger.debug(
            "Parsed %s: %d header(s), %d definition(s)",
            filename,
            len(document.headers),
            len(document.definitions),
        )
        return document

    def parse_file(self, path: Union[str, Path]) -> Document:
        """Read a file and return its document.

        Raises OSError when the file cannot be read.
        """
        with open(path, encoding=self.encoding, newline="") as f:
            source = f.read()
        return self.parse(source, str(path))

    def supports_file(self, path: Path) -> bool:
        """Return True if this frontend handles the file extension."""
        return Path(path).suffix.lower() in self.extensions


def parse(path: Union[str, Path]) -> Document:
    """Parse the IDL file at ``path``."""
    return ThriftFrontend().parse_file(path)


def parse_source(source: str, filename: str = "<input>") -> Document:
    """Parse IDL source text."""
    return ThriftFrontend().parse(source, filename)


__all__ = ["ThriftFrontend", "parse", "parse_source", "DEFAULT_ENCODING"]
