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

"""CLI entry point for the Thrift IDL parser."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from thrift_idl.errors import IdlSyntaxError
from thrift_idl.frontend import ThriftFrontend

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "THRIFT_IDL_LOG_LEVEL"


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="thrift-idl",
        description="Thrift IDL parser",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser(
        "check",
        help="Parse IDL files and report syntax errors",
    )

    check_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        metavar="FILE",
        help="IDL files to parse",
    )

    check_parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Source encoding. Default: latin-1 (one character per byte)",
    )

    return parser.parse_args(args)


def configure_logging(verbose: bool) -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=level, format="%(asctime)s - %(levelname)s - %(message)s"
    )


def check_file(frontend: ThriftFrontend, file_path: Path) -> bool:
    """Parse a single file and print a summary or the error."""
    logger.info("Checking %s", file_path)
    try:
        document = frontend.parse_file(file_path)
    except OSError as e:
        print(f"Error reading {file_path}: {e}", file=sys.stderr)
        return False
    except IdlSyntaxError as e:
        print(f"{file_path}: {e}", file=sys.stderr)
        return False

    print(
        f"{file_path}: {len(document.headers)} header(s), "
        f"{len(document.definitions)} definition(s)"
    )
    return True


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    frontend = ThriftFrontend()
    if args.encoding is not None:
        frontend = ThriftFrontend(args.encoding)

    success = True
    for file_path in args.files:
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            success = False
            continue
        if not check_file(frontend, file_path):
            success = False

    return 0 if success else 1


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(parsed.verbose)

    if parsed.command is None:
        print("Usage: thrift-idl <command> [options]", file=sys.stderr)
        print("Commands: check", file=sys.stderr)
        print("Use 'thrift-idl <command> --help' for more information", file=sys.stderr)
        return 1

    if parsed.command == "check":
        return cmd_check(parsed)

    return 0


if __name__ == "__main__":
    sys.exit(main())
