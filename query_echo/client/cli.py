"""query-echo-uri — print the URI a template and values build to.

    query-echo-uri "/hotel+list/{city}" -q "q={q}" "New York" "foo+bar"
    /hotel+list/New%20York?q=foo%2Bbar
"""

import argparse
import sys
from typing import Optional

from query_echo.client.uri_builder import UriBuilder
from query_echo.core.errors import MissingTemplateVariableError


def _split_pair(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    return name, value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="query-echo-uri", description="Build and encode a request URI")
    p.add_argument("path", help="Path template, e.g. /api/sample or /hotel+list/{city}")
    p.add_argument("values", nargs="*", help="Positional template variable values")
    p.add_argument("-q", "--query", action="append", default=[], type=_split_pair, metavar="NAME=VALUE",
                   help="Query parameter (value may contain {placeholders}); repeatable")
    p.add_argument("--var", action="append", default=[], type=_split_pair, metavar="NAME=VALUE",
                   help="Named template variable; when given, positional values are ignored")
    return p


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    builder = UriBuilder.from_path(args.path)
    for name, value in args.query:
        builder.query_param(name, value)
    try:
        uri = builder.build(dict(args.var)) if args.var else builder.build(*args.values)
    except MissingTemplateVariableError as e:
        print(e.message, file=sys.stderr)
        return 2
    print(uri)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
