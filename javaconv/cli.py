"""javaconv CLI: render a JSON syntax tree as Rust source."""

from __future__ import annotations

import json
import sys

from .backend.rust import emit_rust
from .backend.util import RenderError
from .serialize import SerializeError, from_dict


USAGE: str = """\
javaconv [OPTIONS] [INPUT] [-o OUTPUT]

Render a JSON-serialized Java syntax tree as Rust source.
Reads stdin when INPUT is omitted.

Options:
  --no-comments       Drop line and block comments
  --indent N          Indent with N spaces (default 4)
  -o, --output FILE   Write output to FILE instead of stdout
  --help              Show this help message
"""


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    input_file: str | None = None
    output_file: str | None = None
    print_comments = True
    indent = 4
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--no-comments":
            print_comments = False
            i += 1
        elif arg == "--indent":
            if i + 1 >= len(args):
                print("javaconv: --indent requires an argument", file=sys.stderr)
                return 2
            value = args[i + 1]
            if not (value.isascii() and value.isdigit()):
                print("javaconv: --indent expects a number, got '" + value + "'", file=sys.stderr)
                return 2
            indent = int(value)
            i += 2
        elif arg == "-o" or arg == "--output":
            if i + 1 >= len(args):
                print("javaconv: " + arg + " requires an argument", file=sys.stderr)
                return 2
            output_file = args[i + 1]
            i += 2
        elif arg.startswith("-") and arg != "-":
            print("javaconv: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif input_file is None:
            input_file = arg
            i += 1
        else:
            print("javaconv: unexpected argument '" + arg + "'", file=sys.stderr)
            return 2

    if input_file is None or input_file == "-":
        source = sys.stdin.read()
    else:
        try:
            with open(input_file, encoding="utf-8") as f:
                source = f.read()
        except FileNotFoundError:
            print("javaconv: " + input_file + ": No such file or directory", file=sys.stderr)
            return 1
        except (OSError, ValueError) as e:
            print("javaconv: " + input_file + ": " + str(e), file=sys.stderr)
            return 1

    try:
        data = json.loads(source)
    except ValueError as e:
        print("javaconv: invalid json: " + str(e), file=sys.stderr)
        return 1
    try:
        tree = from_dict(data)
    except SerializeError as e:
        print("javaconv: invalid tree: " + str(e), file=sys.stderr)
        return 1
    try:
        output = emit_rust(tree, print_comments, " " * indent)
    except RenderError as e:
        print("javaconv: render error: " + str(e), file=sys.stderr)
        return 1
    except NotImplementedError as e:
        print("javaconv: unsupported node: " + str(e), file=sys.stderr)
        return 1

    if output_file is None:
        sys.stdout.write(output)
        return 0
    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(output)
    except OSError as e:
        print("javaconv: cannot write '" + output_file + "': " + str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
