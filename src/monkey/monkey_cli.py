"""
Monkey CLI Entrypoint.

This module provides the command-line interface for the Monkey front end.
It lexes or parses source code and reports the result, or starts the REPL.

Features:
    - Read source from `.monkey` files or inline strings.
    - Dump the token stream, the parsed statements, or the AST as JSON.
    - Output to console or file.
    - Report parser diagnostics on stderr and exit non-zero when there are any.
    - Launch an interactive REPL with optional verbosity.

Example usage:
    monkey hello.monkey
    monkey -s "let x = 5;" --tokens
    monkey hello.monkey --json -o hello.json
    monkey --repl --verbose

Functions:
    run_monkey(source: str, is_string: bool = False, tokens: bool = False,
               as_json: bool = False, out: str | None = None) -> list[str]:
        Runs lex (→ parse) → output, returning the parser diagnostics.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or run).
"""

import argparse
import json
import sys

from monkey.monkey_lexer import Lexer
from monkey.monkey_parser import Parser


def run_monkey(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    as_json: bool = False,
    out: str | None = None,
) -> list[str]:
    """
    Run the Monkey front end over a file or string and print or write the result.

    Args:
        source (str): The Monkey source code or path to a `.monkey` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        tokens (bool): If True, dumps the token stream instead of parsing. Defaults to False.
        as_json (bool): If True, emits JSON (token list or AST) instead of text. Defaults to False.
        out (str | None): Optional path to write the output. If None, prints to stdout.

    Returns:
        list[str]: Parser diagnostics; always empty in token mode.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.monkey'.
    """
    if not is_string and not source.endswith(".monkey"):
        raise ValueError("Only .monkey files are supported.")
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    errors: list[str] = []
    lexer = Lexer(source)

    # 2. Lexing only
    if tokens:
        toks = list(lexer)
        if as_json:
            text = json.dumps(
                [
                    {"type": str(t.type), "literal": t.literal, "line": t.line, "col": t.col}
                    for t in toks
                ],
                indent=2,
            )
        else:
            text = "\n".join(repr(t) for t in toks)
    # 3. Parsing
    else:
        parser = Parser(lexer)
        program = parser.parse_program()
        errors = parser.errors()
        if as_json:
            text = json.dumps(program.to_dict(), indent=2)
        else:
            text = "\n".join(str(stmt) for stmt in program.statements)

    # 4. Output result
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"(wrote to {out})")
    else:
        print(text)

    for msg in errors:
        print(f"[error] >>> {msg}", file=sys.stderr)
    return errors


def main() -> None:
    """
    Entry point for the Monkey CLI.

    - Launches the REPL if no arguments are passed or `--repl` is specified.
    - Otherwise, runs the front end over the given source.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-t`, `--tokens`: Dump tokens instead of parsing.
        - `-j`, `--json`: Emit JSON output.
        - `-o`, `--out`: Write output to a file.
        - `--repl`: Launch the interactive REPL.
        - `--parse`: Start the REPL in parse mode (if --repl).
        - `--verbose`: Show token positions in the REPL (if --repl).
    """
    if len(sys.argv) == 1:
        from monkey.monkey_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-t", "--tokens", action="store_true", help="Dump tokens instead of parsing"
    )
    parser.add_argument(
        "-j", "--json", dest="as_json", action="store_true", help="Emit JSON output"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL"
    )
    parser.add_argument(
        "--parse", action="store_true", help="Start the REPL in parse mode (if --repl)"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show token positions (if --repl)"
    )

    args = parser.parse_args()

    if args.repl or args.source is None:
        from monkey.monkey_repl import start_repl

        start_repl(parse=args.parse, verbose=args.verbose)
    else:
        errors = run_monkey(
            source=args.source,
            is_string=args.string,
            tokens=args.tokens,
            as_json=args.as_json,
            out=args.out,
        )
        if errors:
            sys.exit(1)


if __name__ == "__main__":
    main()
