import io
import traceback

from monkey.monkey_lexer import Lexer
from monkey.monkey_parser import Parser


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def print_tokens(src: str, verbose: bool = False) -> None:
    for tok in Lexer(src):
        if verbose:
            print(f"{tok.line}:{tok.col} {tok!r}")
        else:
            print(repr(tok))


def print_program(src: str) -> None:
    parser = Parser(Lexer(src))
    program = parser.parse_program()
    for stmt in program.statements:
        print(stmt)
    for msg in parser.errors():
        print(f"[error] >>> {msg}")


def handle_mode_command(src: str, modes: dict[str, bool]) -> bool:
    """Toggle `parse-mode` / `verbose-mode`. Returns True if `src` was a mode command."""
    command = src.strip().lower()
    if not command.endswith("-mode"):
        return False
    name = command[: -len("-mode")]
    if name not in modes:
        return False
    modes[name] = not modes[name]
    print(f"[mode] >>> {name.capitalize()} mode {'ON' if modes[name] else 'OFF'}")
    return True


def start_repl(parse: bool = False, verbose: bool = False) -> None:
    print(
        f"Monkey REPL [mode={'parse' if parse else 'tokens'}]. Type 'exit' or 'quit' to leave."
    )
    modes = {"parse": parse, "verbose": verbose}

    while True:
        try:
            src = input(">>> ")
            if src.strip() in ("exit", "quit"):
                print("Exiting Monkey REPL.")
                return
            if not src.strip():
                continue
            if handle_mode_command(src, modes):
                continue

            try:
                if modes["parse"]:
                    print_program(src)
                else:
                    print_tokens(src, verbose=modes["verbose"])
            except Exception:
                print_traceback()

        except (KeyboardInterrupt, EOFError):
            print("\nExiting Monkey REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
