"""
EasyScript Interpreter

This is the main entry point for the EasyScript interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set EASYDEBUG=1 (or pass --debug) to dump tokens and AST before execution.
"""
import argparse
import logging
import os
import sys
import time

from easyscript import EasyScriptError, ParseError, __version__
from easyscript.interpreter import DEFAULT_MAX_CALL_DEPTH, Interpreter
from easyscript.lexer import tokenize
from easyscript.parser import Parser

logger = logging.getLogger("easyscript")


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.
    """
    parser = argparse.ArgumentParser(
        prog="easy",
        description="EasyScript Interpreter. Run with no script to enter interactive mode (REPL).",
        epilog="Example:\n    easy hello.es",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("script", nargs="?", help="Path to an EasyScript source file to execute.")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=bool(os.environ.get("EASYDEBUG")),
        help="Print tokens and AST before execution and enable debug logging.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_CALL_DEPTH,
        help=f"Maximum nested function call depth (default: {DEFAULT_MAX_CALL_DEPTH}).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_script(script_name: str, debug: bool = False, max_depth: int = DEFAULT_MAX_CALL_DEPTH) -> int:
    """
    Run an EasyScript file. Returns the process exit code.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    try:
        started = time.perf_counter()
        tokens = tokenize(code, script_name)
        ast = Parser(tokens, script_name).parse()
        logger.debug(
            "parsed %s: %d tokens, %d statements in %.3fms",
            script_name, len(tokens), len(ast[1]), (time.perf_counter() - started) * 1000,
        )

        if debug:
            debug_print_tokens_ast(tokens, ast)

        Interpreter(script_name, max_depth).execute(ast)
    except EasyScriptError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl(max_depth: int = DEFAULT_MAX_CALL_DEPTH):
    """
    Run the interactive REPL
    """
    print(f"EasyScript Interpreter {__version__} - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>", max_depth)
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                tokens = tokenize(source, "<stdin>")
                ast = Parser(tokens, "<stdin>").parse()
                interpreter.execute(ast)
                buffer.clear()
            except ParseError as e:
                # Input that stops at end of input is assumed to be incomplete
                if e.found == "end of input" and line.strip():
                    continue
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
            except EasyScriptError as e:
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No script: enter the REPL.
    - A script path: run it; the exit code is 1 if it fails.
    """
    args = build_arg_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.script is None:
        run_repl(args.max_depth)
        return 0
    return run_script(args.script, args.debug, args.max_depth)


if __name__ == "__main__":
    sys.exit(main())
