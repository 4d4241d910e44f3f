"""
Baby Language Interpreter

This is the main entry point for the Baby language interpreter.

Workflow:
1. With no arguments, an interactive shell is started.
2. With a script path, the script is read from disk.
3. The Lexer tokenizes the source code into meaningful tokens.
4. The Parser processes tokens into an AST following the language grammar.
5. The Interpreter walks the AST, evaluating expressions and executing statements.
"""
import sys

from babylang import repl
from babylang.exceptions import ParseException, ScriptLoadException
from babylang.interpreter import Interpreter
from babylang.objects import is_error

RECURSION_LIMIT = 10000


def print_usage():
    """
    Print usage.
    """
    print()
    print("Baby Language Interpreter")
    print()
    print("Usage:")
    print("    baby <script.baby>")
    print()
    print("Arguments:")
    print("    <script.baby>")
    print("        Path to a Baby language source file to execute.")
    print()
    print("Example:")
    print("    baby hello.baby")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def run_script(script_name: str) -> int:
    """
    Run a Baby script. Only a runtime error result is printed; output
    otherwise comes from the script's own ``print`` calls.
    """
    interpreter = Interpreter(script_name)
    try:
        code = repl.load_script(script_name)
        result = repl.evaluate_source(interpreter, code, sys.stdout)
        if is_error(result):
            print(result.inspect())
            return 1
    except ParseException as e:
        print(f"{e}:")
        repl.print_parse_errors(e.errors, sys.stdout)
        return 1
    except ScriptLoadException as e:
        print(e)
        return 1
    except RecursionError:
        print("ERROR: maximum recursion depth exceeded")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("Baby Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    try:
        repl.start()
    except KeyboardInterrupt:
        print("\nInterrupted.")


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = (sys.argv if argv is None else argv)[1:]
    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
