"""
calc.py - Interactive calculator with undo.
Main CLI entry point: reads operations and operands, prints the running result.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv

from calc_core import Calculator
from calc_commands import create_command, requires_value
from calc_control import CalculatorControl
from calc_utils import TokenReader, format_result, normalize_operation, parse_value

VERSION = "1.0.0"

OPERATION_PROMPT = "Enter operation (add, subtract, multiply, divide, clear, undo, exit): "
VALUE_PROMPT = "Enter value: "


def env_flag(name: str) -> bool:
    return os.environ.get(name, '').lower() == 'true'


def load_env():
    """Load environment variables from .env file."""
    # Try current directory first, then script directory
    script_dir = Path(__file__).parent
    env_paths = [
        Path.cwd() / ".env",
        script_dir / ".env"
    ]

    for env_path in env_paths:
        if env_path.exists():
            load_dotenv(env_path)
            if env_flag('CALC_DEBUG'):
                print(f"calc: Loaded .env from {env_path}", file=sys.stderr)
            break
    else:
        if env_flag('CALC_DEBUG'):
            print(f"calc: No .env file found in {[str(p) for p in env_paths]}", file=sys.stderr)


def show_usage():
    """Show usage information."""
    print(f"""calc v{VERSION} - interactive calculator with undo

USAGE:
  calc [options]                   # Interactive session on stdin
  echo "add 5 multiply 3 exit" | calc -q

OPERATIONS:
  add VALUE            Add VALUE to the result
  subtract VALUE       Subtract VALUE from the result
  multiply VALUE       Multiply the result by VALUE
  divide VALUE         Divide the result by VALUE (dividing by 0 is reported and skipped)
  clear                Reset the result to 0
  undo                 Undo the most recent operation (repeatable)
  history              List the operations that can still be undone
  exit                 Print the final result and quit

OPTIONS:
  -q, --quiet          Do not print prompts (for scripted input).
  --start VALUE        Initial result (default: 0).
  --debug              Log every executed and undone operation.
  --version            Show version information.
  -h, --help           Show this help message.

ENVIRONMENT (.env is loaded from the current directory, then the script directory):
  CALC_DEBUG=true      Same as --debug
  CALC_QUIET=true      Same as -q
  CALC_START=VALUE     Default for --start
""")


def print_history(control: CalculatorControl, out: TextIO):
    if not len(control):
        print("History is empty.", file=out)
        return
    for index, command in enumerate(control.history, start=1):
        print(f"  {index}: {command.describe()}", file=out)


def run_interactive(calculator: Calculator, control: CalculatorControl,
                    input_stream: Optional[TextIO] = None,
                    output_stream: Optional[TextIO] = None,
                    error_stream: Optional[TextIO] = None,
                    quiet: bool = False) -> int:
    """
    Run the read-execute-print loop until 'exit' or end of input.

    Invalid operation names and malformed operands are reported on the error
    stream and the rest of that input line is skipped; neither touches the
    calculator. Returns the process exit status.
    """
    input_stream = input_stream or sys.stdin
    out = output_stream or sys.stdout
    err = error_stream or sys.stderr
    reader = TokenReader(input_stream)

    def prompt(text):
        if not quiet:
            print(text, end='', file=out, flush=True)

    while True:
        prompt(OPERATION_PROMPT)
        token = reader.next_token()
        if token is None:
            break

        try:
            operation = normalize_operation(token)
        except ValueError:
            print("Invalid operation. Please try again.", file=err)
            reader.discard_line()
            continue

        if operation == 'exit':
            break
        if operation == 'history':
            print_history(control, out)
            continue

        value = None
        if requires_value(operation):
            prompt(VALUE_PROMPT)
            value_token = reader.next_token()
            if value_token is None:
                break
            try:
                value = parse_value(value_token)
            except ValueError as e:
                print(f"{e}. Please try again.", file=err)
                reader.discard_line()
                continue

        if operation == 'undo':
            control.undo_last_command()
        else:
            control.execute_command(create_command(operation, calculator, value))

        print(f"Result: {format_result(calculator.get_result())}", file=out)

    if reader.exhausted and not quiet:
        # input ended mid-prompt
        print(file=out)
    print(f"Final Result: {format_result(calculator.get_result())}", file=out)
    return 0


def main(argv=None):
    # Initialize environment
    load_env()

    parser = argparse.ArgumentParser(
        description=f"calc v{VERSION} - interactive calculator with undo",
        add_help=False  # We'll add custom help
    )
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not print prompts')
    parser.add_argument('--start',
                        help='Initial result (default: 0)')
    parser.add_argument('--debug', action='store_true',
                        help='Log executed and undone operations')
    parser.add_argument('-h', '--help', action='store_true',
                        help='Show this help message')
    parser.add_argument('--version', action='store_true',
                        help='Show version information')

    args = parser.parse_args(argv)

    if args.help:
        show_usage()
        return 0

    if args.version:
        print(f"calc v{VERSION}")
        return 0

    debug = args.debug or env_flag('CALC_DEBUG')
    quiet = args.quiet or env_flag('CALC_QUIET')

    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.WARNING)

    start = args.start if args.start is not None else os.environ.get('CALC_START', '0')
    try:
        initial_value = parse_value(start)
    except ValueError as e:
        print(f"calc: Error: {e}", file=sys.stderr)
        return 1

    calculator = Calculator(initial_value)
    control = CalculatorControl()

    try:
        return run_interactive(calculator, control, quiet=quiet)
    except KeyboardInterrupt:
        print(f"\ncalc: Operation cancelled by user", file=sys.stderr)
        return 1


def cli():
    sys.exit(main())


if __name__ == "__main__":
    sys.exit(main())
