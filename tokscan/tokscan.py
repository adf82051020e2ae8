"""
tokscan command line entry point.

Substitutes `${name}` placeholders (and optionally `%{path}` file inclusions)
in text read from `--text` or stdin, printing the result to stdout.

Examples:
    Substitute from the command line:
        $ tokscan --var user=alice --text 'hello ${user}'

    Use defaults for missing variables:
        $ echo 'db=${db.host:localhost}' | tokscan --enable-default-value

    Include files after substitution:
        $ tokscan --include --var name=notes --text 'Notes: %{${name}.txt}'

Note:
    Variables are read from `--vars-file` (or the per-user vars.json when it
    exists) and then overridden by each `--var`.
"""

from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from pathlib import Path
import sys
from typing import Final
from rich.console import Console
from rich.markup import escape
from tokscan.config.settings import App, appsettings, variables_load, VARS_FILE
from tokscan.lib.input import mode_detect, input_readStdin, input_process
from tokscan.lib.log import LOG
from tokscan.models.dataModel import InputMode, ParseResult

__version__: Final[str] = "0.1.0"

console: Final[Console] = Console(stderr=True)

parser: Final[ArgumentParser] = ArgumentParser(
    prog="tokscan",
    description="Substitute delimited placeholders in text.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument("--text", type=str, help="Input text (alternative to stdin)")
parser.add_argument(
    "--var",
    action="append",
    default=[],
    metavar="KEY=VALUE",
    help="Define a variable (repeatable)",
)
parser.add_argument("--vars-file", type=Path, help="JSON file of variables")
parser.add_argument(
    "--no-vars",
    action="store_true",
    help="Leave every variable placeholder untouched",
)
parser.add_argument(
    "--enable-default-value",
    action="store_true",
    default=None,
    help="Allow ${key:default} placeholders",
)
parser.add_argument("--separator", type=str, help="Key/default value separator")
parser.add_argument("--open", type=str, help="Marker opening a placeholder")
parser.add_argument("--close", type=str, help="Marker closing a placeholder")
parser.add_argument(
    "--include",
    action="store_true",
    help="Replace %%{path} spans with file contents after substitution",
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def variables_parse(pairs: list[str]) -> dict[str, str]:
    """Turn KEY=VALUE arguments into a mapping.

    Raises:
        ValueError: If an argument has no '=' or an empty key
    """
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid variable definition (expected KEY=VALUE): {pair}")
        variables[key] = value
    return variables


def variables_collect(options: Namespace) -> dict[str, str] | None:
    """Assemble the variable mapping from file and command line.

    Returns:
        The mapping, or None when `--no-vars` is given
    """
    if options.no_vars:
        return None

    variables: dict[str, str] = {}
    if options.vars_file is not None:
        if not options.vars_file.exists():
            raise ValueError(f"Variables file not found: {options.vars_file}")
        variables.update(variables_load(options.vars_file))
    elif VARS_FILE.exists():
        variables.update(variables_load(VARS_FILE))
    variables.update(variables_parse(options.var))
    return variables


def settings_resolve(options: Namespace) -> App:
    """Apply command line overrides on top of the application settings."""
    overrides: dict[str, object] = {}
    if options.enable_default_value is not None:
        overrides["enable_default_value"] = options.enable_default_value
    if options.separator is not None:
        overrides["default_value_separator"] = options.separator
    if options.open is not None:
        overrides["open_token"] = options.open
    if options.close is not None:
        overrides["close_token"] = options.close
    return appsettings.model_copy(update=overrides)


def run(options: Namespace) -> int:
    """Process input according to options.

    Returns:
        int: Exit code
    """
    mode: InputMode = mode_detect(options.text)
    if mode.text is not None:
        text: str = mode.text
    elif mode.has_stdin:
        text = input_readStdin()
    else:
        parser.print_usage(sys.stderr)
        console.print("[bold red]No input: use --text or pipe text on stdin.[/bold red]")
        return 1

    try:
        variables: dict[str, str] | None = variables_collect(options)
    except ValueError as e:
        LOG(f"Variable setup failed: {e}")
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1

    result: ParseResult = input_process(
        text, variables, settings_resolve(options), include=options.include
    )
    if not result.success:
        console.print(f"[bold red]Error:[/bold red] {escape(result.error or '')}")
        return 1

    sys.stdout.write(result.text)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the tokscan command."""
    options: Namespace = parser.parse_args(argv)
    try:
        sys.exit(run(options))
    except KeyboardInterrupt:
        console.print("\n[bold cyan]Interrupted by user. Exiting.[/bold cyan]")
        sys.exit(130)


if __name__ == "__main__":
    main()
