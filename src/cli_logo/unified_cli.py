# unified_cli.py
import sys
import importlib
from typing import Sequence, List, Optional, Tuple

from . import __version__

COMMANDS = {
    "convert": "cli_logo.image_to_ansi",
    "init": "cli_logo.init_wrapper",
}
DEFAULT_COMMAND = "convert"


def usage(prog: str = "cli-logo") -> None:
    cmds = ", ".join(sorted(COMMANDS))
    print(f"Usage: {prog} [<command>] <image> [args...]")
    print(f"Commands: {cmds} (default: {DEFAULT_COMMAND})")
    print(f"       {prog} --version")


def resolve_command(argv: List[str]) -> Tuple[str, List[str]]:
    """Split argv into (command, args); anything else is handed to `convert` whole."""
    if argv[0] in COMMANDS:
        return argv[0], argv[1:]
    return DEFAULT_COMMAND, argv


def _call_entry(entry, argv: List[str]) -> int:
    try:
        return entry(argv)
    except SystemExit as se:
        code = se.code
        return code if isinstance(code, int) else 0
    except Exception as e:
        print(f"Error running command: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv or argv[0] in ("-h", "--help"):
        usage()
        return 0

    if argv[0] in ("-V", "--version"):
        print(__version__)
        return 0

    cmd, args = resolve_command(argv)

    module_path = COMMANDS[cmd]
    try:
        module = importlib.import_module(module_path)
    except Exception as e:
        print(f"Failed to import command '{cmd}' ({module_path}): {e}", file=sys.stderr)
        return 3

    entry = getattr(module, "main", None)
    if not callable(entry):
        print(f"Command module '{module_path}' has no callable 'main'", file=sys.stderr)
        return 4

    return _call_entry(entry, args)


if __name__ == "__main__":
    raise SystemExit(main())
