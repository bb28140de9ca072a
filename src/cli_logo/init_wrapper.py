#!/usr/bin/env python3
"""Create branded wrapper scripts that print the logo before running a command."""

import argparse
import logging
import os

from .banner import generate_python_wrapper, generate_shell_wrapper
from .colors import ESC, RESET
from .image_to_ansi import add_render_arguments, convert_image, fail, setup_logging

# wrapper type -> (file extension, template)
WRAPPERS = {
    "bash": (".sh", generate_shell_wrapper),
    "python": (".py", generate_python_wrapper),
}

LOG = logging.getLogger(__name__)


def write_wrapper(path: str, script: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(script)
    os.chmod(path, 0o755)
    LOG.debug("Wrote %d bytes to %s", len(script), path)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="cli-logo init", description="Create a branded CLI wrapper with your logo"
    )
    add_render_arguments(parser, default_width=50)
    parser.add_argument("name", help="Name for your CLI (used for output file)")
    parser.add_argument("-t", "--title", default="", help="Title to display")
    parser.add_argument("-v", "--ver", default="1.0.0", help="Version to display")
    parser.add_argument("--subtitle", default="", help="Subtitle text")
    parser.add_argument("--shell", default=None, help="Shell to use (default: $SHELL)")
    parser.add_argument(
        "--type",
        choices=[*WRAPPERS, "both"],
        default="both",
        help="Wrapper type",
    )
    parser.add_argument("-d", "--dir", default=".", help="Output directory")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        art = convert_image(args)
    except Exception as e:
        LOG.debug("Conversion failed", exc_info=True)
        return fail(str(e))

    wrapper_opts = dict(
        name=args.name,
        title=args.title or args.name,
        version=args.ver,
        subtitle=args.subtitle,
        shell=args.shell or os.environ.get("SHELL", "/bin/bash"),
    )

    out_dir = os.path.abspath(args.dir)
    os.makedirs(out_dir, exist_ok=True)

    types = list(WRAPPERS) if args.type == "both" else [args.type]
    created = []
    for kind in types:
        ext, template = WRAPPERS[kind]
        out_file = os.path.join(out_dir, args.name + ext)
        write_wrapper(out_file, template(art, **wrapper_opts))
        created.append((out_file, ext))
        print(f"{ESC}[32m✓ Created {out_file}{RESET}")

    print()
    print(f"{ESC}[36mUsage:{RESET}")
    for _, ext in created:
        print(f"  ./{args.name}{ext}              # Start interactive shell with banner")
        print(f"  ./{args.name}{ext} ls -la       # Run a command with banner")
    print()
    print(f"{ESC}[36mTo install globally:{RESET}")
    print(f"  sudo cp {created[0][0]} /usr/local/bin/{args.name}")
    print(f"  # Then just run: {args.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
