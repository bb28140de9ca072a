"""Presentation helpers: wrap rendered art in a banner, a Python snippet, or a wrapper script."""

from .colors import ESC, RESET

CYAN = f"{ESC}[36m"
GRAY = f"{ESC}[90m"


def generate_banner(
    art: str,
    title: str = "",
    subtitle: str = "",
    version: str = "",
    border_color: str = CYAN,
) -> str:
    """Logo followed by an optional colored title line (with version) and subtitle."""
    banner = "\n" + art

    if title:
        banner += "\n" + f"{border_color}{title}{RESET}"
        if version:
            banner += f" {GRAY}v{version}{RESET}"
        banner += "\n"

    if subtitle:
        banner += f"{GRAY}{subtitle}{RESET}\n"

    return banner + "\n"


def generate_code(art: str, title: str = "My CLI", version: str = "1.0.0", subtitle: str = "") -> str:
    """Python module source that prints the logo; paste it into another CLI."""
    lines = [
        "# Generated by cli-logo",
        "# Copy this into your CLI app to display the logo",
        "",
        f"LOGO = {art!r}",
        f"TITLE = {title!r}",
        f"VERSION = {version!r}",
        f"SUBTITLE = {subtitle!r}",
        "",
        "",
        "def show_banner():",
        "    print(LOGO)",
        f"    print({CYAN!r} + TITLE + {RESET!r} + ' ' + {GRAY!r} + 'v' + VERSION + {RESET!r})",
        "    if SUBTITLE:",
        f"        print({GRAY!r} + SUBTITLE + {RESET!r})",
        "    print()",
        "",
        "",
        'if __name__ == "__main__":',
        "    show_banner()",
        "",
    ]
    return "\n".join(lines)


def shell_quote(text: str) -> str:
    # single-quoted: only ' itself needs escaping
    return "'" + text.replace("'", "'\\''") + "'"


def generate_shell_wrapper(
    art: str,
    name: str = "mycli",
    title: str = "",
    version: str = "",
    subtitle: str = "",
    shell: str = "/bin/bash",
) -> str:
    """Bash script that shows the banner, then execs its arguments or an interactive shell."""
    script = [
        "#!/bin/bash",
        "# Generated by cli-logo",
        f"# A branded CLI wrapper for {name}",
        "",
        "show_banner() {",
        f"  printf '%s' {shell_quote(art)}",
    ]

    if title:
        if version:
            script.append(
                f"  printf '\\033[36m%s\\033[0m \\033[90mv%s\\033[0m\\n' "
                f"{shell_quote(title)} {shell_quote(version)}"
            )
        else:
            script.append(f"  printf '\\033[36m%s\\033[0m\\n' {shell_quote(title)}")

    if subtitle:
        script.append(f"  printf '\\033[90m%s\\033[0m\\n' {shell_quote(subtitle)}")

    script += [
        "  echo",
        "}",
        "",
        "# Show banner on startup",
        "show_banner",
        "",
        "# Execute remaining arguments or start interactive shell",
        'if [ $# -gt 0 ]; then',
        '  exec "$@"',
        "else",
        f"  exec {shell_quote(shell)}",
        "fi",
        "",
    ]
    return "\n".join(script)


def generate_python_wrapper(
    art: str,
    name: str = "mycli",
    title: str = "My CLI",
    version: str = "1.0.0",
    subtitle: str = "",
    shell: str = "/bin/bash",
) -> str:
    """Python script that shows the banner, then runs its arguments or an interactive shell."""
    lines = [
        "#!/usr/bin/env python3",
        "# Generated by cli-logo",
        f"# A branded CLI wrapper: {name}",
        "",
        "import os",
        "import subprocess",
        "import sys",
        "",
        f"LOGO = {art!r}",
        f"TITLE = {title!r}",
        f"VERSION = {version!r}",
        f"SUBTITLE = {subtitle!r}",
        f"SHELL = os.environ.get('SHELL', {shell!r})",
        "",
        "",
        "def show_banner():",
        "    print(LOGO)",
        "    if TITLE:",
        f"        line = {CYAN!r} + TITLE + {RESET!r}",
        "        if VERSION:",
        f"            line += ' ' + {GRAY!r} + 'v' + VERSION + {RESET!r}",
        "        print(line)",
        "    if SUBTITLE:",
        f"        print({GRAY!r} + SUBTITLE + {RESET!r})",
        "    print()",
        "",
        "",
        "def main(argv=None):",
        "    argv = sys.argv[1:] if argv is None else argv",
        "    show_banner()",
        "    sys.stdout.flush()",
        "    # with arguments run them as a command, otherwise start a shell",
        "    if argv:",
        "        return subprocess.run(' '.join(argv), shell=True).returncode",
        "    return subprocess.run([SHELL]).returncode",
        "",
        "",
        'if __name__ == "__main__":',
        "    sys.exit(main())",
        "",
    ]
    return "\n".join(lines)
