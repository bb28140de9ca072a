"""cli-logo - Turn images into colored terminal logos."""

__version__ = "1.0.0"

"""
Command entry points are lazy wrappers: importing the command modules here
would make `python -m cli_logo.<module>` warn under runpy.
"""


def convert_main(*args, **kwargs):
    from .image_to_ansi import main as _m

    return _m(*args, **kwargs)


def init_main(*args, **kwargs):
    from .init_wrapper import main as _m

    return _m(*args, **kwargs)


__all__ = [
    "convert_main",
    "init_main",
]
