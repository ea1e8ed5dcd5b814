"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; ``tests/test_metadata.py`` keeps them in
sync.

Contents:
    * Module-level metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers consumed by ``lib_layered_config``.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in ``pyproject.toml``.
name: Final[str] = "mylib"
#: Human-readable summary shown in CLI help output.
title: Final[str] = "Minimal example library: greeting, addition, and factorial"
#: Current release version.
version: Final[str] = "1.0.0"
#: Repository homepage.
homepage: Final[str] = "https://github.com/mylib/mylib"
#: Author attribution.
author: Final[str] = "mylib developers"
#: Contact email.
author_email: Final[str] = "mylib@example.com"
#: Console-script name published by the package.
shell_command: Final[str] = "mylib"

#: Vendor, application, and slug identifiers for platform config paths.
LAYEREDCONF_VENDOR: Final[str] = "mylib"
LAYEREDCONF_APP: Final[str] = "mylib"
LAYEREDCONF_SLUG: Final[str] = "mylib"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for mylib:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
