"""``--set SECTION.KEY=VALUE`` handling for the root command."""

from __future__ import annotations

from typing import Any, NamedTuple

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[Any] | dict[str, Any]


class Override(NamedTuple):
    """One ``--set`` assignment: a dotted path and its decoded value."""

    path: tuple[str, ...]
    value: CoercedValue

    @property
    def section(self) -> str:
        return self.path[0]


def coerce_value(text: str) -> CoercedValue:
    """Decode ``text`` as JSON when possible, otherwise keep it as a string.

    >>> coerce_value("42"), coerce_value("null"), coerce_value("Ada")
    (42, None, 'Ada')
    """
    if not text:
        return text
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError:
        return text


def parse_override(raw: str) -> Override:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``; the value may contain ``=``.

    >>> parse_override("lib_log_rich.console_level=DEBUG")
    Override(path=('lib_log_rich', 'console_level'), value='DEBUG')
    """
    dotted, sep, text = raw.partition("=")
    if not sep:
        raise ValueError(f"--set {raw!r} must contain '='")
    path = tuple(dotted.split("."))
    if len(path) < 2:
        raise ValueError(f"--set {raw!r} needs at least one dot between section and key")
    if not path[0]:
        raise ValueError(f"--set {raw!r}: section name is empty")
    if not all(path):
        raise ValueError(f"--set {raw!r}: key path has an empty component")
    return Override(path, coerce_value(text))


def _assign(tree: dict[str, Any], override: Override) -> None:
    *parents, leaf = override.path
    for depth, name in enumerate(parents):
        tree = tree.setdefault(name, {})
        if not isinstance(tree, dict):
            prefix = ".".join(override.path[: depth + 1])
            raise ValueError(f"--set {'.'.join(override.path)}: {prefix} is already set to a non-table value")
    tree[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` applied, later ones winning.

    >>> cfg = Config({"mylib": {"default_name": "World"}}, {})
    >>> apply_overrides(cfg, ("mylib.default_name=Ada",)).get("mylib.default_name")
    'Ada'
    """
    if not raw_overrides:
        return config
    tree: dict[str, Any] = {}
    for raw in raw_overrides:
        _assign(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = ["CoercedValue", "Override", "apply_overrides", "coerce_value", "parse_override"]
