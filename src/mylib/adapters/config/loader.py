"""Load the layered mylib configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from mylib import __init__conf__

#: Lowest-precedence layer, shipped inside the package.
DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, read once per ``(profile, start_dir)``.

    Layers, lowest first: bundled defaults, app, host, user, ``.env``,
    environment variables (``MYLIB___<SECTION>__<KEY>``). A profile adds a
    ``profile/<name>/`` component to every layer path.

    Raises:
        ValueError: If ``profile`` is empty, too long, or not safe to use as a
            path component.

    Example:
        >>> get_config().get("mylib.default_name")
        'World'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


__all__ = ["DEFAULT_CONFIG_FILE", "get_config"]
