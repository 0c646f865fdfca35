import os
from collections.abc import Iterable
from pathlib import Path


_BOOL_WORDS: dict[str, bool] = {
    **dict.fromkeys(("true", "1", "yes", "y", "t", "on"), True),
    **dict.fromkeys(("false", "0", "no", "n", "f", "off"), False),
}


def str_to_bool(value: str | bool | int | None) -> bool:
    """Convert a config flag (bool, int or word such as ``"on"``) to `bool`."""

    if isinstance(value, (bool, int)):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _BOOL_WORDS:
            return _BOOL_WORDS[word]
    raise ValueError(f"Cannot read {value!r} as a boolean flag.")


def resolve_config_dir(env_var: str, candidates: Iterable[str | Path]) -> Path | None:
    """Return the first existing configuration directory, or ``None``.

    An override in ``env_var`` is tried first and must exist when set; the
    packaged ``candidates`` are optional.
    """

    env_override = os.environ.get(env_var)
    if env_override:
        override = Path(env_override).expanduser()
        if not override.is_dir():
            raise RuntimeError(
                f"Unable to locate configuration directory {override}. "
                f"Set {env_var} to a valid directory."
            )
        return override.resolve()

    for candidate in candidates:
        expanded = Path(candidate).expanduser()
        if expanded.is_dir():
            return expanded.resolve()
    return None
