from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from typing import Final, Optional, TypeVar

from envkit.errors import EnvNotSetError, EnvParseError
from envkit.sizes import parse_memory_size

T = TypeVar("T")

TRUTHY_TOKENS: Final[frozenset[str]] = frozenset(
    {"true", "1", "yes", "on"}
)
FALSY_TOKENS: Final[frozenset[str]] = frozenset(
    {"false", "0", "no", "off"}
)

# Exceptions a parser may raise to reject its input.
# decimal.InvalidOperation is an ArithmeticError.
_PARSE_FAILURES: Final = (TypeError, ValueError, ArithmeticError)


def _source(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    # Resolved on every call so changes to os.environ are always seen.
    return os.environ if env is None else env


def parse_bool(text: str) -> bool:
    """Parse boolean text strictly using the shared token policy.

    Raises:
        ValueError: If *text* is neither a truthy nor a falsy token.
    """
    normalized = str(text).strip().lower()
    if normalized in TRUTHY_TOKENS:
        return True
    if normalized in FALSY_TOKENS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def get_required(
    name: str, *, env: Optional[Mapping[str, str]] = None
) -> str:
    """Return the value of *name* exactly as stored.

    Raises:
        EnvNotSetError: If *name* is not set.
    """
    value = _source(env).get(name)
    if value is None:
        raise EnvNotSetError(name)
    return value


def get_or_default(
    name: str, default: str, *, env: Optional[Mapping[str, str]] = None
) -> str:
    """Return the value of *name*, or *default* verbatim when unset."""
    value = _source(env).get(name)
    return default if value is None else value


def get_parsed(
    name: str,
    parser: Callable[[str], T],
    *,
    env: Optional[Mapping[str, str]] = None,
) -> T:
    """Read *name* and convert it with *parser*.

    *parser* is any callable taking the raw string, such as ``int``,
    ``float``, ``Decimal``, an ``Enum`` class or a custom function. It
    rejects input by raising ``ValueError``, ``TypeError`` or
    ``ArithmeticError``. ``bool`` is replaced by :func:`parse_bool`,
    since ``bool("false")`` is ``True``.

    Args:
        name: Environment variable name.
        parser: Conversion from the raw string to the target type.
        env: Mapping to read instead of ``os.environ``.

    Returns:
        The converted value.

    Raises:
        EnvNotSetError: If *name* is not set.
        EnvParseError: If *parser* rejects the value.
    """
    value = get_required(name, env=env)
    convert = parse_bool if parser is bool else parser
    try:
        return convert(value)  # type: ignore[return-value]
    except _PARSE_FAILURES as exc:
        raise EnvParseError(name, value) from exc


def get_parsed_or_default(
    name: str,
    parser: Callable[[str], T],
    default: T,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> T:
    """Like :func:`get_parsed`, but return *default* when unset or invalid."""
    try:
        return get_parsed(name, parser, env=env)
    except (EnvNotSetError, EnvParseError):
        return default


def get_bool(
    name: str,
    default: bool = False,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> bool:
    """Read a boolean flag using the truthy token policy.

    Any set value outside :data:`TRUTHY_TOKENS` reads as ``False``.
    *default* applies only when the variable is unset.
    """
    value = _source(env).get(name)
    if value is None:
        return bool(default)
    return value.strip().lower() in TRUTHY_TOKENS


def get_list(
    name: str,
    separator: str = ",",
    *,
    env: Optional[Mapping[str, str]] = None,
) -> list[str]:
    """Split *name* on *separator* into a list of trimmed items.

    Surrounding whitespace is stripped from every item. Empty items
    keep their position, so ``"web, api ,,db"`` gives
    ``["web", "api", "", "db"]`` and a set but empty value gives
    ``[""]``. Returns ``[]`` only when unset.

    Raises:
        ValueError: If *separator* is empty.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    value = _source(env).get(name)
    if value is None:
        return []
    return [item.strip() for item in value.split(separator)]


def get_memory_size(
    name: str, *, env: Optional[Mapping[str, str]] = None
) -> int:
    """Read a memory size such as ``512MB`` as a number of bytes.

    Raises:
        EnvNotSetError: If *name* is not set.
        EnvParseError: If the value is not a valid size.
    """
    return get_parsed(name, parse_memory_size, env=env)


class EnvAccessor:
    """Typed accessors bound to one environment source.

    With no source the live ``os.environ`` is read on every call.
    Passing a plain dict gives a fake environment for tests without
    touching real process state.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = env

    @property
    def source(self) -> Mapping[str, str]:
        """The mapping read by this accessor."""
        return _source(self._env)

    def get_required(self, name: str) -> str:
        return get_required(name, env=self._env)

    def get_or_default(self, name: str, default: str) -> str:
        return get_or_default(name, default, env=self._env)

    def get_parsed(self, name: str, parser: Callable[[str], T]) -> T:
        return get_parsed(name, parser, env=self._env)

    def get_parsed_or_default(
        self, name: str, parser: Callable[[str], T], default: T
    ) -> T:
        return get_parsed_or_default(name, parser, default, env=self._env)

    def get_bool(self, name: str, default: bool = False) -> bool:
        return get_bool(name, default, env=self._env)

    def get_list(self, name: str, separator: str = ",") -> list[str]:
        return get_list(name, separator, env=self._env)

    def get_memory_size(self, name: str) -> int:
        return get_memory_size(name, env=self._env)
