"""Typed accessors for process environment variables.

Exports are resolved lazily so ``import envkit`` stays cheap and the
logging and CLI modules load only when asked for.
"""

from __future__ import annotations

from importlib import import_module

__version__ = "0.1.0"

_LAZY_EXPORTS = {
    # Accessors
    "get_required": (".runtime_env", "get_required"),
    "get_or_default": (".runtime_env", "get_or_default"),
    "get_parsed": (".runtime_env", "get_parsed"),
    "get_parsed_or_default": (".runtime_env", "get_parsed_or_default"),
    "get_bool": (".runtime_env", "get_bool"),
    "get_list": (".runtime_env", "get_list"),
    "get_memory_size": (".runtime_env", "get_memory_size"),
    "parse_bool": (".runtime_env", "parse_bool"),
    "EnvAccessor": (".runtime_env", "EnvAccessor"),
    "TRUTHY_TOKENS": (".runtime_env", "TRUTHY_TOKENS"),
    "FALSY_TOKENS": (".runtime_env", "FALSY_TOKENS"),
    # Sizes
    "parse_memory_size": (".sizes", "parse_memory_size"),
    # Errors
    "EnvError": (".errors", "EnvError"),
    "EnvNotSetError": (".errors", "EnvNotSetError"),
    "EnvParseError": (".errors", "EnvParseError"),
    # Logging
    "get_logger": (".logger", "get_logger"),
    "setup_logging": (".logger", "setup_logging"),
    "teardown_logging": (".logger", "teardown_logging"),
}

__all__ = list(_LAZY_EXPORTS.keys())


def __getattr__(name: str):
    target = _LAZY_EXPORTS.get(str(name))
    if target is None:
        raise AttributeError(f"module 'envkit' has no attribute {name!r}")
    mod_name, attr_name = target
    module = import_module(mod_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
