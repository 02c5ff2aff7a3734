"""Human-readable type names."""

from __future__ import annotations

from functools import lru_cache

_MAGIC_PHRASE = "T = "


def make_type_name_from_func_name(func_name: str) -> str:
    """Extract the type following ``T = `` from a decorated function signature."""
    start = func_name.find(_MAGIC_PHRASE) + len(_MAGIC_PHRASE)
    result = func_name[start:]
    end = result.find(";")
    if end < 0:
        end = result.find("]")
    return result if end < 0 else result[:end]


@lru_cache(maxsize=None)
def type_name(tp: object) -> str:
    """Return a stable name for a type; builtins are left unqualified."""
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return str(tp)