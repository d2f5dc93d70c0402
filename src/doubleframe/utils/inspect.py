"""Provide insights about Python objects."""

import inspect
from typing import Any


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given callable.

    Used to describe the functions that transforms were
    built with. Returns the name of the module and of the
    class the object belongs to, like ``module.class.method``
    or ``module.function``.

    >>> get_qualname(max)
    'builtins.max'
    >>> get_qualname(str.upper)
    'builtins.str.upper'

    For callable objects that are not functions or classes,
    the name of their class is used instead.
    """
    if inspect.ismethod(obj):
        owner = obj.__self__
        owner_name = owner.__name__ if inspect.isclass(owner) else owner.__class__.__name__
        return f"{obj.__module__}.{owner_name}.{obj.__name__}"
    elif inspect.ismodule(obj):
        return obj.__name__
    elif hasattr(obj, "__qualname__"):
        module = getattr(obj, "__module__", None) or "builtins"
        return f"{module}.{obj.__qualname__}"
    cls = obj.__class__
    return f"{cls.__module__}.{cls.__qualname__}"
