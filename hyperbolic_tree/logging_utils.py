from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10
_repr.maxtuple = 10


def _safe_repr(value: Any, *, max_length: int = 240) -> str:
    # Trees are summarised; dumping a subtree per call would swamp the log.
    children = getattr(value, "children", None)
    name = getattr(value, "name", None)
    if isinstance(name, str) and isinstance(children, list):
        return f"<node {name!r} children={len(children)}>"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - defensive
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items()) + "}"
        )
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator tracing entry, result and failure of a call at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func
        qualname = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            traced = logger.isEnabledFor(logging.DEBUG)
            if traced:
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if traced:
                    logger.exception("Exception in %s", qualname)
                raise
            if traced:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _wrap_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name.startswith("__") or attr_name in skip or qualified in skip:
            continue
        # classmethod/staticmethod keep the plain function under __func__
        binder = type(attr_value) if isinstance(attr_value, (classmethod, staticmethod)) else None
        func = attr_value.__func__ if binder is not None else attr_value
        if not inspect.isfunction(func) or func.__module__ != cls.__module__:
            continue
        wrapped = debug_log_call(logger, name=qualified)(func)
        setattr(cls, attr_name, binder(wrapped) if binder is not None else wrapped)


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Trace every function and method defined in a module namespace.

    Call at the bottom of a module as ``apply_debug_logging(globals(), logger=logger)``.
    Names in ``skip`` (plain or ``Class.method``) are left alone.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name)
    skip_set: Set[str] = set(skip or ())

    for name, value in list(namespace.items()):
        if name in skip_set or getattr(value, "__module__", None) != module_name:
            continue
        if inspect.isfunction(value):
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value):
            _wrap_class(value, logger, skip_set)

    logger.debug("Call tracing installed for %s", module_name)


__all__ = ["debug_log_call", "apply_debug_logging"]
