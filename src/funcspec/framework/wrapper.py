"""
Wrapping functions with a parameter spec.

``wrap`` (or the ``specify`` decorator) takes one spec entry per positional
parameter and returns a ``SpecifiedFunction``.  Each call resolves every
argument position against its entry before the original function runs.

Manifesto:
    Callers should not have to defend every function body against missing
    or malformed arguments.  A spec entry states the default and, through a
    validator, what counts as acceptable; the wrapper does the rest.

    - **Wrap once, resolve per call:** signature inspection and doc
      generation happen at wrap time only
    - **No shared state:** every call builds fresh argument lists
    - **Python semantics preserved:** signature defaults still apply to
      unspecified trailing positions, methods still bind ``self``

Architecture:
    ::

        wrap(literals, func)
            │
            ├── inspect.signature(func) ──▶ positional params, arity
            ├── len(literals) > arity and no *args ──▶ ArityError
            ├── balance(literals, [ABSENT] * arity) ──▶ specs
            └── build_doc(...) ──▶ doc

        SpecifiedFunction(*args, **kwargs)
            │
            ├── balance(specs, args)
            ├── fold keyword args naming positional params
            ├── resolve(name, spec, arg, i)   for every position
            └── func(*curated, **remaining_kwargs)

Examples:
    >>> natural = make_validator(0, non_negative_int)
    >>> @specify([natural, natural], description="Add two naturals")
    ... def add(a, b):
    ...     return a + b
    >>> add(), add(1), add(-1, 2), add(1, 2)
    (0, 1, 2, 3)

Tags:
    funcspec, framework, wrapper, decorator

Doc-Types:
    - API Reference
    - Usage Guide
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from funcspec.core.balance import balance
from funcspec.core.coercion import CoercionPolicy
from funcspec.core.errors import ArityError, ShapeError
from funcspec.core.logging import get_logger
from funcspec.core.resolution import resolve
from funcspec.core.settings import get_settings
from funcspec.core.types import ABSENT
from funcspec.framework.docs import build_doc
from funcspec.framework.parser import is_literal_sequence, parse_spec_args

logger = get_logger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class _SignatureInfo:
    """Positional parameters of a wrapped callable."""

    params: tuple[inspect.Parameter, ...]
    variadic: bool

    @property
    def arity(self) -> int:
        return len(self.params)


def _inspect_signature(func: Callable[..., Any]) -> _SignatureInfo:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without metadata: accept any number of arguments
        return _SignatureInfo(params=(), variadic=True)

    params = tuple(p for p in signature.parameters.values() if p.kind in _POSITIONAL_KINDS)
    variadic = any(
        p.kind is inspect.Parameter.VAR_POSITIONAL for p in signature.parameters.values()
    )
    return _SignatureInfo(params=params, variadic=variadic)


def _defined_in_class(func: Callable[..., Any]) -> bool:
    """Check if ``func`` was defined directly in a class body."""
    parts = getattr(func, "__qualname__", "").split(".")
    return len(parts) > 1 and parts[-2] != "<locals>"


class SpecifiedFunction:
    """
    A callable that resolves its arguments against a spec before running.

    Immutable once built.  Exposes the original function's name, qualname,
    module and doc string, plus ``doc`` (the generated parameter summary),
    ``description``, ``specs``, ``arity``, ``strict`` and ``coercion``.

    A function defined in a class body takes its first positional parameter
    as the receiver: specs, arity and doc start after ``self``/``cls``.
    ``receiver_in_args=None`` detects this from ``__qualname__``.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        literals: Sequence[Any],
        *,
        description: str = "",
        strict: bool = False,
        coercion: CoercionPolicy = CoercionPolicy.REPLACE,
        receiver_in_args: bool | None = None,
    ):
        functools.update_wrapper(self, func, updated=())

        info = _inspect_signature(func)
        if receiver_in_args is None:
            receiver_in_args = bool(info.params) and _defined_in_class(func)
        params = info.params[1:] if receiver_in_args else info.params

        if len(literals) > len(params) and not info.variadic:
            raise ArityError(
                "literalArray length does not match # of params in function-definition"
            ).with_context(
                function=getattr(func, "__name__", None),
                literals=len(literals),
                arity=len(params),
            )

        _, specs, _ = balance(literals, [ABSENT] * len(params))
        name = getattr(func, "__name__", type(func).__name__)

        _set = object.__setattr__
        _set(self, "_func", func)
        _set(self, "_name", name)
        _set(self, "_specs", tuple(specs))
        _set(self, "_params", params)
        _set(self, "_description", description)
        _set(self, "_strict", bool(strict))
        _set(self, "_coercion", CoercionPolicy(coercion))
        _set(self, "_receiver_in_args", receiver_in_args)
        _set(
            self,
            "_doc",
            build_doc(name, description, specs, [p.name for p in params]),
        )
        _set(self, "_frozen", True)

        logger.debug(
            "function_wrapped",
            function=name,
            arity=len(params),
            method=receiver_in_args,
            variadic=info.variadic,
            specified=len(literals),
        )

    # ── read-only metadata ───────────────────────────────────────

    @property
    def doc(self) -> str:
        """Generated summary of the parameter spec."""
        return self._doc

    @property
    def description(self) -> str:
        return self._description

    @property
    def specs(self) -> tuple[Any, ...]:
        """Spec entries, padded with ``ABSENT`` to the declared arity."""
        return self._specs

    @property
    def arity(self) -> int:
        return len(self._params)

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def coercion(self) -> CoercionPolicy:
        return self._coercion

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<SpecifiedFunction {self._name} specs={len(self._specs)}>"

    # ── invocation ───────────────────────────────────────────────

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._receiver_in_args and args:
            return self._invoke(args[:1], args[1:], kwargs)
        return self._invoke((), args, kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if not self._receiver_in_args or (instance is None and owner is None):
            return self
        return _SpecifiedMethod(self, instance)

    def _invoke(self, receiver: tuple[Any, ...], args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        params = self._params
        length, specs, actual = balance(self._specs, args)

        remaining = dict(kwargs)
        for index in range(len(args), min(length, len(params))):
            param = params[index]
            if param.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD and param.name in remaining:
                actual[index] = remaining.pop(param.name)

        curated = [
            resolve(
                self._name,
                specs[index],
                actual[index],
                index,
                strict=self._strict,
                coercion=self._coercion,
            )
            for index in range(length)
        ]

        return self._func(*receiver, *_arrange(curated, params), **remaining)


def _arrange(curated: list[Any], params: Sequence[inspect.Parameter]) -> list[Any]:
    """
    Turn curated positions into call arguments.

    Trailing ``ABSENT`` positions are dropped so the function's own defaults
    apply; interior ones take the signature default, or ``None``.
    """
    end = len(curated)
    while end and curated[end - 1] is ABSENT:
        end -= 1

    arranged = []
    for index in range(end):
        value = curated[index]
        if value is ABSENT:
            value = None
            if index < len(params) and params[index].default is not inspect.Parameter.empty:
                value = params[index].default
        arranged.append(value)
    return arranged


class _SpecifiedMethod:
    """A ``SpecifiedFunction`` accessed through a class or an instance.

    Through an instance the receiver is fixed; through the class the first
    positional argument is taken as the receiver, like a plain function.
    """

    __slots__ = ("__func__", "__self__")

    def __init__(self, function: SpecifiedFunction, receiver: Any):
        self.__func__ = function
        self.__self__ = receiver

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.__self__ is None:
            return self.__func__(*args, **kwargs)
        return self.__func__._invoke((self.__self__,), args, kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self.__func__, name)

    def __repr__(self) -> str:
        return f"<bound {self.__func__!r} of {self.__self__!r}>"


def wrap(
    literals: Sequence[Any],
    func: Callable[..., Any],
    *,
    description: str = "",
    strict: bool | None = None,
    coercion: CoercionPolicy | str | None = None,
) -> Any:
    """
    Wrap ``func`` so each call resolves its arguments against ``literals``.

    Args:
        literals: One spec entry (literal or ``Validator``) per positional parameter
        func: Function to wrap; never modified
        description: Free text for the generated doc string
        strict: Raise ``InvalidArgumentError`` instead of substituting;
            ``None`` uses ``FuncSpecSettings.strict``
        coercion: Policy on type mismatch; ``None`` uses ``FuncSpecSettings.coercion``

    Returns:
        SpecifiedFunction (wrapped in ``staticmethod``/``classmethod`` when
        ``func`` was one)

    Raises:
        ShapeError: ``literals`` is not a list/tuple, ``func`` is not callable,
            or ``description`` is not a string
        ArityError: More literals than ``func`` declares positional parameters
            (``self``/``cls`` excluded for functions defined in a class body)

    Note:
        An ABSENT argument before a supplied one takes the signature default,
        or ``None`` when the parameter has none.
    """
    if not is_literal_sequence(literals):
        raise ShapeError("literals must be a list or tuple").with_context(
            received=type(literals).__name__
        )
    if not isinstance(description, str):
        raise ShapeError("description must be a string").with_context(
            received=type(description).__name__
        )

    settings = get_settings()
    options = {
        "description": description,
        "strict": settings.strict if strict is None else strict,
        "coercion": settings.coercion if coercion is None else CoercionPolicy(coercion),
    }

    if isinstance(func, staticmethod):
        return staticmethod(
            SpecifiedFunction(func.__func__, literals, receiver_in_args=False, **options)
        )
    if isinstance(func, classmethod):
        return classmethod(
            SpecifiedFunction(func.__func__, literals, receiver_in_args=True, **options)
        )

    if not callable(func):
        raise ShapeError("function-definition must be callable").with_context(
            received=type(func).__name__
        )

    return SpecifiedFunction(func, literals, **options)


def specify(
    literals: Sequence[Any],
    *,
    description: str = "",
    strict: bool | None = None,
    coercion: CoercionPolicy | str | None = None,
) -> Callable[[Callable[..., Any]], Any]:
    """
    Decorator form of ``wrap``.

    Example:
        @specify([0, 0], description="Add two numbers")
        def add(a, b):
            return a + b
    """

    def decorator(func: Callable[..., Any]) -> Any:
        return wrap(literals, func, description=description, strict=strict, coercion=coercion)

    return decorator


def spec(*spec_args: Any) -> SpecifiedFunction:
    """
    Positional form: ``spec(literals, func)`` or ``spec(description, literals, func)``.

    Raises:
        ArityError: Not 2 or 3 arguments
        ShapeError: Arguments of the wrong types
    """
    description, literals, func = parse_spec_args(spec_args)
    return wrap(literals, func, description=description)


# Short alias.
fn = spec


__all__ = ["SpecifiedFunction", "fn", "spec", "specify", "wrap"]
