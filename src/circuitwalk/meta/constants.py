"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2025-07-11
Updated: 2025-12-18
Description: Namespaces (class) of constants. Used for the tag vocabulary of circuitwalk.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from collections.abc import Iterator
from typing import Any, NoReturn, Callable, ClassVar, get_origin
from ..exceptions import CircuitWalkError
from .typing_utilities import strip_qualifiers


class ConstantsInstantiationError(CircuitWalkError):
    """Instantiation error of a Constants class."""


class ConstantsCompositionError(CircuitWalkError):
    """Composition error of a Constants class."""


class ConstantsModificationError(CircuitWalkError):
    """Modification error of a Constants class."""


def _verify_functions(name: str, namespace: dict[str, Any]) -> None:
    """Verify that no disalowed function is added.
    Disallowed functions are __new__ and __init__.

    Args:
        name (str): name of the class.
        namespace (dict[str, Any]): namespace of the class.

    Raises:
        ConstantsCompositionError: Raised when a disallowed function is added.
    """
    if "__init__" in namespace or "__new__" in namespace:
        raise ConstantsCompositionError(
            f"Constant class '{name}' is disallowed to have __new__ or __init__"
            " method since it shall never be instantiated."
        )


def _instantiation_error(name: str) -> Callable[[Any], NoReturn]:
    """Helper to format an error message when trying to instantiate a Constants class.

    Args:
        name (str): name of the class.

    Returns:
        Callable[[], NoReturn]: A callable that throws an instantiation error when called.
    """

    def f(_: Any) -> NoReturn:
        raise ConstantsInstantiationError(
            f"Cannot instantiate constant class '{name}'. Constant class cannot be instantiated."
        )

    return f


def _coerce(annotation: Any, value: Any) -> Any:
    """Coerce a value to a plain type annotation. Non-type annotations keep the value as is."""
    target = strip_qualifiers(annotation)
    if target is Any or not isinstance(target, type) or get_origin(target) is not None:
        return value
    if isinstance(value, target):
        return value
    return target(value)


def _verify_annotations_and_coerce(cls: type, annotations: dict[str, Any]) -> None:
    """Verify that no annotated member value is missing and coerce all annotated type.

    Args:
        cls (type): the freshly created constant class.
        annotations (dict[str, Any]): annotations declared by the class itself.

    Raises:
        ConstantsCompositionError: Raised when an annotated member value is missing or cannot
            be coerced.
    """
    for key, annotation in annotations.items():
        if key not in cls.__constants__:
            continue
        # Ensure that any annotated member has a value.
        if key not in cls.__dict__:
            raise ConstantsCompositionError(
                f"Attribute '{key}' needs a value in constant class '{cls.__name__}'."
            )

        value = cls.__dict__[key]
        try:
            type.__setattr__(cls, key, _coerce(annotation, value))
        except (TypeError, ValueError) as e:
            raise ConstantsCompositionError(
                f"Failed to coerce value {value!r} to type {annotation} "
                f"for constant '{key}' in class '{cls.__name__}': {e}"
            ) from e


class ConstantsMetaclass(type):
    __constants__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        allow_private: bool = False,
        **kwargs: Any,
    ) -> Any:

        # verify that no function is added.
        _verify_functions(name, namespace)

        # add an __new__ method that throws an error.
        namespace["__new__"] = _instantiation_error(name)

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        # create a tuple of constant names for introspection.
        annotations = inspect.get_annotations(cls, eval_str=True)
        constants_names: list[str] = []
        for base in bases:
            if isinstance(base, ConstantsMetaclass):
                constants_names.extend(
                    k for k in base.__constants__ if k not in constants_names
                )
        constants_names.extend(
            k
            for k in annotations
            if (allow_private or not k.startswith("_")) and k not in constants_names
        )
        type.__setattr__(cls, "__constants__", tuple(constants_names))

        # verify that no annotated member is missing and coerce annotated types.
        _verify_annotations_and_coerce(cls, annotations)

        return cls

    def __setattr__(cls, name: str, value: Any) -> NoReturn:
        raise ConstantsModificationError(
            f"Attribute '{name}' of class '{cls.__name__}' cannot be modified. Reason: Constant"
            " class cannot be modified."
        )

    def __repr__(cls) -> str:
        """Returns a string representation of the class."""
        constants = ", ".join(f"{k}={getattr(cls, k)!r}" for k in cls.__constants__)
        return f"<ConstantNamespace {cls.__name__}({constants})>"

    def __iter__(cls) -> Iterator[str]:
        return iter(cls.__constants__)


class ConstantNamespace(metaclass=ConstantsMetaclass, allow_private=False):
    """Base class to create namespaces (class) of constants.
    Examples:
        >>> class Options(ConstantNamespace):
        ...    A = 1 # this is not a constant. It needs annotation.
        ...    PUBLIC: str = "public" # this is a constant.
        ...    DEPTH: int = 3.0 # will result in 3. Values are coerced.

        >>> Options.PUBLIC
        'public'

        >>> Options.PUBLIC = "secret" # raises ConstantsModificationError.
    """

    __constants__: ClassVar[tuple[str, ...]]
