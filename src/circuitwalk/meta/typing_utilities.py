"""Type annotation utility functions.

This module provides helper functions for working with Python type annotations,
including utilities for unwrapping Annotated and qualifier types and resolving
the annotations declared by a class.
"""
import builtins
import inspect
import sys
from typing import Annotated, Any, ClassVar, Final, ForwardRef, get_origin, get_args

from ..exceptions import UnresolvedAnnotationError

type Annotation = Any


def is_annotated(annotation: Annotation) -> bool:
    """Check if an annotation is an Annotated type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is an Annotated.
    """
    return get_origin(annotation) is Annotated


def is_classvar(annotation: Annotation) -> bool:
    """Check if an annotation is a ClassVar, bare or parametrized, possibly wrapped in an
    Annotated.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a ClassVar.
    """
    if is_annotated(annotation):
        annotation = get_args(annotation)[0]
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def annotation_metadata(annotation: Annotation) -> tuple[Any, ...]:
    """Get the metadata of an Annotated type. Any other annotation has no metadata.

    Args:
        annotation (Any): The annotation to inspect.

    Returns:
        tuple[Any, ...]: The metadata in declaration order.
    """
    if not is_annotated(annotation):
        return ()
    return tuple(annotation.__metadata__)


def strip_qualifiers(annotation: Annotation) -> Annotation:
    """Remove Annotated, Final and ClassVar wrappers from an annotation.

    Args:
        annotation (Any): The annotation to strip.

    Returns:
        Any: The underlying annotation. Ex.: Annotated[Final[int], "x"] -> int.
    """
    while True:
        if is_annotated(annotation):
            annotation = get_args(annotation)[0]
        elif get_origin(annotation) in (Final, ClassVar):
            annotation = get_args(annotation)[0]
        elif annotation in (Final, ClassVar):
            return Any
        else:
            return annotation


class _ForwardNamespace(dict):
    """Evaluation namespace in which undefined names evaluate to a ForwardRef."""

    def __missing__(self, key: str) -> Any:
        if hasattr(builtins, key):
            return getattr(builtins, key)
        return ForwardRef(key)


def evaluate_annotation(annotation: Annotation, owner: type, name: str) -> Annotation:
    """Evaluate an annotation declared by a class.

    Names are looked up in the module of the class, then in the class namespace. Names defined
    in neither (ex.: a class local to a function) evaluate to a ForwardRef, so the Annotated
    metadata and the qualifiers of the annotation are always kept.

    Args:
        annotation (Any): The annotation. Non-string annotations are returned unchanged.
        owner (type): The class declaring the annotation.
        name (str): The annotated attribute.

    Raises:
        UnresolvedAnnotationError: Raised when a string annotation cannot be evaluated.

    Returns:
        Any: The evaluated annotation.
    """
    if not isinstance(annotation, str):
        return annotation
    namespace = _ForwardNamespace(vars(owner))
    module = sys.modules.get(owner.__module__)
    if module is not None:
        namespace.update(vars(module))
    try:
        return eval(annotation, {}, namespace)  # pylint: disable=eval-used
    except Exception as e:
        raise UnresolvedAnnotationError(
            f"Cannot evaluate annotation {annotation!r} of attribute '{name}' in class"
            f" '{owner.__qualname__}': {e}"
        ) from e


def class_type_hints(cls: type) -> dict[str, Annotation]:
    """Get the type hints declared by a class and its bases, base classes first, with
    Annotated metadata preserved.

    Each annotation is evaluated on its own (see evaluate_annotation), so a forward reference
    that cannot be resolved never hides the metadata of the other annotations.

    Args:
        cls (type): The class to inspect.

    Raises:
        UnresolvedAnnotationError: Raised when a string annotation is not a valid expression.

    Returns:
        dict[str, Any]: Attribute names mapped to their annotation, in declaration order.
    """
    hints: dict[str, Annotation] = {}
    for base in reversed(cls.__mro__):
        for name, annotation in inspect.get_annotations(base).items():
            hints[name] = evaluate_annotation(annotation, base, name)
    return hints
