"""Public mixins traits for `Optional`, and custom user implementations.

Since `Pipeable` and `Checkable` depend only on Self for arguments, returns types and internal logic, they can be safely added to any already existing class to provide additional functionality.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, Self

if TYPE_CHECKING:
    from ._optional import Optional

__all__ = ["Checkable", "Pipeable"]


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> from pyoptional import Optional
        >>> def describe(opt: Optional[int], unit: str) -> str:
        ...     return opt.map(lambda n: f"{n} {unit}").or_else("unknown")
        >>>
        >>> Optional.of(3).into(describe, "apples")
        '3 apples'
        >>> Optional.empty().into(describe, unit="apples")
        'unknown'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        This method is very useful for debugging or passing the instance to other functions for side effects, without breaking the fluent method chaining.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> from pyoptional import Optional
        >>> Optional.of(2).inspect(print).map(lambda x: x * 10).get()
        Optional.of(2)
        20

        ```
        """
        func(self, *args, **kwargs)
        return self


class Checkable:
    """Mixin class providing conditional chaining methods based on truthiness.

    All methods evaluate the instance's truthiness to determine their behavior.
    """

    __slots__ = ()

    def then[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R | None],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Optional[R]:
        """Wrap the result of **func** in an `Optional[R]` based on the truthiness of `Self`.

        The function is only called if `Self` evaluates to `True` (lazy evaluation).
        A `None` result gives an empty `Optional`.

        Truthiness is determined by `__bool__()` if defined, otherwise by `__len__()` if defined (returning `False` if length is 0), otherwise all instances are truthy (Python's default behavior).

        Args:
            func (Callable[Concatenate[Self, P], R | None]): A callable that returns the value to wrap.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Optional[R]: A present `Optional` if self is truthy and **func** returned a value, an empty one otherwise.

        Example:
        ```python
        >>> from pyoptional.traits import Checkable
        >>> class Basket(list[int], Checkable):
        ...     pass
        >>> Basket([1, 2, 3]).then(sum)
        Optional.of(6)
        >>> Basket().then(sum)
        Optional.empty()

        ```
        """
        from ._optional import Optional

        if self:
            return Optional.of_nullable(func(self, *args, **kwargs))
        return Optional.empty()

    def then_some(self) -> Optional[Self]:
        """Wraps `Self` in an `Optional[Self]` based on its truthiness.

        Truthiness is determined by `__bool__()` if defined, otherwise by `__len__()` if defined (returning `False` if length is 0), otherwise all instances are truthy (Python's default behavior).

        Returns:
            Optional[Self]: A present `Optional` holding self if self is truthy, an empty one otherwise.

        Example:
        ```python
        >>> from pyoptional.traits import Checkable
        >>> class Basket(list[int], Checkable):
        ...     pass
        >>> Basket([1, 2]).then_some().map(len)
        Optional.of(2)
        >>> Basket().then_some()
        Optional.empty()

        ```
        """
        from ._optional import Optional

        return Optional.of(self) if self else Optional.empty()
