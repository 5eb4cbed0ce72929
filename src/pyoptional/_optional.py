from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Never

from ._core import get_config
from .traits import Pipeable


class NullValueError(ValueError): ...


class NoSuchElementError(RuntimeError): ...


class Optional[T](ABC, Pipeable):
    """A value that may or may not be present.

    Instances are immutable and are only created through the static factories
    `of`, `of_non_null`, `of_nullable` and `empty`.
    """

    __slots__ = ()

    @staticmethod
    def of[V](value: V | None) -> Optional[V]:
        """
        Returns an `Optional` holding **value**.

        Args:
            value: The value to wrap. Must not be `None`.

        Returns:
            A present `Optional`.

        Raises:
            NullValueError: If **value** is `None`.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of("foo")
            Optional.of('foo')
            >>> Optional.of(None)
            Traceback (most recent call last):
                ...
            pyoptional._optional.NullValueError: called `of` with a `None` value

            ```
        """
        return _Present(value)

    @staticmethod
    def of_non_null[V](value: V | None) -> Optional[V]:
        """
        Returns an `Optional` holding **value**.

        Same as `Optional.of`.

        Raises:
            NullValueError: If **value** is `None`.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of_non_null(0)
            Optional.of(0)

            ```
        """
        return _Present(value)

    @staticmethod
    def of_nullable[V](value: V | None) -> Optional[V]:
        """
        Returns an `Optional` holding **value**, or an empty one if **value** is `None`.

        Args:
            value: The possibly absent value.

        Returns:
            A present `Optional` if **value** is not `None`, otherwise an empty one.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of_nullable({"a": 1}.get("a"))
            Optional.of(1)
            >>> Optional.of_nullable({"a": 1}.get("b"))
            Optional.empty()

            ```
        """
        return _EMPTY if value is None else _Present(value)

    @staticmethod
    def empty() -> Optional[Any]:
        """
        Returns the empty `Optional`.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.empty().is_empty
            True

            ```
        """
        return _EMPTY

    @property
    @abstractmethod
    def is_present(self) -> bool:
        """
        `True` if a value is present.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of(2).is_present
            True
            >>> Optional.empty().is_present
            False

            ```
        """
        ...

    @property
    def is_empty(self) -> bool:
        """
        `True` if no value is present.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of(2).is_empty
            False
            >>> Optional.empty().is_empty
            True

            ```
        """
        return not self.is_present

    @abstractmethod
    def get(self) -> T:
        """
        Returns the contained value.

        Returns:
            The contained value.

        Raises:
            NoSuchElementError: If the `Optional` is empty.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of("car").get()
            'car'
            >>> Optional.empty().get()
            Traceback (most recent call last):
                ...
            pyoptional._optional.NoSuchElementError: called `get` on an empty `Optional`

            ```
        """
        ...

    def if_present(self, action: Callable[[T], object]) -> None:
        """
        Calls **action** with the value if present, otherwise does nothing.

        Args:
            action: The function to call with the value.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of("hello").if_present(print)
            hello
            >>> Optional.empty().if_present(print)

            ```
        """
        if self.is_present:
            action(self.get())

    def if_present_or_else(
        self, action: Callable[[T], object], empty_action: Callable[[], object]
    ) -> None:
        """
        Calls **action** with the value if present, otherwise calls **empty_action**.

        Exactly one of the two functions is called.

        Args:
            action: The function to call with the value.
            empty_action: The function to call when no value is present.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of(1).if_present_or_else(print, lambda: print("nothing"))
            1
            >>> Optional.empty().if_present_or_else(print, lambda: print("nothing"))
            nothing

            ```
        """
        if self.is_present:
            action(self.get())
        else:
            empty_action()

    def filter(self, predicate: Callable[[T], object]) -> Optional[T]:
        """
        Returns this `Optional` if the value is present and matches **predicate**,
        otherwise returns an empty `Optional`.

        The predicate is not called on an empty `Optional`.

        Args:
            predicate: The test applied to the value.

        Returns:
            This same instance, or an empty `Optional`.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of(4).filter(lambda x: x % 2 == 0)
            Optional.of(4)
            >>> Optional.of(3).filter(lambda x: x % 2 == 0)
            Optional.empty()

            ```
        """
        if self.is_present and predicate(self.get()):
            return self
        return _EMPTY

    def map[U](self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """
        Maps an `Optional[T]` to `Optional[U]` by applying **mapper** to a present value,
        leaving an empty `Optional` untouched.

        A `None` result from **mapper** gives an empty `Optional` instead of raising.

        Args:
            mapper: The function to apply to the value.

        Returns:
            `Optional.of_nullable(mapper(value))` if present, otherwise an empty `Optional`.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of_non_null("foo").map(len)
            Optional.of(3)
            >>> Optional.of({"a": "A"}).map(lambda p: p.get("b"))
            Optional.empty()
            >>> Optional.empty().map(len)
            Optional.empty()

            ```
        """
        if self.is_present:
            return Optional.of_nullable(mapper(self.get()))
        return _EMPTY

    def flat_map[U](self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """
        Returns the `Optional` produced by **mapper** if a value is present,
        otherwise returns an empty `Optional`.

        The result of **mapper** is returned as is, without being wrapped again.

        Args:
            mapper: The function to call with the value.

        Returns:
            The result of **mapper**, or an empty `Optional`.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> left, right = Optional.of(3), Optional.of(4)
            >>> left.flat_map(lambda x: right.map(lambda y: x + y))
            Optional.of(7)
            >>> left.flat_map(lambda x: Optional.empty().map(lambda y: x + y))
            Optional.empty()

            ```
        """
        if self.is_present:
            return mapper(self.get())
        return _EMPTY

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """
        Returns this `Optional` if a value is present, otherwise the `Optional` produced by **supplier**.

        Args:
            supplier: The function to call when no value is present.

        Returns:
            This same instance, or the result of **supplier**.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of("barbarians").or_(lambda: Optional.of("vikings"))
            Optional.of('barbarians')
            >>> Optional.empty().or_(lambda: Optional.of("vikings"))
            Optional.of('vikings')

            ```
        """
        return self if self.is_present else supplier()

    def or_else(self, other: T) -> T:
        """
        Returns the contained value or **other**.

        Args:
            other: The value to return if no value is present. May be `None`.

        Returns:
            The contained value or **other**.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of("car").or_else("bike")
            'car'
            >>> Optional.empty().or_else(5)
            5

            ```
        """
        return self.get() if self.is_present else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """
        Returns the contained value or computes one from **supplier**.

        **supplier** is only called when no value is present.

        Args:
            supplier: A function returning the fallback value.

        Returns:
            The contained value or the result of **supplier**.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> k = 10
            >>> Optional.of(4).or_else_get(lambda: 2 * k)
            4
            >>> Optional.empty().or_else_get(lambda: 2 * k)
            20

            ```
        """
        return self.get() if self.is_present else supplier()

    def or_else_throw(
        self,
        error_producer: Callable[[], BaseException | type[BaseException]] | None = None,
    ) -> T:
        """
        Returns the contained value, or raises the exception produced by **error_producer**.

        **error_producer** is any zero-argument callable returning an exception instance or class,
        so an exception class itself can be passed.

        Args:
            error_producer: Builds the exception to raise. Defaults to raising `NoSuchElementError`.

        Returns:
            The contained value.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> Optional.of(1).or_else_throw(TypeError)
            1
            >>> Optional.empty().or_else_throw(lambda: KeyError("user"))
            Traceback (most recent call last):
                ...
            KeyError: 'user'

            ```
        """
        if self.is_present:
            return self.get()
        if error_producer is None:
            raise NoSuchElementError("called `or_else_throw` on an empty `Optional`")
        raise error_producer()

    def iter(self) -> Iterator[T]:
        """
        Returns an iterator over the contained value, if any.

        Example:
            ```python
            >>> from pyoptional import Optional
            >>> list(Optional.of(1).iter())
            [1]
            >>> list(Optional.empty().iter())
            []

            ```
        """
        if self.is_present:
            yield self.get()


@dataclass(slots=True, frozen=True)
class _Present[T](Optional[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError("called `of` with a `None` value")

    def __repr__(self) -> str:
        return f"Optional.of({get_config().payload_repr(self.value)})"

    @property
    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class _Empty(Optional[Any]):
    def __repr__(self) -> str:
        return "Optional.empty()"

    @property
    def is_present(self) -> bool:
        return False

    def get(self) -> Never:
        raise NoSuchElementError("called `get` on an empty `Optional`")


_EMPTY: Optional[Any] = _Empty()
