from dataclasses import dataclass

from ._format import payload_repr


@dataclass(slots=True)
class Config:
    """Display settings shared by every `Optional`.

    Only the `repr` of present values depends on these settings.

    Args:
        max_length (int): Longest payload repr kept before it is cut and suffixed with `...`.
        depth (int): Nesting depth passed to `pprint.pformat`.
        width (int): Line width passed to `pprint.pformat`.
        compact (bool): `compact` flag passed to `pprint.pformat`.

    Example:
    ```python
    >>> from pyoptional import Optional, get_config
    >>> config = get_config()
    >>> config.max_length = 5
    >>> Optional.of("a long payload")
    Optional.of('a lo...)
    >>> config.max_length = 80

    ```
    """

    max_length: int = 80
    depth: int = 3
    width: int = 80
    compact: bool = True

    def payload_repr(self, value: object) -> str:
        """Format **value** with the current settings.

        Example:
        ```python
        >>> from pyoptional import Config
        >>> Config(max_length=6).payload_repr("abcdefgh")
        "'abcde..."

        ```
        """
        return payload_repr(
            value,
            self.max_length,
            self.depth,
            self.width,
            compact=self.compact,
        )


_CONFIG = Config()


def get_config() -> Config:
    """Returns the process-wide `Config`.

    Example:
    ```python
    >>> from pyoptional import get_config
    >>> get_config().max_length
    80

    ```
    """
    return _CONFIG
