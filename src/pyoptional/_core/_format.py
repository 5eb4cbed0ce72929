from pprint import pformat


def payload_repr(
    v: object,
    max_length: int = 80,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    """Pretty-format **v**, cutting the text after **max_length** characters.

    Example:
    ```python
    >>> payload_repr({"a": [1, 2, 3]}, max_length=8)
    "{'a': [1..."

    ```
    """
    text = pformat(v, depth=depth, width=width, compact=compact)
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text
