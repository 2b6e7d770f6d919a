"""
Node label formatting.

A label function takes a node's key, priority and value and returns the
single-line text drawn for that node. Two presets are provided:

    compact:  5,1:"a"
    verbose:  (k: 5, p: 1) -> "a"
"""

from typing import Any, Callable, Dict, Union

LabelFn = Callable[[Any, Any, Any], str]


def show_value(value: Any) -> str:
    """
    Text for one key, priority or value.

    Strings are double-quoted with backslashes and double quotes escaped;
    everything else uses repr().

    >>> show_value("a")
    '"a"'
    >>> show_value(5)
    '5'
    """
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return repr(value)


def compact_show_node(key: Any, priority: Any, value: Any) -> str:
    """Format a node as ``<key>,<priority>:<value>``."""
    return f"{show_value(key)},{show_value(priority)}:{show_value(value)}"


def verbose_show_node(key: Any, priority: Any, value: Any) -> str:
    """Format a node as ``(k: <key>, p: <priority>) -> <value>``."""
    return f"(k: {show_value(key)}, p: {show_value(priority)}) -> {show_value(value)}"


LABEL_FORMATS: Dict[str, LabelFn] = {
    "compact": compact_show_node,
    "verbose": verbose_show_node,
}


def resolve_label_fn(label_format: Union[str, LabelFn]) -> LabelFn:
    """
    Turn a preset name or a custom function into a label function.

    Args:
        label_format: "compact", "verbose" (case-insensitive) or a callable
            taking (key, priority, value)

    Returns:
        The label function to apply to every node

    Raises:
        ValueError: If the name is not a known preset
    """
    if callable(label_format):
        return label_format

    if isinstance(label_format, str):
        fn = LABEL_FORMATS.get(label_format.lower())
        if fn is not None:
            return fn

    known = ", ".join(repr(name) for name in LABEL_FORMATS)
    raise ValueError(
        f"label_format must be one of {known} or a callable, got {label_format!r}"
    )
