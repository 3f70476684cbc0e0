"""Log formatting utilities."""

from typing import Any


def format_log_data(data: Any, max_length: int = 200, max_items: int = 3) -> str:
    """Summarize a value for a single log line.

    Used for acquisition options, which can be arbitrarily large.

    Args:
        data: Value to summarize (dict, list, str, etc.)
        max_length: Maximum character length for the output
        max_items: Maximum number of items to show in collections

    Returns:
        Short string suitable for logging

    Example:
        >>> format_log_data({"dsn": "postgres://db", "pool": [1, 2, 3]})
        "{dsn='postgres://db', pool=<list len=3>}"
    """
    try:
        return _summarize(data, max_length, max_items)
    except Exception:
        # A broken __repr__/__str__ must not break the caller
        return f"<{type(data).__name__}>"


def _summarize(data: Any, max_length: int, max_items: int) -> str:
    if data is None:
        return "None"

    if isinstance(data, dict):
        if not data:
            return "{}"

        items = []
        for i, (k, v) in enumerate(data.items()):
            if i >= max_items:
                items.append(f"... +{len(data) - max_items} more")
                break

            if isinstance(v, str):
                val_str = f"'{v[:50]}...'" if len(v) > 50 else f"'{v}'"
            elif isinstance(v, (list, tuple, dict, set, frozenset)):
                val_str = f"<{type(v).__name__} len={len(v)}>"
            else:
                val_str = str(v)[:50]

            items.append(f"{k}={val_str}")

        result = "{" + ", ".join(items) + "}"

    elif isinstance(data, (list, tuple)):
        if not data:
            return "[]" if isinstance(data, list) else "()"

        items = []
        for i, item in enumerate(data):
            if i >= max_items:
                items.append(f"... +{len(data) - max_items} more")
                break
            items.append(str(item)[:50])

        bracket = "[]" if isinstance(data, list) else "()"
        result = bracket[0] + ", ".join(items) + bracket[1]

    elif isinstance(data, str):
        result = f"'{data}'"

    else:
        result = repr(data)

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
