"""
Flattening of nested configuration trees into dotted paths.

    {"database": {"hosts": ["a", "b"]}}
        -> {"database.hosts[0]": "a", "database.hosts[1]": "b"}
"""
from typing import Any

from core.values import Scalar, stringify_value


def flatten_config(node: Any, prefix: str = "", separator: str = ".") -> dict[str, Scalar]:
    """
    Recursively flatten a parsed configuration.

    Mapping keys are joined with `separator`, list items get a bracketed
    index. Scalars and None at the top level (empty prefix) produce nothing.
    Key order follows traversal order.
    """
    items: dict[str, Scalar] = {}

    if isinstance(node, list):
        for index, item in enumerate(node):
            item_key = f"{prefix}[{index}]" if prefix else f"[{index}]"
            items.update(flatten_config(item, item_key, separator))
        return items

    if isinstance(node, dict):
        for key, value in node.items():
            # YAML allows non-string keys such as 1 or true
            key = key if isinstance(key, str) else stringify_value(key)
            new_key = f"{prefix}{separator}{key}" if prefix else key
            if isinstance(value, (dict, list)):
                items.update(flatten_config(value, new_key, separator))
            else:
                items[new_key] = value
        return items

    # Scalar or None
    if prefix:
        items[prefix] = node
    return items
