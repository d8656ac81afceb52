# expecta/tree/dump.py
"""Tree rendering for debugging and tests."""

from __future__ import annotations
from typing import Any, Dict, List, Union

from ..match.tokens import token_type, token_value
from .nodes import Node, Terminal


def dump_tree(node: Node, indent: str = "  ") -> str:
    """Indented one-node-per-line rendering.

    Terminals print as ``type 'value'``; productions as their rule name with
    the consumed-token count, e.g. ``expr [3]``.
    """
    lines: List[str] = []

    def walk(n: Node, depth: int) -> None:
        pad = indent * depth
        if isinstance(n, Terminal):
            lines.append(f"{pad}{token_type(n.token)} {token_value(n.token)!r}")
            return
        lines.append(f"{pad}{n.rule_name} [{n.length}]")
        for child in n.contents:
            walk(child, depth + 1)

    walk(node, 0)
    return "\n".join(lines)


def tree_to_data(node: Node) -> Union[Dict[str, Any], List[Any]]:
    """Nested plain-data form: terminals become ``[type, value]``,
    productions ``{"rule": name, "contents": [...]}``."""
    if isinstance(node, Terminal):
        return [token_type(node.token), token_value(node.token)]
    return {
        "rule": node.rule_name,
        "contents": [tree_to_data(child) for child in node.contents],
    }
