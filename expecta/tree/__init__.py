# expecta/tree/__init__.py
"""Parse tree model: named/anonymous productions, terminals, and a builder."""

from .nodes import (
    Production, AnonymousProduction, Terminal, Node, ProductionBuilder,
    TERMINAL_RULE_NAME,
)
from .dump import dump_tree, tree_to_data
