"""Tree subpackage for document-tree primitives.

Re-exports the public API for the tree module:
- ArrayNode, ObjectNode, PropertyNode, ScalarNode: the DocumentNode variants
- NodeKind: StrEnum of every kind a node can report
- describe_kind: article-qualified kind phrases for messages
- TreeBuilder: converts native Python values into a DocumentNode tree
"""

from json_first_diff.tree.builder import TreeBuilder
from json_first_diff.tree.nodes import (
    SCALAR_KINDS,
    ArrayNode,
    DocumentNode,
    NodeKind,
    ObjectNode,
    PropertyNode,
    ScalarNode,
    describe_kind,
)

__all__ = [
    "SCALAR_KINDS",
    "ArrayNode",
    "DocumentNode",
    "NodeKind",
    "ObjectNode",
    "PropertyNode",
    "ScalarNode",
    "TreeBuilder",
    "describe_kind",
]
