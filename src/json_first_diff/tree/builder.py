"""TreeBuilder: converts native Python values into a DocumentNode tree.

Uses recursive dispatch to convert dicts, sequences, and scalar values into
the immutable node variants of ``json_first_diff.tree.nodes``.  Values that
are already document nodes pass through untouched, so callers can mix
hand-built nodes (URI, raw, comment, undefined) into native documents.

Numpy scalars and arrays are accepted as well: documents assembled from
pandas or numpy output otherwise end up with ``np.int64`` leaves that would
not be recognised as integers.
"""

from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import numpy as np

from json_first_diff.tree.nodes import (
    ArrayNode,
    DocumentNode,
    NodeKind,
    ObjectNode,
    PropertyNode,
    ScalarNode,
)

__all__ = ["TreeBuilder"]

_NODE_TYPES = (ArrayNode, ObjectNode, PropertyNode, ScalarNode)


@dataclass
class TreeBuilder:
    """Converts native Python values into DocumentNode trees.

    The dispatch order is critical:

    - bool MUST be checked before int because bool is a subclass of int.
    - datetime.datetime is a subclass of datetime.date; both map to DATE.

    Example::

        builder = TreeBuilder()
        tree = builder.build({"ids": [1, 2]})
        # ObjectNode((PropertyNode("ids", ArrayNode((ScalarNode(INTEGER, 1), ...))),))
    """

    def build(self, value: Any) -> DocumentNode:
        """Convert a native value to a DocumentNode.

        Args:
            value: A JSON value (dict, list, str, int, float, bool, None), a
                richer scalar (datetime, date, timedelta, UUID, bytes,
                Decimal), a numpy scalar or array, or an existing node.

        Returns:
            The root node of the converted tree.

        Raises:
            TypeError: If the value (or a nested value) has no node mapping,
                or an object key is not a string.
        """
        if isinstance(value, _NODE_TYPES):
            return value

        if isinstance(value, np.generic):
            value = value.item()

        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            return ScalarNode(NodeKind.BOOLEAN, value)

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return ArrayNode(tuple(self.build(item) for item in value))

        if isinstance(value, np.ndarray):
            return self.build(value.tolist())

        if value is None:
            return ScalarNode(NodeKind.NULL, None)

        return self._build_scalar(value)

    def _build_object(self, obj: dict[Any, Any]) -> ObjectNode:
        properties = []
        for key, val in obj.items():
            if not isinstance(key, str):
                msg = f"Object keys must be strings, got {type(key)!r}"
                raise TypeError(msg)
            properties.append(PropertyNode(key, self.build(val)))
        return ObjectNode(tuple(properties))

    def _build_scalar(self, value: Any) -> ScalarNode:
        if isinstance(value, int):
            return ScalarNode(NodeKind.INTEGER, value)
        if isinstance(value, (float, Decimal)):
            return ScalarNode(NodeKind.FLOAT, value)
        if isinstance(value, str):
            return ScalarNode(NodeKind.STRING, value)
        if isinstance(value, (datetime.datetime, datetime.date)):
            return ScalarNode(NodeKind.DATE, value)
        if isinstance(value, datetime.timedelta):
            return ScalarNode(NodeKind.TIMESPAN, value)
        if isinstance(value, uuid.UUID):
            return ScalarNode(NodeKind.GUID, value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return ScalarNode(NodeKind.BYTES, bytes(value))

        msg = f"Unsupported document value type: {type(value)!r}"
        raise TypeError(msg)
