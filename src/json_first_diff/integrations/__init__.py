"""Integrations subpackage for json-first-diff.

Contains integration adapters for external frameworks:
- pytest plugin providing the ``assert_json_equivalent`` fixture
  (auto-discovered via the pytest11 entry point)
"""

from __future__ import annotations

__all__: list[str] = []
