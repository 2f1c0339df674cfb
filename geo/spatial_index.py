"""
Purpose: Prefix trie over cell-code characters (the driver location index).
What it does:
- Stores driver ids under the full cell code of their current location.
- Answers "which drivers have a cell code starting with this prefix?"

Nodes live in a flat list (an arena) and refer to their children by index,
so the structure is a plain tree with no shared references.

Rule: The index does not know about availability or distance. The dispatcher
keeps it consistent (remove at the old code, insert at the new one).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

ROOT = 0


@dataclass
class TrieNode:
    """
    One node of the trie.
    children maps a single cell-code character to the index of the child node.
    driver_ids holds the drivers whose code ends exactly at this depth.
    """
    children: Dict[str, int] = field(default_factory=dict)
    driver_ids: Set[int] = field(default_factory=set)


class GeohashTrie:
    """
    Arena-backed prefix trie keyed by cell code.

    Empty nodes are never pruned on remove, so the arena only grows with
    churn. Acceptable for a process-lifetime index.
    """

    def __init__(self):
        self._nodes: List[TrieNode] = [TrieNode()]

    def __len__(self) -> int:
        """
        Number of nodes in the arena (root included).
        """
        return len(self._nodes)

    # --- Internal helpers ---

    def _walk(self, prefix: str) -> Optional[int]:
        """
        Follow existing children for each character. None if the path is absent.
        """
        node_index = ROOT
        for char in prefix:
            node_index = self._nodes[node_index].children.get(char)
            if node_index is None:
                return None
        return node_index

    def _child(self, node_index: int, char: str) -> int:
        children = self._nodes[node_index].children
        if char not in children:
            self._nodes.append(TrieNode())
            children[char] = len(self._nodes) - 1
        return children[char]

    # --- Public API ---

    def insert(self, geohash: str, driver_id: int) -> None:
        """
        Register driver_id under geohash, creating nodes as needed.
        Idempotent: inserting the same pair twice stores the id once.
        """
        node_index = ROOT
        for char in geohash:
            node_index = self._child(node_index, char)
        self._nodes[node_index].driver_ids.add(driver_id)

    def remove(self, geohash: str, driver_id: int) -> None:
        """
        Drop driver_id from the node at geohash if it is there. Unknown paths are ignored.
        """
        node_index = self._walk(geohash)
        if node_index is None:
            return
        self._nodes[node_index].driver_ids.discard(driver_id)

    def query(self, prefix: str) -> Set[int]:
        """
        All driver ids stored at or below the node for prefix (no ordering).
        Empty set when no code starts with prefix.
        """
        start = self._walk(prefix)
        if start is None:
            return set()

        found: Set[int] = set()
        stack = [start]
        while stack:
            node = self._nodes[stack.pop()]
            found.update(node.driver_ids)
            stack.extend(node.children.values())
        return found
