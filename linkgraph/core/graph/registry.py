"""Label registry: string labels to dense vertex ids and back."""

from __future__ import annotations

from linkgraph.core.exceptions import UnknownLabelError


class LabelRegistry:
    """Bidirectional label <-> id mapping.

    Ids are assigned on first sight, starting at 0, with no gaps or reuse.
    """

    __slots__ = ("_ids", "_labels")

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._labels: list[str] = []

    def intern(self, label: str) -> int:
        """Return the id for label, assigning the next one if unseen. O(1)."""
        vertex_id = self._ids.get(label)
        if vertex_id is None:
            vertex_id = len(self._labels)
            self._ids[label] = vertex_id
            self._labels.append(label)
        return vertex_id

    def id_of(self, label: str) -> int:
        """Look up a label without creating it. O(1)."""
        try:
            return self._ids[label]
        except KeyError:
            raise UnknownLabelError(f"Label '{label}' not found in the graph") from None

    def label_of(self, vertex_id: int) -> str:
        """Label for an assigned id. O(1)."""
        return self._labels[vertex_id]

    def __contains__(self, label: object) -> bool:
        return label in self._ids

    def __len__(self) -> int:
        return len(self._labels)

    @property
    def labels(self) -> list[str]:
        """Labels in id order."""
        return list(self._labels)

    def __repr__(self) -> str:
        return f"LabelRegistry(labels={len(self)})"
