"""Create-vs-edit state machine for one kind of catalog record.

States are ``Idle``, ``Creating`` and ``Editing(target_id)``. Submitting
dispatches to the create or update operation for the current state and
returns to ``Idle``; a failed submit keeps the state so the caller can retry
or cancel.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class EditorStateError(Exception):
    """Raised on a transition that is not allowed from the current state."""


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Creating:
    pass


@dataclass(frozen=True)
class Editing:
    target_id: str


EditorState = Idle | Creating | Editing


class Editor(Generic[T]):
    def __init__(
        self,
        create: Callable[[Mapping[str, Any]], T],
        update: Callable[[str, Mapping[str, Any]], T],
    ) -> None:
        self._create = create
        self._update = update
        self.state: EditorState = Idle()

    def begin_create(self) -> None:
        self._require_idle()
        self.state = Creating()

    def begin_edit(self, target_id: str) -> None:
        self._require_idle()
        self.state = Editing(target_id)

    def submit(self, fields: Mapping[str, Any]) -> T:
        if isinstance(self.state, Creating):
            result = self._create(fields)
        elif isinstance(self.state, Editing):
            result = self._update(self.state.target_id, fields)
        else:
            raise EditorStateError("Nothing to submit while idle")
        self.state = Idle()
        return result

    def cancel(self) -> None:
        self.state = Idle()

    def _require_idle(self) -> None:
        if not isinstance(self.state, Idle):
            raise EditorStateError(f"Editor busy: {self.state!r}")
