# grid_events.py

import uuid
from dataclasses import dataclass, field
from typing import Callable, List

from node_module import Node


@dataclass(frozen=True)
class AddChange:
    """A node placed on the grid."""
    value: Node


@dataclass(frozen=True)
class RemoveChange:
    """A node taken off the grid."""
    value: Node


@dataclass(frozen=True)
class MoveChange:
    """A node moved; old_value and new_value share the same id."""
    old_value: Node
    new_value: Node


@dataclass
class ChangesEvent:
    """Every change committed by one public engine call, in apply order."""
    changes: List[object] = field(default_factory=list)


@dataclass
class ListenerFunction:
    id: str
    function: Callable[[ChangesEvent], None]


class GridEvents:
    """Synchronous listener registry for committed change-sets."""

    def __init__(self):
        self.changes_listeners = []

    def add_changes_listener(self, function):
        """
        Register a callback fired after each committed operation.

        Returns the listener id to pass to remove_changes_listener.
        """
        listener_id = str(uuid.uuid4())
        self.changes_listeners.append(ListenerFunction(listener_id, function))
        return listener_id

    def remove_changes_listener(self, listener_id):
        self.changes_listeners = [l for l in self.changes_listeners if l.id != listener_id]

    def listener_ids(self):
        return [l.id for l in self.changes_listeners]

    def trigger_changes_event(self, event):
        # Listeners may unregister during dispatch
        for listener in list(self.changes_listeners):
            listener.function(event)
