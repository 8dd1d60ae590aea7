# ui/undo_commands.py
from typing import List, Any, Optional, TYPE_CHECKING

from core.geometry import Point

if TYPE_CHECKING:
    from core.circuit import Circuit
    from core.circuit_controller import CircuitController


class UndoStack:
    """Manages a history of commands for undo/redo functionality."""

    def __init__(self):
        self.stack: List[Any] = []
        self.index: int = -1  # Points to the last executed command

    def push(self, command: Any) -> None:
        """
        Executes the command's redo action and records it. A command that
        marks itself obsolete (it turned out to change nothing) is dropped.
        """
        command.redo()
        if getattr(command, "obsolete", False):
            return
        self.stack = self.stack[:self.index + 1]
        self.stack.append(command)
        self.index += 1

    def undo(self) -> None:
        if self.index >= 0:
            self.stack[self.index].undo()
            self.index -= 1

    def redo(self) -> None:
        if self.index + 1 < len(self.stack):
            self.index += 1
            self.stack[self.index].redo()

    def can_undo(self) -> bool:
        return self.index >= 0

    def can_redo(self) -> bool:
        return self.index + 1 < len(self.stack)


class SnapshotCommand:
    """
    Base for edits that are undone by swapping whole circuit snapshots.
    The first redo performs the edit through the controller; later redos
    restore the resulting snapshot instead of repeating the edit.
    """

    def __init__(self, controller: 'CircuitController'):
        self.controller = controller
        self.before: Optional['Circuit'] = None
        self.after: Optional['Circuit'] = None
        self.obsolete = False

    def execute(self) -> None:
        raise NotImplementedError

    def redo(self):
        if self.after is None:
            self.before = self.controller.circuit
            self.execute()
            self.after = self.controller.circuit
            self.obsolete = self.after is self.before
        else:
            self.controller.restore(self.after)

    def undo(self):
        self.controller.restore(self.before)


class AddComponentCommand(SnapshotCommand):
    """Places a new catalog part."""

    def __init__(self, controller: 'CircuitController', type_tag: str, x: float, y: float):
        super().__init__(controller)
        self.type_tag = type_tag
        self.x = x
        self.y = y
        self.component_id: Optional[str] = None

    def execute(self) -> None:
        self.component_id = self.controller.add_component(self.type_tag, self.x, self.y)


class RemoveComponentCommand(SnapshotCommand):
    """Deletes a component together with its wires."""

    def __init__(self, controller: 'CircuitController', component_id: str):
        super().__init__(controller)
        self.component_id = component_id

    def execute(self) -> None:
        self.controller.remove_component(self.component_id)


class RemoveWireCommand(SnapshotCommand):
    """Deletes a single wire."""

    def __init__(self, controller: 'CircuitController', wire_id: str):
        super().__init__(controller)
        self.wire_id = wire_id

    def execute(self) -> None:
        self.controller.remove_wire(self.wire_id)


class ConnectPinsCommand(SnapshotCommand):
    """Resolves the in-progress wire onto a second pin."""

    def __init__(self, controller: 'CircuitController', pin_id: str):
        super().__init__(controller)
        self.pin_id = pin_id
        self.wire_id: Optional[str] = None

    def execute(self) -> None:
        self.wire_id = self.controller.complete_wiring(self.pin_id)


class MoveComponentCommand:
    """Handles position changes made by dragging a component."""

    def __init__(self, controller: 'CircuitController', component_id: str, old_pos: Point, new_pos: Point):
        self.controller = controller
        self.component_id = component_id
        self.old_pos = old_pos
        self.new_pos = new_pos

    def undo(self):
        self.controller.move_component(self.component_id, self.old_pos.x, self.old_pos.y)

    def redo(self):
        self.controller.move_component(self.component_id, self.new_pos.x, self.new_pos.y)
