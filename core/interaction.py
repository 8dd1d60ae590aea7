# core/interaction.py
"""
Transient editor modes. Exactly one is active at a time, so a selected
component or wire, a pending placement and an in-progress wire can never
coexist.
"""
from dataclasses import dataclass, field
from typing import Optional, Union

from core.circuit import Circuit


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class ComponentSelected:
    component_id: str


@dataclass(frozen=True)
class WireSelected:
    wire_id: str


@dataclass(frozen=True)
class PlacementPending:
    type_tag: str


@dataclass(frozen=True)
class Wiring:
    first_pin_id: str


Interaction = Union[Idle, ComponentSelected, WireSelected, PlacementPending, Wiring]


@dataclass(frozen=True)
class EditorState:
    """Complete editor snapshot: the circuit plus the active interaction mode."""
    circuit: Circuit = field(default_factory=Circuit)
    interaction: Interaction = field(default_factory=Idle)

    @property
    def selected_component_id(self) -> Optional[str]:
        if isinstance(self.interaction, ComponentSelected):
            return self.interaction.component_id
        return None

    @property
    def selected_wire_id(self) -> Optional[str]:
        if isinstance(self.interaction, WireSelected):
            return self.interaction.wire_id
        return None

    @property
    def pending_type(self) -> Optional[str]:
        if isinstance(self.interaction, PlacementPending):
            return self.interaction.type_tag
        return None

    @property
    def is_wiring(self) -> bool:
        return isinstance(self.interaction, Wiring)

    @property
    def first_pin_id(self) -> Optional[str]:
        if isinstance(self.interaction, Wiring):
            return self.interaction.first_pin_id
        return None
