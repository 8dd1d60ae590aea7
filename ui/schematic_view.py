# ui/schematic_view.py
import logging
from typing import Dict, Optional
from PySide6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsRectItem, QGraphicsItem
from PySide6.QtCore import Qt, QLineF, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen, QTransform, QWheelEvent

from core.catalog import lookup
from core.circuit_controller import CircuitController
from core.geometry import Point, ViewTransform
from core.interaction import EditorState
from ui.component_item import ComponentItem
from ui.wire_item import WireItem
from ui.undo_commands import (
    UndoStack, AddComponentCommand, ConnectPinsCommand, MoveComponentCommand, RemoveComponentCommand,
    RemoveWireCommand
)
from ui.grid import GridItem

logger = logging.getLogger(__name__)


class SchematicView(QGraphicsView):
    """
    The canvas. Scene coordinates equal viewport pixels; every circuit item
    hangs under one root item whose transform is the circuit's view transform,
    so the controller's snapshot is the only camera there is.
    """
    GRID_SIZE = 20
    GRID_MIN_SCALE = 0.5
    PIN_HIT_RADIUS = 6
    WIRE_Z = 1000

    def __init__(self, controller: CircuitController):
        super().__init__()
        self.controller = controller
        self.undo_stack = UndoStack()

        # --- Scene & View Configuration ---
        self._scene = QGraphicsScene()
        self.setScene(self._scene)
        self.setBackgroundBrush(QColor("white"))
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setRenderHints(QPainter.Antialiasing | QPainter.TextAntialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setTransformationAnchor(QGraphicsView.NoAnchor)
        self.setResizeAnchor(QGraphicsView.NoAnchor)

        # --- Camera root & background grid ---
        self._root = QGraphicsRectItem()
        self._root.setPen(QPen(Qt.NoPen))
        self._root.setFlag(QGraphicsItem.ItemHasNoContents, True)
        self._scene.addItem(self._root)
        self.grid_item = GridItem(self.GRID_SIZE, self._root)

        # --- Navigation State ---
        self.panning = False
        self.last_pan_point: Optional[QPointF] = None

        # --- Component drag State ---
        self._drag_component_id: Optional[str] = None
        self._drag_grab_offset = Point(0, 0)
        self._drag_start_pos: Optional[Point] = None

        # --- Rendered items ---
        self.component_items: Dict[str, ComponentItem] = {}
        self.wire_items: Dict[str, WireItem] = {}

        self._sync_scene_rect()
        self.controller.subscribe(self.render_state)
        self.render_state(self.controller.state)

    # --- Rendering ---

    def _sync_scene_rect(self) -> None:
        """Keeps scene coordinates identical to viewport pixels."""
        self.setSceneRect(QRectF(self.viewport().rect()))

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._sync_scene_rect()
        self._update_grid(self.controller.circuit.view)

    def _update_grid(self, view: ViewTransform) -> None:
        # Below the threshold the lines would crowd into noise
        self.grid_item.setVisible(view.scale >= self.GRID_MIN_SCALE)
        rect = self.viewport().rect()
        top_left = view.to_model(Point(rect.left(), rect.top()))
        bottom_right = view.to_model(Point(rect.right() + 1, rect.bottom() + 1))
        self.grid_item.set_visible_rect(QRectF(QPointF(top_left.x, top_left.y),
                                               QPointF(bottom_right.x, bottom_right.y)))

    def render_state(self, state: EditorState) -> None:
        """
        Brings the scene in line with a snapshot. Items whose model did not
        change are kept; rendering never writes back to the model.
        """
        view = state.circuit.view
        self._root.setTransform(QTransform(view.scale, 0, 0, view.scale, view.offset.x, view.offset.y))
        self._update_grid(view)
        self._sync_components(state)
        self._sync_wires(state)
        self._update_cursor(state)

    def _sync_components(self, state: EditorState) -> None:
        show_pins = state.is_wiring
        live = set()

        # Insertion order is z-order
        for z, component in enumerate(state.circuit.components):
            selected = component.id == state.selected_component_id
            item = self.component_items.get(component.id)
            if item is not None and item.matches(component, selected, show_pins):
                if item.model is not component:
                    item.move_to(component)
            else:
                if item is not None:
                    self._scene.removeItem(item)
                item = ComponentItem(component, lookup(component.type), selected=selected,
                                     show_pins=show_pins, parent=self._root)
                self.component_items[component.id] = item
            item.setZValue(z)
            live.add(component.id)

        for component_id in list(self.component_items):
            if component_id not in live:
                self._scene.removeItem(self.component_items.pop(component_id))

    def _sync_wires(self, state: EditorState) -> None:
        circuit = state.circuit
        live = set()

        for wire in circuit.wires:
            endpoints = circuit.wire_endpoints(wire)
            if endpoints is None:
                continue
            start = QPointF(endpoints[0].x, endpoints[0].y)
            end = QPointF(endpoints[1].x, endpoints[1].y)
            selected = wire.id == state.selected_wire_id
            live.add(wire.id)

            item = self.wire_items.get(wire.id)
            if (item is not None and item.wire == wire and item.selected == selected
                    and item.line() == QLineF(start, end)):
                continue
            if item is not None:
                self._scene.removeItem(item)
            item = WireItem(wire, start, end, selected=selected, parent=self._root)
            item.setZValue(self.WIRE_Z)
            self.wire_items[wire.id] = item

        for wire_id in list(self.wire_items):
            if wire_id not in live:
                self._scene.removeItem(self.wire_items.pop(wire_id))

    def _update_cursor(self, state: EditorState) -> None:
        if self.panning:
            self.setCursor(Qt.ClosedHandCursor)
        elif state.pending_type is not None:
            self.setCursor(Qt.CrossCursor)
        elif state.is_wiring:
            self.setCursor(Qt.PointingHandCursor)
        else:
            self.setCursor(Qt.ArrowCursor)

    # --- Pointer routing ---

    def _to_model(self, pos: QPointF) -> Point:
        return self.controller.circuit.view.to_model(Point(pos.x(), pos.y()))

    def press_at(self, pos: QPointF) -> None:
        """
        Routes a left click at a viewport position: visible pin, then wire,
        then component body, then background (placement or panning).
        """
        state = self.controller.state
        circuit = state.circuit
        model_pos = self._to_model(pos)

        # Pins are only clickable while they are drawn
        if state.is_wiring or state.selected_component_id is not None:
            candidates = None if state.is_wiring else [state.selected_component_id]
            hit = circuit.pin_at(model_pos, self.PIN_HIT_RADIUS, candidates)
            if hit is not None:
                self._handle_pin_click(hit[1].id)
                return

        # Wires sit above components; they are not pickable while wiring
        if not state.is_wiring:
            for item in reversed(list(self.wire_items.values())):
                if item.hit(pos):
                    self.controller.select_wire(item.wire_id)
                    return

        component = circuit.component_at(model_pos)
        if component is not None:
            self.controller.select_component(component.id)
            self._drag_component_id = component.id
            self._drag_grab_offset = model_pos - component.position
            self._drag_start_pos = component.position
            return

        if state.pending_type is not None:
            self.undo_stack.push(AddComponentCommand(self.controller, state.pending_type, model_pos.x, model_pos.y))
            self.controller.select_component_type(None)
            return

        self.panning = True
        self.last_pan_point = QPointF(pos)
        self.controller.select_component(None)
        self.controller.select_wire(None)
        self._update_cursor(self.controller.state)

    def _handle_pin_click(self, pin_id: str) -> None:
        if self.controller.state.is_wiring:
            self.undo_stack.push(ConnectPinsCommand(self.controller, pin_id))
        else:
            self.controller.start_wiring(pin_id)

    def drag_to(self, pos: QPointF) -> None:
        if self.panning and self.last_pan_point is not None:
            delta = pos - self.last_pan_point
            self.last_pan_point = QPointF(pos)
            self.controller.pan_by(delta.x(), delta.y())
        elif self._drag_component_id is not None:
            target = self._to_model(pos) - self._drag_grab_offset
            self.controller.move_component(self._drag_component_id, target.x, target.y)

    def release_at(self, pos: QPointF) -> None:
        if self.panning:
            self.panning = False
            self.last_pan_point = None
            self._update_cursor(self.controller.state)
            return

        if self._drag_component_id is not None:
            component = self.controller.circuit.find_component(self._drag_component_id)
            if component is not None and component.position != self._drag_start_pos:
                self.undo_stack.push(MoveComponentCommand(
                    self.controller, component.id, self._drag_start_pos, component.position
                ))
            self._drag_component_id = None
            self._drag_start_pos = None

    def zoom_at(self, pos: QPointF, zoom_in: bool) -> None:
        self.controller.zoom_at(Point(pos.x(), pos.y()), zoom_in)

    # --- Qt event handlers ---

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self.setFocus()
            self.press_at(event.position())
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        self.drag_to(event.position())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self.release_at(event.position())
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Zooms around the cursor, one step per wheel notch direction."""
        delta = event.angleDelta().y()
        if delta == 0:
            return
        # Rolling toward the user (negative delta) zooms in
        self.zoom_at(event.position(), delta < 0)
        event.accept()

    def keyPressEvent(self, event) -> None:
        """
        Handles keyboard shortcuts.
        Esc: Cancels the current wire, or the pending placement.
        Del : Deletes the selected wire, or the selected component and its wires.
        """
        state = self.controller.state
        if event.key() == Qt.Key_Escape:
            if state.is_wiring:
                self.controller.cancel_wiring()
            elif state.pending_type is not None:
                self.controller.select_component_type(None)
            else:
                super().keyPressEvent(event)
        elif event.key() in (Qt.Key_Delete, Qt.Key_Backspace):
            if state.selected_wire_id is not None:
                self.undo_stack.push(RemoveWireCommand(self.controller, state.selected_wire_id))
            elif state.selected_component_id is not None:
                self.undo_stack.push(RemoveComponentCommand(self.controller, state.selected_component_id))
        else:
            super().keyPressEvent(event)
