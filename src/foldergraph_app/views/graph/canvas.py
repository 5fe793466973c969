"""
FolderGraphCanvas - QGraphicsView hosting the graph and its folder puddles.

Features:
- Per-frame tick that syncs positions from the simulation, recomputes the
  puddles and pushes foreign nodes out of them
- Own camera (pan, smooth zoom) applied to nodes and puddles alike
- Node dragging (the dragged node is pinned and ignored by the puddles)
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from PyQt6.QtWidgets import QGraphicsView, QGraphicsScene
from PyQt6.QtCore import Qt, QPointF, QTimer, pyqtSignal
from PyQt6.QtGui import QBrush, QKeyEvent, QMouseEvent, QPainter, QWheelEvent

from foldergraph_core.config import ClusterConfig
from foldergraph_core.domain.models import (
    Camera, GraphNode, PinNode, Point, UnpinNode, ViewportTransform,
)
from foldergraph_core.services.membership import MembershipIndex
from foldergraph_core.services.registry import ClusterRegistry, build_clusters

from ...workers import ForceSimulationWorker, QtForceChannel
from .items import NodeItem, PuddleItem
from .style_manager import StyleManager

logger = logging.getLogger(__name__)


class FolderGraphCanvas(QGraphicsView):
    """
    Graph view with folder puddles.

    Signals:
        scale_changed: Emitted when the zoom target changes
        frame_rendered: Emitted after every tick with the number of pushes
    """

    scale_changed = pyqtSignal(float)
    frame_rendered = pyqtSignal(int)

    def __init__(self, parent=None, config: Optional[ClusterConfig] = None):
        super().__init__(parent)

        self._style = StyleManager()
        self._config = config or ClusterConfig()

        # Scene coordinates are screen pixels, the camera is applied by hand
        self._scene = QGraphicsScene(self)
        self._scene.setBackgroundBrush(QBrush(self._style.style.bg_color))
        self.setScene(self._scene)

        # Camera
        self._camera = Camera()
        self._camera_centered = False
        self._frame_mouse = (0.0, 0.0)
        self._transform = ViewportTransform.identity()

        # Zoom settings
        self._min_zoom = 0.05
        self._max_zoom = 20.0
        self._zoom_factor = 1.25
        self._key_pan_speed = 0.3

        # Session
        self._nodes: List[GraphNode] = []
        self._node_items: Dict[str, NodeItem] = {}
        self._puddle_items: Dict[str, PuddleItem] = {}
        self._registry: Optional[ClusterRegistry] = None
        self._channel: Optional[QtForceChannel] = None
        self._worker: Optional[ForceSimulationWorker] = None
        self._latest_positions: Dict[str, Tuple[float, float]] = {}

        # Interaction state
        self._drag_node_id: Optional[str] = None
        self._pan_start: Optional[QPointF] = None
        self._redraw_requested = False

        # Frame tick
        self._timer = QTimer(self)
        self._timer.setInterval(self._style.style.frame_interval_ms)
        self._timer.timeout.connect(self._on_frame)

        self._setup_view()

    def _setup_view(self):
        """Configure the QGraphicsView."""
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.SmartViewportUpdate)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(400, 300)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def style_manager(self) -> StyleManager:
        return self._style

    @property
    def registry(self) -> Optional[ClusterRegistry]:
        return self._registry

    @property
    def nodes(self) -> List[GraphNode]:
        return self._nodes

    @property
    def viewport_transform(self) -> ViewportTransform:
        return self._transform

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def load_graph(
        self,
        node_ids: Sequence[str],
        links: Sequence[Tuple[str, str]],
        membership: MembershipIndex,
    ):
        """
        Start a new graph session.

        Args:
            node_ids: One node per file
            links: Linked node pairs for the simulation
            membership: File -> folder lookup used to build the puddles
        """
        self.close_session()

        self._nodes = [GraphNode(node_id) for node_id in node_ids]
        for node in self._nodes:
            item = NodeItem(node.node_id, self._style)
            self._scene.addItem(item)
            self._node_items[node.node_id] = item

        self._channel = QtForceChannel(self)
        self._worker = ForceSimulationWorker(node_ids, links, self._style.style.frame_interval_ms)
        self._channel.signals.force_message.connect(self._worker.post_message)
        self._channel.signals.redraw_requested.connect(self._on_redraw_requested)
        self._worker.positions_ready.connect(self._on_positions_ready)

        # Start from the worker's initial layout so the first frame has geometry
        self._latest_positions = self._worker.positions()
        self._sync_positions()

        self._registry = build_clusters(self._nodes, membership, self._channel, self._config)
        for folder in self._registry.folders:
            item = PuddleItem(folder, self._style)
            self._scene.addItem(item)
            self._puddle_items[folder] = item

        logger.info("Graph session: %d nodes, %d links, %d folders",
                    len(self._nodes), len(links), len(self._registry))

        self._worker.start()
        self._timer.start()

    def close_session(self):
        """Tear down the current session, releasing every forced node."""
        self._timer.stop()

        if self._registry is not None:
            self._registry.teardown()
        if self._channel is not None:
            self._channel.close()
        if self._worker is not None:
            self._worker.stop()
            self._worker.wait()

        for item in list(self._node_items.values()) + list(self._puddle_items.values()):
            self._scene.removeItem(item)

        self._nodes = []
        self._node_items.clear()
        self._puddle_items.clear()
        self._registry = None
        self._channel = None
        self._worker = None
        self._latest_positions = {}
        self._drag_node_id = None

    def _on_positions_ready(self, positions: dict):
        self._latest_positions = positions

    def _on_redraw_requested(self):
        self._redraw_requested = True

    # -------------------------------------------------------------------------
    # Frame
    # -------------------------------------------------------------------------

    def _sync_positions(self):
        """Copy simulation positions into the local nodes."""
        for node in self._nodes:
            if node.node_id == self._drag_node_id:
                continue
            xy = self._latest_positions.get(node.node_id)
            if xy is not None:
                node.x, node.y = xy

    def _on_frame(self):
        """Render callback: sync, forces, geometry, draw."""
        self._frame_mouse = (self._camera.mouse_x, self._camera.mouse_y)
        self._sync_positions()

        pushes = 0
        if self._registry is not None:
            pushes = self._registry.tick(self._drag_node_id)

        self._transform = self._camera.advance(*self._frame_mouse)
        self._draw()

        if self._redraw_requested:
            self._redraw_requested = False
            self.viewport().update()

        self.frame_rendered.emit(pushes)

    def _draw(self):
        """Place node items and refresh puddles for the current transform."""
        forced = set()
        if self._registry is not None:
            for cluster in self._registry:
                forced.update(cluster.forced_nodes)
            for enclosure in self._registry.enclosures():
                item = self._puddle_items.get(enclosure.folder)
                if item is not None:
                    item.set_enclosure(enclosure)
                    item.map_to_viewport(self._transform)

        for node in self._nodes:
            item = self._node_items[node.node_id]
            p = self._transform.map_point(node.position)
            item.setPos(p.x, p.y)
            item.forced = node.node_id in forced
            item.dragged = node.node_id == self._drag_node_id

    # -------------------------------------------------------------------------
    # Zoom and Pan
    # -------------------------------------------------------------------------

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._scene.setSceneRect(0, 0, self.viewport().width(), self.viewport().height())
        if not self._camera_centered:
            self._camera.pan_x = self.viewport().width() / 2
            self._camera.pan_y = self.viewport().height() / 2
            self._camera_centered = True

    def _scene_pos(self, event) -> QPointF:
        return self.mapToScene(event.position().toPoint())

    def wheelEvent(self, event: QWheelEvent):
        """Zoom around the mouse pointer."""
        delta = event.angleDelta().y()
        if delta == 0:
            return

        factor = self._zoom_factor if delta > 0 else 1 / self._zoom_factor
        camera = self._camera
        new_scale = camera.target_scale * factor
        if new_scale < self._min_zoom or new_scale > self._max_zoom:
            return

        # Keep the graph point under the mouse in place
        mouse = self._scene_pos(event)
        anchor = ViewportTransform(camera.pan_x, camera.pan_y, camera.target_scale).unmap_point(
            Point(mouse.x(), mouse.y()))
        camera.target_scale = new_scale
        camera.pan_x = mouse.x() - anchor.x * new_scale
        camera.pan_y = mouse.y() - anchor.y * new_scale

        self.scale_changed.emit(new_scale)

    def keyPressEvent(self, event: QKeyEvent):
        """Arrow keys pan the camera."""
        key = event.key()
        if key == Qt.Key.Key_Left:
            self._camera.pan_vx = self._key_pan_speed
        elif key == Qt.Key.Key_Right:
            self._camera.pan_vx = -self._key_pan_speed
        elif key == Qt.Key.Key_Up:
            self._camera.pan_vy = self._key_pan_speed
        elif key == Qt.Key.Key_Down:
            self._camera.pan_vy = -self._key_pan_speed
        else:
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        key = event.key()
        if key in (Qt.Key.Key_Left, Qt.Key.Key_Right):
            self._camera.pan_vx = 0.0
        elif key in (Qt.Key.Key_Up, Qt.Key.Key_Down):
            self._camera.pan_vy = 0.0
        else:
            super().keyReleaseEvent(event)

    # -------------------------------------------------------------------------
    # Mouse
    # -------------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent):
        """Start dragging a node, or panning on empty space."""
        if event.button() == Qt.MouseButton.LeftButton:
            item = self.itemAt(event.position().toPoint())
            if isinstance(item, NodeItem):
                self._drag_node_id = item.node_id
            else:
                self._pan_start = self._scene_pos(event)
                self._camera.panning = True
                self.setCursor(Qt.CursorShape.ClosedHandCursor)

        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        pos = self._scene_pos(event)
        self._camera.mouse_x = pos.x()
        self._camera.mouse_y = pos.y()

        if self._drag_node_id is not None:
            node = self._find_node(self._drag_node_id)
            if node is not None and self._channel is not None:
                node.move_to(self._transform.unmap_point(Point(pos.x(), pos.y())))
                self._channel.send(PinNode(node.node_id, node.x, node.y))
        elif self._pan_start is not None:
            delta = pos - self._pan_start
            self._pan_start = pos
            self._camera.pan_x += delta.x()
            self._camera.pan_y += delta.y()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Drop the dragged node back into the simulation."""
        if event.button() == Qt.MouseButton.LeftButton:
            if self._drag_node_id is not None and self._channel is not None:
                self._channel.send(UnpinNode(self._drag_node_id))
            self._drag_node_id = None
            self._pan_start = None
            self._camera.panning = False
            self.setCursor(Qt.CursorShape.ArrowCursor)

        super().mouseReleaseEvent(event)

    def _find_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self._nodes:
            if node.node_id == node_id:
                return node
        return None
