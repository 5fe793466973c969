"""
Force simulation worker thread.

Stands in for the graph engine's physics: runs a small force-directed
simulation in the background and only talks to the UI through messages.
"""

import math
import queue
import random
from typing import Dict, List, Optional, Sequence, Tuple

from PyQt6.QtCore import QThread, pyqtSignal

from foldergraph_core.domain.enums import ForceAction
from foldergraph_core.domain.models import command_from_message


class ForceSimulationWorker(QThread):
    """
    Background thread running the node physics.

    Forces:
    1. Springs along links (keep linked notes together)
    2. Repulsion between all nodes (spread out)
    3. Weak pull towards the origin (keep the graph on screen)

    Pinned nodes stay where the last pin message put them until unpinned.

    Signals:
        positions_ready(dict): {node_id: (x, y)} after every step
    """

    positions_ready = pyqtSignal(dict)

    # Force parameters
    SPRING_LENGTH = 60.0
    SPRING_K = 0.05
    REPULSION = 2000.0
    CENTER_K = 0.002
    DAMPING = 0.6
    MAX_STEP = 10.0

    # Cooling
    ALPHA_DECAY = 0.995
    ALPHA_MIN = 0.01
    ALPHA_REHEAT = 0.3

    def __init__(
        self,
        node_ids: Sequence[str],
        links: Sequence[Tuple[str, str]] = (),
        interval_ms: int = 16,
        seed: Optional[int] = None,
    ):
        """
        Initialize the worker.

        Args:
            node_ids: Nodes to simulate
            links: Pairs of linked node ids
            interval_ms: Pause between steps
            seed: Random seed for the initial layout
        """
        super().__init__()
        rng = random.Random(seed)
        spread = 30.0 * math.sqrt(max(1, len(node_ids)))

        self._positions: Dict[str, List[float]] = {
            node_id: [rng.uniform(-spread, spread), rng.uniform(-spread, spread)]
            for node_id in node_ids
        }
        self._velocities: Dict[str, List[float]] = {node_id: [0.0, 0.0] for node_id in node_ids}
        self._links = [(a, b) for a, b in links if a in self._positions and b in self._positions]
        self._pinned: Dict[str, Tuple[float, float]] = {}

        self._inbox: "queue.SimpleQueue[dict]" = queue.SimpleQueue()
        self._interval_ms = interval_ms
        self._alpha = 1.0
        self._stopped = False

    # -------------------------------------------------------------------------
    # Messages (any thread)
    # -------------------------------------------------------------------------

    def post_message(self, message: dict):
        """Queue a force message. Safe to call from any thread."""
        self._inbox.put(message)

    def stop(self):
        """Ask the loop to exit after the current step."""
        self._stopped = True

    def positions(self) -> Dict[str, Tuple[float, float]]:
        return {node_id: (p[0], p[1]) for node_id, p in self._positions.items()}

    @property
    def pinned(self) -> Dict[str, Tuple[float, float]]:
        return dict(self._pinned)

    # -------------------------------------------------------------------------
    # Simulation (worker thread)
    # -------------------------------------------------------------------------

    def run(self):
        """Step until stopped."""
        while not self._stopped:
            self.process_messages()
            if self._alpha > self.ALPHA_MIN:
                self.step()
                self.positions_ready.emit(self.positions())
            self.msleep(self._interval_ms)

    def process_messages(self) -> int:
        """Apply every queued pin/unpin. Unknown node ids are ignored."""
        handled = 0
        while True:
            try:
                message = self._inbox.get_nowait()
            except queue.Empty:
                break

            command = command_from_message(message)
            if command is not None and command.node_id in self._positions:
                if command.action == ForceAction.PIN:
                    self._pinned[command.node_id] = (command.x, command.y)
                else:
                    self._pinned.pop(command.node_id, None)
                handled += 1

            if message.get("run"):
                self._alpha = max(self._alpha, self.ALPHA_REHEAT)

        return handled

    def step(self):
        """Advance the simulation by one iteration."""
        pos = self._positions
        forces: Dict[str, List[float]] = {node_id: [0.0, 0.0] for node_id in pos}

        # 1. Link springs
        for a, b in self._links:
            dx = pos[b][0] - pos[a][0]
            dy = pos[b][1] - pos[a][1]
            dist = max(1.0, math.sqrt(dx * dx + dy * dy))
            force = self.SPRING_K * (dist - self.SPRING_LENGTH)
            fx = force * dx / dist
            fy = force * dy / dist
            forces[a][0] += fx
            forces[a][1] += fy
            forces[b][0] -= fx
            forces[b][1] -= fy

        # 2. Repulsion between every pair
        ids = list(pos)
        for i, a in enumerate(ids):
            for b in ids[i + 1:]:
                dx = pos[b][0] - pos[a][0]
                dy = pos[b][1] - pos[a][1]
                dist = max(1.0, math.sqrt(dx * dx + dy * dy))
                force = self.REPULSION / (dist * dist)
                fx = force * dx / dist
                fy = force * dy / dist
                forces[a][0] -= fx
                forces[a][1] -= fy
                forces[b][0] += fx
                forces[b][1] += fy

        # 3. Centering
        for node_id, p in pos.items():
            forces[node_id][0] -= self.CENTER_K * p[0]
            forces[node_id][1] -= self.CENTER_K * p[1]

        max_step = self.MAX_STEP * self._alpha
        for node_id, (fx, fy) in forces.items():
            if node_id in self._pinned:
                pos[node_id][0], pos[node_id][1] = self._pinned[node_id]
                self._velocities[node_id] = [0.0, 0.0]
                continue

            v = self._velocities[node_id]
            v[0] = (v[0] + fx) * self.DAMPING
            v[1] = (v[1] + fy) * self.DAMPING

            # Limit movement per step
            mag = math.sqrt(v[0] * v[0] + v[1] * v[1])
            if mag > max_step:
                v[0] = v[0] / mag * max_step
                v[1] = v[1] / mag * max_step

            pos[node_id][0] += v[0]
            pos[node_id][1] += v[1]

        self._alpha *= self.ALPHA_DECAY
