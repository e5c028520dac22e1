"""Grid adjacency graph and A*-style path search for mobs."""

from __future__ import annotations

import itertools
import math
import random
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

from hexcrawl.utils import Timer, TimerMode

PATH_COEFFICIENT = 100
_UNVISITED_COST = 255
_FAR_AWAY = 2**32 - 1

Position = tuple[float, float]
Cell = tuple[int, int]


class TileType(Enum):
    FLOOR = "floor"
    WALL = "wall"


@dataclass(frozen=True)
class Node:
    tile_type: TileType
    position: Position


def distance(first: Position, second: Position) -> int:
    """Smaller of truncated Manhattan and truncated Euclidean distance."""
    dx = abs(second[0] - first[0])
    dy = abs(second[1] - first[1])
    return min(int(dx) + int(dy), int(math.hypot(dx, dy)))


@dataclass
class Graph:
    """Adjacency list of floor cells; each list starts with the cell's own node."""

    tile_size: float
    adjacency: dict[Cell, list[Node]] = field(default_factory=dict)

    @classmethod
    def from_grid(cls, grid, tile_size: float) -> Graph:
        """Build the graph from a grid of tile types, skipping the border.

        A neighbour is left out when it is not floor, or when it lies on a
        side of the cell that is closed by an orthogonal wall, so mobs never
        cut diagonally past wall corners.
        """
        graph = cls(float(tile_size))
        rows = [list(row) for row in grid]
        for i in range(1, len(rows) - 1):
            for j in range(1, len(rows[i]) - 1):
                if rows[i][j] != TileType.FLOOR:
                    continue
                blocked_rows = {
                    di for di, ni in ((-1, i - 1), (1, i + 1)) if rows[ni][j] == TileType.WALL
                }
                blocked_cols = {
                    dj for dj, nj in ((-1, j - 1), (1, j + 1)) if rows[i][nj] == TileType.WALL
                }
                nodes = [graph._node(i, j)]
                for di, dj in itertools.product((-1, 0, 1), repeat=2):
                    if (di, dj) == (0, 0) or di in blocked_rows or dj in blocked_cols:
                        continue
                    if rows[i + di][j + dj] == TileType.FLOOR:
                        nodes.append(graph._node(i + di, j + dj))
                graph.adjacency[(i, j)] = nodes
        return graph

    def _node(self, i: int, j: int) -> Node:
        return Node(TileType.FLOOR, (i * self.tile_size, j * self.tile_size))

    def nearest_cell(self, position: Position) -> Cell:
        """The graph cell whose corner lies closest to ``position``."""
        if not self.adjacency:
            raise LookupError("graph has no cells")
        best: Cell = (0, 0)
        best_range = _FAR_AWAY
        for cell in self.adjacency:
            corner = (
                math.floor(cell[0] * self.tile_size),
                math.floor(cell[1] * self.tile_size),
            )
            current = distance(position, corner)
            if best_range > current:
                best_range = current
                best = cell
            if best_range <= 2:
                return best
        return best

    def node_at(self, position: Position) -> Node:
        """The node an object at ``position`` stands on."""
        nodes = self.adjacency[self.nearest_cell(position)]
        for node in nodes:
            if node.position == (position[0], position[1]):
                return node
        return nodes[0]

    def neighbours(self, position: Position) -> list[Node]:
        """Nodes reachable from the cell nearest ``position``, that cell included."""
        return list(self.adjacency[self.nearest_cell(position)])


def _pick_node(candidates, goal: Node, costs, cell_of) -> Node:
    best = Node(TileType.FLOOR, (0.0, 0.0))
    min_cost = math.inf
    for node in candidates:
        total = PATH_COEFFICIENT * costs[cell_of(node.position)] + distance(
            node.position, goal.position
        )
        if min_cost > total:
            min_cost = total
            best = node
    return best


def find_path(graph: Graph, start: Position, goal: Position) -> list[Cell] | None:
    """Cells to walk from ``start`` to ``goal``, excluding the start cell.

    Returns None when the goal cannot be reached.
    """
    tile = graph.tile_size

    def cell_of(position: Position) -> Cell:
        return (max(0, int(position[0] / tile)), max(0, int(position[1] / tile)))

    def key_of(node: Node) -> tuple[int, int]:
        return (max(0, int(node.position[0])), max(0, int(node.position[1])))

    start_node = Node(TileType.FLOOR, (float(math.floor(start[0])), float(math.floor(start[1]))))
    goal_node = graph.node_at((math.floor(goal[0]), math.floor(goal[1])))

    costs: defaultdict[Cell, int] = defaultdict(lambda: _UNVISITED_COST)
    paths: defaultdict[Cell, list[Cell]] = defaultdict(list)
    costs[cell_of(start_node.position)] = 0

    reachable: dict[tuple[int, int], Node] = {key_of(start_node): start_node}
    explored: set[tuple[int, int]] = set()

    while reachable:
        node = _pick_node(reachable.values(), goal_node, costs, cell_of)
        node_cell = cell_of(node.position)

        if node == goal_node:
            return (paths[node_cell] + [node_cell])[1:]

        node_key = key_of(node)
        del reachable[node_key]
        explored.add(node_key)

        for adjacent in graph.neighbours(node.position):
            adjacent_key = key_of(adjacent)
            if adjacent_key in explored:
                continue
            reachable.setdefault(adjacent_key, adjacent)
            adjacent_cell = cell_of(adjacent.position)
            if costs[node_cell] + 1 < costs[adjacent_cell]:
                paths[adjacent_cell] = paths[node_cell] + [node_cell]
                costs[adjacent_cell] = costs[node_cell] + 1
    return None


class Pathfinder:
    """A mob's current path, its recalculation timer and walking speed."""

    def __init__(self, rng: random.Random | None = None) -> None:
        source = rng if rng is not None else random
        self.path: list[Cell] = []
        self.update_path_timer = Timer(source.randrange(500, 999) / 1000, TimerMode.REPEATING)
        self.speed = 2000.0


def select_target(pathfinder_id, origin, targets):
    """Choose the closest target to ``origin``, skipping the pathfinder itself.

    ``targets`` holds ``(id, position)`` pairs. Returns the chosen pair, or
    None when the pathfinder is the only target. Raises LookupError when
    there are no targets at all.
    """
    ranked = sorted(targets, key=lambda target: math.dist(target[1], origin))
    if not ranked:
        raise LookupError("no targets to chase")
    if ranked[0][0] == pathfinder_id:
        if len(ranked) < 2:
            return None
        return ranked[1]
    return ranked[0]