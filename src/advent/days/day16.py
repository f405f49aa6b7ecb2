"""Day 16: Reindeer Maze — cheapest routes through a maze with costly turns.

Each ``(tile, facing)`` pair is a node of a weighted directed graph:
stepping forward costs 1 and turning 90 degrees in place costs 1000.
Dijkstra from the start gives the best score; a second Dijkstra on the
reversed graph from the end tells, for every node, the cheapest way to
finish.  A tile lies on some best path exactly when, for one of its
facings, the two distances add up to the best score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import networkx as nx  # type: ignore[import-untyped]

from advent.util.coordinate import Cardinal, Coordinate
from advent.util.grid import Matrix
from advent.util.parsing import ParseError

logger = logging.getLogger(__name__)

TITLE = "Reindeer Maze"

WALL = "#"
START = "S"
END = "E"
SCORE_STEP = 1
SCORE_TURN = 1000

_SINK = "end"

Node = tuple[Coordinate, Cardinal]


@dataclass
class Maze:
    open: Matrix
    """True where the reindeer may walk."""
    start: Coordinate
    end: Coordinate
    facing: Cardinal = Cardinal.EAST

    def graph(self) -> nx.DiGraph:
        graph = nx.DiGraph()
        for coord in self.open.coords():
            if not self.open[coord]:
                continue
            for facing in Cardinal:
                node = (coord, facing)
                graph.add_edge(node, (coord, facing.clockwise()), weight=SCORE_TURN)
                graph.add_edge(node, (coord, facing.counter_clockwise()), weight=SCORE_TURN)
                ahead = coord.step(facing)
                if self.open.get(ahead, False):
                    graph.add_edge(node, (ahead, facing), weight=SCORE_STEP)
        for facing in Cardinal:
            graph.add_edge((self.end, facing), _SINK, weight=0)
        return graph


def parse_input(text: str) -> Maze:
    grid = Matrix.from_text(text)
    starts, ends = grid.find(START), grid.find(END)
    if len(starts) != 1 or len(ends) != 1:
        raise ParseError("the maze needs exactly one S and one E")
    stray = set(grid.data.ravel().tolist()) - {WALL, ".", START, END}
    if stray:
        raise ParseError(f"unexpected maze characters {sorted(stray)}")
    return Maze(open=Matrix(grid.data != WALL), start=starts[0], end=ends[0])


def _distances(maze: Maze) -> tuple[dict, dict, int]:
    graph = maze.graph()
    source: Node = (maze.start, maze.facing)
    from_start = nx.single_source_dijkstra_path_length(graph, source)
    if _SINK not in from_start:
        raise ValueError("the end of the maze cannot be reached")
    to_end = nx.single_source_dijkstra_path_length(graph.reverse(copy=False), _SINK)
    return from_start, to_end, from_start[_SINK]


def part_1(maze: Maze) -> int:
    """Lowest possible score from S to E."""
    _, _, best = _distances(maze)
    return best


def part_2(maze: Maze) -> int:
    """Tiles that lie on at least one lowest-score path."""
    from_start, to_end, best = _distances(maze)
    tiles = {
        node[0]
        for node, cost in from_start.items()
        if node != _SINK and cost + to_end.get(node, best + 1) == best
    }
    logger.debug("%d tiles on best paths scoring %d.", len(tiles), best)
    return len(tiles)
