"""Generic step-wise A* search.

:class:`AStarSearch` works over any state type implementing the
:class:`~grid_astar.search.state.SearchState` capabilities. Progress is
driven one expansion at a time through :meth:`AStarSearch.search_step`, so
callers can either drain the search synchronously or interleave it with
other work and cancel between steps.

Open list ordering is ``(f, h, seq)``: lowest ``f`` first, ties broken by
lowest ``h`` (the node closest to the goal, i.e. the deepest ``g``), then by
insertion order. ``seq`` grows monotonically for every push, so results are
deterministic for a given state space.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from heapq import heappop, heappush
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from .state import SearchState

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SearchState)

DEFAULT_MAX_NODES = 10000

_NO_NODE = -1


class SearchStatus(Enum):
    """Lifecycle of a search."""

    NOT_INITIALISED = "not_initialised"
    SEARCHING = "searching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    OUT_OF_MEMORY = "out_of_memory"

    @property
    def finished(self) -> bool:
        return self in (
            SearchStatus.SUCCEEDED,
            SearchStatus.FAILED,
            SearchStatus.OUT_OF_MEMORY,
        )


@dataclass
class _Node(Generic[T]):
    """Arena record. ``parent``/``child`` are indices into the arena."""

    state: T
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    parent: int = _NO_NODE
    child: int = _NO_NODE
    # Sequence number of the node's live heap entry; older entries are stale.
    heap_seq: int = -1
    closed: bool = False


class _StateKey:
    """Dict key comparing states with ``is_same_state``."""

    __slots__ = ("state", "_hash")

    def __init__(self, state: Any) -> None:
        self.state = state
        self._hash = hash(state)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _StateKey):
            return NotImplemented
        return self._hash == other._hash and self.state.is_same_state(other.state)


class AStarSearch(Generic[T]):
    """Best-first search over states of type ``T``.

    Nodes live in a flat arena and refer to their parent by index, so
    releasing a search is a single ``clear()``. At most ``max_nodes`` nodes
    are allocated per search; exceeding that ends the search with
    :attr:`SearchStatus.OUT_OF_MEMORY`.
    """

    def __init__(self, max_nodes: int = DEFAULT_MAX_NODES) -> None:
        if max_nodes < 1:
            raise ValueError("max_nodes must be at least 1")
        self.max_nodes = max_nodes

        self._nodes: List[_Node[T]] = []
        self._heap: List[Tuple[float, float, int, int]] = []
        self._open: Dict[_StateKey, int] = {}
        self._closed: Dict[_StateKey, int] = {}

        self._status = SearchStatus.NOT_INITIALISED
        self._goal: Optional[T] = None
        self._start_index = _NO_NODE
        self._goal_index = _NO_NODE
        self._cursor = _NO_NODE
        self._seq = 0
        self._steps = 0
        self._expanded = 0
        self._cancel_requested = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def status(self) -> SearchStatus:
        return self._status

    def set_start_and_goal_states(self, start: T, goal: T) -> None:
        """Reset the search and seed the open list with ``start``."""

        self._reset()
        self._goal = goal

        h = start.goal_distance_estimate(goal)
        self._start_index = self._allocate(start, g=0.0, h=h, parent=_NO_NODE)
        self._push_open(self._start_index)
        self._status = SearchStatus.SEARCHING

    def cancel_search(self) -> None:
        """Request that the next :meth:`search_step` stop with ``FAILED``."""

        self._cancel_requested = True

    def free_solution_nodes(self) -> None:
        """Release every node owned by the search."""

        self._reset()

    def ensure_memory_freed(self) -> None:
        if self._nodes or self._heap:
            self._reset()

    def _reset(self) -> None:
        self._nodes.clear()
        self._heap.clear()
        self._open.clear()
        self._closed.clear()
        self._status = SearchStatus.NOT_INITIALISED
        self._goal = None
        self._start_index = _NO_NODE
        self._goal_index = _NO_NODE
        self._cursor = _NO_NODE
        self._seq = 0
        self._steps = 0
        self._expanded = 0
        self._cancel_requested = False

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------
    def search_step(self) -> SearchStatus:
        """Expand one node and return the resulting status.

        Terminal and uninitialised searches return their status unchanged.
        """

        if self._status is not SearchStatus.SEARCHING:
            return self._status

        if self._cancel_requested:
            logger.debug("Search cancelled after %d steps", self._steps)
            self._release_nodes()
            self._status = SearchStatus.FAILED
            return self._status

        self._steps += 1

        if not self._open:
            logger.debug("Open list exhausted after %d steps", self._steps)
            self._status = SearchStatus.FAILED
            return self._status

        index = self._pop_open()
        node = self._nodes[index]

        if node.state.is_goal(self._goal):
            self._goal_index = index
            self._link_solution()
            self._status = SearchStatus.SUCCEEDED
            logger.debug(
                "Goal reached at step %d with cost %.1f", self._steps, node.g
            )
            return self._status

        node.closed = True
        self._closed[_StateKey(node.state)] = index
        self._expanded += 1

        parent_state = (
            self._nodes[node.parent].state if node.parent != _NO_NODE else None
        )
        successors = node.state.get_successors(parent_state)
        if not successors:
            return self._status

        for succ in successors:
            g_new = node.g + node.state.get_cost(succ)
            key = _StateKey(succ)

            closed_index = self._closed.get(key)
            if closed_index is not None and self._nodes[closed_index].g <= g_new:
                continue

            open_index = self._open.get(key)
            if open_index is not None and self._nodes[open_index].g <= g_new:
                continue

            h = succ.goal_distance_estimate(self._goal)
            existing = open_index if open_index is not None else closed_index
            if existing is not None:
                # Better route to a known state: rewire it and re-queue.
                if closed_index is not None:
                    del self._closed[key]
                    self._nodes[closed_index].closed = False
                self._update(existing, g=g_new, h=h, parent=index)
                self._push_open(existing)
                continue

            if len(self._nodes) >= self.max_nodes:
                logger.debug(
                    "Node budget of %d exhausted at step %d",
                    self.max_nodes,
                    self._steps,
                )
                self._status = SearchStatus.OUT_OF_MEMORY
                return self._status

            child = self._allocate(succ, g=g_new, h=h, parent=index)
            self._push_open(child)

        return self._status

    # ------------------------------------------------------------------
    # Solution access
    # ------------------------------------------------------------------
    def get_solution_start(self) -> Optional[T]:
        """Position the solution cursor at the start and return its state."""

        if self._status is not SearchStatus.SUCCEEDED:
            return None
        self._cursor = self._start_index
        return self._nodes[self._cursor].state

    def get_solution_next(self) -> Optional[T]:
        if self._cursor == _NO_NODE:
            return None
        nxt = self._nodes[self._cursor].child
        if nxt == _NO_NODE:
            return None
        self._cursor = nxt
        return self._nodes[nxt].state

    def get_solution_end(self) -> Optional[T]:
        """Position the solution cursor at the goal and return its state."""

        if self._status is not SearchStatus.SUCCEEDED:
            return None
        self._cursor = self._goal_index
        return self._nodes[self._cursor].state

    def get_solution_prev(self) -> Optional[T]:
        if self._cursor == _NO_NODE:
            return None
        prev = self._nodes[self._cursor].parent
        if prev == _NO_NODE:
            return None
        self._cursor = prev
        return self._nodes[prev].state

    def solution_path(self) -> List[T]:
        """Return the solution states from start to goal, or ``[]``."""

        if self._status is not SearchStatus.SUCCEEDED:
            return []
        path: List[T] = []
        index = self._start_index
        while index != _NO_NODE:
            path.append(self._nodes[index].state)
            index = self._nodes[index].child
        return path

    def get_solution_cost(self) -> float:
        if self._status is not SearchStatus.SUCCEEDED:
            return 0.0
        return self._nodes[self._goal_index].g

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def get_step_count(self) -> int:
        return self._steps

    @property
    def expanded_count(self) -> int:
        """Number of nodes moved to the closed list."""
        return self._expanded

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def open_list_states(self) -> List[T]:
        return [self._nodes[i].state for i in self._open.values()]

    def closed_list_states(self) -> List[T]:
        return [self._nodes[i].state for i in self._closed.values()]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _allocate(self, state: T, *, g: float, h: float, parent: int) -> int:
        self._nodes.append(_Node(state=state, g=g, h=h, f=g + h, parent=parent))
        return len(self._nodes) - 1

    def _update(self, index: int, *, g: float, h: float, parent: int) -> None:
        node = self._nodes[index]
        node.g = g
        node.h = h
        node.f = g + h
        node.parent = parent

    def _push_open(self, index: int) -> None:
        node = self._nodes[index]
        self._seq += 1
        node.heap_seq = self._seq
        self._open[_StateKey(node.state)] = index
        heappush(self._heap, (node.f, node.h, self._seq, index))

    def _pop_open(self) -> int:
        while True:
            _, _, seq, index = heappop(self._heap)
            node = self._nodes[index]
            if node.closed or node.heap_seq != seq:
                continue
            del self._open[_StateKey(node.state)]
            return index

    def _link_solution(self) -> None:
        """Set ``child`` links along the goal's parent chain."""

        index = self._goal_index
        while True:
            parent = self._nodes[index].parent
            if parent == _NO_NODE:
                break
            self._nodes[parent].child = index
            index = parent

    def _release_nodes(self) -> None:
        self._nodes.clear()
        self._heap.clear()
        self._open.clear()
        self._closed.clear()
        self._start_index = _NO_NODE
        self._goal_index = _NO_NODE
        self._cursor = _NO_NODE


__all__ = ["AStarSearch", "SearchStatus", "DEFAULT_MAX_NODES"]
