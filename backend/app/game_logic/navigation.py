# backend/app/game_logic/navigation.py
import random
from collections import deque
from typing import Dict, Iterable, List, NamedTuple, Optional

from app.schemas.game import GameState

CAVE_ROOM_COUNT = 30
HIDDEN_CHAMBER = 31
WIZARD_SANCTUM = 32


class PathResult(NamedTuple):
    distance: int
    next_room: Optional[int]


def find_shortest_path(start: int, target: int, connections: Dict[int, List[int]]) -> Optional[PathResult]:
    """
    Breadth-first search over the room graph.
    Returns the distance and the first room to step into, or None if unreachable.
    """
    if start == target:
        return PathResult(distance=0, next_room=None)

    visited = {start}
    queue = deque([(start, 0, None)])
    while queue:
        room, distance, first_step = queue.popleft()
        for neighbour in connections.get(room, []):
            if neighbour in visited:
                continue
            step = first_step if first_step is not None else neighbour
            if neighbour == target:
                return PathResult(distance=distance + 1, next_room=step)
            visited.add(neighbour)
            queue.append((neighbour, distance + 1, step))
    return None


def adjacent_rooms(state: GameState, room: Optional[int] = None) -> List[int]:
    return list(state.room_connections.get(state.current_position if room is None else room, []))


def is_danger_room(state: GameState, room: int) -> bool:
    return room in state.positions.danger_rooms()


def random_safe_room(state: GameState, exclude: Iterable[int] = ()) -> int:
    """A random cave room with no hazard in it, avoiding anything in `exclude`."""
    excluded = set(exclude) | set(state.positions.danger_rooms())
    candidates = [room for room in range(1, CAVE_ROOM_COUNT + 1) if room not in excluded]
    if not candidates:
        candidates = [room for room in range(1, CAVE_ROOM_COUNT + 1) if not is_danger_room(state, room)]
    return random.choice(candidates)


def connect_rooms(state: GameState, room_a: int, room_b: int):
    """Adds a two-way passage between two rooms."""
    state.room_connections.setdefault(room_a, [])
    state.room_connections.setdefault(room_b, [])
    if room_b not in state.room_connections[room_a]:
        state.room_connections[room_a].append(room_b)
    if room_a not in state.room_connections[room_b]:
        state.room_connections[room_b].append(room_a)
