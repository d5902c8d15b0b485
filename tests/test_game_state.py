import pytest

from delve.config import FovSettings, MapSettings, Settings
from delve.engine import GameEvent, GameState
from delve.errors import DegenerateGenerationError
from delve.input import InputAction
from delve.map import Position


def one_room_state(scripted_rng, radius=4, **fov):
    # single room Rect(5, 5, 11, 11): interior 6..10, start (8, 8)
    settings = Settings(
        seed=1,
        map=MapSettings(width=30, height=20, max_rooms=1, room_min_size=6, room_max_size=6),
        fov=FovSettings(radius=radius, **fov),
    )
    return GameState(settings, rng=scripted_rng(ints=[6, 6, 5, 5]))


def test_initial_state_sees_start(scripted_rng):
    state = one_room_state(scripted_rng)
    assert state.player == Position(8, 8)
    assert state.player_pos == (8, 8)
    assert state.fov_recomputations == 1
    assert state.is_visible(8, 8)
    assert state.grid.is_explored(8, 8)
    assert not state.is_visible(20, 8)


def test_visibility_recomputed_once_per_successful_move(scripted_rng):
    state = one_room_state(scripted_rng)
    events = []
    state.add_listener(lambda event, s: events.append(event))

    assert state.tick(InputAction.MOVE_UP).moved
    assert state.tick(InputAction.MOVE_UP).moved
    assert state.player == Position(8, 6)
    assert state.fov_recomputations == 3
    assert events == [
        GameEvent.PLAYER_MOVED,
        GameEvent.FOV_RECOMPUTED,
        GameEvent.PLAYER_MOVED,
        GameEvent.FOV_RECOMPUTED,
    ]

    # (8, 5) is the room's top wall
    result = state.tick(InputAction.MOVE_UP)
    assert result.moved is False
    assert result.position == Position(8, 6)
    assert state.fov_recomputations == 3
    assert len(events) == 4


def test_idle_tick_does_nothing(scripted_rng):
    state = one_room_state(scripted_rng)
    result = state.tick(None)
    assert result == (False, False, Position(8, 8))
    assert state.fov_recomputations == 1


def test_light_walls_setting_reaches_visibility(scripted_rng):
    lit = one_room_state(scripted_rng, light_walls=True)
    dark = one_room_state(scripted_rng, light_walls=False)
    for state in (lit, dark):
        state.tick(InputAction.MOVE_UP)
        state.tick(InputAction.MOVE_UP)
    assert lit.is_visible(8, 5)
    assert not dark.is_visible(8, 5)


def test_explored_only_grows_and_comes_from_visible_sets(scripted_rng):
    state = one_room_state(scripted_rng, radius=2)
    seen = set(state.visible)
    state.add_listener(
        lambda event, s: seen.update(s.visible) if event is GameEvent.FOV_RECOMPUTED else None
    )
    explored_before = set()
    script = [InputAction.MOVE_LEFT] * 3 + [InputAction.MOVE_DOWN] * 3 + [InputAction.MOVE_RIGHT] * 4
    for action in script:
        state.tick(action)
        explored = {c for c in state.grid.coords() if state.grid.is_explored(*c)}
        assert explored_before <= explored
        assert explored <= seen
        explored_before = explored


def test_exit_action(scripted_rng):
    state = one_room_state(scripted_rng)
    events = []
    state.add_listener(lambda event, s: events.append(event))
    result = state.tick(InputAction.EXIT)
    assert result.exit_requested
    assert state.exit_requested
    assert events == [GameEvent.EXIT_REQUESTED]


def test_seeded_state_is_reproducible():
    settings = Settings(seed=42)
    a, b = GameState(settings), GameState(settings)
    assert a.grid.signature() == b.grid.signature()
    assert a.player == b.player
    assert a.grid.is_passable(*a.player_pos)


def test_degenerate_map_is_allowed_unless_strict():
    lenient = GameState(Settings(seed=3, map=MapSettings(max_rooms=0)))
    assert lenient.layout.degenerate
    assert lenient.player == Position(0, 0)
    assert (0, 0) in lenient.visible

    with pytest.raises(DegenerateGenerationError):
        GameState(Settings(seed=3, map=MapSettings(max_rooms=0, strict=True)))


def test_failing_listener_does_not_break_tick(scripted_rng, caplog):
    state = one_room_state(scripted_rng)

    def boom(event, s):
        raise RuntimeError("renderer gone")

    state.add_listener(boom)
    assert state.tick(InputAction.MOVE_DOWN).moved
    assert state.fov_recomputations == 2
    assert "Listener errored" in caplog.text
