"""Tests for the Player module."""

import pytest

from light_cycles.config import MOVE_THRESHOLD
from light_cycles.player import Direction, Player, PlayerRole, initial_trail


def _moved_player(direction: Direction = Direction.RIGHT) -> Player:
    player = Player(PlayerRole.ONE, [(10, 10), (9, 10), (8, 10)], direction)
    player.has_moved_since_direction_change = True
    return player


class TestDirection:
    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involution(self, direction):
        assert direction.opposite().opposite() == direction
        assert direction.opposite() != direction

    def test_opposite_pairs(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.DOWN.opposite() == Direction.UP
        assert Direction.LEFT.opposite() == Direction.RIGHT
        assert Direction.RIGHT.opposite() == Direction.LEFT


class TestPlayerInit:
    def test_player_one(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        assert list(player.trail) == [(4, 3), (3, 3), (2, 3)]
        assert player.head == (4, 3)
        assert player.direction == Direction.RIGHT
        assert player.pending_direction is None
        assert not player.has_moved_since_direction_change
        assert player.time_waited == 0.0
        assert player.color == "red"

    def test_player_two(self):
        player = Player.initial(PlayerRole.TWO, 35, 25)
        assert list(player.trail) == [(31, 20), (31, 21), (31, 22)]
        assert player.direction == Direction.UP
        assert not player.has_moved_since_direction_change
        assert player.time_waited == MOVE_THRESHOLD / 2
        assert player.color == "blue"

    def test_player_two_custom_threshold(self):
        player = Player.initial(PlayerRole.TWO, 35, 25, move_threshold=0.5)
        assert player.time_waited == 0.25

    def test_initial_trail_matches_player(self):
        player = Player.initial(PlayerRole.TWO, 30, 30)
        assert list(player.trail) == initial_trail(PlayerRole.TWO, 30, 30)

    def test_empty_trail_rejected(self):
        with pytest.raises(ValueError, match="at least the head"):
            Player(PlayerRole.ONE, [], Direction.UP)

    def test_role_other(self):
        assert PlayerRole.ONE.other is PlayerRole.TWO
        assert PlayerRole.TWO.other is PlayerRole.ONE


class TestPlayerMovement:
    def test_next_head_position(self):
        player = Player.initial(PlayerRole.TWO, 30, 30)
        assert player.next_head_position() == (26, 24)

    def test_next_head_does_not_mutate(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.next_head_position()
        assert len(player.trail) == 3

    def test_position_after(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        assert player.position_after(Direction.UP) == (4, 2)
        assert player.position_after(Direction.DOWN) == (4, 4)

    def test_advance_grows_trail(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.advance(player.next_head_position())
        assert len(player.trail) == 4
        assert player.head == (5, 3)
        assert player.occupies((5, 3))
        assert player.occupies((2, 3))
        assert player.has_moved_since_direction_change

    def test_advance_promotes_pending_direction(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.request_direction_change(Direction.DOWN)
        assert player.direction == Direction.RIGHT

        player.advance(player.next_head_position())
        assert player.direction == Direction.DOWN
        assert player.pending_direction is None
        assert player.has_moved_since_direction_change
        assert player.next_head_position() == (5, 4)


class TestDirectionRequests:
    @pytest.mark.parametrize("direction", list(Direction))
    @pytest.mark.parametrize("moved", [True, False])
    def test_rejected_requests(self, direction, moved):
        player = Player(PlayerRole.ONE, [(10, 10)], direction)
        player.has_moved_since_direction_change = moved
        for request in (None, direction, direction.opposite()):
            player.request_direction_change(request)
            assert player.direction == direction
            assert player.pending_direction is None
            assert player.has_moved_since_direction_change is moved

    def test_applies_immediately_after_move(self):
        player = _moved_player(Direction.RIGHT)
        player.request_direction_change(Direction.UP)
        assert player.direction == Direction.UP
        assert player.pending_direction is None
        assert not player.has_moved_since_direction_change

    def test_queues_before_first_move(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.request_direction_change(Direction.UP)
        assert player.direction == Direction.RIGHT
        assert player.pending_direction == Direction.UP

    def test_first_queued_request_wins(self):
        player = _moved_player(Direction.RIGHT)
        player.request_direction_change(Direction.UP)
        player.request_direction_change(Direction.LEFT)
        assert player.pending_direction == Direction.LEFT

        player.request_direction_change(Direction.RIGHT)
        assert player.direction == Direction.UP
        assert player.pending_direction == Direction.LEFT

        player.advance(player.next_head_position())
        assert player.head == (10, 9)
        assert player.direction == Direction.LEFT

    def test_second_turn_applies_after_move(self):
        player = _moved_player(Direction.RIGHT)
        player.request_direction_change(Direction.UP)
        player.advance(player.next_head_position())
        player.request_direction_change(Direction.LEFT)
        assert player.direction == Direction.LEFT
        assert player.pending_direction is None


class TestPlayerCollision:
    def test_occupies(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        assert player.occupies((2, 3))
        assert not player.occupies((10, 4))

    def test_fresh_player_not_self_colliding(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        assert not player.would_self_collide()

    def test_imminent_self_collision_on_loop(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.advance(player.next_head_position())
        player.request_direction_change(Direction.DOWN)
        player.advance(player.next_head_position())
        player.request_direction_change(Direction.LEFT)
        player.advance(player.next_head_position())
        player.request_direction_change(Direction.UP)
        assert player.head == (4, 4)
        assert player.next_head_position() == (4, 3)
        assert player.would_self_collide()


class TestPlayerTiming:
    def test_wait_accumulates(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.wait(0.03)
        player.wait(0.05)
        other = Player.initial(PlayerRole.ONE, 35, 25)
        other.wait(0.08)
        assert player.time_waited == pytest.approx(other.time_waited)

    def test_wait_negative(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.wait(0.15)
        player.wait(-MOVE_THRESHOLD)
        assert player.time_waited == pytest.approx(0.05)


class TestPlayerSerialization:
    def test_to_dict(self):
        player = Player.initial(PlayerRole.ONE, 35, 25)
        player.request_direction_change(Direction.UP)
        d = player.to_dict()
        assert d["role"] == "one"
        assert d["color"] == "red"
        assert d["direction"] == "right"
        assert d["pending_direction"] == "up"
        assert d["trail"] == [[4, 3], [3, 3], [2, 3]]
        assert d["time_waited"] == 0.0
