"""
Basic tests for the missy card game engine.
"""

import pytest
from missy_engine.constants import DECK_SIZE, JOKER_SUIT, SMALL_JOKER, BIG_JOKER
from missy_engine.engine import create_room, join_room, draw_card, disconnect_player
from missy_engine.errors import GameError, DUPLICATE_ROOM, NOT_YOUR_TURN, GAME_OVER, DECK_EMPTY
from missy_engine.models import Card
from missy_engine.registry import RoomRegistry
from missy_engine.shuffle import build_deck, create_deck, shuffle_deck, validate_deck_integrity


def card(rank: str, suit: str = '♠', card_id: str = None) -> Card:
    return Card(suit=suit, rank=rank, id=card_id or f"{rank}{suit}")


def room_with_players(*player_ids, deck=None):
    room = create_room("ROOM1", player_ids[0], seed=7)
    for player_id in player_ids:
        join_room(room, player_id)
    if deck is not None:
        room.deck = list(deck)
    return room


def test_deck_creation():
    """A fresh deck holds 54 unique cards with two jokers."""
    deck = create_deck()
    assert len(deck) == DECK_SIZE == 54
    assert len({c.id for c in deck}) == 54

    jokers = [c for c in deck if c.is_joker]
    assert len(jokers) == 2
    assert {c.rank for c in jokers} == {SMALL_JOKER, BIG_JOKER}


def test_card_colors():
    """Color follows the suit, or the joker itself."""
    for c in create_deck():
        if c.suit in ('♠', '♣'):
            assert c.color == 'black'
        elif c.suit in ('♥', '♦'):
            assert c.color == 'red'
        else:
            assert c.suit == JOKER_SUIT
            assert c.color == ('black' if c.rank == SMALL_JOKER else 'red')


def test_seeded_shuffle_is_deterministic():
    """Test deterministic shuffling with a seed."""
    deck = build_deck()
    original_ids = [c.id for c in deck]

    first = shuffle_deck(deck, seed=42)
    second = shuffle_deck(deck, seed=42)
    assert [c.id for c in first] == [c.id for c in second]
    assert sorted(c.id for c in first) == sorted(original_ids)
    assert [c.id for c in deck] == original_ids


def test_create_room():
    """Test room creation."""
    room = create_room("ABCDE", "host-id-1234")
    assert room.room_id == "ABCDE"
    assert room.host_id == "host-id-1234"
    assert room.players == []
    assert len(room.deck) == 54
    assert room.current_player_index == 0
    assert room.last_drawn_card is None
    assert room.game_log == ["游戏由 玩家host 创建。"]
    assert not room.is_game_over


def test_join_room():
    """Test player joining room."""
    room = create_room("ABCDE", "abcd1234")
    result = join_room(room, "abcd1234")

    assert result.success
    assert result.changed
    assert len(room.players) == 1
    assert room.players[0].name == "玩家abcd"
    assert room.players[0].hand == []


def test_join_room_is_idempotent():
    room = room_with_players("p1-aaaa", "p2-bbbb")
    before = [p.id for p in room.players]

    result = join_room(room, "p1-aaaa")
    assert result.success
    assert not result.changed
    assert [p.id for p in room.players] == before


def test_first_draw_scenario():
    """Creator draws first from a full deck, turn passes to the second player."""
    room = room_with_players("creator", "second")
    top = room.deck[-1]

    result = draw_card(room, "creator")

    assert result.success
    assert len(room.deck) == 53
    assert room.last_drawn_card == top
    assert room.current_player_index == 1
    assert not room.is_game_over
    assert validate_deck_integrity(room)


def test_draw_out_of_turn_is_ignored():
    room = room_with_players("p1", "p2")
    log_before = list(room.game_log)

    result = draw_card(room, "p2")

    assert not result.success
    assert result.error_code == NOT_YOUR_TURN
    assert len(room.deck) == 54
    assert room.game_log == log_before
    assert room.current_player_index == 0


def test_draw_by_non_member_is_ignored():
    room = room_with_players("p1")
    assert not draw_card(room, "stranger").success
    assert not draw_card(None, "p1").success


def test_holdable_cards_go_to_hand():
    room = room_with_players("p1", deck=[card('7'), card('8', '♥'), card(SMALL_JOKER, JOKER_SUIT)])

    for _ in range(3):
        assert draw_card(room, "p1").success

    hand = room.players[0].hand
    assert [c.rank for c in hand] == [SMALL_JOKER, '8', '7']
    assert room.game_log[1].endswith("卡牌已存入手牌。")


def test_big_joker_is_not_held():
    room = room_with_players("p1", deck=[card('5'), card(BIG_JOKER, JOKER_SUIT)])
    draw_card(room, "p1")
    assert room.players[0].hand == []
    assert room.roles.emperor is None


def test_king_sets_emperor_last_writer_wins():
    room = room_with_players("p1", "p2", deck=[card('A'), card('K', '♥'), card('K')])

    draw_card(room, "p1")
    assert room.roles.emperor == "p1"

    draw_card(room, "p2")
    assert room.roles.emperor == "p2"


def test_queen_and_jack_roles_added_once():
    deck = [card('5'), card('J', '♥'), card('Q', '♥'), card('J'), card('Q')]
    room = room_with_players("p1", deck=deck)

    for _ in range(4):
        draw_card(room, "p1")

    assert room.roles.missies == ["p1"]
    assert room.roles.servants == ["p1"]
    assert room.players[0].hand == []


def test_turn_round_robin():
    players = ["p0", "p1", "p2"]
    room = room_with_players(*players)

    for n in range(1, 8):
        current = room.players[room.current_player_index].id
        assert draw_card(room, current).success
        assert room.current_player_index == n % len(players)


def test_last_card_ends_game():
    room = room_with_players("p1", "p2", deck=[card('3')])

    result = draw_card(room, "p1")
    assert result.success
    assert room.deck == []
    assert room.is_game_over
    assert room.game_log[-1] == "牌堆已空！游戏结束。"

    snapshot = (list(room.deck), room.last_drawn_card, list(room.game_log))
    result = draw_card(room, "p2")
    assert not result.success
    assert result.error_code == GAME_OVER
    assert (room.deck, room.last_drawn_card, room.game_log) == snapshot
    assert room.is_game_over


def test_draw_from_empty_deck_is_noop():
    room = room_with_players("p1", "p2", deck=[])

    result = draw_card(room, "p1")
    assert not result.success
    assert result.error_code == DECK_EMPTY
    assert room.current_player_index == 0
    assert not room.is_game_over


def test_host_disconnect_passes_host():
    room = room_with_players("host", "p2", "p3")
    room.current_player_index = 2

    result = disconnect_player(room, "host")

    assert result.success
    assert not result.room_empty
    assert room.host_id == "p2"
    assert [p.id for p in room.players] == ["p2", "p3"]
    assert room.current_player_index == 0


def test_disconnect_keeps_index_in_bounds():
    room = room_with_players("p1", "p2", "p3")
    room.current_player_index = 1

    disconnect_player(room, "p1")
    # Index is kept, so the turn slides to whoever now sits at it
    assert room.current_player_index == 1
    assert room.current_player.id == "p3"
    assert room.host_id == "p2"

    disconnect_player(room, "p3")
    assert room.current_player_index == 0
    assert 0 <= room.current_player_index < len(room.players)


def test_last_player_disconnect_empties_room():
    room = room_with_players("p1")
    result = disconnect_player(room, "p1")
    assert result.success
    assert result.room_empty


def test_registry_lifecycle():
    registry = RoomRegistry()
    room = registry.create("ROOM1", "host")
    assert registry.get("ROOM1") is room
    assert "ROOM1" in registry
    assert len(registry) == 1

    with pytest.raises(GameError) as exc_info:
        registry.create("ROOM1", "other")
    assert exc_info.value.code == DUPLICATE_ROOM
    assert registry.get("ROOM1") is room

    registry.remove("ROOM1")
    assert registry.get("ROOM1") is None
    registry.remove("ROOM1")


def test_generated_room_ids():
    registry = RoomRegistry()
    room_id = registry.generate_room_id()
    assert len(room_id) == 5
    assert room_id.isalnum()
    assert room_id == room_id.upper()


def test_custom_rules():
    from missy_engine.rules import create_rules

    rules = create_rules(room_code_length=6, player_name_prefix_length=2)
    registry = RoomRegistry(rules=rules)
    assert len(registry.generate_room_id()) == 6

    room = registry.create("ROOM1", "abcdef")
    join_room(room, "abcdef", rules=rules)
    assert room.players[0].name == "玩家ab"
    assert room.game_log[0] == "游戏由 玩家ab 创建。"


def test_server_settings_from_env(monkeypatch):
    from missy_engine.start import ServerSettings

    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("RELOAD", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = ServerSettings.from_env()
    assert settings.port == 9001
    assert settings.reload
    assert settings.log_level == "debug"
