"""Game constants and utilities"""

from typing import Dict, List

# Suit -> color
SUITS: Dict[str, str] = {'♠': 'black', '♥': 'red', '♣': 'black', '♦': 'red'}
RANKS: List[str] = ['A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K']

JOKER_SUIT = '🃏'
SMALL_JOKER = '小王'
BIG_JOKER = '大王'
JOKER_COLORS: Dict[str, str] = {SMALL_JOKER: 'black', BIG_JOKER: 'red'}

DECK_SIZE = len(SUITS) * len(RANKS) + len(JOKER_COLORS)

# Drawn cards of these ranks are kept in hand instead of granting a role
HOLDABLE_RANKS = ('7', '8', SMALL_JOKER)

RANK_EMPEROR = 'K'
RANK_MISSY = 'Q'
RANK_SERVANT = 'J'

PLAYER_NAME_PREFIX = '玩家'
ROOM_CODE_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'

# Client-facing texts
MSG_ROOM_NOT_FOUND = '房间不存在。'
LOG_ROOM_CREATED = '游戏由 {name} 创建。'
LOG_CARD_DRAWN = '{name} 抽到了 {suit}{rank}。'
LOG_CARD_HELD = ' 卡牌已存入手牌。'
LOG_GAME_OVER = '牌堆已空！游戏结束。'


def card_color(suit: str, rank: str) -> str:
    """Color of a card, fixed by its suit or, for jokers, by its rank."""
    if suit == JOKER_SUIT:
        return JOKER_COLORS[rank]
    return SUITS[suit]


def player_name(player_id: str, prefix_length: int = 4) -> str:
    return f"{PLAYER_NAME_PREFIX}{player_id[:prefix_length]}"
