"""
Deck creation and shuffling utilities.
"""

import random
import uuid
from typing import List, Optional

from .constants import DECK_SIZE, JOKER_COLORS, JOKER_SUIT, RANKS, SUITS
from .models import Card, RoomState


def build_deck() -> List[Card]:
    """Create an ordered deck: 4 suits x 13 ranks plus the two jokers."""
    deck = []

    for suit in SUITS:
        for rank in RANKS:
            deck.append(Card(suit=suit, rank=rank, id=str(uuid.uuid4())))

    for rank in JOKER_COLORS:
        deck.append(Card(suit=JOKER_SUIT, rank=rank, id=str(uuid.uuid4())))

    return deck


def shuffle_deck(deck: List[Card], seed: Optional[int] = None) -> List[Card]:
    """
    Shuffle a copy of the deck (Fisher-Yates, via random.shuffle).

    Args:
        deck: Cards to shuffle
        seed: Optional seed for deterministic shuffling

    Returns:
        Shuffled copy of the deck
    """
    deck_copy = deck.copy()
    rng = random.Random(seed)
    rng.shuffle(deck_copy)

    return deck_copy


def create_deck(seed: Optional[int] = None) -> List[Card]:
    """Create a full, freshly shuffled 54-card deck."""
    return shuffle_deck(build_deck(), seed)


def validate_deck_integrity(state: RoomState) -> bool:
    """
    Validate that no card is duplicated across the deck and the hands.

    Cards that were drawn and resolved as roles leave play, so the total may
    be below a full deck but never above it.
    """
    all_ids = [card.id for card in state.deck]
    for player in state.players:
        all_ids.extend(card.id for card in player.hand)

    return len(all_ids) == len(set(all_ids)) and len(all_ids) <= DECK_SIZE
