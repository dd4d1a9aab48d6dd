"""
Deck service: loads the static card deck and searches it.
"""
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from teachmi.core.exceptions import DeckError
from teachmi.schemas.card import Card

logger = logging.getLogger(__name__)

_deck_adapter = TypeAdapter(List[Card])


def parse_deck(raw_cards: list) -> List[Card]:
    """
    Validate raw card dicts and return them as Cards, keeping file order.

    Raises:
        DeckError: If a card is malformed or an identifier is repeated
    """
    try:
        cards = _deck_adapter.validate_python(raw_cards)
    except PydanticValidationError as e:
        raise DeckError(f"Deck contains malformed cards: {e}") from e

    seen_ids: set[str] = set()
    for card in cards:
        if card.id in seen_ids:
            raise DeckError(f"Duplicate card id in deck: {card.id}")
        seen_ids.add(card.id)
    return cards


def load_deck(path: Union[str, Path]) -> List[Card]:
    """
    Load the deck from a JSON file holding an array of card objects.

    Args:
        path: Path to the deck asset

    Returns:
        Cards in file order

    Raises:
        DeckError: If the file is missing, is not a JSON array, or fails validation
    """
    deck_path = Path(path)
    try:
        with open(deck_path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except FileNotFoundError as e:
        raise DeckError(f"Deck file not found: {deck_path}") from e
    except json.JSONDecodeError as e:
        raise DeckError(f"Deck file is not valid JSON: {deck_path}: {e}") from e

    if not isinstance(raw, list):
        raise DeckError(f"Deck file must contain a JSON array: {deck_path}")

    cards = parse_deck(raw)
    logger.info(f"Loaded {len(cards)} card(s) from {deck_path}")
    return cards


def normalize_query(query: str) -> str:
    return query.lower().strip()


def card_matches_query(card: Card, query: str) -> bool:
    """Whether the card's word or sentence contains the query (translations case-insensitively)."""
    q = normalize_query(query)
    if not q:
        return True
    return (
        q in card.word_kanji
        or q in card.word_furigana
        or q in card.word_en.lower()
        or q in card.sentence
        or q in card.sentence_en.lower()
    )


def search_cards(deck: Sequence[Card], query: Optional[str] = None) -> List[Card]:
    """Filter the deck by a text query, keeping deck order. No query returns the whole deck."""
    if not query:
        return list(deck)
    return [card for card in deck if card_matches_query(card, query)]


def find_card(deck: Sequence[Card], card_id: str) -> Optional[Card]:
    for card in deck:
        if card.id == card_id:
            return card
    return None
