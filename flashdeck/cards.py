import random
import logging
from typing import List, Optional

from .selectable_list import SelectableList
from .models import CardRecord, DeckRecord, CardView, DeckView


class FlashCard:
    def __init__(self, front: str, back: str):
        self.front = front
        self.back = back
        self.revealed = False

    def flip(self):
        self.revealed = not self.revealed

    @classmethod
    def from_record(cls, record: CardRecord) -> "FlashCard":
        return cls(record.front, record.back)

    def to_record(self) -> CardRecord:
        return CardRecord(front=self.front, back=self.back)

    def view(self) -> CardView:
        return CardView(front=self.front, back=self.back, revealed=self.revealed)

    def __repr__(self):
        return f"FlashCard({self.front!r}, {self.back!r}, revealed={self.revealed})"


class Deck:
    """A titled list of cards with a second cursor used while studying.

    ``cards.cursor`` follows the card pane in browse view; ``study_cursor``
    follows the card shown in study view. The two never move each other.
    """

    def __init__(self, title: str, cards: Optional[List[FlashCard]] = None):
        self.title = title
        self.cards: SelectableList[FlashCard] = SelectableList.with_items(cards or [])
        self.study_cursor = 0

    @classmethod
    def from_record(cls, record: DeckRecord) -> "Deck":
        return cls(record.title, [FlashCard.from_record(card) for card in record.cards])

    def to_record(self) -> DeckRecord:
        return DeckRecord(title=self.title, cards=[card.to_record() for card in self.cards])

    def view(self) -> DeckView:
        return DeckView(
            title=self.title,
            cards=[card.view() for card in self.cards],
            card_cursor=self.cards.selected(),
            study_cursor=self.study_cursor,
        )

    def study_card(self) -> Optional[FlashCard]:
        """Card currently shown in study view."""
        if not self.cards:
            return None
        return self.cards[self.study_cursor]

    def advance_study(self):
        if not self.cards:
            raise IndexError(f"Deck '{self.title}' has no cards to study")
        if self.study_cursor < len(self.cards) - 1:
            self.study_cursor += 1

    def retreat_study(self):
        if self.study_cursor != 0:
            self.study_cursor -= 1

    def hide_all(self):
        """Turn every card face-down."""
        for card in self.cards:
            if card.revealed:
                card.flip()

    def shuffle(self, rng: Optional[random.Random] = None):
        # Cursors are positional; they stay on the same index after shuffling
        (rng or random).shuffle(self.cards.items)
        logging.info(f"Shuffled {len(self.cards)} cards in deck '{self.title}'")

    def delete_card(self, index: int) -> FlashCard:
        card = self.cards.delete(index)
        if self.study_cursor > len(self.cards) - 1:
            self.study_cursor = max(len(self.cards) - 1, 0)
        return card

    def __repr__(self):
        return f"Deck({self.title!r}, {len(self.cards)} cards)"
