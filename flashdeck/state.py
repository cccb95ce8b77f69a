from typing import List, Optional

from .selectable_list import SelectableList
from .cards import Deck
from .screen import Screen
from .models import DeckCollection, StateSnapshot


# --- Global State (single owner, mutated in place by dispatch) ---
class AppState:
    def __init__(self, decks: Optional[List[Deck]] = None):
        self.decks: SelectableList[Deck] = SelectableList.with_items(decks or [])
        self.screen = Screen()

    @classmethod
    def from_collection(cls, collection: DeckCollection) -> "AppState":
        return cls([Deck.from_record(record) for record in collection.decks])

    def to_collection(self) -> DeckCollection:
        return DeckCollection(decks=[deck.to_record() for deck in self.decks])

    def selected_deck(self) -> Optional[Deck]:
        return self.decks.selected_item()

    def snapshot(self) -> StateSnapshot:
        """Frozen copy of everything the renderer needs."""
        return StateSnapshot(
            view=self.screen.view,
            pane=self.screen.pane,
            decks=[deck.view() for deck in self.decks],
            deck_cursor=self.decks.selected(),
        )
