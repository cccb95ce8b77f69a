from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from enum import Enum

# --- Persisted shapes ---

class CardRecord(BaseModel):
    front: str
    back: str

class DeckRecord(BaseModel):
    title: str
    cards: List[CardRecord] = []

class DeckCollection(BaseModel):
    decks: List[DeckRecord] = []

# --- Screen state ---

class View(str, Enum):
    BROWSE = "browse"
    STUDY = "study"

class Pane(str, Enum):
    DECKS = "decks"
    CARDS = "cards"

# --- Read-only views handed to the renderer ---

class CardView(BaseModel):
    model_config = ConfigDict(frozen=True)

    front: str
    back: str
    revealed: bool

class DeckView(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    cards: List[CardView]
    card_cursor: Optional[int] = None
    study_cursor: int = 0

class StateSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    view: View
    pane: Pane
    decks: List[DeckView]
    deck_cursor: Optional[int] = None

    @property
    def selected_deck(self) -> Optional[DeckView]:
        if self.deck_cursor is None:
            return None
        return self.decks[self.deck_cursor]
