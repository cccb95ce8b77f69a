import os
import logging

import pandas as pd

from .models import CardRecord, DeckRecord, DeckCollection


class DeckLoadError(Exception):
    """Raised when a deck file exists but cannot be parsed."""


class DeckSaveError(Exception):
    """Raised when decks cannot be written back to disk."""


class DeckStore:
    # Legacy column names accepted in CSV files
    COLUMN_MAPPINGS = {
        'domanda': 'front',
        'risposta': 'back',
        'question': 'front',
        'answer': 'back',
        'title': 'deck',
        'mazzo': 'deck',
    }
    DEFAULT_DECK_TITLE = "Default"

    def __init__(self, file_path: str = "decks.json"):
        self.file_path = file_path
        # Set when the file exists but could not be parsed; saving would clobber it
        self.load_failed = False

    @property
    def is_csv(self) -> bool:
        return self.file_path.lower().endswith(".csv")

    def load_collection(self) -> DeckCollection:
        """Loads decks from disk, falling back to an empty collection."""
        self.load_failed = False
        if not os.path.exists(self.file_path):
            logging.warning(f"Deck file not found: {self.file_path}, starting empty")
            return DeckCollection()

        try:
            collection = self._read_csv() if self.is_csv else self._read_json()
        except DeckLoadError as e:
            logging.error(f"Error loading decks: {e}")
            self.load_failed = True
            return DeckCollection()

        logging.info(f"Loaded {len(collection.decks)} decks from {self.file_path}")
        return collection

    def save_collection(self, collection: DeckCollection) -> bool:
        """Writes decks back to disk in the format they were read from.

        Returns False without writing if the last load failed to parse the
        existing file.
        """
        if self.load_failed:
            logging.warning(f"Not saving to {self.file_path}: it could not be loaded and would be overwritten")
            return False

        try:
            if self.is_csv:
                self._write_csv(collection)
            else:
                self._write_json(collection)
        except OSError as e:
            raise DeckSaveError(f"Could not save decks to {self.file_path}: {e}") from e
        logging.info(f"Saved {len(collection.decks)} decks to {self.file_path}")
        return True

    def _read_json(self) -> DeckCollection:
        try:
            with open(self.file_path, encoding='utf-8') as f:
                return DeckCollection.model_validate_json(f.read())
        except (OSError, ValueError) as e:
            raise DeckLoadError(f"{self.file_path}: {e}") from e

    def _write_json(self, collection: DeckCollection):
        with open(self.file_path, 'w', encoding='utf-8') as f:
            f.write(collection.model_dump_json(indent=2))

    def _read_csv(self) -> DeckCollection:
        try:
            df = pd.read_csv(self.file_path, encoding='utf-8-sig', dtype=str)
        except (OSError, ValueError, pd.errors.ParserError) as e:
            raise DeckLoadError(f"{self.file_path}: {e}") from e

        for old, new in self.COLUMN_MAPPINGS.items():
            if old in df.columns and new not in df.columns:
                df[new] = df[old]

        missing = {'front', 'back'} - set(df.columns)
        if missing:
            raise DeckLoadError(f"{self.file_path}: missing columns {sorted(missing)}")
        if 'deck' not in df.columns:
            df['deck'] = self.DEFAULT_DECK_TITLE

        df = df.fillna("")  # Empty cells come back as NaN
        decks = {}
        for row in df.itertuples(index=False):
            title = row.deck or self.DEFAULT_DECK_TITLE
            # dict keeps first-appearance order of deck titles
            decks.setdefault(title, []).append(CardRecord(front=row.front, back=row.back))

        return DeckCollection(decks=[DeckRecord(title=title, cards=cards) for title, cards in decks.items()])

    def _write_csv(self, collection: DeckCollection):
        rows = [
            {'deck': deck.title, 'front': card.front, 'back': card.back}
            for deck in collection.decks
            for card in deck.cards
        ]
        df = pd.DataFrame(rows, columns=['deck', 'front', 'back'])
        df.to_csv(self.file_path, index=False, encoding='utf-8-sig')
