import logging
from typing import Optional

from .models import View, Pane
from .cards import Deck


class Screen:
    """Which view is showing and, in browse view, which pane has focus."""

    def __init__(self, view: View = View.BROWSE, pane: Pane = Pane.DECKS):
        self.view = view
        self.pane = pane

    def toggle_pane(self):
        if self.view is not View.BROWSE:
            return
        self.pane = Pane.CARDS if self.pane is Pane.DECKS else Pane.DECKS

    def enter_study(self, deck: Optional[Deck]) -> bool:
        """Switch to study view for ``deck``.

        Refused for an empty deck (or none at all). On success every card
        of the deck is turned face-down first.
        """
        if self.view is not View.BROWSE:
            return False
        if deck is None or not deck.cards:
            logging.info("Study mode refused: no cards in selected deck")
            return False

        deck.hide_all()
        # Keep the study position from last time, as long as it still exists
        if deck.study_cursor > len(deck.cards) - 1:
            deck.study_cursor = len(deck.cards) - 1
        self.view = View.STUDY
        logging.info(f"Studying deck '{deck.title}' ({len(deck.cards)} cards)")
        return True

    def return_to_browse(self):
        self.view = View.BROWSE

    def __repr__(self):
        return f"Screen(view={self.view.value}, pane={self.pane.value})"
