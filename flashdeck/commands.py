import random
import logging
from enum import Enum
from typing import Optional

from .models import View, Pane
from .state import AppState


class Command(str, Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PANE = "toggle_pane"
    CONFIRM = "confirm"
    DELETE = "delete"
    FLIP = "flip"
    SHUFFLE = "shuffle"
    BACK = "back"
    QUIT = "quit"


def dispatch(state: AppState, command: Command, rng: Optional[random.Random] = None) -> bool:
    """
    Applies one command to the application state.

    Args:
        state (AppState): The state to mutate in place.
        command (Command): The decoded user command.
        rng (random.Random): Optional source of randomness for SHUFFLE.

    Returns:
        bool: False once the event loop should stop, True otherwise.
    """
    if command is Command.QUIT:
        return False

    if state.screen.view is View.BROWSE:
        _dispatch_browse(state, command)
    else:
        _dispatch_study(state, command, rng)
    return True


def _dispatch_browse(state: AppState, command: Command):
    screen = state.screen
    deck_index = state.decks.selected()

    if command is Command.TOGGLE_PANE:
        screen.toggle_pane()
        return

    if screen.pane is Pane.DECKS:
        if command is Command.MOVE_UP:
            state.decks.retreat()
        elif command is Command.MOVE_DOWN:
            state.decks.advance()
        elif command is Command.DELETE and deck_index is not None:
            deck = state.decks.delete(deck_index)
            logging.info(f"Deleted deck '{deck.title}'")
        elif command is Command.CONFIRM:
            screen.enter_study(state.selected_deck())
        return

    # Card pane: everything acts on the selected deck's cards
    if deck_index is None:
        return
    deck = state.decks[deck_index]
    card_index = deck.cards.selected()

    if command is Command.MOVE_UP:
        deck.cards.retreat()
    elif command is Command.MOVE_DOWN:
        deck.cards.advance()
    elif command is Command.DELETE and card_index is not None:
        card = deck.delete_card(card_index)
        logging.info(f"Deleted card '{card.front}' from deck '{deck.title}'")
    elif command is Command.FLIP and card_index is not None:
        deck.cards[card_index].flip()


def _dispatch_study(state: AppState, command: Command, rng: Optional[random.Random]):
    deck = state.selected_deck()

    if command is Command.BACK:
        state.screen.return_to_browse()
        return

    # Study view is only entered with a non-empty deck; bail out if that changed
    if deck is None or not deck.cards:
        state.screen.return_to_browse()
        return

    if command is Command.MOVE_RIGHT:
        deck.advance_study()
    elif command is Command.MOVE_LEFT:
        deck.retreat_study()
    elif command is Command.FLIP:
        deck.study_card().flip()
    elif command is Command.SHUFFLE:
        deck.shuffle(rng)
