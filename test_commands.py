import random

from flashdeck.cards import Deck, FlashCard
from flashdeck.commands import Command, dispatch
from flashdeck.models import DeckCollection, Pane, View
from flashdeck.state import AppState


def make_state() -> AppState:
    collection = DeckCollection.model_validate({
        "decks": [
            {"title": "Letters", "cards": [{"front": "A", "back": "1/2"}, {"front": "B", "back": "3/4"}]},
            {"title": "Empty", "cards": []},
        ]
    })
    return AppState.from_collection(collection)


def run(state: AppState, *commands: Command) -> bool:
    running = True
    for command in commands:
        running = dispatch(state, command)
    return running


def test_initial_state():
    state = make_state()
    assert state.screen.view is View.BROWSE
    assert state.screen.pane is Pane.DECKS
    assert state.decks.selected() == 0


def test_quit_stops_loop_from_either_view():
    state = make_state()
    assert dispatch(state, Command.QUIT) is False
    run(state, Command.CONFIRM)
    assert dispatch(state, Command.QUIT) is False


def test_move_down_then_delete_card():
    state = make_state()
    run(state, Command.TOGGLE_PANE, Command.MOVE_DOWN, Command.DELETE)
    cards = state.decks[0].cards
    assert [card.front for card in cards] == ["A"]
    assert cards.selected() == 0


def test_confirm_enters_study_with_cards_hidden():
    state = make_state()
    run(state, Command.TOGGLE_PANE, Command.FLIP, Command.TOGGLE_PANE)
    assert state.decks[0].cards[0].revealed is True

    run(state, Command.CONFIRM)
    deck = state.decks[0]
    assert state.screen.view is View.STUDY
    assert [card.revealed for card in deck.cards] == [False, False]
    assert deck.study_cursor == 0


def test_confirm_on_empty_deck_is_refused():
    state = make_state()
    run(state, Command.MOVE_DOWN, Command.CONFIRM)
    assert state.screen.view is View.BROWSE


def test_confirm_in_card_pane_does_nothing():
    state = make_state()
    run(state, Command.TOGGLE_PANE, Command.CONFIRM)
    assert state.screen.view is View.BROWSE


def test_deck_pane_moves_decks_card_pane_moves_cards():
    state = make_state()
    run(state, Command.MOVE_DOWN)
    assert state.decks.selected() == 1
    run(state, Command.MOVE_UP, Command.TOGGLE_PANE, Command.MOVE_DOWN)
    assert state.decks.selected() == 0
    assert state.decks[0].cards.selected() == 1


def test_delete_deck_in_deck_pane():
    state = make_state()
    run(state, Command.MOVE_DOWN, Command.DELETE)
    assert [deck.title for deck in state.decks] == ["Letters"]
    assert state.decks.selected() == 0
    run(state, Command.DELETE)
    assert state.decks.selected() is None


def test_commands_with_no_decks_are_noops():
    state = AppState()
    for command in Command:
        if command is Command.QUIT:
            continue
        assert dispatch(state, command) is True
    assert state.screen.view is View.BROWSE
    assert state.decks.selected() is None


def test_card_pane_commands_on_empty_deck_are_noops():
    state = make_state()
    run(state, Command.MOVE_DOWN, Command.TOGGLE_PANE, Command.DELETE, Command.FLIP, Command.MOVE_DOWN)
    assert len(state.decks[1].cards) == 0
    assert state.decks[1].cards.selected() is None


def test_flip_in_deck_pane_does_nothing():
    state = make_state()
    run(state, Command.FLIP)
    assert state.decks[0].cards[0].revealed is False


def test_study_navigation_and_flip():
    state = make_state()
    run(state, Command.CONFIRM, Command.MOVE_RIGHT, Command.MOVE_RIGHT)
    deck = state.decks[0]
    assert deck.study_cursor == 1
    run(state, Command.FLIP)
    assert deck.cards[1].revealed is True
    run(state, Command.MOVE_LEFT, Command.MOVE_LEFT)
    assert deck.study_cursor == 0
    # Browse cursor untouched by study navigation
    assert deck.cards.selected() == 0


def test_study_ignores_browse_only_commands():
    state = make_state()
    run(state, Command.CONFIRM, Command.DELETE, Command.TOGGLE_PANE, Command.MOVE_DOWN)
    assert state.screen.view is View.STUDY
    assert state.screen.pane is Pane.DECKS
    assert len(state.decks[0].cards) == 2
    assert state.decks.selected() == 0


def test_back_returns_to_browse():
    state = make_state()
    run(state, Command.CONFIRM, Command.BACK)
    assert state.screen.view is View.BROWSE
    run(state, Command.BACK)
    assert state.screen.view is View.BROWSE


def test_shuffle_in_study_view():
    state = make_state()
    run(state, Command.CONFIRM)
    dispatch(state, Command.SHUFFLE, rng=random.Random(1))
    assert sorted(card.front for card in state.decks[0].cards) == ["A", "B"]
    assert state.decks[0].study_cursor == 0


def test_reentering_study_after_deleting_cards_keeps_cursor_valid():
    state = make_state()
    run(state, Command.CONFIRM, Command.MOVE_RIGHT, Command.BACK)
    assert state.decks[0].study_cursor == 1
    run(state, Command.TOGGLE_PANE, Command.MOVE_DOWN, Command.DELETE, Command.TOGGLE_PANE, Command.CONFIRM)
    deck = state.decks[0]
    assert state.screen.view is View.STUDY
    assert deck.study_cursor == 0
    assert deck.study_card().front == "A"


def test_snapshot_reflects_state():
    state = make_state()
    run(state, Command.TOGGLE_PANE, Command.FLIP)
    snapshot = state.snapshot()
    assert snapshot.view is View.BROWSE
    assert snapshot.pane is Pane.CARDS
    assert snapshot.deck_cursor == 0
    assert snapshot.selected_deck.title == "Letters"
    assert snapshot.selected_deck.cards[0].revealed is True
    assert snapshot.selected_deck.card_cursor == 0


def test_to_collection_round_trips_content():
    state = make_state()
    collection = state.to_collection()
    assert [deck.title for deck in collection.decks] == ["Letters", "Empty"]
    assert collection.decks[0].cards[1].back == "3/4"


def test_state_from_decks_list():
    state = AppState([Deck("One", [FlashCard("x", "y")])])
    assert state.selected_deck().cards.selected_item().front == "x"
    assert AppState().selected_deck() is None
