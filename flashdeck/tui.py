"""Curses terminal frontend: key decoding, drawing and the event loop."""

import curses
import logging
import textwrap
from typing import List, Optional, Tuple

from .commands import Command, dispatch
from .models import CardView, DeckView, Pane, StateSnapshot, View
from .state import AppState

BROWSE_HELP = ("D: Delete | ENTER: Study selected deck | SPACE: Flip selected card | "
               "TAB: Switch pane | j/k: Move | q: Quit")
STUDY_HELP = ("SPACE: Reveal card back | h/Left: Previous card | l/Right: Next card | "
              "r: Shuffle cards | ESC: Back to decks | q: Quit")
HIDDEN_BACK = "Press SPACE to flip the card"

KEY_ESCAPE = 27
KEY_TAB = 9

KEYMAP = {
    ord("q"): Command.QUIT,
    ord("D"): Command.DELETE,
    ord(" "): Command.FLIP,
    ord("r"): Command.SHUFFLE,
    ord("k"): Command.MOVE_UP,
    ord("j"): Command.MOVE_DOWN,
    ord("h"): Command.MOVE_LEFT,
    ord("l"): Command.MOVE_RIGHT,
    curses.KEY_UP: Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    curses.KEY_ENTER: Command.CONFIRM,
    10: Command.CONFIRM,
    13: Command.CONFIRM,
    KEY_TAB: Command.TOGGLE_PANE,
    KEY_ESCAPE: Command.BACK,
}


def decode_key(ch: int) -> Optional[Command]:
    """Maps a curses key code to a command, or None for unbound keys."""
    return KEYMAP.get(ch)


def card_label(position: int, card: CardView) -> str:
    text = card.back if card.revealed else card.front
    return f"{position + 1}. {text}"


def visible_window(cursor: Optional[int], count: int, height: int) -> Tuple[int, int]:
    """First and one-past-last index of a list scrolled so ``cursor`` shows."""
    if height <= 0 or count == 0:
        return 0, 0
    start = 0
    if cursor is not None and cursor >= height:
        start = cursor - height + 1
    return start, min(start + height, count)


class TUI:
    def __init__(self, stdscr, state: AppState):
        self.stdscr = stdscr
        self.state = state
        curses.curs_set(0)
        self.stdscr.keypad(True)
        # Esc would otherwise wait a full second for an escape sequence
        curses.set_escdelay(25)

        self.has_colors = curses.has_colors()
        if self.has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            curses.init_pair(1, curses.COLOR_YELLOW, -1)
            self.COL_FOCUS = curses.color_pair(1) | curses.A_BOLD
        else:
            self.COL_FOCUS = curses.A_BOLD | curses.A_UNDERLINE

    def run(self):
        running = True
        while running:
            self.draw(self.state.snapshot())
            command = decode_key(self.stdscr.getch())
            if command is None:
                continue
            logging.debug(f"Command {command.value} in {self.state.screen!r}")
            running = dispatch(self.state, command)

    def draw(self, snapshot: StateSnapshot):
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        body_h = height - 2
        if body_h < 3 or width < 10:
            self.stdscr.refresh()
            return

        if snapshot.view is View.BROWSE:
            self.draw_browse(snapshot, body_h, width)
            footer = BROWSE_HELP
        else:
            self.draw_study(snapshot, body_h, width)
            footer = STUDY_HELP

        self.stdscr.hline(height - 2, 0, curses.ACS_HLINE, width)
        self.stdscr.addnstr(height - 1, 0, footer, width - 1, curses.A_DIM)
        self.stdscr.refresh()

    def draw_browse(self, snapshot: StateSnapshot, body_h: int, width: int):
        half = width // 2
        deck_titles = [deck.title for deck in snapshot.decks]
        self.draw_list_pane(0, 0, body_h, half, "Decks", deck_titles,
                            snapshot.deck_cursor, snapshot.pane is Pane.DECKS)

        deck = snapshot.selected_deck
        labels: List[str] = []
        cursor = None
        if deck is not None:
            labels = [card_label(i, card) for i, card in enumerate(deck.cards)]
            cursor = deck.card_cursor
        self.draw_list_pane(0, half, body_h, width - half, "Cards", labels,
                            cursor, snapshot.pane is Pane.CARDS)

    def draw_list_pane(self, y: int, x: int, h: int, w: int, title: str,
                       lines: List[str], cursor: Optional[int], focused: bool):
        self.draw_box(y, x, h, w, title, self.COL_FOCUS if focused else curses.A_NORMAL)
        start, end = visible_window(cursor, len(lines), h - 2)
        for row, i in enumerate(range(start, end)):
            attrs = curses.A_BOLD | curses.A_REVERSE if i == cursor else curses.A_NORMAL
            self.stdscr.addnstr(y + 1 + row, x + 1, lines[i], w - 2, attrs)

    def draw_study(self, snapshot: StateSnapshot, body_h: int, width: int):
        deck: Optional[DeckView] = snapshot.selected_deck
        if deck is None or not deck.cards:
            return
        card = deck.cards[deck.study_cursor]

        box_h = max(body_h // 2, 3)
        title = f"{deck.title} ({deck.study_cursor + 1}/{len(deck.cards)})"
        self.draw_text_box(0, 0, box_h, width, f"Card front - {title}", card.front)
        back = card.back if card.revealed else HIDDEN_BACK
        self.draw_text_box(box_h, 0, body_h - box_h, width, "Card back", back)

    def draw_text_box(self, y: int, x: int, h: int, w: int, title: str, text: str):
        self.draw_box(y, x, h, w, title, curses.A_NORMAL)
        inner_w = max(w - 4, 1)
        lines = textwrap.wrap(text, inner_w) or [""]
        lines = lines[:max(h - 2, 0)]
        top = y + 1 + max((h - 2 - len(lines)) // 2, 0)
        for row, line in enumerate(lines):
            self.stdscr.addnstr(top + row, x + 2, line.center(inner_w), inner_w)

    def draw_box(self, y: int, x: int, h: int, w: int, title: str, attrs: int):
        if h < 2 or w < 2:
            return
        win = self.stdscr.derwin(h, w, y, x)
        win.attron(attrs)
        win.box()
        win.attroff(attrs)
        win.addnstr(0, 2, f" {title} ", max(w - 4, 0), attrs)


def run(stdscr, state: AppState):
    TUI(stdscr, state).run()
