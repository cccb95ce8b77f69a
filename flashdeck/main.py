import curses
import logging
import sys
from typing import List, Optional

from .config import AppConfig, load_config
from .services import DeckStore, DeckSaveError
from .state import AppState
from .tui import run


def configure_logging(config: AppConfig):
    # The terminal belongs to curses, so logs go to a file
    logging.basicConfig(
        filename=config.log_file,
        level=config.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config(argv)
    configure_logging(config)

    store = DeckStore(config.decks_path)
    state = AppState.from_collection(store.load_collection())

    # curses.wrapper restores the terminal even if the loop raises
    try:
        curses.wrapper(run, state)
    except KeyboardInterrupt:
        logging.info("Interrupted, leaving the event loop")

    if not config.save_on_exit:
        return 0

    try:
        saved = store.save_collection(state.to_collection())
    except DeckSaveError as e:
        logging.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if not saved:
        print(f"Warning: {config.decks_path} could not be loaded, so it was left unchanged", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
