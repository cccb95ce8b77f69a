import os
import argparse
import logging
from typing import List, Optional

from pydantic import BaseModel, ValidationError, field_validator


class AppConfig(BaseModel):
    decks_path: str = "decks.json"
    log_file: str = "flashdeck.log"
    log_level: str = "INFO"
    save_on_exit: bool = True

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_config(argv: Optional[List[str]] = None) -> AppConfig:
    """Builds the config from command line flags, with environment defaults."""
    defaults = AppConfig()
    parser = argparse.ArgumentParser(prog="flashdeck", description="Browse and study flashcard decks in the terminal.")
    parser.add_argument("--decks", dest="decks_path",
                        default=os.environ.get("FLASHDECK_DECKS", defaults.decks_path),
                        help="deck file to load (.json or .csv)")
    parser.add_argument("--log-file", dest="log_file",
                        default=os.environ.get("FLASHDECK_LOG_FILE", defaults.log_file))
    parser.add_argument("--log-level", dest="log_level",
                        default=os.environ.get("FLASHDECK_LOG_LEVEL", defaults.log_level))
    parser.add_argument("--no-save", dest="save_on_exit", action="store_false",
                        help="do not write decks back on exit")
    args = parser.parse_args(argv)
    try:
        return AppConfig(**vars(args))
    except ValidationError as e:
        parser.error(f"invalid configuration: {e.errors()[0]['msg']}")
