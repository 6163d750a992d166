"""Console typing drill.

Feeds Dubeolsik (2-set) Latin key strings through a TypingSession and prints
the composed buffer after each chunk:

    python main.py gksrmf                      ->  한글
    python main.py --target 안녕 dkssud        ->  [OK] 안녕
    echo "rkaek-" | python main.py             ->  감ㄷㅏ

A "-" inside a chunk is a backspace. To start a command-line chunk with one,
put "--" before the keys (`python main.py -- -rk`) or feed the chunk on stdin.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from typekorean.controllers.typing_session import TypingSession
from typekorean.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

BACKSPACE_KEY = "-"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def apply_keys(session: TypingSession, keys: str) -> str:
    """Send one chunk of raw keys to the session and return the buffer."""
    for key in keys:
        if key == BACKSPACE_KEY:
            session.backspace()
        else:
            session.press_key(key)
    return session.text


def _announce(word: str) -> None:
    print("[OK] {}".format(word))


def run(session: TypingSession, chunks: Iterable[str], out=None) -> None:
    out = out or sys.stdout
    for chunk in chunks:
        text = apply_keys(session, chunk.rstrip("\r\n"))
        print(text, file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Type Korean with a 2-set keyboard in the console.")
    parser.add_argument("keys", nargs="*", help="Latin key strings; '-' is backspace. Reads stdin if omitted.")
    parser.add_argument("--target", default="", help="Practice word to match, e.g. 안녕하세요.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    store = SettingsStore(args.settings)
    logging.basicConfig(level=store.get_log_level(), format=LOG_FORMAT)
    logger.debug("Using settings file %s", store.path)

    session = TypingSession.from_settings(store, target=args.target, on_complete=_announce)
    run(session, args.keys if args.keys else sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
