from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from typekorean.domain.enums import BackspaceUnit
from typekorean.domain.hangul_compose import add_jamo, handle_backspace
from typekorean.domain.keyboard_layout import jamo_for_key
from typekorean.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


@dataclass
class TypingSession:
    """Owns the text buffer while the user types one practice word.

    Responsibilities:
    - thread the buffer through the composition engine, one key at a time
    - compare the buffer to the target word after every edit
    - forward a completed word to an injected handler (speech, sound effects)

    The buffer string is the only composition state; this class keeps no
    separate in-progress syllable.
    """

    target: str = ""
    backspace_unit: BackspaceUnit = BackspaceUnit.JAMO
    clear_on_match: bool = True
    on_complete: Optional[Callable[[str], None]] = None
    _text: str = field(default="", init=False, repr=False)
    _completed: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_settings(
        cls,
        store: SettingsStore,
        target: str = "",
        on_complete: Optional[Callable[[str], None]] = None,
    ) -> "TypingSession":
        return cls(
            target=target,
            backspace_unit=store.get_backspace_unit(),
            clear_on_match=store.get_clear_on_match(),
            on_complete=on_complete,
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_complete(self) -> bool:
        """True once the target has been typed (stays True until reset)."""
        return self._completed

    # ---------------------------
    # Key handling
    # ---------------------------

    def press(self, jamo: str) -> str:
        """Type one jamo (or any literal character) and return the new buffer."""
        self._set_text(add_jamo(self._text, jamo))
        return self._text

    def press_key(self, key: str) -> str:
        """Type one raw layout key such as "r" or "R"."""
        return self.press(jamo_for_key(key))

    def type_keys(self, keys: str) -> str:
        for key in keys:
            self.press_key(key)
        return self._text

    def backspace(self) -> str:
        if self.backspace_unit is BackspaceUnit.CHARACTER:
            self._set_text(self._text[:-1])
        else:
            self._set_text(handle_backspace(self._text))
        return self._text

    def space(self) -> str:
        return self.press(" ")

    def enter(self) -> str:
        return self.press("\n")

    def reset(self, target: Optional[str] = None) -> None:
        if target is not None:
            self.target = target
        self._text = ""
        self._completed = False

    # ---------------------------
    # Internals
    # ---------------------------

    def _set_text(self, text: str) -> None:
        logger.debug("buffer %r -> %r", self._text, text)
        self._text = text
        if not self.target or self._text != self.target:
            return

        self._completed = True
        word = self.target
        if self.clear_on_match:
            self._text = ""
        if self.on_complete is None:
            return
        try:
            self.on_complete(word)
        except Exception:
            # Handler is injected; keep the typing path resilient.
            logger.exception("TypingSession completion handler failed")
