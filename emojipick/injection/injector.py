"""Paste a glyph into another window via clipboard and a synthetic keystroke.

Backends:
- xdotool: X11, activates the window and sends shift+Insert itself
- kdotool: KDE Wayland, activates the window; ydotool sends the keystroke
"""

from __future__ import annotations

import logging
import subprocess

from emojipick.errors import InjectionError
from emojipick.models.config import InjectorConfig

logger = logging.getLogger(__name__)

# Linux input event codes used by ydotool
KEY_LEFTSHIFT = 42
KEY_INSERT = 110


class TextInjector:
    """Copies a glyph to the clipboard and pastes it into a target window."""

    def __init__(self, config: InjectorConfig | None = None) -> None:
        self.config = config or InjectorConfig()

    def _run(self, cmd: list[str], input_text: str | None = None) -> str:
        try:
            result = subprocess.run(
                cmd,
                input=input_text,
                capture_output=True,
                text=True,
                check=True,
                timeout=10,
            )
        except FileNotFoundError as e:
            raise InjectionError(f"Command not found: {cmd[0]}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise InjectionError(f"{' '.join(cmd)} failed: {stderr or e.returncode}") from e
        except subprocess.TimeoutExpired as e:
            raise InjectionError(f"{' '.join(cmd)} timed out") from e
        return result.stdout

    def active_window(self) -> str:
        """ID of the currently focused window."""
        window_id = self._run([self.config.backend, "getactivewindow"]).strip()
        if not window_id:
            raise InjectionError("No active window reported")
        return window_id

    def copy(self, text: str) -> None:
        """Place text on the system clipboard."""
        self._run(list(self.config.clipboard_command), input_text=text)

    def paste_into(self, window_id: str) -> None:
        """Activate the window and send shift+Insert."""
        self._run([self.config.backend, "windowactivate", window_id])
        if self.config.backend == "kdotool":
            self._run([
                "ydotool",
                "key",
                f"{KEY_LEFTSHIFT}:1",
                f"{KEY_INSERT}:1",
                f"{KEY_INSERT}:0",
                f"{KEY_LEFTSHIFT}:0",
            ])
        else:
            self._run(["xdotool", "key", "shift+Insert"])

    def type_emoji(self, glyph: str, window_id: str) -> None:
        """Copy a glyph and paste it into the given window."""
        if not window_id:
            raise InjectionError("No window to type into")
        self.copy(glyph)
        self.paste_into(window_id)
        logger.debug(f"Pasted {glyph!r} into window {window_id}")
