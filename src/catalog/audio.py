"""
Background music started by the first click on the page.

Browsers refuse to start audio before a user gesture, so the page only prepares
the track on load. The first click anywhere plays it and the listener removes
itself; playback failures go to the console, never to the page.
"""

from __future__ import annotations

import html as html_lib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

AUDIO_ELEMENT_ID = "ambient-audio"
STATIC_PREFIX = "/static/"


@dataclass
class AudioTrack:
    source: str
    volume: float = 0.5
    loop: bool = True

    @classmethod
    def from_config(cls, audio_cfg) -> "AudioTrack":
        return cls(audio_cfg.track, volume=audio_cfg.volume, loop=audio_cfg.loop)


def bundled_file(track: AudioTrack, static_dir: Path) -> Optional[Path]:
    """Local file behind a ``/static/...`` track, or None for external URLs."""
    if not track.source.startswith(STATIC_PREFIX):
        return None
    return static_dir / track.source[len(STATIC_PREFIX):]


def check_track(track: AudioTrack, static_dir: Path) -> bool:
    """Warn at startup when a bundled track is missing; the browser will fail to play it."""
    path = bundled_file(track, static_dir)
    if path is not None and not path.is_file():
        logger.warning("Audio track %s not found at %s; background music will not play", track.source, path)
        return False
    return True


def audio_markup(track: AudioTrack) -> str:
    """The ``<audio>`` element plus the first-click listener that starts it."""
    src = html_lib.escape(track.source)
    return f"""\
    <audio id="{AUDIO_ELEMENT_ID}" src="{src}" preload="auto"></audio>
    <script>
      window.addEventListener("load", () => {{
        const audio = document.getElementById("{AUDIO_ELEMENT_ID}");
        audio.loop = {json.dumps(track.loop)};
        audio.volume = {json.dumps(track.volume)};
        document.body.addEventListener("click", function startMusic() {{
          document.body.removeEventListener("click", startMusic);
          audio.play().catch(error => console.error("Music playback failed:", error));
        }});
      }});
    </script>"""
