"""Registration of audio files and creation of ready-to-play players."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from pathlib import Path

import pygame
import pygame.mixer

_FORMATS = frozenset({".mp3", ".ogg", ".wav"})


@dataclass
class AudioOptions:
    """How a player plays its sound.

    Lengths are in bytes of the decoded sample data. Giving either length
    turns looping on. Volume ranges from 0 to 1.
    """

    looping: bool = False
    loop_length: int | None = None
    intro_length: int | None = None
    volume: float = 1.0

    def __post_init__(self) -> None:
        if self.loop_length is not None or self.intro_length is not None:
            self.looping = True


class AudioPlayer:
    """Plays a sound once or in a loop, optionally after a one-off intro."""

    def __init__(
        self,
        body: pygame.mixer.Sound,
        *,
        intro: pygame.mixer.Sound | None = None,
        looping: bool = False,
        volume: float = 1.0,
    ) -> None:
        self.body = body
        self.intro = intro
        self.looping = looping
        self._channel: pygame.mixer.Channel | None = None
        self._volume = volume
        self._apply_volume()

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = value
        self._apply_volume()

    def _apply_volume(self) -> None:
        self.body.set_volume(self._volume)
        if self.intro is not None:
            self.intro.set_volume(self._volume)

    @property
    def playing(self) -> bool:
        return self._channel is not None and self._channel.get_busy()

    def play(self) -> None:
        """Start playback from the beginning."""
        if self.intro is not None:
            self._channel = self.intro.play()
            if self._channel is not None:
                self._channel.queue(self.body)
        else:
            self._channel = self.body.play(loops=-1 if self.looping else 0)

    def update(self) -> None:
        """Keep an intro loop going; call once per frame."""
        channel = self._channel
        if self.intro is None or channel is None or not channel.get_busy():
            return
        if channel.get_queue() is None:
            channel.queue(self.body)

    def pause(self) -> None:
        if self._channel is not None:
            self._channel.pause()

    def resume(self) -> None:
        if self._channel is not None:
            self._channel.unpause()

    def stop(self) -> None:
        if self._channel is not None:
            self._channel.stop()
            self._channel = None


class AudioManager:
    """Maps names to audio files and builds players for them on request."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self._files: dict[str, str] = {}

    def load_player(self, name: str, path: str) -> None:
        """Register the audio file at ``path`` below the root under ``name``."""
        self._files[name] = path

    def get_player(
        self,
        name: str,
        *,
        looping: bool = False,
        loop_length: int | None = None,
        intro_length: int | None = None,
        volume: float = 1.0,
    ) -> AudioPlayer:
        """Decode the file registered as ``name`` and return a player for it.

        Raises KeyError for an unregistered name, OSError if the file cannot be
        read and ValueError for a file that is not mp3, ogg or wav.
        """
        options = AudioOptions(looping, loop_length, intro_length, volume)
        try:
            path = self._files[name]
        except KeyError:
            raise KeyError(f"Audio file: {name} not loaded") from None

        data = (self.root / path).read_bytes()
        if os.path.splitext(path)[1] not in _FORMATS:
            raise ValueError(f"Audio File Format Unknown: {path}")

        sound = pygame.mixer.Sound(file=io.BytesIO(data))
        if not options.looping:
            return AudioPlayer(sound, volume=options.volume)

        raw = sound.get_raw()
        loop_length = len(raw) if options.loop_length is None else options.loop_length
        if options.intro_length is None:
            body = pygame.mixer.Sound(buffer=raw[:loop_length])
            return AudioPlayer(body, looping=True, volume=options.volume)

        start = options.intro_length
        intro = pygame.mixer.Sound(buffer=raw[:start])
        body = pygame.mixer.Sound(buffer=raw[start : start + loop_length])
        return AudioPlayer(body, intro=intro, looping=True, volume=options.volume)

    def clear(self) -> None:
        """Forget all registered audio files."""
        self._files.clear()