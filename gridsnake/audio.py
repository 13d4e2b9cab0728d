"""Background music and sound effects."""

from __future__ import annotations

import enum
from typing import Any, Callable, Protocol

import pygame


class Track(Protocol):
    def set_volume(self, volume: float) -> None: ...
    def play(self) -> None: ...
    def stop(self) -> None: ...
    def pause(self) -> None: ...
    def resume(self) -> None: ...
    def restart(self) -> None: ...


class BgmState(enum.Enum):
    PLAY = "play"
    PAUSE = "pause"
    EMPTY = "empty"


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        pygame.mixer.init()


class MusicTrack:
    """A streamed music file played through the mixer's music channel."""

    def __init__(self, path: str, repeat: bool) -> None:
        _ensure_mixer()
        pygame.mixer.music.load(path)
        self._loops = -1 if repeat else 0

    def set_volume(self, volume: float) -> None:
        pygame.mixer.music.set_volume(volume)

    def play(self) -> None:
        pygame.mixer.music.play(loops=self._loops)

    def stop(self) -> None:
        pygame.mixer.music.stop()

    def pause(self) -> None:
        pygame.mixer.music.pause()

    def resume(self) -> None:
        pygame.mixer.music.unpause()

    def restart(self) -> None:
        pygame.mixer.music.play(loops=self._loops)


def _load_sound(path: str) -> pygame.mixer.Sound:
    _ensure_mixer()
    return pygame.mixer.Sound(path)


class BgmManager:
    """Holds the current background track and whether it is playing."""

    def __init__(self, music: Track | None = None, state: BgmState = BgmState.EMPTY) -> None:
        self.music = music
        self.state = state

    def stop(self) -> None:
        if self.music is not None:
            self.state = BgmState.EMPTY
            self.music.stop()
        self.music = None

    def pause(self) -> None:
        if self.music is not None:
            self.state = BgmState.PAUSE
            self.music.pause()

    def resume(self) -> None:
        if self.music is not None and self.state is BgmState.PAUSE:
            self.state = BgmState.PLAY
            self.music.resume()

    def replay(self) -> None:
        if self.music is not None:
            self.music.restart()


class AudioManager:
    """Plays background music and named sound effects at set volumes."""

    def __init__(
        self,
        music_loader: Callable[[str, bool], Track] = MusicTrack,
        sound_loader: Callable[[str], Any] = _load_sound,
    ) -> None:
        self.bgm = BgmManager()
        self.music_volume = 0.5
        self.sfx: dict[str, Any] = {}
        self.sfx_volume = 0.7
        self._music_loader = music_loader
        self._sound_loader = sound_loader

    def play_bgm(self, path: str, repeat: bool) -> None:
        music = self._music_loader(path, repeat)
        music.set_volume(self.music_volume)
        music.play()
        self.bgm = BgmManager(music, BgmState.PLAY)

    def stop_bgm(self) -> None:
        self.bgm.stop()

    def replay_bgm(self) -> None:
        self.bgm.replay()

    def load_sfx(self, name: str, path: str) -> None:
        sound = self._sound_loader(path)
        sound.set_volume(self.sfx_volume)
        self.sfx[name] = sound

    def play_sfx(self, name: str) -> None:
        """Play a loaded effect; unknown names are ignored."""
        sound = self.sfx.get(name)
        if sound is not None:
            sound.play()