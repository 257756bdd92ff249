"""A music playlist with navigation, repeat modes and a Base64-per-line file format."""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import logging
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

logger = logging.getLogger(__name__)

_RULE = "-" * 80


class PlaylistFormatError(ValueError):
    """Raised when a playlist file holds data that cannot be decoded."""


def _split_duration(duration: int) -> tuple[int, int]:
    """Split seconds into minutes and seconds, truncating toward zero."""
    sign = -1 if duration < 0 else 1
    minutes = sign * (abs(duration) // 60)
    return minutes, duration - minutes * 60


def _format_duration(duration: int) -> str:
    minutes, seconds = _split_duration(duration)
    return f"{minutes:02d}:{seconds:02d}"


@dataclass
class Track:
    """A single track: name, duration in seconds, genre and rating."""

    name: str
    duration: int
    genre: str
    rating: float

    def __str__(self) -> str:
        return f"{self.name} | {_format_duration(self.duration)} | {self.genre} | {self.rating:.1f}"

    def to_dict(self) -> dict[str, Any]:
        """Return the track as a JSON-ready mapping."""
        rating: float | int = self.rating
        if isinstance(rating, float) and rating.is_integer():
            rating = int(rating)
        return {
            "name": self.name,
            "duration": self.duration,
            "genre": self.genre,
            "rating": rating,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Track:
        """Build a track from a mapping; missing or null fields take zero values."""
        if not isinstance(data, dict):
            raise PlaylistFormatError("track data must be an object")

        def field(key: str, default: Any, check, label: str) -> Any:
            value = data.get(key)
            if value is None:
                return default
            if isinstance(value, bool) or not check(value):
                raise PlaylistFormatError(f"field {key!r} must be {label}")
            return value

        return cls(
            name=field("name", "", lambda v: isinstance(v, str), "a string"),
            duration=field("duration", 0, lambda v: isinstance(v, int), "an integer"),
            genre=field("genre", "", lambda v: isinstance(v, str), "a string"),
            rating=float(
                field("rating", 0.0, lambda v: isinstance(v, (int, float)), "a number")
            ),
        )


class RepeatMode(IntEnum):
    """How navigation behaves at the ends of the playlist."""

    NONE = 0
    ONE = 1
    ALL = 2

    def __str__(self) -> str:
        return self.name.lower()


def _encode_track(track: Track) -> str:
    text = json.dumps(track.to_dict(), ensure_ascii=False, separators=(",", ":"))
    for char, escape in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escape)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _decode_track(line: str) -> Track:
    try:
        raw = base64.b64decode(line, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise PlaylistFormatError(f"ошибка декодирования Base64: {exc}") from exc
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PlaylistFormatError(f"ошибка десериализации трека: {exc}") from exc
    if data is None:
        data = {}
    try:
        return Track.from_dict(data)
    except PlaylistFormatError as exc:
        raise PlaylistFormatError(f"ошибка десериализации трека: {exc}") from exc


class Playlist:
    """An ordered collection of tracks with a current position."""

    def __init__(self, name: str, rng: random.Random | None = None) -> None:
        self.name = name
        self._tracks: list[Track] = []
        self._current_index = 0
        self._repeat_mode = RepeatMode.NONE
        self._rng = rng or random.Random()

    @property
    def tracks(self) -> tuple[Track, ...]:
        return tuple(self._tracks)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def repeat_mode(self) -> RepeatMode:
        return self._repeat_mode

    def add_track(self, track: Track) -> None:
        """Append ``track`` to the end of the playlist."""
        self._tracks.append(track)
        logger.info("Трек '%s' добавлен в плейлист '%s'", track.name, self.name)

    def delete_track(self, track_name: str) -> bool:
        """Remove the first track named ``track_name``; return whether one was found."""
        for position, track in enumerate(self._tracks):
            if track.name == track_name:
                del self._tracks[position]
                if not self._tracks:
                    self._current_index = 0
                elif self._current_index >= len(self._tracks):
                    self._current_index = len(self._tracks) - 1
                logger.info("трек '%s' удален из плейлиста", track_name)
                return True
        logger.info("Трек '%s' не найден в плейлисте", track_name)
        return False

    def shuffle(self) -> None:
        """Shuffle the tracks and move to the first one."""
        if not self._tracks:
            logger.info("Плейлист пуст, нечего перемешивать")
            return
        self._rng.shuffle(self._tracks)
        self._current_index = 0
        logger.info("Плейлист перемешан")

    def set_repeat_mode(self, mode: RepeatMode) -> None:
        self._repeat_mode = RepeatMode(mode)
        logger.info("Режим повтора установлен на: %s", self._repeat_mode)

    def current_track(self) -> Track | None:
        """Return the track at the current position, or None if there is none."""
        if 0 <= self._current_index < len(self._tracks):
            return self._tracks[self._current_index]
        return None

    def next_track(self) -> Track | None:
        """Advance to the next track according to the repeat mode and return it."""
        if not self._tracks:
            logger.info("Плейлист пуст")
            return None
        if self._repeat_mode is RepeatMode.ONE:
            return self.current_track()

        next_index = self._current_index + 1
        if next_index < len(self._tracks):
            self._current_index = next_index
        elif self._repeat_mode is RepeatMode.ALL:
            self._current_index = 0
            logger.info("Плейлист зациклен, воспроизведение с начала")
        else:
            self._current_index = 0
            logger.info("Достигнут конец плейлиста")
        return self.current_track()

    def prev_track(self) -> Track | None:
        """Step back to the previous track according to the repeat mode and return it."""
        if not self._tracks:
            logger.info("Плейлист пуст")
            return None
        if self._repeat_mode is RepeatMode.ONE:
            return self.current_track()

        prev_index = self._current_index - 1
        if prev_index >= 0:
            self._current_index = prev_index
        elif self._repeat_mode is RepeatMode.ALL:
            self._current_index = len(self._tracks) - 1
            logger.info("Плейлист зациклен, воспроизведение с конца")
        else:
            self._current_index = 0
            logger.info("Достигнуто начало плейлиста")
        return self.current_track()

    def render(self) -> str:
        """Return the playlist as a text table."""
        lines = [
            "",
            f"   Плейлист: {self.name}   ",
            f"Режим повтора: {self._repeat_mode}",
            _RULE,
            f"{'№':<4} | {'Название':<30} | {'Длительность':<10} | {'Жанр':<15} | {'Рейтинг':<6}",
            _RULE,
        ]
        for position, track in enumerate(self._tracks):
            marker = "Play" if position == self._current_index else " "
            lines.append(
                f"{marker}{position + 1:<3} | {track.name:<30} | "
                f"{_format_duration(track.duration):<10} | {track.genre:<15} | "
                f"{track.rating:<6.1f}"
            )
        lines.append(_RULE)
        current = self.current_track()
        if current is not None:
            lines.append(f"Сейчас играет: {current.name}")
        return "\n".join(lines)

    def display(self) -> None:
        """Write the playlist table to standard output."""
        table = self.render()
        out = sys.stdout
        out.write(table)
        out.write("\n")
        out.flush()

    def find_tracks_in_time_range(
        self, n: int, min_duration: int, max_duration: int
    ) -> list[str]:
        """Return names of up to ``n`` tracks whose duration lies in the inclusive range.

        A non-positive ``n`` never reaches the limit, so all matches are returned.
        """
        result: list[str] = []
        for track in self._tracks:
            if min_duration <= track.duration <= max_duration:
                result.append(track.name)
                if len(result) == n:
                    break
        return result

    def save_to_file(self, filename: str) -> None:
        """Write each track as a Base64-encoded JSON line."""
        with open(filename, "w", encoding="ascii", newline="\n") as handle:
            for track in self._tracks:
                handle.write(_encode_track(track) + "\n")
        logger.info("Плейлист успешно сохранен в файл: %s", filename)

    def load_from_file(self, filename: str) -> None:
        """Replace the tracks with those read from ``filename``; blank lines are skipped."""
        new_tracks: list[Track] = []
        with open(filename, encoding="utf-8", newline="") as handle:
            for raw_line in handle:
                line = raw_line[:-1] if raw_line.endswith("\n") else raw_line
                if line.endswith("\r"):
                    line = line[:-1]
                if not line:
                    continue
                new_tracks.append(_decode_track(line))

        self._tracks = new_tracks
        self._current_index = 0
        logger.info(
            "Плейлист успешно загружен из файла: %s (%d треков)", filename, len(self._tracks)
        )


SAMPLE_TRACKS = (
    Track("Come as you are", 354, "Rock", 8.3),
    Track("Самый лучший эмо панк", 282, "Rock", 9.9),
    Track("Кайен", 183, "Pop", 9.1),
    Track("Улица сталеваров", 391, "Pop", 7.6),
    Track("Heart-ShapedBox", 294, "Grunge", 9.2),
    Track("Smells Like Teen Spirit", 301, "Grunge", 10.0),
)


def _name_of(track: Track | None) -> str:
    return track.name if track is not None else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate the playlist: navigation, shuffling, repeat, search and file round trip."""
    parser = argparse.ArgumentParser(description="Playlist demonstration.")
    parser.add_argument("--file", default="playlist.txt", help="file to save and load")
    args = parser.parse_args(argv)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    playlist = Playlist("Лучший плейлист")
    for track in SAMPLE_TRACKS:
        playlist.add_track(Track(track.name, track.duration, track.genre, track.rating))
    playlist.display()

    print("\n--- Навигация ---")
    print(f"Текущий трек: {_name_of(playlist.current_track())}")
    playlist.next_track()
    print(f"Следующий трек: {_name_of(playlist.current_track())}")
    playlist.prev_track()
    print(f"Предыдущий трек: {_name_of(playlist.current_track())}")

    print("\n--- Перемешивание ---")
    playlist.shuffle()
    playlist.display()

    print("\n--- Режимы повтора ---")
    playlist.set_repeat_mode(RepeatMode.ONE)
    print(f"Повтор одного трека: {_name_of(playlist.current_track())}")
    playlist.next_track()
    print(f"После next с repeat one: {_name_of(playlist.current_track())}")
    playlist.set_repeat_mode(RepeatMode.ALL)
    playlist.next_track()

    print("\n--- Поиск треков ---")
    found = playlist.find_tracks_in_time_range(3, 180, 360)
    print(f"Найдено треков длительностью от 3 до 6 минут: [{' '.join(found)}]")

    print("\n--- Удаление трека ---")
    playlist.delete_track("Улица сталеваров")
    playlist.display()

    print("\n--- Сохранение и загрузка ---")
    try:
        playlist.save_to_file(args.file)
    except OSError as exc:
        print(f"Ошибка сохранения: не удалось создать файл: {exc}")

    loaded = Playlist("Загруженный плейлист")
    try:
        loaded.load_from_file(args.file)
    except (OSError, PlaylistFormatError) as exc:
        print(f"ошибка загрузки: {exc}")
    else:
        loaded.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())