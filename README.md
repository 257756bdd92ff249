# labkit

A small collection of classic exercises as a Python package with no third-party
dependencies:

- `labkit.algorithms`: `in_array`, `find_second_max`, `binary_search` and
  `multiplication_table`.
- `labkit.merge_sort`: `merge_sort` and `merge`, `generate_random_array`, and the
  measurements `measure_time` (seconds) and `measure_memory` (peak allocation in KB,
  taken with `tracemalloc`).
- `labkit.brackets`: a character `Stack` (`push`, `pop`, `peek`, `is_empty`, `clear`,
  `len()`) and the checks `is_valid` and `is_valid_only_parentheses`.
- `labkit.playlist`: `Track`, `RepeatMode` (`NONE`, `ONE`, `ALL`), `Playlist` and
  `PlaylistFormatError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from labkit.algorithms import binary_search, find_second_max, in_array, multiplication_table
from labkit.merge_sort import merge_sort
from labkit.brackets import Stack, is_valid, is_valid_only_parentheses
from labkit.playlist import Playlist, RepeatMode, Track

binary_search([1, 3, 5, 7], 5)       # 2 (or -1 when absent)
find_second_max([4, 9, 7])           # 7 (0 for fewer than two items)
multiplication_table(3)              # [[1, 2, 3], [2, 4, 6], [3, 6, 9]]
merge_sort([5, 2, 8, 1])             # [1, 2, 5, 8], a new list
is_valid("{[]}")                     # True
is_valid("([)]")                     # False
is_valid_only_parentheses("(())")    # True

stack = Stack()
stack.push("A")
stack.pop()                          # "A"; popping or peeking an empty stack raises IndexError

playlist = Playlist("Favourites")
playlist.add_track(Track(name="Intro", duration=183, genre="Pop", rating=9.1))
playlist.set_repeat_mode(RepeatMode.ALL)
playlist.next_track()                # returns the new current Track, or None if empty
print(playlist.render())             # the playlist as a text table; display() prints it
playlist.find_tracks_in_time_range(3, 180, 360)   # up to 3 names, durations inclusive
playlist.save_to_file("playlist.txt")
playlist.load_from_file("playlist.txt")
```

`Playlist` takes an optional `random.Random` as `rng`, used by `shuffle()`. The
`tracks`, `current_index` and `repeat_mode` properties are read-only. Status messages
such as "track added" are sent to the `labkit.playlist` logger rather than printed.

Playlists are saved one track per line, each line being the Base64 encoding of the
track as a JSON object with the keys `name`, `duration`, `genre` and `rating`. Blank
lines are skipped on loading; a line that is not valid Base64 or JSON raises
`PlaylistFormatError`, and the playlist is left unchanged.

## Commands

```
labkit-mergesort [SIZE ...]     # time and measure merge sort; default sizes 100 1000 5000 10000
labkit-brackets                 # run the bracket validation examples and a stack demonstration
labkit-playlist [--file PATH]   # demonstrate the playlist, saving to and loading from PATH
                                # (default playlist.txt in the current directory)
```

## What it does not do

The playlist only keeps track of names, durations, genres and ratings; it does not play
or read any audio files.