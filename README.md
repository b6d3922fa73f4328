# gameresources

Small caching managers for the assets a pygame game loads: images, fonts,
audio, JSON documents and arbitrary custom data. The file-based managers
read paths relative to a root directory (the current directory by default)
and keep what they load, so later lookups return the same object.

## Installation

```
pip install gameresources
```

## Overview

`gameresources.manager.ResourceManager(root=".")` owns one `ImageManager`
(`.image`), one `FontManager` (`.font`) and one `AudioManager` (`.audio`),
all reading below the same root. It also holds any number of
`CustomManager` and `JSONManager` instances under ids you pick (any hashable
value).

```python
import pygame

from gameresources.custom import CustomManager
from gameresources.jsoncache import JSONManager
from gameresources.manager import ResourceManager

pygame.init()  # the audio mixer must be initialised before creating players

resources = ResourceManager("game")

# Images are decoded once and cached by path.
player = resources.image.get_image("assets/player.png")

# Fonts: load the bundled defaults or your own, then ask for a face.
resources.font.load_standard_fonts()
resources.font.load_font("title", "assets/title.ttf")
face = resources.font.get_face("title", 32)

# Audio: register a file under a name, then create players from it.
resources.audio.load_player("theme", "assets/theme.ogg")
music = resources.audio.get_player("theme", looping=True, volume=0.5)
music.play()

# JSON documents, parsed once and cached by path.
LEVELS = 1
resources.add_json_manager(LEVELS, JSONManager("game"))
level = resources.get_json_manager(LEVELS).get_json("assets/level1.json")

# Any other data you want to keep around.
SETTINGS = 1
resources.add_custom_manager(SETTINGS, CustomManager())
resources.get_custom_manager(SETTINGS).put("difficulty", "hard")
```

A `JSONManager` has its own root (`"."` unless given); it does not take the
`ResourceManager`'s root.

## Managers

### `gameresources.custom.CustomManager`

`put(key, value)`, `get(key)`, `remove(key)` and `clear()` for any
key/value data. Supports `in` and `len()`.

### `gameresources.jsoncache.JSONManager(root=".")`

- `get_json(path)` reads and parses the file at `path` below the root and
  caches the result under `path`.
- `get_json_bytes(key, data)` parses `data` (bytes or str) and caches the
  result under `key`. If `key` is already cached, the cached value is
  returned and `data` is not parsed.
- `put`, `get`, `remove` and `clear` work on the cache directly.

### `gameresources.images.ImageManager(root=".")`

- `get_image(path)` loads the image at `path` below the root as a
  `pygame.Surface` and caches it under `path`.
- `put`, `get`, `remove` and `clear` work on the cache directly.

### `gameresources.fonts.FontManager(root=".")`

- `load_standard_fonts()` registers pygame's bundled default font under
  `STANDARD_NORMAL`, `STANDARD_ITALIC`, `STANDARD_BOLD` and
  `STANDARD_BOLD_ITALIC`, with bold and italic applied as pygame styles.
- `load_mono_fonts()` registers a monospaced system font under
  `MONO_NORMAL`, `MONO_ITALIC`, `MONO_BOLD` and `MONO_BOLD_ITALIC`. Where no
  matching system font is found, the bundled default font is used with the
  style applied instead.
- `load_font(name, path)` registers the font file at `path` below the root;
  `load_font_data(name, data)` registers font bytes. Data that is not a
  usable font raises `FontError` (a `ValueError`).
- `get_face(name, size)` returns a `pygame.font.Font` for a registered font
  and caches it per name and size. Sizes are rounded to whole points, with a
  minimum of 1. An unknown name raises `KeyError`.
- `purge_cache()` drops the cached faces, `remove(key)` drops one font's
  data (faces already cached for it stay), and `clear()` drops both.

### `gameresources.audio.AudioManager(root=".")`

- `load_player(name, path)` registers an audio file below the root.
- `get_player(name, *, looping=False, loop_length=None, intro_length=None,
  volume=1.0)` decodes the file and returns an `AudioPlayer`. Giving
  `loop_length` or `intro_length` turns looping on. Lengths count bytes of
  the decoded sample data: the loop is that many bytes (the whole sound by
  default), starting after the intro when one is given. Volume ranges from
  0 to 1.
- Errors: `KeyError` for a name that was never registered, `OSError` when
  the file cannot be read, and `ValueError` for a file whose extension is
  not `.mp3`, `.ogg` or `.wav`.
- `clear()` forgets every registered file.

`AudioOptions` is the dataclass holding these settings.

`AudioPlayer` has `play()`, `pause()`, `resume()`, `stop()`, a `volume`
property and a read-only `playing` property. A player with an intro plays
it once, then loops the body; call `update()` once per frame to keep that
loop queued.

A looked-up key that was never stored returns `None` from every `get` and
from `ResourceManager.get_custom_manager` / `get_json_manager`.

## What it does not do

The package does not initialise pygame or its mixer for you, and it does
not watch files for changes: a cached image, face or document stays as
first loaded until removed or cleared. It has no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```