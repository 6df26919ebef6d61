# taskbench

This package holds three small programs:

- **A file menu.** An interactive prompt that overwrites a text file, appends to it or reads it.
- **A run-length encoder.** It compresses a file in 1 MiB chunks with one thread per chunk. It then decompresses the result and checks it against the original. Last, it times sequential compression against threaded compression.
- **Snake.** The arcade game, played in a pygame window.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install ".[test]"
```

## Commands

### File menu

```
taskbench-files [FILENAME]
```

`FILENAME` defaults to `data.txt`. The menu repeats until you choose 4 or input ends. Its options are:

1. Write a line to the file, replacing what was there.
2. Append a line to the file.
3. Print the file line by line.
4. Exit.

An option outside 1–4 prints `Invalid option. Please choose 1-4.`

### Run-length encoding

```
taskbench-rle [INPUT] [COMPRESSED] [DECOMPRESSED]
```

The three paths default to `input.txt`, `compressed.rle` and `output.txt`. The command runs these steps in order:

1. Compresses `INPUT` to `COMPRESSED` and prints the time taken.
2. Decompresses `COMPRESSED` to `DECOMPRESSED` and prints the time taken.
3. Reports whether `DECOMPRESSED` holds the same bytes as `INPUT`.
4. Prints the sequential time, the threaded time and the speedup.

If a file cannot be opened, or the compressed data is corrupt, the command prints `Error: ...` on standard error.

The encoded form is a sequence of byte pairs. In each pair:

- The first byte is the repeated byte.
- The second byte is the run length, from 1 to 255.

Each chunk is encoded on its own, so a run never crosses a chunk boundary.

### Snake

```
taskbench-snake
```

Controls:

- **Space** starts the game from the title screen.
- The arrow keys or **W/A/S/D** steer.
- **R** restarts after a game over.

The game ends when the snake leaves the 40×30 grid or runs into itself. Each apple scores 10 points. Each apple also shortens the move interval by 0.005 s, starting from 0.2 s. The interval stops getting shorter once it is no longer above 0.05 s.

The game loads these optional assets from the current directory:

| Asset | Path | If missing |
| --- | --- | --- |
| Font | `assets/fonts/arial.ttf`, `assets/arial.ttf` or `arial.ttf` | pygame's default font |
| Background texture | `assets/textures/background.png` | a drawn checkerboard |
| Apple texture | `assets/textures/apple.png` | a drawn apple |
| Snake head texture | `assets/textures/snake_head.png` | a drawn head |
| Snake body texture | `assets/textures/snake_body.png` | a drawn body segment |
| Sounds | `assets/sounds/eat.wav`, `assets/sounds/gameover.wav` | silence, with a warning on standard error |
| Music | `assets/sounds/background.ogg` | silence, with a warning on standard error |

## Library use

### `taskbench.filemenu`

- `write_to_file(path, text)` writes `text` and a newline to the file, replacing its contents.
- `append_to_file(path, text)` adds `text` and a newline to the end of the file.
- `read_lines(path)` returns the file's lines without their line endings.

### `taskbench.rle`

```python
from taskbench.rle import rle_compress, rle_decompress, CorruptDataError

packed = rle_compress(b"aaaabbb")          # b"a\x04b\x03"
assert rle_decompress(packed) == b"aaaabbb"

try:
    rle_decompress(b"a")                   # odd length
except CorruptDataError:
    pass
```

The module also provides these functions:

- `read_chunks(path, chunk_size)` returns the file as a list of chunks.
- `write_chunks(path, chunks)` writes the chunks to a file, one after another.
- `compress_file(input_path, output_path)` compresses a file and returns the seconds spent on the threaded work.
- `decompress_file(input_path, output_path)` decompresses a file and returns the seconds spent on the threaded work.
- `files_match(a, b)` returns `True` when both files can be opened and hold the same bytes.
- `benchmark(input_path)` returns a `BenchmarkResult` with `single_seconds`, `multi_seconds` and `speedup`.

### `taskbench.snake`, `taskbench.food` and `taskbench.game`

These three modules hold the game rules. None of them uses pygame.

```python
from taskbench.snake import Snake, Direction

snake = Snake(10, 10)             # body: (10,10), (9,10), (8,10), heading right
snake.set_direction(Direction.UP)
snake.move()
print(snake.head())               # Position(x=10, y=9)
```

`Snake.set_direction` ignores a turn straight back onto the current heading. `Snake.grow()` makes the next move keep the tail.

`Food(rng)` takes an optional `random.Random`. `Food.spawn(grid_width, grid_height, snake)` picks a cell that the snake does not occupy, trying up to 100 times.

`SnakeGame` runs a whole game without a window:

- `handle_key(name)` takes key names such as `"space"`, `"up"`, `"w"` and `"r"`.
- `update(delta_time)` moves the snake when a step is due. It returns `GameEvent.ATE`, `GameEvent.GAME_OVER` or `None`.
- `state` is a `GameState`, and `score_text()` gives the score line.

## What it does not do

- The Snake game keeps no high scores or settings between runs.
- The game has no pause.
- The game has no options for grid size or starting speed.

## Running the tests

```
pytest
```