# aocdays

Solvers for a set of daily programming puzzles: days 1 to 9 and 12 to 14.
Each day is a module with `part_1(text)` and `part_2(text)` functions that
take the whole puzzle input as a string. Most return the answer as an
integer; day 14 part 2 is different (see below).

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The `aocdays` command takes a day, a part and an input file, and prints the
answer:

```
aocdays 1 1 input.txt
aocdays 7 2 input.txt
```

Options:

- `--images DIR`: where day 14 part 2 writes its frames (default `images`)
- `-v`, `--verbose`: log debug output as well as information

Day 9 is answered with the same code as day 8. The time taken is logged.

## Library use

```python
from aocdays import day01
from aocdays.helpers import load_text

text = load_text("input.txt")
print(day01.part_1(text))
print(day01.part_2(text))
```

`aocdays.cli.solve(day, part, text)` sends the input to the right day and
part and returns the answer as a string. It raises `ValueError` for a day
without a solver or a part other than 1 or 2.

Modules:

- `aocdays.helpers`: `load_text(path)` reads a whole input file
- `aocdays.day01`: `parse_columns`; distances and similarity between two lists
- `aocdays.day02`: `parse_reports`, `is_safe`; safe reports, with and without
  removing one level
- `aocdays.day03`: `mul(a,b)` instructions, with `do` / `don't` switching
- `aocdays.day04`: word search for `XMAS` and the X-shaped `MAS`
- `aocdays.day05`: `parse_input`; page ordering rules and reordering bad updates
- `aocdays.day06`: guard patrol and obstacle spots that make loops
- `aocdays.day07`: `Equation`, `parse_equations`, `operator_combinations`,
  `evaluate`; operator placement for calibration equations
- `aocdays.day08`: `find_antennas`; antenna antinodes
- `aocdays.day12`: `label_regions`, `format_matrix`; garden regions, fence
  price by perimeter and by number of sides
- `aocdays.day13`: `parse_machines`; claw machine button presses
- `aocdays.day14`: `parse_robots`, `flood_fill`, `render_tree`,
  `grid_to_image`; robots on a wrapping 101 x 103 grid

### Day 14 part 2

`day14.part_2(text, output_dir)` moves the robots for 500 seconds. After
each second it flood-fills the empty area reached from the first free cell
of the first column, and when the filled total lies between 5000 and 10000
it saves the frame as `output<second>.png` in `output_dir`. It returns the
list of saved seconds; the command prints them comma-separated. The picture
is then found by looking at the images.

## What it does not do

There are no solvers for days 10, 11 or 15 onward. The command does not
download puzzle input or submit answers; it only reads a local file and
prints the result.