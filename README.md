# labkit

A collection of small, self-contained programs and classes: a quadratic
equation solver, a common-letters finder, a word-frequency counter, a
normalising time-of-day type with a family of clocks built on it, a
demonstration of object lifetimes, and an iterated three-player prisoner's
dilemma simulator.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Quadratic equations

```
labkit-quadratic 1 -3 2
```

Solves `a*x**2 + b*x + c = 0` over the reals and prints the roots
(`x1 = 2, x2 = 1` here), `x = ...` for a single root, or one of
`No real solutions`, `No solutions`, `Infinite solutions`. Without
arguments it asks for the three coefficients on standard input.

### Characters shared by every word

```
labkit-common-letters
```

Reads words from standard input until end of input (Ctrl+D) and prints,
in sorted order, the characters that occur in every word.

### Word frequencies

```
labkit-word-count input.txt output.csv
```

Splits the input on every character that is not an ASCII letter or digit,
lower-cases the words and writes a CSV with the columns
`Word,Count,Percentage`: most frequent words first, ties in alphabetical
order, percentages of the total with two decimals.

### Object lifetime demo

```
labkit-lifecycle
```

Creates time values singly, in a batch, in a list, in a deque and through
shared references, printing green start and end banners around each step.

### Prisoner's dilemma

```
labkit-dilemma AlwaysCooperate AlwaysDefect Eye4Eye --mode=fast --steps=50
```

Positional arguments name the strategies (at least three). Options:

* `--mode=detailed|fast|tournament` — `detailed` and `fast` need exactly
  three strategies, `tournament` needs four or more and plays every set of
  three. Without `--mode`, more than three strategies means `tournament`,
  otherwise `detailed`.
* `--steps=N` — rounds per match, a positive number, default 20.
* `--configs=DIR` — an existing directory holding `<Strategy>.conf` files.
* `--matrix=FILE` — an existing payoff matrix file.

`detailed` shows each round and waits for Enter before the next; `fast`
prints only the final scores; `tournament` prints each match and the totals.
Errors are reported on standard error and the command exits with status 1.

Available strategies: `AlwaysCooperate`, `AlwaysDefect`, `Eye4Eye`,
`RandomChoice`, `AdaptiveCooperator`, `ConsensusMetaStrategy`.

A strategy config is a list of `key = value` lines with numeric values;
blank lines, lines starting with `#` and lines without `=` are skipped.
`AdaptiveCooperator` reads `cooperation_threshold` (0.5),
`history_depth` (10) and `betrayal_penalty` (-5.0).

A payoff matrix file has a header line followed by
`choice;defectors;payoff` lines, where `choice` is `C` or `D` and
`defectors` is how many of the two other players defected:

```
choice;count;result
C;0;7
C;1;3
C;2;0
D;0;9
D;1;5
D;2;1
```

The values above are also the built-in defaults.

## Library use

```python
from labkit.clock_time import Time, parse_time
from labkit.clocks import CuckooClock
from labkit.quadratic import solve_quadratic

t = Time(25, 61, 3665)    # normalised to 3:02:05
t.to_seconds()            # 10925
str(t + 75)               # '3:3:20'
parse_time("10:15:30").describe()   # 'H:10 M:15 S:30'

CuckooClock(10, 15, 0).chime()      # prints and returns 'Cuckoo! Cuckoo!'

print(solve_quadratic(1, -3, 2).describe())
```

`Time` carries out-of-range or negative components into the next unit and
wraps hours modulo 24; `Time.live_count()` tells how many instances are
alive. `labkit.clocks` has `Clock`, `CuckooClock`, `WallClock`,
`SmartWatch` and `SigmaClock`.

The dilemma engine lives in `labkit.dilemma`: `GameMatrix` scores a round,
`History` records choices, `create_strategy` and `register_strategy` build
strategies by name, `Renderer` writes the output and `Simulation` runs the
three modes (`run_detailed`, `run_fast`, `run_tournament`).

## What is not included

The package has no bit-array type and no sound (WAV) processing, and no
command for either. Its time type always normalises; there is no variant
that rejects negative components or raises on underflowing subtraction.