# lasertag

A simulation of a laser tag arena in which every player runs in its own
thread. A doorman lets players in, in groups of random size. Players pick a
team, take a vest, a helmet and a gun from the shelf, wait for both teams to
fill, and then shoot at random living opponents. A manager starts each match,
heals the players at regular intervals and ends the match when time runs out
or one team has nobody left playing. When a match is over, the players leave
their team and hand their equipment to the cleaner, who puts it back on the
shelf. The doorman signs each finished player out.

## Installing

```
pip install .
```

## Running

```
lasertag
```

runs the simulation with the default settings: 25 players per team, 10
matches of at most 500 ms each, and seed 12345. The run parameters, the
progress of each player and match, the match results and the final counters
are printed to standard output.

Every setting can be changed on the command line. Each option takes a fixed
number of integer values, in order:

```
lasertag -j players_per_team
         -g group_min group_max
         -d damage_min damage_max damage_heal
         -c delay_min delay_max delay_manager delay_cleaner
         -p matches_max match_time_max
         -s seed
         -h
```

Delays and match times are in milliseconds. `-h` prints the list of options
and exits with status 1; an unknown option, a missing value, or a
non-positive number of players per team, matches or match time prints an
error and the list of options to standard error and also exits with status 1.

For example, a short run with small teams:

```
lasertag -j 3 -p 2 200 -s 7
```

## Using it from Python

```python
from lasertag.config import Config
from lasertag.arena import Arena

arena = Arena(Config(players_per_team=3, matches_max=2))
stats = arena.run()
print(stats.matches_played, stats.players_killed)
print(arena.report())
```

`Arena.run` starts the manager and the doorman in their own threads, waits
for both to finish and returns the run's `SimStats` counters. The doorman
starts one thread per player; the cleaner works inside the player threads
that hand it their equipment. `Arena.report` returns a text summary of the
counters and whether the shelf holds all of its equipment again.

Progress messages go to the `lasertag` logger at INFO level; configure
`logging` to see them when using the package from Python.

`lasertag.cli.parse_args` turns a list of command-line arguments into a
`Config` and raises `lasertag.cli.UsageError` for a bad command line or when
help is requested.

## Running the tests

```
pip install ".[test]"
pytest
```