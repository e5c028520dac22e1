# hexcrawl

Game logic for a top-down dungeon crawler that does not depend on any engine.
Each module holds plain Python state and rules. A renderer or a game loop can
drive them. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install .[test]
```

## Modules

- `hexcrawl.utils`
  - `Timer` is a countdown in seconds. It has the modes `TimerMode.ONCE` and
    `TimerMode.REPEATING`, and the methods `tick`, `finished`,
    `just_finished`, `fraction_remaining`, `pause`, `unpause` and `reset`.
  - `Lifetime` reports the tick on which an entity should be removed.
  - `FrameAnimation` steps a sprite-sheet index from its first frame to its
    last.
  - `pulsate_scale` gives a pulsing scale factor.
  - `random_weighted_index` picks an index in proportion to its weight.
- `hexcrawl.pathfinding`
  - `Graph.from_grid` builds an adjacency graph of the `TileType.FLOOR` cells
    in a grid of tiles. It leaves out diagonal moves past walls.
  - `Graph.nearest_cell`, `Graph.node_at` and `Graph.neighbours` look up
    cells and nodes.
  - `find_path` returns the cells to walk from a start position to a goal,
    without the start cell. It returns `None` when the goal cannot be reached.
  - `select_target` picks the closest target, skipping the pathfinder itself.
  - `Pathfinder` holds a mob's path, its repath timer and its speed.
- `hexcrawl.loading`
  - `LoadingScreen` animates three mob portraits and can be shown or hidden.
  - `portrait_size` gives a portrait's side length for a window width.
- `hexcrawl.teleport`
  - `find_teleport_cell` picks the first free floor `MapTile` on a ring
    around the player that has a clear line to the player, checked with
    `has_line_of_sight`.
  - `reserve_teleport` moves the mob count from the mob's tile to that cell.
- `hexcrawl.effects`
  - `Stun` tints its target and freezes its movement until the stun expires.
  - `Shield` grows in, blinks near the end of its duration and then expires.
  - `shield_parameters` and `grow_scale` are helpers for shields.
- `hexcrawl.player`
  - `PlayerStats` holds the player's stats. `bonused_damage` gives the damage
    for an element.
  - `PlayerHealth` has `damage` and `heal`.
  - `handle_death` spends an extra life to revive the player, or ends the
    game.
  - `movement_velocity` turns held WASD keys into a velocity.
  - `spawn_position` and `facing_left` are small helpers.
- `hexcrawl.projectile`
  - `Projectile` moves along a `Straight` or `Radial` trajectory with `step`.
  - `initial_angle` gives the starting angle.
  - `collision_layers` gives the projectile's layer and the layers it hits.
  - `impact_burst` gives the particle burst for an impact.
- `hexcrawl.wand`
  - `Wand.follow` moves the wand towards the player on the side of the mouse
    and turns it towards the mouse. It hides the wand when there is no
    player.
- `hexcrawl.inventory`
  - `ItemInventory` counts picked-up items with `add`, `remove` and
    `amount_of_item`. Iterating over it yields `(item, count)` pairs.
- `hexcrawl.console`
  - `parse_command` turns a line of debug console input into one of the
    commands `SpawnItem`, `SpawnExpTank`, `SpawnHealthTank`,
    `GrantInvincibility` or `GoTo`.
  - It returns `None` for commands it does not know.
  - It raises `ConsoleError` for empty input, missing arguments or malformed
    arguments.
- `hexcrawl.hud`
  - `health_bar_percent`, `health_text`, `extra_lives_text` and
    `experience_percent` give the values the bars show.
  - `element_slot_texture` and `new_slot_indices` do the same for the element
    bar.
- `hexcrawl.save`
  - `Save` records the items, mobs and spells the player has seen.
  - `Save.load` reads it from JSON and `Save.write` writes it. Both default to
    `assets/save.json`.
  - `Save.reset` clears the record and keeps only the starting spells: fire,
    water, earth and air.
- `hexcrawl.almanac`
  - `spell_entries`, `item_entries` and `mob_entries` build the almanac pages
    as `AlmanacEntry` values.
  - Entries the player has not seen show `???` and a black tint.
  - `recipe_texture` maps a recipe symbol to its texture.
- `hexcrawl.pause`
  - `PauseClock` pauses and resumes game time and physics time together.
  - `overlay_visible` tells whether the pause overlay should show.

## Example

```python
from hexcrawl.pathfinding import Graph, TileType, find_path

W, F = TileType.WALL, TileType.FLOOR
grid = [
    [W, W, W, W],
    [W, F, F, W],
    [W, F, F, W],
    [W, W, W, W],
]
graph = Graph.from_grid(grid, 32)
path = find_path(graph, (32.0, 32.0), (64.0, 64.0))
```

## What it does not do

The package does not draw anything, read input or run a game loop. The caller
advances timers and effects with frame deltas and renders the results.

There is no main menu navigation. The package builds the almanac's entries,
but it has no menu states or buttons that lead to those pages.

## Tests

```
pytest
```