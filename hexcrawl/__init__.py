"""Game logic for a top-down dungeon crawler: pathfinding, effects, projectiles, inventory, saves and HUD values."""

__version__ = "0.1.0"