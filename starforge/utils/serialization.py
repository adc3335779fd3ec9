"""Galaxy tree serialization to/from JSON.

Snapshots hold every entity of a galaxy tree. Loading rehydrates each
aggregate, so derived quantities (absolute mass and radius, gravity) are
recomputed rather than read back from the file.
"""

import json
from pathlib import Path
from typing import Any

from ..models.tree import GalaxyTree

SNAPSHOT_VERSION = 1


def _resolve(filepath: str) -> Path:
    path = Path(filepath)
    if not path.is_absolute():
        # Relative paths live in the project's state directory
        state_dir = Path(__file__).parent.parent.parent / "state"
        state_dir.mkdir(exist_ok=True)
        path = state_dir / filepath
    return path


def save_galaxy_tree(tree: GalaxyTree, filepath: str, seed: int | None = None) -> Path:
    """Save a galaxy tree snapshot to a JSON file.

    Args:
        tree: Tree to save
        filepath: Destination (relative paths go to the state/ directory)
        seed: Seed the tree was generated with, recorded for replay

    Returns:
        Path written

    Example:
        save_galaxy_tree(tree, "andromeda.json")  # Saves to state/andromeda.json
    """
    path = _resolve(filepath)
    with open(path, "w") as f:
        json.dump(serialize_tree(tree, seed), f, indent=2)
    return path


def load_galaxy_tree(filepath: str) -> GalaxyTree:
    """Load a galaxy tree snapshot from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or an entity fails validation
        KeyError: If a required field is missing
    """
    with open(_resolve(filepath)) as f:
        data = json.load(f)
    return deserialize_tree(data)


def serialize_tree(tree: GalaxyTree, seed: int | None = None) -> dict[str, Any]:
    """Convert a GalaxyTree to a JSON-compatible dictionary."""
    return {
        "version": SNAPSHOT_VERSION,
        "seed": seed,
        "counts": tree.counts(),
        "galaxy": tree.to_dict(),
    }


def deserialize_tree(data: dict[str, Any]) -> GalaxyTree:
    """Reconstruct a GalaxyTree from serialize_tree() output."""
    if data.get("version") != SNAPSHOT_VERSION:
        raise ValueError(f"Unsupported snapshot version: {data.get('version')}")
    return GalaxyTree.from_dict(data["galaxy"])
