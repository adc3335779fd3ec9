#!/usr/bin/env python3
"""Starforge - command-line galaxy generator.

Generates a galaxy tree into in-memory repositories, prints a summary and
optionally saves it as a JSON snapshot.
"""

import argparse
import asyncio
import logging
import sys

from starforge.engine.commands import GalaxyCommands
from starforge.models import GalaxyShape, GalaxyTree
from starforge.repositories.memory import InMemoryUnitOfWorkFactory
from starforge.utils.constants import RNG_SEED_DEFAULT
from starforge.utils.errors import StarforgeError
from starforge.utils.ids import new_id
from starforge.utils.serialization import load_galaxy_tree, save_galaxy_tree


async def generate_tree(args: argparse.Namespace) -> GalaxyTree:
    commands = GalaxyCommands(InMemoryUnitOfWorkFactory(), seed=args.seed)
    galaxy = await commands.create_galaxy(
        owner_id=new_id(),
        name=args.name,
        shape=args.shape,
        system_count=args.systems,
    )
    return await commands.populate_galaxy(galaxy.id)


def print_tree(tree: GalaxyTree) -> None:
    galaxy = tree.galaxy
    counts = tree.counts()
    print("\n" + "=" * 60)
    print(f"{galaxy.name} ({galaxy.shape.value})")
    print("=" * 60)
    for node in tree.systems:
        pos = node.system.position
        stars = ", ".join(f"{s.name} [{s.star_type.value}]" for s in node.stars)
        moons = sum(len(p.moons) for p in node.planets)
        print(
            f"{node.system.name:<16} ({pos.x:9.1f}, {pos.y:9.1f}, {pos.z:8.1f})  "
            f"{stars} | {len(node.planets)} planets, {moons} moons, "
            f"{len(node.asteroids)} asteroids"
        )
    print("-" * 60)
    print(
        f"{counts['systems']} systems, {counts['stars']} stars, {counts['planets']} planets, "
        f"{counts['moons']} moons, {counts['asteroids']} asteroids"
    )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Starforge - procedural galaxy generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # 10-system galaxy, seed 42
  %(prog)s --shape "3-arm spiral" --systems 30
  %(prog)s --seed 7 --save andromeda.json    # Save snapshot to state/andromeda.json
  %(prog)s --load andromeda.json             # Print a saved snapshot
        """,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RNG_SEED_DEFAULT,
        help=f"Random seed for generation (default: {RNG_SEED_DEFAULT})",
    )
    parser.add_argument(
        "--shape",
        choices=[shape.value for shape in GalaxyShape],
        default=None,
        help="Galaxy shape (default: random)",
    )
    parser.add_argument(
        "--systems", type=int, default=10, help="Number of systems (default: 10)"
    )
    parser.add_argument("--name", type=str, default="Starforge", help="Galaxy name (5-15 chars)")
    parser.add_argument("--load", type=str, metavar="FILE", help="Load snapshot from JSON file")
    parser.add_argument(
        "--save", type=str, metavar="FILE", help="Save snapshot to JSON file after generation"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.load:
        print(f"Loading snapshot from {args.load}...")
        try:
            tree = load_galaxy_tree(args.load)
        except FileNotFoundError:
            print(f"Error: File {args.load} not found.")
            sys.exit(1)
        except (ValueError, KeyError) as e:
            print(f"Error loading snapshot: {e}")
            sys.exit(1)
    else:
        print(f"Generating galaxy with seed {args.seed}...")
        try:
            tree = asyncio.run(generate_tree(args))
        except StarforgeError as e:
            print(f"Error: {e.code}: {e.message}")
            sys.exit(1)

    print_tree(tree)

    if args.save:
        path = save_galaxy_tree(tree, args.save, seed=None if args.load else args.seed)
        print(f"\nSnapshot saved to {path}")


if __name__ == "__main__":
    main()
