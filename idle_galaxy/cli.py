"""Idle Galaxy - command line entry point.

Generates a star system (or loads a saved one), advances it through time
and prints a summary of its planets and civilizations.
"""

import argparse
import logging
import sys

from .engine.errors import SystemValidationError
from .engine.system_generator import GenerationParams, generate_system
from .engine.time_advance import TimeAdvanceEngine
from .models.catalogs import STAR_TYPES
from .models.star_system import StarSystem
from .utils.constants import DEFAULT_ADVANCE_YEARS, RNG_SEED_DEFAULT
from .utils.serialization import load_system, save_system


def format_system(system: StarSystem) -> str:
    """Human-readable summary of a system snapshot."""
    star = system.primary_star
    lines = [
        "=" * 60,
        f"{system.name} ({system.id})  year {system.galactic_year}",
        "=" * 60,
        f"Star: {star.type} {star.spectral_class}-class, {star.mass:.2f} Msun, "
        f"L={star.luminosity:.3f}, T={star.temperature:.0f} K, {star.evolutionary_stage}",
        f"Stability: {system.stability_index:.2f}",
        "",
    ]

    for planet in system.planets:
        lines.append(
            f"  {planet.name:<12} {planet.type:<10} a={planet.orbit.semi_major_axis:5.2f} AU  "
            f"habitability={planet.conditions.habitability:.2f}  moons={len(planet.moons)}"
        )
        civilization = planet.civilization
        if civilization is not None:
            status = "extinct" if civilization.extinct else f"pop {civilization.population:,}"
            lines.append(
                f"      {civilization.government.type}, {status}, "
                f"Kardashev {civilization.kardashev.level:.3f}"
            )

    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Idle Galaxy - procedural star systems and civilization evolution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --name Sol --planets 3                # Generate and show a system
  %(prog)s --name Sol --advance 1000 --steps 5   # Five advances of 1000 years
  %(prog)s --load sol.json --advance 100         # Continue a saved system
  %(prog)s --name Sol --save sol.json            # Save after advancing
        """,
    )

    parser.add_argument("--name", type=str, default="Nuevo Sistema", help="System name")
    parser.add_argument(
        "--star-type",
        choices=sorted(STAR_TYPES),
        default="enana_amarilla",
        help="Primary star type (default: enana_amarilla)",
    )
    parser.add_argument("--mass", type=float, default=1.0, help="Star mass in solar masses")
    parser.add_argument("--age", type=float, default=4500, help="Star age in millions of years")
    parser.add_argument("--planets", type=int, default=4, help="Number of planets (1-15)")
    parser.add_argument(
        "--seed",
        type=int,
        default=RNG_SEED_DEFAULT,
        help=f"Random seed for generation (default: {RNG_SEED_DEFAULT})",
    )
    parser.add_argument(
        "--advance",
        type=int,
        default=0,
        metavar="YEARS",
        help=f"Years per advance step (e.g. {DEFAULT_ADVANCE_YEARS})",
    )
    parser.add_argument("--steps", type=int, default=1, help="Number of advance steps")
    parser.add_argument("--load", type=str, metavar="FILE", help="Load system from JSON file")
    parser.add_argument("--save", type=str, metavar="FILE", help="Save system to JSON file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.advance < 0 or args.steps < 1:
        print("Error: --advance must be >= 0 and --steps >= 1")
        return 2

    if args.load:
        try:
            system = load_system(args.load)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error loading {args.load}: {e}")
            return 1
    else:
        params = GenerationParams(
            name=args.name,
            star_type=args.star_type,
            star_mass=args.mass,
            star_age=args.age,
            planets_count=args.planets,
        )
        try:
            system = generate_system(params, seed=args.seed)
        except SystemValidationError as e:
            print("Invalid system parameters:")
            for error in e.errors:
                print(f"  - {error}")
            return 2

    if args.advance > 0:
        engine = TimeAdvanceEngine()
        for _ in range(args.steps):
            result = engine.advance(system, args.advance)
            system = result.system
            for crisis in result.crises:
                print(f"Year {system.galactic_year}: {crisis.message}")

    print(format_system(system))

    if args.save:
        save_system(system, args.save)
        print(f"\nSaved to {args.save}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
