"""
Command-line interface for Circuit Lab.

Check which components are powered, run the challenges, and validate
circuits without the editor.

Usage::

    python -m cli power circuit.json
    python -m cli power circuit.json --format json
    python -m cli challenges circuit.json
    python -m cli validate circuit.json
"""

import argparse
import json
import logging
import sys

from controllers.file_controller import load_circuit
from grading.challenges import evaluate_challenges
from models.circuit import CircuitModel
from simulation.circuit_validator import validate_circuit
from simulation.power_propagation import check_powered

__version__ = "0.1.0"


def try_load_circuit(filepath: str) -> tuple[CircuitModel | None, str]:
    """Load and validate a circuit JSON file without exiting.

    Returns:
        (model, "") on success, or (None, error_message) on failure.
    """
    try:
        return load_circuit(filepath), ""
    except FileNotFoundError:
        return None, f"file not found: {filepath}"
    except json.JSONDecodeError as e:
        return None, f"invalid JSON in {filepath}: {e}"
    except (ValueError, KeyError, TypeError) as e:
        return None, f"invalid circuit file: {e}"
    except OSError as e:
        return None, f"cannot read {filepath}: {e}"


def _load_or_exit(filepath: str) -> CircuitModel:
    """Load a circuit, printing the error and exiting with status 1 on failure."""
    model, error = try_load_circuit(filepath)
    if model is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return model


def cmd_power(args: argparse.Namespace) -> int:
    """Print the ids of the powered components."""
    model = _load_or_exit(args.circuit)
    powered = sorted(check_powered(model.components, model.wires))

    if args.format == "json":
        print(json.dumps({"powered": powered}, indent=2))
        return 0

    if not powered:
        print("No components are powered.")
        return 0
    for comp_id in powered:
        comp = model.components[comp_id]
        print(f"{comp_id:>4}  {comp.definition.label}")
    return 0


def cmd_challenges(args: argparse.Namespace) -> int:
    """Evaluate every challenge; exit status 0 only if all pass."""
    model = _load_or_exit(args.circuit)
    results = evaluate_challenges(model.components, model.wires)

    if args.format == "json":
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for r in results:
            status = "PASS" if r.passed else "FAIL"
            print(f"{r.challenge_id:>3}  {r.title:<20} {status}")
        passed = sum(1 for r in results if r.passed)
        print(f"\n{passed}/{len(results)} challenges passed")

    return 0 if all(r.passed for r in results) else 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Report connectivity errors and warnings."""
    model = _load_or_exit(args.circuit)
    is_valid, errors, warnings = validate_circuit(model.components, model.wires)

    if is_valid:
        print(f"Circuit is valid: {args.circuit}")
        for warning in warnings:
            print(f"  Warning: {warning}")
        return 0

    print(f"Circuit has errors: {args.circuit}", file=sys.stderr)
    for err in errors:
        print(f"  - {err}", file=sys.stderr)
    for warning in warnings:
        print(f"  Warning: {warning}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="circuit-lab",
        description="Circuit Lab: check powered components and challenges from the command line.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    power_parser = subparsers.add_parser("power", help="List the powered components")
    power_parser.add_argument("circuit", help="Path to circuit JSON file")
    power_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format (default: text)")

    ch_parser = subparsers.add_parser("challenges", help="Evaluate the built-in challenges")
    ch_parser.add_argument("circuit", help="Path to circuit JSON file")
    ch_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format (default: text)")

    val_parser = subparsers.add_parser("validate", help="Check circuit wiring for problems")
    val_parser.add_argument("circuit", help="Path to circuit JSON file")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    handlers = {
        "power": cmd_power,
        "challenges": cmd_challenges,
        "validate": cmd_validate,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
