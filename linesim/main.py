# linesim/main.py

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from linesim.api.schemas import SimulationConfig, parse_config
from linesim.errors import InvalidConfiguration
from linesim.simulation.engine import SimulationEngine

MACHINE_PROMPTS = [
    ("raw_material", "Enter the number of machines for raw material handling: "),
    ("machining", "Enter the number of machines for machining: "),
    ("assembly", "Enter the number of machines for assembly: "),
    ("quality_control", "Enter the number of machines for quality control: "),
    ("packaging", "Enter the number of machines for packaging: "),
]

PARAMETER_PROMPTS = [
    ("setup_time", "Enter the setup change time: "),
    ("maintenance_interval", "Enter the maintenance interval: "),
    ("shift_length", "Enter the shift length: "),
]


def _read_int(prompt: str, read: Callable[[str], str]) -> int:
    raw = read(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"Expected a whole number, got {raw!r}") from None


def prompt_config(read: Optional[Callable[[str], str]] = None, seed: Optional[int] = None,
                  max_time: Optional[int] = None) -> SimulationConfig:
    """Ask for the eight line parameters in order and validate them."""
    read = read or input
    machine_counts = {field: _read_int(prompt, read) for field, prompt in MACHINE_PROMPTS}
    values: Dict[str, object] = {field: _read_int(prompt, read) for field, prompt in PARAMETER_PROMPTS}
    values["machine_counts"] = machine_counts
    values["seed"] = seed
    if max_time is not None:
        values["max_time"] = max_time
    return parse_config(values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Discrete-event simulation of a five-stage production line")
    parser.add_argument("--seed", type=int, default=None, help="Master seed for a reproducible run")
    parser.add_argument("--max-time", type=int, default=None, help="Simulation horizon (default 100)")
    parser.add_argument("--verbose", action="store_true", help="Log scheduling detail")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Event blocks go to stdout exactly as rendered
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )

    try:
        config = prompt_config(seed=args.seed, max_time=args.max_time)
    except InvalidConfiguration as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    engine = SimulationEngine(config)
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
