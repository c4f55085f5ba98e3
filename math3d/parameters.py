"""Output parameters and command line parsing for the ``math3d`` tool.

Parameters are layered from lowest to highest precedence:

1. Dataclass defaults.
2. JSON file (``--config``): persistent preferences.
3. Environment variables (``MATH3D_PRECISION``, ``MATH3D_FORMAT``,
   ``MATH3D_LOG_LEVEL``): shell or CI tweaks.
4. CLI flags: per-invocation overrides.

The library modules never read these; only the command line front end does.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
import argparse
import json
import logging
import os

__all__ = [
    "OutputParameters",
    "apply_overrides",
    "build_parser",
    "load_env_overrides",
    "load_json_config",
    "load_parameters",
    "parse_cli_overrides",
]

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_PREFIX = "MATH3D_"


@dataclass(slots=True)
class OutputParameters:
    """Canonical set of adjustable output parameters."""

    precision: int = 6  # Decimal places in text output
    output_format: str = "text"
    log_level: str = "WARNING"

    def validate(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError("Precision must be an integer")
        if not 0 <= self.precision <= 17:
            raise ValueError("Precision must be within [0, 17]")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format '{self.output_format}'")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OutputParameters":
        base = cls()
        merged = {**asdict(base), **data}
        unknown = set(merged) - set(asdict(base))
        if unknown:
            raise KeyError(f"Unknown parameter '{sorted(unknown)[0]}'")
        if isinstance(merged.get("log_level"), str):
            merged["log_level"] = merged["log_level"].strip().upper()
        if isinstance(merged.get("output_format"), str):
            merged["output_format"] = merged["output_format"].strip().lower()
        params = cls(**merged)
        params.validate()
        return params


def load_json_config(path: Path | str | None) -> Dict[str, Any]:
    """Load the JSON config file or return an empty dict if none was given."""

    if path is None:
        return {}
    json_path = Path(path)
    if not json_path.exists():
        raise FileNotFoundError(f"Config file not found: {json_path}")
    data = json.loads(json_path.read_text(encoding="utf-8"))
    if not isinstance(data, Mapping):
        raise ValueError("Top-level JSON config must be an object")
    logging.info("Loaded config %s", json_path)
    return dict(data)


def load_env_overrides(environ: Mapping[str, str] | None = None) -> Dict[str, Any]:
    """Read ``MATH3D_*`` variables; empty values are ignored."""

    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    precision = env.get(ENV_PREFIX + "PRECISION")
    if precision not in (None, ""):
        try:
            overrides["precision"] = int(precision)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}PRECISION must be an integer, got {precision!r}") from None
    output_format = env.get(ENV_PREFIX + "FORMAT")
    if output_format not in (None, ""):
        overrides["output_format"] = output_format.strip().lower()
    log_level = env.get(ENV_PREFIX + "LOG_LEVEL")
    if log_level not in (None, ""):
        overrides["log_level"] = log_level.strip().upper()
    return overrides


def apply_overrides(base: OutputParameters, overrides: Mapping[str, Any]) -> OutputParameters:
    """Return a copy of ``base`` with overrides applied."""

    merged = base.to_dict()
    for key, value in overrides.items():
        if key not in merged:
            raise KeyError(f"Unknown parameter '{key}'")
        merged[key] = value
    return OutputParameters.from_dict(merged)


def _add_point_pair(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("p1", type=float, nargs=3, metavar=("X1", "Y1", "Z1"))
    parser.add_argument("p2", type=float, nargs=3, metavar=("X2", "Y2", "Z2"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="math3d",
        description="Point and vector arithmetic from the command line",
    )
    parser.add_argument("--config", type=str, help="Path to JSON config", default=None)
    parser.add_argument("--precision", type=int, help="Decimal places in text output")
    parser.add_argument("--format", type=str, choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--log-level", type=str, choices=LOG_LEVELS, help="Logging level")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Shortcut for --log-level DEBUG",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    for name, help_text in (
        ("distance", "Euclidean distance between two points"),
        ("delta", "Displacement (dx, dy, dz) from the first point to the second"),
        ("slope", "Direction cosines (xy, xz, yz) of the line between two points"),
    ):
        _add_point_pair(commands.add_parser(name, help=help_text))

    line = commands.add_parser("line", help="Points along the line through two points")
    _add_point_pair(line)
    line.add_argument(
        "--t",
        type=float,
        nargs="+",
        required=True,
        metavar="T",
        help="Line parameter(s); 0 is the first point, 1 the second",
    )

    for name, help_text in (
        ("length", "Euclidean norm of a vector"),
        ("length-squared", "Squared Euclidean norm of a vector"),
        ("manhattan", "Sum of absolute component values"),
        ("normalize", "Unit vector in the same direction (zero stays zero)"),
    ):
        vector = commands.add_parser(name, help=help_text)
        vector.add_argument("components", type=float, nargs="+", metavar="C")

    basis = commands.add_parser("basis", help="Standard basis of dimension N")
    basis.add_argument("n", type=int, metavar="N")

    return parser


def parse_cli_overrides(
    args: Optional[Iterable[str]] = None,
) -> Tuple[Dict[str, Any], argparse.Namespace]:
    """Parse the command line; return parameter overrides and the namespace."""

    parser = build_parser()
    parsed, unknown = parser.parse_known_args(args=None if args is None else list(args))
    # Logged by the caller once logging is configured.
    parsed.unknown_args = unknown
    overrides: Dict[str, Any] = {}
    if parsed.precision is not None:
        overrides["precision"] = parsed.precision
    if parsed.format is not None:
        overrides["output_format"] = parsed.format
    if parsed.log_level is not None:
        overrides["log_level"] = parsed.log_level
    if parsed.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides, parsed


def load_parameters(
    config_path: Path | str | None,
    cli_overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> OutputParameters:
    """Load parameters using the JSON → environment → CLI precedence chain."""

    data = load_json_config(config_path)
    params = OutputParameters.from_dict(data)
    env_overrides = load_env_overrides(environ)
    if env_overrides:
        params = apply_overrides(params, env_overrides)
    if cli_overrides:
        params = apply_overrides(params, cli_overrides)
    return params
