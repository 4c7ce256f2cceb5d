"""CLI entrypoint for simulating and rendering robot runs.

This module owns argument parsing and subcommand dispatch. All domain logic
lives in the extracted modules:

- ``mars_robots.io.parser``           – text input -> ``SimulationInput``
- ``mars_robots.simulation.engine``   – sequential simulation with scents
- ``mars_robots.io.report``           – text/JSON outcome formatting
- ``mars_robots.io.persistence``      – Parquet/JSON run artifacts
- ``mars_robots.viz.render``          – matplotlib path figures
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from mars_robots.config.constants import (
    CELL_SIZE_INCHES,
    DEFAULT_OUT_DIR,
    FIGURE_DPI,
    MAX_GRID_COORDINATE,
    MAX_INSTRUCTION_LENGTH,
)
from mars_robots.config.types import OutputFormat, ParseConfig, RenderConfig, RunConfig
from mars_robots.io.errors import InputParseError
from mars_robots.io.parser import parse_input
from mars_robots.io.persistence import read_run, write_run
from mars_robots.io.report import format_report, run_summary
from mars_robots.simulation.engine import run_simulation
from mars_robots.viz.render import render_paths
from mars_robots.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Config resolution: CLI flag > config file > default
# ---------------------------------------------------------------------------

_T = TypeVar("_T")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _coerce_bool(raw: object, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    word = raw.strip().lower() if isinstance(raw, str) else None
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"{key} must be true or false, got {raw!r}")


def _coerce_int(raw: object, key: str) -> int:
    """JSON numbers only; integral floats such as ``150.0`` are accepted."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    raise ValueError(f"{key} must be an integer, got {raw!r}")


def _coerce_float(raw: object, key: str) -> float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    raise ValueError(f"{key} must be a number, got {raw!r}")


def _coerce_str(raw: object, key: str) -> str:
    if isinstance(raw, (str, Path)):
        return str(raw)
    raise ValueError(f"{key} must be a string, got {raw!r}")


def _resolve(
    cli_val: object,
    key: str,
    file_cfg: dict[str, object],
    default: object,
    coerce: Callable[[object, str], _T],
) -> _T:
    raw = cli_val if cli_val is not None else file_cfg.get(key, default)
    return coerce(raw, key)


def _resolve_path(cli_val: Path | None, key: str, file_cfg: dict[str, object]) -> Path | None:
    raw = cli_val if cli_val is not None else file_cfg.get(key)
    return None if raw is None else Path(_coerce_str(raw, key))


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    """Read the optional JSON config file; errors exit through ``parser.error``."""
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    except OSError as exc:
        parser.error(f"Cannot read config file {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def build_run_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Resolve every ``run`` setting from CLI flags, then config file, then defaults."""
    output_format_raw = _resolve(
        args.format, "output_format", file_cfg, OutputFormat.TEXT.value, _coerce_str
    )
    try:
        output_format = OutputFormat(output_format_raw)
    except ValueError as exc:
        valid = ", ".join(fmt.value for fmt in OutputFormat)
        raise ValueError(f"output_format must be one of {valid}") from exc

    # argparse checks --theme against the registry; config-file values are checked here
    theme = _resolve(args.theme, "theme", file_cfg, "default", _coerce_str)
    get_theme(theme)

    out_dir = _resolve_path(args.out_dir, "out_dir", file_cfg)
    input_raw = _resolve(args.input, "input_path", file_cfg, "-", _coerce_str)
    parse_config = ParseConfig(
        strict=_resolve(args.strict, "strict", file_cfg, False, _coerce_bool),
        max_coordinate=_resolve(
            None, "max_coordinate", file_cfg, MAX_GRID_COORDINATE, _coerce_int
        ),
        max_instruction_length=_resolve(
            None, "max_instruction_length", file_cfg, MAX_INSTRUCTION_LENGTH, _coerce_int
        ),
        allow_forward_alias=_resolve(
            args.forward_alias, "allow_forward_alias", file_cfg, True, _coerce_bool
        ),
    )
    render_config = RenderConfig(
        dpi=_resolve(args.dpi, "dpi", file_cfg, FIGURE_DPI, _coerce_int),
        cell_size=_resolve(None, "cell_size", file_cfg, CELL_SIZE_INCHES, _coerce_float),
        show_scents=_resolve(args.show_scents, "show_scents", file_cfg, True, _coerce_bool),
        show_visit_heatmap=_resolve(
            args.heatmap, "show_visit_heatmap", file_cfg, False, _coerce_bool
        ),
        theme=theme,
    )
    return RunConfig(
        input_path=None if input_raw == "-" else Path(input_raw),
        out_dir=out_dir or Path(DEFAULT_OUT_DIR),
        persist=out_dir is not None,
        render_path=_resolve_path(args.render, "render_path", file_cfg),
        output_format=output_format,
        parse=parse_config,
        render=render_config,
    )


# ---------------------------------------------------------------------------
# Parser construction
# ---------------------------------------------------------------------------


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)
    parser.add_argument("--dpi", type=int, default=None)
    parser.add_argument(
        "--heatmap",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Shade grid points by how many robots visited them",
    )
    parser.add_argument("--show-scents", action=argparse.BooleanOptionalAction, default=None)


def _build_run_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("run", help="Simulate robots from an input file")
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Input file path, or '-' to read stdin",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Persist outcomes, paths and scents under this directory",
    )
    parser.add_argument("--render", type=Path, default=None, help="Write a path figure here")
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enforce grid-size and instruction-length limits",
    )
    parser.add_argument(
        "--forward-alias",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Accept 'M' as move-forward",
    )
    _add_render_options(parser)


def _build_render_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("render", help="Render a previously persisted run")
    parser.add_argument("--out-dir", type=Path, required=True)
    parser.add_argument("--output", type=Path, required=True)
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Reject output paths that resolve outside this directory",
    )
    _add_render_options(parser)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mars-robots", description="Simulate robots on a bounded grid with scent memory"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default="WARNING",
    )
    subparsers = parser.add_subparsers(dest="command")
    _build_run_parser(subparsers)
    _build_render_parser(subparsers)
    return parser


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _handle_run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    file_cfg = _load_config_file(parser, args.config)
    try:
        config = build_run_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        text = _read_input(config.input_path)
    except FileNotFoundError:
        parser.error(f"Input file not found: {config.input_path}")
    except UnicodeDecodeError as exc:
        source = config.input_path or "stdin"
        parser.error(f"Input is not valid UTF-8: {source}: {exc.reason} at byte {exc.start}")
    except OSError as exc:
        parser.error(f"Cannot read input {config.input_path}: {exc}")

    try:
        simulation_input = parse_input(text, config.parse)
    except InputParseError as exc:
        parser.error(str(exc))
    logger.info(
        "loaded %d robots from %s",
        len(simulation_input.robots),
        config.input_path or "stdin",
    )

    run = run_simulation(simulation_input)

    if config.persist:
        write_run(
            run,
            config.out_dir,
            n_instructions=[len(robot.instructions) for robot in simulation_input.robots],
        )
    if config.render_path is not None:
        render_paths(run, config.render_path, config.render)

    if config.output_format is OutputFormat.JSON:
        print(json.dumps(run_summary(run), ensure_ascii=False, indent=2))
    else:
        report = format_report(run)
        if report:
            print(report)


def _handle_render(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        render_config = RenderConfig(
            dpi=args.dpi if args.dpi is not None else FIGURE_DPI,
            show_scents=True if args.show_scents is None else args.show_scents,
            show_visit_heatmap=bool(args.heatmap),
            theme=args.theme or "default",
        )
        run = read_run(args.out_dir)
        output = render_paths(run, args.output, render_config, base_dir=args.base_dir)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
    print(output)


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    ``run`` supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        _handle_run(parser, args)
    elif args.command == "render":
        _handle_render(parser, args)
    else:
        parser.print_help()
        sys.exit(2)


if __name__ == "__main__":
    main()
