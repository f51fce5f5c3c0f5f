"""
bootstrap/entrypoints.py - Application entry points

Provides the command line interface:

    dragonboat layout --rows 10
    dragonboat balance --roster roster.json --lineup lineup.json [--comparison]
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import argparse
import json
import logging
import sys

logger = logging.getLogger("bootstrap.entrypoints")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: str = None,
    json_format: bool = False,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Logs go to stderr so that command output on stdout stays parseable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        log_format: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(log_format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)


# =============================================================================
# OUTPUT
# =============================================================================

def _read_json(path: str) -> Any:
    with open(path) as f:
        return json.load(f)


def format_layout(layout) -> str:
    """Plain-text seat table for a layout."""
    lines = [f"{layout.name} ({layout.id})"]
    for seat in layout.seats:
        side = seat.side.value if seat.side is not None else "-"
        lines.append(f"  {seat.id:<16} x={seat.x:+7.2f}  {side}")
    return "\n".join(lines)


def format_summary(summary, unit: str = "lb", decimals: int = 1, title: str = "Race lineup") -> str:
    """Plain-text balance report for one lineup tier."""
    from ..core.unit_converter import format_weight

    cg = summary.center_of_gravity
    lr = summary.left_right
    crew = summary.crew

    lines = [
        title,
        f"  Total weight:   {format_weight(cg.total_weight, unit, decimals)}",
        f"  Center of gravity: {cg.x_cg:+.3f}",
        f"  Port:           {format_weight(lr.port_weight, unit, decimals)} ({lr.port_ratio:.1f}%)",
        f"  Starboard:      {format_weight(lr.starboard_weight, unit, decimals)} ({lr.starboard_ratio:.1f}%)",
        f"  Center:         {format_weight(lr.center_weight, unit, decimals)}",
        f"  Status:         {lr.status_label} ({lr.diff:+.1f} pts)",
        f"  Crew:           {crew.male} M / {crew.female} F / {crew.other} other",
    ]
    if summary.seat_moments:
        lines.append("  Seat moments:")
        for moment in sorted(summary.seat_moments, key=lambda m: -m.moment_normalized):
            lines.append(f"    {moment.seat_id:<16} {moment.athlete_id:<12} {moment.moment_normalized:.2f}")
    return "\n".join(lines)


# =============================================================================
# COMMANDS
# =============================================================================

def _cmd_layout(parsed, config) -> int:
    from ..layout.generator import LayoutGenerator

    layout_cfg = config.layout
    rows = layout_cfg.clamp_rows(parsed.rows if parsed.rows is not None else layout_cfg.default_rows)
    generator = LayoutGenerator(
        row_spacing=parsed.spacing if parsed.spacing is not None else layout_cfg.row_spacing,
        include_drummer=layout_cfg.include_drummer and not parsed.no_drummer,
        include_steer=layout_cfg.include_steer and not parsed.no_steer,
    )
    layout = generator.generate(rows)

    if parsed.format == "json":
        print(json.dumps(layout.to_dict(), indent=2))
    else:
        print(format_layout(layout))
    return 0


def _cmd_balance(parsed, config) -> int:
    from ..assignment.session import LineupSession
    from ..roster.schemas import parse_roster

    roster = parse_roster(_read_json(parsed.roster))
    session = LineupSession(roster, config=config)
    session.load_persisted(_read_json(parsed.lineup))

    unit = parsed.unit or config.display.weight_unit
    decimals = config.display.decimals

    summaries = [("Race lineup", "primary", session.balance())]
    if parsed.comparison:
        summaries.append(("Comparison lineup", "secondary", session.comparison_balance()))

    if parsed.format == "json":
        payload: Dict[str, Any] = {
            "layout_id": session.layout.id,
            "pool": [athlete.id for athlete in session.pool()],
        }
        for _title, key, summary in summaries:
            payload[key] = summary.to_dict()
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        print(f"{session.layout.name} ({session.layout.id})")
        for title, _key, summary in summaries:
            print(format_summary(summary, unit=unit, decimals=decimals, title=title))
        print(f"Unassigned: {len(session.pool())}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dragon boat seat layout and balance tools",
        prog="dragonboat",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides configuration)",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command")

    layout_parser = subparsers.add_parser("layout", help="Print a standard seat layout")
    layout_parser.add_argument("--rows", type=int, default=None, help="Number of paddling rows")
    layout_parser.add_argument("--spacing", type=float, default=None, help="Distance between rows")
    layout_parser.add_argument("--no-drummer", action="store_true", help="Leave out the drummer seat")
    layout_parser.add_argument("--no-steer", action="store_true", help="Leave out the steersperson seat")
    layout_parser.add_argument("--format", choices=["text", "json"], default="text")

    balance_parser = subparsers.add_parser("balance", help="Report balance for a persisted lineup")
    balance_parser.add_argument("--roster", required=True, help="Roster JSON file (list of members)")
    balance_parser.add_argument("--lineup", required=True, help="Persisted lineup JSON file")
    balance_parser.add_argument("--comparison", action="store_true", help="Also report the secondary lineup")
    balance_parser.add_argument("--format", choices=["text", "json"], default="text")
    balance_parser.add_argument("--unit", default=None, help="Display unit (kg or lb)")

    return parser


def cli_main(args: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.command is None:
        parser.print_help()
        return 2

    from .config import load_config
    from ..errors.taxonomy import DragonboatError

    try:
        config = load_config(parsed.config)

        log_level = "DEBUG" if parsed.verbose else (parsed.log_level or config.logging.level)
        setup_logging(
            level=log_level,
            log_file=parsed.log_file or config.logging.log_file,
            json_format=config.logging.json_logs,
            log_format=config.logging.format,
        )

        if parsed.command == "layout":
            return _cmd_layout(parsed, config)
        return _cmd_balance(parsed, config)

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except (DragonboatError, OSError, json.JSONDecodeError) as e:
        logger.error(f"{parsed.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(cli_main())
