"""
Command-line entry point for elbow-router
"""

import sys
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .argument_parser import setup_argument_parser
from .config_discovery import discover_config
from .init_command import run_init_command
from .output import format_points, print_batch_summary
from ..core.batch import load_connectors, make_route_result, route_connectors
from ..core.config import RouterConfig
from ..core.exceptions import ElbowRouterError
from ..exporters import (
    export_to_dataframe,
    export_summary_to_dataframe,
    export_to_json,
    export_to_svg
)

logger = logging.getLogger(__name__)


def setup_logging(log_file: Optional[Path] = None, log_level: str = 'INFO') -> None:
    """
    Configure logging to output to console and, optionally, a file

    Args:
        log_file: Path to log file (console only when None)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def load_config(explicit_path: Optional[str] = None) -> RouterConfig:
    """Load discovered configuration, or defaults when none exists"""
    config_file = discover_config(explicit_path)
    if config_file is None:
        return RouterConfig.default()
    logger.info(f"Loading config from: {config_file}")
    return RouterConfig.from_yaml(config_file)


def run_route_command(args) -> int:
    """
    Route a single connector and print the result

    Returns:
        Exit code (0 = success, 1 = error)
    """
    config = load_config(args.config)
    router = config.build_router()

    start = (args.x1, args.y1)
    end = (args.x2, args.y2)
    points = router.route(start, end)

    if args.format == 'text':
        full = [start, *points, end]
        print(format_points(full))
    else:
        result = make_route_result('connector', start, end, points)
        if args.format == 'svg':
            print(export_to_svg(
                [result],
                corner_radius=config.corner_radius,
                stroke_width=config.stroke_width,
                stroke_color=config.stroke_color,
                padding=config.padding
            ), end='')
        else:
            print(json.dumps(result, indent=2))

    return 0


def export_results(results: List[dict], config: RouterConfig, run_dir: Path, formats: List[str]) -> List[str]:
    """
    Write batch results in every requested format

    Returns:
        Paths of files written
    """
    prefix = config.file_prefix
    exported = []

    if 'json' in formats:
        path = run_dir / f'{prefix}.json'
        export_to_json(results, str(path))
        exported.append(str(path))

    if 'csv' in formats:
        points_path = run_dir / f'{prefix}_points.csv'
        export_to_dataframe(results).write_csv(str(points_path))
        exported.append(str(points_path))

        summary_path = run_dir / f'{prefix}_summary.csv'
        export_summary_to_dataframe(results).write_csv(str(summary_path))
        exported.append(str(summary_path))

    if 'parquet' in formats:
        path = run_dir / f'{prefix}_points.parquet'
        export_to_dataframe(results).write_parquet(str(path))
        exported.append(str(path))

    if 'svg' in formats:
        path = run_dir / f'{prefix}.svg'
        export_to_svg(
            results,
            str(path),
            corner_radius=config.corner_radius,
            stroke_width=config.stroke_width,
            stroke_color=config.stroke_color,
            padding=config.padding
        )
        exported.append(str(path))

    return exported


def run_batch_command(args) -> int:
    """
    Route every connector in a file and export the results

    Returns:
        Exit code (0 = success, 1 = error)
    """
    config = load_config(args.config)

    output_dir = Path(args.output_dir) if args.output_dir else config.output_dir
    formats = args.formats or list(config.export_formats)

    run_timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = output_dir / f"routing_run_{run_timestamp}"
    run_dir.mkdir(parents=True, exist_ok=True)

    log_file = run_dir / "routing.log"
    setup_logging(log_file, log_level=args.log_level)

    print(f"📁 Routing run directory: {run_dir}")
    print(f"📝 Logs will be saved to: {log_file}")

    start_time = datetime.now()
    connectors = load_connectors(args.input_file)
    logger.info(f"Loaded {connectors.height} connectors from {args.input_file}")

    results = route_connectors(connectors, config.build_router())
    exported = export_results(results, config, run_dir, formats)

    duration = (datetime.now() - start_time).total_seconds()
    logger.info(f"Routing completed in {duration:.2f} seconds")
    print_batch_summary(results, exported)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the elbow-router CLI"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return run_init_command(force=args.force, path=args.path)

    try:
        if args.command == 'route':
            return run_route_command(args)
        return run_batch_command(args)
    except (ElbowRouterError, FileNotFoundError) as e:
        logger.error(str(e))
        print(f"❌ {e}")
        return 1
