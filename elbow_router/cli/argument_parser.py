"""
Command-line argument parser configuration with subcommands
"""

import argparse


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (init, route, batch)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='elbow-router',
        description='Orthogonal (elbow) connector routing between canvas points',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Initialize configuration
  elbow-router init                          # Create ./elbow_config.yaml
  elbow-router init --path ./my_config.yaml  # Create in custom location

  # Route a single connector
  elbow-router route 0 0 200 40              # Print intermediate points as JSON
  elbow-router route 0 0 200 40 --format svg # Print an SVG drawing

  # Route many connectors from a file
  elbow-router batch connectors.csv          # Export using config formats
  elbow-router batch connectors.parquet --formats json svg --log-level DEBUG
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # INIT SUBCOMMAND
    # ========================================================================
    init_parser = subparsers.add_parser(
        'init',
        help='Create a new configuration file',
        description='Initialize elbow-router by creating a configuration file'
    )

    init_parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing configuration file'
    )

    init_parser.add_argument(
        '--path', '-p',
        type=str,
        help='Custom path for config file (default: ./elbow_config.yaml)'
    )

    # ========================================================================
    # ROUTE SUBCOMMAND
    # ========================================================================
    route_parser = subparsers.add_parser(
        'route',
        help='Route a single connector',
        description='Compute the elbow path between two points'
    )

    for name in ('x1', 'y1', 'x2', 'y2'):
        route_parser.add_argument(name, type=float, help=f'{name} coordinate')

    route_parser.add_argument(
        '--config',
        help='Path to YAML configuration file (optional, will auto-discover)'
    )

    route_parser.add_argument(
        '--format',
        choices=['json', 'svg', 'text'],
        default='json',
        help='Output format (default: json)'
    )

    # ========================================================================
    # BATCH SUBCOMMAND
    # ========================================================================
    batch_parser = subparsers.add_parser(
        'batch',
        help='Route connectors from a CSV, Parquet or JSON file',
        description='Route every connector in a file and export the results'
    )

    batch_parser.add_argument(
        'input_file',
        help='File with start_x, start_y, end_x, end_y (and optional connector_id) columns'
    )

    batch_parser.add_argument(
        '--config',
        help='Path to YAML configuration file (optional, will auto-discover)'
    )

    batch_parser.add_argument(
        '--output-dir', '-o',
        help='Output directory (default: from configuration)'
    )

    batch_parser.add_argument(
        '--formats',
        nargs='+',
        choices=['json', 'csv', 'parquet', 'svg'],
        help='Export formats (default: from configuration)'
    )

    batch_parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Set logging level (default: INFO). Use DEBUG to see search statistics.'
    )

    return parser
