"""Command-line entry point for the max-elevation scanner."""

import argparse
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from bodies.catalog import CatalogError, load_catalog
from domain.config import load_settings
from elevation.cache import ElevationCache
from elevation.dump import write_dump
from elevation.persistence import load_cache, save_cache
from elevation.store import SaveNode, ScenarioFile
from scheduling.precompute import PrecomputeDriver
from shared.constants import APP_NAME
from shared.diagnostics import log_comprehensive_diagnostics
from shared.progress import ConsoleProgress

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> Path:
    """Configure logging to stdout and to LOCALAPPDATA/ElevationScanner/log.

    Returns:
        Path of the log file.
    """
    local_base = Path(os.getenv('LOCALAPPDATA') or Path.home() / 'AppData' / 'Local') / APP_NAME
    log_dir = local_base / 'log'
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / 'elevation_scanner.log'

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(str(log_file), encoding='utf-8'),
        ],
        force=True,
    )
    return log_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='elevation-scanner',
        description='Find and cache the highest point of every celestial body',
    )
    parser.add_argument('--system', required=True, help='Body catalog TOML file')
    parser.add_argument('--config', help='Settings TOML file')
    parser.add_argument(
        '--save',
        help='Save file holding the persisted cache (loaded before, written after)',
    )
    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('precalc', help="Force immediate pre-calculation of all bodies' max elevation")
    dump = sub.add_parser('dump', help='Pre-calculate all bodies, then dump max elevation data to file')
    dump.add_argument('--output', help='Dump file path (defaults to the configured file name)')
    startup = sub.add_parser('startup', help='Spend a limited time pre-calculating the most relevant bodies')
    startup.add_argument('--budget-ms', type=float, help='Time budget in ms (negative: unbounded)')
    return parser


def _precompute(driver: PrecomputeDriver, budget_ms: float | None, *, show_progress: bool) -> None:
    if not show_progress:
        driver.run(budget_ms)
        return
    progress = ConsoleProgress(len(driver.scheduled_bodies()), label='Max elevation')
    try:
        driver.run(budget_ms, on_body_done=lambda _done, _total, name: progress.step_sync(detail=name))
    finally:
        progress.close()


def run(args: argparse.Namespace) -> int:
    """Execute one command. Returns the process exit code."""
    try:
        settings = load_settings(args.config)
        bodies = load_catalog(args.system)
    except (CatalogError, FileNotFoundError, ValidationError) as e:
        logger.error('%s', e)
        return 2

    cache = ElevationCache(settings)
    scenario = ScenarioFile(args.save) if args.save else None
    if scenario is not None:
        load_cache(scenario.load_node(), cache)

    driver = PrecomputeDriver(cache, bodies)
    if args.command == 'precalc':
        _precompute(driver, None, show_progress=True)
    elif args.command == 'dump':
        logger.info('Checking elevation calculation for all celestial bodies...')
        _precompute(driver, None, show_progress=True)
        write_dump(cache, args.output or settings.dump_file_name)
    elif args.command == 'startup':
        if not settings.precompute_on_startup:
            logger.info('Startup pre-calculation disabled in settings')
        else:
            budget = settings.precompute_budget_ms if args.budget_ms is None else args.budget_ms
            _precompute(driver, budget, show_progress=False)

    if scenario is not None:
        node = SaveNode()
        if save_cache(cache, node):
            scenario.save_node(node)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    logger.info('Starting %s: %s', APP_NAME, args.command)
    log_comprehensive_diagnostics('startup', level=logging.DEBUG)
    return run(args)


if __name__ == '__main__':
    sys.exit(main())
