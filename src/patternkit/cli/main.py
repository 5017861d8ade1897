"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing to the pattern components
- Output formatting and exit codes
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from patternkit._version import __version__
from patternkit.cli.formatters import format_output
from patternkit.config import AppConfig, ConfigurationManager, get_config_manager
from patternkit.domain.exceptions import PatternKitError
from patternkit.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="patternkit",
        description="patternkit - runnable design-pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s database                              # Show the shared database handle
  %(prog)s deliver sea                           # Deliver with sea logistics
  %(prog)s notify shoes --customer Ann --customer Bob
  %(prog)s coffee --add milk --add sugar         # Price a decorated coffee
  %(prog)s compress report.txt --algorithm rar   # Compress with RAR
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument(
        "--format", choices=["json", "yaml", "text"], default="text", help="Output format"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("database", help="Show the shared database instance")

    deliver = subparsers.add_parser("deliver", help="Plan a delivery for a logistics category")
    deliver.add_argument("category", help="Logistics category (e.g. road, sea)")

    notify = subparsers.add_parser("notify", help="Announce a new arrival to customers")
    notify.add_argument("item", help="Item that arrived")
    notify.add_argument(
        "--customer", action="append", default=[], dest="customers", help="Customer name (repeatable)"
    )

    coffee = subparsers.add_parser("coffee", help="Describe and price a coffee")
    coffee.add_argument(
        "--add", action="append", default=[], dest="additions", help="Addition: milk or sugar (repeatable)"
    )

    compress = subparsers.add_parser("compress", help="Compress a file")
    compress.add_argument("file_path", help="File to compress")
    compress.add_argument("--algorithm", help="Compression algorithm (default from configuration)")

    return parser.parse_args(argv)


def _handle_database(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    from patternkit.singleton import Database

    database = Database.get_instance()
    return {
        "connection_id": database.connection_id,
        "created_at": database.created_at.isoformat(),
    }


def _handle_deliver(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    from patternkit.factory import get_logistics_registry

    logistics = get_logistics_registry().create_logistics(args.category)
    return {"category": args.category, "message": logistics.plan_delivery()}


def _handle_notify(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    from patternkit.observer import Customer, Store

    store = Store(allow_duplicates=config.observer.allow_duplicates)
    customers = [Customer(name) for name in args.customers]
    for customer in customers:
        store.add_customer(customer)

    result = store.new_arrival(args.item)
    return {
        "message": result.message,
        "delivered": result.delivered,
        "notifications": {customer.name: customer.notifications for customer in customers},
    }


def _handle_coffee(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    from patternkit.decorator import make_coffee

    coffee = make_coffee(args.additions)
    return {"description": coffee.get_description(), "cost": coffee.get_cost()}


def _handle_compress(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    from patternkit.strategy import Compressor, get_strategy_registry

    algorithm = args.algorithm or config.strategy.default_algorithm
    compressor = Compressor(get_strategy_registry().create_strategy(algorithm))
    return {"algorithm": algorithm, "message": compressor.compress_file(args.file_path)}


COMMAND_HANDLERS: Dict[str, Callable[[argparse.Namespace, AppConfig], Dict[str, Any]]] = {
    "database": _handle_database,
    "deliver": _handle_deliver,
    "notify": _handle_notify,
    "coffee": _handle_coffee,
    "compress": _handle_compress,
}


def execute_command(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    """Route parsed arguments to the matching command handler."""
    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        raise PatternKitError(f"Unknown command: {args.command}")
    return handler(args, config)


def _configure(args: argparse.Namespace) -> AppConfig:
    """Load configuration and set up logging for this invocation."""
    if args.config:
        config = ConfigurationManager(args.config).app_config
    else:
        config = get_config_manager().app_config

    logging_config = config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        return 1

    logger = get_logger(__name__)
    try:
        config = _configure(args)
        result = execute_command(args, config)
        print(format_output(result, args.format))
        return 0
    except PatternKitError as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
