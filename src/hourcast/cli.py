"""
Command line interface for the hourcast application.
"""

import argparse
import json
import sys

from hourcast.config.logging import setup_logging
from hourcast.config.settings import ConfigurationManager
from hourcast.exceptions import ConfigError
from hourcast.exceptions import HourcastError
from hourcast.models.forecast_request import PERMITTED_PROPERTIES
from hourcast.models.forecast_request import ForecastRequest
from hourcast.services.forecast_formatter import ForecastFormatter
from hourcast.services.forecast_service import ForecastService
from hourcast.utils.cli_utils import (
    ArgumentValidator,
    CLIBuilder,
    CLIContext,
    CLIOptionFactory,
    CommandCategory,
    CommandRegistry,
)
from hourcast.utils.logging_utils import get_logger


class ForecastCommands:
    """Forecast command implementations."""

    @staticmethod
    @CommandRegistry.register(
        name='forecast',
        help_text='Show an hour-by-hour forecast table for an address',
        category=CommandCategory.GET,
        options=[
            {
                'name': '--address',
                'default': '',
                'help': 'Address at which to see the weather'
            },
            {
                'name': '--properties',
                'help': 'Weather properties to display in a comma separated string (default: temperature)'
            },
            *CLIOptionFactory.create_window_options(),
            {
                'name': '--displaytz',
                'help': 'Time zone in which to display predictions (default: UTC)'
            },
            {
                'name': '--freedom',
                'action': 'store_true',
                'help': 'Use freedom units'
            },
            CLIOptionFactory.create_format_option()
        ]
    )
    def get_forecast(ctx: CLIContext) -> int:
        """Fetch, align and print the forecast."""
        args = ctx.args
        defaults = ctx.config.defaults

        request = ForecastRequest.build(
            address=args.address,
            properties=args.properties or defaults['properties'],
            hours=args.hours if args.hours is not None else int(defaults['hours']),
            offset=args.offset if args.offset is not None else int(defaults['offset']),
            display_timezone=args.displaytz or ctx.config.display_timezone,
            freedom=args.freedom
        )

        table = ForecastService(ctx.config).get_forecast(request)

        if args.format == 'json':
            print(ForecastFormatter.format_json(table, request.freedom))
        else:
            print(ForecastFormatter.format_header(table))
            print(ForecastFormatter.format_table(table, request.display_timezone, request.freedom))
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='properties',
        help_text='List the weather properties that can be requested',
        category=CommandCategory.LIST,
        options=[CLIOptionFactory.create_format_option()]
    )
    def list_properties(ctx: CLIContext) -> int:
        """Print the permitted property names."""
        if ctx.args.format == 'json':
            print(json.dumps(list(PERMITTED_PROPERTIES)))
        else:
            print("\n".join(PERMITTED_PROPERTIES))
        return 0

def create_parser() -> argparse.ArgumentParser:
    """Create argument parser using the CLI builder."""
    builder = CLIBuilder(
        description='Hour-by-hour weather forecast tables for US addresses'
    )

    for command in CommandRegistry._commands.values():
        builder.add_command(command)

    return builder.build()

def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ConfigurationManager().load_config(args.config_dir)
    except ConfigError as e:
        print(f"hourcast encountered an error: {e}", file=sys.stderr)
        return 1

    setup_logging(config, verbose=args.verbose, log_file=args.log_file, json_logs=args.json_logs)
    logger = get_logger(__name__)

    command = CommandRegistry.get_command(args.command)
    if not command:
        logger.error(f"Unknown command: {args.command}")
        return 1

    errors = ArgumentValidator.validate_args(args, command)
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    ctx = CLIContext(
        args=args,
        logger=logger,
        config=config
    )

    try:
        return command.handler(ctx)
    except HourcastError as e:
        logger.error(f"hourcast encountered an error: {e}")
        return 1
    except Exception as e:
        logger.error(f"hourcast encountered an unexpected error: {e}", exc_info=True)
        return 1
