"""
Utility functions and decorators for CLI argument handling.
"""

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from hourcast.config.types import AppConfig


@dataclass
class CLIContext:
    """Context object for CLI command execution."""
    args: argparse.Namespace
    logger: logging.Logger
    config: AppConfig

class CommandCategory(Enum):
    """Categories for organizing commands."""
    GET = auto()
    LIST = auto()

@dataclass
class CommandMetadata:
    """Metadata for command registration."""
    name: str
    help_text: str
    category: CommandCategory
    handler: Callable[[CLIContext], int]
    options: list[dict[str, Any]]

class CLIOptionFactory:
    """Factory for creating common CLI options with consistent validation."""

    @staticmethod
    def create_format_option() -> dict[str, Any]:
        return {
            'name': '--format',
            'choices': ['text', 'json'],
            'default': 'text',
            'help': 'Output format: human-readable text or machine-readable JSON (default: text)'
        }

    @staticmethod
    def create_window_options() -> list[dict[str, Any]]:
        return [
            {
                'name': '--hours',
                'type': int,
                'help': 'Number of hours of predictions to show (default: 12)',
                'validator': lambda x: x >= 0
            },
            {
                'name': '--offset',
                'type': int,
                'help': 'Start predictions this many hours from now (default: 0)'
            }
        ]

class CommandRegistry:
    """Registry for CLI commands with metadata."""

    _commands: dict[str, CommandMetadata] = {}

    @classmethod
    def register(cls,
                name: str,
                help_text: str,
                category: CommandCategory,
                options: list[dict[str, Any]] | None = None) -> Callable[[Callable[[CLIContext], int]], Callable[[CLIContext], int]]:
        """Register a command handler."""
        def decorator(handler: Callable[[CLIContext], int]) -> Callable[[CLIContext], int]:
            cls._commands[name] = CommandMetadata(
                name=name,
                help_text=help_text,
                category=category,
                handler=handler,
                options=options or []
            )

            return handler
        return decorator

    @classmethod
    def get_command(cls, name: str) -> CommandMetadata | None:
        """Get command metadata by name."""
        return cls._commands.get(name)

class ArgumentValidator:
    """Validator for CLI arguments."""

    @staticmethod
    def validate_option(option: dict[str, Any], value: Any) -> bool:
        """Validate a single option value."""
        if 'validator' not in option:
            return True

        try:
            return bool(option['validator'](value))
        except (TypeError, ValueError):
            return False

    @staticmethod
    def validate_args(args: argparse.Namespace, command: CommandMetadata) -> list[str]:
        """Validate all arguments for a command."""
        errors = []

        for option in command.options:
            value = getattr(args, option['name'].lstrip('-').replace('-', '_'), None)
            if value is not None and not ArgumentValidator.validate_option(option, value):
                errors.append(f"Invalid value for {option['name']}: {value}")

        return errors

def add_common_options(parser: argparse.ArgumentParser) -> None:
    """Add common global options to a parser."""
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging output'
    )
    parser.add_argument(
        '--log-file',
        help='Path to write log output (default: logs to stderr only)'
    )
    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit log records as JSON'
    )
    parser.add_argument(
        '--config-dir',
        help='Directory containing config.yaml (default: $HOURCAST_CONFIG_DIR)'
    )

class CLIBuilder:
    """Builder for constructing CLI parsers with consistent formatting."""

    # Custom option fields that should not be passed to argparse
    _CUSTOM_FIELDS = {'validator'}

    def __init__(self, description: str):
        """Initialize CLI builder."""
        self.parser = argparse.ArgumentParser(description=description)
        self.subparsers = self.parser.add_subparsers(dest='command')
        add_common_options(self.parser)

    def add_command(self, command: CommandMetadata) -> None:
        """Add a command to the parser."""
        parser = self.subparsers.add_parser(command.name, help=command.help_text)

        for option in command.options:
            if 'name' not in option:
                continue

            option_copy = option.copy()
            name = option_copy.pop('name')
            option_dict = {k: v for k, v in option_copy.items() if k not in self._CUSTOM_FIELDS}
            parser.add_argument(name, **option_dict)

        parser.set_defaults(func=command.handler)

    def build(self) -> argparse.ArgumentParser:
        """Build and return the parser."""
        return self.parser
