"""
Command-line interface for the Namecheap SDK.

This module provides the CLI entry point with commands for:
- call: Send any API command and print the normalized response
- check: Check domain availability
- config: Configuration management
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import (
    DEFAULT_CONFIG_PATH,
    ClientConfig,
    load_config_from_env,
    load_config_from_file,
    save_config_to_file,
)
from .exceptions import ConfigurationError
from .sdk import Namecheap
from .xml_tree import as_list


def resolve_config(args: argparse.Namespace) -> Optional[ClientConfig]:
    """
    Resolve the client configuration for a command.

    An explicit --config file wins, then the default config file, then
    NAMECHEAP_* environment variables (optionally from --env-file).

    Returns:
        ClientConfig, or None if an explicit config file could not be loaded
    """
    if args.config:
        config = load_config_from_file(Path(args.config))
        if config is None:
            print(f"Error: Could not load config from {args.config}", file=sys.stderr)
            return None
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_config_from_file(DEFAULT_CONFIG_PATH)
        if config is None:
            return None
    else:
        try:
            config = load_config_from_env(Path(args.env_file) if args.env_file else None)
        except ConfigurationError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return None

    if args.sandbox:
        config.sandbox = True
    if args.verbose:
        config.logging.enabled = True
        config.logging.level = "debug"

    return config


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE arguments."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got: {pair}")
        params[key] = value
    return params


def cmd_call(args: argparse.Namespace) -> int:
    """Handle the 'call' command."""
    try:
        params = parse_params(args.params)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = resolve_config(args)
    if config is None:
        return 1

    with Namecheap.from_config(config) as nc:
        if args.post:
            response = nc.client.post(args.api_command, params)
        else:
            response = nc.client.get(args.api_command, params)

    print(response.to_json())
    return 0 if response.success else 1


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the 'check' command."""
    config = resolve_config(args)
    if config is None:
        return 1

    with Namecheap.from_config(config) as nc:
        response = nc.domains.check(args.domains)

    if args.json:
        print(response.to_json())
        return 0 if response.success else 1

    if not response.success:
        for error in response.errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    for result in as_list(response.data.get("DomainCheckResult")):
        if not isinstance(result, dict):
            continue
        available = result.get("_Available", "").lower() == "true"
        status = "available" if available else "taken"
        if result.get("_IsPremiumName", "").lower() == "true":
            status += " (premium)"
        print(f"{result.get('_Domain', '?')}: {status}")

    for warning in response.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the 'config' command."""
    config_path = Path(args.path) if args.path else DEFAULT_CONFIG_PATH

    if args.action == "show":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"No configuration found at: {config_path}")
            print("Use 'config init' to create a default configuration.")
            return 1

        print(f"Configuration from: {config_path}")
        print(f"  API user: {config.credentials.api_user or '-'}")
        print(f"  API key: {'***' if config.credentials.api_key else '-'}")
        print(f"  User name: {config.credentials.user_name or '-'}")
        print(f"  Client IP: {config.credentials.client_ip or '-'}")
        print(f"  Endpoint: {config.resolved_endpoint()}")
        print(f"  Timeout: {config.transport.timeout_seconds}s")
        print(f"  Logging: {config.logging.level if config.logging.enabled else 'off'}")
        return 0

    elif args.action == "init":
        if config_path.exists() and not args.force:
            print(f"Configuration already exists at: {config_path}")
            print("Use --force to overwrite.")
            return 1

        if save_config_to_file(ClientConfig(sandbox=True), config_path):
            print(f"Configuration created at: {config_path}")
            return 0
        return 1

    elif args.action == "validate":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"Error: Could not load config from {config_path}", file=sys.stderr)
            return 1

        credentials = config.credentials
        missing = [
            name for name, value in (
                ("api_user", credentials.api_user),
                ("api_key", credentials.api_key),
                ("client_ip", credentials.client_ip),
            ) if not value
        ]
        if missing:
            print(f"Error: Missing credentials: {', '.join(missing)}", file=sys.stderr)
            return 1

        print(f"Configuration at {config_path} is valid.")
        return 0

    return 1


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--env-file",
        help="Path to a .env file with NAMECHEAP_* variables",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Use the sandbox endpoint",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log requests to stderr",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="namecheap-sdk",
        description="Namecheap XML API client",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'call' command
    call_parser = subparsers.add_parser(
        "call",
        help="Send an API command and print the normalized response",
    )
    call_parser.add_argument(
        "api_command",
        help="API command (e.g., namecheap.domains.getList)",
    )
    call_parser.add_argument(
        "params",
        nargs="*",
        help="Command parameters as KEY=VALUE",
    )
    call_parser.add_argument(
        "--post",
        action="store_true",
        help="Send as POST instead of GET",
    )
    _add_connection_arguments(call_parser)
    call_parser.set_defaults(func=cmd_call)

    # 'check' command
    check_parser = subparsers.add_parser(
        "check",
        help="Check domain availability",
    )
    check_parser.add_argument(
        "domains",
        nargs="+",
        help="Domains to check (e.g., example.com)",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full response as JSON",
    )
    _add_connection_arguments(check_parser)
    check_parser.set_defaults(func=cmd_check)

    # 'config' command
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
    )
    config_parser.add_argument(
        "action",
        choices=["show", "init", "validate"],
        help="Configuration action",
    )
    config_parser.add_argument(
        "--path", "-p",
        help="Path to configuration file",
    )
    config_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Force overwrite existing configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
