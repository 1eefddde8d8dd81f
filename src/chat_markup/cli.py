"""
Command-line interface for Chat Markup.

Provides CLI commands for working with chat text:
- colorize: Translate &-codes into §-codes
- decolorize: Translate §-codes back into &-codes
- render: Resolve placeholders through the configured provider (or colorize)
- config: Print the active configuration

Usage:
    chat-markup colorize "&cHello"
    chat-markup decolorize "§cHello"
    chat-markup render "&aWelcome %player_name%" --player-uuid UUID --player-name NAME
    chat-markup render "[hp]" --bracket
    chat-markup config

Environment Variables:
    CHAT_MARKUP_PROVIDER: Placeholder provider kind (none, http, static)
    CHAT_MARKUP_PROVIDER_URL: Base URL of the remote placeholder service
    CHAT_MARKUP_LOG_LEVEL: Log level (default: INFO)
"""

import argparse
import logging
import sys

from chat_markup.config import LoggingSettings, config, print_config_summary
from chat_markup.errors import ChatMarkupError
from chat_markup.text.colors import colorize, decolorize

_LOG_FORMATS = {
    "simple": "%(levelname)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
}


def configure_logging(settings: LoggingSettings) -> None:
    """Apply the configured level and format to the root logger."""
    logging.basicConfig(
        level=getattr(logging, settings.level, logging.INFO),
        format=_LOG_FORMATS.get(settings.format, _LOG_FORMATS["detailed"]),
        stream=sys.stderr,
    )


def cmd_colorize(args: argparse.Namespace) -> int:
    """Print the text with &-codes translated to §-codes."""
    print(colorize(args.text))
    return 0


def cmd_decolorize(args: argparse.Namespace) -> int:
    """Print the text with §-codes translated back to &-codes."""
    print(decolorize(args.text))
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """
    Resolve placeholders in the given text.

    Builds the provider selected in config, checks its health when it is a
    remote service, and routes the text through a PlaceholderDispatcher.
    Without a provider (or with one that is down) the text is only colorized.

    Returns:
        0 on success, 1 on provider or configuration error
    """
    from chat_markup.placeholders.dispatcher import PlaceholderDispatcher
    from chat_markup.placeholders.http_provider import HttpPlaceholderProvider
    from chat_markup.placeholders.registry import ProviderRegistry, bootstrap_registry
    from chat_markup.text.actors import OfflinePlayer

    if bool(args.player_uuid) != bool(args.player_name):
        print("Error: --player-uuid and --player-name must be given together.", file=sys.stderr)
        return 1

    settings = config.placeholders
    registry = ProviderRegistry()
    try:
        bootstrap_registry(settings, registry)
    except (ChatMarkupError, FileNotFoundError) as e:
        print(f"Error loading placeholder provider: {e}", file=sys.stderr)
        return 1

    provider = registry.get(settings.plugin_name)
    if isinstance(provider, HttpPlaceholderProvider):
        provider.check_health()

    actor = None
    if args.player_uuid:
        actor = OfflinePlayer(uuid=args.player_uuid, name=args.player_name)

    dispatcher = PlaceholderDispatcher(provider)
    try:
        if args.bracket:
            result = dispatcher.set_bracket_placeholders(args.text, actor)
        else:
            result = dispatcher.set_placeholders(args.text, actor)
    except ChatMarkupError as e:
        print(f"Error resolving placeholders: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Print the active configuration."""
    print_config_summary()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="chat-markup",
        description="Chat Markup - color codes and placeholders for chat text",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # colorize command
    colorize_parser = subparsers.add_parser(
        "colorize",
        help="Translate &-codes into §-codes",
    )
    colorize_parser.add_argument("text", help="Text to colorize")
    colorize_parser.set_defaults(func=cmd_colorize)

    # decolorize command
    decolorize_parser = subparsers.add_parser(
        "decolorize",
        help="Translate §-codes back into &-codes",
    )
    decolorize_parser.add_argument("text", help="Text to decolorize")
    decolorize_parser.set_defaults(func=cmd_decolorize)

    # render command
    render_parser = subparsers.add_parser(
        "render",
        help="Resolve placeholders in text",
        description=(
            "Resolve %name% (or [name] with --bracket) placeholders through the "
            "configured provider. Falls back to colorizing when no provider is available."
        ),
    )
    render_parser.add_argument("text", help="Text containing placeholders")
    render_parser.add_argument(
        "--bracket",
        action="store_true",
        help="Resolve [name] placeholders instead of %%name%%",
    )
    render_parser.add_argument("--player-uuid", type=str, help="UUID of the player to render for")
    render_parser.add_argument("--player-name", type=str, help="Name of the player to render for")
    render_parser.set_defaults(func=cmd_render)

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Show the active configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(config.logging)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
