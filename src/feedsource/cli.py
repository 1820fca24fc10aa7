#!/usr/bin/env python3
"""
feedsource CLI - Classify feed source URLs.

Usage:
    feedsource "https://www.youtube.com/@someone"
    feedsource "https://vimeo.com/groups/109" --json
    feedsource providers
    feedsource validate-config
"""

import argparse
import json
import logging
import sys

from feedsource.exceptions import ClassificationError, ConfigError

logger = logging.getLogger(__name__)


def _cmd_classify(args):
    """Handle the default classify command."""
    from feedsource.dispatch import classify

    results = []
    failed = 0
    for link in args.urls:
        try:
            result = classify(link)
        except ClassificationError as e:
            failed += 1
            logger.debug(f"Classification failed for {link!r}: {e.category}")
            if args.json:
                results.append({"url": link, "error": e.to_dict()})
            else:
                print(f"ERROR: {link}: {e.message}", file=sys.stderr)
            continue

        if args.json:
            results.append({"url": link, **result.to_dict()})
        else:
            print(f"{result.provider.value}\t{result.kind.value}\t{result.id}")

    if args.json:
        print(json.dumps(results, indent=2))

    sys.exit(1 if failed else 0)


def _cmd_providers(args):
    """Handle the providers subcommand."""
    from feedsource.dispatch import host_families

    for provider, hosts in host_families().items():
        kinds = ", ".join(k.value for k in provider.kinds)
        print(f"{provider.display_name} ({provider.value})")
        print(f"  kinds: {kinds}")
        print(f"  hosts: {', '.join(sorted(hosts))}")


def _cmd_validate_config(args):
    """Handle the validate-config subcommand."""
    from feedsource.config.loader import (
        _get_user_config_path,
        _load_yaml_config,
        find_config_file,
        validate_config,
    )

    config_path, source = find_config_file()
    if config_path is None:
        print("No config file found.")
        print("  Searched: FEEDSOURCE_CONFIG (env)")
        print("  Searched: .feedsource/config.yaml (project)")
        print(f"  Searched: {_get_user_config_path()} (user)")
        print("\nUsing defaults (no validation needed).")
        sys.exit(0)

    print(f"Config file: {config_path} ({source.value})")
    yaml_config = _load_yaml_config(config_path)
    if yaml_config is None:
        print("  Failed to parse config file.")
        sys.exit(1)

    result = validate_config(yaml_config)

    if result.errors:
        print(f"\nErrors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  x {error}")

    if result.warnings:
        print(f"\nWarnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  ! {warning}")

    if result.is_valid and not result.warnings:
        print("\nConfig is valid.")
    elif result.is_valid:
        print(f"\nConfig is valid with {len(result.warnings)} warning(s).")
    else:
        print(
            f"\nConfig is invalid: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)."
        )

    sys.exit(0 if result.is_valid else 1)


def main():
    parser = argparse.ArgumentParser(
        description="Classify YouTube and Vimeo feed source URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s "https://www.youtube.com/playlist?list=PLCB9F975ECF01953C"
    %(prog)s "https://youtube.com/@someone" "https://vimeo.com/channels/staffpicks"
    %(prog)s "https://vimeo.com/groups/109" --json
    %(prog)s providers
    %(prog)s validate-config
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("providers", help="List providers, kinds and hosts")
    subparsers.add_parser("validate-config", help="Validate the active config file")

    classify_parser = subparsers.add_parser("classify", help="Classify feed URLs")
    classify_parser.add_argument("urls", nargs="+", metavar="URL", help="Feed URL")
    classify_parser.add_argument("--json", action="store_true", help="Print JSON")

    argv = sys.argv[1:]
    global_options = {"-v", "--verbose"}
    known_commands = {"providers", "validate-config", "classify", "-h", "--help"}
    # Bare URLs default to the classify command, inserted after global options
    # so classify options like --json may come before the URLs
    index = 0
    while index < len(argv) and argv[index] in global_options:
        index += 1
    if index < len(argv) and argv[index] not in known_commands:
        argv.insert(index, "classify")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "providers":
            _cmd_providers(args)
        elif args.command == "validate-config":
            _cmd_validate_config(args)
        elif args.command == "classify":
            _cmd_classify(args)
        else:
            parser.print_help()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
