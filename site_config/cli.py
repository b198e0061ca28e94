"""
Command line entry point for checking and inspecting site configuration files.

Examples:
  Validate the default config/site.yaml:
    site-config check

  Show the normalised record as JSON:
    site-config dump config/site.yaml --format json

  Report conflicting values between two versions of the file:
    site-config diff config/site.yaml tests/fixtures/site_handle_contacts.yaml
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from helpers.schema_validation import SchemaValidator, site_config_schema
from utils.errors import ConfigError, SerializationError
from utils.logging import get_logger, setup_logging

from .compare import diff_configs
from .config_loader import ConfigLoader, load_site_config
from .contacts import contact_links
from .serialization import FORMATS, dumps

logger = get_logger(__name__)


def _print_errors(error: ConfigError) -> None:
    print(f"❌ {error.args[0]}", file=sys.stderr)
    for message in error.errors:
        print(f"   - {message}", file=sys.stderr)


def _schema_errors(path: str) -> list[str]:
    """Collect every schema error for a file that the loader rejected."""
    try:
        with Path(path).open(encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return []
    return SchemaValidator().list_errors(data)


def cmd_check(args: argparse.Namespace) -> int:
    try:
        config = ConfigLoader.load_config(args.path)
    except ConfigError as e:
        _print_errors(e)
        if e.source:
            extra = [m for m in _schema_errors(e.source) if m not in e.errors]
            for message in extra:
                print(f"   - (schema) {message}", file=sys.stderr)
        return 1

    status = ConfigLoader.get_config_status()
    print(f"✅ {status['config_path']} is valid")
    print(f"   Title: {config.title}")
    print(f"   URL: {config.absolute_url()}")
    print(f"   Posts per page: {config.posts_per_page}")
    print(f"   Menu: {', '.join(config.menu_labels()) or '(empty)'}")
    print(f"   Contacts: {', '.join(config.author.contacts.provided()) or '(none)'}")
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    try:
        config = ConfigLoader.load_config(args.path)
        sys.stdout.write(dumps(config, args.format))
    except ConfigError as e:
        _print_errors(e)
        return 1
    except SerializationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    print(json.dumps(site_config_schema(), indent=2, ensure_ascii=False))
    return 0


def cmd_links(args: argparse.Namespace) -> int:
    try:
        config = ConfigLoader.load_config(args.path)
    except ConfigError as e:
        _print_errors(e)
        return 1

    for platform, href in contact_links(config.author.contacts):
        print(f"{platform}: {href}")
    return 0


def cmd_diff(args: argparse.Namespace) -> int:
    try:
        left = load_site_config(args.left)
        right = load_site_config(args.right)
    except ConfigError as e:
        _print_errors(e)
        return 2

    differences = diff_configs(left, right)
    if not differences:
        print("✅ No differences")
        return 0

    print(f"⚠️  {len(differences)} field(s) differ:")
    for difference in differences:
        print(f"   {difference.path}: {difference.left!r} != {difference.right!r}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="site-config",
        description="Validate and inspect blog site configuration files",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL env or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Load and validate a config file")
    check.add_argument("path", nargs="?", default=None, help="Config file (YAML or JSON)")
    check.set_defaults(func=cmd_check)

    dump = subparsers.add_parser("dump", help="Print the normalised config")
    dump.add_argument("path", nargs="?", default=None, help="Config file (YAML or JSON)")
    dump.add_argument("--format", choices=FORMATS, default="yaml", help="Output format")
    dump.set_defaults(func=cmd_dump)

    schema = subparsers.add_parser("schema", help="Print the JSON Schema of the config format")
    schema.set_defaults(func=cmd_schema)

    links = subparsers.add_parser("links", help="Print resolved author contact links")
    links.add_argument("path", nargs="?", default=None, help="Config file (YAML or JSON)")
    links.set_defaults(func=cmd_links)

    diff = subparsers.add_parser("diff", help="Report fields that differ between two configs")
    diff.add_argument("left", help="First config file")
    diff.add_argument("right", help="Second config file")
    diff.set_defaults(func=cmd_diff)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
