"""Main entry point for the upgrade helper."""

import argparse
import asyncio
import sys

from .core.config import UpgradeHelperConfig
from .core.scraper import UpgradeScraper
from .server.dispatcher import GET_FILE_DIFF, GET_UPGRADE_INFO, ToolDispatcher
from .server.mcp_server import serve
from .storage.json_storage import JSONStorage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='upgrade-helper',
        description='Read React Native upgrade diffs from the upgrade helper site',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  upgrade-helper                                   # MCP server on stdio
  upgrade-helper info 0.70.14 0.74.0               # All changed files
  upgrade-helper info 0.70.14 0.74.0 --output upgrade.json
  upgrade-helper diff 0.70.14 0.74.0 package.json  # One file, full diff
        """
    )
    parser.add_argument(
        '--headed',
        action='store_true',
        help='Show the browser window instead of running headless'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress progress output on stderr'
    )

    commands = parser.add_subparsers(dest='command')
    commands.add_parser('serve', help='Run the MCP server on stdio (default)')

    info = commands.add_parser('info', help='Every file change between two versions')
    diff = commands.add_parser('diff', help='The diff of one file between two versions')

    for command in (info, diff):
        command.add_argument('from_version', help='Source React Native version (e.g. 0.70.14)')
        command.add_argument('to_version', help='Target React Native version (e.g. 0.74.0)')

    diff.add_argument('file_name', help='File to look up (e.g. android/build.gradle)')

    for command in (info, diff):
        command.add_argument('--package-name', help='Package name (default: com.example.app)')
        command.add_argument('--project-name', help='Project name (default: ExampleApp)')
        command.add_argument('--output', type=str, help='Also save the JSON result to this file')

    return parser


def _arguments(args: argparse.Namespace) -> dict:
    """CLI options in the same shape the MCP tools receive."""
    arguments = {
        'fromVersion': args.from_version,
        'toVersion': args.to_version,
        'packageName': args.package_name,
        'projectName': args.project_name,
    }
    if args.command == 'diff':
        arguments['fileName'] = args.file_name
    return {key: value for key, value in arguments.items() if value is not None}


async def run_once(config: UpgradeHelperConfig, args: argparse.Namespace) -> int:
    """Run a single tool call and print its envelope to stdout."""
    dispatcher = ToolDispatcher(UpgradeScraper(config))
    tool = GET_UPGRADE_INFO if args.command == 'info' else GET_FILE_DIFF
    response = await dispatcher.call(tool, _arguments(args))

    print(response.text)
    if response.is_error:
        return 1

    if args.output:
        JSONStorage.save(response.payload, args.output)
        config.log(f"✓ Saved result to {args.output}")
    return 0


def main(argv=None) -> int:
    """Main function to run the upgrade helper."""
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.headed:
        overrides['headless'] = False
    if args.quiet:
        overrides['verbose'] = False
    config = UpgradeHelperConfig.from_env(**overrides)

    if not config.validate():
        print("⚠ Warning: Configuration validation failed, continuing anyway...", file=sys.stderr)

    if args.command in (None, 'serve'):
        asyncio.run(serve(config))
        return 0

    return asyncio.run(run_once(config, args))


if __name__ == "__main__":
    sys.exit(main())
