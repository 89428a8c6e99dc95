import argparse
import logging
import sys
import textwrap

from . import Reconciler, RunConfig, MatchCopyError
from .config import DEFAULT_DESTINATION
from .settings import (
    Settings,
    locate_settings_file,
    SETTING_DESTINATION,
    SETTING_LOGGING_LEVEL,
    SETTING_LOGGING_PATH,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='matchcopy',
        description='Copy the files of one directory whose names, ignoring extensions, also appear in another '
                    'directory. Alternatively list the files that have no counterpart.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              matchcopy --comp renders --copy sources --dest matched
              matchcopy -p renders -c sources --logdiff

            Only direct children of both directories are compared. "shot_010.png"
            and "shot_010.exr" match; "shot.v2.png" has the stem "shot.v2".
            ''').strip()
    )
    parser.add_argument(
        '-c', '--copy',
        metavar='DIR',
        required=True,
        help='Sets the directory to copy files from after comparison.')
    parser.add_argument(
        '-p', '--comp',
        metavar='DIR',
        required=True,
        help='Sets the directory to compare files against for copying.')
    parser.add_argument(
        '-d', '--dest',
        metavar='DIR',
        help='Sets the destination directory for files to copy into. The destination is recursively built if it '
             f'doesn\'t already exist. Defaults to the "destination" setting, then to "{DEFAULT_DESTINATION}".')
    parser.add_argument(
        '-l', '--logdiff',
        action='store_true',
        help='With this flag set, the difference between copy and compare will be logged instead of running the '
             'program.')
    parser.add_argument(
        '--no-log',
        action='store_true',
        help='Disable logging entirely. The missing paths of --logdiff are still printed.')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file. If not provided, uses logging.path from the settings file or standard error.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=LOG_LEVELS,
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to logging.level from the settings '
             'file, then INFO.')
    parser.add_argument(
        '--settings',
        metavar='PATH',
        help='Path to a TOML settings file. If not provided, uses the MATCHCOPY_SETTINGS environment variable or '
             'matchcopy.toml in the current directory when present.')
    return parser


def configure_logging(log_file: str | None, log_level: str, disabled: bool = False) -> None:
    """Route log records to a file or standard error, or silence them.

    Existing root handlers are removed first so repeated runs in one process do
    not stack handlers.
    """
    if disabled:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        handler.close()

    if log_file:
        logging.basicConfig(filename=log_file, level=getattr(logging, log_level), format=LOG_FORMAT)
    else:
        logging.basicConfig(stream=sys.stderr, level=getattr(logging, log_level), format=LOG_FORMAT)


def matchcopy_main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings(locate_settings_file(args.settings))
    except ValueError as e:
        parser.error(f'cannot parse settings file: {e}')
    except OSError as e:
        parser.error(f'cannot read settings file: {e}')

    log_level = args.log_level or str(settings.get(SETTING_LOGGING_LEVEL, 'INFO')).upper()
    if log_level not in LOG_LEVELS:
        parser.error(f'invalid logging.level in settings: {log_level}')

    destination = args.dest if args.dest is not None else settings.get(SETTING_DESTINATION)
    if destination is not None and not isinstance(destination, str):
        parser.error(f'invalid destination in settings: {destination!r}')

    log_file = args.log_file or settings.get(SETTING_LOGGING_PATH)
    configure_logging(str(log_file) if log_file else None, log_level, disabled=args.no_log)

    config = RunConfig.from_paths(args.comp, args.copy, destination)
    reconciler = Reconciler(config)

    try:
        if args.logdiff:
            _log_missing(reconciler)
        else:
            _copy_matching(reconciler)
    except MatchCopyError as e:
        logger.error(f"An error occurred when running the program: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _copy_matching(reconciler: Reconciler) -> None:
    logger.info("Copying matching files.")
    result = reconciler.copy_matching_with_comparing()
    logger.info(f"Copied {len(result.items)} files, skipped {len(result.skipped)}")


def _log_missing(reconciler: Reconciler) -> None:
    logger.info("Logging missing paths")
    result = reconciler.get_missing_paths()

    logger.info(f"Missing total: {len(result.items)}")
    logger.info("Missing paths:\n" + '\n'.join(f"  {path}" for path in result.items))

    for path in result.items:
        print(path)

