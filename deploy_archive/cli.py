import argparse
import json
import logging
import sys

from .builder import run_build
from .config import get_config
from .errors import ArchiveError
from .request import BuildRequest, describe

log = logging.getLogger("deploy-archive")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="deploy-archive", description="Package sources into a zip archive")
    ap.add_argument("--config", help="JSON file with build options")
    ap.add_argument("--source", action="append", dest="sources", help="File or directory to include (repeatable)")
    ap.add_argument("--output-name", help="Name of the archive file")
    ap.add_argument("--ignore", action="append", help="Path to ignore, relative to each source (repeatable)")
    ap.add_argument("--overwrite", action="store_true", default=None, help="Overwrite an existing archive")
    ap.add_argument("--collapse-top-level-folder", action="store_true", default=None,
                    help="Store only the contents of the application directory")
    ap.add_argument("--app-path", default=".", help="Application path, relative to the working directory")
    ap.add_argument("--work-dir", help="Working directory (default: $ARCHIVE_WORK_DIR or cwd)")
    ap.add_argument("--describe", action="store_true", help="Print the build step documentation and exit")
    return ap


def load_request(args: argparse.Namespace) -> BuildRequest:
    """Merge the config file (if any) with command line flags"""
    options = {}
    if args.config:
        options = BuildRequest.from_file(args.config).model_dump()

    if args.sources:
        options["sources"] = args.sources
    if args.output_name:
        options["output_name"] = args.output_name
    if args.ignore:
        options["ignore"] = args.ignore
    if args.overwrite is not None:
        options["overwrite_existing"] = args.overwrite
    if args.collapse_top_level_folder is not None:
        options["collapse_top_level_folder"] = args.collapse_top_level_folder

    return BuildRequest(**options)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        logging.basicConfig(format=LOG_FORMAT)
        log.error(f"Invalid configuration: {e}")
        return 1

    logging.basicConfig(
        level=config.effective_log_level,
        format=LOG_FORMAT,
    )

    if args.describe:
        print(json.dumps(describe(), indent=2))
        return 0

    # ValidationError and UnicodeDecodeError are both ValueErrors
    try:
        request = load_request(args)
    except (ValueError, OSError) as e:
        log.error(f"Invalid build options: {e}")
        return 1

    try:
        location = run_build(request, source_path=args.app_path, work_dir=args.work_dir)
    except ArchiveError as e:
        log.error(f"Build failed: {e}")
        return 1

    print(location.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
