import logging
import sys
from .arguments import build_parser
from .runner import count_lines, render
from linecount.core.config import CountConfiguration, load_configuration
from linecount.core.errors import LineCountError

def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("linecount."):
            logging.getLogger(name).setLevel(level)

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "count":
        try:
            config = load_configuration(args.config) if args.config else CountConfiguration()
            config = config.merged(
                exclude_dirs=tuple(args.exclude_dirs) if args.exclude_dirs else None,
                write_json=True if args.json else None,
            )
            target = args.paths[0] if len(args.paths) == 1 else args.paths
            result = count_lines(
                target,
                args.file_types,
                args.ignore_files,
                args.save_dir,
                config=config,
            )
        except LineCountError as exc:
            parser.exit(2, f"linecount: error: {exc}\n")

        if args.echo:
            print(render(result, args.json))

    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
