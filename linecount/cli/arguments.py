import argparse

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linecount",
        description="Count code, comment, and blank lines in source files"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    count = sub.add_parser("count", help="Count lines and write lineCount.txt")
    count.add_argument(
        "paths", nargs="+",
        help="Folder to search recursively, a single file, or several files"
    )
    count.add_argument(
        "-e", "--ext", dest="file_types", action="append", metavar="EXT",
        help="File extension to include, e.g. .m (repeatable, default .m)"
    )
    count.add_argument(
        "-i", "--ignore", dest="ignore_files", action="append", metavar="NAME",
        help="File name to skip, e.g. scratch.m (repeatable)"
    )
    count.add_argument("-o", "--save-dir", help="Folder for lineCount.txt (default: cwd)")
    count.add_argument(
        "--exclude-dir", dest="exclude_dirs", action="append", metavar="NAME",
        help="Directory name to skip while searching (repeatable)"
    )
    count.add_argument("--config", help="TOML file with default options")
    count.add_argument("--json", action="store_true", help="Also write lineCount.json")
    count.add_argument("--print", dest="echo", action="store_true", help="Print the report")
    count.add_argument("--verbose", action="store_true")

    return parser
