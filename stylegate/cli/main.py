import argparse
import sys
from pathlib import Path

from stylegate._version import _detect_version
from stylegate.cli._io import build_config, ensure_readable_file, load_file_settings
from stylegate.cli.exitcodes import EXIT_FAILURE, EXIT_OK
from stylegate.core.engine import DefaultStylegateEngine
from stylegate.errors import StylegateError, UsageError

DOCS_URL = "https://nest.github.io/nest-simulator/coding_guidelines_c++"

BANNER = """
+ + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + +
+                          STATIC CODE ANALYSIS TOOL                           +
+ + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + + +"""

DESCRIPTION = f"""\
Processes C/C++ and Python source files to verify compliance with the
coding style guidelines. The checks are performed the same way as in the
CI build and test environment. If no file is specified, a local 'git diff'
is issued to obtain the changed files in the commit range
'<git-start>..<git-end>'. By default, this is 'master..HEAD'.

Run from the base directory of the sources.

The setup of the tooling is explained here:
    {DOCS_URL}"""

# (option, Namespace dest, name in help, default, note)
TOOL_OPTIONS = (
    ("--cppcheck", "cppcheck", "CPPCHECK", "cppcheck", "CPPCHECK version 1.69 or later is required."),
    ("--clang-format", "clang_format", "CLANG-FORMAT", "clang-format-3.6", "CLANG-FORMAT version 3.6 is required."),
    ("--vera++", "vera", "VERA++", "vera++", None),
    ("--pep8", "pep8", "PEP8", "pep8", None),
)


class HelpRequested(Exception):
    pass


class VersionRequested(Exception):
    pass


class _RaiseAction(argparse.Action):
    """
    Zero-argument option that stops parsing by raising `const`.
    """

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, const=None, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, const=const, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise self.const()


class _TokenRejected(Exception):
    pass


class _AssignmentHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """
    Shows value options as --name=value, the only form accepted.
    """

    def _format_action_invocation(self, action):
        if action.option_strings and action.nargs != 0:
            metavar = self._format_args(action, self._get_default_metavar_for_optional(action))
            return ", ".join(f"{option}={metavar}" for option in action.option_strings)
        return super()._format_action_invocation(action)


class StylegateArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise _TokenRejected(message)


def build_parser() -> argparse.ArgumentParser:
    p = StylegateArgumentParser(
        prog="stylegate",
        usage="%(prog)s [options ...]",
        description=DESCRIPTION,
        formatter_class=_AssignmentHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("--help", action=_RaiseAction, const=HelpRequested, help="This help.")
    p.add_argument("--version", action=_RaiseAction, const=VersionRequested, help="Print the version and exit.")
    p.add_argument(
        "--i",
        "--incremental",
        dest="incremental",
        action="store_true",
        default=None,
        help="Prompt user before each file analysis.",
    )
    p.add_argument(
        "--file",
        dest="file",
        metavar="/path/to/file",
        type=ensure_readable_file,
        default=None,
        help="Perform the analysis on this file.",
    )
    p.add_argument(
        "--git-start",
        dest="git_start",
        metavar="Git_SHA_value",
        default=None,
        help="Hash value (Git SHA) from which Git starts the diff. Default: master",
    )
    p.add_argument(
        "--git-end",
        dest="git_end",
        metavar="Git_SHA_value",
        default=None,
        help="Hash value (Git SHA) at which Git ends the diff. Default: HEAD",
    )
    for option, dest, label, default, note in TOOL_OPTIONS:
        text = f"The name of the {label} executable. Default: {default}"
        p.add_argument(
            option,
            dest=dest,
            metavar="exe",
            default=None,
            help=f"{text}. Note: {note}" if note else text,
        )
    p.add_argument(
        "--config",
        dest="config",
        metavar="/path/to/stylegate.yaml",
        default=None,
        help="Configuration file. Default: stylegate.yaml/.yml/.json in the current directory, if present.",
    )
    return p


def parse_options(argv: list[str], parser: argparse.ArgumentParser | None = None) -> argparse.Namespace:
    """
    Parse tokens strictly left to right.

    Each token is parsed on its own so that an unknown token fails at its
    position, --help stops parsing where it appears, and a repeated
    option keeps its last value.

    Raises:
        HelpRequested, VersionRequested, UsageError, MissingInputError
    """
    parser = parser or build_parser()
    ns = argparse.Namespace()
    for token in argv:
        if token == "--":
            raise UsageError(token)
        try:
            parser.parse_args([token], namespace=ns)
        except _TokenRejected as e:
            raise UsageError(token) from e
    # no tokens at all: still populate defaults
    return parser.parse_args([], namespace=ns)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    print(BANNER)

    try:
        args = parse_options(argv, parser)
    except HelpRequested:
        print(parser.format_help(), end="")
        return EXIT_OK
    except VersionRequested:
        print(f"stylegate {_detect_version()}")
        return EXIT_OK
    except UsageError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        print(parser.format_help(), end="")
        return EXIT_FAILURE
    except StylegateError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        repo_root = Path.cwd()
        config = build_config(
            repo_root=repo_root,
            settings=load_file_settings(repo_root, args.config),
            file_to_check=args.file,
            git_start=args.git_start,
            git_end=args.git_end,
            incremental=args.incremental,
            tools={dest: getattr(args, dest) for _, dest, _, _, _ in TOOL_OPTIONS},
        )
        return DefaultStylegateEngine().run(config).exit_code
    except StylegateError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_FAILURE


def run() -> None:
    sys.exit(main())
