#!/usr/bin/env python3
"""
pydirsize - Directory Size Reporter.

Walks a directory tree once, aggregates the size of every directory, and
reports the result either as a tree (largest subtrees first) or as a flat
list sorted by size. Files sitting directly in a directory are summarized
into a synthetic "directory content" entry so they can be compared against
the sub-directories next to them.
"""

import argparse
import fnmatch
import logging
import os
import re
import stat
import sys
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Protocol, TextIO

logger = logging.getLogger(__name__)

# st_blocks is always expressed in 512-byte units.
BLOCK_SIZE = 512

SIZE_WIDTH = 15

HUMAN_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]

SUFFIX_STEPS = {"K": 1, "k": 1, "M": 2, "G": 3, "T": 4, "P": 5, "E": 6}


class ErrorKind(Enum):
    """Enumeration of recoverable filesystem error kinds."""

    METADATA = "metadata"
    ENUMERATION = "enumeration"


class NumberFormatError(ValueError):
    """Raised when a size threshold string is not a valid number."""


class ColorFormatter(logging.Formatter):
    """
    Custom logging formatter that adds ANSI color codes to log messages.

    This formatter applies color coding based on log levels for better
    readability in terminal output.
    """

    COLORS = {
        logging.DEBUG: "\033[90m",  # Gray
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[41m",  # Red background
    }
    RESET = "\033[0m"

    # Erases a pending progress line before the record is written.
    CLEAR_LINE = "\033[K"

    def __init__(
        self, fmt: str | None = None, use_color: bool = True, clear_line: bool = False
    ) -> None:
        super().__init__(fmt)
        self.use_color = use_color
        self.clear_line = clear_line

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with colors.

        Args:
            record (logging.LogRecord):
                The log record to format.

        Returns:
            str:
                The formatted log message, with ANSI color codes when
                coloring is enabled.

        """
        message = super().format(record)
        color = self.COLORS.get(record.levelno, "")
        if color and self.use_color:
            message = f"{color}{message}{self.RESET}"
        if self.clear_line:
            message = f"{self.CLEAR_LINE}{message}"
        return message


@dataclass
class DirsizeConfig:
    """Settings for one pydirsize run, built once from the command line.

    Attributes:
        roots (list[str]):
            Directories to report on, processed one after the other.
        ignore_patterns (list[str]):
            Names, paths or glob patterns of directories not to descend into.
        min_size (int):
            Minimum total size (in bytes) of a reported directory.
        min_percent (int):
            Minimum share of the root total (0-100) of a reported directory.
        min_depth (int):
            Number of top levels always shown regardless of size.
        show_tree (bool):
            Whether to print the hierarchical view.
        show_flat (bool):
            Whether to print the flat list.
        logical (bool):
            Count file lengths instead of allocated blocks.
        human (bool):
            Print sizes with binary unit suffixes.
        silent (bool):
            Do not report progress while reading.
        debug (bool):
            Enable debug logging.

    """

    roots: list[str] = field(default_factory=lambda: ["."])
    ignore_patterns: list[str] = field(default_factory=list)
    min_size: int = 0
    min_percent: int = 0
    min_depth: int = 0
    show_tree: bool = False
    show_flat: bool = True
    logical: bool = False
    human: bool = False
    silent: bool = False
    debug: bool = False


@dataclass
class HelpRequested:
    """Outcome of argument parsing when the user asked for help."""

    text: str


@dataclass
class UsageError:
    """Outcome of argument parsing when the command line is malformed."""

    message: str
    usage: str


@dataclass
class ScanError:
    """A filesystem error recovered during the walk."""

    kind: ErrorKind
    path: str
    message: str


class CancelToken(Protocol):
    """Anything with an ``is_set()`` method, e.g. ``threading.Event``."""

    def is_set(self) -> bool: ...


class SizeAccessor:
    """Turns stat results into costs and costs into display strings.

    Args:
        logical (bool):
            Use ``st_size`` (byte length) instead of ``st_blocks``.
        human (bool):
            Format sizes with binary unit suffixes.

    """

    def __init__(self, logical: bool = False, human: bool = False) -> None:
        self.logical = logical
        self.human = human

    def cost(self, info: os.stat_result) -> int:
        """Return the cost of an entry in bytes."""
        if self.logical:
            return info.st_size
        return info.st_blocks * BLOCK_SIZE

    def display(self, size: int) -> str:
        """
        Format a size for display.

        In human mode the value is divided by 1024 while it is at least ten
        times the next unit, then rounded to nearest.

        Examples:
            >>> SizeAccessor(human=True).display(10240)
            '10 KiB'
            >>> SizeAccessor(human=True).display(10239)
            '10239 B'

        """
        if not self.human:
            return str(size)
        factor = 1
        index = 0
        while size >= factor * 10240 and index < len(HUMAN_UNITS) - 1:
            factor *= 1024
            index += 1
        return f"{(size + factor // 2) // factor} {HUMAN_UNITS[index]}"


def _glob_match(pattern: str, candidate: str) -> bool:
    """Match like fnmatch(3) with FNM_PATHNAME: wildcards stop at '/'."""
    pattern_parts = pattern.split("/")
    candidate_parts = candidate.split("/")
    if len(pattern_parts) != len(candidate_parts):
        return False
    return all(
        fnmatch.fnmatchcase(part, patt)
        for part, patt in zip(candidate_parts, pattern_parts)
    )


class IgnoreMatcher:
    """Set of patterns naming directories that must not be walked."""

    def __init__(self, patterns: list[str] | None = None) -> None:
        self.patterns: set[str] = set()
        for pattern in patterns or []:
            self.add(pattern)

    def add(self, pattern: str) -> None:
        self.patterns.add(pattern)

    def is_ignored(self, name: str, path: str) -> bool:
        """
        Check whether a directory is ignored.

        Args:
            name (str):
                Base name of the directory.
            path (str):
                Path of the directory as built during the walk.

        Returns:
            bool:
                True if the name or path equals a pattern, or matches one as
                a path-style glob.

        """
        if name in self.patterns or path in self.patterns:
            return True
        return any(
            _glob_match(patt, name) or _glob_match(patt, path)
            for patt in self.patterns
        )


@dataclass
class DirNode:
    """Aggregated size information for one directory.

    Attributes:
        name (str):
            Display label (base name, possibly annotated, or a generated
            label for synthetic nodes).
        total_size (int):
            Cost of this node and everything beneath it.
        direct_size (int):
            Cost of entries that are not walked sub-directories, including
            the directory entry itself.
        children (list[DirNode]):
            One node per walked sub-directory in enumeration order, plus the
            synthetic direct-content node when there is one.
        parent (DirNode | None):
            Enclosing node (None for root). Only used to rebuild paths.
        synthetic (bool):
            True for the node standing for a directory's direct content.

    """

    name: str
    total_size: int = 0
    direct_size: int = 0
    children: list["DirNode"] = field(default_factory=list)
    parent: "DirNode | None" = field(default=None, repr=False, compare=False)
    synthetic: bool = False

    def get_path(self) -> str:
        """Get the full path from root to this node."""
        names = []
        node: DirNode | None = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return os.path.join(*reversed(names))

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def walk(self) -> Iterator["DirNode"]:
        """Yield this node and all of its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass
class _Frame:
    """A directory whose listing is done but whose children are pending."""

    node: DirNode
    pending: deque[tuple[str, str]] = field(default_factory=deque)
    subdir_size: int = 0
    max_entry_size: int = 0
    max_entry_name: str = ""


class TreeBuilder:
    """
    Walks a directory tree into a DirNode tree.

    Args:
        sizes (SizeAccessor):
            Converts stat results to costs and formats labels.
        ignore (IgnoreMatcher | None):
            Directories not to descend into.
        progress_callback (Callable[[str], None] | None):
            Called with each directory path before it is opened.
        cancel (CancelToken | None):
            Checked once per directory entry; when set, reading stops and
            the tree is finalized with what was collected so far.

    Filesystem errors never abort the walk. They are logged and kept in
    ``errors`` as ScanError values.
    """

    def __init__(
        self,
        sizes: SizeAccessor,
        ignore: IgnoreMatcher | None = None,
        progress_callback: Callable[[str], None] | None = None,
        cancel: CancelToken | None = None,
    ) -> None:
        self.sizes = sizes
        self.ignore = ignore or IgnoreMatcher()
        self.progress_callback = progress_callback
        self.cancel = cancel
        self.errors: list[ScanError] = []

    def _report(self, kind: ErrorKind, what: str, path: str, error: OSError) -> None:
        message = error.strerror or str(error)
        logger.error(f"{what} {path}: {message}")
        self.errors.append(ScanError(kind=kind, path=path, message=message))

    def _cancelled(self) -> bool:
        return self.cancel is not None and self.cancel.is_set()

    def build(self, path: str, name: str | None = None) -> DirNode:
        """
        Build the size tree rooted at the given directory.

        Args:
            path (str):
                Directory to walk.
            name (str | None):
                Label of the root node (defaults to the path itself).

        Returns:
            DirNode:
                Root of the aggregated tree.

        Note:
            Sizes are aggregated post-order: a directory is finalized only
            once every sub-directory below it has been.

        """
        root_frame = self._open(name if name is not None else path, path, None)
        stack = [root_frame]
        while stack:
            frame = stack[-1]
            if frame.pending and not self._cancelled():
                child_name, child_path = frame.pending.popleft()
                stack.append(self._open(child_name, child_path, frame.node))
                continue
            stack.pop()
            self._finalize(frame)
            if stack:
                parent = stack[-1]
                parent.subdir_size += frame.node.total_size
                parent.node.children.append(frame.node)
        return root_frame.node

    def _open(self, name: str, path: str, parent: DirNode | None) -> _Frame:
        """Read one directory listing and account for its direct entries."""
        node = DirNode(name=name, parent=parent)
        frame = _Frame(node=node)

        if self.progress_callback:
            self.progress_callback(path)
        logger.debug(f"Reading {path}")

        try:
            own_cost = self.sizes.cost(os.lstat(path))
        except OSError as e:
            self._report(ErrorKind.METADATA, "Error while getting information about", path, e)
            own_cost = 0

        try:
            iterator = os.scandir(path)
        except OSError as e:
            self._report(ErrorKind.ENUMERATION, "Unable to open", path, e)
            return frame

        node.direct_size = own_cost
        frame.max_entry_size = own_cost
        with iterator:
            while not self._cancelled():
                try:
                    entry = next(iterator)
                except StopIteration:
                    break
                except OSError as e:
                    self._report(ErrorKind.ENUMERATION, "Error while reading", path, e)
                    break
                entry_path = entry.path
                try:
                    info = entry.stat(follow_symlinks=False)
                except OSError as e:
                    self._report(
                        ErrorKind.METADATA,
                        "Error while getting information about",
                        entry_path,
                        e,
                    )
                    continue
                if stat.S_ISDIR(info.st_mode) and not self.ignore.is_ignored(
                    entry.name, entry_path
                ):
                    frame.pending.append((entry.name, entry_path))
                    continue
                cost = self.sizes.cost(info)
                node.direct_size += cost
                if not frame.max_entry_name or cost > frame.max_entry_size:
                    frame.max_entry_size = cost
                    frame.max_entry_name = entry.name
        return frame

    def _finalize(self, frame: _Frame) -> None:
        """Add the direct-content node or label once all children are done."""
        node = frame.node
        node.total_size = node.direct_size + frame.subdir_size
        if node.children and node.total_size != 0:
            if frame.max_entry_name:
                label = (
                    f"(directory content, max: {self.sizes.display(frame.max_entry_size)}"
                    f" for {frame.max_entry_name})"
                )
            else:
                label = "(directory)"
            node.children.append(
                DirNode(
                    name=label,
                    total_size=node.direct_size,
                    direct_size=node.direct_size,
                    parent=node,
                    synthetic=True,
                )
            )
        elif not node.children and frame.max_entry_name:
            node.name = (
                f"{node.name} (max: {self.sizes.display(frame.max_entry_size)}"
                f" for {frame.max_entry_name})"
            )


def effective_min_size(root_total: int, min_size: int, min_percent: int) -> int:
    """
    Combine the explicit and the percentage-derived thresholds.

    Examples:
        >>> effective_min_size(1000, 50, 10)
        100

    """
    return max(min_size, root_total * min_percent // 100)


def collect(node: DirNode, min_size: int, min_depth: int = 0) -> list[DirNode]:
    """
    Collect the descendants of a node that pass the size threshold.

    Args:
        node (DirNode):
            Node whose descendants are collected (not included itself).
        min_size (int):
            Minimum total size of a collected node.
        min_depth (int):
            Number of levels below ``node`` kept regardless of size.

    Returns:
        list[DirNode]:
            Nodes in depth-first pre-order. Children of a rejected node are
            never visited.

    """
    result = []
    stack = [(child, min_depth) for child in reversed(node.children)]
    while stack:
        child, remaining = stack.pop()
        if child.total_size >= min_size or remaining > 0:
            result.append(child)
            stack.extend((sub, remaining - 1) for sub in reversed(child.children))
    return result


def select_flat(root: DirNode, min_size: int, min_depth: int = 0) -> list[DirNode]:
    """Return the root and its selected descendants, smallest first."""
    return sorted([root, *collect(root, min_size, min_depth)], key=sort_key_size)


def filtered_children(
    node: DirNode, min_size: int, level: int, min_depth: int = 0
) -> list[DirNode]:
    """
    Select the children of a node for the tree view.

    Children of a node at ``level`` below ``min_depth`` are all kept; deeper
    ones must reach ``min_size``. The result is sorted largest first, ties
    keeping enumeration order.
    """
    if min_depth <= level:
        selected = [child for child in node.children if child.total_size >= min_size]
    else:
        selected = list(node.children)
    return sorted(selected, key=sort_key_size, reverse=True)


def sort_key_size(node: DirNode) -> int:
    """Sort key function for sorting by size."""
    return node.total_size


def write_line(out: TextIO, line: str) -> None:
    """
    Write one output line, keeping undecodable file name bytes intact.

    Names read from disk may carry surrogate escapes for bytes that are not
    valid in the filesystem encoding. Those lines go to the underlying binary
    buffer re-encoded with os.fsencode, or with backslash escapes when the
    stream has no buffer.
    """
    try:
        out.write(f"{line}\n")
    except UnicodeEncodeError:
        buffer = getattr(out, "buffer", None)
        if buffer is None:
            out.write(f"{line}\n".encode("utf-8", "backslashreplace").decode("utf-8"))
            return
        out.flush()
        buffer.write(os.fsencode(f"{line}\n"))
        buffer.flush()


def render_flat(nodes: list[DirNode], sizes: SizeAccessor, out: TextIO) -> None:
    """Print one line per node: right-aligned size, then the full path."""
    for node in nodes:
        write_line(out, f"{sizes.display(node.total_size):>{SIZE_WIDTH}} {node.get_path()}")


def render_tree(
    root: DirNode,
    sizes: SizeAccessor,
    out: TextIO,
    min_size: int = 0,
    min_depth: int = 0,
) -> None:
    """
    Print a tree with box-drawing branches, largest subtrees first.

    Args:
        root (DirNode):
            Root of the tree to print.
        sizes (SizeAccessor):
            Formats the size column.
        out (TextIO):
            Output stream.
        min_size (int):
            Minimum total size of a printed node below ``min_depth``.
        min_depth (int):
            Number of top levels printed regardless of size.

    """
    # Each entry: node, level, and one "has later sibling" flag per level.
    stack: list[tuple[DirNode, int, list[bool]]] = [(root, 0, [])]
    while stack:
        node, level, has_more = stack.pop()
        prefix = "".join("│  " if more else "   " for more in has_more[:-1])
        if level > 0:
            prefix += "├─ " if has_more[-1] else "└─ "
        write_line(out, f"{sizes.display(node.total_size):>{SIZE_WIDTH}} {prefix}{node.name}")

        selected = filtered_children(node, min_size, level, min_depth)
        for i in reversed(range(len(selected))):
            stack.append((selected[i], level + 1, has_more + [i + 1 < len(selected)]))


_INTEGER_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def parse_size(size_str: str, binary: bool = False) -> int:
    """
    Parse a size threshold with an optional unit suffix.

    Accepts C-style integers (decimal, ``0x`` hex, leading-zero octal)
    followed by an optional K, M, G, T, P or E. Suffixes are decimal
    (powers of 1000) unless followed by ``i`` or ``binary`` is set, in which
    case they are powers of 1024. Only whitespace may follow.

    Args:
        size_str (str):
            Size string to parse (e.g., '42K', '1Gi', '0x400')
        binary (bool):
            Treat bare suffixes as binary.

    Returns:
        int:
            Size in bytes

    Raises:
        NumberFormatError: If the string is not a valid size

    Examples:
        >>> parse_size('42K')
        42000
        >>> parse_size('1Gi')
        1073741824

    """
    match = _INTEGER_RE.match(size_str)
    if match is None:
        raise NumberFormatError(f'"{size_str}" is not a valid number')
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    if sign == "-":
        value = -value

    rest = size_str[match.end() :]
    if rest and rest[0] in SUFFIX_STEPS:
        steps = SUFFIX_STEPS[rest[0]]
        if binary or rest[1:2] == "i":
            value *= 1024**steps
            rest = rest[2:] if rest[1:2] == "i" else rest[1:]
        else:
            value *= 1000**steps
            rest = rest[1:]

    if rest.strip():
        raise NumberFormatError(f'"{size_str}" is not a valid number')
    return value


def _percent(value: str) -> int:
    try:
        percent = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid percentage: '{value}'") from None
    if not 0 <= percent <= 100:
        raise argparse.ArgumentTypeError(f"percentage must be between 0 and 100: {percent}")
    return percent


def _depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}'") from None
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must not be negative: {depth}")
    return depth


def _size(value: str) -> int:
    try:
        return parse_size(value, binary=True)
    except NumberFormatError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


class _ArgumentError(Exception):
    """Raised by the parser instead of exiting the process."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise _ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = _Parser(
        prog="pydirsize",
        description="Show the size of a tree of directories.",
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Directories to analyze (default: current directory)",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Do not descend into directories matching the name, path or glob "
        "pattern (can be used multiple times)",
    )
    parser.add_argument(
        "-m",
        "--min-size",
        type=_size,
        default=0,
        metavar="SIZE",
        help="Only show directories whose size is at least SIZE; suffixes "
        "K, M, G, T, P, E are powers of 1024, 'i' is optional (e.g., '500K', '1Gi')",
    )
    parser.add_argument(
        "-p",
        "--min-percent",
        type=_percent,
        default=0,
        metavar="N",
        help="Only show directories holding at least N%% of the total",
    )
    parser.add_argument(
        "-d",
        "--min-depth",
        type=_depth,
        default=0,
        metavar="N",
        help="Always show the top N levels, whatever their size",
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Show the tree only",
    )
    parser.add_argument(
        "-b",
        "--both",
        action="store_true",
        help="Show the tree followed by the flat list",
    )
    parser.add_argument(
        "-l",
        "--logical",
        action="store_true",
        help="Count file lengths instead of allocated blocks",
    )
    parser.add_argument(
        "-H",
        "--human-readable",
        action="store_true",
        help="Print sizes in human-readable format (e.g., 12 MiB)",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Don't show progress",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def parse_arguments(argv: list[str]) -> DirsizeConfig | HelpRequested | UsageError:
    """
    Turn command-line arguments into a configuration.

    Returns:
        DirsizeConfig | HelpRequested | UsageError:
            The configuration, a help request, or the reason the command
            line was rejected. Never exits the process.

    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except _ArgumentError as e:
        return UsageError(message=str(e), usage=parser.format_usage())
    if args.help:
        return HelpRequested(text=parser.format_help())

    show_tree = args.tree or args.both
    show_flat = args.both or not args.tree
    return DirsizeConfig(
        roots=args.paths,
        ignore_patterns=args.ignore,
        min_size=args.min_size,
        min_percent=args.min_percent,
        min_depth=args.min_depth,
        show_tree=show_tree,
        show_flat=show_flat,
        logical=args.logical,
        human=args.human_readable,
        silent=args.silent,
        debug=args.debug,
    )


def report(config: DirsizeConfig, out: TextIO | None = None) -> list[ScanError]:
    """
    Walk every root of the configuration and print its reports.

    Returns:
        list[ScanError]:
            Filesystem errors recovered along the way, for all roots.

    """
    out = out or sys.stdout
    sizes = SizeAccessor(logical=config.logical, human=config.human)
    ignore = IgnoreMatcher(config.ignore_patterns)
    progress_callback = None
    if not config.silent:

        def progress_callback(path: str) -> None:
            print(f"Reading {path}\033[K", end="\r", file=sys.stderr, flush=True)

    errors: list[ScanError] = []
    for root_path in config.roots:
        builder = TreeBuilder(sizes, ignore, progress_callback)
        root = builder.build(root_path)
        errors.extend(builder.errors)
        if not config.silent:
            # Clear progress line
            print("\033[K", end="", file=sys.stderr, flush=True)

        min_size = effective_min_size(root.total_size, config.min_size, config.min_percent)
        logger.debug(f"{root_path}: total {root.total_size}, threshold {min_size}")
        if config.show_tree:
            render_tree(root, sizes, out, min_size, config.min_depth)
        if config.show_flat:
            render_flat(select_flat(root, min_size, config.min_depth), sizes, out)
    return errors


def setup_logging(debug: bool = False) -> None:
    """Install the colored stderr handler on the module logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        ColorFormatter(
            "%(levelname)s: %(message)s",
            use_color=sys.stderr.isatty(),
            clear_line=sys.stderr.isatty(),
        )
    )
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def run(argv: list[str]) -> int:
    """
    Run pydirsize with the given arguments.

    Returns:
        int:
            Process exit code: 0 on success (including help), 1 on a
            malformed command line or an unexpected failure.

    """
    outcome = parse_arguments(argv)
    if isinstance(outcome, HelpRequested):
        print(outcome.text, end="")
        return 0
    if isinstance(outcome, UsageError):
        print(f"pydirsize: error: {outcome.message}", file=sys.stderr)
        print(outcome.usage, end="", file=sys.stderr)
        return 1

    setup_logging(outcome.debug)
    try:
        report(outcome)
    except Exception:
        logger.exception("Unexpected error")
        return 1
    return 0


def main() -> None:
    """
    Main entry point for the pydirsize reporter.

    Parses command-line arguments, walks each requested directory, and
    prints the tree and/or flat reports.
    """
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
