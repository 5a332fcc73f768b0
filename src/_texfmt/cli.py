"""
The texfmt command: reads a (La)TeX source from a file or standard input,
tokenizes it and writes it back out. No formatting is done yet, the source is
written unchanged.
"""

import argparse
import logging
import sys
import time
from functools import wraps

from _texfmt.lexing import read_source, tokenize
from _texfmt.tokenizer import LexicalError
from texfmt.version import version as texfmt_version

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)5s] %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s [%(levelname)5s] %(name)s:%(lineno)d %(message)s"


def timed(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            logger.debug(
                "%s took %.3f ms", func.__name__, (time.perf_counter() - start) * 1000
            )

    return wrapper


def make_parser():
    parser = argparse.ArgumentParser(prog="texfmt", description="(La)TeX formatter.")
    parser.add_argument(
        "input", nargs="?", help="Input file, standard input if not given"
    )
    parser.add_argument(
        "-o", "--output", help="Output file, standard output if not given"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Log debugging information"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if the input cannot be tokenized to the end",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {texfmt_version}"
    )
    return parser


def init_logger(debug):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT if debug else LOG_FORMAT))
    root = logging.getLogger("_texfmt")
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def read_input(path):
    if path is None:
        # Decode ourselves so that line endings are not translated
        return sys.stdin.buffer.read().decode("utf-8")
    return read_source(path)


def write_output(path, content):
    if path is None:
        # Encode ourselves so that line endings are not translated
        sys.stdout.flush()
        sys.stdout.buffer.write(content.encode("utf-8"))
        sys.stdout.buffer.flush()
        return
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.write(content)


@timed
def process_source(content, strict=False):
    """
    Tokenizes the source and returns the text to be written, which currently
    is the source itself.
    """
    tokens, rest = tokenize(content)
    if rest:
        offset = len(content) - len(rest)
        if strict:
            raise LexicalError(offset, rest)
        logger.warning(
            "Could not tokenize input after offset %d, %d characters left",
            offset,
            len(rest),
        )
    logger.debug("Input consists of %d tokens", len(tokens))
    return content


def main(argv=None):
    args = make_parser().parse_args(argv)
    init_logger(args.debug)
    logger.debug("%s", args)

    try:
        content = read_input(args.input)
    except (OSError, UnicodeDecodeError) as err:
        logger.error("cannot read %s: %s", args.input or "standard input", err)
        return 1

    try:
        output = process_source(content, strict=args.strict)
    except LexicalError as err:
        logger.error("cannot process %s: %s", args.input or "standard input", err)
        return 1

    try:
        write_output(args.output, output)
    except OSError as err:
        logger.error("cannot write %s: %s", args.output or "standard output", err)
        return 1
    return 0
