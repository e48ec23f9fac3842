"""
Command-line filters for the block-sort front end.

    blocksort-bwt - < input > output.bwt      forward BWT
    blocksort-bwt + < output.bwt > input      inverse BWT
    blocksort-mtf - < output.bwt > output.mtf MTF encode
    blocksort-mtf + < output.mtf > output.bwt MTF decode
    blocksort - < input > output.mtf          both stages
    blocksort + < output.mtf > input

Data is read from stdin and written to stdout as raw bytes unless
-i/-o are given. Statistics (-v) go to stderr.
"""

import sys
import time
import argparse
from typing import Callable, List, Optional

from blocksort import bwt, mtf, pipeline
from blocksort.errors import BlockSortError
from blocksort.suffix_array import DEFAULT_STRATEGY, RANKING_STRATEGIES


def _bwt_forward(data: bytes, strategy: str) -> bytes:
    return pipeline.pack_block(bwt.transform(data, strategy=strategy))


def _bwt_inverse(data: bytes, strategy: str) -> bytes:
    return bwt.untransform(pipeline.unpack_block(data))


def _mtf_encode(data: bytes, strategy: str) -> bytes:
    return mtf.encode(data)


def _mtf_decode(data: bytes, strategy: str) -> bytes:
    return mtf.decode(data)


def _pipeline_forward(data: bytes, strategy: str) -> bytes:
    return pipeline.compress(data, strategy=strategy)


def _pipeline_inverse(data: bytes, strategy: str) -> bytes:
    return pipeline.decompress(data)


# (forward, inverse) per command
COMMANDS = {
    'blocksort': (_pipeline_forward, _pipeline_inverse),
    'blocksort-bwt': (_bwt_forward, _bwt_inverse),
    'blocksort-mtf': (_mtf_encode, _mtf_decode),
}

DESCRIPTIONS = {
    'blocksort': "Burrows-Wheeler + move-to-front front end",
    'blocksort-bwt': "Burrows-Wheeler transform",
    'blocksort-mtf': "Move-to-front encoding",
}


def build_parser(prog: str) -> argparse.ArgumentParser:
    """Argument parser shared by all three commands."""
    parser = argparse.ArgumentParser(prog=prog, description=DESCRIPTIONS[prog])
    parser.add_argument('mode', choices=['-', '+'],
                        help="'-' to transform/encode, '+' to invert/decode")
    parser.add_argument('-i', '--input', help="Input file (default: stdin)")
    parser.add_argument('-o', '--output', help="Output file (default: stdout)")
    parser.add_argument('--strategy', default=DEFAULT_STRATEGY,
                        choices=sorted(RANKING_STRATEGIES.keys()),
                        help=f"Rotation ranking strategy (default: {DEFAULT_STRATEGY})")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Print statistics to stderr")
    return parser


def _read_input(path: Optional[str]) -> bytes:
    if path:
        with open(path, 'rb') as f:
            return f.read()
    return sys.stdin.buffer.read()


def _write_output(path: Optional[str], data: bytes):
    if path:
        with open(path, 'wb') as f:
            f.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def run(prog: str, argv: Optional[List[str]] = None) -> int:
    """
    Run one of the commands.

    Returns:
        Exit status: 0 on success, 1 on invalid input or an I/O error
    """
    args = build_parser(prog).parse_args(argv)
    forward, inverse = COMMANDS[prog]
    func: Callable[[bytes, str], bytes] = forward if args.mode == '-' else inverse

    try:
        data = _read_input(args.input)

        start = time.time()
        result = func(data, args.strategy)
        elapsed = time.time() - start

        _write_output(args.output, result)
    except (BlockSortError, OSError) as e:
        print(f"{prog}: error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        action = "encoded" if args.mode == '-' else "decoded"
        print(f"{prog}: {action} {len(data):,} -> {len(result):,} bytes in {elapsed:.3f}s",
              file=sys.stderr)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for blocksort command."""
    return run('blocksort', argv)


def bwt_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for blocksort-bwt command."""
    return run('blocksort-bwt', argv)


def mtf_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for blocksort-mtf command."""
    return run('blocksort-mtf', argv)


if __name__ == "__main__":
    sys.exit(main())
