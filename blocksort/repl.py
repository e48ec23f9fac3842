#!/usr/bin/env python3
"""
Interactive REPL for blocksort.

Provides an interactive shell for exploring the Burrows-Wheeler transform
and move-to-front coding on small inputs: sorted rotation matrices, origin
rows, rank streams and full pipeline round trips.
"""

import sys
import shlex
from typing import List

try:
    from prompt_toolkit import prompt
    from prompt_toolkit.history import InMemoryHistory
    from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
    PROMPT_TOOLKIT_AVAILABLE = True
except ImportError:
    PROMPT_TOOLKIT_AVAILABLE = False

from blocksort import bwt, mtf, pipeline
from blocksort.bwt import TransformedBlock
from blocksort.suffix_array import (
    DEFAULT_STRATEGY,
    RANKING_STRATEGIES,
    CircularSuffixArray,
)
from blocksort.symbols import format_symbols


# Rotation matrices with more rows than this are truncated in the display
MAX_MATRIX_ROWS = 64

DISPLAY_MODES = ('text', 'bytes')


class BlockSortREPL:
    """Interactive REPL for the block-sort front end."""

    def __init__(self):
        """Initialize REPL."""
        # Configuration
        self.strategy = DEFAULT_STRATEGY
        self.display = 'text'

        # Command history
        if PROMPT_TOOLKIT_AVAILABLE:
            self.history = InMemoryHistory()
        else:
            self.history: List[str] = []

        # Commands
        self.commands = {
            # System
            'help': self.cmd_help,
            'quit': self.cmd_quit,
            'exit': self.cmd_quit,

            # Ranking
            'rank': self.cmd_rank,
            'rotations': self.cmd_rotations,

            # Transforms
            'bwt': self.cmd_bwt,
            'unbwt': self.cmd_unbwt,
            'mtf': self.cmd_mtf,
            'unmtf': self.cmd_unmtf,
            'compress': self.cmd_compress,
            'decompress': self.cmd_decompress,

            # Configuration
            'config': self.cmd_config,
            'set': self.cmd_set,
        }

    def run(self):
        """Run the REPL."""
        print("=" * 70)
        print("  BLOCKSORT - Burrows-Wheeler / Move-to-Front Explorer")
        print("=" * 70)
        print()
        print("Type 'help' for commands.")
        print()

        while True:
            try:
                prompt_str = f"blocksort[{self.strategy}]> "

                if PROMPT_TOOLKIT_AVAILABLE:
                    user_input = prompt(
                        prompt_str,
                        history=self.history,
                        auto_suggest=AutoSuggestFromHistory()
                    ).strip()
                else:
                    user_input = input(prompt_str).strip()

                if not user_input:
                    continue

                if not PROMPT_TOOLKIT_AVAILABLE:
                    self.history.append(user_input)

                self.execute(user_input)
                print()

            except KeyboardInterrupt:
                print("\n(Use 'quit' to exit)")
                continue
            except EOFError:
                print("\nGoodbye!")
                break

    def execute(self, command_line: str):
        """Execute a command."""
        try:
            parts = shlex.split(command_line)
        except ValueError as e:
            print(f"Parse error: {e}")
            return

        if not parts:
            return

        cmd = parts[0].lower()
        args = parts[1:]

        if cmd in self.commands:
            try:
                self.commands[cmd](args)
            except Exception as e:
                print(f"Error: {e}")
        else:
            print(f"Unknown command: {cmd}")
            print("Type 'help' for available commands.")

    # ========================================================================
    # HELP
    # ========================================================================

    def cmd_help(self, args: List[str]):
        """Show help."""
        print("BLOCKSORT COMMANDS")
        print("=" * 70)
        print()
        print("Ranking:")
        print("  rank <text>               Sorted rotation offsets")
        print("  rotations <text>          Sorted rotation matrix with origin row")
        print()
        print("Transforms:")
        print("  bwt <text>                Burrows-Wheeler transform")
        print("  unbwt <origin> <text>     Inverse transform")
        print("  mtf <text>                Move-to-front ranks")
        print("  unmtf <r1> <r2> ...       Decode move-to-front ranks")
        print("  compress <text>           BWT + MTF, shown as hex")
        print("  decompress <hex>          Invert compress")
        print()
        print("Configuration:")
        print("  config                    Show current settings")
        print("  set strategy <name>       Ranking strategy (comparison, doubling, divsufsort)")
        print("  set display <mode>        Output as text or bytes")
        print()
        print("System:")
        print("  help                      Show this help")
        print("  quit, exit                Exit REPL")
        print()
        print("Quote text containing spaces: bwt \"to be or not to be\"")

    def cmd_quit(self, args: List[str]):
        """Exit the REPL."""
        print("Goodbye!")
        sys.exit(0)

    # ========================================================================
    # RANKING
    # ========================================================================

    def cmd_rank(self, args: List[str]):
        """Show the sorted rotation offsets."""
        if not args:
            print("Usage: rank <text>")
            return

        csa = CircularSuffixArray(self._text(args), strategy=self.strategy)
        print(f"n = {len(csa)}")
        print(f"order: {csa.order.tolist()}")

    def cmd_rotations(self, args: List[str]):
        """Show the sorted rotation matrix."""
        if not args:
            print("Usage: rotations <text>")
            return

        csa = CircularSuffixArray(self._text(args), strategy=self.strategy)
        if len(csa) == 0:
            print("(empty block)")
            return

        print(f"{'row':>4}  {'offset':>6}  rotation")
        for row in range(min(len(csa), MAX_MATRIX_ROWS)):
            offset = csa.index(row)
            marker = "  <- origin" if offset == 0 else ""
            print(f"{row:>4}  {offset:>6}  {format_symbols(csa.rotation(offset))}{marker}")

        if len(csa) > MAX_MATRIX_ROWS:
            print(f"... ({len(csa) - MAX_MATRIX_ROWS} more rows)")

        print()
        print(f"First column: {format_symbols(bwt.first_column(csa.data))}")
        print(f"Last column:  {format_symbols(bwt.last_column(csa.data, csa.order))}")

    # ========================================================================
    # TRANSFORMS
    # ========================================================================

    def cmd_bwt(self, args: List[str]):
        """Burrows-Wheeler transform."""
        if not args:
            print("Usage: bwt <text>")
            return

        block = bwt.transform(self._text(args), strategy=self.strategy)
        print(f"origin: {block.origin}")
        print(f"data:   {self._format(block.data)}")

    def cmd_unbwt(self, args: List[str]):
        """Inverse Burrows-Wheeler transform."""
        if len(args) < 2:
            print("Usage: unbwt <origin> <text>")
            return

        origin = int(args[0])
        data = bwt.untransform(TransformedBlock(origin, self._text(args[1:])))
        print(self._format(data))

    def cmd_mtf(self, args: List[str]):
        """Move-to-front encode."""
        if not args:
            print("Usage: mtf <text>")
            return

        ranks = mtf.encode(self._text(args))
        print(" ".join(str(r) for r in ranks))

    def cmd_unmtf(self, args: List[str]):
        """Move-to-front decode."""
        if not args:
            print("Usage: unmtf <r1> <r2> ...")
            return

        ranks = [int(a) for a in args]
        print(self._format(mtf.decode(ranks)))

    def cmd_compress(self, args: List[str]):
        """Full forward pipeline."""
        if not args:
            print("Usage: compress <text>")
            return

        payload = pipeline.compress(self._text(args), strategy=self.strategy)
        print(payload.hex())

    def cmd_decompress(self, args: List[str]):
        """Full inverse pipeline."""
        if not args:
            print("Usage: decompress <hex>")
            return

        payload = bytes.fromhex("".join(args))
        print(self._format(pipeline.decompress(payload)))

    # ========================================================================
    # CONFIGURATION
    # ========================================================================

    def cmd_config(self, args: List[str]):
        """Show current configuration."""
        print("Configuration:")
        print(f"  strategy: {self.strategy}")
        print(f"  display:  {self.display}")

    def cmd_set(self, args: List[str]):
        """Set configuration parameter."""
        if len(args) < 2:
            print("Usage: set <param> <value>")
            print("Parameters: strategy, display")
            return

        param = args[0].lower()
        value = args[1]

        if param == 'strategy':
            if value not in RANKING_STRATEGIES:
                print(f"Unknown strategy: {value}")
                print(f"Available: {', '.join(RANKING_STRATEGIES.keys())}")
                return
            self.strategy = value
        elif param == 'display':
            if value not in DISPLAY_MODES:
                print(f"Unknown display mode: {value}")
                print(f"Available: {', '.join(DISPLAY_MODES)}")
                return
            self.display = value
        else:
            print(f"Unknown parameter: {param}")
            return

        print(f"Set {param} = {value}")

    # ========================================================================
    # UTILITIES
    # ========================================================================

    def _text(self, args: List[str]) -> bytes:
        """Join command arguments back into one block."""
        return " ".join(args).encode('utf-8')

    def _format(self, data: bytes) -> str:
        """Format a block for display."""
        if self.display == 'bytes':
            return " ".join(str(b) for b in data)
        return format_symbols(data)


def main():
    """Entry point for REPL."""
    import argparse

    parser = argparse.ArgumentParser(description="blocksort Interactive REPL")
    parser.add_argument('--strategy', choices=sorted(RANKING_STRATEGIES.keys()),
                        default=DEFAULT_STRATEGY, help="Ranking strategy")

    args = parser.parse_args()

    repl = BlockSortREPL()
    repl.strategy = args.strategy
    repl.run()


if __name__ == "__main__":
    main()
