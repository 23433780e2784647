#!/usr/bin/env python3
"""
Command-line interface for the puzzle engine.

Usage:
    python -m mathit.cli generate --seed 42 --level 3
    python -m mathit.cli generate --seed 42 --level 3 --json
    python -m mathit.cli solve --seed 42 --level 5 --max-nodes 50000
    python -m mathit.cli play --seed 42

In play mode each line is a move ``<slot> <op> <slot>`` with 1-based
slot numbers (e.g. ``1 + 2``). ``r`` retries the level, ``n`` goes to
the next level after a win, ``q`` quits.
"""

from typing import List, Optional
import argparse
import json
import logging
import sys

from .config import EngineConfig, load_config
from .engine.errors import MathitError
from .engine.operations import Operation
from .generation.generator import generate_puzzle
from .outcome import OutcomeClassifier, format_number, format_target
from .play.session import PuzzleSession, SessionListener, SessionPhase
from .search.solver import PuzzleSolver, SolverConfig
from .sentry_config import capture_exception, init_sentry, tag_level

logger = logging.getLogger(__name__)


# =============================================================================
# TEXT-MODE PLAY
# =============================================================================

class ConsoleListener(SessionListener):
    """Prints session notifications."""

    def __init__(self, out=None):
        self.out = out or sys.stdout

    def on_level_started(self, puzzle):
        print(f"\nLevel {puzzle.context.level_index + 1}", file=self.out)

    def on_merge_success(self, pool):
        print("Merged: " + "  ".join(format_number(v) for v in pool), file=self.out)

    def on_merge_failure(self):
        print("That merge failed (division by zero), try another one.", file=self.out)

    def on_puzzle_complete(self, final_value, target):
        print(OutcomeClassifier().message(final_value, target), file=self.out)


def render_board(session: PuzzleSession) -> str:
    """One-screen text rendering of the session."""
    slots = "  ".join(f"[{slot.index + 1}] {format_number(slot.value)}" for slot in session.slots)
    ops = " ".join(op.symbol for op in session.operators)
    return f"Target: {format_target(session.target)}\n{slots}\nOperators: {ops}"


def parse_move(line: str, session: PuzzleSession):
    """
    Parse ``"<slot> <op> <slot>"`` into (first_token, operator, second_token).

    Raises:
        ValueError: Malformed move, unknown slot or unavailable operator.
    """
    parts = line.split()
    if len(parts) != 3:
        raise ValueError("Moves look like '1 + 2'")
    first, symbol, second = parts
    operator = Operation.from_symbol(symbol)
    if operator not in session.operators:
        raise ValueError(f"Operator {operator} is not available at this level")

    slots = session.slots
    try:
        first_idx, second_idx = int(first) - 1, int(second) - 1
    except ValueError:
        raise ValueError("Slots are numbers, e.g. '1 + 2'") from None
    for idx in (first_idx, second_idx):
        if not 0 <= idx < len(slots):
            raise ValueError(f"Slot {idx + 1} does not exist")
    if first_idx == second_idx:
        raise ValueError("Pick two different slots")
    return slots[first_idx].token, operator, slots[second_idx].token


def play(session: PuzzleSession, lines, out=None) -> int:
    """Drive ``session`` from an iterable of input lines."""
    out = out or sys.stdout
    print(render_board(session), file=out)

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line == "q":
            break
        if line == "r":
            session.retry()
        elif line == "n":
            if session.phase is SessionPhase.DONE and session.result.outcome.offers_next_level:
                session.advance_level()
            else:
                print("Finish the level with a win first.", file=out)
                continue
        elif session.phase is SessionPhase.DONE:
            options = []
            if session.result.outcome.offers_next_level:
                options.append("'n' for the next level")
            if session.result.outcome.offers_retry:
                options.append("'r' to retry")
            print("Level finished: " + " or ".join(options) + ", 'q' to quit.", file=out)
            continue
        else:
            try:
                first, operator, second = parse_move(line, session)
            except ValueError as e:
                print(str(e), file=out)
                continue
            session.on_slot_selected(first)
            session.on_operator_selected(operator)
            session.on_slot_selected(second)
            if session.phase is SessionPhase.DONE:
                continue
        print(render_board(session), file=out)

    return 0


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_generate(args, config: EngineConfig) -> int:
    puzzle = generate_puzzle(args.seed, args.level)
    tag_level(puzzle.context)
    if args.json:
        print(json.dumps(puzzle.to_dict(), indent=2))
        return 0

    print(f"Level {args.level + 1} (seed {args.seed})")
    print(f"Numbers:   {'  '.join(format_number(v) for v in puzzle.pool)}")
    print(f"Operators: {' '.join(op.symbol for op in puzzle.operators)}")
    print(f"Target:    {format_target(puzzle.target)}")
    return 0


def cmd_solve(args, config: EngineConfig) -> int:
    puzzle = generate_puzzle(args.seed, args.level)
    tag_level(puzzle.context)
    max_nodes = args.max_nodes if args.max_nodes is not None else config.solver_max_nodes
    result = PuzzleSolver(SolverConfig(max_nodes=max_nodes)).solve(
        puzzle.pool, puzzle.operators, puzzle.target,
    )

    print(f"Target: {format_target(puzzle.target)}")
    if result.found:
        for step in result.steps:
            print(f"  {step.describe()}")
    elif result.exhausted:
        print(f"No solution within {max_nodes} nodes; generator path:")
        for step in puzzle.simulation:
            print(f"  {step.describe()}")
    else:
        print("No solution found")
    print(f"Nodes explored: {result.nodes_explored:,}")
    return 0 if result.found or result.exhausted else 1


def cmd_play(args, config: EngineConfig) -> int:
    session = PuzzleSession(
        seed=args.seed,
        level_index=args.level,
        listeners=[ConsoleListener()],
    )
    tag_level(session.context)
    print(f"Seed {session.seed}")
    return play(session, sys.stdin)


def build_parser(config: EngineConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mathit", description="Math it puzzle engine")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def level_args(p, seed_required):
        if seed_required:
            p.add_argument("--seed", type=int, default=config.seed, required=config.seed is None,
                           help="Session seed (or MATHIT_SEED)")
        else:
            p.add_argument("--seed", type=int, default=config.seed,
                           help="Session seed (random if omitted)")
        p.add_argument("--level", type=int, default=config.start_level,
                       help="Zero-based level index")

    p_gen = sub.add_parser("generate", help="Print the puzzle of a level")
    level_args(p_gen, seed_required=True)
    p_gen.add_argument("--json", action="store_true", help="JSON output")
    p_gen.set_defaults(func=cmd_generate)

    p_solve = sub.add_parser("solve", help="Search a merge sequence reaching the target")
    level_args(p_solve, seed_required=True)
    p_solve.add_argument("--max-nodes", type=int, default=None, help="Search node budget")
    p_solve.set_defaults(func=cmd_solve)

    p_play = sub.add_parser("play", help="Play in the terminal")
    level_args(p_play, seed_required=False)
    p_play.set_defaults(func=cmd_play)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the mathit CLI."""
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )
    if init_sentry(config.sentry_dsn, config.environment):
        logger.info("Sentry error monitoring enabled")

    try:
        return args.func(args, config)
    except MathitError as e:
        capture_exception(e)
        logger.error("%s", e)
        return 2
    except ValueError as e:
        # Bad input (e.g. a negative seed), nothing to report
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
