#!/usr/bin/env python
"""
Command-line entry point.

Examples:

.. code-block:: bash

    # Advice, given the guesses and feedback so far
    wordle_strategies suggest plaid -/--- tuner --+-/

    # Watch one game
    wordle_strategies solve knoll --algorithm minimax

    # Every solution from one opener, to CSV
    wordle_strategies test_performance --opener plaid --use_score_cache

    # Every solution from every opener; resumable
    wordle_strategies batch --progress_file ~/wordlestart.txt

Feedback is one character per letter: ``-`` absent, ``/`` present but in the
wrong location, ``+`` correct location.
"""

import argparse
import logging

from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from wordle_strategies.analysis import (
    best_human_guess,
    compare_guessers,
    history_from_strings,
    suggest,
)
from wordle_strategies.batch import measure_performance, run_batch
from wordle_strategies.candidates import DEFAULT_MODE, Mode
from wordle_strategies.constants import (
    DEFAULT_GUESS_WORDS,
    DEFAULT_NPROC,
    DEFAULT_OPENER,
    DEFAULT_OS_DICT,
    DEFAULT_PROGRESS_FILE,
    DEFAULT_SOLUTION_WORDS,
    WORDLEN,
)
from wordle_strategies.dictionary import Dictionary, make_wordlist
from wordle_strategies.guessers import DEFAULT_GUESSER, GUESSERS
from wordle_strategies.score_cache import ScoreCache, Scorer
from wordle_strategies.solver import solve
from wordle_strategies.words import encode

rootlog = logging.getLogger(__name__)


def main() -> None:
    # -------------------------------------------------------------------------
    # Arguments
    # -------------------------------------------------------------------------
    parser = argparse.ArgumentParser(
        "Wordle strategies.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--guess_words", default=DEFAULT_GUESS_WORDS,
        help=f"File of all {WORDLEN}-letter words that may be guessed, one "
             f"per line, in lower case"
    )
    parser.add_argument(
        "--solution_words", default=DEFAULT_SOLUTION_WORDS,
        help=f"File of all {WORDLEN}-letter words that may be the solution"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Be verbose"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_strategy_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--algorithm", type=str, choices=GUESSERS.keys(),
            default=DEFAULT_GUESSER,
            help="Algorithm to use"
        )
        p.add_argument(
            "--mode", type=str, choices=[m.value for m in Mode],
            default=DEFAULT_MODE.value,
            help="Which guesses are allowed"
        )
        p.add_argument(
            "--use_score_cache", action="store_true",
            help="Precompute all scores (faster, but needs memory and a "
                 "little time to start)"
        )

    def add_parallel_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--nproc", type=int, default=DEFAULT_NPROC,
            help="Number of parallel processes"
        )
        p.add_argument(
            "--no_ray", action="store_true",
            help="Use a ProcessPoolExecutor rather than Ray"
        )

    cmd_make = "make_wordlist"
    parser_make = subparsers.add_parser(
        cmd_make,
        help="Make a word list from a general dictionary",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_make.add_argument(
        "--source_dict", default=DEFAULT_OS_DICT,
        help="File of all dictionary words."
    )
    parser_make.add_argument(
        "--output", required=True,
        help="File to write"
    )

    cmd_suggest = "suggest"
    parser_suggest = subparsers.add_parser(
        cmd_suggest,
        help="Suggest the next guess",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_suggest.add_argument(
        "clues", nargs="*",
        help="Alternating guesses and feedback, e.g. 'plaid -/---'"
    )
    add_strategy_args(parser_suggest)

    cmd_solve = "solve"
    parser_solve = subparsers.add_parser(
        cmd_solve,
        help="Solve one word automatically",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_solve.add_argument(
        "solution",
        help="The word to find"
    )
    parser_solve.add_argument(
        "--opener", default=DEFAULT_OPENER,
        help="First guess"
    )
    add_strategy_args(parser_solve)

    cmd_test_performance = "test_performance"
    parser_test_performance = subparsers.add_parser(
        cmd_test_performance,
        help="Solve every solution from one opener",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_test_performance.add_argument(
        "--output", type=str, default=None,
        help="File for CSV-format output (if unspecified, a sensible default "
             "will be created based on the algorithm chosen)"
    )
    parser_test_performance.add_argument(
        "--opener", default=DEFAULT_OPENER,
        help="First guess"
    )
    add_strategy_args(parser_test_performance)
    add_parallel_args(parser_test_performance)

    cmd_batch = "batch"
    parser_batch = subparsers.add_parser(
        cmd_batch,
        help="Solve every solution from every opener (resumable)",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_batch.add_argument(
        "--progress_file", default=DEFAULT_PROGRESS_FILE,
        help="File to append results to, and to resume from"
    )
    parser_batch.add_argument(
        "--openers", nargs="*",
        help="Openers to try (default: every solution word)"
    )
    add_strategy_args(parser_batch)
    add_parallel_args(parser_batch)

    cmd_compare = "compare"
    parser_compare = subparsers.add_parser(
        cmd_compare,
        help="Compare two algorithms on every solution",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser_compare.add_argument(
        "--algorithm_b", type=str, choices=GUESSERS.keys(),
        default="minimax",
        help="Algorithm to compare against --algorithm"
    )
    parser_compare.add_argument(
        "--opener", default=DEFAULT_OPENER,
        help="First guess"
    )
    add_strategy_args(parser_compare)

    cmd_human = "best_human_guess"
    subparsers.add_parser(
        cmd_human,
        help="Find the opener with the most ochre/green letters on average",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    args = parser.parse_args()

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    loglevel = logging.DEBUG if args.verbose else logging.INFO
    main_only_quicksetup_rootlogger(level=loglevel)

    # -------------------------------------------------------------------------
    # Act
    # -------------------------------------------------------------------------
    if args.command == cmd_make:
        make_wordlist(args.source_dict, args.output)
        return

    dictionary = Dictionary.from_files(args.guess_words, args.solution_words)
    if args.command == cmd_human:
        best_human_guess(dictionary)
        return

    guesser = GUESSERS[args.algorithm]
    mode = Mode(args.mode)
    scorer = ScoreCache(dictionary) if args.use_score_cache else Scorer()

    if args.command == cmd_suggest:
        scores = history_from_strings(dictionary, args.clues)
        advice = suggest(dictionary, scores, guesser, mode, scorer)
        rootlog.info(f"Suggestion algorithm: {args.algorithm}\n{advice}")
    elif args.command == cmd_solve:
        scores = solve(dictionary, guesser, encode(args.solution),
                       opener=encode(args.opener), mode=mode, scorer=scorer)
        rootlog.info(f"Solved in {scores.size()}: {scores.colourful_str()}")
    elif args.command == cmd_test_performance:
        output_filename = (
            args.output or f"out_{args.algorithm}_{args.opener}.csv"
        )
        measure_performance(
            dictionary, guesser, output_filename,
            opener=encode(args.opener),
            nproc=args.nproc,
            mode=mode,
            scorer=scorer,
            use_ray=not args.no_ray,
            loglevel=loglevel,
        )
    elif args.command == cmd_batch:
        openers = (
            [encode(w) for w in args.openers] if args.openers else None
        )
        run_batch(
            dictionary, guesser, args.progress_file,
            openers=openers,
            nproc=args.nproc,
            mode=mode,
            scorer=scorer,
            use_ray=not args.no_ray,
            loglevel=loglevel,
        )
    elif args.command == cmd_compare:
        comparison = compare_guessers(
            dictionary, guesser, GUESSERS[args.algorithm_b],
            opener=encode(args.opener), mode=mode, scorer=scorer,
        )
        rootlog.info(f"A = {args.algorithm}, B = {args.algorithm_b}. "
                     f"{comparison}")
    else:
        raise AssertionError("argument-parsing bug")


if __name__ == '__main__':
    main()
