"""
Solving many games, in parallel, to compare strategies and openers.

Two kinds of run:

- :func:`run_batch`: for each of many openers, solve every solution starting
  from that opener, and record the total and maximum number of guesses. This
  takes a long time for a full dictionary (days, for every solution word as
  an opener), so progress is appended to a log file, one line per opener, and
  a restarted run skips the openers already there.

- :func:`measure_performance`: for a single opener, solve every solution and
  write the number of guesses for each to a CSV file.

Work is CPU-bound, so it is spread across processes rather than threads,
either with Ray (the default) or with a ``ProcessPoolExecutor``. With
``nproc <= 1`` everything runs in this process.
"""

from concurrent.futures import ProcessPoolExecutor, as_completed
import csv
import logging
import os
from statistics import mean, median
from timeit import default_timer as timer
from typing import (
    Dict, Generator, Iterable, List, Optional, Sequence, Set, TextIO, Tuple
)

from cardinal_pythonlib.lists import chunks
from cardinal_pythonlib.logs import configure_logger_for_colour
import ray
from ray.exceptions import RayError

from wordle_strategies.candidates import DEFAULT_MODE, DEFAULT_SCORER, Mode
from wordle_strategies.constants import (
    DEFAULT_NPROC,
    DEFAULT_OPENER,
    N_GUESSES,
)
from wordle_strategies.dictionary import Dictionary
from wordle_strategies.errors import BatchError
from wordle_strategies.guessers import Guesser
from wordle_strategies.helpers import convert_sf, prettylist, time_section
from wordle_strategies.score_cache import Scorer
from wordle_strategies.solver import solve
from wordle_strategies.words import decode, encode

rootlog = logging.getLogger(__name__)

# (opener, result or None, exception or None)
Outcome = Tuple[int, Optional["OpenerResult"], Optional[BaseException]]

# (solution, number of guesses, history as text)
SolveRecord = Tuple[int, int, str]


# =============================================================================
# Per-opener results
# =============================================================================

class OpenerResult:
    """
    How well a strategy did, across all solutions, from one opener.
    """
    def __init__(self, opener: int, total: int, maximum: int) -> None:
        self.opener = opener
        self.total = total
        self.maximum = maximum

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, OpenerResult)
            and (self.opener, self.total, self.maximum) ==
            (other.opener, other.total, other.maximum)
        )

    def __repr__(self) -> str:
        return (f"OpenerResult({decode(self.opener)!r}, total={self.total}, "
                f"maximum={self.maximum})")


def solve_all_starting(dictionary: Dictionary,
                       guesser: Guesser,
                       opener: int,
                       mode: Mode = DEFAULT_MODE,
                       scorer: Optional[Scorer] = None) -> OpenerResult:
    """
    Solves every solution word, starting with ``opener``; returns the total
    and maximum number of guesses taken.
    """
    scorer = scorer or DEFAULT_SCORER
    total = 0
    maximum = 0
    with time_section(f"Opener {decode(opener)}"):
        for actual in dictionary.solution_words:
            size = solve(dictionary, guesser, actual, opener=opener,
                         mode=mode, scorer=scorer).size()
            total += size
            maximum = max(maximum, size)
    return OpenerResult(opener, total, maximum)


# =============================================================================
# Progress log
# =============================================================================

class ProgressLog:
    """
    A file with one line per completed opener::

        <opener> <total guesses> <max guesses> <elapsed>s <seconds per opener>s

    Lines are written in the order openers finish, so the file should be read
    as a set.
    """
    def __init__(self, filename: str) -> None:
        self.filename = filename

    def completed_openers(self) -> Set[str]:
        """
        Openers already done, from the first word of each line.
        """
        if not os.path.exists(self.filename):
            return set()
        with open(self.filename) as f:
            return set(
                line.split()[0] for line in f if line.strip()
            )

    def open(self) -> TextIO:
        return open(self.filename, "at")

    @staticmethod
    def write(f: TextIO,
              result: OpenerResult,
              elapsed: float,
              n_done: int) -> None:
        f.write(f"{decode(result.opener)} {result.total} {result.maximum} "
                f"{int(elapsed)}s {elapsed / n_done:.1f}s\n")
        f.flush()  # nice to be able to follow the output live


# =============================================================================
# Parallel back ends
# =============================================================================

@ray.remote
def solve_all_starting_ray(dictionary: Dictionary,
                           guesser: Guesser,
                           opener: int,
                           mode: Mode,
                           scorer: Scorer,
                           loglevel: int = logging.INFO) -> OpenerResult:
    """
    Ray version of :func:`solve_all_starting`.
    """
    # This adds a handler every time the worker process takes a new task.
    raylog = logging.getLogger(__name__)
    configure_logger_for_colour(raylog, level=loglevel)
    return solve_all_starting(dictionary, guesser, opener, mode, scorer)


def _start_ray(nproc: int) -> bool:
    """
    Starts Ray with ``nproc`` CPUs, unless it is already running, in which
    case the running instance is used as it is. Returns whether we started
    it (and should therefore shut it down).
    """
    if ray.is_initialized():
        n_cpus = int(ray.cluster_resources().get("CPU", 0))
        if n_cpus != nproc:
            rootlog.warning(f"Ray is already running with {n_cpus} CPUs; "
                            f"ignoring request for {nproc}")
        return False
    rootlog.info(f"Starting Ray with {nproc} CPUs")
    ray.init(num_cpus=nproc)
    return True


def _solve_openers(dictionary: Dictionary,
                   guesser: Guesser,
                   openers: Sequence[int],
                   mode: Mode,
                   scorer: Scorer,
                   nproc: int,
                   use_ray: bool,
                   loglevel: int) -> Generator[Outcome, None, None]:
    """
    Yields an outcome for each opener, in the order they finish. A failure
    for one opener is yielded as an exception; the others carry on.
    """
    if nproc <= 1:
        for opener in openers:
            try:
                result = solve_all_starting(dictionary, guesser, opener,
                                            mode, scorer)
            except Exception as exc:
                yield opener, None, exc
                continue
            yield opener, result, None

    elif use_ray:
        started = _start_ray(nproc)
        try:
            # Ray passes these to every task from its object store, without
            # copying Numpy arrays.
            dictionary_ref = ray.put(dictionary)
            scorer_ref = ray.put(scorer)
            pending = {
                solve_all_starting_ray.remote(dictionary_ref, guesser,
                                              opener, mode, scorer_ref,
                                              loglevel): opener
                for opener in openers
            }
            rootlog.info(f"Submitted {len(pending)} jobs")
            while pending:
                rootlog.debug(f"Waiting for a job to complete "
                              f"({len(pending)} pending)...")
                done_jobs, _ = ray.wait(list(pending))
                for done_job in done_jobs:
                    opener = pending.pop(done_job)
                    try:
                        result = ray.get(done_job)
                    except RayError as exc:
                        yield opener, None, exc
                        continue
                    yield opener, result, None
        finally:
            if started:
                ray.shutdown()

    else:
        with ProcessPoolExecutor(nproc) as executor:
            futures = {
                executor.submit(solve_all_starting, dictionary, guesser,
                                opener, mode, scorer): opener
                for opener in openers
            }
            rootlog.info(f"Submitted {len(futures)} jobs to {nproc} "
                         f"processes")
            for future in as_completed(futures):
                opener = futures[future]
                try:
                    result = future.result()
                except Exception as exc:
                    yield opener, None, exc
                    continue
                yield opener, result, None


# =============================================================================
# Every opener
# =============================================================================

def run_batch(dictionary: Dictionary,
              guesser: Guesser,
              progress_filename: str,
              openers: Iterable[int] = None,
              nproc: int = DEFAULT_NPROC,
              mode: Mode = DEFAULT_MODE,
              scorer: Optional[Scorer] = None,
              use_ray: bool = True,
              loglevel: int = logging.INFO) -> List[OpenerResult]:
    """
    For each opener (by default, every solution word), solves every solution
    and appends the total and maximum number of guesses to the progress file.
    Openers already in the progress file are skipped.

    Returns the results in the order they completed.

    Raises:
        BatchError: after all openers have been tried, if any failed. Its
            ``results`` are those that succeeded.
    """
    scorer = scorer or DEFAULT_SCORER
    progress = ProgressLog(progress_filename)
    existing = progress.completed_openers()
    if existing:
        rootlog.info(f"Skipping {len(existing)} opener(s) already in "
                     f"{progress_filename}")
    if openers is None:
        openers = dictionary.solution_words
    todo = [o for o in openers if decode(o) not in existing]
    rootlog.info(f"Solving {len(dictionary.solution_words)} words for each "
                 f"of {len(todo)} opener(s), using {guesser.__name__} in "
                 f"{mode.value} mode")

    results = []  # type: List[OpenerResult]
    failures = {}  # type: Dict[str, BaseException]
    start = timer()
    with progress.open() as f:
        outcomes = _solve_openers(dictionary, guesser, todo, mode, scorer,
                                  nproc, use_ray, loglevel)
        for opener, result, exc in outcomes:
            if exc is not None:
                rootlog.error(f"Opener {decode(opener)} failed: {exc!r}")
                failures[decode(opener)] = exc
                continue
            results.append(result)
            elapsed = timer() - start
            ProgressLog.write(f, result, elapsed, len(results))
            rootlog.info(
                f"Opener {decode(opener)} ({len(results)}/{len(todo)}): "
                f"total {result.total}, max {result.maximum}"
            )
    if failures:
        raise BatchError(failures, results)
    return results


# =============================================================================
# Every solution, from one opener
# =============================================================================

def solve_targets(dictionary: Dictionary,
                  guesser: Guesser,
                  targets: List[int],
                  opener: int,
                  mode: Mode,
                  scorer: Scorer) -> List[SolveRecord]:
    results = []  # type: List[SolveRecord]
    for target in targets:
        scores = solve(dictionary, guesser, target, opener=opener,
                       mode=mode, scorer=scorer)
        rootlog.info(f"Word is: {decode(target)}. Guesses: {scores}")
        results.append((target, scores.size(), str(scores)))
    return results


@ray.remote
def solve_targets_ray(dictionary: Dictionary,
                      guesser: Guesser,
                      targets: List[int],
                      opener: int,
                      mode: Mode,
                      scorer: Scorer,
                      loglevel: int = logging.INFO) -> List[SolveRecord]:
    """
    Ray version of :func:`solve_targets`. Batched.
    """
    raylog = logging.getLogger(__name__)
    configure_logger_for_colour(raylog, level=loglevel)
    return solve_targets(dictionary, guesser, targets, opener, mode, scorer)


def _solve_target_chunks(dictionary: Dictionary,
                         guesser: Guesser,
                         target_chunks: List[List[int]],
                         opener: int,
                         mode: Mode,
                         scorer: Scorer,
                         nproc: int,
                         use_ray: bool,
                         loglevel: int) \
        -> Generator[List[SolveRecord], None, None]:
    if nproc <= 1:
        for targets in target_chunks:
            yield solve_targets(dictionary, guesser, targets, opener, mode,
                                scorer)

    elif use_ray:
        started = _start_ray(nproc)
        try:
            dictionary_ref = ray.put(dictionary)
            scorer_ref = ray.put(scorer)
            pending_jobs = [
                solve_targets_ray.remote(dictionary_ref, guesser, targets,
                                         opener, mode, scorer_ref, loglevel)
                for targets in target_chunks
            ]
            rootlog.info(f"Submitted {len(pending_jobs)} jobs")
            while pending_jobs:
                done_jobs, pending_jobs = ray.wait(pending_jobs)
                for done_job in done_jobs:
                    yield ray.get(done_job)
        finally:
            if started:
                ray.shutdown()

    else:
        with ProcessPoolExecutor(nproc) as executor:
            futures = [
                executor.submit(solve_targets, dictionary, guesser, targets,
                                opener, mode, scorer)
                for targets in target_chunks
            ]
            for future in as_completed(futures):
                yield future.result()


def measure_performance(dictionary: Dictionary,
                        guesser: Guesser,
                        output_filename: str,
                        opener: int = encode(DEFAULT_OPENER),
                        targets: Iterable[int] = None,
                        nproc: int = DEFAULT_NPROC,
                        mode: Mode = DEFAULT_MODE,
                        scorer: Optional[Scorer] = None,
                        chunks_per_worker: int = 5,
                        use_ray: bool = True,
                        loglevel: int = logging.INFO) -> Dict[str, int]:
    """
    Solves every target (by default, every solution word) from one opener,
    writes a CSV row per target, and reports summary statistics.

    Returns a dictionary mapping each target word to the number of guesses
    taken.
    """
    scorer = scorer or DEFAULT_SCORER
    if targets is None:
        targets = dictionary.solution_words
    targets = list(targets)
    n_words = len(targets)
    assert n_words > 0, "No words!"
    words_per_chunk = max(1, n_words // (max(1, nproc) * chunks_per_worker))
    target_chunks = list(chunks(targets, words_per_chunk))
    rootlog.debug(f"{n_words} words in {len(target_chunks)} chunks of "
                  f"{words_per_chunk}")

    algorithm = guesser.__name__
    guess_counts = {}  # type: Dict[str, int]
    with open(output_filename, "wt") as f:
        writer = csv.writer(f)
        writer.writerow(["algorithm", "mode", "opener", "word", "n_guesses",
                         "history"])
        for records in _solve_target_chunks(dictionary, guesser,
                                            target_chunks, opener, mode,
                                            scorer, nproc, use_ray,
                                            loglevel):
            for target, n_guesses, history in records:
                word = decode(target)
                writer.writerow([algorithm, mode.value, decode(opener), word,
                                 n_guesses, history])
                guess_counts[word] = n_guesses
            f.flush()

    counts = list(guess_counts.values())
    pessimal = sorted(w for w, n in guess_counts.items() if n >= N_GUESSES)
    optimal = sorted(w for w, n in guess_counts.items() if n <= 2)
    rootlog.info(
        f"Across {n_words} words from opener {decode(opener)}, method "
        f"{algorithm} took: "
        f"min {min(counts)}, "
        f"median {median(counts)}, "
        f"mean {convert_sf(mean(counts))}, "
        f"max {max(counts)} guesses (total {sum(counts)})"
    )
    rootlog.info(f"Worst cases ({len(pessimal)}): {prettylist(pessimal)}")
    rootlog.info(f"Best cases ({len(optimal)}): {prettylist(optimal)}")
    return guess_counts
