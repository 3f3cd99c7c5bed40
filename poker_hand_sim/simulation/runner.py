"""
Simulation driver: split trials into blocks, run blocks serially or on a
process pool, merge per-block tallies, block bootstrap standard error.
"""

import logging
import multiprocessing as mp
import sys
import time

import numpy as np
from tqdm import tqdm

from poker_hand_sim.config import NUM_WORKERS_DEFAULT, SIM_BLOCK_SIZE
from poker_hand_sim.simulation.trials import merge_tallies, run_trials

logger = logging.getLogger(__name__)


class SimulationResult:
    """
    counts: merged tally per HandCategory.
    block_counts: one tally row per block, in block order.
    """

    __slots__ = ("counts", "block_counts", "num_trials")

    def __init__(self, counts, block_counts, num_trials):
        self.counts = counts
        self.block_counts = block_counts
        self.num_trials = num_trials

    @property
    def num_blocks(self):
        return len(self.block_counts)

    @property
    def frequencies(self):
        return self.counts / self.num_trials

    @property
    def standard_errors(self):
        """Std of per-block frequencies / sqrt(#blocks); zeros for one block."""
        if self.num_blocks < 2:
            return np.zeros(len(self.counts))
        block_sizes = self.block_counts.sum(axis=1, keepdims=True)
        block_freqs = self.block_counts / block_sizes
        return block_freqs.std(axis=0) / np.sqrt(self.num_blocks)


def block_sizes(num_trials, block_size):
    """[block_size, ..., remainder]; the last block may be shorter."""
    full, rest = divmod(num_trials, block_size)
    sizes = [block_size] * full
    if rest:
        sizes.append(rest)
    return sizes


def _run_block(args):
    """Worker entry point; must stay module-level to be picklable."""
    block_idx, n, seed_seq = args
    return block_idx, run_trials(n, np.random.default_rng(seed_seq))


def _check_positive(name, value):
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def simulate(
    num_trials,
    block_size=SIM_BLOCK_SIZE,
    num_workers=NUM_WORKERS_DEFAULT,
    seed=None,
    show_progress=True,
):
    """
    Deal and evaluate num_trials hands; return a SimulationResult.
    Each block gets its own child seed, so a fixed seed gives the same
    counts for any num_workers. Errors in any trial abort the run.
    """
    _check_positive("num_trials", num_trials)
    _check_positive("block_size", block_size)

    sizes = block_sizes(num_trials, block_size)
    seeds = np.random.SeedSequence(seed).spawn(len(sizes))
    jobs = [(i, n, s) for i, (n, s) in enumerate(zip(sizes, seeds))]
    num_workers = min(max(1, num_workers), mp.cpu_count(), len(jobs))

    logger.info(
        "Simulating %d trials in %d blocks (block size %d, %d worker(s))",
        num_trials, len(jobs), block_size, num_workers,
    )
    start = time.time()
    block_counts = [None] * len(jobs)
    pbar = tqdm(total=len(jobs), desc="Simulating", unit="block", disable=not show_progress)

    if num_workers == 1:
        results = map(_run_block, jobs)
        _collect(results, block_counts, pbar)
    else:
        start_method = "fork" if sys.platform == "linux" else "spawn"
        ctx = mp.get_context(start_method)
        with ctx.Pool(processes=num_workers) as pool:
            _collect(pool.imap_unordered(_run_block, jobs), block_counts, pbar)
    pbar.close()

    block_counts = np.array(block_counts, dtype=np.int64)
    counts = merge_tallies(block_counts)
    logger.info("Finished %d trials in %.1fs", num_trials, time.time() - start)
    return SimulationResult(counts, block_counts, num_trials)


def _collect(results, block_counts, pbar):
    for block_idx, tally in results:
        block_counts[block_idx] = tally
        logger.debug("Block %d done (%d trials)", block_idx, int(tally.sum()))
        pbar.update(1)
