"""Tests for trials, the block runner and the frequency report."""
import logging

import numpy as np
import pytest

from poker_hand_sim.engine.hand_eval import EvaluatedHand, HandCategory
from poker_hand_sim.simulation import (
    SEVEN_CARD_COMBOS,
    THEORETICAL_COUNTS,
    SimulationResult,
    check_against_theory,
    deal_trial,
    iter_report_pairs,
    merge_tallies,
    new_tally,
    print_report,
    run_trials,
    simulate,
    theoretical_probabilities,
    z_scores,
)
from poker_hand_sim.simulation.runner import block_sizes


def test_deal_trial_returns_evaluated_hand():
    result = deal_trial(np.random.default_rng(0))
    assert isinstance(result, EvaluatedHand)
    assert isinstance(result.category, HandCategory)
    assert len(set(result.cards)) == 5


def test_run_trials_counts_every_trial():
    tally = run_trials(200, rng=1)
    assert tally.shape == (10,)
    assert tally.sum() == 200


def test_run_trials_accumulates_into_given_tally():
    tally = new_tally()
    returned = run_trials(50, rng=2, tally=tally)
    assert returned is tally
    run_trials(30, rng=3, tally=tally)
    assert tally.sum() == 80


def test_run_trials_seeded_is_reproducible():
    assert np.array_equal(run_trials(100, rng=5), run_trials(100, rng=5))


def test_merge_tallies():
    a = new_tally()
    b = new_tally()
    a[HandCategory.PAIR] = 3
    b[HandCategory.PAIR] = 4
    b[HandCategory.FLUSH] = 1
    merged = merge_tallies([a, b])
    assert merged[HandCategory.PAIR] == 7
    assert merged[HandCategory.FLUSH] == 1
    assert merged.sum() == 8
    # inputs untouched
    assert a.sum() == 3


@pytest.mark.parametrize("num_trials,block_size,expected", [
    (10, 5, [5, 5]),
    (11, 5, [5, 5, 1]),
    (3, 5, [3]),
])
def test_block_sizes(num_trials, block_size, expected):
    assert block_sizes(num_trials, block_size) == expected


def test_simulate_counts_and_blocks():
    result = simulate(250, block_size=100, seed=11, show_progress=False)
    assert isinstance(result, SimulationResult)
    assert result.num_trials == 250
    assert result.counts.sum() == 250
    assert result.num_blocks == 3
    assert result.block_counts.sum(axis=1).tolist() == [100, 100, 50]
    assert np.isclose(result.frequencies.sum(), 1.0)


def test_simulate_same_seed_same_counts():
    a = simulate(300, block_size=100, seed=7, show_progress=False)
    b = simulate(300, block_size=100, seed=7, show_progress=False)
    assert np.array_equal(a.counts, b.counts)
    assert np.array_equal(a.block_counts, b.block_counts)


def test_simulate_parallel_matches_serial():
    """Block seeds, not workers, decide the outcome."""
    serial = simulate(400, block_size=100, num_workers=1, seed=3, show_progress=False)
    parallel = simulate(400, block_size=100, num_workers=2, seed=3, show_progress=False)
    assert np.array_equal(serial.counts, parallel.counts)
    assert np.array_equal(serial.block_counts, parallel.block_counts)


@pytest.mark.parametrize("kwargs", [
    {"num_trials": 0},
    {"num_trials": -5},
    {"num_trials": 2.5},
    {"num_trials": 10, "block_size": 0},
])
def test_simulate_rejects_non_positive(kwargs):
    with pytest.raises(ValueError):
        simulate(show_progress=False, **kwargs)


def test_standard_errors():
    counts = np.array([[6, 4, 0, 0, 0, 0, 0, 0, 0, 0],
                       [4, 6, 0, 0, 0, 0, 0, 0, 0, 0]])
    result = SimulationResult(counts.sum(axis=0), counts, 20)
    se = result.standard_errors
    # block frequencies 0.6 / 0.4 -> std 0.1, two blocks
    assert se[0] == pytest.approx(0.1 / np.sqrt(2))
    assert se[2] == 0

    single = SimulationResult(counts[0], counts[:1], 10)
    assert not single.standard_errors.any()


def test_theoretical_table():
    assert SEVEN_CARD_COMBOS == 133_784_560
    assert sum(THEORETICAL_COUNTS.values()) == SEVEN_CARD_COMBOS
    p = theoretical_probabilities()
    assert p.sum() == pytest.approx(1.0)
    assert p[HandCategory.ROYAL_FLUSH] * 100 == pytest.approx(0.0032, abs=1e-4)
    assert p[HandCategory.PAIR] > p[HandCategory.TWO_PAIR] > p[HandCategory.HIGH_CARD]


def test_z_scores_zero_at_expectation():
    counts = np.array([THEORETICAL_COUNTS[c] for c in HandCategory])
    assert np.allclose(z_scores(counts), 0)
    assert check_against_theory(counts) == []


def test_check_against_theory_flags_outliers(caplog):
    counts = np.array([THEORETICAL_COUNTS[c] for c in HandCategory]) // 1000
    counts[HandCategory.ROYAL_FLUSH] = 5000
    with caplog.at_level(logging.WARNING):
        outliers = check_against_theory(counts)
    assert HandCategory.ROYAL_FLUSH in outliers
    assert "Royal Flush" in caplog.text


def test_z_scores_empty_tally():
    with pytest.raises(ValueError):
        z_scores(new_tally())


def test_iter_report_pairs_strongest_first():
    tally = new_tally()
    tally[HandCategory.PAIR] = 9
    pairs = list(iter_report_pairs(tally))
    assert pairs[0] == (HandCategory.ROYAL_FLUSH, 0)
    assert pairs[-1] == (HandCategory.HIGH_CARD, 0)
    assert (HandCategory.PAIR, 9) in pairs
    assert len(pairs) == 10


def test_print_report(capsys):
    result = simulate(200, block_size=50, seed=1, show_progress=False)
    print_report(result)
    out = capsys.readouterr().out
    assert "200 trials" in out
    for name in ("Royal Flush", "Full House", "High Card"):
        assert name in out


def test_small_sample_common_categories():
    """Common categories land near their exact odds on a modest sample."""
    n = 3000
    result = simulate(n, block_size=500, seed=20241019, show_progress=False)
    z = z_scores(result.counts)
    for category in (HandCategory.HIGH_CARD, HandCategory.PAIR, HandCategory.TWO_PAIR):
        assert abs(z[category]) < 5


@pytest.mark.slow
def test_large_sample_royal_flush_frequency():
    """Regression guard for the whole shuffle/deal/evaluate pipeline."""
    n = 1_000_000
    result = simulate(n, block_size=50_000, num_workers=4, seed=99, show_progress=False)
    assert check_against_theory(result.counts, tolerance=5.0) == []
    royal_pct = result.frequencies[HandCategory.ROYAL_FLUSH] * 100
    assert royal_pct == pytest.approx(0.0032, abs=0.0025)
