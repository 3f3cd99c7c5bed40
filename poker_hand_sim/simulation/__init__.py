"""
Simulation: deal random 7-card hands, tally best-hand categories, report.
"""

from poker_hand_sim.simulation.trials import (
    new_tally,
    deal_trial,
    run_trials,
    merge_tallies,
)
from poker_hand_sim.simulation.runner import SimulationResult, simulate
from poker_hand_sim.simulation.report import (
    THEORETICAL_COUNTS,
    SEVEN_CARD_COMBOS,
    theoretical_probabilities,
    z_scores,
    check_against_theory,
    iter_report_pairs,
    print_report,
)

__all__ = [
    "new_tally",
    "deal_trial",
    "run_trials",
    "merge_tallies",
    "SimulationResult",
    "simulate",
    "THEORETICAL_COUNTS",
    "SEVEN_CARD_COMBOS",
    "theoretical_probabilities",
    "z_scores",
    "check_against_theory",
    "iter_report_pairs",
    "print_report",
]
