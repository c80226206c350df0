"""ADP aggregation, reconciliation and comparison services."""

from sleeper_adp.services.adp_compare import AdpCompareService
from sleeper_adp.services.aggregator import AdpAccumulator, aggregate_picks
from sleeper_adp.services.comparator import compare_players, sort_rows, summarize_movers
from sleeper_adp.services.reconciler import LeagueGroupReconciler, select_primary_draft

__all__ = [
    "AdpAccumulator",
    "AdpCompareService",
    "LeagueGroupReconciler",
    "aggregate_picks",
    "compare_players",
    "select_primary_draft",
    "sort_rows",
    "summarize_movers",
]
