"""Configuration classes for spgraph components."""

from dataclasses import dataclass


@dataclass
class ShortestPathConfig:
    """Configuration for single-pair shortest-path queries."""

    # Skip stale queue entries of vertices whose distance is already final.
    # Off by default: stale entries are then relaxed again and every
    # relaxation fails the strict-improvement check. Paths are identical
    # either way; only the amount of wasted work differs.
    skip_finalized: bool = False

    # Emit a DEBUG summary (extractions, stale entries) after each query
    log_queries: bool = True


# Global configuration instance
SPF_CONFIG = ShortestPathConfig()
