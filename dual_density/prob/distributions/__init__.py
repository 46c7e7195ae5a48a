"""
Univariate distributions.

Every density follows the same skeleton as gumbel_log: empty-batch check,
argument checks, propto short-circuit, per-batch caches, a per-observation
loop that accumulates the value and hand-derived partials, and a final
OperandsAndPartials.to_fvar().
"""

from .gumbel import gumbel_log, gumbel_cdf, gumbel_cdf_log, gumbel_ccdf_log, gumbel_rng

__all__ = ['gumbel_log', 'gumbel_cdf', 'gumbel_cdf_log', 'gumbel_ccdf_log', 'gumbel_rng']
