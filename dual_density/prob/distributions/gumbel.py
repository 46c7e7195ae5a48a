"""
Gumbel (type I extreme value) distribution.

    z = (y - mu) / beta
    log p(y | mu, beta) = -log(beta) - z - exp(-z)
    F(y | mu, beta)     = exp(-exp(-z))

gumbel_log computes its gradient from closed-form partials:

    d/dy    = -(1/beta) + (1/beta) exp(-z)
    d/dmu   =  (1/beta) - (1/beta) exp(-z)
    d/dbeta = -(1/beta) + z/beta - z exp(-z)/beta

The CDF family propagates FVars through the expression instead.
"""
import logging
from typing import Any, Optional

import numpy as np

from ...ad.core.seeds import value_of
from ...ad.ops import exp, log1m
from ...errors import ErrorPolicy
from ..checks import check_not_nan, check_finite, check_positive, check_consistent_sizes
from ..config import resolve
from ..operands import OperandsAndPartials, include_summand
from ..views import VectorView, length, max_size

logger = logging.getLogger(__name__)

_NAMES = ("Random variable", "Location parameter", "Scale parameter")


def gumbel_log(y: Any, mu: Any, beta: Any,
               propto: Optional[bool] = None,
               policy: Optional[ErrorPolicy] = None):
    """
    Log of the product of Gumbel densities.

    Args:
        y: (Sequence of) variate(s)
        mu: (Sequence of) location parameter(s)
        beta: (Sequence of) scale parameter(s)
        propto: Drop terms that are constant in the FVar arguments
        policy: ErrorPolicy for failed checks

    Returns:
        np.float64 when y, mu and beta are all constant, otherwise FVar whose
        tangent is the directional derivative along the inputs' tangents.
    """
    function = "gumbel_log"
    propto, policy = resolve(propto, policy)

    # empty batch
    if not (length(y) and length(mu) and length(beta)):
        return np.float64(0.0)

    logp = np.float64(0.0)

    if not check_not_nan(function, y, _NAMES[0], policy):
        return logp
    if not check_finite(function, mu, _NAMES[1], policy):
        return logp
    if not check_positive(function, beta, _NAMES[2], policy):
        return logp
    if not check_consistent_sizes(function, (y, mu, beta), _NAMES, policy):
        return logp

    if not include_summand(propto, y, mu, beta):
        logger.debug("%s: propto with constant arguments, skipping evaluation", function)
        return np.float64(0.0)

    operands_and_partials = OperandsAndPartials(y, mu, beta)
    d_y, d_mu, d_beta = operands_and_partials.d_x

    y_vec = VectorView(y)
    mu_vec = VectorView(mu)
    N = max_size(y, mu, beta)

    # one entry per scale value, reused across the batch when beta is scalar
    beta_dbl = np.atleast_1d(np.asarray(value_of(beta), dtype=np.float64))
    inv_beta = VectorView(1.0 / beta_dbl)
    with_log_beta = include_summand(propto, beta)
    if with_log_beta:
        log_beta = VectorView(np.log(beta_dbl))

    for n in range(N):
        y_dbl = np.float64(value_of(y_vec[n]))
        mu_dbl = np.float64(value_of(mu_vec[n]))
        inv_beta_n = inv_beta[n]

        y_minus_mu_over_beta = (y_dbl - mu_dbl) * inv_beta_n
        exp_neg_z = np.exp(-y_minus_mu_over_beta)

        if with_log_beta:
            logp -= log_beta[n]
        logp += -y_minus_mu_over_beta - exp_neg_z

        scaled_diff = inv_beta_n * exp_neg_z
        if d_y is not None:
            d_y[n] -= inv_beta_n - scaled_diff
        if d_mu is not None:
            d_mu[n] += inv_beta_n - scaled_diff
        if d_beta is not None:
            d_beta[n] += (-inv_beta_n
                          + y_minus_mu_over_beta * inv_beta_n
                          - scaled_diff * y_minus_mu_over_beta)

    return operands_and_partials.to_fvar(logp)


def _check_cdf_args(function, y, mu, beta, policy):
    return (check_not_nan(function, y, _NAMES[0], policy)
            and check_finite(function, mu, _NAMES[1], policy)
            and check_not_nan(function, beta, _NAMES[2], policy)
            and check_positive(function, beta, _NAMES[2], policy)
            and check_consistent_sizes(function, (y, mu, beta), _NAMES, policy))


def _standardized(y_vec, mu_vec, beta_vec, n):
    return (y_vec[n] - mu_vec[n]) / beta_vec[n]


def gumbel_cdf(y: Any, mu: Any, beta: Any, policy: Optional[ErrorPolicy] = None):
    """
    Product of Gumbel CDFs, exp(-exp(-(y - mu) / beta)) per observation.

    FVar arguments are propagated through the expression, so the result is
    an FVar whenever any argument is one. Returns 1 for an empty batch or a
    failed check under ErrorPolicy.NEUTRAL.
    """
    function = "gumbel_cdf"
    _, policy = resolve(None, policy)

    cdf = np.float64(1.0)
    if not (length(y) and length(mu) and length(beta)):
        return cdf
    if not _check_cdf_args(function, y, mu, beta, policy):
        return cdf

    y_vec, mu_vec, beta_vec = VectorView(y), VectorView(mu), VectorView(beta)
    for n in range(max_size(y, mu, beta)):
        cdf = cdf * exp(-exp(-_standardized(y_vec, mu_vec, beta_vec, n)))
    return cdf


def gumbel_cdf_log(y: Any, mu: Any, beta: Any, policy: Optional[ErrorPolicy] = None):
    """Sum of log CDFs, -exp(-(y - mu) / beta) per observation."""
    function = "gumbel_cdf_log"
    _, policy = resolve(None, policy)

    cdf_log = np.float64(0.0)
    if not (length(y) and length(mu) and length(beta)):
        return cdf_log
    if not _check_cdf_args(function, y, mu, beta, policy):
        return cdf_log

    y_vec, mu_vec, beta_vec = VectorView(y), VectorView(mu), VectorView(beta)
    for n in range(max_size(y, mu, beta)):
        cdf_log = cdf_log - exp(-_standardized(y_vec, mu_vec, beta_vec, n))
    return cdf_log


def gumbel_ccdf_log(y: Any, mu: Any, beta: Any, policy: Optional[ErrorPolicy] = None):
    """Sum of log complementary CDFs, log(1 - exp(-exp(-(y - mu) / beta)))."""
    function = "gumbel_ccdf_log"
    _, policy = resolve(None, policy)

    ccdf_log = np.float64(0.0)
    if not (length(y) and length(mu) and length(beta)):
        return ccdf_log
    if not _check_cdf_args(function, y, mu, beta, policy):
        return ccdf_log

    y_vec, mu_vec, beta_vec = VectorView(y), VectorView(mu), VectorView(beta)
    for n in range(max_size(y, mu, beta)):
        ccdf_log = ccdf_log + log1m(exp(-exp(-_standardized(y_vec, mu_vec, beta_vec, n))))
    return ccdf_log


def gumbel_rng(mu: float, beta: float, rng) -> float:
    """
    Draw one Gumbel variate by inverting the CDF at u ~ U[0, 1).

    Args:
        mu: Location (finite)
        beta: Scale (> 0)
        rng: Anything with a random() method returning a uniform [0, 1)
             float, e.g. numpy.random.Generator. Its state belongs to the caller.
    """
    function = "gumbel_rng"
    # A sample has no neutral value, so bad parameters always raise
    check_finite(function, mu, _NAMES[1], ErrorPolicy.RAISE)
    check_positive(function, beta, _NAMES[2], ErrorPolicy.RAISE)
    u = rng.random()
    return float(value_of(mu) - value_of(beta) * np.log(-np.log(u)))
