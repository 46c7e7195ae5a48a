# prob/__init__.py
# Density kernels and the collaborators they share

from .config import DensityConfig, get_config, use_config
from .checks import check_not_nan, check_finite, check_positive, check_consistent_sizes
from .views import VectorView, is_vector, length, max_size
from .operands import OperandsAndPartials, include_summand
from .distributions import gumbel_log, gumbel_cdf, gumbel_cdf_log, gumbel_ccdf_log, gumbel_rng

__all__ = [
    # Config
    'DensityConfig', 'get_config', 'use_config',
    # Checks
    'check_not_nan', 'check_finite', 'check_positive', 'check_consistent_sizes',
    # Views
    'VectorView', 'is_vector', 'length', 'max_size',
    # Bookkeeping
    'OperandsAndPartials', 'include_summand',
    # Distributions
    'gumbel_log', 'gumbel_cdf', 'gumbel_cdf_log', 'gumbel_ccdf_log', 'gumbel_rng',
]
