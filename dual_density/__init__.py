# dual_density/__init__.py
# Forward-mode dual numbers and the density kernels built on them

from .ad import (
    FVar,
    value_of, tangent_of, is_constant, variable, constant, derivative, partials,
    dot_product, dot_self, columns_dot_product, rows_dot_product,
)
from .errors import ShapeError, SizeMismatchError, DomainError, ValidationWarning, ErrorPolicy
from .prob import (
    DensityConfig, get_config, use_config,
    gumbel_log, gumbel_cdf, gumbel_cdf_log, gumbel_ccdf_log, gumbel_rng,
)

__all__ = [
    # AD
    'FVar', 'value_of', 'tangent_of', 'is_constant', 'variable', 'constant',
    'derivative', 'partials',
    'dot_product', 'dot_self', 'columns_dot_product', 'rows_dot_product',
    # Errors
    'ShapeError', 'SizeMismatchError', 'DomainError', 'ValidationWarning', 'ErrorPolicy',
    # Densities
    'DensityConfig', 'get_config', 'use_config',
    'gumbel_log', 'gumbel_cdf', 'gumbel_cdf_log', 'gumbel_ccdf_log', 'gumbel_rng',
]
