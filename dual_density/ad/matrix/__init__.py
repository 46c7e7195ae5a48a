# ad/matrix/__init__.py

from .dot_product import dot_product, dot_self, columns_dot_product, rows_dot_product
from .validate import as_vector, validate_matching_sizes

__all__ = [
    "dot_product", "dot_self", "columns_dot_product", "rows_dot_product",
    "as_vector", "validate_matching_sizes",
]
