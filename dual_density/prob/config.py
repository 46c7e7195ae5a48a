# prob/config.py
from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Optional

from ..errors import ErrorPolicy


@dataclass(frozen=True)
class DensityConfig:
    """Evaluation settings shared by all density kernels."""
    # Drop additive terms that do not depend on a differentiable argument
    propto: bool = False

    # What a failed argument check does
    policy: ErrorPolicy = ErrorPolicy.RAISE


# Active config, per thread / async task; use_config() swaps it temporarily
_active_config: ContextVar[DensityConfig] = ContextVar("dual_density_config", default=DensityConfig())


def get_config() -> DensityConfig:
    return _active_config.get()


@contextmanager
def use_config(config: Optional[DensityConfig] = None, **overrides):
    """
    Context manager to temporarily switch the active config:
        with use_config(propto=True, policy=ErrorPolicy.NEUTRAL):
            lp = gumbel_log(y, mu, beta)
    """
    cfg = replace(config or _active_config.get(), **overrides)
    token = _active_config.set(cfg)
    try:
        yield cfg
    finally:
        _active_config.reset(token)


def resolve(propto: Optional[bool], policy: Optional[ErrorPolicy]):
    """Per-call keyword arguments win over the active config."""
    cfg = get_config()
    return (cfg.propto if propto is None else propto,
            cfg.policy if policy is None else policy)
