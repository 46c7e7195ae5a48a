"""
Argument checks, broadcast views, operand/partials bookkeeping and config.
"""

import threading

import numpy as np
import pytest

from dual_density.ad import FVar
from dual_density.errors import DomainError, SizeMismatchError, ValidationWarning, ErrorPolicy
from dual_density.prob import (
    check_not_nan, check_finite, check_positive, check_consistent_sizes,
    VectorView, length, max_size, is_vector,
    OperandsAndPartials, include_summand,
    DensityConfig, get_config, use_config,
)


def test_checks_pass_on_valid_input():
    assert check_not_nan("f", [1.0, np.inf], "y")
    assert check_finite("f", FVar(2.0, 1.0), "mu")
    assert check_positive("f", np.array([0.1, 3.0]), "beta")
    assert check_consistent_sizes("f", ([1.0, 2.0], 3.0, [1.0]), ("y", "mu", "beta"))


def test_check_raises_with_named_argument():
    with pytest.raises(DomainError, match=r"Scale parameter\[1\] is -1.0"):
        check_positive("gumbel_log", [1.0, -1.0], "Scale parameter")
    with pytest.raises(DomainError, match="not nan"):
        check_not_nan("f", np.nan, "y")
    with pytest.raises(DomainError):
        check_finite("f", [0.0, -np.inf], "mu")
    with pytest.raises(DomainError):
        check_positive("f", np.nan, "beta")


def test_check_neutral_policy_warns_and_returns_false():
    with pytest.warns(ValidationWarning):
        assert not check_positive("f", 0.0, "beta", ErrorPolicy.NEUTRAL)
    with pytest.warns(ValidationWarning):
        assert not check_consistent_sizes("f", ([1.0, 2.0], [1.0, 2.0, 3.0]), ("y", "mu"),
                                          ErrorPolicy.NEUTRAL)


def test_neutral_warning_points_at_the_caller():
    with pytest.warns(ValidationWarning) as record:
        check_positive("f", [1.0, -1.0], "beta", ErrorPolicy.NEUTRAL)
    assert record[0].filename == __file__

    with pytest.warns(ValidationWarning) as record:
        check_consistent_sizes("f", ([1.0, 2.0], [1.0, 2.0, 3.0]), ("y", "mu"), ErrorPolicy.NEUTRAL)
    assert record[0].filename == __file__


def test_consistent_sizes_allows_length_one_broadcast_only():
    assert check_consistent_sizes("f", ([1.0] * 4, [2.0], 1.0), ("a", "b", "c"))
    with pytest.raises(SizeMismatchError):
        check_consistent_sizes("f", ([1.0] * 4, [2.0, 3.0]), ("a", "b"))


def test_vector_view_broadcasts():
    assert VectorView(2.0)[7] == 2.0
    assert VectorView([5.0])[3] == 5.0
    v = VectorView(np.array([1.0, 2.0, 3.0]))
    assert v[2] == 3.0 and len(v) == 3
    assert length(4.0) == 1 and length([]) == 0
    assert max_size(1.0, [1.0, 2.0], [3.0]) == 2
    assert is_vector([1.0]) and not is_vector(np.float64(1.0))


def test_include_summand():
    assert include_summand(False)
    assert not include_summand(True, 1.0, [2.0])
    assert include_summand(True, 1.0, [FVar(2.0)])


def test_operands_and_partials_shapes_and_assembly():
    y = [FVar(1.0, 1.0), FVar(2.0, 0.0), FVar(3.0, 2.0)]
    mu = 0.0
    beta = FVar(2.0, 1.0)
    ops = OperandsAndPartials(y, mu, beta)
    assert ops.d_x2 is None
    assert len(ops.d_x1.d) == 3 and len(ops.d_x3.d) == 1

    for n in range(3):
        ops.d_x1[n] += float(n + 1)
        ops.d_x3[n] += 0.5

    r = ops.to_fvar(-4.0)
    assert r.val == -4.0
    # y partials [1, 2, 3] against y tangents [1, 0, 2]; beta partial 1.5 against tangent 1
    assert r.dot == pytest.approx(1.0 + 0.0 + 6.0 + 1.5)


def test_operands_and_partials_all_constant_is_plain():
    ops = OperandsAndPartials([1.0, 2.0], 0.0, 1.0)
    r = ops.to_fvar(3.0)
    assert not isinstance(r, FVar) and r == 3.0


def test_use_config_restores_previous():
    assert get_config() == DensityConfig()
    with use_config(propto=True, policy=ErrorPolicy.NEUTRAL) as cfg:
        assert cfg.propto and get_config().policy is ErrorPolicy.NEUTRAL
        with use_config(propto=False):
            assert not get_config().propto
            assert get_config().policy is ErrorPolicy.NEUTRAL
        assert get_config().propto
    assert get_config() == DensityConfig()


def test_use_config_is_local_to_the_thread():
    seen = []

    def worker():
        seen.append(get_config())

    with use_config(propto=True, policy=ErrorPolicy.NEUTRAL):
        t = threading.Thread(target=worker)
        t.start()
        t.join()
        assert get_config().propto
    assert seen == [DensityConfig()]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
