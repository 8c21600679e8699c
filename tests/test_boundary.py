import numpy as np
import pytest

from latticeflow.boundary import apply_boundary
from latticeflow.lattice import VELOCITY_INLET, BoundaryType, LatticeType, init_lbm_data


def _random_data(shape=(5, 5, 1), seed=0):
    data = init_lbm_data(LatticeType.D2Q9, *shape)
    data.f[...] = np.random.default_rng(seed).random(data.f.shape) + 0.1
    return data


def test_bounce_back_copies_opposites_in_order():
    data = _random_data()
    old = data.f.copy()
    apply_boundary(data, BoundaryType.BOUNCE_BACK)
    node = (0, 2, 0)
    assert data.f[node][1] == old[node][3]
    assert data.f[node][3] == old[node][3]
    assert data.f[node][2] == old[node][4]
    assert data.f[node][5] == old[node][7]
    assert data.f[node][6] == old[node][8]
    assert data.f[node][0] == old[node][0]


def test_bounce_back_makes_wall_nodes_symmetric():
    data = _random_data()
    apply_boundary(data, BoundaryType.BOUNCE_BACK)
    opp = data.lattice.opp
    for node in [(0, 0, 0), (4, 2, 0), (2, 0, 0), (3, 4, 0)]:
        np.testing.assert_array_equal(data.f[node], data.f[node][opp])


def test_bounce_back_leaves_interior_untouched():
    data = _random_data()
    old = data.f.copy()
    apply_boundary(data, BoundaryType.BOUNCE_BACK)
    np.testing.assert_array_equal(data.f[1:-1, 1:-1], old[1:-1, 1:-1])


def test_velocity_inlet_drives_flow_in_x():
    data = init_lbm_data(LatticeType.D2Q9, 5, 5, 1)
    apply_boundary(data, BoundaryType.VELOCITY)
    f = data.f[0, 2, 0]
    assert f[3] == pytest.approx(data.lattice.w[3])
    assert f[1] > f[3]
    assert f[5] == pytest.approx(f[8])
    assert f[5] - f[7] == pytest.approx((f[1] - f[3]) / 4.0)


def test_velocity_inlet_scales_with_known_density():
    low = init_lbm_data(LatticeType.D2Q9, 4, 4, 1)
    high = init_lbm_data(LatticeType.D2Q9, 4, 4, 1)
    high.f *= 2.0
    apply_boundary(low, BoundaryType.VELOCITY)
    apply_boundary(high, BoundaryType.VELOCITY)
    assert high.f[0, 1, 0, 1] == pytest.approx(2.0 * low.f[0, 1, 0, 1])
    assert VELOCITY_INLET > 0


def test_velocity_bounces_on_other_walls_only():
    data = _random_data(seed=3)
    old = data.f.copy()
    apply_boundary(data, BoundaryType.VELOCITY)
    opp = data.lattice.opp
    for node in [(4, 2, 0), (2, 0, 0), (2, 4, 0), (0, 0, 0)]:
        np.testing.assert_array_equal(data.f[node], data.f[node][opp])
    np.testing.assert_array_equal(data.f[1:-1, 1:-1], old[1:-1, 1:-1])
    inlet = data.f[0, 2, 0]
    assert not np.allclose(inlet, inlet[opp])


@pytest.mark.parametrize(
    "kind",
    [BoundaryType.PRESSURE, BoundaryType.PERIODIC, BoundaryType.INLET_OUTLET, BoundaryType.OPEN],
)
def test_other_boundary_types_do_nothing(kind):
    data = _random_data()
    old = data.f.copy()
    apply_boundary(data, kind)
    np.testing.assert_array_equal(data.f, old)


def test_unknown_boundary_type_is_rejected():
    data = _random_data()
    with pytest.raises(ValueError):
        apply_boundary(data, 42)