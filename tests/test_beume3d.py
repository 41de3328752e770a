"""Tests for the three-objective sweep strategy."""

import numpy as np
import pytest
from conftest import brute_force_contributions, brute_force_hypervolume, random_front

from hvcore.algorithms.beume3d import Beume3D, Staircase, hypervolume_3d
from hvcore.algorithms.native2d import hypervolume_2d
from hvcore.algorithms.wfg import WFG
from hvcore.exceptions import GeometryPreconditionError, InvalidInputError


class TestStaircase:
    """Tests for the incremental two-dimensional front."""

    def test_empty_area(self) -> None:
        """A new staircase covers nothing."""
        stairs = Staircase(4.0, 4.0)
        assert stairs.area == 0.0
        assert len(stairs) == 0

    def test_two_steps(self) -> None:
        """Area of two overlapping boxes."""
        stairs = Staircase(4.0, 4.0)
        stairs.insert(1.0, 3.0)
        stairs.insert(3.0, 1.0)
        assert stairs.area == pytest.approx(5.0)
        assert stairs.xs == [1.0, 3.0]
        assert stairs.ys == [3.0, 1.0]

    def test_insert_between_steps(self) -> None:
        """A point between two steps becomes a new step."""
        stairs = Staircase(4.0, 4.0)
        stairs.insert(1.0, 3.0)
        stairs.insert(3.0, 1.0)
        stairs.insert(2.0, 2.0)
        assert stairs.area == pytest.approx(6.0)
        assert len(stairs) == 3

    def test_dominated_insert_ignored(self) -> None:
        """A weakly dominated point leaves the staircase unchanged."""
        stairs = Staircase(4.0, 4.0)
        stairs.insert(1.0, 1.0)
        stairs.insert(2.0, 3.0)
        stairs.insert(1.0, 1.0)
        assert stairs.xs == [1.0]
        assert stairs.area == pytest.approx(9.0)

    def test_dominating_insert_removes_steps(self) -> None:
        """A point dominating several steps replaces them."""
        stairs = Staircase(4.0, 4.0)
        stairs.insert(1.0, 3.0)
        stairs.insert(2.0, 2.0)
        stairs.insert(3.0, 1.5)
        stairs.insert(0.5, 1.0)
        assert stairs.xs == [0.5]
        assert stairs.ys == [1.0]
        assert stairs.area == pytest.approx(3.5 * 3.0)

    def test_same_x_lower_y_replaces_step(self) -> None:
        """A point sharing x with a step but lower in y replaces it."""
        stairs = Staircase(4.0, 4.0)
        stairs.insert(1.0, 3.0)
        stairs.insert(1.0, 2.0)
        assert stairs.xs == [1.0]
        assert stairs.area == pytest.approx(6.0)

    def test_area_matches_closed_form(self, rng: np.random.Generator) -> None:
        """Incremental area equals a fresh computation after every insertion."""
        stairs = Staircase(6.0, 6.0)
        points = rng.integers(0, 6, size=(25, 2)).astype(np.float64)
        for k, (x, y) in enumerate(points.tolist(), start=1):
            stairs.insert(x, y)
            assert stairs.area == pytest.approx(hypervolume_2d(points[:k], np.array([6.0, 6.0])))
        assert all(a < b for a, b in zip(stairs.xs, stairs.xs[1:]))
        assert all(a > b for a, b in zip(stairs.ys, stairs.ys[1:]))


class TestHypervolume3D:
    """Tests for the hypervolume_3d sweep."""

    def test_single_box(self) -> None:
        """One point gives the volume of its box."""
        assert hypervolume_3d(np.array([[1.0, 1.0, 1.0]]), np.array([2.0, 3.0, 4.0])) == pytest.approx(6.0)

    def test_two_boxes(self) -> None:
        """Two boxes overlapping in a 2x1x2 block."""
        points = np.array([[1.0, 2.0, 3.0], [3.0, 2.0, 1.0]])
        assert hypervolume_3d(points, np.array([4.0, 4.0, 4.0])) == pytest.approx(10.0)

    def test_front(self, front_3d: np.ndarray) -> None:
        """Front fixture against the inclusion-exclusion oracle."""
        reference = np.array([4.0, 4.0, 4.0])
        assert hypervolume_3d(front_3d, reference) == pytest.approx(brute_force_hypervolume(front_3d, reference))

    def test_dominated_and_duplicate(self, mixed_3d: np.ndarray) -> None:
        """Dominated and repeated points do not change the volume."""
        reference = np.array([4.0, 4.0, 4.0])
        front = mixed_3d[[0, 1, 2, 5]]
        assert hypervolume_3d(mixed_3d, reference) == pytest.approx(hypervolume_3d(front, reference))

    def test_empty(self) -> None:
        """No points, no volume."""
        assert hypervolume_3d(np.empty((0, 3)), np.array([1.0, 1.0, 1.0])) == 0.0

    def test_matches_brute_force(self, rng: np.random.Generator) -> None:
        """Random integer sets, including ties and dominated points."""
        reference = np.array([5.0, 5.0, 5.0])
        for _ in range(15):
            points = rng.integers(0, 5, size=(7, 3)).astype(np.float64)
            assert hypervolume_3d(points, reference) == pytest.approx(brute_force_hypervolume(points, reference))


class TestBeume3D:
    """Tests for the Beume3D strategy object."""

    def test_compute_sorts_by_third_objective(self, front_3d: np.ndarray) -> None:
        """compute leaves the list sorted by the third objective."""
        points = list(front_3d)
        Beume3D().compute(points, np.array([4.0, 4.0, 4.0]))
        assert [p[2] for p in points] == sorted(p[2] for p in front_3d)

    def test_contributions(self, mixed_3d: np.ndarray) -> None:
        """Contributions agree with the oracle, zero for dominated and repeated points."""
        reference = np.array([4.0, 4.0, 4.0])
        result = Beume3D().contributions(list(mixed_3d), reference)
        np.testing.assert_allclose(result, brute_force_contributions(mixed_3d, reference), atol=1e-9)
        assert result[[2, 3, 4]] == pytest.approx(0.0, abs=1e-12)

    def test_contributor_queries_on_larger_front(self, rng: np.random.Generator) -> None:
        """A 200-point front: contributions agree with WFG and drive both contributor queries."""
        points = random_front(rng, 200, 3)
        reference = np.full(3, 1.1)
        strategy = Beume3D()
        contributions = strategy.contributions(list(points), reference)
        np.testing.assert_allclose(contributions, WFG().contributions(list(points), reference), rtol=1e-9, atol=1e-12)
        assert strategy.least_contributor(list(points), reference) == int(np.argmin(contributions))
        assert strategy.greatest_contributor(list(points), reference) == int(np.argmax(contributions))

    def test_exclusive_matches_contributions(self, front_3d: np.ndarray) -> None:
        """exclusive(i) equals the i-th contribution."""
        reference = np.array([4.0, 4.0, 4.0])
        strategy = Beume3D()
        expected = strategy.contributions(list(front_3d), reference)
        for i in range(len(front_3d)):
            assert strategy.exclusive(i, list(front_3d), reference) == pytest.approx(expected[i])

    def test_rejects_other_dimensions(self, front_2d: np.ndarray) -> None:
        """Beume3D only accepts three objectives."""
        with pytest.raises(InvalidInputError, match="3-dimensional"):
            Beume3D().verify_before_compute(list(front_2d), np.array([5.0, 5.0]))

    def test_rejects_unbounded_point(self, front_3d: np.ndarray) -> None:
        """A point beyond the reference point names its index."""
        with pytest.raises(GeometryPreconditionError, match="point 2"):
            Beume3D().verify_before_compute(list(front_3d), np.array([2.5, 4.0, 4.0]))
