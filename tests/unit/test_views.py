"""Tests for the coalition API views."""

import pytest

from web.api import coalitions
from web.api.errors import ValidationError, validate_step

STEP = 0.5


class TestValidation:
    @pytest.mark.parametrize("step", [0, -1, 5.5])
    def test_bad_step(self, step):
        with pytest.raises(ValidationError):
            validate_step(step)

    def test_default_step_allowed(self):
        validate_step(None)
        validate_step(5.0)

    def test_view_rejects(self):
        with pytest.raises(ValidationError):
            coalitions.get_coalitions(0)


class TestViews:
    def test_parties(self):
        resp = coalitions.get_parties(STEP)
        assert resp.total_seats == 101
        assert resp.threshold == 51
        assert (resp.pivot_x, resp.pivot_y) == (3.0, -3.0)
        assert [p.id for p in resp.items] == ["SDP", "GRN", "LIB", "AGR", "CON", "NAT"]
        assert all(p.radius >= 0 for p in resp.items)

    def test_grid(self):
        resp = coalitions.get_grid(STEP)
        n = resp.num_x * resp.num_y
        assert len(resp.x) == len(resp.y) == len(resp.seats) == len(resp.majority) == n
        assert all(m == (s >= 51) for s, m in zip(resp.seats, resp.majority))

    def test_coalitions(self):
        resp = coalitions.get_coalitions(STEP)
        assert resp.items
        assert all(c.majority and c.seats >= resp.threshold for c in resp.items)
        assert [c.percent for c in resp.items] == sorted((c.percent for c in resp.items), reverse=True)

    def test_all_buckets(self):
        resp = coalitions.get_coalitions(STEP, majority_only=False)
        assert sum(c.points for c in resp.items) == resp.grid_points
        assert sum(c.percent for c in resp.items) == pytest.approx(100.0, abs=0.01 * len(resp.items))

    def test_report(self):
        resp = coalitions.get_report(STEP)
        ranking = coalitions.get_coalitions(STEP).items
        assert resp.top == ranking[0]
        assert resp.runner_up == (ranking[1] if len(ranking) > 1 else None)
        assert " + ".join(resp.top.parties) in resp.text
