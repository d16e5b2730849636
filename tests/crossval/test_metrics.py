"""
Tests for held-out scoring and metric aggregation.

Validates:
    - score_fold: statistic definitions, MAPE division by the raw label,
      NaN MAPE on a zero label
    - pearson_r: degenerate inputs
    - mean_sd: corrected two-pass mean/SD, NaN propagation
    - aggregate_metrics: one mean and SD per statistic
"""

import math

import numpy as np
import pytest

from pycrossval.crossval import METRIC_NAMES, aggregate_metrics, score_fold
from pycrossval.crossval._metrics import mean_sd, pearson_r


# ═══════════════════════════════════════════════════════════════════════
# score_fold
# ═══════════════════════════════════════════════════════════════════════


class TestScoreFold:

    def test_known_values(self):
        y = np.array([1.0, 2.0, 4.0])
        pred = np.array([1.5, 2.0, 3.0])
        m = score_fold(y, pred)
        assert m.mae == pytest.approx(0.5)
        assert m.mse == pytest.approx((0.25 + 0.0 + 1.0) / 3)
        assert m.mape == pytest.approx((0.5 / 1.0 + 0.0 + 1.0 / 4.0) / 3)
        assert m.pearson_r == pytest.approx(np.corrcoef(y, pred)[0, 1])
        assert m.n_test == 3

    def test_r_squared_is_r_times_r(self, rng):
        y = rng.standard_normal(20)
        m = score_fold(y, y + rng.standard_normal(20))
        assert m.r_squared == m.pearson_r * m.pearson_r

    def test_rmse_is_sqrt_mse(self, rng):
        y = rng.standard_normal(20)
        m = score_fold(y, y * 0.5)
        assert m.rmse == math.sqrt(m.mse)

    def test_perfect_prediction(self):
        y = np.array([6.0, 8.0])
        m = score_fold(y, y.copy())
        assert m.mae == 0.0
        assert m.mse == 0.0
        assert m.mape == 0.0
        assert m.pearson_r == pytest.approx(1.0)

    def test_mape_nan_on_zero_label(self):
        m = score_fold(np.array([0.0, 1.0, 2.0]), np.array([0.1, 1.0, 2.0]))
        assert math.isnan(m.mape)
        assert not math.isnan(m.mae)

    def test_mape_uses_signed_label(self):
        m = score_fold(np.array([-2.0, -4.0]), np.array([-1.0, -4.0]))
        assert m.mape == pytest.approx(-0.25)

    def test_single_row_fold(self):
        m = score_fold(np.array([3.0]), np.array([2.0]))
        assert math.isnan(m.pearson_r)
        assert math.isnan(m.r_squared)
        assert m.mae == 1.0

    def test_as_dict_keys(self):
        m = score_fold(np.array([1.0, 2.0]), np.array([1.0, 3.0]))
        assert tuple(m.as_dict()) == METRIC_NAMES


class TestPearson:

    def test_constant_prediction_is_nan(self):
        assert math.isnan(pearson_r(np.array([1.0, 2.0, 3.0]), np.array([5.0, 5.0, 5.0])))

    def test_perfect_negative(self):
        x = np.array([1.0, 2.0, 3.0])
        assert pearson_r(x, -x) == pytest.approx(-1.0)


# ═══════════════════════════════════════════════════════════════════════
# mean_sd / aggregate_metrics
# ═══════════════════════════════════════════════════════════════════════


class TestMeanSD:

    def test_matches_numpy(self, rng):
        v = rng.standard_normal(7) * 3 + 100
        mean, sd = mean_sd(v)
        assert mean == np.sum(v) / len(v)
        assert sd == pytest.approx(np.std(v, ddof=1), rel=1e-12)

    def test_single_value(self):
        mean, sd = mean_sd(np.array([4.0]))
        assert mean == 4.0
        assert math.isnan(sd)

    def test_empty(self):
        mean, sd = mean_sd(np.array([]))
        assert math.isnan(mean) and math.isnan(sd)

    def test_nan_propagates(self):
        mean, sd = mean_sd(np.array([1.0, np.nan, 3.0]))
        assert math.isnan(mean)
        assert math.isnan(sd)

    def test_constant_values_zero_sd(self):
        _, sd = mean_sd(np.full(5, 0.1))
        assert sd == pytest.approx(0.0, abs=1e-15)


class TestAggregateMetrics:

    def test_mean_over_folds(self):
        folds = [
            score_fold(np.array([1.0, 2.0]), np.array([1.0, 3.0])),
            score_fold(np.array([2.0, 4.0]), np.array([2.5, 4.0])),
            score_fold(np.array([5.0, 1.0]), np.array([4.0, 1.0])),
        ]
        g = aggregate_metrics(folds)
        assert g.n_folds == 3
        maes = np.array([f.mae for f in folds])
        assert g.mean['mae'] == np.sum(maes) / 3
        assert g.sd['mae'] == pytest.approx(np.std(maes, ddof=1))
        assert set(g.mean) == set(METRIC_NAMES)

    def test_mape_nan_poisons_global_mape_only(self):
        folds = [
            score_fold(np.array([0.0, 2.0]), np.array([1.0, 2.0])),
            score_fold(np.array([2.0, 4.0]), np.array([2.5, 4.0])),
        ]
        g = aggregate_metrics(folds)
        assert math.isnan(g.mean['mape'])
        assert math.isnan(g.sd['mape'])
        assert not math.isnan(g.mean['mae'])
