"""
Tests for coefficient aggregation.
"""

import math

import numpy as np
import pytest

from pycrossval.crossval import aggregate_coefficients
from pycrossval.regression import fit


@pytest.fixture
def models(rng):
    out = []
    for _ in range(4):
        X = rng.standard_normal((30, 2))
        y = X @ [1.0, -3.0] + rng.standard_normal(30) * 0.2
        out.append(fit(X, y))
    return out


class TestAggregateCoefficients:

    def test_shape_is_features_by_folds(self, models):
        table = aggregate_coefficients(models, ('a', 'b'))
        assert table.shape == (2, 4)
        assert table.fold_columns == ('fold_1', 'fold_2', 'fold_3', 'fold_4')

    def test_columns_are_fold_coefficients(self, models):
        table = aggregate_coefficients(models, ('a', 'b'))
        for j, model in enumerate(models):
            np.testing.assert_array_equal(table.values[:, j], model.coefficients)

    def test_mean_and_sd(self, models):
        table = aggregate_coefficients(models, ('a', 'b'))
        np.testing.assert_allclose(table.mean, table.values.mean(axis=1), rtol=1e-14)
        np.testing.assert_allclose(table.sd, table.values.std(axis=1, ddof=1), rtol=1e-10)

    def test_read_only(self, models):
        table = aggregate_coefficients(models, ('a', 'b'))
        with pytest.raises(ValueError):
            table.values[0, 0] = 1.0
        with pytest.raises(ValueError):
            table.mean[0] = 1.0

    def test_failed_fold_column_is_nan(self, models):
        table = aggregate_coefficients([models[0], None, models[1]], ('a', 'b'))
        assert np.all(np.isnan(table.values[:, 1]))
        expected = (models[0].coefficients + models[1].coefficients) / 2
        np.testing.assert_allclose(table.mean, expected)
        assert np.all(np.isfinite(table.sd))

    def test_all_failed(self):
        table = aggregate_coefficients([None, None], ('a',))
        assert math.isnan(table.mean[0])
        assert math.isnan(table.sd[0])

    def test_single_fold_sd_nan(self, models):
        table = aggregate_coefficients(models[:1], ('a', 'b'))
        assert np.all(np.isnan(table.sd))

    def test_to_frame(self, models):
        df = aggregate_coefficients(models, ('a', 'b')).to_frame()
        assert list(df.columns) == ['fold_1', 'fold_2', 'fold_3', 'fold_4', 'mean', 'sd']
        assert list(df.index) == ['a', 'b']
        assert df.index.name == 'feature'
