"""
Tests for CrossValidationOptions and CrossValidationDesign.
"""

import numpy as np
import pandas as pd
import pytest

from pycrossval.core.exceptions import ConfigurationError, DimensionError, ValidationError
from pycrossval.crossval import CrossValidationDesign, CrossValidationOptions


class TestOptions:

    def test_defaults(self):
        opts = CrossValidationOptions()
        assert opts.backend == 'cpu_qr'
        assert opts.fill == 'mean'
        assert opts.stats and opts.coefficients
        assert not (opts.plots or opts.adv_stats or opts.deficiency)
        assert opts.n_jobs == 1
        assert opts.timeout is None

    def test_unknown_fill(self):
        with pytest.raises(ConfigurationError, match="fill"):
            CrossValidationOptions(fill='mode')

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError, match="backend"):
            CrossValidationOptions(backend='gpu')

    @pytest.mark.parametrize("n_jobs", [0, 1.5, None])
    def test_bad_n_jobs(self, n_jobs):
        with pytest.raises(ConfigurationError, match="n_jobs"):
            CrossValidationOptions(n_jobs=n_jobs)

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_bad_timeout(self, timeout):
        with pytest.raises(ConfigurationError, match="timeout"):
            CrossValidationOptions(timeout=timeout)


class TestDesignFromArrays:

    def test_basic(self, cv_data):
        X, y, folds = cv_data
        design = CrossValidationDesign.for_cross_validation(X, y, folds)
        assert design.n == 60
        assert design.p == 3
        assert design.n_folds == 5
        assert design.feature_names == ('x1', 'x2', 'x3')
        assert design.model_names == design.feature_names

    def test_arrays_are_read_only_copies(self, cv_data):
        X, y, folds = cv_data
        design = CrossValidationDesign.for_cross_validation(X, y, folds)
        assert not design.X.flags.writeable
        assert not design.y.flags.writeable
        assert not np.shares_memory(design.X, X)

    def test_intercept_model_names(self, cv_data):
        X, y, folds = cv_data
        opts = CrossValidationOptions(intercept=True)
        design = CrossValidationDesign.for_cross_validation(
            X, y, folds, opts, feature_names=['a', 'b', 'c'],
        )
        assert design.model_names == ('(Intercept)', 'a', 'b', 'c')
        M = design.model_matrix()
        assert M.shape == (60, 4)
        np.testing.assert_array_equal(M[:, 0], 1.0)

    def test_label_length_mismatch(self, cv_data):
        X, y, folds = cv_data
        with pytest.raises(ConfigurationError, match="does not match"):
            CrossValidationDesign.for_cross_validation(X, y[:-1], folds)

    def test_fold_out_of_range(self, cv_data):
        X, y, _ = cv_data
        with pytest.raises(ConfigurationError, match="must lie in"):
            CrossValidationDesign.for_cross_validation(X, y, [[0, 60]])

    def test_nan_labels_rejected(self, cv_data):
        X, y, folds = cv_data
        y = y.copy()
        y[3] = np.nan
        with pytest.raises(ValidationError, match="labels"):
            CrossValidationDesign.for_cross_validation(X, y, folds)

    def test_nan_features_need_cleaning(self, cv_data):
        X, y, folds = cv_data
        X = X.copy()
        X[0, 0] = np.nan
        with pytest.raises(ValidationError, match="cleaning=True"):
            CrossValidationDesign.for_cross_validation(X, y, folds)

    def test_cleaning_fills(self, cv_data):
        X, y, folds = cv_data
        X = X.copy()
        X[0, 0] = np.nan
        opts = CrossValidationOptions(cleaning=True, fill='zero')
        design = CrossValidationDesign.for_cross_validation(X, y, folds, opts)
        assert design.X[0, 0] == 0.0

    def test_normalize_after_fill(self):
        X = np.array([[0.0], [np.nan], [4.0], [2.0]])
        y = np.arange(4.0) + 1
        opts = CrossValidationOptions(cleaning=True, fill='mean', normalize=True)
        design = CrossValidationDesign.for_cross_validation(X, y, [[0], [1]], opts)
        np.testing.assert_allclose(design.X[:, 0], [0.0, 0.5, 1.0, 0.5])

    def test_wrong_name_count(self, cv_data):
        X, y, folds = cv_data
        with pytest.raises(ConfigurationError, match="feature_names"):
            CrossValidationDesign.for_cross_validation(X, y, folds, feature_names=['a'])

    def test_reserved_intercept_name(self):
        X = np.arange(8.0).reshape(4, 2)
        opts = CrossValidationOptions(intercept=True)
        with pytest.raises(ConfigurationError, match="reserved"):
            CrossValidationDesign.for_cross_validation(
                X, np.ones(4), [[0]], opts, feature_names=['(Intercept)', 'b'],
            )

    def test_too_few_rows(self):
        with pytest.raises(ConfigurationError, match="at least 2 rows"):
            CrossValidationDesign.for_cross_validation([[1.0]], [1.0], [[0]])

    def test_2d_labels_rejected(self, cv_data):
        X, y, folds = cv_data
        with pytest.raises(DimensionError):
            CrossValidationDesign.for_cross_validation(X, np.column_stack([y, y]), folds)

    def test_column_name_needs_dataframe(self, cv_data):
        X, _, folds = cv_data
        with pytest.raises(ConfigurationError, match="DataFrame"):
            CrossValidationDesign.for_cross_validation(X, 'price', folds)


class TestDesignFromDataFrame:

    def test_label_column_name(self):
        df = pd.DataFrame({
            'size': [50.0, 70.0, 90.0, 110.0],
            'price': [100.0, 140.0, 180.0, 220.0],
            'rooms': [1.0, 2.0, 2.0, 4.0],
        })
        design = CrossValidationDesign.for_cross_validation(df, 'price', [[0, 1], [2, 3]])
        assert design.feature_names == ('size', 'rooms')
        np.testing.assert_array_equal(design.y, [100.0, 140.0, 180.0, 220.0])
        assert design.p == 2

    def test_missing_label_column(self):
        df = pd.DataFrame({'a': [1.0, 2.0]})
        with pytest.raises(ConfigurationError, match="not found"):
            CrossValidationDesign.for_cross_validation(df, 'b', [[0]])

    def test_label_vector_with_dataframe(self):
        df = pd.DataFrame({'a': [1.0, 2.0, 3.0]})
        design = CrossValidationDesign.for_cross_validation(df, [2.0, 4.0, 6.0], [[0]])
        assert design.feature_names == ('a',)
