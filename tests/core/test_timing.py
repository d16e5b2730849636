"""
Tests for Timer.
"""

import pytest

from pycrossval.core.compute import Timer


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('fit'):
            pass
        with timer.section('fit'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'fit'}
        assert result['fit'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()
