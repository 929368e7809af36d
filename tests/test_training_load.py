"""Tests du calcul de charge et de l'ACWR."""

import pytest

from badminton_coach.models import AcwrStatus, WeeklyPlan, TrainingPhase
from badminton_coach.utils.training_load import (
    build_load_sample,
    calculate_acwr,
    calculate_training_load,
    compute_load_history,
    get_acwr_status,
    summarize_load_history,
)


class TestTrainingLoad:

    @pytest.mark.parametrize("volume,intensity,expected", [
        (10, 7, 70),
        (5.6, 3.6, 5.6 * 3.6),
        (0, 8, 0),
    ])
    def test_load_is_product(self, volume, intensity, expected):
        assert calculate_training_load(volume, intensity) == expected


class TestACWR:

    def test_spike_after_steady_weeks(self):
        # chronique = moyenne(100, 100, 100, 200) = 125, aiguë = 200
        assert calculate_acwr([100, 100, 100, 100, 200]) == pytest.approx(1.6)

    @pytest.mark.parametrize("loads", [[], [100], [100, 100], [50, 80, 120]])
    def test_fewer_than_four_samples(self, loads):
        assert calculate_acwr(loads) == 1.0

    def test_zero_chronic_load(self):
        assert calculate_acwr([0, 0, 0, 0]) == 1.0

    def test_only_last_four_samples_count(self):
        assert calculate_acwr([1000, 50, 50, 50, 50]) == pytest.approx(1.0)


class TestLoadHistory:

    def test_acwr_set_from_fourth_sample(self, make_sample):
        samples = [make_sample(w, 10, 10) for w in range(1, 5)] + [make_sample(5, 20, 10)]
        history = compute_load_history(samples)

        assert [s.acwr for s in history[:3]] == [None, None, None]
        assert history[3].acwr == pytest.approx(1.0)
        assert history[4].acwr == pytest.approx(1.6)
        assert history[4].total_load == pytest.approx(200)

    def test_sorted_by_week_number(self, make_sample):
        samples = [make_sample(3, 1, 5), make_sample(1, 1, 5), make_sample(2, 1, 5)]
        history = compute_load_history(samples)
        assert [s.week_number for s in history] == [1, 2, 3]

    def test_inputs_are_not_mutated(self, make_sample):
        samples = [make_sample(w, 10, 10) for w in range(1, 5)]
        compute_load_history(samples)
        assert all(s.acwr is None for s in samples)

    def test_update_keeps_earlier_weeks(self, make_sample):
        samples = [make_sample(w, 10, 5 + w) for w in range(1, 7)]
        before = compute_load_history(samples)

        samples[-1] = make_sample(6, 30, 9)
        after = compute_load_history(samples)

        assert [s.acwr for s in after[:5]] == [s.acwr for s in before[:5]]
        assert after[5].acwr != before[5].acwr

    def test_window_is_positional_over_sparse_weeks(self, make_sample):
        # semaines 3 et 4 sans séance: la fenêtre de la semaine 7 couvre 1, 2, 5, 7
        samples = [make_sample(w, 10, 10) for w in (1, 2, 5)] + [make_sample(7, 20, 10)]
        history = compute_load_history(samples)

        assert history[-1].week_number == 7
        assert history[-1].acwr == pytest.approx(200 / 125)


class TestLoadSample:

    def _week(self, **kwargs):
        return WeeklyPlan(
            week_number=3, phase=TrainingPhase.BASE,
            planned_volume=6.0, planned_intensity=4.0, **kwargs
        )

    def test_sample_from_actuals(self):
        sample = build_load_sample(self._week(actual_volume=1.5, actual_intensity=6.0))
        assert sample.week_number == 3
        assert sample.total_load == pytest.approx(9.0)
        assert sample.acwr is None

    def test_no_sample_without_actuals(self):
        assert build_load_sample(self._week()) is None
        assert build_load_sample(self._week(actual_volume=0.0, actual_intensity=5.0)) is None


class TestAcwrStatus:

    @pytest.mark.parametrize("acwr,expected", [
        (0.5, AcwrStatus.UNDERTRAINING),
        (0.79, AcwrStatus.UNDERTRAINING),
        (0.8, AcwrStatus.OPTIMAL),
        (1.0, AcwrStatus.OPTIMAL),
        (1.3, AcwrStatus.OPTIMAL),
        (1.4, AcwrStatus.CAUTION),
        (1.5, AcwrStatus.CAUTION),
        (1.6, AcwrStatus.HIGH_RISK),
    ])
    def test_thresholds(self, acwr, expected):
        assert get_acwr_status(acwr) == expected

    def test_summary_of_latest_week(self, make_sample):
        samples = [make_sample(w, 10, 10) for w in range(1, 5)] + [make_sample(5, 20, 10)]
        summary = summarize_load_history(compute_load_history(samples))

        assert summary == {
            'week_number': 5,
            'total_load': 200.0,
            'acwr': 1.6,
            'status': 'high_risk',
        }

    def test_summary_defaults_before_four_weeks(self, make_sample):
        summary = summarize_load_history(compute_load_history([make_sample(1, 2, 5)]))
        assert summary['acwr'] == 1.0
        assert summary['status'] == 'optimal'
        assert summarize_load_history([]) == {}
