"""Tests du générateur de plan périodisé et du catalogue de phases."""

from datetime import date

import pytest
from pydantic import ValidationError

from badminton_coach.core.errors import InvalidDurationError
from badminton_coach.core.phase_catalog import (
    PHASE_DESCRIPTIONS, get_phase_recommendations, get_workout_template, get_drill_recommendations
)
from badminton_coach.core.plan_generator import generate_periodized_plan
from badminton_coach.models import TrainingPhase, TrainingGoal, FitnessLevel, WorkoutType
from badminton_coach.utils.plan_helpers import phases_cover_duration, get_current_week_number


def _timeline(plan):
    return [(p.phase.value, p.start_week, p.end_week) for p in plan.phases]


class TestPhaseTimeline:
    """Répartition des phases selon la durée et l'objectif."""

    @pytest.mark.parametrize("duration", [8, 12, 16])
    @pytest.mark.parametrize("goal", [g.value for g in TrainingGoal])
    def test_phases_partition_duration(self, duration, goal):
        plan = generate_periodized_plan(goal, duration, 4, 'intermediate')

        assert phases_cover_duration(plan)
        weeks = [w for p in plan.phases for w in range(p.start_week, p.end_week + 1)]
        assert weeks == list(range(1, duration + 1))

    def test_eight_weeks(self):
        plan = generate_periodized_plan('skill', 8, 3, 'beginner')
        assert _timeline(plan) == [
            ('base', 1, 3), ('build', 4, 5), ('peak', 6, 7), ('taper', 8, 8)
        ]

    def test_twelve_weeks_fitness_ends_with_recovery(self, fitness_plan):
        assert _timeline(fitness_plan) == [
            ('base', 1, 4), ('build', 5, 8), ('peak', 9, 11), ('recovery', 12, 12)
        ]

    def test_twelve_weeks_tournament_ends_with_taper(self):
        plan = generate_periodized_plan('tournament', 12, 4, 'intermediate')
        assert plan.phases[-1].phase == TrainingPhase.TAPER
        assert (plan.phases[-1].start_week, plan.phases[-1].end_week) == (12, 12)

    def test_sixteen_weeks(self, tournament_plan):
        assert _timeline(tournament_plan) == [
            ('base', 1, 6), ('build', 7, 11), ('peak', 12, 14),
            ('taper', 15, 15), ('recovery', 16, 16)
        ]

    @pytest.mark.parametrize("duration", [0, 4, 10, 13, 20])
    def test_unsupported_duration_fails_fast(self, duration):
        with pytest.raises(InvalidDurationError) as exc_info:
            generate_periodized_plan('fitness', duration, 4, 'intermediate')
        assert exc_info.value.duration == duration
        assert isinstance(exc_info.value, ValueError)


class TestPlanFields:
    """Champs du plan généré."""

    def test_initial_state(self, fitness_plan):
        assert fitness_plan.current_week == 1
        assert fitness_plan.goal == TrainingGoal.FITNESS
        assert fitness_plan.fitness_level == FitnessLevel.INTERMEDIATE
        assert fitness_plan.days_per_week == 4
        assert fitness_plan.name == "Fitness - 12 Week Plan"
        assert fitness_plan.id == "plan_fitness_2026-01-05"
        assert fitness_plan.competition_date is None

    def test_competition_date_parsed_from_iso(self, tournament_plan):
        assert tournament_plan.competition_date == date(2026, 4, 26)

    def test_default_ids_are_unique(self):
        first = generate_periodized_plan('fitness', 12, 4, 'intermediate', start_date=date(2026, 1, 5))
        second = generate_periodized_plan('fitness', 12, 4, 'intermediate', start_date=date(2026, 1, 5))

        assert first.id.startswith("plan_fitness_")
        assert first.id != second.id

    @pytest.mark.parametrize("level,expected", [
        ('beginner', 4 * 90 * 0.7),
        ('intermediate', 4 * 90 * 1.0),
        ('advanced', 4 * 90 * 1.2),
        ('elite', 4 * 90 * 1.5),
    ])
    def test_base_weekly_volume_scales_with_level(self, level, expected):
        plan = generate_periodized_plan('fitness', 8, 4, level)
        assert plan.base_weekly_volume == pytest.approx(expected)

    def test_phase_ranges_use_catalog_multipliers(self, tournament_plan):
        for phase_plan in tournament_plan.phases:
            desc = PHASE_DESCRIPTIONS[phase_plan.phase]
            assert phase_plan.volume_range == pytest.approx(
                (8 * desc.volume_multiplier, 12 * desc.volume_multiplier)
            )
            assert phase_plan.intensity_range == pytest.approx(
                (6 * desc.intensity_multiplier, 10 * desc.intensity_multiplier)
            )
            assert phase_plan.focus == desc.focus
            assert phase_plan.objectives == desc.objectives

    def test_base_phase_ranges(self, fitness_plan):
        base = fitness_plan.phases[0]
        assert base.volume_range == pytest.approx((5.6, 8.4))
        assert base.intensity_range == pytest.approx((3.6, 6.0))

    @pytest.mark.parametrize("days", [2, 7])
    def test_days_per_week_out_of_range(self, days):
        with pytest.raises(ValidationError):
            generate_periodized_plan('fitness', 12, days, 'intermediate')

    def test_invalid_goal(self):
        with pytest.raises(ValueError):
            generate_periodized_plan('marathon', 12, 4, 'intermediate')

    def test_current_week_number_from_date(self, fitness_plan):
        assert get_current_week_number(fitness_plan, date(2026, 1, 5)) == 1
        assert get_current_week_number(fitness_plan, date(2026, 1, 19)) == 3
        assert get_current_week_number(fitness_plan, date(2026, 1, 4)) is None
        assert get_current_week_number(fitness_plan, date(2026, 3, 30)) is None


class TestPhaseCatalog:
    """Catalogue statique des phases."""

    @pytest.mark.parametrize("phase,volume,intensity", [
        ('base', 0.7, 0.6),
        ('build', 1.0, 0.8),
        ('peak', 0.9, 0.95),
        ('taper', 0.5, 0.7),
        ('recovery', 0.4, 0.5),
    ])
    def test_multipliers(self, phase, volume, intensity):
        desc = get_phase_recommendations(phase)
        assert desc.volume_multiplier == volume
        assert desc.intensity_multiplier == intensity
        assert len(desc.objectives) == 3
        assert len(desc.focus) == 4

    def test_recommendations_are_copies(self):
        desc = get_phase_recommendations(TrainingPhase.BASE)
        desc.focus.append('Smash')
        desc.volume_multiplier = 2.0

        fresh = get_phase_recommendations(TrainingPhase.BASE)
        assert 'Smash' not in fresh.focus
        assert fresh.volume_multiplier == 0.7

    def test_templates(self):
        assert get_workout_template('taper') == [
            WorkoutType.TECHNIQUE, WorkoutType.RECOVERY, WorkoutType.MATCH, WorkoutType.RECOVERY
        ]
        assert len(get_workout_template('recovery')) == 3

    def test_drill_library(self):
        assert get_drill_recommendations('technique') == [
            'Shadow badminton', 'Multi-shuttle drills', 'Footwork patterns', 'Clear technique'
        ]
        for workout_type in WorkoutType:
            assert len(get_drill_recommendations(workout_type)) == 4
