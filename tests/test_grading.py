import math

import pytest

from database import Student, compute_percentage, compute_grade, round_percentage


class TestComputePercentage:
    def test_mean_of_three_marks(self):
        assert compute_percentage(70, 80, 90) == pytest.approx(80.0)

    def test_is_not_rounded(self):
        assert compute_percentage(100, 100, 99) == pytest.approx(299 / 3)
        assert compute_percentage(100, 100, 99) != 99.67

    def test_accepts_negative_and_large_marks(self):
        assert compute_percentage(-30, 0, 0) == pytest.approx(-10.0)
        assert compute_percentage(150, 150, 150) == pytest.approx(150.0)


class TestRoundPercentage:
    def test_rounds_to_two_places(self):
        assert round_percentage(299 / 3) == 99.67

    def test_rounds_halves_up(self):
        assert round_percentage(2.675) == 2.68
        assert round_percentage(66.665) == 66.67

    def test_leaves_short_values_alone(self):
        assert round_percentage(91.2) == 91.2


class TestComputeGrade:
    @pytest.mark.parametrize("percentage,expected", [
        (90.0, 'A'),
        (89.999, 'B'),
        (75.0, 'B'),
        (74.99, 'C'),
        (60.0, 'C'),
        (59.99, 'D'),
        (45.0, 'D'),
        (44.99, 'F'),
        (0.0, 'F'),
    ])
    def test_band_boundaries(self, percentage, expected):
        assert compute_grade(percentage) == expected

    def test_out_of_range_values(self):
        assert compute_grade(150.0) == 'A'
        assert compute_grade(-20.0) == 'F'

    def test_never_improves_as_percentage_drops(self):
        order = "ABCDF"
        previous = compute_grade(110.0)
        p = 110.0
        while p > -10.0:
            current = compute_grade(p)
            assert order.index(current) >= order.index(previous)
            previous = current
            p -= 0.25


class TestStudentFromMarks:
    def test_derives_rounded_percentage_and_grade(self):
        student = Student.from_marks("Bob", "R9", "Math", "b@x.org", "1", 100, 100, 69)
        assert student.percentage == 89.67
        assert student.grade == 'B'
        assert student.id is None

    def test_grade_uses_rounded_percentage(self):
        # 89.996 rounds to 90.0
        student = Student.from_marks("Eve", "R10", "Math", "", "", 89.996, 89.996, 89.996)
        assert student.percentage == 90.0
        assert student.grade == 'A'


class TestExtremeMarks:
    def test_rounds_values_beyond_default_decimal_precision(self):
        assert round_percentage(3e27) == 3e27
        assert round_percentage(-1e300) == -1e300

    def test_non_finite_values_pass_through(self):
        assert round_percentage(float('inf')) == float('inf')
        assert math.isnan(round_percentage(float('nan')))

    def test_from_marks_with_huge_marks(self):
        student = Student.from_marks("Max", "R11", "Math", "", "", 1e30, 0, 0)
        assert student.percentage == pytest.approx(1e30 / 3)
        assert student.grade == 'A'
