"""Shared fixtures for the gpa_tools tests."""

import pytest

from gpa_tools.data import DataLoader
from gpa_tools.engines import GPAAggregator, GradeScale, WeightingPolicy
from gpa_tools.models import CourseRecord, Semester


@pytest.fixture(scope="session")
def loader():
    """One loader for the whole run; the shipped tables never change."""
    return DataLoader()


@pytest.fixture
def standard_scale(loader):
    return GradeScale(loader.scale("standard"))


@pytest.fixture
def weighted_definition(loader):
    return loader.definition("weighted")


@pytest.fixture
def weighted_policy(weighted_definition):
    return WeightingPolicy.from_definition(weighted_definition)


@pytest.fixture
def unweighted_aggregator(standard_scale):
    return GPAAggregator(standard_scale)


@pytest.fixture
def make_courses():
    """Build CourseRecords from (grade, credits[, category]) tuples."""
    def _make(rows, category="regular"):
        courses = []
        for i, row in enumerate(rows, 1):
            grade, credits = row[0], row[1]
            cat = row[2] if len(row) > 2 else category
            courses.append(CourseRecord(name=f"Course {i}", grade=grade, credits=credits, category=cat))
        return courses
    return _make


@pytest.fixture
def reference_courses(make_courses):
    """A, B+, A-, B over 13 credits: 45.7 points, GPA 3.515..."""
    return make_courses([("A", 3), ("B+", 3), ("A-", 4), ("B", 3)])


@pytest.fixture
def two_semesters(make_courses):
    fall = Semester(label="Fall", courses=make_courses([("A", 4), ("A", 4), ("A-", 4)]))
    spring = Semester(label="Spring", courses=make_courses([("C", 3), ("B", 3)]))
    return [fall, spring]
