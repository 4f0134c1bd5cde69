"""
Academic year and generation (cohort) arithmetic.

Generations are numbered from a fixed anchor: the high school first-years of
the 2025 academic year are generation 10. Stored member data depends on
these constants, so they must not change.
"""

# Third-party
from django.utils import timezone

# First-party/Local
from memberportal.api.models import Member

# The academic year starts in April
ACADEMIC_YEAR_START_MONTH = 4

EPOCH_ACADEMIC_YEAR = 2025
EPOCH_GENERATION = 10

GRADES = (1, 2, 3)


def academic_year(today=None):
    """
    Return the academic year `today` falls in. Dates from January to March
    belong to the academic year that started the previous calendar year.
    """
    if today is None:
        today = timezone.localdate()
    if today.month >= ACADEMIC_YEAR_START_MONTH:
        return today.year
    return today.year - 1


def entering_generation(year):
    """The generation of high school first-years in academic `year`"""
    return EPOCH_GENERATION + (year - EPOCH_ACADEMIC_YEAR)


def calculate_generation(status, grade, year):
    """
    Generation of a student in `grade` with `status` during academic `year`.
    Returns None for alumni, whose generation cannot be derived.
    """
    if status == Member.HIGH_SCHOOL:
        return entering_generation(year) - grade + 1
    if status == Member.JUNIOR_HIGH:
        return entering_generation(year) + 4 - grade
    return None


def derive_generation(status, grade=None, generation=None, year=None):
    """
    Work out the generation to store for a member.

    Students (junior high and high school) must give their `grade`; the
    generation is calculated from it. Alumni must give their `generation`,
    which is taken as is. Returns None when the field the status needs is
    missing.
    """
    if status == Member.ALUMNI:
        return generation

    if status not in (Member.JUNIOR_HIGH, Member.HIGH_SCHOOL) or not grade:
        return None

    if year is None:
        year = academic_year()
    return calculate_generation(status, grade, year)


def status_for_generation(generation, anchor_generation):
    """
    The status a member of `generation` has in the academic year where
    `anchor_generation` are the high school third-years.
    """
    if generation < anchor_generation:
        return Member.ALUMNI
    if generation <= anchor_generation + 2:
        return Member.HIGH_SCHOOL
    return Member.JUNIOR_HIGH


def graduating_generation(year=None):
    """The generation of the high school third-years in academic `year`"""
    if year is None:
        year = academic_year()
    return calculate_generation(Member.HIGH_SCHOOL, 3, year)
