# =============================================================================
# core/templates.py - Project Templates
# =============================================================================
# Static, ordered milestone templates used to seed a new project's schedule.
# Each entry maps a semester week (1-based) to a milestone title; the due
# date is derived from the semester start when the project is created.
#
# Usage:
#   from core.templates import SEMESTER_16, get_template
#   for entry in SEMESTER_16:
#       print(entry.week, entry.title)
# =============================================================================

from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateEntry:
    """One milestone in a template: the week it falls due and its title."""
    week: int
    title: str


SEMESTER_16_KEY = "SEMESTER_16"

# A sixteen-week semester project plan
SEMESTER_16: tuple[TemplateEntry, ...] = (
    TemplateEntry(week=1, title="Team kickoff & roles"),
    TemplateEntry(week=2, title="Project proposal"),
    TemplateEntry(week=3, title="Requirements & research"),
    TemplateEntry(week=4, title="Project plan & timeline"),
    TemplateEntry(week=5, title="Design review"),
    TemplateEntry(week=6, title="Prototype v1"),
    TemplateEntry(week=7, title="Progress check-in"),
    TemplateEntry(week=8, title="Midterm presentation"),
    TemplateEntry(week=9, title="Feedback integration"),
    TemplateEntry(week=10, title="Prototype v2"),
    TemplateEntry(week=11, title="User testing"),
    TemplateEntry(week=12, title="Iteration & fixes"),
    TemplateEntry(week=13, title="Feature freeze"),
    TemplateEntry(week=14, title="Final report draft"),
    TemplateEntry(week=15, title="Final presentation"),
    TemplateEntry(week=16, title="Final submission & retrospective"),
)

TEMPLATES: dict[str, tuple[TemplateEntry, ...]] = {
    SEMESTER_16_KEY: SEMESTER_16,
}


def get_template(key: str) -> tuple[TemplateEntry, ...]:
    """
    Look up a template by key.

    Raises:
        KeyError: If no template is registered under `key`
    """
    return TEMPLATES[key]
