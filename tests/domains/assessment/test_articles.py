"""Unit tests for applicable EU AI Act articles and the effort summary."""

import pytest

from protectron.domains.assessment.articles import (
    ARTICLE_CATALOG,
    count_documents,
    count_requirements,
    determine_applicable_articles,
    estimate_hours,
    estimate_weeks,
)
from protectron.domains.assessment.inventory import detect_systems
from protectron.domains.assessment.models import RiskLevel


def _numbers(articles) -> list[str]:
    return [a.number for a in articles]


class TestCatalog:
    def test_order(self):
        assert _numbers(ARTICLE_CATALOG) == [
            "9", "10", "11", "12", "13", "14", "15", "26",
            "17", "27", "47", "49", "50", "61", "62", "71",
        ]  # fmt: skip

    def test_requirement_ids(self):
        article_9 = ARTICLE_CATALOG[0]
        assert article_9.id == "art-9"
        assert [r.id for r in article_9.requirements][:2] == ["art-9-1", "art-9-2"]

    def test_full_catalog_totals(self):
        assert count_requirements(ARTICLE_CATALOG) == 53
        assert estimate_hours(ARTICLE_CATALOG) == 47
        # "Incident Reporting Procedures" is shared by Articles 26 and 62
        assert count_documents(ARTICLE_CATALOG) == 38


class TestApplicableArticles:
    def test_high_risk_only(self, make_assessment):
        systems = detect_systems(make_assessment(use_cases=["hiring"]))
        articles = determine_applicable_articles(systems)

        assert "50" not in _numbers(articles)
        assert len(articles) == 15
        assert count_requirements(articles) == 51
        assert count_documents(articles) == 35
        assert estimate_hours(articles) == 46

    def test_high_and_limited_covers_everything(self, make_assessment):
        systems = detect_systems(make_assessment(use_cases=["hiring", "marketing"]))
        assert determine_applicable_articles(systems) == ARTICLE_CATALOG

    def test_limited_only(self, make_assessment):
        systems = detect_systems(make_assessment(ai_system_types=["chatbot"]))
        articles = determine_applicable_articles(systems)

        assert _numbers(articles) == ["9", "11", "13", "26", "50"]
        assert count_requirements(articles) == 17
        assert count_documents(articles) == 16
        assert estimate_hours(articles) == 12

    def test_minimal_only(self, make_assessment):
        (system,) = detect_systems(make_assessment())
        assert system.risk_level == RiskLevel.MINIMAL

        articles = determine_applicable_articles([system])
        assert _numbers(articles) == ["50"]
        assert count_requirements(articles) == 2
        assert count_documents(articles) == 3

    def test_empty_inventory(self):
        assert determine_applicable_articles([]) == []


class TestEstimateWeeks:
    @pytest.mark.parametrize(
        "hours,weeks",
        [(0, 0), (1, 1), (20, 1), (21, 2), (46, 3), (47, 3)],
    )
    def test_rounds_up(self, hours, weeks):
        assert estimate_weeks(hours) == weeks

    def test_custom_pace(self):
        assert estimate_weeks(47, hours_per_week=10) == 5
