"""Tests for embed_content.content module."""

import pytest

from embed_content.content import build_content, has_embeddable_content
from embed_content.models import (
    ActivitySnapshot,
    CommentSnapshot,
    EngagementSnapshot,
    EnrichmentContext,
    PhaseNoteSnapshot,
)

ACME = EnrichmentContext(company="Acme", industry="Technology")


class TestBuildPhaseNote:
    def test_with_enrichment(self) -> None:
        record = PhaseNoteSnapshot(id="p1", engagement_id="e1", phase_type="DESIGN", text="client wants SSO")
        assert build_content("PhaseNote", record, ACME) == (
            "Company: Acme\nIndustry: Technology\nPhase: Design\nContent: client wants SSO"
        )

    def test_without_enrichment(self) -> None:
        record = PhaseNoteSnapshot(id="p1", phase_type="TECHNICAL_VALIDATION", text="POC done")
        assert build_content("PhaseNote", record, None) == "Phase: Technical Validation\nContent: POC done"

    def test_missing_phase(self) -> None:
        record = PhaseNoteSnapshot(id="p1", text="notes")
        assert build_content("PhaseNote", record) == "Phase: Unknown\nContent: notes"


class TestBuildActivity:
    def test_with_enrichment(self) -> None:
        record = ActivitySnapshot(id="a1", type="Meeting", description="Demo went well")
        assert build_content("Activity", record, ACME) == (
            "Company: Acme\nIndustry: Technology\nType: Meeting\nContent: Demo went well"
        )

    def test_missing_type_defaults(self) -> None:
        record = ActivitySnapshot(id="a1", description="Call")
        assert build_content("Activity", record) == "Type: Activity\nContent: Call"


class TestBuildComment:
    def test_with_enrichment(self) -> None:
        record = CommentSnapshot(id="c1", activity_id="a1", text="Agreed")
        assert build_content("Comment", record, ACME) == "Company: Acme\nIndustry: Technology\nContent: Agreed"

    def test_without_enrichment_omits_context(self) -> None:
        record = CommentSnapshot(id="c1", activity_id="a1", text="Agreed")
        assert build_content("Comment", record, None) == "Content: Agreed"


class TestBuildEngagement:
    def test_both_fields(self) -> None:
        record = EngagementSnapshot(
            id="e1",
            company="Acme",
            industry="FINANCIAL_SERVICES",
            competitor_notes="Vendor X incumbent",
            closed_reason="Won",
        )
        assert build_content("Engagement", record) == (
            "Company: Acme\nIndustry: Financial Services\n"
            "Competitor Notes: Vendor X incumbent\nClosed Reason: Won"
        )

    def test_only_closed_reason(self) -> None:
        record = EngagementSnapshot(id="e1", closed_reason="No budget")
        assert build_content("Engagement", record) == (
            "Company: Unknown\nIndustry: Unknown\nClosed Reason: No budget"
        )

    def test_ignores_enrichment(self) -> None:
        record = EngagementSnapshot(id="e1", company="Globex", competitor_notes="n")
        content = build_content("Engagement", record, ACME)
        assert content.startswith("Company: Globex\n")


class TestNothingToEmbed:
    @pytest.mark.parametrize(
        "kind,record",
        [
            ("PhaseNote", PhaseNoteSnapshot(id="p", phase_type="DESIGN", text="   ")),
            ("Activity", ActivitySnapshot(id="a", type="Call", description="")),
            ("Comment", CommentSnapshot(id="c", text=None)),
            ("Engagement", EngagementSnapshot(id="e", company="Acme", competitor_notes=" ", closed_reason="\n")),
        ],
    )
    def test_blank_content_returns_none(self, kind, record) -> None:
        assert not has_embeddable_content(kind, record)
        assert build_content(kind, record, ACME) is None


class TestDeterminism:
    def test_same_input_same_output(self) -> None:
        record = ActivitySnapshot(id="a1", type="Meeting", description="Demo")
        assert build_content("Activity", record, ACME) == build_content("Activity", record, ACME)
