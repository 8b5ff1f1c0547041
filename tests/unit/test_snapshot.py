"""Tests for application match snapshots."""
from internmatch.matching import (
    MATCHING_VERSION,
    MatchScorer,
    MatchSnapshot,
    MatchWeights,
    build_application_match_snapshot,
    matching_version_for,
)


class TestApplicationMatchSnapshot:
    """Tests for build_application_match_snapshot."""

    def test_snapshot_from_raw_records(self, listing_records, student_profiles):
        snapshot = build_application_match_snapshot(
            listing_records["internship_finance_1"],
            student_profiles["student_1"],
        )

        assert snapshot.match_score == 100
        assert snapshot.match_gaps == ()
        assert snapshot.match_reasons[0] == "Required skills: 2/2 matched (+30.0)"
        assert snapshot.matching_version == MATCHING_VERSION

    def test_start_month_stands_in_for_terms(self, listing_records):
        profile = {
            "majors": ["finance"],
            "availability_start_month": "June",
            "availability_hours_per_week": 20,
        }

        snapshot = build_application_match_snapshot(listing_records["internship_finance_1"], profile)

        assert "Term fit: summer (+10.0)" in snapshot.match_reasons

    def test_remote_only_snapshot(self, listing_records, student_profiles):
        snapshot = build_application_match_snapshot(
            listing_records["internship_ops_1"],
            student_profiles["student_2"],
        )

        assert snapshot.match_score == 0
        assert snapshot.match_reasons == ()
        assert len(snapshot.match_gaps) == 1

    def test_missing_records(self):
        snapshot = build_application_match_snapshot(None, None)

        assert snapshot.match_score == 50
        assert snapshot.to_dict() == {
            "match_score": 50,
            "match_reasons": [],
            "match_gaps": [],
            "matching_version": MATCHING_VERSION,
        }

    def test_custom_scorer_version_recorded(self, listing_records, student_profiles):
        weights = MatchWeights(skills_preferred=0)

        snapshot = build_application_match_snapshot(
            listing_records["internship_data_1"],
            student_profiles["student_2"],
            scorer=MatchScorer(weights),
        )

        assert snapshot.matching_version == matching_version_for(weights)
        assert isinstance(snapshot, MatchSnapshot)
