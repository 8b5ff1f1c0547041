"""Tests for listing/profile matching."""
import dataclasses

import pytest

from internmatch.canonical import Season, WorkMode
from internmatch.matching import (
    DEFAULT_WEIGHTS,
    MATCHING_VERSION,
    SIGNAL_KEYS,
    ListingFeatures,
    ListingRanker,
    MatchScorer,
    MatchWeights,
    ProfileFeatures,
    Scorer,
    build_listing_features,
    build_profile_features,
    is_stale,
    matching_version_for,
    rank_listings,
    score_match,
)
from internmatch.matching.matcher import REMOTE_ONLY_GAP, round_half_up


@pytest.fixture
def listings(listing_records):
    return {key: build_listing_features(record) for key, record in listing_records.items()}


@pytest.fixture
def profiles(student_profiles):
    return {key: build_profile_features(record) for key, record in student_profiles.items()}


class TestWeights:
    """Tests for the pinned weight table and versioning."""

    def test_default_weight_table_is_pinned(self):
        assert DEFAULT_WEIGHTS.as_dict() == {
            "skills_required": 30.0,
            "skills_preferred": 10.0,
            "major_alignment": 20.0,
            "availability": 15.0,
            "location_mode": 15.0,
            "term": 10.0,
        }
        assert DEFAULT_WEIGHTS.total == 100.0
        assert SIGNAL_KEYS == tuple(DEFAULT_WEIGHTS.as_dict())

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            MatchWeights(term=-1)

    def test_version_tags(self):
        assert matching_version_for() == MATCHING_VERSION

        custom = MatchWeights(term=0)
        tag = matching_version_for(custom)
        assert tag.startswith(f"{MATCHING_VERSION}+w")
        assert len(tag) == len(MATCHING_VERSION) + 2 + 8
        assert matching_version_for(MatchWeights(term=0)) == tag

    def test_stale_versions(self):
        assert not is_stale(MATCHING_VERSION)
        assert is_stale("v1.0")
        assert is_stale(None)
        assert is_stale(MATCHING_VERSION, MatchWeights(term=0))

    def test_round_half_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(0.5) == 1
        assert round_half_up(57.49) == 57


class TestFeatureBuilding:
    """Tests for listing/profile canonicalization."""

    def test_listing_from_description_lines(self, listings):
        listing = listings["internship_finance_1"]

        assert listing.id == "internship_finance_1"
        assert listing.required_skills == {"excel", "financial modeling"}
        assert listing.preferred_skills == {"powerpoint", "accounting"}
        assert listing.work_mode == WorkMode.HYBRID
        assert listing.location == "new york, ny"
        assert listing.term == "summer 2026"
        assert listing.season == Season.SUMMER
        assert listing.category == "finance"
        assert listing.hours_per_week == 20.0

    def test_skill_ids_take_precedence_over_text(self):
        listing = build_listing_features({
            "id": "l1",
            "required_skill_ids": ["skill-python"],
            "required_skills": ["cobol"],
            "description": "Required skills: fortran",
        })
        assert listing.required_skills == {"skill-python"}

    def test_required_removed_from_preferred(self):
        listing = ListingFeatures(
            id="l1",
            required_skills=frozenset({"sql"}),
            preferred_skills=frozenset({"sql", "tableau"}),
        )
        assert listing.preferred_skills == {"tableau"}

    def test_explicit_fields_override_description(self):
        listing = build_listing_features({
            "id": "l2",
            "work_mode": "In Person",
            "term": "Fall 2026",
            "location": "Austin, TX (Hybrid)",
            "role_category": "Marketing",
            "description": "Season: Summer 2026\nCategory: Sales",
        })
        assert listing.work_mode == WorkMode.ON_SITE
        assert listing.season == Season.FALL
        assert listing.category == "marketing"
        assert listing.location == "austin, tx"

    def test_category_falls_back_to_first_major(self):
        listing = build_listing_features({"id": "l3", "majors": "Economics, Finance"})
        assert listing.category == "economics"

    def test_profile_season_falls_back_to_start_month(self, profiles):
        profile = profiles["student_2"]

        assert profile.preferred_seasons == (Season.FALL,)
        assert profile.remote_only is True
        assert profile.preferred_work_modes == {WorkMode.REMOTE}

    def test_profile_skill_ids_and_text_merge(self):
        profile = build_profile_features({
            "skill_ids": ["skill-sql"],
            "skills": "SQL, Python, sql",
            "coursework": ["Statistics"],
        })
        assert profile.skills == ("skill-sql", "sql", "python")
        assert profile.skill_set == {"skill-sql", "sql", "python", "statistics"}

    def test_none_records(self):
        assert build_listing_features(None) == ListingFeatures(id="")
        assert build_profile_features(None) == ProfileFeatures()


class TestMatchScorer:
    """Scenario tests for MatchScorer."""

    def test_strong_match(self, listings, profiles):
        result = score_match(listings["internship_finance_1"], profiles["student_1"])

        assert result.score == 100
        assert result.eligible
        assert result.gaps == ()
        assert result.reasons == (
            "Required skills: 2/2 matched (+30.0)",
            "Major/category alignment: 1 major overlap (+20.0)",
            "Availability fit: 20 hrs/week (+15.0)",
            "Work mode fit: hybrid (+15.0)",
            "Preferred skills: 2/2 matched (+10.0)",
            "Term fit: summer (+10.0)",
        )
        assert result.matching_version == MATCHING_VERSION

    def test_partial_preferred_skills(self, listings, profiles):
        result = score_match(listings["internship_data_1"], profiles["student_2"])

        assert result.score == 95
        assert result.gaps == ("Missing preferred skills: experimentation",)
        assert "Preferred skills: 1/2 matched (+5.0)" in result.reasons

    def test_remote_only_hard_gap(self, listings, profiles):
        result = score_match(listings["internship_ops_1"], profiles["student_2"])

        assert not result.eligible
        assert result.score == 0
        assert result.reasons == ()
        assert result.gaps == (REMOTE_ONLY_GAP,)
        assert result.breakdown.contributions == ()

    def test_hybrid_counts_as_in_person(self, listings, profiles):
        result = score_match(listings["internship_finance_1"], profiles["student_2"])
        assert not result.eligible

    def test_gaps_ordered_by_points_lost(self, listings, profiles):
        profile = dataclasses.replace(profiles["student_2"], remote_only=False)

        result = score_match(listings["internship_ops_1"], profile)

        assert result.score == 13
        assert result.reasons == ()
        assert result.gaps == (
            "Missing required skills: excel",
            "No major/category alignment",
            "Work mode mismatch (on-site)",
            "Missing preferred skills: communication",
            "Term mismatch (summer 2026)",
            "Hours exceed availability (35 > 30 hrs/week)",
        )

    def test_missing_data_is_neutral(self):
        result = score_match(None, None)

        assert result.score == 50
        assert result.reasons == ()
        assert result.gaps == ()
        assert all(c.status == "unknown" for c in result.breakdown.contributions)

    def test_bare_on_site_listing(self):
        listing = ListingFeatures(id="bare", work_mode=WorkMode.ON_SITE)

        assert score_match(listing, ProfileFeatures()).score == 58
        assert score_match(listing, ProfileFeatures(remote_only=True)).score == 0

    def test_location_mismatch_half_credit(self):
        listing = ListingFeatures(id="l", work_mode=WorkMode.ON_SITE, location="chicago, il")
        profile = ProfileFeatures(preferred_locations=("boston",))

        result = score_match(listing, profile)

        contribution = result.breakdown.contributions[SIGNAL_KEYS.index("location_mode")]
        assert contribution.points_awarded == 7.5
        assert contribution.status == "partial"
        assert result.gaps == ("In-person location mismatch (chicago, il)",)

    def test_category_match_half_credit(self):
        listing = ListingFeatures(id="l", category="corporate finance")
        profile = ProfileFeatures(majors=("finance",))

        result = score_match(listing, profile)

        contribution = result.breakdown.contributions[SIGNAL_KEYS.index("major_alignment")]
        assert contribution.points_awarded == 10.0
        assert "Major/category alignment: category match (corporate finance) (+10.0)" in result.reasons

    def test_breakdown_sums_to_score(self, listings, profiles):
        for listing in listings.values():
            for profile in profiles.values():
                result = score_match(listing, profile)
                if not result.eligible:
                    continue
                keys = tuple(c.signal_key for c in result.breakdown.contributions)
                assert keys == SIGNAL_KEYS
                assert result.score == round_half_up(result.breakdown.raw_total)
                assert 0 <= result.score <= 100

    def test_deterministic(self, listings, profiles):
        first = score_match(listings["internship_data_1"], profiles["student_1"])
        second = score_match(listings["internship_data_1"], profiles["student_1"])
        assert first == second

    def test_custom_weights_change_version(self, listings, profiles):
        weights = MatchWeights(term=0)
        result = score_match(listings["internship_finance_1"], profiles["student_1"], weights)

        assert result.score == 90
        assert result.matching_version == matching_version_for(weights)
        assert result.reasons[-1] == "Term fit: summer (+0.0)"

    def test_satisfies_scorer_protocol(self):
        assert isinstance(MatchScorer(), Scorer)


class TestListingRanker:
    """Tests for ListingRanker."""

    def test_rank_orders_by_score(self, listings, profiles):
        ranked = rank_listings(listings.values(), profiles["student_1"])

        assert [(r.listing.id, r.score) for r in ranked] == [
            ("internship_finance_1", 100),
            ("internship_ops_1", 49),
            ("internship_data_1", 27),
        ]

    def test_hard_gaps_excluded(self, listings, profiles):
        ranker = ListingRanker()

        ranked = ranker.rank(listings.values(), profiles["student_2"])
        excluded = ranker.excluded(listings.values(), profiles["student_2"])

        assert [r.listing.id for r in ranked] == ["internship_data_1"]
        assert [r.listing.id for r in excluded] == ["internship_finance_1", "internship_ops_1"]

    def test_min_score(self, listings, profiles):
        ranker = ListingRanker(min_score=40)

        ranked = ranker.rank(listings.values(), profiles["student_1"])

        assert [r.listing.id for r in ranked] == ["internship_finance_1", "internship_ops_1"]
        assert [r.listing.id for r in ranker.filter_by_score(ranked, 60)] == ["internship_finance_1"]
        assert len(ranker.get_top(ranked, n=1)) == 1

    def test_ties_keep_input_order(self):
        a = ListingFeatures(id="a")
        b = ListingFeatures(id="b")

        ranked = ListingRanker().rank([a, b], ProfileFeatures())

        assert [r.listing.id for r in ranked] == ["a", "b"]


class TestRemoteOnlyScenario:
    def test_remote_only_scores_lower_than_flexible_twin(self):
        listing = build_listing_features({"id": "onsite", "work_mode": "on-site", "majors": ["finance"]})
        flexible = build_profile_features({"majors": ["finance"], "remote_only": False})
        remote_only = dataclasses.replace(flexible, remote_only=True)

        flexible_result = score_match(listing, flexible)
        remote_result = score_match(listing, remote_only)

        assert remote_result.score < flexible_result.score
        assert any("in-person" in gap for gap in remote_result.gaps)


class TestMalformedRecords:
    """Feature builders accept loosely typed records without raising."""

    def test_non_string_listing_fields(self):
        listing = build_listing_features({
            "id": "x",
            "term": 2026,
            "work_mode": 1,
            "category": ["finance"],
            "role_category": 7,
            "hours_per_week": 10 ** 400,
            "majors": ["Finance"],
        })

        assert listing.term == ""
        assert listing.work_mode is None
        assert listing.category == "finance"
        assert listing.hours_per_week is None
        assert 0 <= score_match(listing, ProfileFeatures()).score <= 100

    def test_term_falls_back_to_description_when_not_text(self):
        listing = build_listing_features({"id": "x", "term": 2026, "description": "Season: Fall 2026"})
        assert listing.season == Season.FALL

    def test_profile_work_modes_round_trip(self):
        original = build_profile_features({"preferred_work_modes": "remote,hybrid"})

        from_list = build_profile_features({"preferred_work_modes": list(original.preferred_work_modes)})
        from_set = build_profile_features({"preferred_work_modes": original.preferred_work_modes})

        assert original.preferred_work_modes == {WorkMode.REMOTE, WorkMode.HYBRID}
        assert from_list.preferred_work_modes == original.preferred_work_modes
        assert from_set.preferred_work_modes == original.preferred_work_modes
