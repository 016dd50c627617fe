#!/usr/bin/env python3
"""
Unit tests for the seven team/opportunity dimension scores.
"""

import unittest

from core.matching import dimensions
from tests.fixtures.entity_fixtures import make_team, make_opportunity


class TestSkillsMatch(unittest.TestCase):
    """Tests for skills_match (max 25)."""

    def test_no_required_skills_gives_half_marks(self):
        """Postings without required skills get round-half-up of 12.5."""
        team = make_team()
        opportunity = make_opportunity(skills=[])
        self.assertEqual(dimensions.skills_match(team, opportunity), 13)

    def test_case_insensitive_substring_match(self):
        """A lowercase required skill matches a capitalised specialization."""
        team = make_team(specializations=['Python', 'AWS'])
        opportunity = make_opportunity(skills=['python'])
        self.assertEqual(dimensions.skills_match(team, opportunity), 25)

    def test_bidirectional_containment(self):
        """Compound names match in either direction."""
        team = make_team(specializations=['Machine Learning', 'Go'])
        opportunity = make_opportunity(skills=['learning', 'golang'])
        # 'learning' in 'machine learning'; 'go' in 'golang'
        self.assertEqual(dimensions.skills_match(team, opportunity), 25)

    def test_partial_coverage(self):
        team = make_team(specializations=['Python'])
        opportunity = make_opportunity(skills=['python', 'rust', 'java', 'kotlin'])
        # 1/4 of 25 = 6.25
        self.assertEqual(dimensions.skills_match(team, opportunity), 6)

    def test_two_of_three(self):
        team = make_team(specializations=['Python', 'Kubernetes'])
        opportunity = make_opportunity(skills=['python', 'kubernetes', 'erlang'])
        # 2/3 of 25 = 16.67
        self.assertEqual(dimensions.skills_match(team, opportunity), 17)

    def test_team_without_specializations(self):
        team = make_team(specializations=[])
        opportunity = make_opportunity(skills=['python'])
        self.assertEqual(dimensions.skills_match(team, opportunity), 0)


class TestIndustryMatch(unittest.TestCase):
    """Tests for industry_match (max 20)."""

    def test_exact_overlap_case_insensitive(self):
        team = make_team(industry=['fintech', 'Retail'])
        opportunity = make_opportunity(industry=['FinTech'])
        self.assertEqual(dimensions.industry_match(team, opportunity), 20)

    def test_related_industry(self):
        """Different industries sharing an allow-listed keyword score 70%."""
        team = make_team(industry=['Financial Services'])
        opportunity = make_opportunity(industry=['Financial Technology'])
        self.assertEqual(dimensions.industry_match(team, opportunity), 14)

    def test_related_tech_keyword(self):
        team = make_team(industry=['FinTech'])
        opportunity = make_opportunity(industry=['Technology'])
        self.assertEqual(dimensions.industry_match(team, opportunity), 14)

    def test_unrelated_industry_never_zero(self):
        team = make_team(industry=['Retail'])
        opportunity = make_opportunity(industry=['Energy'])
        self.assertEqual(dimensions.industry_match(team, opportunity), 6)

    def test_empty_industries(self):
        team = make_team(industry=[])
        opportunity = make_opportunity(industry=[])
        self.assertEqual(dimensions.industry_match(team, opportunity), 6)


class TestExperienceMatch(unittest.TestCase):
    """Tests for experience_match (max 15)."""

    def test_full_tenure_and_cohesion(self):
        team = make_team(dynamics={'yearsWorkingTogether': 3, 'cohesionScore': 10})
        self.assertEqual(dimensions.experience_match(team, make_opportunity()), 15)

    def test_tenure_capped_at_three_years(self):
        team = make_team(dynamics={'yearsWorkingTogether': 12, 'cohesionScore': 10})
        self.assertEqual(dimensions.experience_match(team, make_opportunity()), 15)

    def test_missing_cohesion_defaults_to_five(self):
        team = make_team(dynamics={'yearsWorkingTogether': 0})
        # 0 tenure + (5/10 * 0.4) * 15 = 3
        self.assertEqual(dimensions.experience_match(team, make_opportunity()), 3)

    def test_zero_cohesion_treated_as_unset(self):
        team = make_team(dynamics={'yearsWorkingTogether': 6, 'cohesionScore': 0})
        # (0.6 + 0.2) * 15 = 12
        self.assertEqual(dimensions.experience_match(team, make_opportunity()), 12)

    def test_default_fixture(self):
        # 4 years, cohesion 8: (0.6 + 0.32) * 15 = 13.8
        self.assertEqual(dimensions.experience_match(make_team(), make_opportunity()), 14)

    def test_out_of_range_cohesion_stays_bounded(self):
        team = make_team(dynamics={'yearsWorkingTogether': 10, 'cohesionScore': 50})
        self.assertEqual(dimensions.experience_match(team, make_opportunity()), 15)


class TestLocationMatch(unittest.TestCase):
    """Tests for location_match (max 10); first matching rule wins."""

    def test_same_location_onsite(self):
        team = make_team(location={'primary': 'Boston', 'remote': False})
        opportunity = make_opportunity(location='Boston', remotePolicy='onsite')
        self.assertEqual(dimensions.location_match(team, opportunity), 10)

    def test_both_remote(self):
        team = make_team(location={'primary': 'Austin', 'remote': True})
        opportunity = make_opportunity(location='London', remotePolicy='remote')
        self.assertEqual(dimensions.location_match(team, opportunity), 10)

    def test_hybrid_with_remote_team(self):
        team = make_team(location={'primary': 'Austin', 'remote': True})
        opportunity = make_opportunity(location='London', remotePolicy='hybrid')
        self.assertEqual(dimensions.location_match(team, opportunity), 8)

    def test_hybrid_with_onsite_team(self):
        team = make_team(location={'primary': 'Austin', 'remote': False})
        opportunity = make_opportunity(location='London', remotePolicy='hybrid')
        self.assertEqual(dimensions.location_match(team, opportunity), 6)

    def test_remote_team_onsite_role(self):
        team = make_team(location={'primary': 'Austin', 'remote': True})
        opportunity = make_opportunity(location='London', remotePolicy='onsite')
        self.assertEqual(dimensions.location_match(team, opportunity), 6)

    def test_unset_locations_are_not_the_same_place(self):
        team = make_team(location={'remote': False})
        opportunity = make_opportunity(location='', remotePolicy='onsite')
        self.assertEqual(dimensions.location_match(team, opportunity), 2)

    def test_unset_locations_with_unknown_policy(self):
        team = make_team(location={})
        opportunity = make_opportunity(location=None, remotePolicy=None)
        self.assertEqual(dimensions.location_match(team, opportunity), 6)

    def test_no_flexibility_anywhere(self):
        team = make_team(location={'primary': 'Austin', 'remote': False})
        opportunity = make_opportunity(location='London', remotePolicy='onsite')
        self.assertEqual(dimensions.location_match(team, opportunity), 2)


class TestCompensationMatch(unittest.TestCase):
    """Tests for compensation_match (max 15)."""

    def test_budget_from_per_member_max(self):
        """max 60000 x size 5 = 300000 exceeds the team's 250000 ceiling."""
        team = make_team(size=5, compensationExpectations={'totalTeamValue': {'min': 150000, 'max': 250000}})
        opportunity = make_opportunity(compensation={'max': 60000})
        self.assertEqual(dimensions.opportunity_budget(team, opportunity), 300000)
        self.assertEqual(dimensions.compensation_match(team, opportunity), 15)

    def test_total_takes_precedence(self):
        team = make_team(size=5)
        opportunity = make_opportunity(compensation={'total': 200000, 'max': 60000})
        self.assertEqual(dimensions.compensation_match(team, opportunity), 12)

    def test_zero_total_falls_back_to_max(self):
        team = make_team(size=5)
        opportunity = make_opportunity(compensation={'total': 0, 'max': 60000})
        self.assertEqual(dimensions.compensation_match(team, opportunity), 15)

    def test_close_to_range(self):
        team = make_team()
        opportunity = make_opportunity(compensation={'total': 130000})
        self.assertEqual(dimensions.compensation_match(team, opportunity), 8)

    def test_below_expectations(self):
        team = make_team()
        opportunity = make_opportunity(compensation={'total': 100000})
        self.assertEqual(dimensions.compensation_match(team, opportunity), 3)

    def test_missing_team_expectations(self):
        team = make_team(compensationExpectations=None)
        self.assertEqual(dimensions.compensation_match(team, make_opportunity()), 8)

    def test_missing_opportunity_compensation(self):
        opportunity = make_opportunity(compensation=None)
        self.assertEqual(dimensions.compensation_match(make_team(), opportunity), 8)

    def test_expectation_missing_max_is_neutral(self):
        team = make_team(compensationExpectations={'totalTeamValue': {'min': 150000}})
        opportunity = make_opportunity(compensation={'total': 1})
        self.assertIsNone(team.expected_value)
        self.assertEqual(dimensions.compensation_match(team, opportunity), 8)

    def test_empty_expectation_range_is_neutral(self):
        team = make_team(compensationExpectations={'totalTeamValue': {}})
        opportunity = make_opportunity(compensation={'total': 1})
        self.assertEqual(dimensions.compensation_match(team, opportunity), 8)

    def test_null_expectation_bound_is_neutral(self):
        team = make_team(compensationExpectations={'totalTeamValue': {'min': None, 'max': 250000}})
        opportunity = make_opportunity(compensation={'total': 900000})
        self.assertEqual(dimensions.compensation_match(team, opportunity), 8)

    def test_compensation_without_amounts(self):
        opportunity = make_opportunity(compensation={'currency': 'USD'})
        self.assertIsNone(dimensions.opportunity_budget(make_team(), opportunity))
        self.assertEqual(dimensions.compensation_match(make_team(), opportunity), 8)


class TestCultureMatch(unittest.TestCase):
    """Tests for culture_match (max 10)."""

    def test_remote_arrangement_and_all_values(self):
        self.assertEqual(dimensions.culture_match(make_team(), make_opportunity()), 10)

    def test_hybrid_arrangement_without_culture_values(self):
        team = make_team(dynamics={'yearsWorkingTogether': 2, 'preferredWorkArrangement': 'hybrid'})
        opportunity = make_opportunity(remotePolicy='hybrid', culture=None)
        self.assertEqual(dimensions.culture_match(team, opportunity), 7)

    def test_half_of_values_shared(self):
        team = make_team(
            dynamics={'yearsWorkingTogether': 2, 'preferredWorkArrangement': 'onsite'},
            values=['Transparency', 'Speed']
        )
        opportunity = make_opportunity(culture={'values': ['radical transparency']})
        # 5 + (1/2) * 2
        self.assertEqual(dimensions.culture_match(team, opportunity), 6)

    def test_team_without_values(self):
        team = make_team(
            dynamics={'yearsWorkingTogether': 2, 'preferredWorkArrangement': 'flexible'},
            values=[]
        )
        self.assertEqual(dimensions.culture_match(team, make_opportunity()), 5)


class TestAvailabilityMatch(unittest.TestCase):
    """Tests for availability_match (max 5)."""

    def test_available(self):
        team = make_team(availability={'status': 'available'})
        self.assertEqual(dimensions.availability_match(team, make_opportunity()), 5)

    def test_selective(self):
        """5 * 0.7 evaluates just below 3.5 and rounds to 3."""
        team = make_team(availability={'status': 'selective'})
        self.assertEqual(dimensions.availability_match(team, make_opportunity()), 3)

    def test_not_available(self):
        team = make_team(availability={'status': 'not_available'})
        self.assertEqual(dimensions.availability_match(team, make_opportunity()), 0)

    def test_missing_status(self):
        team = make_team(availability={})
        self.assertEqual(dimensions.availability_match(team, make_opportunity()), 0)


if __name__ == '__main__':
    unittest.main()
