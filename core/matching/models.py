#!/usr/bin/env python3
"""
Matching Models - Team/Opportunity entities and match result structures.

Entities are pydantic models validated from stored documents (camelCase keys,
snake_case attributes). Every nested field has a default, so partial documents
validate and the scorer can fall back to neutral values instead of failing.

Match results are plain dataclasses: they are derived, never persisted, and
recomputed on every search.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import List, Dict, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


AVAILABILITY_AVAILABLE = 'available'
AVAILABILITY_SELECTIVE = 'selective'
AVAILABILITY_NOT_AVAILABLE = 'not_available'

VERIFICATION_VERIFIED = 'verified'

OPPORTUNITY_ACTIVE = 'active'

REMOTE = 'remote'
HYBRID = 'hybrid'
ONSITE = 'onsite'


class DocumentModel(BaseModel):
    """Base for entities read from the document store."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # An explicit null reads the same as a missing key, so the field default applies
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


def _as_string_list(value: Any) -> List[str]:
    # Some documents carry a single string where a list is expected
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v is not None]


class ValueRange(DocumentModel):
    min: Optional[float] = None
    max: Optional[float] = None


class TeamDynamics(DocumentModel):
    years_working_together: float = 0.0
    cohesion_score: Optional[float] = None  # 0-10
    preferred_work_arrangement: Optional[str] = None  # remote|hybrid|onsite|flexible


class TeamLocation(DocumentModel):
    primary: str = ""
    remote: bool = False


class CompensationExpectations(DocumentModel):
    total_team_value: Optional[ValueRange] = None


class TeamAvailability(DocumentModel):
    status: Optional[str] = None  # available|selective|not_available


class TeamVerification(DocumentModel):
    status: Optional[str] = None  # verified|pending|...


class NonCompeteRestrictions(DocumentModel):
    has_restrictions: bool = False


class LiftoutHistory(DocumentModel):
    previous_liftouts: List[Any] = Field(default_factory=list)
    non_compete_restrictions: Optional[NonCompeteRestrictions] = None


class PerformanceMetrics(DocumentModel):
    success_rate: Optional[float] = None  # 0-100


class Team(DocumentModel):
    """A pre-existing team represented as one matchable entity."""
    id: str
    name: str = ""
    description: Optional[str] = None
    size: int = 0
    industry: List[str] = Field(default_factory=list)
    specializations: List[str] = Field(default_factory=list)
    dynamics: TeamDynamics = Field(default_factory=TeamDynamics)
    location: TeamLocation = Field(default_factory=TeamLocation)
    compensation_expectations: Optional[CompensationExpectations] = None
    values: List[str] = Field(default_factory=list)
    availability: TeamAvailability = Field(default_factory=TeamAvailability)
    verification: TeamVerification = Field(default_factory=TeamVerification)
    liftout_history: LiftoutHistory = Field(default_factory=LiftoutHistory)
    performance_metrics: PerformanceMetrics = Field(default_factory=PerformanceMetrics)

    @field_validator('industry', 'specializations', 'values', mode='before')
    @classmethod
    def _coerce_lists(cls, value: Any) -> List[str]:
        return _as_string_list(value)

    @property
    def expected_value(self) -> Optional[ValueRange]:
        """The team's total compensation expectation range, if fully declared.

        A range missing either bound counts as no expectation.
        """
        if self.compensation_expectations is None:
            return None
        value_range = self.compensation_expectations.total_team_value
        if value_range is None or value_range.min is None or value_range.max is None:
            return None
        return value_range


class OpportunityCompensation(DocumentModel):
    total: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None  # per member
    currency: Optional[str] = None


class OpportunityCulture(DocumentModel):
    values: List[str] = Field(default_factory=list)

    @field_validator('values', mode='before')
    @classmethod
    def _coerce_values(cls, value: Any) -> List[str]:
        return _as_string_list(value)


class Opportunity(DocumentModel):
    """A company's posted request for a team."""
    id: str
    title: str = ""
    company_id: Optional[str] = None
    company_name: Optional[str] = None
    industry: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    location: str = ""
    remote_policy: Optional[str] = None  # remote|hybrid|onsite
    compensation: Optional[OpportunityCompensation] = None
    culture: Optional[OpportunityCulture] = None
    status: Optional[str] = None  # must be 'active' to be matchable
    created_at: Optional[datetime] = None

    @field_validator('industry', 'skills', mode='before')
    @classmethod
    def _coerce_lists(cls, value: Any) -> List[str]:
        return _as_string_list(value)


# Fixed maximum per dimension; they sum to exactly 100.
SKILLS_MAX = 25
INDUSTRY_MAX = 20
EXPERIENCE_MAX = 15
LOCATION_MAX = 10
COMPENSATION_MAX = 15
CULTURE_MAX = 10
AVAILABILITY_MAX = 5


@dataclass(frozen=True)
class ScoreBreakdown:
    """The seven independently bounded sub-scores."""
    skills_match: int = 0
    industry_match: int = 0
    experience_match: int = 0
    location_match: int = 0
    compensation_match: int = 0
    culture_match: int = 0
    availability_match: int = 0

    MAXIMA = {
        'skills_match': SKILLS_MAX,
        'industry_match': INDUSTRY_MAX,
        'experience_match': EXPERIENCE_MAX,
        'location_match': LOCATION_MAX,
        'compensation_match': COMPENSATION_MAX,
        'culture_match': CULTURE_MAX,
        'availability_match': AVAILABILITY_MAX,
    }

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def total_points(self) -> int:
        return sum(self.as_dict().values())


@dataclass(frozen=True)
class MatchScore:
    """Compatibility score between one team and one opportunity."""
    total: int
    breakdown: ScoreBreakdown
    reasoning: List[str] = field(default_factory=list)


@dataclass
class TeamOpportunityMatch:
    """A scored (team, opportunity) pair with presentation annotations."""
    team: Team
    opportunity: Opportunity
    score: MatchScore
    recommendation: str  # excellent|good|fair|poor
    key_strengths: List[str] = field(default_factory=list)
    potential_concerns: List[str] = field(default_factory=list)


class TeamSizeRange(BaseModel):
    min: int
    max: int


class CompensationRange(BaseModel):
    min: float
    max: float
    currency: Optional[str] = None  # accepted, not used for conversion


class MatchingFilters(BaseModel):
    """Caller-supplied filters applied after scoring."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    min_score: Optional[float] = None
    max_results: Optional[int] = None
    industry_preference: Optional[List[str]] = None
    location_preference: Optional[List[str]] = None  # accepted, not consulted
    team_size_range: Optional[TeamSizeRange] = None
    compensation_range: Optional[CompensationRange] = None
