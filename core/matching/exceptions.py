#!/usr/bin/env python3
"""
Custom exceptions for the matching service layer.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class EntityNotFoundException(ServiceException):
    """Raised when an anchor team or opportunity does not resolve."""

    entity_type = "Entity"

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"{self.entity_type} {entity_id} not found")


class TeamNotFoundException(EntityNotFoundException):
    """Raised when a team is not found."""
    entity_type = "Team"


class OpportunityNotFoundException(EntityNotFoundException):
    """Raised when an opportunity is not found."""
    entity_type = "Opportunity"


class MatchingFailedException(ServiceException):
    """Raised when a direct search fails for any reason other than a missing anchor."""
    pass


class InvalidFilterException(ServiceException):
    """Raised when matching filters are inconsistent."""
    pass
