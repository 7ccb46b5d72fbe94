"""Persistence — ParameterRepository."""

from proposal_pricing.persistence.parameter_repository import ParameterRepository

__all__ = ["ParameterRepository"]
