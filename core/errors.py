"""
Error taxonomy for the projection engine and its input layers.

Everything derives from SimulationError, which is a ValueError, so callers
catching ValueError around a projection keep working.
"""

from __future__ import annotations


class SimulationError(ValueError):
    """Base class for rejected simulation inputs."""


class InvalidHorizon(SimulationError):
    """Projection horizon is not a positive whole number of months."""


class InvalidDivisor(SimulationError):
    """Token emission or initial token rate is not strictly positive."""


class OutOfRangePercentage(SimulationError):
    """A percentage input falls outside its documented range."""


class InvalidAmount(SimulationError):
    """A monetary amount (revenue, pool size) or policy value is invalid."""


class ParameterParseError(SimulationError):
    """Raw form text could not be parsed as a number."""

    def __init__(self, field_name: str, raw: object):
        self.field_name = field_name
        self.raw = raw
        super().__init__(f"Could not parse {field_name!r} from {raw!r}.")
