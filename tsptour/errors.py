from __future__ import annotations


class TourError(ValueError):
    """Base class for failures of a tour computation."""


class MalformedMatrixError(TourError):
    """The distance matrix is incomplete, oversized or holds invalid values."""


class DisconnectedGraphError(TourError):
    """No usable edge connects the cities the operation needs to join."""


class InvalidCityCountError(TourError):
    """The number of cities is not usable by the requested operation."""


class SearchTimeoutError(TourError):
    """The exhaustive search ran past its time limit."""
