"""Observation records and frame helpers."""

from econ_series.models.observations import (
    OBSERVATION_COLUMNS,
    Observation,
    empty_observations,
    frame_to_observations,
    observations_to_frame,
)

__all__ = [
    "OBSERVATION_COLUMNS",
    "Observation",
    "empty_observations",
    "frame_to_observations",
    "observations_to_frame",
]
