# treemap_labels/core/annealing.py
"""
Simulated annealing for point-feature label placement, after Christensen,
Marks and Shieber, "An Empirical Study of Algorithms for Point-Feature Label
Placement" (ACM TOG 1995).

Each label starts at a random candidate position. A step moves one random
label to a different random candidate; improvements are always accepted,
deteriorations with probability exp(improvement / temperature). The
temperature drops after too many accepted changes or attempted steps at the
current level. The run ends at a level transition when the finished level
accepted nothing or the maximum number of transitions is reached, so it
attempts at most (max_temperature_changes + 1) * (max_steps_at_temperature + 1)
steps.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from treemap_labels.core.camera import Camera
from treemap_labels.core.collision import compute_label_areas, create_collision_graph
from treemap_labels.core.config import (
    ANNEALING_CHANGES_PER_LABEL,
    ANNEALING_MAX_TEMPERATURE_CHANGES,
    ANNEALING_STARTING_TEMPERATURE,
    ANNEALING_STEPS_PER_LABEL,
    ANNEALING_TEMPERATURE_DECREASE_FACTOR,
    SEED,
)
from treemap_labels.core.label_area import LabelArea, placement_for
from treemap_labels.core.penalty import PenaltyFunction, compute_penalty
from treemap_labels.core.positions import CANDIDATE_POSITIONS
from treemap_labels.core.types import CollisionGraph, LeafLabel, Vec2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnealingSchedule:
    """Temperature schedule for one annealing run."""
    starting_temperature: float
    temperature_decrease_factor: float
    max_temperature_changes: int
    max_changes_at_temperature: int
    max_steps_at_temperature: int

    @classmethod
    def for_label_count(cls, label_count: int) -> AnnealingSchedule:
        return cls(
            starting_temperature=ANNEALING_STARTING_TEMPERATURE,
            temperature_decrease_factor=ANNEALING_TEMPERATURE_DECREASE_FACTOR,
            max_temperature_changes=ANNEALING_MAX_TEMPERATURE_CHANGES,
            max_changes_at_temperature=ANNEALING_CHANGES_PER_LABEL * label_count,
            max_steps_at_temperature=ANNEALING_STEPS_PER_LABEL * label_count,
        )


@dataclass
class AnnealingResult:
    """Chosen candidate index per label plus run statistics."""
    chosen: list[int]
    steps: int
    temperature_changes: int
    final_temperature: float


def random_index_except(rng: np.random.Generator, excluded: int, size: int) -> int:
    """Uniform random index in [0, size) other than excluded."""
    index = int(rng.integers(size - 1))
    if index == excluded:
        return size - 1
    return index


def random_start_positions(rng: np.random.Generator, label_areas: Sequence[Sequence[LabelArea]]) -> list[int]:
    return [int(rng.integers(len(areas))) for areas in label_areas]


def anneal(
    label_areas: Sequence[Sequence[LabelArea]],
    collision_graph: CollisionGraph,
    priorities: Sequence[float],
    penalty_function: PenaltyFunction,
    rng: np.random.Generator,
    schedule: AnnealingSchedule | None = None,
) -> AnnealingResult:
    """
    Run simulated annealing over precomputed candidate areas and their
    collision graph. Returns the chosen candidate index for every label.
    """
    n = len(label_areas)
    if n == 0:
        return AnnealingResult(chosen=[], steps=0, temperature_changes=0, final_temperature=0.0)
    if schedule is None:
        schedule = AnnealingSchedule.for_label_count(n)

    chosen = random_start_positions(rng, label_areas)

    temperature = schedule.starting_temperature
    temperature_changes = 0
    changes_at_temperature = 0
    steps_at_temperature = 0
    steps = 0

    while True:
        label_index = int(rng.integers(n))
        old_position = chosen[label_index]
        new_position = random_index_except(rng, old_position, len(label_areas[label_index]))

        old_penalty = compute_penalty(
            label_areas[label_index][old_position],
            collision_graph[label_index][old_position],
            priorities[label_index], penalty_function, chosen,
        )
        new_penalty = compute_penalty(
            label_areas[label_index][new_position],
            collision_graph[label_index][new_position],
            priorities[label_index], penalty_function, chosen,
        )
        improvement = old_penalty - new_penalty

        if improvement > 0:
            accept = True
        else:
            chance = max(0.0, min(math.exp(improvement / temperature), 1.0))
            accept = rng.random() < chance

        if accept:
            chosen[label_index] = new_position
            changes_at_temperature += 1

        steps_at_temperature += 1
        steps += 1
        if (changes_at_temperature > schedule.max_changes_at_temperature
                or steps_at_temperature > schedule.max_steps_at_temperature):
            if changes_at_temperature == 0 or temperature_changes == schedule.max_temperature_changes:
                break
            temperature *= schedule.temperature_decrease_factor
            changes_at_temperature = 0
            steps_at_temperature = 0
            temperature_changes += 1

    logger.debug(
        "Annealing finished: labels=%d steps=%d temperature_changes=%d temperature=%.6f",
        n, steps, temperature_changes, temperature,
    )
    return AnnealingResult(
        chosen=chosen,
        steps=steps,
        temperature_changes=temperature_changes,
        final_temperature=temperature,
    )


def simulated_annealing(
    labels: Sequence[LeafLabel],
    penalty_function: PenaltyFunction,
    relative_padding: Vec2,
    camera: Camera,
    rng: np.random.Generator | int | None = SEED,
    schedule: AnnealingSchedule | None = None,
) -> list[LabelArea]:
    """
    Choose a placement for every label by simulated annealing and store it in
    label.placement. rng may be a Generator or a seed. Returns the chosen areas.
    """
    if not labels:
        return []
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)

    label_areas = compute_label_areas(labels, CANDIDATE_POSITIONS, camera)
    collision_graph = create_collision_graph(label_areas, relative_padding)
    result = anneal(
        label_areas,
        collision_graph,
        [leaf_label.priority for leaf_label in labels],
        penalty_function,
        rng,
        schedule=schedule,
    )

    chosen_areas: list[LabelArea] = []
    for leaf_label, areas, position in zip(labels, label_areas, result.chosen):
        area = areas[position]
        leaf_label.placement = placement_for(area, leaf_label.point_location)
        chosen_areas.append(area)
    return chosen_areas
