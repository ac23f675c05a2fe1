"""The bouncing-object simulation started from the user interface."""

from __future__ import annotations

import enum
import logging
from typing import Any

from physimos.vecmath import Vec3
from physimos.world import Transform, WorldObject

log = logging.getLogger(__name__)

GRAVITY = -9.8
BOUNCE_DAMPING = 0.8
BOUNCE_FLOOR = 0.01

T0 = 0.0
TF = 30.0
DT = 0.1
DT_COUNT = int(1 + (TF - T0) / DT)
DT_INDEX_MAX = int((TF - T0) / DT)


class SimState(enum.IntEnum):
    """Lifecycle of the bounce simulation."""

    IDLE = 0
    START_CLICK_DETECTED = 1
    RUNNING = 2


def position_at(transform: Transform, t: float) -> Vec3:
    """Set the analytic position of a thrown body at time t and return it.

    Gravity acts along the y axis in this closed-form solution.
    """
    p0 = transform.position_0
    v0 = transform.velocity_0
    transform.position = Vec3(
        p0.x + v0.x * t,
        p0.y + v0.y * t + 0.5 * GRAVITY * t * t,
        p0.z + v0.z * t,
    )
    return transform.position


def step_bounce(transform: Transform, dt: float) -> None:
    """Advance a body one time step under gravity along z, bouncing off z = 0."""
    prev_position = transform.translation_prev_step
    prev_velocity = transform.velocity_prev_step

    transform.velocity.z = prev_velocity.z + GRAVITY * dt
    transform.position = Vec3(
        prev_position.x + prev_velocity.x * dt,
        prev_position.y + prev_velocity.y * dt,
        prev_position.z + prev_velocity.z * dt,
    )

    if transform.position.z < 0.0:
        transform.velocity.z = -transform.velocity.z * BOUNCE_DAMPING
        # Lift clear of the floor so the bounce does not trigger again next step.
        transform.position.z = BOUNCE_FLOOR

    transform.velocity_prev_step.z = transform.velocity.z
    transform.translation_prev_step = transform.position.copy()


class BounceSimulation:
    """Runs a fixed-length bounce of one object once the start button is clicked."""

    def __init__(self, body: WorldObject) -> None:
        self.body = body
        self.state = SimState.IDLE
        self.dt = DT
        self.dt_index = 0
        self.dt_index_max = DT_INDEX_MAX

    def update(self, input_state: Any) -> None:
        """Advance the simulation by one frame, reacting to a start click."""
        if self.state is SimState.IDLE and input_state.start_sim_click:
            self.state = SimState.START_CLICK_DETECTED
        input_state.start_sim_click = False

        transform = self.body.transform

        if self.state is SimState.START_CLICK_DETECTED:
            self.state = SimState.RUNNING
            log.info("Simulation starting: dt_index_max = %d", self.dt_index_max)
            transform.translation_prev_step = transform.position_0.copy()
            transform.velocity_prev_step = transform.velocity_0.copy()

        if self.dt_index >= self.dt_index_max:
            self.state = SimState.IDLE
            self.dt_index = 0
            transform.position = transform.position_0.copy()
            log.info("Simulation done.")

        if self.state is SimState.RUNNING and self.dt_index < self.dt_index_max:
            self.dt_index += 1
            step_bounce(transform, self.dt)