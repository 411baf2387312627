"""Domain enumerations and state-transition rules."""

import enum


class RideStatus(str, enum.Enum):
    DRIVER_ASSIGNED = "driver_assigned"
    DRIVER_ARRIVED = "driver_arrived"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# Fixed order a ride moves through while the rider polls for status
RIDE_SEQUENCE: tuple[RideStatus, ...] = (
    RideStatus.DRIVER_ASSIGNED,
    RideStatus.DRIVER_ARRIVED,
    RideStatus.IN_PROGRESS,
    RideStatus.COMPLETED,
)

# State machine: maps current status -> set of valid next statuses
RIDE_TRANSITIONS: dict[RideStatus, set[RideStatus]] = {
    RideStatus.DRIVER_ASSIGNED: {RideStatus.DRIVER_ARRIVED},
    RideStatus.DRIVER_ARRIVED: {RideStatus.IN_PROGRESS},
    RideStatus.IN_PROGRESS: {RideStatus.COMPLETED},
    RideStatus.COMPLETED: set(),
}


class PolicyKind(str, enum.Enum):
    CALL_COUNT = "call_count"
    PROBABILITY = "probability"
