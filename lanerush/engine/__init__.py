from .clock import LEFT, RIGHT, SimulationClock
from .spawn import SpawnPolicy
from .state import FrameView, Intent, RunState, SpriteView
from .vehicles import (
    BIKE, CAR, TRAFFIC_PROFILES, TRUCK,
    Obstacle, PlayerVehicle, VehicleProfile,
    lane_x, player_profile, rects_overlap,
)

__all__ = [
    'SimulationClock', 'SpawnPolicy', 'LEFT', 'RIGHT',
    'FrameView', 'Intent', 'RunState', 'SpriteView',
    'VehicleProfile', 'PlayerVehicle', 'Obstacle',
    'CAR', 'TRUCK', 'BIKE', 'TRAFFIC_PROFILES',
    'lane_x', 'player_profile', 'rects_overlap',
]
