from .game_state import GameStateTracker
from .supply import SupplyBuilder, calculate_supply_gap
