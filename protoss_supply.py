import random

from supplybot.bot import SupplyBot
from supplybot.modules import GameStateTracker, SupplyBuilder
from supplybot.planners.sampler import PlacementSampler
from supplybot.planners.supply import SupplyPlanner
from supplybot.settings import PlacementSettings

def build(topology_factory, seed=None, natural_front_mode="hull", log_file='logs/sc2.log'):
  bot = SupplyBot(topology_factory=topology_factory, log_file=log_file)

  bot.modules = [
    GameStateTracker(bot),
    SupplyBuilder(bot,
      planner=SupplyPlanner(bot, settings=PlacementSettings(natural_front_mode=natural_front_mode)),
      sampler=PlacementSampler(rng=random.Random(seed))
    )
  ]

  return bot
