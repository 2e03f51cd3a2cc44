from .module import BotModule
from supplybot.common import SupplyStructures

class GameStateTracker(BotModule):
  def __init__(self, bot):
    super().__init__(bot)
    bot.shared.supply_type = None

  async def on_start(self):
    self.shared.supply_type = SupplyStructures.get(self.race)
    self.log.info({
      "message": "Race facts resolved",
      "race": str(self.race),
      "supply_type": str(self.shared.supply_type)
    })

  async def on_step(self, iteration):
    return
