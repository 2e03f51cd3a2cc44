import logging
import os
import time

from pythonjsonlogger.json import JsonFormatter
from sc2.bot_ai import BotAI

from supplybot.common import EconomySnapshot, LoggerWithFields, OptionsObject

def setup_logging(filename='logs/sc2.log', level=logging.INFO):
  os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
  handler = logging.FileHandler(filename=filename, encoding='utf-8')
  handler.setFormatter(JsonFormatter())
  logging.basicConfig(level=level, handlers=[handler])
  return handler

### EL BOT ###
class SupplyBot(BotAI):

  def __init__(self, modules=None, topology_factory=None, log_file='logs/sc2.log'):
    super().__init__()
    self.shared = OptionsObject()  # just a generic object

    # map analysis is somebody else's job
    self.topology_factory = topology_factory
    self.topology = None

    self.modules = modules or []
    self.log_file = log_file
    self.handler = None

    # for cross-referencing with other bots that are created at the same time
    self.start_time = str(int(time.time()))
    self.log = LoggerWithFields(logging.getLogger(), { "start_time": self.start_time })

  async def on_start(self):
    if self.log_file:
      self.handler = setup_logging(self.log_file)
    bot_id = f"{self.start_time}-{self.player_id}-{self.race}"
    self.log = LoggerWithFields(logging.getLogger(), { "bot_id": bot_id, "start_time": self.start_time })

    for module in self.modules:
      await module.on_start()

  async def on_end(self, game_result):
    for module in self.modules:
      await module.on_end(game_result)

    if self.handler:
      self.handler.flush()
      self.handler.close()

  async def on_step(self, iteration):
    self.log = self.log.withFields({ "game_time": self.time })
    self.topology = self.topology_factory(self) if self.topology_factory else None

    for module in self.modules:
      await module.on_step(iteration)

  def economy(self, structure_type):
    # raises KeyError for anything the game data doesn't know how to build
    ability = self.game_data.units[structure_type.value].creation_ability.id
    return EconomySnapshot(
      supply_used=self.supply_used,
      supply_cap=self.supply_cap,
      in_progress=self.structures(structure_type).not_ready.amount,
      pending_orders=self.workers.filter(lambda w: any(order.ability.id == ability for order in w.orders)).amount,
      can_afford=self.can_afford(structure_type),
      base_count=self.townhalls.amount
    )

  def supply_positions(self, structure_type):
    return [ s.position for s in self.structures(structure_type) ]

  async def can_place_first(self, structure_type, positions):
    results = await self.can_place(structure_type, positions)
    return next((pos for pos, ok in zip(positions, results) if ok), None)

  def build_structure(self, structure_type, position):
    worker = self.select_build_worker(position)
    if not worker:
      return False

    return bool(worker.build(structure_type, position))
