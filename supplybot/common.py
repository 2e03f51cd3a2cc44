from sc2.data import Race
from sc2.ids.unit_typeid import UnitTypeId

from supplybot.settings import SUPPLY_PER_STRUCTURE

# overlords are trained, not placed
SupplyStructures = {
  Race.Protoss: UnitTypeId.PYLON,
  Race.Terran: UnitTypeId.SUPPLYDEPOT,
}

class LoggerWithFields(object):
  def __init__(self, logger, fields):
    self.logger = logger
    self.fields = fields

  def withFields(self, fields):
    return LoggerWithFields(self.logger, {**self.fields, **fields})

  def __getattr__(self, name):
    if name not in ['debug','info','warn','warning','error']:
      return getattr(self.logger, name)

    def log_with_fields(msg):
      if isinstance(msg, str):
        msg = {"message": msg}

      getattr(self.logger, name)({"level": name, **msg, **self.fields})

    return log_with_fields

class EconomySnapshot():
  def __init__(self, supply_used, supply_cap, in_progress=0, pending_orders=0, can_afford=False, base_count=0):
    self.supply_used = supply_used
    self.supply_cap = supply_cap
    self.in_progress = in_progress
    self.pending_orders = pending_orders
    self.can_afford = can_afford
    self.base_count = base_count

  # structures being built and orders to build them count as capacity already
  @property
  def projected_supply_cap(self):
    return self.supply_cap + (self.in_progress * SUPPLY_PER_STRUCTURE) + (self.pending_orders * SUPPLY_PER_STRUCTURE)

  def as_fields(self):
    return {
      "supply_used": self.supply_used,
      "supply_cap": self.supply_cap,
      "projected_supply_cap": self.projected_supply_cap,
      "in_progress": self.in_progress,
      "pending_orders": self.pending_orders,
      "can_afford": bool(self.can_afford),
      "base_count": self.base_count,
    }

class OptionsObject(object):
  pass

class BasePlanner():
  def __init__(self, bot):
    self.bot = bot
    return

  def __getattr__(self, name):
    return getattr(self.bot, name)

  def get_available_positions(self, structure_type, built=0):
    raise NotImplementedError("You must override this function")
