import math

from supplybot.modules.module import BotModule
from supplybot.planners.sampler import PlacementSampler
from supplybot.planners.supply import SupplyPlanner
from supplybot.settings import GAP_PER_BASE, GAP_SUPPLY_DIVISOR, GAP_MAX_BASES, MAX_SUPPLY

def calculate_supply_gap(supply_used, base_count):
  # increase supply gap as supply gets higher
  supply_multiplier = max(1, supply_used / GAP_SUPPLY_DIVISOR)
  # increase supply gap as we expand
  base_multiplier = min(base_count, GAP_MAX_BASES)
  return math.floor(GAP_PER_BASE * base_multiplier * supply_multiplier)

class SupplyBuilder(BotModule):
  def __init__(self, bot, planner=None, sampler=None, compute_gap=calculate_supply_gap):
    super().__init__(bot)
    self.planner = planner or SupplyPlanner(bot)
    self.sampler = sampler or PlacementSampler()
    self.compute_gap = compute_gap
    # only goes up, and only once the build order is out
    self.built = 0

  async def on_start(self):
    await super().on_start()
    if not self.shared.supply_type:
      self.log.warning({
        "message": "No placeable supply structure for this race, supply placement disabled",
        "race": str(self.race)
      })

  async def on_step(self, iteration):
    supply_type = self.shared.supply_type
    if not supply_type:
      return

    economy = self.economy(supply_type)
    gap = self.compute_gap(economy.supply_used, economy.base_count)
    fields = { "iteration": iteration, "gap": gap, "built": self.built, **economy.as_fields() }
    self.log.debug({ "message": "Calculated supply gap", **fields })

    if not self.should_build(economy, gap):
      return

    stage, candidates = self.planner.choose_strategy(supply_type, self.built)
    position = await self.sampler.find_placement(candidates, supply_type, self.can_place_first)

    if not position:
      self.log.debug({
        "message": "No supply position found",
        "stage": stage,
        "candidates": len(candidates),
        **fields
      })
      return

    if not self.build_structure(supply_type, position):
      self.log.warning({
        "message": "Supply build order was not accepted",
        "stage": stage,
        "position": [ position.x, position.y ],
        **fields
      })
      return

    self.built += 1
    self.log.info({
      "message": "Supply structure ordered",
      "stage": stage,
      "candidates": len(candidates),
      "position": [ position.x, position.y ],
      **{ **fields, "built": self.built }
    })

  def should_build(self, economy, gap):
    projected_supply_cap = economy.projected_supply_cap
    if projected_supply_cap >= MAX_SUPPLY:
      return False

    conditions = [
      projected_supply_cap - economy.supply_used < gap, # need more supply gap
      economy.can_afford,                               # can afford to build one
      economy.pending_orders <= 0                       # one at a time
    ]
    return all(conditions)
