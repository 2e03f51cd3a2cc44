import random

from supplybot.settings import PROBE_COUNT

class PlacementSampler():
  def __init__(self, rng=None, probe_count=PROBE_COUNT):
    self.rng = rng or random.Random()
    self.probe_count = probe_count

  # candidate lists can be huge. probe a different handful every tick.
  def sample(self, candidates):
    probes = list(candidates)
    self.rng.shuffle(probes)
    return probes[:self.probe_count]

  async def find_placement(self, candidates, structure_type, oracle):
    probes = self.sample(candidates)
    if not probes:
      return None

    return await oracle(structure_type, probes)
