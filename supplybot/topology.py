from sc2.position import Point2

class MissingTopologyError(Exception):
  pass

def _points(cells):
  return [ p if isinstance(p, Point2) else Point2(p) for p in (cells or []) ]

# Everything here comes from whoever analyzed the map. We only read it.
class Expansion():
  def __init__(self, key, anchor,
    area_fill=None,
    placement_grid=None,
    mineral_line=None,
    behind_mineral_line=None,
    geysers=None,
    wall=None,
    hull=None,
    front=None):
    self.key = key
    self.anchor = anchor if isinstance(anchor, Point2) else Point2(anchor)
    self.area_fill = _points(area_fill)
    self.placement_grid = _points(placement_grid)
    self.mineral_line = _points(mineral_line)
    self.behind_mineral_line = _points(behind_mineral_line)
    self.geysers = _points(geysers)
    self.wall = _points(wall)
    self.hull = _points(hull)
    self.front = _points(front)

  def __repr__(self):
    return f"Expansion({self.key!r}, {self.anchor})"

class MapTopology():
  def __init__(self, expansions, occupied=()):
    self.expansions = list(expansions)
    self.occupied_keys = list(occupied)

  @property
  def main(self):
    if not self.expansions:
      raise MissingTopologyError("Topology has no main expansion")
    return self.expansions[0]

  @property
  def natural(self):
    if len(self.expansions) < 2:
      raise MissingTopologyError("Topology has no natural expansion")
    return self.expansions[1]

  def get(self, key):
    for expansion in self.expansions:
      if expansion.key == key:
        return expansion
    raise MissingTopologyError(f"Unknown expansion: {key}")

  # in the order they were occupied
  def occupied(self):
    return [ self.get(key) for key in self.occupied_keys ]
