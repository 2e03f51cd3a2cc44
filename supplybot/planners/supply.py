from supplybot.common import BasePlanner
from supplybot.geometry import distance, are_equal, avg_points, n_closest_points, within
from supplybot.settings import PlacementSettings, ATTEMPTED_BML
from supplybot.topology import MissingTopologyError

MAIN_CLUSTER = "main_cluster"
NATURAL_FRONT = "natural_front"
SUPER_PYLON = "super_pylon"
BEHIND_MINERAL_LINE = "behind_mineral_line"
FALLBACK = "fallback"

class SupplyPlanner(BasePlanner):
  def __init__(self, bot, settings=None):
    super().__init__(bot)
    self.settings = settings or PlacementSettings()
    # expansion key -> set of labels. never cleared.
    self.labels = dict()

  def has_label(self, expansion, label):
    return label in self.labels.get(expansion.key, set())

  def set_label(self, expansion, label):
    self.labels.setdefault(expansion.key, set()).add(label)

  def get_available_positions(self, structure_type, built=0):
    return self.choose_strategy(structure_type, built)[1]

  def choose_strategy(self, structure_type, built=0):
    topology = self.topology
    if topology is None:
      raise MissingTopologyError("No map topology available")

    # first pylon being placed
    if built == 0:
      return MAIN_CLUSTER, self.main_cluster(topology.main)

    # front of natural pylon for great justice
    if built == 1:
      return NATURAL_FRONT, self.natural_front(topology.natural)

    existing = self.supply_positions(structure_type)
    occupied = topology.occupied()

    needs_super_pylon = next((
      expansion for expansion in occupied
      if not any(distance(expansion.anchor, pos) < self.settings.super_pylon_radius for pos in existing)
    ), None)

    if needs_super_pylon:
      return SUPER_PYLON, self.super_pylon(needs_super_pylon)

    # every base should have one behind the minerals if it can fit
    needs_bml = next((
      expansion for expansion in occupied
      if not any(are_equal(pos, point) for pos in existing for point in expansion.behind_mineral_line)
        # label keeps us from retrying forever where it doesn't fit
        and not self.has_label(expansion, ATTEMPTED_BML)
    ), None)

    if needs_bml:
      self.set_label(needs_bml, ATTEMPTED_BML)
      return BEHIND_MINERAL_LINE, self.behind_mineral_line(needs_bml)

    # otherwise just use everything in main and nat
    return FALLBACK, topology.main.placement_grid + topology.natural.placement_grid

  def main_cluster(self, main):
    s = self.settings
    return [
      point for point in main.area_fill
      # close enough to the nexus to cover it
      if distance(point, main.anchor) <= s.main_cluster_radius
        # outta the mineral line
        and all(distance(mlp, point) > s.mineral_line_clearance for mlp in main.mineral_line)
        # and the gas line
        and all(distance(gp, point) > s.geyser_clearance for gp in main.geysers)
    ]

  def natural_front(self, natural):
    placements = None
    if self.settings.natural_front_mode == "hull":
      placements = self.hull_front(natural)

    if placements is None:
      placements = self.wall_front(natural)

    if not placements:
      placements = self.coverage_front(natural)

    if not placements:
      return []

    return n_closest_points(placements, avg_points(placements), self.settings.natural_front_nearest)

  # None means the natural has no hull for us to work with
  def hull_front(self, natural):
    s = self.settings
    touching = [
      point for point in natural.front
      if any(distance(point, hull_point) <= s.hull_tolerance for hull_point in natural.hull)
    ]
    if not touching:
      return None

    farthest = sorted(touching, key=lambda p: round(distance(p, natural.anchor)), reverse=True)[:s.hull_farthest_count]
    centroid = avg_points(farthest)
    low, high = s.hull_centroid_band

    return [
      point for point in natural.front
      if low < distance(point, centroid) < high
        and distance(point, natural.anchor) > s.hull_anchor_clearance
    ]

  def wall_front(self, natural):
    low, high = self.settings.wall_band
    return [
      point for point in natural.front
      if all(within(point, wall_cell, low, high) for wall_cell in natural.wall)
    ]

  def coverage_front(self, natural):
    low, high = self.settings.coverage_band
    scored = [
      (sum(1 for wall_cell in natural.wall if within(point, wall_cell, low, high)), point)
      for point in natural.front
    ]
    if not scored:
      return []

    best = max(coverage for coverage, _ in scored)
    return [ point for coverage, point in scored if coverage == best ]

  def super_pylon(self, expansion):
    s = self.settings
    return [
      point for point in expansion.placement_grid
      if s.super_pylon_inner_radius < distance(point, expansion.anchor) < s.super_pylon_radius
    ]

  def behind_mineral_line(self, expansion):
    bml = expansion.behind_mineral_line
    if not bml:
      return []

    centroid = avg_points(bml)
    return [ point for point in bml if distance(point, centroid) < self.settings.bml_radius ]
