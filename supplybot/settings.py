# Tuned by hand against ladder maps. Change them here, not in the planners.

# every supply structure grants this much capacity, and the game never goes past the max
SUPPLY_PER_STRUCTURE = 8
MAX_SUPPLY = 200

# supply gap
GAP_PER_BASE = 4
GAP_SUPPLY_DIVISOR = 40
GAP_MAX_BASES = 4

# first pylon, in the main
MAIN_CLUSTER_RADIUS = 6.5
MINERAL_LINE_CLEARANCE = 2
GEYSER_CLEARANCE = 3

# second pylon, in front of the natural
NATURAL_FRONT_MODE = "hull"
WALL_BAND = (3.0, 6.5)
COVERAGE_BAND = (1, 6.5)
HULL_TOLERANCE = 0.5
HULL_FARTHEST_COUNT = 4
HULL_CENTROID_BAND = (2, 6)
HULL_ANCHOR_CLEARANCE = 4
NATURAL_FRONT_NEAREST = 12

# one pylon covering every base
SUPER_PYLON_RADIUS = 6.5
SUPER_PYLON_INNER_RADIUS = 3.5

# behind the mineral line, for cannons and such
BML_RADIUS = 5
ATTEMPTED_BML = "attempted_bml"

PROBE_COUNT = 20

class PlacementSettings():
  def __init__(self,
    main_cluster_radius=MAIN_CLUSTER_RADIUS,
    mineral_line_clearance=MINERAL_LINE_CLEARANCE,
    geyser_clearance=GEYSER_CLEARANCE,
    natural_front_mode=NATURAL_FRONT_MODE,
    wall_band=WALL_BAND,
    coverage_band=COVERAGE_BAND,
    hull_tolerance=HULL_TOLERANCE,
    hull_farthest_count=HULL_FARTHEST_COUNT,
    hull_centroid_band=HULL_CENTROID_BAND,
    hull_anchor_clearance=HULL_ANCHOR_CLEARANCE,
    natural_front_nearest=NATURAL_FRONT_NEAREST,
    super_pylon_radius=SUPER_PYLON_RADIUS,
    super_pylon_inner_radius=SUPER_PYLON_INNER_RADIUS,
    bml_radius=BML_RADIUS):
    if natural_front_mode not in ("hull", "wall"):
      raise ValueError(f"Unknown natural front mode: {natural_front_mode}")

    self.main_cluster_radius = main_cluster_radius
    self.mineral_line_clearance = mineral_line_clearance
    self.geyser_clearance = geyser_clearance
    self.natural_front_mode = natural_front_mode
    self.wall_band = wall_band
    self.coverage_band = coverage_band
    self.hull_tolerance = hull_tolerance
    self.hull_farthest_count = hull_farthest_count
    self.hull_centroid_band = hull_centroid_band
    self.hull_anchor_clearance = hull_anchor_clearance
    self.natural_front_nearest = natural_front_nearest
    self.super_pylon_radius = super_pylon_radius
    self.super_pylon_inner_radius = super_pylon_inner_radius
    self.bml_radius = bml_radius
