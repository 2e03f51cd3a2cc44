from sc2.position import Point2

EPSILON = 0.001

def distance(a, b):
  return Point2(a).distance_to(Point2(b))

# map cells come in as floats, so never compare them exactly
def are_equal(a, b, epsilon=EPSILON):
  return abs(a[0] - b[0]) < epsilon and abs(a[1] - b[1]) < epsilon

def avg_points(points):
  return Point2.center([ Point2(p) for p in points ])

def n_closest_points(points, target, n):
  return Point2(target).sort_by_distance([ Point2(p) for p in points ])[:n]

def within(point, center, low, high):
  return low <= distance(point, center) <= high
