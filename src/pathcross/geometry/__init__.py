from .distance import EARTH_RADIUS, haversine_distance
from .lines import segment_intersection
from .periods import periods_overlap
from .precision import truncate
