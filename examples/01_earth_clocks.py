"""Clock rates around the Earth.

Compares proper time accumulated over one day by a clock on the ground,
a clock on a GPS satellite, and a clock far from the Earth.

Shows:
- gravitational dilation alone (ground vs. distant observer)
- velocity dilation alone (satellite orbital speed in flat space)
- both combined, the net GPS clock offset
"""

import math

from lightbubble import spacetime, time_dilation
from lightbubble.constants import gravitational_constant

EARTH_MASS = 5.972e24  # kg
EARTH_RADIUS = 6.371e6  # m
GPS_RADIUS = 2.6561e7  # m
DAY = 86400.0  # s

v_gps = math.sqrt(gravitational_constant() * EARTH_MASS / GPS_RADIUS)

ground = time_dilation.calculate_gravitational_time(EARTH_MASS, EARTH_RADIUS, DAY)
orbit_grav = time_dilation.calculate_gravitational_time(EARTH_MASS, GPS_RADIUS, DAY)
orbit_vel = time_dilation.calculate_special_relativistic_time(v_gps, DAY)
orbit = time_dilation.calculate_proper_time(v_gps, EARTH_MASS, GPS_RADIUS, DAY)

print("Clock rates over one coordinate day")
print("=" * 40)
print(f"Schwarzschild radius of Earth: {spacetime.schwarzschild_radius(EARTH_MASS):.4e} m")
print(f"GPS orbital speed: {v_gps:.1f} m/s")
print(f"Ground clock lag:            {(DAY - ground) * 1e6:9.3f} us")
print(f"GPS lag from gravity only:   {(DAY - orbit_grav) * 1e6:9.3f} us")
print(f"GPS lag from velocity only:  {(DAY - orbit_vel) * 1e6:9.3f} us")
print(f"GPS lag combined:            {(DAY - orbit) * 1e6:9.3f} us")
print(f"GPS gain relative to ground: {(orbit - ground) * 1e6:9.3f} us")

# Same ground clock through the metric contraction path
g = spacetime.schwarzschild_metric(EARTH_MASS, EARTH_RADIUS, math.pi / 2, 0.0)
via_metric = time_dilation.calculate_proper_time_with_metric([0.0, 0.0, 0.0], g, DAY)
print(f"\nGround clock via metric contraction: {via_metric:.9f} s")
print(f"Closed form:                         {ground:.9f} s")
