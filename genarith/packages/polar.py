"""
Complex numbers held as (magnitude, angle) pairs.
"""
from math import atan2, cos, hypot, sin
from ..generic import DONE
from ..tagging import attach_tag, POLAR

def magnitude(z): return z[0]
def angle(z): return z[1]
def real_part(z): return magnitude(z) * cos(angle(z))
def imag_part(z): return magnitude(z) * sin(angle(z))

def make_from_real_imag(x, y): return hypot(x, y), atan2(y, x)
def make_from_mag_ang(r, a): return r, a

def install_polar_package(system):
	def tag(x): return attach_tag(POLAR, x)
	
	for op, fn in {
		"real-part": real_part,
		"imag-part": imag_part,
		"magnitude": magnitude,
		"angle": angle,
	}.items():
		system.register(op, (POLAR,), fn)
	system.register("make-from-real-imag", POLAR, lambda x, y: tag(make_from_real_imag(x, y)))
	system.register("make-from-mag-ang", POLAR, lambda r, a: tag(make_from_mag_ang(r, a)))
	return DONE
