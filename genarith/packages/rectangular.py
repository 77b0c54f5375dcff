"""
Complex numbers held as (real, imaginary) pairs.
"""
from math import atan2, cos, hypot, sin
from ..generic import DONE
from ..tagging import attach_tag, RECTANGULAR

def real_part(z): return z[0]
def imag_part(z): return z[1]
def magnitude(z): return hypot(real_part(z), imag_part(z))
def angle(z): return atan2(imag_part(z), real_part(z))

def make_from_real_imag(x, y): return x, y
def make_from_mag_ang(r, a): return r * cos(a), r * sin(a)

def install_rectangular_package(system):
	def tag(x): return attach_tag(RECTANGULAR, x)
	
	for op, fn in {
		"real-part": real_part,
		"imag-part": imag_part,
		"magnitude": magnitude,
		"angle": angle,
	}.items():
		system.register(op, (RECTANGULAR,), fn)
	system.register("make-from-real-imag", RECTANGULAR, lambda x, y: tag(make_from_real_imag(x, y)))
	system.register("make-from-mag-ang", RECTANGULAR, lambda r, a: tag(make_from_mag_ang(r, a)))
	return DONE
