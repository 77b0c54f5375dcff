"""
Complex arithmetic, written only in terms of the generic accessors.

The contents of a complex number is itself a tagged rectangular or polar
number, so every accessor call here dispatches a second time on that inner tag.
Addition and subtraction work on parts; multiplication and division work on
magnitude and angle, whichever form the operands happen to be in.

Both constructors go through the rectangular package, even make-from-mag-ang.
Hence a complex number made from magnitude and angle holds a rectangular pair.
Polar contents only arrive from outside, by tagging a polar value directly.
"""
from math import isclose
from ..generic import DONE
from ..tagging import attach_tag, COMPLEX, RECTANGULAR

TOLERANCE = 1e-9

def install_complex_package(system):
	def make_from_real_imag(x, y):
		return system.constructor("make-from-real-imag", RECTANGULAR)(x, y)
	
	def make_from_mag_ang(r, a):
		return system.constructor("make-from-mag-ang", RECTANGULAR)(r, a)
	
	def add_complex(z1, z2):
		return make_from_real_imag(
			system.real_part(z1) + system.real_part(z2),
			system.imag_part(z1) + system.imag_part(z2),
		)
	
	def sub_complex(z1, z2):
		return make_from_real_imag(
			system.real_part(z1) - system.real_part(z2),
			system.imag_part(z1) - system.imag_part(z2),
		)
	
	def mul_complex(z1, z2):
		return make_from_mag_ang(
			system.magnitude(z1) * system.magnitude(z2),
			system.angle(z1) + system.angle(z2),
		)
	
	def div_complex(z1, z2):
		return make_from_mag_ang(
			system.magnitude(z1) / system.magnitude(z2),
			system.angle(z1) - system.angle(z2),
		)
	
	def equ_complex(z1, z2) -> bool:
		return (
			isclose(system.real_part(z1), system.real_part(z2), abs_tol=TOLERANCE)
			and isclose(system.imag_part(z1), system.imag_part(z2), abs_tol=TOLERANCE)
		)
	
	def zero_complex(z) -> bool:
		return isclose(system.magnitude(z), 0, abs_tol=TOLERANCE)
	
	def tag(z): return attach_tag(COMPLEX, z)
	
	for op, fn in {"add":add_complex, "sub":sub_complex, "mul":mul_complex, "div":div_complex}.items():
		system.register(op, (COMPLEX, COMPLEX), lambda z1, z2, fn=fn: tag(fn(z1, z2)))
	system.register("equ?", (COMPLEX, COMPLEX), equ_complex)
	system.register("=zero?", (COMPLEX,), zero_complex)
	
	# The accessors of a complex number are those of its contents.
	system.register("real-part", (COMPLEX,), system.real_part)
	system.register("imag-part", (COMPLEX,), system.imag_part)
	system.register("magnitude", (COMPLEX,), system.magnitude)
	system.register("angle", (COMPLEX,), system.angle)
	
	system.register("make-from-real-imag", COMPLEX, lambda x, y: tag(make_from_real_imag(x, y)))
	system.register("make-from-mag-ang", COMPLEX, lambda r, a: tag(make_from_mag_ang(r, a)))
	return DONE
