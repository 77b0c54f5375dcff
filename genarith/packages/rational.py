"""
Rational numbers as (numerator, denominator) pairs of integers.

Every pair is in lowest terms with a positive denominator.
make_rat is the only place that reduces; everything else relies on it.
"""
from math import gcd
from ..generic import DONE
from ..tagging import attach_tag, RATIONAL

def make_rat(n:int, d:int) -> tuple[int, int]:
	if d == 0:
		raise ZeroDivisionError("rational with zero denominator: %d/%d" % (n, d))
	if d < 0:
		n, d = -n, -d
	g = gcd(n, d)
	return n // g, d // g

def numer(x): return x[0]
def denom(x): return x[1]

def add_rat(x, y):
	return make_rat(numer(x) * denom(y) + numer(y) * denom(x), denom(x) * denom(y))

def sub_rat(x, y):
	return make_rat(numer(x) * denom(y) - numer(y) * denom(x), denom(x) * denom(y))

def mul_rat(x, y):
	return make_rat(numer(x) * numer(y), denom(x) * denom(y))

def div_rat(x, y):
	return make_rat(numer(x) * denom(y), denom(x) * numer(y))

def equ_rat(x, y) -> bool:
	return numer(x) * denom(y) == numer(y) * denom(x)

def install_rational_package(system):
	def tag(x): return attach_tag(RATIONAL, x)
	
	for op, fn in {"add":add_rat, "sub":sub_rat, "mul":mul_rat, "div":div_rat}.items():
		system.register(op, (RATIONAL, RATIONAL), lambda x, y, fn=fn: tag(fn(x, y)))
	system.register("equ?", (RATIONAL, RATIONAL), equ_rat)
	system.register("=zero?", (RATIONAL,), lambda x: numer(x) == 0)
	system.register("make", RATIONAL, lambda n, d: tag(make_rat(n, d)))
	return DONE
