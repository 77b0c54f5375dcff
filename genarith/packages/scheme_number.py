"""
Ordinary numbers: whatever Python's own arithmetic does, with a tag on.
"""
import operator
from ..generic import DONE
from ..tagging import attach_tag, SCHEME_NUMBER

PRIMITIVE_BINARY = {
	"add" : operator.add,
	"sub" : operator.sub,
	"mul" : operator.mul,
	"div" : operator.truediv,
}

def install_scheme_number_package(system):
	def tag(x): return attach_tag(SCHEME_NUMBER, x)
	
	def lift(fn):
		return lambda x, y: tag(fn(x, y))
	
	for op, fn in PRIMITIVE_BINARY.items():
		system.register(op, (SCHEME_NUMBER, SCHEME_NUMBER), lift(fn))
	system.register("equ?", (SCHEME_NUMBER, SCHEME_NUMBER), operator.eq)
	system.register("=zero?", (SCHEME_NUMBER,), lambda x: x == 0)
	system.register("make", SCHEME_NUMBER, tag)
	return DONE
