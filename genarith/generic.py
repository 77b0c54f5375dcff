"""
The generic entry points, and the one dispatcher they all go through.

A GenericArithmetic owns its operation table. Packages install themselves
into a particular GenericArithmetic, so two of these never share state.
Install everything you need first, then compute: the table is not locked.
"""
from typing import Optional
from .diagnostics import Report
from .table import OperationTable, ABSENT
from .tagging import type_tag, contents, SCHEME_NUMBER, RATIONAL, COMPLEX

DONE = "done"

class NoMethodForTypes(LookupError):
	def __init__(self, operation:str, type_tags:tuple):
		super().__init__("No method for these types: %s %s" % (operation, type_tags))
		self.operation = operation
		self.type_tags = type_tags

class GenericArithmetic:
	def __init__(self, table:Optional[OperationTable]=None):
		self.table = OperationTable() if table is None else table
	
	def register(self, operation, signature, implementation):
		self.table.register(operation, signature, implementation)
	
	def apply_generic(self, operation:str, *args):
		type_tags = tuple(map(type_tag, args))
		method = self.table.lookup(operation, type_tags)
		if method is ABSENT:
			raise NoMethodForTypes(operation, type_tags)
		return method(*map(contents, args))
	
	def constructor(self, operation:str, tag:str):
		method = self.table.lookup(operation, tag)
		if method is ABSENT:
			raise NoMethodForTypes(operation, (tag,))
		return method
	
	def add(self, x, y): return self.apply_generic("add", x, y)
	def sub(self, x, y): return self.apply_generic("sub", x, y)
	def mul(self, x, y): return self.apply_generic("mul", x, y)
	def div(self, x, y): return self.apply_generic("div", x, y)
	
	def equ(self, x, y) -> bool: return self.apply_generic("equ?", x, y)
	def is_zero(self, x) -> bool: return self.apply_generic("=zero?", x)
	
	def real_part(self, z): return self.apply_generic("real-part", z)
	def imag_part(self, z): return self.apply_generic("imag-part", z)
	def magnitude(self, z): return self.apply_generic("magnitude", z)
	def angle(self, z): return self.apply_generic("angle", z)
	
	def make_scheme_number(self, n):
		return self.constructor("make", SCHEME_NUMBER)(n)
	
	def make_rational(self, n, d):
		return self.constructor("make", RATIONAL)(n, d)
	
	def make_complex_from_real_imag(self, x, y):
		return self.constructor("make-from-real-imag", COMPLEX)(x, y)
	
	def make_complex_from_mag_ang(self, r, a):
		return self.constructor("make-from-mag-ang", COMPLEX)(r, a)

def standard_arithmetic(report:Optional[Report]=None) -> GenericArithmetic:
	""" The usual composition root: a fresh table with every standard package installed. """
	from .packages import install_standard_packages
	system = GenericArithmetic(OperationTable(report))
	install_standard_packages(system)
	return system
