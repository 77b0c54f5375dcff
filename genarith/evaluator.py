"""
Walks what the reader built, calling the generic entry points.

Bare numbers become scheme-numbers. The constructor forms take literal
numbers only, since their arguments are payload rather than tagged values.
Everything else is a generic operation applied to evaluated arguments.
"""
from boozetools.support.foundation import Visitor
from .generic import GenericArithmetic, NoMethodForTypes
from .reader import Literal, Word, Combination, EXPR, ReaderError
from .tagging import BadTaggedDatum

class Mishap(Exception):
	""" Some combination failed. Says which one, and why (as __cause__). """
	def __init__(self, combination:Combination):
		super().__init__(combination)
		self.combination = combination

OPERATIONS = {
	"add": 2, "sub": 2, "mul": 2, "div": 2, "equ?": 2,
	"=zero?": 1, "real-part": 1, "imag-part": 1, "magnitude": 1, "angle": 1,
}

class Evaluator(Visitor):
	def __init__(self, system:GenericArithmetic):
		self._system = system
		self._constructors = {
			"rational": system.make_rational,
			"rectangular": system.make_complex_from_real_imag,
			"polar": system.make_complex_from_mag_ang,
		}
	
	def evaluate(self, expr:EXPR):
		return self.visit(expr)
	
	def visit_Literal(self, expr:Literal):
		return self._system.make_scheme_number(expr.value)
	
	def visit_Word(self, expr:Word):
		raise ReaderError("'%s' needs to be inside parentheses, with its arguments." % expr.text, expr.slice)
	
	def visit_Combination(self, expr:Combination):
		word = expr.head.text
		if word in self._constructors:
			return self._construct(expr, self._constructors[word])
		if word not in OPERATIONS:
			raise ReaderError("I don't know an operation called '%s'." % word, expr.head.slice)
		self._check_arity(expr, OPERATIONS[word])
		args = [self.visit(a) for a in expr.args]
		try:
			return self._system.apply_generic(word, *args)
		except (NoMethodForTypes, BadTaggedDatum, ArithmeticError, ValueError) as ex:
			raise Mishap(expr) from ex
	
	def _construct(self, expr:Combination, constructor):
		self._check_arity(expr, 2)
		for a in expr.args:
			if not isinstance(a, Literal):
				raise ReaderError("Constructors take plain numbers.", a.slice)
		try:
			return constructor(*(a.value for a in expr.args))
		except (NoMethodForTypes, ArithmeticError, ValueError, TypeError) as ex:
			raise Mishap(expr) from ex
	
	@staticmethod
	def _check_arity(expr:Combination, arity:int):
		if len(expr.args) != arity:
			hint = "'%s' takes %d argument(s), not %d." % (expr.head.text, arity, len(expr.args))
			raise ReaderError(hint, expr.slice)
