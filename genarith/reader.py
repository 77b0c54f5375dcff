"""
Reads the little prefix language of the command-line driver:

	expr := number | "(" word expr* ")"

The grammar lives in Genarith.md. Every node remembers its slice of the
source text, for the sake of error messages that point at the right place.
"""
import sys
from pathlib import Path
from typing import NamedTuple, Union

from boozetools.macroparse.runtime import TypicalApplication, make_tables
from boozetools.scanning.engine import IterableScanner
from boozetools.parsing.interface import ParseError

class ReaderError(ParseError):
	def __init__(self, hint:str, where:slice):
		super().__init__(hint, where)
		self.hint, self.where = hint, where

class Literal(NamedTuple):
	value: Union[int, float]
	slice: slice

class Word(NamedTuple):
	text: str
	slice: slice

class Combination(NamedTuple):
	head: Word
	args: tuple
	slice: slice

EXPR = Union[Literal, Word, Combination]

END = "<END>"

def _hint(stack_symbols, lookahead) -> str:
	if lookahead == END:
		return "Ran out of words. Is there a missing ')'?"
	if stack_symbols and stack_symbols[-1] == "(":
		return "A combination begins with the name of an operation."
	if lookahead == ")":
		return "This ')' closes nothing."
	return "One expression at a time, please."

class GenarithReader(TypicalApplication):
	
	def scan_ignore(self, yy: IterableScanner): pass
	
	@staticmethod
	def scan_punctuation(yy: IterableScanner):
		yy.token(sys.intern(yy.match()), yy.slice())
	
	@staticmethod
	def scan_integer(yy: IterableScanner): yy.token("integer", Literal(int(yy.match()), yy.slice()))
	
	@staticmethod
	def scan_real(yy: IterableScanner): yy.token("real", Literal(float(yy.match()), yy.slice()))
	
	@staticmethod
	def scan_word(yy: IterableScanner): yy.token("word", Word(sys.intern(yy.match()), yy.slice()))
	
	@staticmethod
	def parse_empty(): return []
	
	@staticmethod
	def parse_more(some, another):
		some.append(another)
		return some
	
	@staticmethod
	def parse_combination(open_paren:slice, head:Word, args:list, close_paren:slice):
		return Combination(head, tuple(args), slice(open_paren.start, close_paren.stop))
	
	def unexpected_token(self, kind, semantic, pds):
		if isinstance(semantic, slice): where = semantic
		elif isinstance(semantic, (Literal, Word)): where = semantic.slice
		else: where = self.yy.slice()
		raise ReaderError(_hint(self.stack_symbols(pds), kind), where)

_tables = make_tables(Path(__file__).parent/"Genarith.md")
genarith_reader = GenarithReader(_tables)

def read(text:str) -> EXPR:
	""" Read exactly one expression from the text. """
	try:
		return genarith_reader.parse(text)
	except ReaderError:
		raise
	except ParseError as ex:
		raise ReaderError(_hint((), END), slice(len(text), len(text))) from ex
