"""
Parsers for leaf values. Each has the same shape as any other parser in the engine,
so they drop straight into `head`, `surround`, `sequence` and friends.
"""

from .interface import View, Success, Failure, Parser, BOUNDARY
from .error import ErrorStack
from .combinators import alpha1, digit1, take_till, opt, many0, preceded, mapped
from .primitives import wordbreak0

_tail = take_till(BOUNDARY)

def text(view:View):
	"""
	A 'word': an ASCII letter, then anything up to the next space or one of `()[]{};`.
	"""
	first = alpha1(view)
	if isinstance(first, Failure): return first
	rest, tail = _tail(first.rest)
	return Success(rest, first.value + tail)


def _integer(bits:int, signed:bool) -> Parser:
	low, high = (-(1 << bits-1), (1 << bits-1) - 1) if signed else (0, (1 << bits) - 1)
	def parse(view:View):
		start = view
		negative = signed and view.peek() == '-'
		if negative: view = view.advance(1)
		digits = digit1(view)
		if isinstance(digits, Failure): return Failure(ErrorStack.number(start))
		value = -int(digits.value) if negative else int(digits.value)
		if not low <= value <= high: return Failure(ErrorStack.number(start))
		return Success(digits.rest, value)
	parse.__name__ = ('i%d' if signed else 'u%d')%bits
	return parse

u32 = _integer(32, False)
u64 = _integer(64, False)
i32 = _integer(32, True)
i64 = _integer(64, True)


def allow_absent(parser:Parser) -> Parser:
	"""
	Mark `parser` as one that can match nothing at all. A form puts such a field
	right after the previous part; every other field must be set apart by a word break.
	"""
	parser.absent_ok = True
	return parser

def may_be_absent(parser:Parser) -> bool: return getattr(parser, 'absent_ok', False)


def optional(parser:Parser) -> Parser:
	""" Value is None if `parser` fails recoverably. """
	return allow_absent(opt(parser))

def repeated(parser:Parser) -> Parser:
	""" Zero or more occurrences separated by whitespace or comments, with no terminator. """
	return allow_absent(many0(preceded(wordbreak0, parser)))

def boxed(parser:Parser, wrap) -> Parser:
	""" Parse as `parser` would, but hand the value to `wrap` on the way out. """
	boxer = mapped(parser, wrap)
	return allow_absent(boxer) if may_be_absent(parser) else boxer
