"""
The general combinator vocabulary: nothing in here knows about head patterns.

Each function builds a parser (a callable from `View` to `Success` or `Failure`).
Leaf failures always start out recoverable; only `cut` can commit them. Combinators
that run a sub-parser more than once stop at a recoverable failure, but a committed
failure goes straight back out to the caller.
"""

import string

from .interface import View, Success, Failure, Parser
from .error import ErrorStack, Primitive

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)


def char(c:str) -> Parser:
	def parse(view:View):
		if view.peek() == c: return Success(view.advance(1), c)
		return Failure(ErrorStack.from_char(view, c))
	return parse

def _single(predicate, kind:Primitive) -> Parser:
	def parse(view:View):
		c = view.peek()
		if c is not None and predicate(c): return Success(view.advance(1), c)
		return Failure(ErrorStack.from_primitive(view, kind))
	return parse

def one_of(chars:str) -> Parser: return _single(chars.__contains__, Primitive.ONE_OF)
def none_of(chars:str) -> Parser: return _single(lambda c: c not in chars, Primitive.NONE_OF)


def take_while(predicate, *, minimum=0, kind:Primitive=None) -> Parser:
	""" Longest run of characters satisfying `predicate`, as a string. """
	def parse(view:View):
		text, end = view.text, view.pos
		while end < len(text) and predicate(text[end]): end += 1
		if end - view.pos < minimum: return Failure(ErrorStack.from_primitive(view, kind))
		return Success(View(text, end), text[view.pos:end])
	return parse

def take_till(chars:str) -> Parser:
	""" Never fails: the value may be an empty string. """
	return take_while(lambda c: c not in chars)

alpha1 = take_while(LETTERS.__contains__, minimum=1, kind=Primitive.ALPHA)
digit1 = take_while(DIGITS.__contains__, minimum=1, kind=Primitive.DIGIT)


def eof(view:View):
	if view.at_end(): return Success(view, None)
	return Failure(ErrorStack.from_primitive(view, Primitive.EOF))


def mapped(parser:Parser, fn) -> Parser:
	def parse(view:View):
		result = parser(view)
		if isinstance(result, Failure): return result
		return Success(result.rest, fn(result.value))
	return parse

def peek(parser:Parser) -> Parser:
	""" Run `parser` but consume nothing. """
	def parse(view:View):
		result = parser(view)
		if isinstance(result, Failure): return result
		return Success(view, result.value)
	return parse

def opt(parser:Parser) -> Parser:
	""" A recoverable failure becomes None; a committed one still fails. """
	def parse(view:View):
		result = parser(view)
		if isinstance(result, Failure):
			return result if result.committed else Success(view, None)
		return result
	return parse

def cut(parser:Parser) -> Parser:
	""" The commit point: from here on, failure is the final word. """
	def parse(view:View):
		result = parser(view)
		if isinstance(result, Failure): return result.commit()
		return result
	return parse


def _repeat(parser:Parser, view:View, items:list):
	while True:
		result = parser(view)
		if isinstance(result, Failure):
			return result if result.committed else Success(view, items)
		if result.rest.pos == view.pos:
			# Going around again would never end.
			return Failure(ErrorStack.from_primitive(view, Primitive.MANY0))
		items.append(result.value)
		view = result.rest

def many0(parser:Parser) -> Parser:
	return lambda view: _repeat(parser, view, [])

def many1(parser:Parser) -> Parser:
	def parse(view:View):
		first = parser(view)
		if isinstance(first, Failure):
			if not first.committed: first.errors.append(view, Primitive.MANY1)
			return first
		return _repeat(parser, first.rest, [first.value])
	return parse


def sequence(*parsers:Parser) -> Parser:
	""" Each parser in turn, each starting where the last one stopped. The value is a tuple. """
	def parse(view:View):
		values = []
		for parser in parsers:
			result = parser(view)
			if isinstance(result, Failure): return result
			view = result.rest
			values.append(result.value)
		return Success(view, tuple(values))
	return parse

def preceded(first:Parser, second:Parser) -> Parser:
	return mapped(sequence(first, second), lambda pair: pair[1])

def delimited(left:Parser, middle:Parser, right:Parser) -> Parser:
	return mapped(sequence(left, middle, right), lambda triple: triple[1])


def alt(*candidates:Parser) -> Parser:
	"""
	Try each candidate against the same view; the first success wins.
	A committed failure ends the search on the spot. If every candidate fails
	recoverably, the last one's complaint is what comes back. That choice is
	arbitrary; grammars wanting better messages should give rules distinct heads.
	"""
	assert candidates, "alt() needs at least one candidate"
	def parse(view:View):
		for candidate in candidates:
			result = candidate(view)
			if not isinstance(result, Failure) or result.committed: return result
		result.errors.append(view, Primitive.ALT)
		return result
	return parse
