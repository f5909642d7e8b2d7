"""
The convenient way in: hand over a parser and some text, get back a value or a ParseError
whose message says, with a caret, exactly what went wrong and where.
"""

import sys

from .interface import View, Failure, Parser, ParseError
from .error import ErrorStack, Primitive
from .combinators import sequence, eof
from .primitives import wordbreak0

VERBOSE = False # When set, errors render the whole chain of context rather than just the deepest complaint.
RECURSION_LIMIT = 5000 # Every level of nesting costs about a dozen interpreter frames.


def _run(parser:Parser, text:str):
	limit = sys.getrecursionlimit()
	if limit < RECURSION_LIMIT: sys.setrecursionlimit(RECURSION_LIMIT)
	try: return parser(View(text))
	except RecursionError: return Failure(ErrorStack.from_primitive(View(text), Primitive.NESTING), True)
	finally: sys.setrecursionlimit(limit)


def parse(parser:Parser, text:str, *, verbose=None, exhaustive=False):
	"""
	Skip leading whitespace and comments, then run `parser` over `text`.
	With `exhaustive`, only whitespace and comments may follow what `parser` matched.
	"""
	if verbose is None: verbose = VERBOSE
	steps = [wordbreak0, parser]
	if exhaustive: steps += [wordbreak0, eof]
	result = _run(sequence(*steps), text)
	if isinstance(result, Failure):
		errors = result.errors
		message = errors.render_all(text) if verbose else errors.render_top(text)
		raise ParseError(message, errors, text, result.committed)
	return result.value[1]


def parse_verbose(parser:Parser, text:str, *, exhaustive=False):
	return parse(parser, text, verbose=True, exhaustive=exhaustive)
