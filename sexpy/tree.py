"""
A grammar for head patterns in general, when you have no particular data type in mind:
every datum is either an atom or a surrounded `(keyword datum ...)` form.

The command line front end uses this to check files for syntax; it's also handy for
poking at a document before anyone has written a proper grammar for it.
"""

import re
from typing import NamedTuple

from .interface import View, BOUNDARY
from .error import Primitive
from .combinators import take_while, alt, sequence, mapped
from .primitives import surround
from .leaves import text, repeated
from . import runtime

INTEGER = re.compile(r'-?[0-9]+\Z')


class Form(NamedTuple):
	head: str
	args: tuple = ()

	def __str__(self):
		return '(%s)'%' '.join([self.head] + [str(a) for a in self.args])


def _atom_value(token:str):
	return int(token) if INTEGER.match(token) else token

atom = mapped(take_while(lambda c: c not in BOUNDARY, minimum=1, kind=Primitive.NONE_OF), _atom_value)

def datum(view:View):
	return _datum(view)

_form = surround(mapped(sequence(text, repeated(datum)), lambda pair: Form(pair[0], tuple(pair[1]))))
_datum = alt(atom, _form)

document = repeated(datum)


def load(source:str, *, verbose=None) -> list:
	""" Every datum in `source`, which must hold nothing else but whitespace and comments. """
	return runtime.parse(document, source, verbose=verbose, exhaustive=True)
