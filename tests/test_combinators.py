""" The general vocabulary, particularly how each one treats recoverable and committed failure. """
import unittest
from sexpy.interface import View, Success, Failure
from sexpy.error import Diagnostic, Kind, Primitive
from sexpy import combinators as c


class TestLeaves(unittest.TestCase):
	def test_char(self):
		self.assertEqual(Success(View("ab", 1), 'a'), c.char('a')(View("ab")))
		result = c.char('a')(View("ba"))
		self.assertIsInstance(result, Failure)
		self.assertFalse(result.committed)
		self.assertEqual(Diagnostic(Kind.CHAR, 'a'), result.errors.top)

	def test_char_at_end(self):
		self.assertIsInstance(c.char('a')(View("a", 1)), Failure)

	def test_one_of_none_of(self):
		self.assertEqual(' ', c.one_of(" \t")(View(" x")).value)
		self.assertEqual(Diagnostic(Kind.PRIMITIVE, Primitive.ONE_OF), c.one_of(" \t")(View("x")).errors.top)
		self.assertEqual('x', c.none_of("\n")(View("x")).value)
		self.assertIsInstance(c.none_of("\n")(View("\n")), Failure)
		self.assertIsInstance(c.none_of("\n")(View("")), Failure)

	def test_runs(self):
		self.assertEqual(Success(View("abc12", 3), "abc"), c.alpha1(View("abc12")))
		self.assertEqual(Diagnostic(Kind.PRIMITIVE, Primitive.DIGIT), c.digit1(View("abc")).errors.top)
		self.assertEqual(Success(View("", 0), ""), c.take_till("()")(View("")))
		self.assertEqual("ab", c.take_till("()")(View("ab(c")).value)

	def test_eof(self):
		self.assertIsInstance(c.eof(View("a", 1)), Success)
		self.assertEqual(Diagnostic(Kind.PRIMITIVE, Primitive.EOF), c.eof(View("a")).errors.top)


class TestComposition(unittest.TestCase):
	def test_sequence(self):
		parser = c.sequence(c.char('a'), c.char('b'))
		self.assertEqual(Success(View("abc", 2), ('a', 'b')), parser(View("abc")))
		failure = parser(View("ac"))
		self.assertEqual(1, failure.errors[0][0].pos)

	def test_preceded_delimited(self):
		self.assertEqual('b', c.preceded(c.char('a'), c.char('b'))(View("ab")).value)
		self.assertEqual('b', c.delimited(c.char('('), c.char('b'), c.char(')'))(View("(b)")).value)

	def test_mapped_and_peek(self):
		self.assertEqual('A', c.mapped(c.char('a'), str.upper)(View("a")).value)
		self.assertEqual(Success(View("a", 0), 'a'), c.peek(c.char('a'))(View("a")))

	def test_opt(self):
		self.assertEqual(Success(View("b", 0), None), c.opt(c.char('a'))(View("b")))
		committed = c.opt(c.cut(c.char('a')))(View("b"))
		self.assertIsInstance(committed, Failure)
		self.assertTrue(committed.committed)

	def test_cut(self):
		result = c.cut(c.char('a'))(View("b"))
		self.assertTrue(result.committed)
		self.assertEqual(Success(View("a", 1), 'a'), c.cut(c.char('a'))(View("a")))


class TestRepetition(unittest.TestCase):
	def test_many0(self):
		self.assertEqual(Success(View("aab", 2), ['a', 'a']), c.many0(c.char('a'))(View("aab")))
		self.assertEqual(Success(View("b", 0), []), c.many0(c.char('a'))(View("b")))

	def test_many0_will_not_spin(self):
		result = c.many0(c.opt(c.char('a')))(View("b"))
		self.assertIsInstance(result, Failure)
		self.assertEqual(Diagnostic(Kind.PRIMITIVE, Primitive.MANY0), result.errors.top)

	def test_many0_passes_committed_failure(self):
		item = c.preceded(c.char('a'), c.cut(c.char('b')))
		result = c.many0(item)(View("abac"))
		self.assertTrue(result.committed)
		self.assertEqual(3, result.errors[0][0].pos)

	def test_many1(self):
		self.assertEqual(['a'], c.many1(c.char('a'))(View("ab")).value)
		result = c.many1(c.char('a'))(View("b"))
		self.assertEqual(Diagnostic(Kind.CHAR, 'a'), result.errors[0][1])
		self.assertEqual(Diagnostic(Kind.PRIMITIVE, Primitive.MANY1), result.errors[1][1])


class TestAlternation(unittest.TestCase):
	def test_first_match_wins(self):
		parser = c.alt(c.mapped(c.char('a'), lambda _: 1), c.mapped(c.char('a'), lambda _: 2))
		self.assertEqual(1, parser(View("a")).value)

	def test_each_candidate_sees_the_same_view(self):
		parser = c.alt(c.sequence(c.char('a'), c.char('x')), c.sequence(c.char('a'), c.char('b')))
		self.assertEqual(('a', 'b'), parser(View("ab")).value)

	def test_committed_failure_stops_the_search(self):
		parser = c.alt(c.preceded(c.char('a'), c.cut(c.char('x'))), c.sequence(c.char('a'), c.char('b')))
		result = parser(View("ab"))
		self.assertIsInstance(result, Failure)
		self.assertTrue(result.committed)
		self.assertEqual(Diagnostic(Kind.CHAR, 'x'), result.errors.top)

	def test_last_recoverable_error_wins(self):
		result = c.alt(c.char('a'), c.char('b'))(View("c"))
		self.assertFalse(result.committed)
		self.assertEqual(Diagnostic(Kind.CHAR, 'b'), result.errors[0][1])
		self.assertEqual(Diagnostic(Kind.PRIMITIVE, Primitive.ALT), result.errors[1][1])
		self.assertEqual(2, len(result.errors))


if __name__ == '__main__':
	unittest.main()
