import io
import unittest
from unittest import mock

from genarith import cmdline
from genarith.diagnostics import Report, TooManyIssues
from genarith.generic import standard_arithmetic
from genarith.reader import read, ReaderError, Literal, Word, Combination
from genarith.render import render
from genarith.tagging import attach_tag, COMPLEX, POLAR, RECTANGULAR

class ReaderTests(unittest.TestCase):
	
	def test_combination(self):
		expr = read("(add 1 (rational 1 2))")
		self.assertIsInstance(expr, Combination)
		self.assertEqual("add", expr.head.text)
		self.assertEqual(Literal(1, slice(5, 6)), expr.args[0])
		self.assertEqual("rational", expr.args[1].head.text)
		self.assertEqual(slice(0, 22), expr.slice)
	
	def test_atoms(self):
		self.assertEqual(Literal(-3, slice(0, 2)), read("-3"))
		self.assertEqual(Literal(2.5, slice(1, 4)), read(" 2.5"))
		self.assertEqual(Word("=zero?", slice(0, 6)), read("=zero?"))
		self.assertEqual(Literal(1000.0, slice(0, 3)), read("1e3"))
		self.assertEqual(Literal(0.5, slice(0, 2)), read(".5"))
	
	def test_float_spellings_are_words(self):
		for text in ["inf", "nan", "infinity", "-inf", "NaN"]:
			with self.subTest(text):
				self.assertEqual(Word(text, slice(0, len(text))), read(text))
	
	def test_error_points_at_the_culprit(self):
		with self.assertRaises(ReaderError) as cm:
			read("(1 2)")
		self.assertEqual(slice(1, 2), cm.exception.where)
	
	def test_malformed(self):
		for bogon in ["", "(add 1", ")", "(1 2)", "()", "(add 1 2) 3"]:
			with self.subTest(bogon):
				with self.assertRaises(ReaderError):
					read(bogon)

class RenderTests(unittest.TestCase):
	
	def test_rendering(self):
		arith = standard_arithmetic()
		for value, text in [
			(arith.make_scheme_number(7), "7"),
			(arith.make_scheme_number(0.25), "0.25"),
			(arith.make_rational(10, 4), "5/2"),
			(arith.make_rational(6, 3), "2"),
			(arith.make_complex_from_real_imag(3, -4), "3-4i"),
			(attach_tag(COMPLEX, attach_tag(POLAR, (2, 0.5))), "2@0.5"),
			(5.0, "5"),
			(True, "true"),
			(attach_tag("mystery", 1), "<mystery 1>"),
		]:
			with self.subTest(text):
				self.assertEqual(text, render(value))

class ReportTests(unittest.TestCase):
	
	def test_limit_is_a_ceiling(self):
		for limit in [1, 0, -3]:
			with self.subTest(limit):
				report = Report(max_issues=limit)
				with self.assertRaises(TooManyIssues):
					report.issue("trouble")
				self.assertTrue(report.sick())

class CommandLineTests(unittest.TestCase):
	
	def run_main(self, argv, stdin=""):
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out, \
			mock.patch("sys.stderr", new_callable=io.StringIO) as err, \
			mock.patch("sys.stdin", io.StringIO(stdin)):
			status = cmdline.main(argv)
		return status, out.getvalue(), err.getvalue()
	
	def test_good_expressions(self):
		status, out, err = self.run_main([
			"(add (rational 1 2) (rational 1 3))",
			"(magnitude (rectangular 3 4))",
			"(add 3 4)",
			"(add (rectangular 1 2) (rectangular 3 4))",
			"(equ? (rational 1 2) (rational 2 4))",
		])
		self.assertEqual(0, status)
		self.assertEqual(["5/6", "5", "7", "4+6i", "true"], out.splitlines())
		self.assertEqual("", err)
	
	def test_reads_stdin_when_no_arguments(self):
		status, out, err = self.run_main([], stdin="(add 1 2)\n\n(sub 5 3)\n")
		self.assertEqual(0, status)
		self.assertEqual(["3", "2"], out.splitlines())
	
	def test_mixed_types_are_reported(self):
		status, out, err = self.run_main(["(add (rational 1 2) (rectangular 1 2))"])
		self.assertEqual(1, status)
		self.assertEqual("", out)
		self.assertIn("Operation 'add' has no method for ('rational', 'complex').", err)
	
	def test_division_by_zero_is_reported(self):
		status, out, err = self.run_main(["(div (rational 1 2) (rational 0 1))"])
		self.assertEqual(1, status)
		self.assertIn("ZeroDivisionError", err)
	
	def test_malformed_input_is_reported(self):
		status, out, err = self.run_main(["(add 1", "(frobnicate 1 2)", "(add 1 2 3)", "(add 1 2)"])
		self.assertEqual(1, status)
		self.assertEqual(["3"], out.splitlines())
		self.assertEqual(3, err.count("I could not make sense of this expression."))
	
	def test_gives_up_eventually(self):
		status, out, err = self.run_main(["--max-issues", "2", "(", "(", "(add 1 2)"])
		self.assertEqual(1, status)
		self.assertEqual("", out)
		self.assertIn("Giving up", err)
	
	def test_host_arithmetic_failures_are_reported(self):
		for culprit, kind in [
			("(polar 1 1e400)", "ValueError"),
			("(add 1e308 1" + "0" * 400 + ")", "OverflowError"),
		]:
			with self.subTest(kind):
				status, out, err = self.run_main([culprit, "(add 1 2)"])
				self.assertEqual(1, status)
				self.assertEqual(["3"], out.splitlines())
				self.assertIn(kind, err)
	
	def test_words_are_not_numbers(self):
		status, out, err = self.run_main(["(add 1 inf)", "(add 1 2)"])
		self.assertEqual(1, status)
		self.assertEqual(["3"], out.splitlines())
	
	def test_issue_limit_must_be_positive(self):
		for limit in ["0", "-1"]:
			with self.subTest(limit):
				with self.assertRaises(SystemExit):
					self.run_main(["--max-issues", limit, "(add 1 2)"])
	
	def test_verbose_traces_installation(self):
		status, out, err = self.run_main(["-v", "(add 1 2)"])
		self.assertEqual(0, status)
		self.assertIn("Registered make-from-mag-ang complex", err)

if __name__ == '__main__':
	unittest.main()
