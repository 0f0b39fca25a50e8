import io
import unittest
from unittest import mock

from deriving import cmdline
from deriving.diagnostics import Report

def _run(*argv):
	""" Returns the exit status and whatever went to standard output. """
	with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
		status = cmdline.run(cmdline.parser.parse_args(list(argv)))
	return status, out.getvalue().splitlines()

class HappyPathTests(unittest.TestCase):

	def test_list(self):
		status, lines = _run("builtins:list")
		self.assertEqual(0, status)
		self.assertEqual(["D1 list (C1 [] U1 :+: C1 : (S1 NoSelector (Par0 object) :*: S1 NoSelector (Rec0 list)))"], lines)

	def test_list_as_a_type_constructor(self):
		status, lines = _run("builtins:list", "-p")
		self.assertEqual(0, status)
		self.assertEqual(["D1 list (C1 [] U1 :+: C1 : (S1 NoSelector Par1 :*: S1 NoSelector (Rec1 list)))"], lines)

	def test_metadata_outline(self):
		status, lines = _run("builtins:list", "-m")
		self.assertEqual(0, status)
		self.assertEqual([
			"datatype list (module builtins)",
			"  constructor []: prefix",
			"  constructor :: infixr 5",
			"    selector (positional)",
			"    selector (positional)",
		], lines[1:])

	def test_outline_of_a_record_and_an_empty_type(self):
		status, lines = _run("specimens:Complex", "-m")
		self.assertEqual(0, status)
		self.assertIn("  constructor :+: infix 6", lines)
		status, lines = _run("specimens:Empty", "-m")
		self.assertEqual(0, status)
		self.assertEqual(["D1 Empty V1", "datatype Empty (module specimens)", "  (no constructors)"], lines)

	def test_record_outline(self):
		outline = cmdline.Outline()
		from specimens import PersonInstance
		lines = PersonInstance().rep.visit(outline, 0)
		self.assertEqual("  constructor Person: prefix, record", lines[1])
		self.assertEqual(["    selector name", "    selector age", "    selector email"], lines[2:])

	def test_verbose_talks_to_stderr(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			status, lines = _run("builtins:bool", "-v")
		self.assertEqual(0, status)
		self.assertEqual(["D1 bool (C1 False U1 :+: C1 True U1)"], lines)
		self.assertIn("Importing builtins", err.getvalue())

@mock.patch.object(Report, "complain_to_console")
class SadPathTests(unittest.TestCase):

	def test_malformed_subject(self, complain):
		for subject in ("list", ":list", "builtins:"):
			with self.subTest(subject=subject):
				self.assertEqual(1, _run(subject)[0])
		self.assertEqual(3, complain.call_count)

	def test_no_such_module(self, complain):
		self.assertEqual(1, _run("no_module_goes_by_this_name:Thing")[0])
		self.assertEqual(1, complain.call_count)

	def test_no_such_name(self, complain):
		self.assertEqual(1, _run("builtins:NoSuchThing")[0])
		self.assertEqual(1, complain.call_count)

	def test_not_representable(self, complain):
		self.assertEqual(1, _run("builtins:dict")[0])
		self.assertEqual(1, _run("specimens:Complex", "-p")[0])
		self.assertEqual(1, _run("specimens:WithInt")[0])
		self.assertEqual(3, complain.call_count)

	def test_subject_that_is_not_a_type(self, complain):
		for argv in (["builtins:len"], ["specimens:COLORS"], ["builtins:len", "-p"], ["specimens:COLORS", "-m"]):
			with self.subTest(argv=argv):
				self.assertEqual(1, _run(*argv)[0])
		self.assertEqual(4, complain.call_count)

class ReportTests(unittest.TestCase):

	def test_issues_pile_up(self):
		report = Report(verbose=False, max_issues=30)
		self.assertTrue(report.ok())
		report.no_such_module("gadzooks")
		report.not_representable(dict, True)
		self.assertTrue(report.sick())
		self.assertEqual(2, len(report.issues))
		self.assertIn("Perhaps drop the -p flag?", report.issues[1].as_text())
		report.reset()
		self.assertTrue(report.ok())

	def test_too_many_issues(self):
		report = Report(verbose=False, max_issues=2)
		report.no_such_module("a")
		with self.assertRaises(cmdline.TooManyIssues):
			report.no_such_module("b")

	@mock.patch("deriving.diagnostics._bemoan")
	def test_assert_no_issues(self, bemoan):
		report = Report(verbose=False)
		report.assert_no_issues("fine")
		report.malformed_subject("nonsense")
		with self.assertRaises(AssertionError):
			report.assert_no_issues("not fine")
		bemoan.assert_called_once()

class MainTests(unittest.TestCase):

	def test_no_arguments_explains_itself(self):
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			cmdline.main([])
		self.assertIn("deriving builtins:list -m", out.getvalue())
		self.assertIn("usage: deriving", out.getvalue())

	def test_exit_status(self):
		with mock.patch("sys.stdout", new_callable=io.StringIO):
			with self.assertRaises(SystemExit) as caught:
				cmdline.main(["builtins:list"])
		self.assertEqual(0, caught.exception.code)

if __name__ == '__main__':
	unittest.main()
