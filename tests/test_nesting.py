import unittest
from unittest import mock

from deriving import diagnostics
from deriving.algebra import UNIT, FieldRep, MetaRep, SumRep, ProductRep
from deriving.nesting import (
	BALANCED, RIGHT, sum_of, product_of, inject, select, pack, unpack, alternatives, fields,
)
from deriving.shapes import Sum, Product, V1, U1, Rec0

STRATEGIES = (BALANCED, RIGHT)

class ShapeNestingTests(unittest.TestCase):

	def test_empty(self):
		for nesting in STRATEGIES:
			with self.subTest(nesting=nesting):
				self.assertIs(V1, sum_of([], nesting))
				self.assertIs(U1, product_of([], nesting))

	def test_single(self):
		for nesting in STRATEGIES:
			with self.subTest(nesting=nesting):
				self.assertEqual(Rec0(int), sum_of([Rec0(int)], nesting))
				self.assertEqual(Rec0(int), product_of([Rec0(int)], nesting))

	def test_two_is_the_same_either_way(self):
		items = [Rec0(int), Rec0(str)]
		self.assertEqual(sum_of(items, BALANCED), sum_of(items, RIGHT))
		self.assertEqual(Rec0(int) * Rec0(str), product_of(items, RIGHT))

	def test_strategies_differ_beyond_three(self):
		items = [Rec0(int), Rec0(str), Rec0(float), Rec0(bytes)]
		balanced, right = sum_of(items, BALANCED), sum_of(items, RIGHT)
		self.assertNotEqual(balanced, right)
		self.assertEqual((Rec0(int) + Rec0(str)) + (Rec0(float) + Rec0(bytes)), balanced)
		self.assertEqual(Rec0(int) + (Rec0(str) + (Rec0(float) + Rec0(bytes))), right)
		self.assertIsInstance(product_of(items, RIGHT), Product)

	def test_flattening_undoes_either_nesting(self):
		items = [Rec0(t) for t in (int, str, float, bytes, bool)]
		for nesting in STRATEGIES:
			with self.subTest(nesting=nesting):
				self.assertEqual(items, alternatives(sum_of(items, nesting)))
				self.assertEqual(items, fields(product_of(items, nesting)))
		self.assertEqual([], alternatives(V1))
		self.assertEqual([], fields(U1))

	def test_flattening_stops_at_the_other_operator(self):
		shape = (U1 * U1) + Rec0(int)
		self.assertEqual([U1 * U1, Rec0(int)], alternatives(shape))
		self.assertEqual([shape], fields(shape))
		self.assertIsInstance(shape, Sum)

class ValueNestingTests(unittest.TestCase):

	def test_inject_then_select(self):
		payload = MetaRep(UNIT)
		for nesting in STRATEGIES:
			for count in range(1, 8):
				paths = set()
				for index in range(count):
					with self.subTest(nesting=nesting, count=count, index=index):
						rep = inject(index, count, payload, nesting)
						self.assertEqual((index, payload), select(rep, count, nesting))
						paths.add(rep)
				self.assertEqual(count, len(paths))

	def test_single_alternative_has_no_sum(self):
		self.assertEqual(FieldRep(1), inject(0, 1, FieldRep(1)))
		self.assertEqual((0, FieldRep(1)), select(FieldRep(1), 1))

	def test_inject_agrees_with_sum_of(self):
		# Index 3 of 5, under BALANCED, lives at right-right-left.
		rep = inject(3, 5, UNIT, BALANCED)
		self.assertEqual(SumRep.right(SumRep.right(SumRep.left(UNIT))), rep)
		self.assertEqual(SumRep.right(SumRep.right(SumRep.right(SumRep.left(UNIT)))), inject(3, 5, UNIT, RIGHT))

	def test_index_out_of_range(self):
		with self.assertRaises(AssertionError):
			inject(5, 5, UNIT)

	@mock.patch("deriving.diagnostics._bemoan")
	def test_no_alternatives_is_absurd(self, bemoan):
		with self.assertRaises(diagnostics.Absurd): inject(0, 0, UNIT)
		with self.assertRaises(diagnostics.Absurd): select(UNIT, 0)

	def test_pack_then_unpack(self):
		for nesting in STRATEGIES:
			for count in range(0, 7):
				reps = [FieldRep(i) for i in range(count)]
				with self.subTest(nesting=nesting, count=count):
					self.assertEqual(reps, unpack(pack(reps, nesting), count, nesting))

	def test_pack_shapes(self):
		a, b, c = FieldRep("a"), FieldRep("b"), FieldRep("c")
		self.assertIs(UNIT, pack([]))
		self.assertEqual(a, pack([a]))
		self.assertEqual(ProductRep(a, ProductRep(b, c)), pack([a, b, c], RIGHT))
		self.assertEqual(ProductRep(a, ProductRep(b, c)), pack([a, b, c], BALANCED))
		self.assertEqual(ProductRep(ProductRep(a, b), ProductRep(c, a)), pack([a, b, c, a], BALANCED))

if __name__ == '__main__':
	unittest.main()
