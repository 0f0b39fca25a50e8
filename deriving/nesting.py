"""
Sum and Product are binary, so three or more alternatives (or fields) must nest.
How they nest is nobody's business but the instance's.

Two strategies are on offer here. BALANCED splits in half, which keeps the path
from the root to any alternative logarithmic. RIGHT makes a chain leaning right.
Whoever writes an instance picks one and uses it consistently for the shape
and for the values. Generic functions must not care which.
"""
from typing import Sequence
from .algebra import Rep, SumRep, ProductRep, UNIT, absurd
from .shapes import Shape, Sum, Product, V1, U1

class Nesting:
	def __init__(self, name:str, split):
		self._name = name
		self.split = split  # How many of n items (n >= 2) go on the left.
	def __repr__(self): return self._name

BALANCED = Nesting("BALANCED", lambda n: n // 2)
RIGHT = Nesting("RIGHT", lambda n: 1)

def sum_of(alternatives:Sequence[Shape], nesting:Nesting=BALANCED) -> Shape:
	if not alternatives: return V1
	return _fold(Sum, alternatives, nesting)

def product_of(fields:Sequence[Shape], nesting:Nesting=BALANCED) -> Shape:
	if not fields: return U1
	return _fold(Product, fields, nesting)

def _fold(combine, items, nesting):
	if len(items) == 1: return items[0]
	k = nesting.split(len(items))
	return combine(_fold(combine, items[:k], nesting), _fold(combine, items[k:], nesting))

def inject(index:int, count:int, rep:Rep, nesting:Nesting=BALANCED) -> Rep:
	""" Encode the index-th of `count` alternatives. """
	if not count: absurd(rep)
	assert 0 <= index < count, (index, count)
	if count == 1: return rep
	k = nesting.split(count)
	if index < k: return SumRep.left(inject(index, k, rep, nesting))
	else: return SumRep.right(inject(index - k, count - k, rep, nesting))

def select(rep:Rep, count:int, nesting:Nesting=BALANCED) -> tuple[int, Rep]:
	""" Inverse of inject: which alternative, and what it holds. """
	if not count: absurd(rep)
	index = 0
	while count > 1:
		assert isinstance(rep, SumRep), rep
		k = nesting.split(count)
		if rep.is_right: index, count = index + k, count - k
		else: count = k
		rep = rep.inner
	return index, rep

def pack(reps:Sequence[Rep], nesting:Nesting=BALANCED) -> Rep:
	""" Combine field representations, preserving order. """
	if not reps: return UNIT
	return _fold(ProductRep, reps, nesting)

def unpack(rep:Rep, count:int, nesting:Nesting=BALANCED) -> list[Rep]:
	""" Inverse of pack: the field representations, in order. """
	if not count:
		assert rep == UNIT, rep
		return []
	if count == 1: return [rep]
	assert isinstance(rep, ProductRep), rep
	k = nesting.split(count)
	return unpack(rep.first, k, nesting) + unpack(rep.second, count - k, nesting)

def alternatives(shape:Shape) -> list[Shape]:
	""" Flatten a tree of Sum, whatever its nesting. """
	if isinstance(shape, Sum): return alternatives(shape.left) + alternatives(shape.right)
	return [] if shape == V1 else [shape]

def fields(shape:Shape) -> list[Shape]:
	""" Flatten a tree of Product, whatever its nesting. """
	if isinstance(shape, Product): return fields(shape.left) + fields(shape.right)
	return [] if shape == U1 else [shape]
