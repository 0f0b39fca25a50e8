"""
Instances for a few built-in types, written out the way a derivation would write them.

	NoneType   one constructor, no fields: the unit type.
	bool       two constructors, no fields.
	list       [] | a : list, both as an ordinary type and as a type-constructor.

The constructor-level list is what Composition shapes usually mean by "outer",
as in a rose tree whose children are a list of rose trees.
"""
from .algebra import Rep, UNIT, MetaRep, SumRep, ProductRep, FieldRep, ParameterRep, RecursiveRep
from .metadata import Datatype, Constructor, NoSelector, Infix, RIGHT_ASSOCIATIVE
from .representable import Representable, Representable1, instance
from .shapes import D1, C1, S1, U1, PAR1, Rec0, Par0, Recursive

NoneType = type(None)

class NoneTypeType(Datatype):
	name = "NoneType"
	module = "builtins"

class NoneConstructor(Constructor):
	name = "None"

@instance(NoneType)
class NoneInstance(Representable[None]):
	rep = D1(NoneTypeType, C1(NoneConstructor, U1))
	def from_(self, value:None) -> Rep:
		assert value is None
		return MetaRep(MetaRep(UNIT))
	def to(self, rep:Rep) -> None:
		assert rep.inner.inner == UNIT, rep
		return None

#########################

class BoolType(Datatype):
	name = "bool"
	module = "builtins"

class FalseConstructor(Constructor):
	name = "False"

class TrueConstructor(Constructor):
	name = "True"

@instance(bool)
class BoolInstance(Representable[bool]):
	rep = D1(BoolType, C1(FalseConstructor, U1) + C1(TrueConstructor, U1))
	def from_(self, value:bool) -> Rep:
		return MetaRep(SumRep(value, MetaRep(UNIT)))
	def to(self, rep:Rep) -> bool:
		return rep.inner.is_right

#########################

class ListType(Datatype):
	name = "list"
	module = "builtins"

class Nil(Constructor):
	name = "[]"

class Cons(Constructor):
	name = ":"
	fixity = Infix(RIGHT_ASSOCIATIVE, 5)

@instance(list)
class ListInstance(Representable[list], Representable1[list]):
	rep = D1(ListType, C1(Nil, U1) + C1(Cons, S1(NoSelector, Par0()) * S1(NoSelector, Rec0(list))))
	rep1 = D1(ListType, C1(Nil, U1) + C1(Cons, S1(NoSelector, PAR1) * S1(NoSelector, Recursive(list))))

	def from_(self, value:list) -> Rep:
		return _from_list(value, FieldRep, FieldRep)

	def to(self, rep:Rep) -> list:
		return _to_list(rep, FieldRep, FieldRep)

	def from1(self, value:list) -> Rep:
		return _from_list(value, ParameterRep, RecursiveRep)

	def to1(self, rep:Rep) -> list:
		return _to_list(rep, ParameterRep, RecursiveRep)

def _from_list(value:list, head, tail) -> Rep:
	if not value: return MetaRep(SumRep.left(MetaRep(UNIT)))
	fields = ProductRep(MetaRep(head(value[0])), MetaRep(tail(value[1:])))
	return MetaRep(SumRep.right(MetaRep(fields)))

def _to_list(rep:Rep, head, tail) -> list:
	choice = rep.inner
	if not choice.is_right:
		assert choice.inner.inner == UNIT, rep
		return []
	first, second = choice.inner.inner
	assert type(first.inner) is head and type(second.inner) is tail, rep
	return [first.inner.value] + list(second.inner.value)
