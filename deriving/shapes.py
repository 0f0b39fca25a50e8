"""
Shapes stand in for representation *types*.

Every representable Python type binds one shape, built from the classes here.
For example, a binary tree with a generic payload:

	D1 Tree (C1 Leaf (S1 NoSelector (Par0 a)) :+: C1 Node (S1 NoSelector (Rec0 Tree) :*: S1 NoSelector (Rec0 Tree)))

Shapes are value objects: two shapes built the same way are equal,
hash alike, and share a number and an exemplar. That way they play well
with the classifier, and comparing them is cheap.

A datatype-generic function is a ShapeVisitor: one method per combinator.
Dispatch goes by the shape, which is the only place metadata lives;
the representation value comes along as an extra argument.

Design Note:
-------------
Nesting of Sum and Product for three or more alternatives or fields is
not part of the contract. See `deriving.nesting` for the ways on offer.
"""
from boozetools.support.foundation import EquivalenceClassifier
from . import metadata
from .metadata import Datatype, Constructor, Selector, Infix, RIGHT_ASSOCIATIVE, precedence_of

_shape_numbering = EquivalenceClassifier()

class Shape:
	""" Value objects so they can play well with the classifier """
	def visit(self, visitor:"ShapeVisitor", *args): raise NotImplementedError(type(self))

	def __init__(self, *key):
		self._key = key
		self._hash = hash(key)
		self.number = _shape_numbering.classify(self)
	def __hash__(self): return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def exemplar(self) -> "Shape": return _shape_numbering.exemplars[self.number]
	def __repr__(self) -> str: return self.visit(Render())

	# Spelled :+: and :*: in the literature.
	def __add__(self, other:"Shape") -> "Shape": return Sum(self, other)
	def __mul__(self, other:"Shape") -> "Shape": return Product(self, other)

class Role:
	""" Distinguishes the two uses of a Field. """
	def __init__(self, name:str): self._name = name
	def __repr__(self): return self._name

RECURSION = Role("R")   # The datatype itself, or anything else of kind *
PARAMETER = Role("P")   # A generic argument other than the last

class Void(Shape):
	""" For datatypes without constructors """
	def __init__(self): super().__init__()
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_void(self, *args)

class Unit(Shape):
	""" For constructors without arguments """
	def __init__(self): super().__init__()
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_unit(self, *args)

class Field(Shape):
	"""
	One field's contents. The content is whatever names the field's type:
	a class, a TypeVar, a typing construct. Nothing here looks inside it.
	"""
	def __init__(self, role:Role, content=object):
		assert isinstance(role, Role), role
		self.role, self.content = role, content
		super().__init__(role, content)
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_field(self, *args)

class Meta(Shape):
	""" Attaches a metadata tag to the enclosed shape. """
	def __init__(self, tag:type, inner:Shape):
		assert metadata.is_tag(tag), tag
		assert isinstance(inner, Shape), inner
		self.tag, self.inner = tag, inner.exemplar()
		super().__init__(tag, self.inner.number)
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_meta(self, *args)
	def is_datatype(self): return issubclass(self.tag, Datatype)
	def is_constructor(self): return issubclass(self.tag, Constructor)
	def is_selector(self): return issubclass(self.tag, Selector)

class Sum(Shape):
	""" Choice between constructors """
	def __init__(self, left:Shape, right:Shape):
		assert isinstance(left, Shape) and isinstance(right, Shape), (left, right)
		self.left, self.right = left.exemplar(), right.exemplar()
		super().__init__(self.left.number, self.right.number)
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_sum(self, *args)

class Product(Shape):
	""" Multiple arguments to a constructor """
	def __init__(self, left:Shape, right:Shape):
		assert isinstance(left, Shape) and isinstance(right, Shape), (left, right)
		self.left, self.right = left.exemplar(), right.exemplar()
		super().__init__(self.left.number, self.right.number)
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_product(self, *args)

class Composition(Shape):
	"""
	The parameter appears underneath some other type-constructor:
	`outer` is that constructor (e.g. `list`) and `inner` is the shape of its elements.
	"""
	def __init__(self, outer:type, inner:Shape):
		assert isinstance(inner, Shape), inner
		self.outer, self.inner = outer, inner.exemplar()
		super().__init__(outer, self.inner.number)
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_composition(self, *args)

class Parameter(Shape):
	""" Marks occurrences of the parameter """
	def __init__(self): super().__init__()
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_parameter(self, *args)

class Recursive(Shape):
	""" Application of some type-constructor (often the one being represented) to the parameter """
	def __init__(self, constructor:type):
		self.constructor = constructor
		super().__init__(constructor)
	def visit(self, visitor:"ShapeVisitor", *args): return visitor.on_recursive(self, *args)

V1 = Void()
U1 = Unit()
PAR1 = Parameter()

def Rec0(content=object) -> Field: return Field(RECURSION, content)
def Par0(content=object) -> Field: return Field(PARAMETER, content)

def D1(tag:type, inner:Shape) -> Meta:
	assert issubclass(tag, Datatype), tag
	return Meta(tag, inner)

def C1(tag:type, inner:Shape) -> Meta:
	assert issubclass(tag, Constructor), tag
	return Meta(tag, inner)

def S1(tag:type, inner:Shape) -> Meta:
	assert issubclass(tag, Selector), tag
	return Meta(tag, inner)

#########################

class ShapeVisitor:
	def on_void(self, v:Void, *args): raise NotImplementedError(type(self))
	def on_unit(self, u:Unit, *args): raise NotImplementedError(type(self))
	def on_field(self, f:Field, *args): raise NotImplementedError(type(self))
	def on_meta(self, m:Meta, *args): raise NotImplementedError(type(self))
	def on_sum(self, s:Sum, *args): raise NotImplementedError(type(self))
	def on_product(self, p:Product, *args): raise NotImplementedError(type(self))
	def on_composition(self, c:Composition, *args): raise NotImplementedError(type(self))
	def on_parameter(self, p:Parameter, *args): raise NotImplementedError(type(self))
	def on_recursive(self, r:Recursive, *args): raise NotImplementedError(type(self))

#########################

SUM_FIXITY = Infix(RIGHT_ASSOCIATIVE, 5)
PRODUCT_FIXITY = Infix(RIGHT_ASSOCIATIVE, 6)
COMPOSITION_FIXITY = Infix(RIGHT_ASSOCIATIVE, 7)

_APPLICATION = precedence_of(metadata.PREFIX)

class Render(ShapeVisitor):
	"""
	Return a string representation of the shape.
	The extra argument is the precedence of the surrounding context.
	"""
	def on_void(self, v:Void, context=0): return "V1"
	def on_unit(self, u:Unit, context=0): return "U1"
	def on_parameter(self, p:Parameter, context=0): return "Par1"
	def on_field(self, f:Field, context=0):
		head = "Rec0" if f.role is RECURSION else "Par0"
		return _apply(head, _type_name(f.content), context)
	def on_recursive(self, r:Recursive, context=0):
		return _apply("Rec1", _type_name(r.constructor), context)
	def on_meta(self, m:Meta, context=0):
		if m.is_datatype(): head = "D1 " + metadata.datatype_name(m)
		elif m.is_constructor(): head = "C1 " + metadata.con_name(m)
		else: head = "S1 " + (metadata.sel_name(m) or "NoSelector")
		return _apply(head, m.inner.visit(self, _APPLICATION+1), context)
	def on_sum(self, s:Sum, context=0):
		return self._infix(":+:", SUM_FIXITY, s.left, s.right, context)
	def on_product(self, p:Product, context=0):
		return self._infix(":*:", PRODUCT_FIXITY, p.left, p.right, context)
	def on_composition(self, c:Composition, context=0):
		return _parenthesize(
			"%s :.: %s" % (_type_name(c.outer), c.inner.visit(self, COMPOSITION_FIXITY.precedence)),
			COMPOSITION_FIXITY.precedence, context,
		)
	def _infix(self, glyph, fixity:Infix, left:Shape, right:Shape, context):
		# All three operators associate to the right.
		prec = precedence_of(fixity)
		text = "%s %s %s" % (left.visit(self, prec+1), glyph, right.visit(self, prec))
		return _parenthesize(text, prec, context)

def _apply(head, argument, context):
	return _parenthesize(head + " " + argument, _APPLICATION, context)

def _parenthesize(text, prec, context):
	return "(%s)" % text if context > prec else text

def _type_name(it) -> str:
	return getattr(it, "__name__", None) or repr(it)
