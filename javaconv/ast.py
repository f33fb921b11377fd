"""Java syntax tree: the node kinds handed over by the front-end.

The front-end parses Java source and produces these nodes; the backend only
reads them. Nodes are plain dataclasses: one class per node kind, children held
in fields, in source order.

Comments come in two flavours:
- attached: `node.comment`, printed right before the node it documents
- orphan: `node.orphan_comments`, free-floating comment leaves owned by `node`
  and interleaved among its other children by source position at print time

`Node.children()` returns the structural children in field order followed by
the orphan comments. The attached comment is not a child.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields


# ============================================================
# POSITION
# ============================================================


@dataclass(frozen=True)
class Pos:
    """Begin position of a node, 1-indexed line and column."""

    line: int
    col: int


_META_FIELDS = frozenset({"pos", "comment", "orphan_comments"})


@dataclass
class Node:
    """Base for all node kinds. Abstract."""

    pos: Pos | None = field(default=None, kw_only=True)
    comment: Comment | None = field(default=None, kw_only=True)
    orphan_comments: list[Comment] = field(default_factory=list, kw_only=True)

    def children(self) -> list[Node]:
        """Structural children in field order, then orphan comments."""
        result: list[Node] = []
        for f in fields(self):
            if f.name in _META_FIELDS:
                continue
            value = getattr(self, f.name)
            if isinstance(value, Node):
                result.append(value)
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Node):
                        result.append(item)
        result.extend(self.orphan_comments)
        return result

    def sort_key(self) -> tuple[int, int]:
        """Key for ordering siblings by begin position. Unpositioned nodes sort first."""
        if self.pos is None:
            return (0, 0)
        return (self.pos.line, self.pos.col)


# ============================================================
# COMMENTS
# ============================================================


@dataclass
class Comment(Node):
    """Base for comments. `content` excludes the delimiters."""

    content: str


@dataclass
class LineComment(Comment):
    """// content"""


@dataclass
class BlockComment(Comment):
    """/* content */"""


@dataclass
class JavadocComment(Comment):
    """/** content */"""


# ============================================================
# TYPES
# ============================================================


@dataclass
class Type(Node):
    """Base for type nodes. Abstract."""


@dataclass
class PrimitiveType(Type):
    """boolean, byte, char, double, float, int, long, short."""

    name: str


@dataclass
class VoidType(Type):
    pass


@dataclass
class UnknownType(Type):
    """Placeholder for an omitted type (e.g. implicit lambda parameters)."""


@dataclass
class ClassOrInterfaceType(Type):
    """Named type, optionally scoped (`Map.Entry`) and parameterized."""

    name: str
    scope: ClassOrInterfaceType | None = None
    type_args: list[Type] = field(default_factory=list)
    diamond: bool = False


@dataclass
class ReferenceType(Type):
    """A type with `array_count` trailing `[]`."""

    typ: Type
    array_count: int = 0


@dataclass
class IntersectionType(Type):
    """A & B, in casts and bounds."""

    elements: list[ReferenceType]


@dataclass
class UnionType(Type):
    """A | B, for multi-catch parameter types."""

    elements: list[ReferenceType]


@dataclass
class WildcardType(Type):
    """? / ? extends T / ? super T."""

    extends_bound: ReferenceType | None = None
    super_bound: ReferenceType | None = None


@dataclass
class TypeParameter(Node):
    """T extends A & B."""

    name: str
    bounds: list[ClassOrInterfaceType] = field(default_factory=list)


# ============================================================
# EXPRESSIONS
# ============================================================


@dataclass
class Expression(Node):
    """Base for expressions. Abstract."""


@dataclass
class NameExpr(Expression):
    name: str


@dataclass
class QualifiedNameExpr(NameExpr):
    """qualifier.name, for package and import names."""

    qualifier: NameExpr


@dataclass
class ArrayAccessExpr(Expression):
    name: Expression
    index: Expression


@dataclass
class ArrayInitializerExpr(Expression):
    values: list[Expression] = field(default_factory=list)


@dataclass
class ArrayCreationExpr(Expression):
    """new T[d1][d2][]... or new T[] { ... }."""

    typ: Type
    dimensions: list[Expression] = field(default_factory=list)
    array_count: int = 0
    initializer: ArrayInitializerExpr | None = None


@dataclass
class AssignExpr(Expression):
    """target op value. op is the Java spelling: =, +=, >>>=, ..."""

    target: Expression
    op: str
    value: Expression


@dataclass
class BinaryExpr(Expression):
    """left op right. op is the Java spelling: ||, ==, >>>, ..."""

    left: Expression
    op: str
    right: Expression


@dataclass
class CastExpr(Expression):
    typ: Type
    expr: Expression


@dataclass
class ClassExpr(Expression):
    """T.class"""

    typ: Type


@dataclass
class ConditionalExpr(Expression):
    condition: Expression
    then_expr: Expression
    else_expr: Expression


@dataclass
class EnclosedExpr(Expression):
    """Parenthesized expression; parentheses are explicit in the tree."""

    inner: Expression | None = None


@dataclass
class FieldAccessExpr(Expression):
    scope: Expression
    field: str


@dataclass
class InstanceOfExpr(Expression):
    expr: Expression
    typ: Type


@dataclass
class LiteralExpr(Expression):
    """Base for literals carrying their source text. Abstract."""

    value: str


@dataclass
class StringLiteralExpr(LiteralExpr):
    """value is the escaped content between the quotes."""


@dataclass
class CharLiteralExpr(LiteralExpr):
    """value is the escaped content between the quotes."""


@dataclass
class IntegerLiteralExpr(LiteralExpr):
    pass


@dataclass
class LongLiteralExpr(LiteralExpr):
    pass


@dataclass
class DoubleLiteralExpr(LiteralExpr):
    pass


@dataclass
class IntegerLiteralMinValueExpr(LiteralExpr):
    """2147483648 as the operand of unary minus."""


@dataclass
class LongLiteralMinValueExpr(LiteralExpr):
    """9223372036854775808L as the operand of unary minus."""


@dataclass
class BooleanLiteralExpr(Expression):
    value: bool


@dataclass
class NullLiteralExpr(Expression):
    pass


@dataclass
class ThisExpr(Expression):
    """this / Outer.this"""

    class_expr: Expression | None = None


@dataclass
class SuperExpr(Expression):
    """super / Outer.super"""

    class_expr: Expression | None = None


@dataclass
class MethodCallExpr(Expression):
    name: str
    args: list[Expression] = field(default_factory=list)
    scope: Expression | None = None
    type_args: list[Type] = field(default_factory=list)


@dataclass
class ObjectCreationExpr(Expression):
    """new T(args) with an optional anonymous class body (None = no body)."""

    typ: ClassOrInterfaceType
    args: list[Expression] = field(default_factory=list)
    scope: Expression | None = None
    type_args: list[Type] = field(default_factory=list)
    anonymous_body: list[BodyDeclaration] | None = None


@dataclass
class UnaryExpr(Expression):
    """op is one of + - ~ ! ++ --; prefix=False for x++ / x--."""

    op: str
    expr: Expression
    prefix: bool = True


@dataclass
class VariableDeclarationExpr(Expression):
    """Local variable declaration: final int a = 1, b;"""

    typ: Type
    variables: list[VariableDeclarator]
    modifiers: frozenset[str] = field(default_factory=frozenset, kw_only=True)
    annotations: list[AnnotationExpr] = field(default_factory=list, kw_only=True)


@dataclass
class AnnotationExpr(Expression):
    """Base for annotations. Abstract."""

    name: NameExpr


@dataclass
class MarkerAnnotationExpr(AnnotationExpr):
    """@Name"""


@dataclass
class SingleMemberAnnotationExpr(AnnotationExpr):
    """@Name(value)"""

    member_value: Expression


@dataclass
class NormalAnnotationExpr(AnnotationExpr):
    """@Name(key = value, ...)"""

    pairs: list[MemberValuePair] = field(default_factory=list)


@dataclass
class LambdaExpr(Expression):
    parameters: list[Parameter]
    body: Statement
    parameters_enclosed: bool = True


@dataclass
class MethodReferenceExpr(Expression):
    """scope::identifier"""

    scope: Expression | None
    identifier: str
    type_parameters: list[TypeParameter] = field(default_factory=list)


@dataclass
class TypeExpr(Expression):
    """A type in expression position, e.g. the scope of `String[]::new`."""

    typ: Type | None = None


# ============================================================
# STATEMENTS
# ============================================================


@dataclass
class Statement(Node):
    """Base for statements. Abstract."""


@dataclass
class AssertStmt(Statement):
    check: Expression
    message: Expression | None = None


@dataclass
class BlockStmt(Statement):
    stmts: list[Statement] = field(default_factory=list)


@dataclass
class LabeledStmt(Statement):
    label: str
    stmt: Statement


@dataclass
class EmptyStmt(Statement):
    pass


@dataclass
class ExpressionStmt(Statement):
    expression: Expression


@dataclass
class SwitchEntryStmt(Statement):
    """case label: stmts... A None label is `default:`."""

    label: Expression | None = None
    stmts: list[Statement] = field(default_factory=list)


@dataclass
class SwitchStmt(Statement):
    selector: Expression
    entries: list[SwitchEntryStmt] = field(default_factory=list)


@dataclass
class BreakStmt(Statement):
    label: str | None = None


@dataclass
class ContinueStmt(Statement):
    label: str | None = None


@dataclass
class ReturnStmt(Statement):
    expr: Expression | None = None


@dataclass
class IfStmt(Statement):
    condition: Expression
    then_stmt: Statement
    else_stmt: Statement | None = None


@dataclass
class WhileStmt(Statement):
    condition: Expression
    body: Statement


@dataclass
class DoStmt(Statement):
    body: Statement
    condition: Expression


@dataclass
class ForeachStmt(Statement):
    variable: VariableDeclarationExpr
    iterable: Expression
    body: Statement


@dataclass
class ForStmt(Statement):
    init: list[Expression] = field(default_factory=list)
    compare: Expression | None = None
    update: list[Expression] = field(default_factory=list)
    body: Statement = field(default_factory=EmptyStmt)


@dataclass
class ThrowStmt(Statement):
    expr: Expression


@dataclass
class SynchronizedStmt(Statement):
    expr: Expression
    block: BlockStmt


@dataclass
class CatchClause(Node):
    param: Parameter | MultiTypeParameter
    body: BlockStmt


@dataclass
class TryStmt(Statement):
    """try (resources) { } catch ... finally { }"""

    resources: list[VariableDeclarationExpr] = field(default_factory=list)
    try_block: BlockStmt = field(default_factory=BlockStmt)
    catches: list[CatchClause] = field(default_factory=list)
    finally_block: BlockStmt | None = None


@dataclass
class ExplicitConstructorInvocationStmt(Statement):
    """this(args); / super(args); / outer.super(args);"""

    is_this: bool
    args: list[Expression] = field(default_factory=list)
    expr: Expression | None = None
    type_args: list[Type] = field(default_factory=list)


@dataclass
class TypeDeclarationStmt(Statement):
    """Local class declaration."""

    type_declaration: TypeDeclaration


# ============================================================
# DECLARATIONS
# ============================================================


@dataclass
class BodyDeclaration(Node):
    """Base for type members. Abstract."""

    modifiers: frozenset[str] = field(default_factory=frozenset, kw_only=True)
    annotations: list[AnnotationExpr] = field(default_factory=list, kw_only=True)


@dataclass
class TypeDeclaration(BodyDeclaration):
    """Base for class, interface, enum and annotation declarations. Abstract."""

    name: str = ""
    members: list[BodyDeclaration] = field(default_factory=list)


@dataclass
class ClassOrInterfaceDeclaration(TypeDeclaration):
    interface: bool = False
    type_parameters: list[TypeParameter] = field(default_factory=list)
    extends: list[ClassOrInterfaceType] = field(default_factory=list)
    implements: list[ClassOrInterfaceType] = field(default_factory=list)


@dataclass
class EnumConstantDeclaration(BodyDeclaration):
    """Enum constant; args None means no argument list was written."""

    name: str
    args: list[Expression] | None = None
    class_body: list[BodyDeclaration] = field(default_factory=list)


@dataclass
class EnumDeclaration(TypeDeclaration):
    implements: list[ClassOrInterfaceType] = field(default_factory=list)
    entries: list[EnumConstantDeclaration] = field(default_factory=list)


@dataclass
class EmptyTypeDeclaration(TypeDeclaration):
    """Stray `;` at type level."""


@dataclass
class AnnotationDeclaration(TypeDeclaration):
    """@interface Name { ... }"""


@dataclass
class AnnotationMemberDeclaration(BodyDeclaration):
    typ: Type
    name: str
    default_value: Expression | None = None


@dataclass
class VariableDeclaratorId(Node):
    name: str


@dataclass
class VariableDeclarator(Node):
    id: VariableDeclaratorId
    init: Expression | None = None


@dataclass
class FieldDeclaration(BodyDeclaration):
    typ: Type
    variables: list[VariableDeclarator]


@dataclass
class Parameter(Node):
    typ: Type
    id: VariableDeclaratorId
    varargs: bool = False
    modifiers: frozenset[str] = field(default_factory=frozenset, kw_only=True)
    annotations: list[AnnotationExpr] = field(default_factory=list, kw_only=True)


@dataclass
class MultiTypeParameter(Node):
    """catch (A | B e)"""

    typ: UnionType
    id: VariableDeclaratorId
    modifiers: frozenset[str] = field(default_factory=frozenset, kw_only=True)
    annotations: list[AnnotationExpr] = field(default_factory=list, kw_only=True)


@dataclass
class ConstructorDeclaration(BodyDeclaration):
    name: str
    parameters: list[Parameter] = field(default_factory=list)
    type_parameters: list[TypeParameter] = field(default_factory=list)
    throws: list[Type] = field(default_factory=list)
    body: BlockStmt = field(default_factory=BlockStmt)


@dataclass
class MethodDeclaration(BodyDeclaration):
    """Method; body None for abstract and interface methods."""

    name: str
    typ: Type
    parameters: list[Parameter] = field(default_factory=list)
    type_parameters: list[TypeParameter] = field(default_factory=list)
    throws: list[Type] = field(default_factory=list)
    body: BlockStmt | None = None
    array_count: int = 0
    default: bool = False


@dataclass
class InitializerDeclaration(BodyDeclaration):
    """{ ... } or static { ... } in a class body."""

    block: BlockStmt
    static: bool = False


@dataclass
class EmptyMemberDeclaration(BodyDeclaration):
    """Stray `;` in a class body."""


@dataclass
class MemberValuePair(Node):
    name: str
    value: Expression


@dataclass
class PackageDeclaration(Node):
    name: NameExpr


@dataclass
class ImportDeclaration(Node):
    name: NameExpr
    static: bool = False
    asterisk: bool = False


@dataclass
class CompilationUnit(Node):
    """Root of a parsed source file."""

    package: PackageDeclaration | None = None
    imports: list[ImportDeclaration] = field(default_factory=list)
    types: list[TypeDeclaration] = field(default_factory=list)


# ============================================================
# KIND REGISTRY
# ============================================================

NODE_KINDS: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        # comments
        LineComment,
        BlockComment,
        JavadocComment,
        # types
        PrimitiveType,
        VoidType,
        UnknownType,
        ClassOrInterfaceType,
        ReferenceType,
        IntersectionType,
        UnionType,
        WildcardType,
        TypeParameter,
        # expressions
        NameExpr,
        QualifiedNameExpr,
        ArrayAccessExpr,
        ArrayInitializerExpr,
        ArrayCreationExpr,
        AssignExpr,
        BinaryExpr,
        CastExpr,
        ClassExpr,
        ConditionalExpr,
        EnclosedExpr,
        FieldAccessExpr,
        InstanceOfExpr,
        StringLiteralExpr,
        CharLiteralExpr,
        IntegerLiteralExpr,
        LongLiteralExpr,
        DoubleLiteralExpr,
        IntegerLiteralMinValueExpr,
        LongLiteralMinValueExpr,
        BooleanLiteralExpr,
        NullLiteralExpr,
        ThisExpr,
        SuperExpr,
        MethodCallExpr,
        ObjectCreationExpr,
        UnaryExpr,
        VariableDeclarationExpr,
        MarkerAnnotationExpr,
        SingleMemberAnnotationExpr,
        NormalAnnotationExpr,
        LambdaExpr,
        MethodReferenceExpr,
        TypeExpr,
        # statements
        AssertStmt,
        BlockStmt,
        LabeledStmt,
        EmptyStmt,
        ExpressionStmt,
        SwitchEntryStmt,
        SwitchStmt,
        BreakStmt,
        ContinueStmt,
        ReturnStmt,
        IfStmt,
        WhileStmt,
        DoStmt,
        ForeachStmt,
        ForStmt,
        ThrowStmt,
        SynchronizedStmt,
        CatchClause,
        TryStmt,
        ExplicitConstructorInvocationStmt,
        TypeDeclarationStmt,
        # declarations
        ClassOrInterfaceDeclaration,
        EnumConstantDeclaration,
        EnumDeclaration,
        EmptyTypeDeclaration,
        AnnotationDeclaration,
        AnnotationMemberDeclaration,
        VariableDeclaratorId,
        VariableDeclarator,
        FieldDeclaration,
        Parameter,
        MultiTypeParameter,
        ConstructorDeclaration,
        MethodDeclaration,
        InitializerDeclaration,
        EmptyMemberDeclaration,
        MemberValuePair,
        PackageDeclaration,
        ImportDeclaration,
        CompilationUnit,
    )
}
"""Concrete node kinds by discriminant name."""
