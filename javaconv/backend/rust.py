"""RustBackend: Java syntax tree -> Rust-flavoured source text.

A structural transliteration, not a compiler: every node kind has one
`_emit_<Kind>` rule that re-emits the node with Rust spellings for types,
operators, literals and identifiers, keeping the tree's shape (blocks,
explicit parentheses, member order). Nothing is type checked.

Node kinds without a rule raise NotImplementedError so gaps are obvious.
`UnknownType` and annotations are deliberately silent.
"""

from __future__ import annotations

from javaconv.ast import (
    AnnotationDeclaration,
    AnnotationMemberDeclaration,
    ArrayAccessExpr,
    ArrayCreationExpr,
    ArrayInitializerExpr,
    AssertStmt,
    AssignExpr,
    BinaryExpr,
    BlockComment,
    BlockStmt,
    BodyDeclaration,
    BooleanLiteralExpr,
    BreakStmt,
    CastExpr,
    CatchClause,
    CharLiteralExpr,
    ClassExpr,
    ClassOrInterfaceDeclaration,
    ClassOrInterfaceType,
    CompilationUnit,
    ConditionalExpr,
    ConstructorDeclaration,
    ContinueStmt,
    DoStmt,
    DoubleLiteralExpr,
    EmptyMemberDeclaration,
    EmptyStmt,
    EmptyTypeDeclaration,
    EnclosedExpr,
    EnumConstantDeclaration,
    EnumDeclaration,
    ExplicitConstructorInvocationStmt,
    Expression,
    ExpressionStmt,
    FieldAccessExpr,
    FieldDeclaration,
    ForeachStmt,
    ForStmt,
    IfStmt,
    ImportDeclaration,
    InitializerDeclaration,
    InstanceOfExpr,
    IntegerLiteralExpr,
    IntegerLiteralMinValueExpr,
    IntersectionType,
    JavadocComment,
    LabeledStmt,
    LambdaExpr,
    LineComment,
    LongLiteralExpr,
    LongLiteralMinValueExpr,
    MarkerAnnotationExpr,
    MemberValuePair,
    MethodCallExpr,
    MethodDeclaration,
    MethodReferenceExpr,
    MultiTypeParameter,
    NameExpr,
    Node,
    NormalAnnotationExpr,
    NullLiteralExpr,
    ObjectCreationExpr,
    PackageDeclaration,
    Parameter,
    PrimitiveType,
    QualifiedNameExpr,
    ReferenceType,
    ReturnStmt,
    SingleMemberAnnotationExpr,
    StringLiteralExpr,
    SuperExpr,
    SwitchEntryStmt,
    SwitchStmt,
    SynchronizedStmt,
    ThisExpr,
    ThrowStmt,
    TryStmt,
    Type,
    TypeDeclarationStmt,
    TypeExpr,
    TypeParameter,
    UnaryExpr,
    UnionType,
    UnknownType,
    VariableDeclarationExpr,
    VariableDeclarator,
    VariableDeclaratorId,
    VoidType,
    WhileStmt,
    WildcardType,
)
from javaconv.backend.comments import Siblings, comments_before, trailing_comments
from javaconv.backend.tables import (
    RESULT_TEMPLATE,
    TEST_MARKER,
    assign_op,
    binary_op,
    char_literal,
    double_literal,
    integer_literal,
    primitive_type,
    string_literal,
    unary_op,
)
from javaconv.backend.util import Emitter, to_snake

# Java modifier keywords in printing order
MODIFIER_ORDER: tuple[str, ...] = (
    "private",
    "protected",
    "public",
    "abstract",
    "static",
    "final",
    "native",
    "strictfp",
    "synchronized",
    "transient",
    "volatile",
)

_PATH_SEPARATORS = ("\n", "\t", " ", ".")


def _names_type(scope_text: str) -> bool:
    """True if the last path segment of rendered scope text starts uppercase.

    `Foo` or `a.b.Foo` name a type (static path); `foo` or `this.foo` name a value.
    """
    cut = max(scope_text.rfind(sep) for sep in _PATH_SEPARATORS)
    segment = scope_text if cut <= 0 else scope_text[cut + 1 :]
    return segment[:1].isupper()


def emit_rust(
    root: Node, print_comments: bool = True, indent_str: str = "    "
) -> str:
    """Render a syntax tree as Rust-flavoured source text."""
    return RustBackend(print_comments, indent_str).emit(root)


class RustBackend:
    """Emit Rust-flavoured source from a Java syntax tree."""

    def __init__(self, print_comments: bool = True, indent_str: str = "    ") -> None:
        self.print_comments = print_comments
        self._indent_str = indent_str
        self.out = Emitter(indent_str)
        self._siblings: dict[int, Siblings] = {}

    def emit(self, root: Node) -> str:
        self.out = Emitter(self._indent_str)
        self._siblings = {}
        try:
            self._render(root, None)
        finally:
            self._siblings = {}
        return self.out.finish()

    # ── dispatch ─────────────────────────────────────────────

    def _render(self, node: Node, parent: Node | None) -> None:
        """Render `node`, a child of `parent` (None when it has no sibling context)."""
        self._enter(node, parent)
        self._rule(node)(node)

    def _enter(self, node: Node, parent: Node | None) -> None:
        siblings = None if parent is None else self._context(parent)
        for comment in comments_before(node, siblings):
            self._render(comment, None)
        if node.comment is not None:
            self._render(node.comment, None)

    def _context(self, parent: Node) -> Siblings:
        """Sorted children of `parent`, built once per render."""
        siblings = self._siblings.get(id(parent))
        if siblings is None or siblings.parent is not parent:
            siblings = Siblings(parent)
            self._siblings[id(parent)] = siblings
        return siblings

    def _rule(self, node: Node):
        rule = getattr(self, "_emit_" + type(node).__name__, None)
        if rule is None:
            raise NotImplementedError(f"Rust node: {type(node).__name__}")
        return rule

    def _capture(self, node: Node, parent: Node | None) -> str:
        """Render `node` into an isolated scratch sink and return its text."""
        main = self.out
        self.out = main.scratch()
        try:
            self._render(node, parent)
            return self.out.finish()
        finally:
            self.out = main

    # ── helpers ──────────────────────────────────────────────

    def _join(self, nodes: list, parent: Node, sep: str = ", ") -> None:
        first = True
        for node in nodes:
            if not first:
                self.out.print(sep)
            first = False
            self._render(node, parent)

    def _print_trailing(self, node: Node) -> None:
        for comment in trailing_comments(self._context(node)):
            self._render(comment, None)

    def _print_annotations(self, n: Node) -> None:
        # annotations print nothing, but comments around them still must
        for annotation in n.annotations:
            self._render(annotation, n)

    def _print_keywords(self, modifiers: frozenset[str]) -> None:
        for keyword in MODIFIER_ORDER:
            if keyword in modifiers:
                self.out.print(keyword + " ")

    def _print_modifiers(self, n: Node) -> None:
        self._print_annotations(n)
        self._print_keywords(n.modifiers)

    def _print_members(self, members: list[BodyDeclaration], parent: Node) -> None:
        for member in members:
            self.out.newline()
            self._render(member, parent)
            self.out.newline()

    def _print_type_args(self, args: list[Type], parent: Node) -> None:
        if args:
            self.out.print("<")
            self._join(args, parent)
            self.out.print(">")

    def _print_type_parameters(self, params: list[TypeParameter], parent: Node) -> None:
        if params:
            self.out.print("<")
            self._join(params, parent)
            self.out.print(">")

    def _print_arguments(self, args: list[Expression], parent: Node) -> None:
        self.out.print("(")
        self._join(args, parent)
        self.out.print(")")

    def _print_type_list(self, keyword: str, types: list, parent: Node) -> None:
        if types:
            self.out.print(f" {keyword} ")
            self._join(types, parent)

    # ── comments ─────────────────────────────────────────────

    def _emit_LineComment(self, n: LineComment) -> None:
        if not self.print_comments:
            return
        self.out.print("//")
        self.out.line(n.content.replace("\r", " ").replace("\n", " "))

    def _emit_BlockComment(self, n: BlockComment) -> None:
        if not self.print_comments:
            return
        self.out.print("/*")
        self.out.print(n.content)
        self.out.line("*/")

    def _emit_JavadocComment(self, n: JavadocComment) -> None:
        self.out.print("/**")
        self.out.print(n.content)
        self.out.line("*/")

    # ── compilation unit ─────────────────────────────────────

    def _emit_CompilationUnit(self, n: CompilationUnit) -> None:
        if n.package is not None:
            self._render(n.package, n)
        if n.imports:
            for imp in n.imports:
                self._render(imp, n)
            self.out.newline()
        for i, typ in enumerate(n.types):
            self._render(typ, n)
            self.out.newline()
            if i < len(n.types) - 1:
                self.out.newline()
        self._print_trailing(n)

    def _emit_PackageDeclaration(self, n: PackageDeclaration) -> None:
        self.out.print("package ")
        self._render(n.name, n)
        self.out.line(";")
        self.out.newline()
        self._print_trailing(n)

    def _emit_ImportDeclaration(self, n: ImportDeclaration) -> None:
        self.out.print("import ")
        if n.static:
            self.out.print("static ")
        self._render(n.name, n)
        if n.asterisk:
            self.out.print(".*")
        self.out.line(";")
        self._print_trailing(n)

    # ── type declarations ────────────────────────────────────

    def _emit_ClassOrInterfaceDeclaration(self, n: ClassOrInterfaceDeclaration) -> None:
        self._print_modifiers(n)
        self.out.print("interface " if n.interface else "class ")
        self.out.print(n.name)
        self._print_type_parameters(n.type_parameters, n)
        self._print_type_list("extends", n.extends, n)
        self._print_type_list("implements", n.implements, n)
        self.out.line(" {")
        self.out.indent()
        self._print_members(n.members, n)
        self._print_trailing(n)
        self.out.unindent()
        self.out.print("}")

    def _emit_EnumDeclaration(self, n: EnumDeclaration) -> None:
        self._print_modifiers(n)
        self.out.print("enum ")
        self.out.print(n.name)
        self._print_type_list("implements", n.implements, n)
        self.out.line(" {")
        self.out.indent()
        if n.entries:
            self.out.newline()
            self._join(n.entries, n)
        if n.members:
            self.out.line(";")
            self._print_members(n.members, n)
        elif n.entries:
            self.out.newline()
        self._print_trailing(n)
        self.out.unindent()
        self.out.print("}")

    def _emit_EnumConstantDeclaration(self, n: EnumConstantDeclaration) -> None:
        self._print_annotations(n)
        self.out.print(n.name)
        if n.args is not None:
            self._print_arguments(n.args, n)
        if n.class_body:
            self.out.line(" {")
            self.out.indent()
            self._print_members(n.class_body, n)
            self.out.unindent()
            self.out.line("}")

    def _emit_EmptyTypeDeclaration(self, n: EmptyTypeDeclaration) -> None:
        self.out.print(";")
        self._print_trailing(n)

    def _emit_AnnotationDeclaration(self, n: AnnotationDeclaration) -> None:
        pass  # no Rust counterpart

    def _emit_AnnotationMemberDeclaration(self, n: AnnotationMemberDeclaration) -> None:
        pass  # no Rust counterpart

    # ── members ──────────────────────────────────────────────

    def _emit_FieldDeclaration(self, n: FieldDeclaration) -> None:
        self._print_modifiers(n)
        self._render(n.typ, n)
        self.out.print(" ")
        self._join(n.variables, n)
        self.out.print(";")

    def _emit_VariableDeclarator(self, n: VariableDeclarator) -> None:
        self._declarator(n, None)

    def _declarator(self, n: VariableDeclarator, typ: Type | None) -> None:
        """name[: Type][ = init]; the type is given only for local declarations.

        The caller has already printed the comments that precede `typ`.
        """
        self._render(n.id, n)
        if typ is not None and not isinstance(n.init, ArrayInitializerExpr):
            self.out.print(": ")
            self._rule(typ)(typ)
        if n.init is not None:
            self.out.print(" = ")
            self._render(n.init, n)

    def _emit_VariableDeclaratorId(self, n: VariableDeclaratorId) -> None:
        self.out.print(to_snake(n.name))

    def _emit_ConstructorDeclaration(self, n: ConstructorDeclaration) -> None:
        self._print_modifiers(n)
        if n.type_parameters:
            self._print_type_parameters(n.type_parameters, n)
            self.out.print(" ")
        self.out.print(n.name)
        self.out.print("(")
        self._join(n.parameters, n)
        self.out.print(")")
        self._print_type_list("throws", n.throws, n)
        self.out.print(" ")
        self._render(n.body, n)

    def _emit_MethodDeclaration(self, n: MethodDeclaration) -> None:
        self._print_annotations(n)
        if any(a.name.name == "Test" for a in n.annotations):
            self.out.line(TEST_MARKER)
        self._print_keywords(n.modifiers)
        self.out.print("fn ")
        if n.default:
            self.out.print("default ")
        if n.type_parameters:
            self._print_type_parameters(n.type_parameters, n)
            self.out.print(" ")
        ret = self._capture(n.typ, n)
        self.out.print(to_snake(n.name))
        self.out.print("(")
        if "static" not in n.modifiers:
            self.out.print("&self")
            if n.parameters:
                self.out.print(", ")
        self._join(n.parameters, n)
        self.out.print(") -> ")
        if n.array_count > 0:
            self.out.print("/* " + "[]" * n.array_count + " */ ")
        if n.throws:
            # no error propagation is modelled: wrap the type, keep the names
            self.out.print("/* throws ")
            self._join(n.throws, n)
            self.out.print(" */ ")
            self.out.print(RESULT_TEMPLATE.format(ret))
        else:
            self.out.print(ret)
        if n.body is None:
            self.out.print(";")
        else:
            self.out.print(" ")
            self._render(n.body, n)

    def _emit_Parameter(self, n: Parameter) -> None:
        self._print_modifiers(n)
        self._render(n.typ, n)
        if n.varargs:
            self.out.print("...")
        self.out.print(" ")
        self._render(n.id, n)

    def _emit_MultiTypeParameter(self, n: MultiTypeParameter) -> None:
        self._print_modifiers(n)
        self._render(n.typ, n)
        self.out.print(" ")
        self._render(n.id, n)

    def _emit_InitializerDeclaration(self, n: InitializerDeclaration) -> None:
        self._print_annotations(n)
        if n.static:
            self.out.print("static ")
        self._render(n.block, n)

    def _emit_EmptyMemberDeclaration(self, n: EmptyMemberDeclaration) -> None:
        self.out.print(";")

    def _emit_MemberValuePair(self, n: MemberValuePair) -> None:
        self.out.print(n.name)
        self.out.print(" = ")
        self._render(n.value, n)

    # ── types ────────────────────────────────────────────────

    def _emit_PrimitiveType(self, n: PrimitiveType) -> None:
        self.out.print(primitive_type(n.name))

    def _emit_VoidType(self, n: VoidType) -> None:
        self.out.print("void")

    def _emit_UnknownType(self, n: UnknownType) -> None:
        pass

    def _emit_ClassOrInterfaceType(self, n: ClassOrInterfaceType) -> None:
        if n.scope is not None:
            self._render(n.scope, n)
            self.out.print(".")
        self.out.print(n.name)
        if n.diamond:
            self.out.print("<>")
        else:
            self._print_type_args(n.type_args, n)

    def _emit_ReferenceType(self, n: ReferenceType) -> None:
        self._render(n.typ, n)
        self.out.print("[]" * n.array_count)

    def _emit_IntersectionType(self, n: IntersectionType) -> None:
        self._join(n.elements, n, " & ")

    def _emit_UnionType(self, n: UnionType) -> None:
        self._join(n.elements, n, " | ")

    def _emit_WildcardType(self, n: WildcardType) -> None:
        self.out.print("?")
        if n.extends_bound is not None:
            self.out.print(" extends ")
            self._render(n.extends_bound, n)
        if n.super_bound is not None:
            self.out.print(" super ")
            self._render(n.super_bound, n)

    def _emit_TypeParameter(self, n: TypeParameter) -> None:
        self.out.print(n.name)
        if n.bounds:
            self.out.print(" extends ")
            self._join(n.bounds, n, " & ")

    # ── names and literals ───────────────────────────────────

    def _emit_NameExpr(self, n: NameExpr) -> None:
        self.out.print(to_snake(n.name))
        self._print_trailing(n)

    def _emit_QualifiedNameExpr(self, n: QualifiedNameExpr) -> None:
        self._render(n.qualifier, n)
        self.out.print("::")
        self.out.print(n.name)
        self._print_trailing(n)

    def _emit_StringLiteralExpr(self, n: StringLiteralExpr) -> None:
        self.out.print(string_literal(n.value))

    def _emit_CharLiteralExpr(self, n: CharLiteralExpr) -> None:
        self.out.print(char_literal(n.value))

    def _emit_IntegerLiteralExpr(self, n: IntegerLiteralExpr) -> None:
        self.out.print(integer_literal(n.value))

    def _emit_LongLiteralExpr(self, n: LongLiteralExpr) -> None:
        self.out.print(integer_literal(n.value))

    def _emit_DoubleLiteralExpr(self, n: DoubleLiteralExpr) -> None:
        self.out.print(double_literal(n.value))

    def _emit_IntegerLiteralMinValueExpr(self, n: IntegerLiteralMinValueExpr) -> None:
        self.out.print(n.value)

    def _emit_LongLiteralMinValueExpr(self, n: LongLiteralMinValueExpr) -> None:
        self.out.print(n.value)

    def _emit_BooleanLiteralExpr(self, n: BooleanLiteralExpr) -> None:
        self.out.print("true" if n.value else "false")

    def _emit_NullLiteralExpr(self, n: NullLiteralExpr) -> None:
        self.out.print("null")

    # ── expressions ──────────────────────────────────────────

    def _emit_ArrayAccessExpr(self, n: ArrayAccessExpr) -> None:
        self._render(n.name, n)
        self.out.print("[")
        self._render(n.index, n)
        self.out.print("]")

    def _emit_ArrayCreationExpr(self, n: ArrayCreationExpr) -> None:
        if n.dimensions:
            self._render(n.typ, n)
            for dim in n.dimensions:
                self.out.print("[")
                self._render(dim, n)
                self.out.print("]")
            self.out.print("[]" * n.array_count)
        else:
            self.out.print("[]" * n.array_count)
            self.out.print(" ")
            if n.initializer is not None:
                self._render(n.initializer, n)

    def _emit_ArrayInitializerExpr(self, n: ArrayInitializerExpr) -> None:
        self.out.print("{")
        if n.values:
            self.out.print(" ")
            self._join(n.values, n)
            self.out.print(" ")
        self.out.print("}")

    def _emit_AssignExpr(self, n: AssignExpr) -> None:
        self._render(n.target, n)
        self.out.print(" " + assign_op(n.op) + " ")
        self._render(n.value, n)

    def _emit_BinaryExpr(self, n: BinaryExpr) -> None:
        self._render(n.left, n)
        self.out.print(" " + binary_op(n.op) + " ")
        self._render(n.right, n)

    def _emit_UnaryExpr(self, n: UnaryExpr) -> None:
        op = unary_op(n.op, n.prefix)
        if n.prefix:
            self.out.print(op)
        self._render(n.expr, n)
        if not n.prefix:
            self.out.print(op)

    def _emit_CastExpr(self, n: CastExpr) -> None:
        self.out.print("(")
        self._render(n.typ, n)
        self.out.print(") ")
        self._render(n.expr, n)

    def _emit_ClassExpr(self, n: ClassExpr) -> None:
        self._render(n.typ, n)
        self.out.print(".class")

    def _emit_ConditionalExpr(self, n: ConditionalExpr) -> None:
        self._render(n.condition, n)
        self.out.print(" ? ")
        self._render(n.then_expr, n)
        self.out.print(" : ")
        self._render(n.else_expr, n)

    def _emit_EnclosedExpr(self, n: EnclosedExpr) -> None:
        self.out.print("(")
        if n.inner is not None:
            self._render(n.inner, n)
        self.out.print(")")

    def _emit_FieldAccessExpr(self, n: FieldAccessExpr) -> None:
        # the scope text decides between a path (Foo::bar) and a member (foo.bar)
        mark = self.out.checkpoint()
        self._render(n.scope, n)
        scope_text = self.out.peek(mark)
        self.out.discard(mark)
        self.out.print("::" if _names_type(scope_text) else ".")
        self.out.print(n.field)

    def _emit_InstanceOfExpr(self, n: InstanceOfExpr) -> None:
        self._render(n.expr, n)
        self.out.print(" instanceof ")
        self._render(n.typ, n)

    def _emit_ThisExpr(self, n: ThisExpr) -> None:
        if n.class_expr is not None:
            self._render(n.class_expr, n)
            self.out.print(".")
        self.out.print("this")

    def _emit_SuperExpr(self, n: SuperExpr) -> None:
        if n.class_expr is not None:
            self._render(n.class_expr, n)
            self.out.print(".")
        self.out.print("super")

    def _emit_MethodCallExpr(self, n: MethodCallExpr) -> None:
        if n.scope is not None:
            self._render(n.scope, n)
            self.out.print(".")
        self._print_type_args(n.type_args, n)
        self.out.print(to_snake(n.name))
        self._print_arguments(n.args, n)

    def _emit_ObjectCreationExpr(self, n: ObjectCreationExpr) -> None:
        if n.scope is not None:
            self._render(n.scope, n)
            self.out.print(".")
        self.out.print("new ")
        if n.type_args:
            self._print_type_args(n.type_args, n)
            self.out.print(" ")
        self._render(n.typ, n)
        self._print_arguments(n.args, n)
        if n.anonymous_body is not None:
            self.out.line(" {")
            self.out.indent()
            self._print_members(n.anonymous_body, n)
            self.out.unindent()
            self.out.print("}")

    def _emit_VariableDeclarationExpr(self, n: VariableDeclarationExpr) -> None:
        self._print_modifiers(n)
        # the type is repeated per declarator; its comments print once, in place
        self._enter(n.typ, n)
        self.out.print("let ")
        first = True
        for var in n.variables:
            if not first:
                self.out.print(", ")
            first = False
            self._enter(var, n)
            self._declarator(var, n.typ)

    def _emit_LambdaExpr(self, n: LambdaExpr) -> None:
        if n.parameters_enclosed:
            self.out.print("(")
        self._join(n.parameters, n)
        if n.parameters_enclosed:
            self.out.print(")")
        self.out.print(" -> ")
        if isinstance(n.body, ExpressionStmt):
            self._enter(n.body, n)
            self._render(n.body.expression, n.body)
        else:
            self._render(n.body, n)

    def _emit_MethodReferenceExpr(self, n: MethodReferenceExpr) -> None:
        if n.scope is not None:
            self._render(n.scope, n)
        self.out.print("::")
        self._print_type_parameters(n.type_parameters, n)
        self.out.print(n.identifier)

    def _emit_TypeExpr(self, n: TypeExpr) -> None:
        if n.typ is not None:
            self._render(n.typ, n)

    def _emit_MarkerAnnotationExpr(self, n: MarkerAnnotationExpr) -> None:
        pass

    def _emit_SingleMemberAnnotationExpr(self, n: SingleMemberAnnotationExpr) -> None:
        pass

    def _emit_NormalAnnotationExpr(self, n: NormalAnnotationExpr) -> None:
        pass

    # ── statements ───────────────────────────────────────────

    def _emit_BlockStmt(self, n: BlockStmt) -> None:
        self.out.line("{")
        self.out.indent()
        for stmt in n.stmts:
            self._render(stmt, n)
            self.out.newline()
        self.out.unindent()
        self._print_trailing(n)
        self.out.print("}")

    def _emit_ExpressionStmt(self, n: ExpressionStmt) -> None:
        self._render(n.expression, n)
        self.out.print(";")

    def _emit_EmptyStmt(self, n: EmptyStmt) -> None:
        self.out.print(";")

    def _emit_LabeledStmt(self, n: LabeledStmt) -> None:
        self.out.print(n.label)
        self.out.print(": ")
        self._render(n.stmt, n)

    def _emit_AssertStmt(self, n: AssertStmt) -> None:
        self.out.print("assert ")
        self._render(n.check, n)
        if n.message is not None:
            self.out.print(" : ")
            self._render(n.message, n)
        self.out.print(";")

    def _emit_IfStmt(self, n: IfStmt) -> None:
        self.out.print("if (")
        self._render(n.condition, n)
        then_block = isinstance(n.then_stmt, BlockStmt)
        if then_block:
            self.out.print(") ")
        else:
            self.out.line(")")
            self.out.indent()
        self._render(n.then_stmt, n)
        if not then_block:
            self.out.unindent()
        if n.else_stmt is None:
            return
        if then_block:
            self.out.print(" ")
        else:
            self.out.newline()
        # else-if chains and else blocks stay on the `else` line
        inline = isinstance(n.else_stmt, (IfStmt, BlockStmt))
        if inline:
            self.out.print("else ")
        else:
            self.out.line("else")
            self.out.indent()
        self._render(n.else_stmt, n)
        if not inline:
            self.out.unindent()

    def _emit_WhileStmt(self, n: WhileStmt) -> None:
        self.out.print("while (")
        self._render(n.condition, n)
        self.out.print(") ")
        self._render(n.body, n)

    def _emit_DoStmt(self, n: DoStmt) -> None:
        self.out.print("do ")
        self._render(n.body, n)
        self.out.print(" while (")
        self._render(n.condition, n)
        self.out.print(");")

    def _emit_ForStmt(self, n: ForStmt) -> None:
        self.out.print("for (")
        self._join(n.init, n)
        self.out.print("; ")
        if n.compare is not None:
            self._render(n.compare, n)
        self.out.print("; ")
        self._join(n.update, n)
        self.out.print(") ")
        self._render(n.body, n)

    def _emit_ForeachStmt(self, n: ForeachStmt) -> None:
        self.out.print("for (")
        self._render(n.variable, n)
        self.out.print(" : ")
        self._render(n.iterable, n)
        self.out.print(") ")
        self._render(n.body, n)

    def _emit_SwitchStmt(self, n: SwitchStmt) -> None:
        self.out.print("switch(")
        self._render(n.selector, n)
        self.out.line(") {")
        self.out.indent()
        for entry in n.entries:
            self._render(entry, n)
        self._print_trailing(n)
        self.out.unindent()
        self.out.print("}")

    def _emit_SwitchEntryStmt(self, n: SwitchEntryStmt) -> None:
        if n.label is not None:
            self.out.print("case ")
            self._render(n.label, n)
            self.out.print(":")
        else:
            self.out.print("default:")
        self.out.newline()
        self.out.indent()
        for stmt in n.stmts:
            self._render(stmt, n)
            self.out.newline()
        self._print_trailing(n)
        self.out.unindent()

    def _emit_BreakStmt(self, n: BreakStmt) -> None:
        self.out.print("break")
        if n.label is not None:
            self.out.print(" " + n.label)
        self.out.print(";")

    def _emit_ContinueStmt(self, n: ContinueStmt) -> None:
        self.out.print("continue")
        if n.label is not None:
            self.out.print(" " + n.label)
        self.out.print(";")

    def _emit_ReturnStmt(self, n: ReturnStmt) -> None:
        self.out.print("return")
        if n.expr is not None:
            self.out.print(" ")
            self._render(n.expr, n)
        self.out.print(";")

    def _emit_ThrowStmt(self, n: ThrowStmt) -> None:
        self.out.print("throw ")
        self._render(n.expr, n)
        self.out.print(";")

    def _emit_SynchronizedStmt(self, n: SynchronizedStmt) -> None:
        self.out.print("synchronized (")
        self._render(n.expr, n)
        self.out.print(") ")
        self._render(n.block, n)

    def _emit_TryStmt(self, n: TryStmt) -> None:
        self.out.print("try ")
        if n.resources:
            self.out.print("(")
            last = len(n.resources) - 1
            for i, resource in enumerate(n.resources):
                self._render(resource, n)
                if i < last:
                    self.out.line(";")
                    # resources after the first sit one level deeper
                    if i == 0:
                        self.out.indent()
            if last > 0:
                self.out.unindent()
            self.out.print(") ")
        self._render(n.try_block, n)
        for catch in n.catches:
            self._render(catch, n)
        if n.finally_block is not None:
            self.out.print(" finally ")
            self._render(n.finally_block, n)

    def _emit_CatchClause(self, n: CatchClause) -> None:
        self.out.print(" catch (")
        self._render(n.param, n)
        self.out.print(") ")
        self._render(n.body, n)

    def _emit_ExplicitConstructorInvocationStmt(
        self, n: ExplicitConstructorInvocationStmt
    ) -> None:
        if n.is_this:
            self._print_type_args(n.type_args, n)
            self.out.print("this")
        else:
            if n.expr is not None:
                self._render(n.expr, n)
                self.out.print(".")
            self._print_type_args(n.type_args, n)
            self.out.print("super")
        self._print_arguments(n.args, n)
        self.out.print(";")

    def _emit_TypeDeclarationStmt(self, n: TypeDeclarationStmt) -> None:
        self._render(n.type_declaration, n)
