"""Tests for component detection predicates."""

import pytest
from displayname.core.ast_parser import parse_source
from displayname.core.transform import TransformOptions
from displayname.core.transform import predicates


def _find(node, node_type):
    """First node of the given type, depth first."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == node_type:
            return current
        stack.extend(reversed(current.children))
    return None


@pytest.fixture
def defaults():
    return TransformOptions()


# =========================================================================
# Tests: Classification
# =========================================================================

class TestClassification:
    def test_declaration_statements(self):
        unit = parse_source("let a = 1;\nvar b = 2;\n", "a.ts")
        first, second = unit.root.named_children
        assert predicates.is_declaration_statement(first)
        assert predicates.is_declaration_statement(second)

    def test_for_initializer_is_not_a_statement(self):
        unit = parse_source("for (let i = 0; i < 3; i++) {}\n", "a.ts")
        declaration = _find(unit.root, "lexical_declaration")
        assert not predicates.is_declaration_statement(declaration)

    def test_declare_is_not_a_statement(self):
        unit = parse_source("export declare const A: React.FC;\n", "a.ts")
        declaration = _find(unit.root, "lexical_declaration")
        assert predicates.is_ambient(declaration)
        assert not predicates.is_declaration_statement(declaration)

    def test_declare_class_is_not_a_class_declaration(self):
        unit = parse_source("declare class A extends React.Component {}\n", "a.ts")
        node = _find(unit.root, "class_declaration")
        assert not predicates.is_class_declaration(node)

    def test_statement_of_export(self):
        unit = parse_source("export const A = 1;\n", "a.ts")
        declaration = _find(unit.root, "lexical_declaration")
        assert predicates.statement_of(declaration).type == "export_statement"

    def test_anonymous_default_class(self):
        unit = parse_source("export default class extends Base {}\n", "a.tsx")
        node = _find(unit.root, "class")
        assert predicates.is_class_declaration(node)
        assert predicates.class_name(node, unit) is None

    def test_destructuring_has_no_declared_name(self):
        unit = parse_source("const { a } = b;\n", "a.ts")
        declarator = _find(unit.root, "variable_declarator")
        assert predicates.declared_name(declarator, unit) is None


# =========================================================================
# Tests: Heritage
# =========================================================================

class TestHeritage:
    def test_extends_and_implements(self):
        unit = parse_source(
            "class A extends Base.Component<P, S> implements Foo, Bar {}\n", "a.ts"
        )
        node = _find(unit.root, "class_declaration")
        assert list(predicates.heritage_type_texts(node, unit)) == [
            "Base.Component<P, S>",
            "Foo",
            "Bar",
        ]

    def test_javascript_heritage(self):
        unit = parse_source("class A extends React.PureComponent {}\n", "a.jsx")
        node = _find(unit.root, "class_declaration")
        assert list(predicates.heritage_type_texts(node, unit)) == ["React.PureComponent"]

    def test_base_class_prefix_match(self, defaults):
        unit = parse_source("class A extends React.Component<Props> {}\n", "a.tsx")
        node = _find(unit.root, "class_declaration")
        assert predicates.is_base_class_candidate(node, unit, defaults)

    def test_other_base_class(self, defaults):
        unit = parse_source("class A extends Component {}\n", "a.tsx")
        node = _find(unit.root, "class_declaration")
        assert not predicates.is_base_class_candidate(node, unit, defaults)


# =========================================================================
# Tests: Function typed
# =========================================================================

class TestFunctionTyped:
    @pytest.mark.parametrize("source,expected", [
        ("const A: React.FC = f;", True),
        ("const A: React.FC<Props> = f;", True),
        ("const A: React.FunctionComponent<{}> = f;", True),
        ("const A: FC = f;", False),
        ("const A: React.FC | null = f;", False),
        ("const A = f;", False),
    ])
    def test_annotations(self, defaults, source, expected):
        unit = parse_source(source + "\n", "a.tsx")
        declarator = _find(unit.root, "variable_declarator")
        assert predicates.is_function_typed_candidate(declarator, unit, defaults) is expected


# =========================================================================
# Tests: Factory wrapped
# =========================================================================

class TestFactoryWrapped:
    def _value(self, source, file_path="a.tsx"):
        unit = parse_source(source + "\n", file_path)
        declarator = _find(unit.root, "variable_declarator")
        return unit, declarator.child_by_field_name("value")

    @pytest.mark.parametrize("source,expected", [
        ("const A = React.memo(Inner);", True),
        ("const A = React.forwardRef<HTMLElement, Props>(render);", True),
        ("const A = React.memo.bind(null)(Inner);", True),
        ("const A = memo(Inner);", False),
        ("const A = Inner;", False),
        ("const A = React.memo`x`;", False),
        ("const A = other.React.memo(Inner);", False),
    ])
    def test_default_factories(self, defaults, source, expected):
        unit, value = self._value(source)
        assert predicates.is_factory_wrapped_candidate(value, unit, defaults) is expected

    def test_custom_bare_name(self):
        options = TransformOptions(factory_function_names=("memo",))
        unit, value = self._value("const A = memo(Inner);")
        assert predicates.is_factory_wrapped_candidate(value, unit, options)


# =========================================================================
# Tests: Existing names
# =========================================================================

class TestExistingNames:
    def test_static_member(self):
        unit = parse_source(
            "class A extends B {\n  static displayName = 'A'\n}\n", "a.tsx"
        )
        node = _find(unit.root, "class_declaration")
        assert predicates.has_static_name_member(node, unit)

    def test_instance_member_does_not_count(self):
        unit = parse_source("class A extends B {\n  displayName = 'A'\n}\n", "a.tsx")
        node = _find(unit.root, "class_declaration")
        assert not predicates.has_static_name_member(node, unit)

    def test_static_getter_does_not_count(self):
        unit = parse_source(
            "class A extends B {\n  static get displayName() { return 'A' }\n}\n", "a.tsx"
        )
        node = _find(unit.root, "class_declaration")
        assert not predicates.has_static_name_member(node, unit)

    def test_prior_assignment_index(self):
        source = (
            "const A = React.memo(X);\n"
            "A.displayName = 'A';\n"
            "B.displayName = computeName();\n"
            "C.other = 'C';\n"
            "this.displayName = 'D';\n"
        )
        unit = parse_source(source, "a.tsx")
        statement = unit.root.named_children[0]
        assert predicates.prior_assignment_index(statement, unit) == {"A": True, "B": True}
