"""Tests for node synthesis and splice application."""

import pytest
from displayname.core.ast_parser import parse_source
from displayname.core.transform import Splice, apply_splices, make_assignment, make_static_member
from displayname.core.transform.rewriter import MEMBER, SIBLING
from displayname.core.transform.synthesizer import string_literal


# =========================================================================
# Tests: Synthesizer
# =========================================================================

class TestSynthesizer:
    def test_assignment(self):
        assert make_assignment("Button", "Button").render() == 'Button.displayName = "Button";'

    def test_static_member(self):
        assert make_static_member("Panel").render() == 'static displayName = "Panel";'

    def test_string_escaping(self):
        assert string_literal('say "hi"\\') == '"say \\"hi\\"\\\\"'

    def test_non_ascii_kept(self):
        assert string_literal("Schaltfläche") == '"Schaltfläche"'


# =========================================================================
# Tests: Splices
# =========================================================================

class TestApplySplices:
    def test_no_splices_returns_same_unit(self):
        unit = parse_source("const a = 1;\n", "a.ts")
        assert apply_splices(unit, []) is unit

    def test_sibling_after_statement(self):
        unit = parse_source("const a = 1;\nconst b = 2;\n", "a.ts")
        first = unit.root.named_children[0]
        rewritten = apply_splices(
            unit, [Splice(anchor=first, placement=SIBLING, nodes=[make_assignment("a", "a")])]
        )
        assert rewritten.source_text == 'const a = 1;\na.displayName = "a";\nconst b = 2;\n'

    def test_several_nodes_keep_order(self):
        unit = parse_source("let a, b;\n", "a.ts")
        statement = unit.root.named_children[0]
        nodes = [make_assignment("a", "a"), make_assignment("b", "b")]
        rewritten = apply_splices(unit, [Splice(anchor=statement, placement=SIBLING, nodes=nodes)])
        assert rewritten.source_text == 'let a, b;\na.displayName = "a";\nb.displayName = "b";\n'

    def test_member_uses_member_indent(self):
        source = "class A {\n    x = 1\n}\n"
        unit = parse_source(source, "a.ts")
        body = unit.root.named_children[0].child_by_field_name("body")
        rewritten = apply_splices(
            unit, [Splice(anchor=body, placement=MEMBER, nodes=[make_static_member("A")])]
        )
        assert rewritten.source_text == 'class A {\n    x = 1\n    static displayName = "A";\n}\n'

    def test_original_unit_not_modified(self):
        unit = parse_source("const a = 1;\n", "a.ts")
        statement = unit.root.named_children[0]
        apply_splices(unit, [Splice(anchor=statement, placement=SIBLING, nodes=[make_assignment("a", "a")])])
        assert unit.source_text == "const a = 1;\n"

    def test_unknown_placement(self):
        unit = parse_source("const a = 1;\n", "a.ts")
        statement = unit.root.named_children[0]
        with pytest.raises(ValueError, match="Unknown splice placement"):
            apply_splices(unit, [Splice(anchor=statement, placement="before", nodes=[])])
