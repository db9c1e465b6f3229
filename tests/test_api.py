"""Tests for the high-level patchmark API."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import patchmark
from patchmark import (
    CompileConfig,
    CompiledNode,
    CompileError,
    Compiler,
    Reference,
    ReferenceData,
    compile_paragraph,
    compile_text,
    reconstruct_text,
    split_blocks,
)


def _element(block: str, **config: bool) -> CompiledNode:
    """Compile a block and return the element inside its wrapper."""
    node = Compiler(CompileConfig(**config)).compile_paragraph(block, {})
    assert isinstance(node, CompiledNode)
    assert len(node.children) == 1
    element = node.children[0]
    assert isinstance(element, CompiledNode)
    return element


class TestCompileParagraph:
    """One block in, one wrapped node out."""

    def test_wrapper_carries_source(self) -> None:
        node = compile_paragraph("hello **world**", {})
        assert isinstance(node, CompiledNode)
        assert node.tag == "div"
        assert node.attrs == {"data-text": "hello **world**"}
        assert node.source == "hello **world**"

    def test_paragraph(self) -> None:
        p = _element("hello **world**")
        assert p == CompiledNode("p", {}, ["hello ", CompiledNode("strong", {}, ["world"])])

    @pytest.mark.parametrize("level", range(1, 7))
    def test_heading_levels(self, level: int) -> None:
        element = _element("#" * level + " Title")
        assert element.tag == f"h{level}"
        assert element.text == "Title"

    def test_heading_takes_priority(self) -> None:
        assert _element("## not h1").tag == "h2"

    def test_seven_hashes_is_a_paragraph(self) -> None:
        element = _element("####### x")
        assert element.tag == "p"
        assert element.text == "####### x"

    def test_block_quote(self) -> None:
        element = _element("> quoted _text_")
        assert element.tag == "blockquote"
        assert element.children == ["quoted ", CompiledNode("em", {}, ["text"])]

    @pytest.mark.parametrize("rule", ["---", "***", "___", "-----"])
    def test_horizontal_rule(self, rule: str) -> None:
        node = compile_paragraph(rule, {})
        assert isinstance(node, CompiledNode)
        assert node.attrs == {"data-text": rule}
        assert node.children == [CompiledNode("hr")]

    def test_bullet_list_item(self) -> None:
        element = _element("- item")
        assert element == CompiledNode("li", {}, ["item"])

    def test_ordered_list_item_keeps_number(self) -> None:
        element = _element("3. third")
        assert element == CompiledNode("li", {"value": "3"}, ["third"])

    def test_list_items_can_be_disabled(self) -> None:
        element = _element("- item", list_items_enabled=False)
        assert element.tag == "p"
        assert element.text == "- item"

    def test_reference_definition_returns_record(self) -> None:
        result = compile_paragraph('[ref]: http://x.com "Title"', {})
        assert result == Reference("ref", ReferenceData("http://x.com", "Title"))

    def test_reference_definition_does_not_register(self) -> None:
        refs: dict[str, ReferenceData] = {}
        compile_paragraph("[ref]: http://x.com", refs)
        assert refs == {}

    def test_known_reference_resolves_at_compile_time(self) -> None:
        refs = {"ref": ReferenceData("http://x.com", "T")}
        node = compile_paragraph("[a][ref]", refs)
        assert isinstance(node, CompiledNode)
        assert node.children[0] == CompiledNode(
            "p",
            {},
            [
                CompiledNode(
                    "a",
                    {"href": "http://x.com", "title": "T", "data-reference": "ref"},
                    ["a"],
                )
            ],
        )

    def test_free_text_is_escaped_not_parsed(self) -> None:
        element = _element("a <b> & c")
        assert element.children == ["a <b> & c"]

    def test_fenced_block_is_opaque(self) -> None:
        element = _element("```x **y** [z](w)```")
        assert element.children == ["```x **y** [z](w)```"]


class TestInlineNesting:
    """Toggle output resolved into a tree."""

    def test_overlap_closes_inner_span(self) -> None:
        element = _element("**a_b**c_")
        assert element == CompiledNode(
            "p",
            {},
            [CompiledNode("strong", {}, ["a", CompiledNode("em", {}, ["b"])]), "c"],
        )

    def test_unclosed_span_runs_to_block_end(self) -> None:
        element = _element("a **b c")
        assert element == CompiledNode("p", {}, ["a ", CompiledNode("strong", {}, ["b c"])])

    def test_formatting_inside_link_text(self) -> None:
        element = _element("[**bold**](http://x.com)")
        link = element.find("a")
        assert link is not None
        assert link.children == [CompiledNode("strong", {}, ["bold"])]

    def test_image_inside_paragraph(self) -> None:
        element = _element('see ![cat](/cat.png "Cat")')
        assert element.children == [
            "see ",
            CompiledNode("img", {"src": "/cat.png", "alt": "cat", "title": "Cat"}),
        ]


class TestShowSyntax:
    """Markers stay inside their tags when syntax is shown."""

    def test_heading_marker(self) -> None:
        assert _element("# Title", show_syntax=True).text == "# Title"

    def test_infix_markers(self) -> None:
        element = _element("**a**", show_syntax=True)
        assert element.children == [CompiledNode("strong", {}, ["**a**"])]

    def test_list_marker(self) -> None:
        assert _element("- item", show_syntax=True).text == "- item"

    @pytest.mark.parametrize("show_syntax", [False, True])
    def test_fenced_heading_is_opaque_in_both_modes(self, show_syntax: bool) -> None:
        element = _element("# ```x *y* [z]```", show_syntax=show_syntax)
        assert element.tag == "h1"
        marker = "# " if show_syntax else ""
        assert element.children == [marker + "```x *y* [z]```"]


class TestCompileText:
    """Whole documents."""

    def test_one_node_per_block(self) -> None:
        result = compile_text("# Title\n\nbody\n\n---", {})
        assert [node.children[0].tag for node in result.nodes] == ["h1", "p", "hr"]

    def test_definitions_produce_no_node(self) -> None:
        result = compile_text("[a]: /a\n\n[b]: /b", {})
        assert result.nodes == []
        assert set(result.references) == {"a", "b"}

    def test_references_default_to_new_dict(self) -> None:
        result = compile_text("[a]: /a")
        assert result.references == {"a": ReferenceData("/a", "")}

    def test_references_mutated_in_place(self) -> None:
        refs: dict[str, ReferenceData] = {}
        result = compile_text("[a]: /a", refs)
        assert result.references is refs
        assert "a" in refs

    def test_empty_document(self) -> None:
        assert compile_text("", {}).nodes == []

    def test_continuation_lines_join(self) -> None:
        result = compile_text("first\nsecond", {})
        assert len(result.nodes) == 1
        assert result.nodes[0].source == "firstsecond"


class TestReconstructText:
    """Block sources survive compilation."""

    def test_round_trip(self) -> None:
        text = "# Title\n\nsome **bold** text\n\n> quote\n\n- item\n\n---"
        result = compile_text(text, {})
        assert reconstruct_text(result.nodes) == text

    def test_skips_nodes_without_source(self) -> None:
        nodes = [CompiledNode("div", {"data-text": "a"}), CompiledNode("p")]
        assert reconstruct_text(nodes) == "a"

    @given(st.text(alphabet="ab *_~`#>-\n", max_size=60))
    @settings(max_examples=200)
    def test_every_block_is_kept(self, text: str) -> None:
        blocks = split_blocks(text)
        result = compile_text(text, {})
        assert len(result.nodes) == len(blocks)
        assert reconstruct_text(result.nodes) == "\n\n".join(blocks)


class TestCompiler:
    """Compiler binds a config to every call."""

    def test_default_config(self) -> None:
        assert Compiler().config == CompileConfig()

    def test_config_is_restored_after_call(self) -> None:
        before = patchmark.get_compile_config()
        Compiler(CompileConfig(show_syntax=True)).compile_text("**a**", {})
        assert patchmark.get_compile_config() is before

    def test_wrapper_tag(self) -> None:
        result = Compiler(CompileConfig(wrapper_tag="section")).compile_text("a", {})
        assert result.nodes[0].tag == "section"

    def test_fix_references(self) -> None:
        compiler = Compiler()
        result = compiler.compile_text("[ref]", {})
        compiler.fix_references(result.nodes, Reference("ref", ReferenceData("/x", "X")))
        link = result.nodes[0].find("a")
        assert link is not None
        assert link.attrs["href"] == "/x"

    def test_session_uses_compiler_config(self) -> None:
        session = Compiler(CompileConfig(show_syntax=True)).session("# Title")
        assert session.nodes[0].text == "# Title"


class TestCompileErrors:
    """Builder failures are reported against the source block."""

    def test_builder_error_is_chained(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(markup: str) -> CompiledNode:
            raise CompileError("Compiled markup has no root element", markup)

        monkeypatch.setattr("patchmark.compiler.build_node", broken)

        with pytest.raises(CompileError, match="no root element") as exc_info:
            compile_paragraph("hello", {})

        assert exc_info.value.block == "hello"
        assert isinstance(exc_info.value.__cause__, CompileError)
        assert exc_info.value.__cause__.block == "<p>hello</p>"


class TestPublicSurface:
    """Everything in __all__ is importable."""

    def test_all_names_resolve(self) -> None:
        for name in patchmark.__all__:
            assert hasattr(patchmark, name), name

    def test_version(self) -> None:
        assert patchmark.__version__ == "0.1.0"
