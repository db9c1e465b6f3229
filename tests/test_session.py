"""Tests for DocumentSession, the per-document editing state."""

from __future__ import annotations

import pytest

from patchmark import CompileConfig, CompiledNode, DocumentSession, Reference, ReferenceData


class TestLoad:
    """Loading a document compiles every block."""

    def test_one_node_per_block(self) -> None:
        session = DocumentSession()
        session.load("# Title\n\nbody\n\n[ref]: /x")
        assert len(session.nodes) == 3

    def test_definition_becomes_placeholder(self) -> None:
        session = DocumentSession()
        session.load("[ref]: /x")
        assert session.nodes == [CompiledNode("div", {"data-text": "[ref]: /x"})]
        assert session.references == {"ref": ReferenceData("/x", "")}

    def test_content_reproduces_document(self) -> None:
        text = '# Notes\n\nsee [docs]\n\n[docs]: https://example.com "Docs"'
        session = DocumentSession()
        session.load(text)
        assert session.content() == text

    def test_load_resets_references(self) -> None:
        session = DocumentSession()
        session.load("[a]: /a")
        session.load("[b]: /b")
        assert set(session.references) == {"b"}

    def test_load_keeps_constructor_dictionary(self) -> None:
        refs = {"old": ReferenceData("/old", "")}
        session = DocumentSession(refs)
        session.load("[a]: /a")
        assert session.references is refs
        assert refs == {"a": ReferenceData("/a", "")}

    def test_forward_reference_resolved_on_load(self) -> None:
        session = DocumentSession()
        session.load("see [docs]\n\n[docs]: /docs")
        link = session.nodes[0].find("a")
        assert link is not None
        assert link.attrs["href"] == "/docs"


class TestRecompile:
    """Editing one block in place."""

    def test_replaces_node(self) -> None:
        session = DocumentSession()
        session.load("a\n\nb")
        node = session.recompile(1, "# c")
        assert session.nodes[1] is node
        assert node.children[0].tag == "h1"
        assert session.content() == "a\n\n# c"

    def test_new_definition_patches_earlier_blocks(self) -> None:
        session = DocumentSession()
        session.load("[a][ref]\n\ndraft")
        link = session.nodes[0].find("a")
        assert link is not None

        session.recompile(1, '[ref]: http://x.com "T"')

        assert link.attrs["href"] == "http://x.com"
        assert link.attrs["title"] == "T"

    def test_recompiled_use_sees_known_reference(self) -> None:
        session = DocumentSession()
        session.load("draft\n\n[ref]: /target")
        node = session.recompile(0, "[go][ref]")
        link = node.find("a")
        assert link is not None
        assert link.attrs["href"] == "/target"

    def test_negative_index(self) -> None:
        session = DocumentSession()
        session.load("a\n\nb")
        session.recompile(-1, "c")
        assert session.content() == "a\n\nc"

    @pytest.mark.parametrize("index", [2, -3])
    def test_out_of_range(self, index: int) -> None:
        session = DocumentSession()
        session.load("a\n\nb")
        with pytest.raises(IndexError, match="out of range"):
            session.recompile(index, "c")


class TestAppendAndDefine:
    """Growing the document and injecting references."""

    def test_append(self) -> None:
        session = DocumentSession()
        session.append("first")
        session.append("second")
        assert session.content() == "first\n\nsecond"

    def test_define_patches_retained_nodes(self) -> None:
        session = DocumentSession()
        session.load("![logo]")
        session.define(Reference("", ReferenceData("/logo.png", "Logo")))

        image = session.nodes[0].find("img")
        assert image is not None
        assert image.attrs["src"] == "/logo.png"
        assert image.attrs["title"] == "Logo"

    def test_shared_reference_dictionary(self) -> None:
        refs = {"ref": ReferenceData("/x", "")}
        session = DocumentSession(refs)
        node = session.append("[ref]")
        link = node.find("a")
        assert link is not None
        assert link.attrs["href"] == "/x"


class TestSessionConfig:
    """A session can pin its own config."""

    def test_wrapper_tag_used_for_placeholders(self) -> None:
        session = DocumentSession(config=CompileConfig(wrapper_tag="section"))
        session.load("text\n\n[ref]: /x")
        assert [node.tag for node in session.nodes] == ["section", "section"]

    def test_show_syntax(self) -> None:
        session = DocumentSession(config=CompileConfig(show_syntax=True))
        node = session.append("**a**")
        assert node.text == "**a**"
