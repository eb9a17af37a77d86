"""Tests for exporters."""

import json
import os

import pytest

from graph.model import IncludeGraph
from exporters.source_exporter import to_source
from exporters.list_exporter import to_list
from exporters.json_exporter import to_json
from exporters.mermaid_exporter import to_mermaid
from exporters.ascii_exporter import to_ascii
from preprocessor.resolver import resolve_includes
from preprocessor.source import SourceBuffer


@pytest.fixture
def diamond(tmp_path, write_source):
    """r includes a and b, which both include c."""
    root = write_source("r.glsl", '#pragma use "a.glsl"\n#pragma use "b.glsl"\nvoid main() {}\n')
    write_source("a.glsl", '#pragma use "c.glsl"\nfloat a;\n')
    write_source("b.glsl", '#pragma use "c.glsl"\nfloat b;')
    write_source("c.glsl", "float c;\n")
    graph = IncludeGraph()
    files = resolve_includes(root, graph=graph)
    return files, graph, str(tmp_path)


@pytest.fixture
def cycle(tmp_path, write_source):
    """a and b include each other."""
    root = write_source("a.glsl", '#pragma use "b.glsl"\n')
    write_source("b.glsl", '#pragma use "a.glsl"\n')
    graph = IncludeGraph()
    files = resolve_includes(root, graph=graph)
    return files, graph, str(tmp_path)


class TestSourceExporter:
    """Tests for the flattening exporter."""

    def test_concatenation_order(self, diamond):
        """Test that files are concatenated dependencies first."""
        files, _, _ = diamond

        output = to_source(files)

        assert output == (
            "float c;\n"
            '#pragma use "c.glsl"\nfloat a;\n'
            '#pragma use "c.glsl"\nfloat b;\n'
            '#pragma use "a.glsl"\n#pragma use "b.glsl"\nvoid main() {}\n'
        )

    def test_strip_directives(self, diamond):
        """Test blanking out directive lines."""
        files, _, _ = diamond

        output = to_source(files, strip=True)

        assert "#pragma use" not in output
        assert output.index("float c;") < output.index("float a;") < output.index("void main")

    def test_line_markers(self, diamond):
        """Test file marker comments."""
        files, _, tmp = diamond

        output = to_source(files, line_markers=True)

        assert output.startswith(f"// file: {os.path.join(tmp, 'c.glsl')}\nfloat c;\n")
        assert output.count("// file: ") == 4

    def test_prelude_last(self, diamond):
        """Test that a prelude buffer is emitted after its dependencies."""
        files, _, _ = diamond

        output = to_source(files, strip=True, line_markers=True, prelude=SourceBuffer("out vec4 color;"))

        assert output.endswith("// file: <buffer>\nout vec4 color;\n")

    def test_empty(self):
        """Test exporting nothing."""
        assert to_source([]) == ""


class TestListExporter:
    """Tests for the plain list exporter."""

    def test_relative_list(self, diamond):
        """Test listing files relative to a base."""
        files, _, tmp = diamond

        assert to_list(files, base=tmp) == "c.glsl\na.glsl\nb.glsl\nr.glsl"

    def test_absolute_list(self, diamond):
        """Test listing absolute paths."""
        files, _, _ = diamond

        assert to_list(files).splitlines() == [f.filename for f in files]


class TestJSONExporter:
    """Tests for JSON exporter."""

    def test_valid_json(self, diamond):
        """Test that output is valid JSON with files and edges."""
        files, graph, tmp = diamond

        data = json.loads(to_json(files, graph, base=tmp))

        assert data["files"] == ["c.glsl", "a.glsl", "b.glsl", "r.glsl"]
        assert {"source": "r.glsl", "target": "a.glsl", "cycle": False} in data["edges"]
        assert {"source": "b.glsl", "target": "c.glsl", "cycle": False} in data["edges"]
        assert len(data["edges"]) == 4

    def test_cycle_flag(self, cycle):
        """Test that the dropped edge is flagged."""
        files, graph, tmp = cycle

        data = json.loads(to_json(files, graph, base=tmp))

        assert data["files"] == ["b.glsl", "a.glsl"]
        assert data["edges"] == [
            {"source": "a.glsl", "target": "b.glsl", "cycle": False},
            {"source": "b.glsl", "target": "a.glsl", "cycle": True},
        ]


class TestMermaidExporter:
    """Tests for Mermaid exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        assert to_mermaid(IncludeGraph()) == "flowchart LR"

    def test_simple_graph(self, diamond):
        """Test exporting a graph with edges."""
        _, graph, tmp = diamond

        output = to_mermaid(graph, base=tmp)

        assert output.startswith("flowchart LR")
        assert 'n0_r_glsl["r.glsl"]' in output
        assert "n0_r_glsl --> n1_a_glsl" in output
        assert "-.->" not in output

    def test_orientation(self):
        """Test different orientations."""
        graph = IncludeGraph()
        graph.add_node("/test.glsl")

        for orientation in ["LR", "TD", "TB", "RL", "BT"]:
            output = to_mermaid(graph, orientation=orientation)
            assert output.startswith(f"flowchart {orientation}")

    def test_cycle_dashed(self, cycle):
        """Test that cycle edges are dashed."""
        _, graph, tmp = cycle

        output = to_mermaid(graph, base=tmp)

        assert "n0_a_glsl --> n1_b_glsl" in output
        assert "n1_b_glsl -.-> n0_a_glsl" in output


class TestASCIIExporter:
    """Tests for ASCII exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        assert to_ascii(IncludeGraph()) == ""

    def test_unicode_tree(self, diamond):
        """Test tree structure with Unicode characters."""
        _, graph, tmp = diamond

        output = to_ascii(graph, base=tmp)

        assert output.splitlines() == [
            "r.glsl",
            "├── a.glsl",
            "│   └── c.glsl",
            "└── b.glsl",
            "    └── c.glsl",
        ]

    def test_ascii_style(self, diamond):
        """Test pure ASCII style."""
        _, graph, tmp = diamond

        output = to_ascii(graph, base=tmp, style="ascii")

        assert "|-- a.glsl" in output
        assert "\\-- b.glsl" in output
        assert "├" not in output

    def test_cycle_marker(self, cycle):
        """Test that a cycle is marked and not expanded."""
        _, graph, tmp = cycle

        output = to_ascii(graph, base=tmp)

        assert output.splitlines() == [
            "a.glsl",
            "└── b.glsl",
            "    └── a.glsl [*]",
        ]

    def test_multiple_roots(self, write_source, tmp_path):
        """Test that root trees are separated by blank lines."""
        first = write_source("first.frag")
        second = write_source("second.vert")
        graph = IncludeGraph()
        resolve_includes(first, second, graph=graph)

        assert to_ascii(graph, base=str(tmp_path)) == "first.frag\n\nsecond.vert"
