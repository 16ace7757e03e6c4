import os
import subprocess
import tempfile

from textgraph.common.config import DOT_BINARY, EXPORT_FORMATS
from textgraph.common.errors import ExportError
from textgraph.graph_construction.graph import Graph


def to_dot(graph: Graph) -> str:
    """
    Graphviz DOT text of the graph: one line per node, then one line per edge
    labelled with its weight.
    """
    lines = [
        "digraph G {",
        "  rankdir=LR;",
        "  node [shape=circle];",
    ]
    for name in graph.node_names():
        lines.append(f'  "{name}";')
    for edge in graph.edges():
        lines.append(f'  "{edge.source}" -> "{edge.target}" [label="{edge.weight}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_graph(graph: Graph, output_file: str, fmt: str = "png", dot_binary: str = DOT_BINARY) -> str:
    """
    Render the graph to an image with the Graphviz `dot` program.

    The DOT text goes through a temporary file that is removed afterwards.

    Raises:
        ValueError: if fmt is not one of EXPORT_FORMATS.
        ExportError: if Graphviz is missing or exits with an error.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported format {fmt!r}; expected one of {', '.join(EXPORT_FORMATS)}.")

    fd, dot_path = tempfile.mkstemp(suffix=".dot")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(to_dot(graph))

        try:
            proc = subprocess.run(
                [dot_binary, f"-T{fmt}", dot_path, "-o", output_file],
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise ExportError(f"Graphviz not found ({dot_binary}); install Graphviz first.") from e

        if proc.returncode != 0:
            raise ExportError(f"Graphviz failed with exit code {proc.returncode}: {proc.stderr.strip()}")
    finally:
        if os.path.exists(dot_path):
            os.remove(dot_path)

    return output_file
