"""Tests for the textgraph command line."""

import pytest

from textgraph.cli import build_parser, main


def run(capsys, *argv):
    code = main([str(a) for a in argv])
    return code, capsys.readouterr().out


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_pagerank_defaults(self):
        args = build_parser().parse_args(["pagerank", "in.txt"])
        assert args.damping == 0.85
        assert args.iterations == 50
        assert not args.tfidf


class TestCommands:
    def test_show(self, capsys, corpus_file):
        code, out = run(capsys, "show", corpus_file)
        assert code == 0
        assert "to -> explore(1), seek(1)" in out
        assert "civilizations -> (no outgoing edges)" in out

    def test_bridge(self, capsys, corpus_file):
        code, out = run(capsys, "bridge", corpus_file, "explore", "new")
        assert code == 0
        assert "The bridge word from explore to new is: strange" in out

    def test_bridge_missing_word(self, capsys, corpus_file):
        code, out = run(capsys, "bridge", corpus_file, "cat", "new")
        assert code == 0
        assert "No cat in the graph!" in out

    def test_generate(self, capsys, corpus_file):
        code, out = run(capsys, "generate", corpus_file, "Seek to explore new and exciting synergies", "--seed", "1")
        assert code == 0
        assert out.strip() == "seek to explore strange new life and exciting synergies"

    def test_path_single(self, capsys, corpus_file):
        code, out = run(capsys, "path", corpus_file, "worlds", "seek")
        assert code == 0
        assert "Shortest path: worlds -> to -> seek" in out
        assert "Path length: 2" in out

    def test_path_unreachable(self, capsys, corpus_file):
        code, out = run(capsys, "path", corpus_file, "civilizations", "to")
        assert code == 0
        assert "No path from civilizations to to." in out

    def test_path_all(self, capsys, corpus_file):
        code, out = run(capsys, "path", corpus_file, "civilizations")
        assert code == 0
        assert "to explore: unreachable" in out

    def test_path_missing_word(self, capsys, corpus_file):
        code, out = run(capsys, "path", corpus_file, "ghost", "to")
        assert code == 1
        assert "❌ No ghost in the graph!" in out

    def test_pagerank_all(self, capsys, corpus_file):
        code, out = run(capsys, "pagerank", corpus_file)
        assert code == 0
        assert out.startswith("PageRank of all words:")
        assert "new:" in out

    def test_pagerank_word(self, capsys, corpus_file):
        code, out = run(capsys, "pagerank", corpus_file, "--word", "NEW", "--iterations", "10")
        assert code == 0
        assert out.startswith("new: ")

    def test_pagerank_unknown_word(self, capsys, corpus_file):
        code, out = run(capsys, "pagerank", corpus_file, "--word", "ghost")
        assert code == 1
        assert "No ghost in the graph!" in out

    def test_pagerank_tfidf(self, capsys, corpus_file, tmp_path):
        reference = tmp_path / "ref.txt"
        reference.write_text("new new worlds", encoding="utf-8")
        code, out = run(capsys, "pagerank", corpus_file, "--reference", reference)
        assert code == 0
        assert "worlds:" in out

    def test_pagerank_bad_damping(self, capsys, corpus_file):
        code, out = run(capsys, "pagerank", corpus_file, "--damping", "2")
        assert code == 1
        assert out.startswith("❌")

    def test_walk_saved(self, capsys, corpus_file, tmp_path):
        target = tmp_path / "walk.txt"
        code, out = run(capsys, "walk", corpus_file, "--seed", "3", "--output", target)
        assert code == 0
        assert out.startswith("Random walk: ")
        saved = target.read_text(encoding="utf-8").split()
        printed = out.splitlines()[0][len("Random walk: "):].split(" -> ")
        assert saved == printed

    def test_export_dot(self, capsys, corpus_file, tmp_path):
        code, _ = run(capsys, "export", corpus_file, tmp_path / "graph", "--format", "dot")
        assert code == 0
        assert (tmp_path / "graph.dot").read_text(encoding="utf-8").startswith("digraph G {")

    def test_export_csv(self, capsys, corpus_file, tmp_path):
        code, _ = run(capsys, "export", corpus_file, tmp_path / "edges.csv", "--format", "csv")
        assert code == 0
        lines = (tmp_path / "edges.csv").read_text(encoding="utf-8").splitlines()
        assert lines[0] == "sourceId,targetId,weight"
        assert len(lines) == 13

    def test_export_appends_format_extension(self, capsys, corpus_file, tmp_path):
        code, out = run(capsys, "export", corpus_file, tmp_path / "graph.v1", "--format", "dot")
        assert code == 0
        assert (tmp_path / "graph.v1.dot").exists()
        assert not (tmp_path / "graph.v1").exists()
        assert "graph.v1.dot" in out

    def test_export_appends_after_other_format_extension(self, capsys, corpus_file, tmp_path):
        code, _ = run(capsys, "export", corpus_file, tmp_path / "edges.svg", "--format", "csv")
        assert code == 0
        assert (tmp_path / "edges.svg.csv").read_text(encoding="utf-8").startswith("sourceId,targetId,weight")

    def test_missing_input(self, capsys, tmp_path):
        code, out = run(capsys, "show", tmp_path / "missing.txt")
        assert code == 1
        assert "❌ Missing input file" in out

    def test_empty_input(self, capsys, tmp_path):
        empty = tmp_path / "empty.txt"
        empty.write_text("?!", encoding="utf-8")
        code, out = run(capsys, "show", empty)
        assert code == 1
        assert "no graph was built" in out
