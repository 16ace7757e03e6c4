#!/usr/bin/env python
"""
Command line front end for the word graph.

Usage:
    textgraph show corpus.txt
    textgraph bridge corpus.txt seek to
    textgraph generate corpus.txt "Seek to explore new and exciting synergies"
    textgraph path corpus.txt to strange
    textgraph pagerank corpus.txt --tfidf
    textgraph walk corpus.txt --output walk.txt
    textgraph export corpus.txt graph --format svg
"""
import argparse
import os
import random
import sys
from typing import List, Optional

from textgraph.common.config import DEFAULT_DAMPING, DEFAULT_ITERATIONS, EXPORT_FORMATS
from textgraph.common.errors import TextGraphError, WordNotFoundError
from textgraph.export.dot import render_graph, to_dot
from textgraph.export.tables import edges_frame, format_adjacency, ranks_frame, save_random_walk
from textgraph.graph_construction.graph import Graph, build_graph_from_file
from textgraph.network_analysis.bridge_words import describe_bridge_words
from textgraph.network_analysis.compute_pagerank import page_rank, weighted_page_rank
from textgraph.network_analysis.random_walk import random_walk
from textgraph.network_analysis.shortest_path import shortest_path, shortest_paths_from
from textgraph.text_generation.synthesize import synthesize_text


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def cmd_show(graph: Graph, args: argparse.Namespace) -> None:
    print(f"Directed graph ({len(graph)} words, {graph.number_of_edges()} edges):")
    for line in format_adjacency(graph):
        print(f"  {line}")


def cmd_bridge(graph: Graph, args: argparse.Namespace) -> None:
    print(describe_bridge_words(graph, args.word1, args.word2))


def cmd_generate(graph: Graph, args: argparse.Namespace) -> None:
    print(synthesize_text(graph, args.text, rng=_rng(args.seed)))


def cmd_path(graph: Graph, args: argparse.Namespace) -> None:
    if args.target:
        result = shortest_path(graph, args.source, args.target)
        if not result.reachable:
            print(f"No path from {args.source.lower()} to {args.target.lower()}.")
            return
        print(f"Shortest path: {' -> '.join(result.path)}")
        print(f"Path length: {result.distance}")
        return

    # Không có đích: in đường đi tới mọi node khác, sắp theo khoảng cách
    results = shortest_paths_from(graph, args.source)
    print(f"Shortest paths from '{args.source.lower()}':")
    for word, result in sorted(results.items(), key=lambda kv: (kv[1].distance, kv[0])):
        if result.reachable:
            print(f"  to {word}: {' -> '.join(result.path)} (distance {result.distance})")
        else:
            print(f"  to {word}: unreachable")


def cmd_pagerank(graph: Graph, args: argparse.Namespace) -> None:
    if args.tfidf or args.reference:
        if args.reference:
            with open(args.reference, "r", encoding="utf-8") as f:
                reference_text = f.read()
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                reference_text = f.read()
        ranks = weighted_page_rank(
            graph,
            damping=args.damping,
            iterations=args.iterations,
            reference_text=reference_text,
            show_progress=args.progress,
        )
    else:
        ranks = page_rank(graph, damping=args.damping, iterations=args.iterations, show_progress=args.progress)

    if args.word:
        word = args.word.lower()
        if word not in ranks:
            raise WordNotFoundError(word)
        print(f"{word}: {ranks[word]:.4f}")
        return

    print("PageRank of all words:")
    for row in ranks_frame(ranks).itertuples(index=False):
        print(f"  {row.word}: {row.score:.4f}")


def cmd_walk(graph: Graph, args: argparse.Namespace) -> None:
    walk = random_walk(graph, rng=_rng(args.seed))
    print(f"Random walk: {' -> '.join(walk)}")
    if args.output:
        save_random_walk(walk, args.output)
        print(f"✅ Random walk saved to {args.output}")


def cmd_export(graph: Graph, args: argparse.Namespace) -> None:
    output = args.output
    if os.path.splitext(output)[1].lower() != f".{args.format}":
        output = f"{output}.{args.format}"

    if args.format == "dot":
        with open(output, "w", encoding="utf-8") as f:
            f.write(to_dot(graph))
    elif args.format == "csv":
        edges_frame(graph).to_csv(output, index=False, encoding="utf-8")
    else:
        render_graph(graph, output, fmt=args.format)
    print(f"✅ Graph exported to {output}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textgraph",
        description="Build a word adjacency graph from a text file and query it.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Query to run")

    def add_command(name: str, help_text: str, handler) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("input", help="Text file the graph is built from")
        sub.set_defaults(handler=handler)
        return sub

    add_command("show", "Print every word with its outgoing edges", cmd_show)

    bridge = add_command("bridge", "Query bridge words between two words", cmd_bridge)
    bridge.add_argument("word1")
    bridge.add_argument("word2")

    generate = add_command("generate", "Insert bridge words into a new text", cmd_generate)
    generate.add_argument("text", help="Text to rewrite")
    generate.add_argument("--seed", type=int, default=None, help="Seed for choosing between bridge words")

    path = add_command("path", "Shortest path between words", cmd_path)
    path.add_argument("source")
    path.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Target word. Omit to list shortest paths to every other word.",
    )

    pagerank = add_command("pagerank", "PageRank of the words", cmd_pagerank)
    pagerank.add_argument("--word", default=None, help="Only print this word's rank")
    pagerank.add_argument("--damping", type=float, default=DEFAULT_DAMPING, help=f"Damping factor (default: {DEFAULT_DAMPING})")
    pagerank.add_argument(
        "--iterations", type=int, default=DEFAULT_ITERATIONS, help=f"Number of iterations (default: {DEFAULT_ITERATIONS})"
    )
    pagerank.add_argument("--tfidf", action="store_true", help="Use TF-IDF weighted PageRank over the input text")
    pagerank.add_argument("--reference", default=None, help="Reference text file for TF-IDF (implies --tfidf)")
    pagerank.add_argument("--progress", action="store_true", help="Show a progress bar")

    walk = add_command("walk", "Random walk over the graph", cmd_walk)
    walk.add_argument("--seed", type=int, default=None, help="Seed for the walk")
    walk.add_argument("--output", default=None, help="Save the walk to this file")

    export = add_command("export", "Export the graph as an image, DOT text or CSV edge table", cmd_export)
    export.add_argument("output", help="Output file; the format's extension is appended unless already present")
    export.add_argument(
        "--format",
        choices=list(EXPORT_FORMATS) + ["dot", "csv"],
        default="png",
        help="Output format (default: png)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        graph = build_graph_from_file(args.input)
        args.handler(graph, args)
    except FileNotFoundError as e:
        print(f"❌ Missing input file: {e}")
        return 1
    except (TextGraphError, ValueError) as e:
        print(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        sys.exit(1)
