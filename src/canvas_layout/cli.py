"""CLI for canvas-layout."""

import argparse
import sys
from pathlib import Path

import yaml

from .errors import LayoutError
from .graph import Graph, load_graph, save_layout
from .layout import (
    DEFAULT_RADIUS_STEP,
    DEFAULT_VIEWPORT,
    ForceConfig,
    classify_topology,
    connected_components,
    fruchterman_reingold,
    radial_layout,
    recalibrate,
)

# Defaults applied after the config file, so that config values can fill unset flags
DEFAULTS = {
    "iterations": 500,
    "k": ForceConfig.k,
    "temperature": ForceConfig.temperature,
    "radius_step": DEFAULT_RADIUS_STEP,
    "root": 0,
    "viewport": DEFAULT_VIEWPORT,
}


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values (empty for an empty file).
    """
    with open(config_path) as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return config


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared between the layout subcommands."""
    parser.add_argument("input", type=Path, help="Graph in networkx node-link JSON format")
    parser.add_argument("--output", type=Path, help="Output JSON (default: <input>.layout.json)")
    parser.add_argument(
        "--viewport",
        type=float,
        help=f"Side of the square the layout is fitted into (default: {DEFAULT_VIEWPORT})",
    )
    parser.add_argument(
        "--no-normalize",
        action="store_true",
        help="Write raw layout coordinates without fitting them into the viewport",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file")


def resolve_common_args(args: argparse.Namespace, keys: list[str]) -> None:
    """Fill unset arguments from the config file, then from DEFAULTS."""
    config = load_config(args.config) if getattr(args, "config", None) else {}
    for key in keys:
        if getattr(args, key, None) is not None:
            continue
        config_key = key.replace("_", "-")
        if config_key in config:
            setattr(args, key, config[config_key])
        elif key in config:
            setattr(args, key, config[key])
        else:
            setattr(args, key, DEFAULTS[key])

    if hasattr(args, "output") and args.output is None:
        args.output = args.input.with_suffix(".layout.json")


def read_graph(path: Path):
    """Load the input graph, printing a short description."""
    graph, labels = load_graph(path)
    print(f"Loaded {path}: {graph.node_count} nodes, {graph.edge_count} edges")
    return graph, labels


def write_layout(args: argparse.Namespace, graph: Graph, positions, labels) -> None:
    if not args.no_normalize:
        positions = recalibrate(positions, args.viewport)
    save_layout(args.output, graph, positions, labels)
    print(f"Wrote {args.output}")


def cmd_classify(args: argparse.Namespace) -> None:
    """Print the topology of a graph."""
    graph, _ = read_graph(args.input)
    verdict = classify_topology(graph)
    components = connected_components(graph)

    print(f"Topology: {verdict.topology.value}")
    print(f"Tree: {'yes' if verdict.is_tree else 'no'}")
    print(f"Connected components: {len(components)}")
    if len(components) > 1:
        for component in components[:10]:
            print(f"  {len(component)} nodes, starting at node {component[0]}")
        if len(components) > 10:
            print(f"  ... and {len(components) - 10} more")


def cmd_force(args: argparse.Namespace) -> None:
    """Run the force-directed layout."""
    resolve_common_args(args, ["iterations", "k", "temperature", "viewport"])
    graph, labels = read_graph(args.input)
    config = ForceConfig(k=args.k, temperature=args.temperature)

    print(f"Running {args.iterations} iterations (k={config.k}, temperature={config.temperature})...")
    positions = fruchterman_reingold(graph, args.iterations, config)
    write_layout(args, graph, positions, labels)


def cmd_radial(args: argparse.Namespace) -> None:
    """Run the radial tree layout."""
    resolve_common_args(args, ["root", "radius_step", "viewport"])
    graph, labels = read_graph(args.input)

    verdict = classify_topology(graph)
    if not verdict.is_tree:
        print(
            f"Error: radial layout needs a tree, graph is {verdict.topology.value}",
            file=sys.stderr,
        )
        sys.exit(1)

    positions = radial_layout(graph, args.root, args.radius_step)
    write_layout(args, graph, positions, labels)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for canvas-layout CLI."""
    parser = argparse.ArgumentParser(description="Compute node positions for graph layouts")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    classify_parser = subparsers.add_parser("classify", help="Report whether a graph is a tree")
    classify_parser.add_argument("input", type=Path, help="Graph in networkx node-link JSON format")

    force_parser = subparsers.add_parser("force", help="Fruchterman-Reingold force-directed layout")
    add_common_args(force_parser)
    force_parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        help=f"Number of simulation iterations (default: {DEFAULTS['iterations']})",
    )
    force_parser.add_argument("--k", type=float, help="Ideal distance between nodes (default: 2.0)")
    force_parser.add_argument(
        "--temperature",
        type=float,
        help="Largest per-iteration step at the start of the run (default: 5.0)",
    )

    radial_parser = subparsers.add_parser("radial", help="Radial layout for trees")
    add_common_args(radial_parser)
    radial_parser.add_argument("--root", type=int, help="Index of the root node (default: 0)")
    radial_parser.add_argument(
        "--radius-step",
        type=float,
        help=f"Distance between depth rings (default: {DEFAULT_RADIUS_STEP})",
    )

    args = parser.parse_args(argv)

    commands = {"classify": cmd_classify, "force": cmd_force, "radial": cmd_radial}
    if args.command not in commands:
        # No subcommand provided - show help
        parser.print_help()
        return

    try:
        commands[args.command](args)
    except (LayoutError, OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
