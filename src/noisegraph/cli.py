"""Command-line interface for sampling a module graph to a numpy array."""

import argparse
import logging
import sys
import time
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for graph sampling."""
    parser = argparse.ArgumentParser(
        description="Sample a noise module graph over a grid"
    )
    parser.add_argument("config", type=str, help="Path to the graph TOML file")
    parser.add_argument(
        "--width", type=int, default=256, help="Samples along x (default: 256)"
    )
    parser.add_argument(
        "--height", type=int, default=256, help="Samples along z (default: 256)"
    )
    parser.add_argument(
        "--x-bounds",
        type=float,
        nargs=2,
        default=(0.0, 4.0),
        metavar=("LOW", "HIGH"),
        help="X range (default: 0 4)",
    )
    parser.add_argument(
        "--z-bounds",
        type=float,
        nargs=2,
        default=(0.0, 4.0),
        metavar=("LOW", "HIGH"),
        help="Z range (default: 0 4)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="heightmap.npy",
        help="Output path (default: heightmap.npy)",
    )
    parser.add_argument(
        "--normalize", action="store_true", help="Rescale output to [0, 1]"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Import here to avoid slow startup for --help
    import numpy as np

    from .config import build_graph, load_graph_config
    from .fields import normalize, sample_plane

    graph, root = build_graph(load_graph_config(Path(args.config)))
    result = graph.validate(root)
    if not result.passed:
        for error in result.errors:
            print(f"error: {error}", file=sys.stderr)
        return 1

    print(f"Sampling {args.width}x{args.height} from {args.config}")

    start_time = time.time()
    field = sample_plane(
        graph.module(root),
        args.width,
        args.height,
        x_bounds=tuple(args.x_bounds),
        z_bounds=tuple(args.z_bounds),
    )
    if args.normalize:
        field = normalize(field)
    elapsed = time.time() - start_time

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    np.save(output_path, field)

    print(f"Sampled in {elapsed:.1f}s, saved to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
