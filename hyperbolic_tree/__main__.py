import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np

from hyperbolic_tree import HyperbolicTreeView, HyperTreeConfig, random_tree, tree_description
from hyperbolic_tree.backends import TikzCanvas

logger = logging.getLogger(__name__)

Drag = Tuple[Tuple[float, float], Tuple[float, float]]


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_drag(value: str) -> Drag:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"drag needs X0,Y0,X1,Y1 pixel values, got {value!r}")
    try:
        x0, y0, x1, y1 = (float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid drag {value!r}: {exc}") from exc
    return (x0, y0), (x1, y1)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out a random tree in the Poincaré disk and render it to TikZ")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=123,
        help="Random seed for the generated tree (default: 123)",
    )
    parser.add_argument("--min-branch", type=int, default=2, help="Minimum fan-out at the root (default: 2)")
    parser.add_argument("--branch", type=int, default=10, help="Random extra fan-out at the root (default: 10)")
    parser.add_argument(
        "--ratio",
        type=float,
        default=0.5,
        help="Fan-out reduction per level (default: 0.5)",
    )
    parser.add_argument("--width", type=float, default=400.0, help="Viewport width in pixels (default: 400)")
    parser.add_argument("--height", type=float, default=400.0, help="Viewport height in pixels (default: 400)")
    parser.add_argument(
        "--base-distance",
        type=float,
        default=None,
        help="Parent to child hyperbolic distance (default: 0.3)",
    )
    parser.add_argument(
        "--drag",
        type=_parse_drag,
        action="append",
        default=[],
        metavar="X0,Y0,X1,Y1",
        help="Replay a pan gesture in viewport pixels; may be repeated",
    )
    parser.add_argument(
        "--print-tree",
        action="store_true",
        help="Log the laid out tree with its coordinates",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document to the given path instead of printing the picture",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    config = HyperTreeConfig() if args.base_distance is None else HyperTreeConfig(base_distance=args.base_distance)
    canvas = TikzCanvas(args.width, args.height)
    rng = np.random.default_rng(args.seed)
    model = random_tree(
        rng,
        min_branch=args.min_branch,
        branch=args.branch,
        ratio=args.ratio,
        content_factory=lambda node: canvas.label(node.name),
    )

    view = HyperbolicTreeView(canvas, args.width, args.height, config=config)
    view.build(model)

    drags: List[Drag] = args.drag
    for idx, (start, end) in enumerate(drags):
        logger.info("Replaying drag %d from %s to %s", idx, start, end)
        view.drag(start, end)

    if args.print_tree:
        logger.info("Tree:\n%s", tree_description(model))

    logger.info(
        "Rendered %d edge(s), %d of %d label(s) visible",
        len(canvas.edges),
        len(canvas.visible_labels()),
        len(canvas.labels),
    )

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(canvas.to_document(), encoding="utf-8")
        logger.info("Wrote TikZ document to %s", output_path)
    else:
        print(canvas.to_tikz())


if __name__ == "__main__":
    main()
