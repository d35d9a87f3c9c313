"""Command line entry point: render an XML scene to an image file."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from raytracer.render import generate_image
from raytracer.scene_import import SceneImportError, import_scene


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raytracer", description="Render a scene described in an XML file."
    )
    parser.add_argument("scene", help="path of the XML scene file")
    parser.add_argument(
        "--base-path",
        default=".",
        help="directory holding assets/obj_models and assets/textures (default: .)",
    )
    parser.add_argument(
        "--output-dir",
        default="output",
        help="directory the image is written to (default: output)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene named on the command line; return the exit status."""
    args = _parser().parse_args(argv)

    try:
        scene = import_scene(args.scene, args.base_path)
    except SceneImportError as err:
        print(f"Failed to load scene: {err}", file=sys.stderr)
        return 1

    try:
        generate_image(scene, args.output_dir)
    except (OSError, ValueError) as err:
        print(f"Failed to save image: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())