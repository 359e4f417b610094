"""Offline rendering: run the swirl headless and save the result.

No window is opened. The pointer follows a scripted circle around the
surface centre, and the final frame is written as a PNG.

    swirl-render [--frames 600] [--output swirl.png] [--gif swirl.gif]
    python -m swirl.render --frames 1200 --palette ocean --seed 7
"""

import argparse
import logging
import math
import time

import imageio
import numpy as np
import pygame
from PIL import Image

from swirl.config import PALETTE_NAMES, ConfigError, build_config, describe_config
from swirl.scene import Scene

logger = logging.getLogger(__name__)

# --- Defaults ---
WIDTH = 960
HEIGHT = 540
FRAMES = 600
GIF_EVERY = 4
GIF_FPS = 30

# --- Scripted pointer ---
PATH_RADIUS = 0.3  # fraction of the shorter surface side
PATH_PERIOD = 240  # frames per lap


def pointer_path(frame, size, radius=PATH_RADIUS, period=PATH_PERIOD):
    """Pointer position at `frame` on a circle around the surface centre."""
    width, height = size
    r = min(width, height) * radius
    theta = 2 * math.pi * frame / period
    return width / 2 + math.cos(theta) * r, height / 2 + math.sin(theta) * r


def capture_frame(surface):
    """Surface pixels as a (height, width, 3) uint8 array."""
    # surfarray is (width, height), images are (height, width)
    return np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))


def save_gif(path, frames, fps=GIF_FPS):
    imageio.mimsave(path, list(frames), duration=1000 / fps, loop=0)
    logger.info("Saved %d frames to %s", len(frames), path)


def render_frames(scene, surface, frames, gif_every=None, progress=None):
    """Advance `scene` for `frames` steps on `surface`.

    Returns the captured frames when `gif_every` is set, else an empty list.
    `progress(step)` is called after each step.
    """
    captured = []
    scene.clear(surface)
    for step in range(frames):
        scene.pointer.move(*pointer_path(step, scene.size))
        scene.frame(surface)
        if gif_every and step % gif_every == 0:
            captured.append(capture_frame(surface))
        if progress is not None:
            progress(step)
    return captured


def save_png(surface, path):
    image = Image.fromarray(capture_frame(surface), "RGB")
    image.save(path)
    return image


def build_parser():
    parser = argparse.ArgumentParser(description="Swirl offline renderer")
    parser.add_argument(
        "--frames", type=int, default=FRAMES, help=f"Frames to simulate (default: {FRAMES})"
    )
    parser.add_argument("--width", type=int, default=WIDTH, help=f"Image width (default: {WIDTH})")
    parser.add_argument(
        "--height", type=int, default=HEIGHT, help=f"Image height (default: {HEIGHT})"
    )
    parser.add_argument(
        "--particles", type=int, default=None, help="Number of particles (default: 50)"
    )
    parser.add_argument(
        "--palette", choices=PALETTE_NAMES, default="ember", help="Hue palette (default: ember)"
    )
    parser.add_argument(
        "--output", type=str, default="swirl.png", help="Output filename (default: swirl.png)"
    )
    parser.add_argument("--gif", type=str, default=None, help="Also save an animated GIF here")
    parser.add_argument(
        "--gif-every",
        type=int,
        default=GIF_EVERY,
        help=f"Keep every Nth frame in the GIF (default: {GIF_EVERY})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.frames < 1:
        parser.error("--frames must be at least 1")
    if args.gif_every < 1:
        parser.error("--gif-every must be at least 1")
    try:
        config = build_config(palette=args.palette, amount=args.particles)
    except ConfigError as exc:
        parser.error(str(exc))

    print(f"{args.output}")
    for line in describe_config(config):
        print(line)
    print()

    rng = np.random.default_rng(args.seed)
    surface = pygame.Surface((args.width, args.height))
    scene = Scene(surface.get_size(), config, rng)

    t_start = time.time()

    def progress(step):
        if (step + 1) % 100 == 0 or step == 0:
            elapsed = time.time() - t_start
            rate = (step + 1) / max(elapsed, 1e-9)
            eta = (args.frames - step - 1) / rate
            print(
                f"  frame {step + 1}/{args.frames}  "
                f"({elapsed:.1f}s elapsed, ~{eta:.0f}s remaining, {rate:.0f} frames/s)"
            )

    captured = render_frames(
        scene, surface, args.frames, args.gif_every if args.gif else None, progress
    )

    print()
    print(f"Simulation complete: {time.time() - t_start:.1f}s")

    save_png(surface, args.output)
    print(f"Saved: {args.output} ({args.width}x{args.height})")

    if args.gif:
        save_gif(args.gif, captured)
        print(f"Saved: {args.gif} ({len(captured)} frames)")


if __name__ == "__main__":
    main()
