"""Realtime swirl: particles chase the mouse in a pygame window.

    swirl [--palette ember] [--particles 50] [--seed 1] [--gif out.gif]
    python -m swirl --palette random --fullscreen

Keys: Esc quits, P cycles the palette, R respawns with a random config,
C clears the canvas.
"""

import argparse
import logging
import time
from collections import deque

import numpy as np
import pygame

from swirl.config import (
    PALETTE_NAMES,
    ConfigError,
    build_config,
    describe_config,
    generate_random_config,
)
from swirl.render import capture_frame, save_gif
from swirl.scene import Scene

# --- Display ---
WIDTH = 1280
HEIGHT = 720
FPS = 60

# --- GIF capture ---
GIF_FRAMES = 100


def build_parser():
    parser = argparse.ArgumentParser(description="Pointer-chasing particle swirl")
    parser.add_argument(
        "--palette",
        choices=PALETTE_NAMES + ["random"],
        default="ember",
        help="Hue palette (default: ember)",
    )
    parser.add_argument(
        "--particles", type=int, default=None, help="Number of particles (default: 50)"
    )
    parser.add_argument("--width", type=int, default=WIDTH, help=f"Window width (default: {WIDTH})")
    parser.add_argument(
        "--height", type=int, default=HEIGHT, help=f"Window height (default: {HEIGHT})"
    )
    parser.add_argument(
        "--fullscreen", action="store_true", help="Use the desktop size instead of --width/--height"
    )
    parser.add_argument("--fps", type=int, default=FPS, help=f"Frame cap (default: {FPS})")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--gif", type=str, default=None, help=f"Save the last {GIF_FRAMES} frames to this GIF on exit"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def pick_palette(name, rng):
    if name == "random":
        return PALETTE_NAMES[int(rng.integers(len(PALETTE_NAMES)))]
    return name


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = np.random.default_rng(args.seed)
    palette = pick_palette(args.palette, rng)
    try:
        config = build_config(palette=palette, amount=args.particles)
    except ConfigError as exc:
        parser.error(str(exc))

    for line in describe_config(config):
        print(line)

    pygame.init()
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height))
    clock = pygame.time.Clock()

    scene = Scene(screen.get_size(), config, rng)
    scene.clear(screen)
    frames = deque(maxlen=GIF_FRAMES)

    running = True
    while running:
        for event in pygame.event.get():
            if scene.handle_event(event):
                continue
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    palette = PALETTE_NAMES[(PALETTE_NAMES.index(palette) + 1) % len(PALETTE_NAMES)]
                    scene.respawn(build_config(palette=palette, base=scene.config))
                elif event.key == pygame.K_r:
                    scene.respawn(generate_random_config(rng, palette=palette, base=scene.config))
                    for line in describe_config(scene.config):
                        print(line)
                elif event.key == pygame.K_c:
                    scene.clear(screen)

        start = time.time()

        scene.frame(screen)
        pygame.display.flip()

        if args.gif:
            frames.append(capture_frame(screen))

        elapsed = (time.time() - start) * 1000
        pygame.display.set_caption(
            f"Swirl — tick={scene.tick}  palette={palette}  "
            f"particles={len(scene.particles)}  "
            f"pointer={'on' if scene.pointer.present else 'off'}  {elapsed:.0f}ms  "
            f"[P=palette R=randomize C=clear]"
        )

        clock.tick(args.fps)

    pygame.quit()

    if args.gif and frames:
        save_gif(args.gif, frames)


if __name__ == "__main__":
    main()
