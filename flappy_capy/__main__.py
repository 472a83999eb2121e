import argparse
import random

import pygame

from . import display
from .config import GameConfig
from .game import FlappyCapy
from .log import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="flappy-capy", description="Play Flappy Capy.")
    parser.add_argument("--assets", default="assets", help="Directory holding images/ and audio/.")
    parser.add_argument("--log-level", default="info", help="Logging level (debug, info, warning).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe placement.")
    parser.add_argument("--champion", default=None, help="Pickled NEAT genome to fly the capy.")
    parser.add_argument(
        "--train",
        type=int,
        default=None,
        metavar="GENERATIONS",
        help="Train an autopilot for this many generations, then watch it play.",
    )
    parser.add_argument("--save", default="champion_capy.pkl", help="Where --train writes the champion.")
    return parser.parse_args(argv)


def run(config=None, assets_dir="assets", seed=None, pilot=None):
    """Open the window and play until it is closed."""
    config = config or GameConfig()
    screen = display.open_window(config)
    surface = display.PygameSurface(screen, display.load_images(assets_dir))
    cues = display.load_cues(assets_dir)
    scheduler = display.FrameScheduler(fps=config.level.frame_rate)

    game = FlappyCapy(surface, scheduler, cues, config=config, rng=random.Random(seed))
    try:
        scheduler.run(game, pilot=pilot)
    finally:
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    pilot = None
    if args.train is not None or args.champion:
        # neat is only needed for the autopilot
        from . import autopilot

        if args.train is not None:
            neat_config, genome = autopilot.train(args.train, output=args.save)
        else:
            neat_config = autopilot.load_neat_config()
            genome = autopilot.load_champion(args.champion)
        pilot = autopilot.pilot_for(genome, neat_config)

    run(assets_dir=args.assets, seed=args.seed, pilot=pilot)


if __name__ == "__main__":
    main()
