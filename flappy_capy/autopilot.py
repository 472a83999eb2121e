"""
A NEAT-evolved autopilot that presses the activate input for you.

Training runs the same Level and Capy the game uses, headless and
without a frame scheduler, so a generation evaluates in a fraction of
real time. The network sees four normalized inputs:

    y_norm      = capy.y / field height
    top_diff    = (capy.y - gap_top) / field height
    bottom_diff = (capy.y - gap_bottom) / field height
    vel_norm    = capy.vel / terminal velocity

and flaps when its single tanh output exceeds ``FLAP_THRESHOLD``.
"""

import logging
import os
import pickle
import random
import statistics
import time

import neat

from .capy import Capy
from .config import GameConfig
from .level import Level

logger = logging.getLogger(__name__)

NEAT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config-feedforward.txt")

FLAP_THRESHOLD = 0.5
MAX_FRAMES = 3000  # 50 seconds of play at 60 fps

# Fitness shaping
ALIVE_REWARD = 0.1
PIPE_REWARD = 20
DEATH_PENALTY = 1
FLAP_PENALTY = 0.03


def next_pipe(level, capy):
    """The first pipe pair the capy has not yet cleared."""
    for pipe in level.pipes:
        if pipe.right >= capy.x:
            return pipe
    return level.pipes[-1]


def observe(level, capy, config):
    pipe = next_pipe(level, capy)
    height = config.height
    return (
        capy.y / height,
        (capy.y - pipe.gap_top) / height,
        (capy.y - pipe.gap_bottom) / height,
        capy.vel / config.capy.terminal_vel,
    )


class NeatPilot:
    """Decides, once per frame, whether the game should receive an activate input."""

    def __init__(self, net, threshold=FLAP_THRESHOLD):
        self.net = net
        self.threshold = threshold

    def wants_flap(self, game):
        output = self.net.activate(observe(game.level, game.capy, game.config))
        return output[0] > self.threshold


def simulate(net, game_config, rng, max_frames=MAX_FRAMES):
    """
    Fly one headless session with ``net`` at the controls.

    Returns ``(fitness, score)``. The session ends on the first collision
    or after ``max_frames`` frames.
    """
    level = Level(game_config, rng=rng)
    capy = Capy(game_config)
    fitness = 0.0
    score = 0

    def cleared():
        nonlocal fitness, score
        score += 1
        fitness += PIPE_REWARD

    for _ in range(max_frames):
        if net.activate(observe(level, capy, game_config))[0] > FLAP_THRESHOLD:
            capy.flap()
            fitness -= FLAP_PENALTY

        level.move_pipes()
        capy.move()

        if level.collides_with(capy.bounds()) or capy.out_of_bounds():
            fitness -= DEATH_PENALTY
            break

        fitness += ALIVE_REWARD
        level.passed_pipe(capy.bounds(), cleared)

    return fitness, score


def eval_genomes(genomes, config, game_config=None, max_frames=MAX_FRAMES):
    """
    NEAT evaluation function. Every genome in the generation flies the
    same course so their fitness values are comparable.
    """
    game_config = game_config or GameConfig()
    seed = random.randrange(2 ** 32)

    for _, genome in genomes:
        net = neat.nn.FeedForwardNetwork.create(genome, config)
        genome.fitness, _ = simulate(net, game_config, random.Random(seed), max_frames)


class SimpleReporter(neat.reporting.BaseReporter):
    """Per-generation summary through the logger instead of stdout."""

    def __init__(self):
        self.generation = None
        self.start_time = None

    def start_generation(self, generation):
        self.generation = generation
        self.start_time = time.time()
        logger.info("Running generation %d", generation)

    def post_evaluate(self, config, population, species, best_genome):
        fitnesses = [g.fitness for g in population.values() if g.fitness is not None]

        if fitnesses:
            avg_fitness = statistics.mean(fitnesses)
            stdev_fitness = statistics.pstdev(fitnesses) if len(fitnesses) > 1 else 0.0
        else:
            avg_fitness = 0.0
            stdev_fitness = 0.0

        logger.info("Population's average fitness: %.5f stdev: %.5f", avg_fitness, stdev_fitness)
        logger.info(
            "Best fitness: %.5f - size: (%d, %d)",
            best_genome.fitness,
            len(best_genome.nodes),
            len(best_genome.connections),
        )
        for sid, s in species.species.items():
            best_in_species = max(
                (population[g].fitness for g in s.members if population[g].fitness is not None),
                default=0.0,
            )
            logger.debug("species %d size %d best %.1f", sid, len(s.members), best_in_species)

    def end_generation(self, config, population, species):
        if self.start_time is not None:
            logger.info("Generation time: %.3f sec", time.time() - self.start_time)


def load_neat_config(path=NEAT_CONFIG_PATH):
    return neat.config.Config(
        neat.DefaultGenome,
        neat.DefaultReproduction,
        neat.DefaultSpeciesSet,
        neat.DefaultStagnation,
        path,
    )


def train(generations=50, neat_config_path=NEAT_CONFIG_PATH, output=None):
    """Evolve a champion for up to ``generations`` generations; pickle it to ``output`` if given."""
    config = load_neat_config(neat_config_path)

    p = neat.Population(config)
    p.add_reporter(SimpleReporter())
    p.add_reporter(neat.StatisticsReporter())

    winner = p.run(eval_genomes, generations)

    logger.info(
        "Training done: best fitness %.2f, %d nodes, %d connections",
        winner.fitness,
        len(winner.nodes),
        len(winner.connections),
    )
    if output:
        save_champion(winner, output)
    return config, winner


def save_champion(genome, path):
    with open(path, "wb") as f:
        pickle.dump(genome, f)
    logger.info("Champion saved to %s", path)


def load_champion(path):
    with open(path, "rb") as f:
        genome = pickle.load(f)
    logger.info("Loaded champion from %s", path)
    return genome


def pilot_for(genome, config):
    return NeatPilot(neat.nn.FeedForwardNetwork.create(genome, config))
