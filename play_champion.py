import sys

from flappy_capy import autopilot
from flappy_capy.__main__ import run
from flappy_capy.log import setup_logging

setup_logging("info")

# Load NEAT config
config = autopilot.load_neat_config()

# Load saved best genome
path = sys.argv[1] if len(sys.argv) > 1 else "champion_capy.pkl"
best_genome = autopilot.load_champion(path)

# Play champion capy
run(pilot=autopilot.pilot_for(best_genome, config))
