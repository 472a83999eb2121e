# Image and sound files, relative to the assets directory.
# Each image carries a fallback size and colour used when the file is missing.

IMAGES = {
    "background": ("images/background-sky-and-grass.png", (1920, 640), (135, 206, 235)),
    "top-pipe": ("images/top-pipe.png", (50, 640), (76, 175, 80)),
    "bottom-pipe": ("images/bottom-pipe.png", (50, 640), (76, 175, 80)),
    "capy-wings1": ("images/capy-wings1.png", (45, 33), (160, 110, 60)),
    "capy-wings2": ("images/capy-wings2.png", (45, 33), (160, 110, 60)),
    "capy-wings3": ("images/capy-wings3.png", (45, 33), (160, 110, 60)),
}

# cue name -> (file, loops); -1 loops forever
SOUNDS = {
    "idle": ("audio/start.mp3", -1),
    "play": ("audio/gameplay.mp3", -1),
    "death": ("audio/dead.mp3", 0),
}
