"""
main.py — Bootstrap

1. Load tuning values
2. Load rooms + items and build the World
3. Create the app around it
4. Push the room scene
5. Run
"""

from core import tuning
from core.app import App
from core.bootstrap import create_world
from scenes.world_scene import WorldScene


def main():
    tuning.load()
    world = create_world()
    app = App(world, title="Wizard's Tower")
    app.push_scene(WorldScene())
    app.run()


if __name__ == "__main__":
    main()
