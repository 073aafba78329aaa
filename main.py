# main.py
import sys

import yaml

from radial_menu.app.build import build

# scripted gesture: list of [kind, x, y] with kind in down/move/up
STEPS = {"down": "pointer_down", "move": "pointer_motion", "up": "pointer_up"}


def run(gestures, cfg=None) -> list[str]:
    app = build(cfg)
    try:
        for t, (kind, x, y) in enumerate(gestures):
            getattr(app, STEPS[kind])(float(x), float(y), t=float(t))
    finally:
        app.close()
    return app.outputs.launcher.commands


if __name__ == "__main__":
    # python main.py gestures.yaml [app.yaml]
    with open(sys.argv[1], encoding="utf-8") as fh:
        gestures = yaml.safe_load(fh)
    for command in run(gestures, sys.argv[2] if len(sys.argv) > 2 else None):
        print(command)
