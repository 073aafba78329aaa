# radial_menu/app/controllers/outputs.py
from radial_menu.app.controllers.wheel import WheelHandler
from radial_menu.app.events import CommandCommitted, RedrawRequested
from radial_menu.app.protocols import Launcher, Renderer


class OutputHandler:
    """Forwards the wheel's transitions to the external collaborators."""

    def __init__(self, wheel: WheelHandler, renderer: Renderer, launcher: Launcher):
        self.wheel = wheel
        self.renderer = renderer
        self.launcher = launcher

    def on_redraw(self, ev: RedrawRequested):
        self.renderer.request_redraw(self.wheel.snapshot())

    def on_command(self, ev: CommandCommitted):
        self.launcher.launch(ev.command)
