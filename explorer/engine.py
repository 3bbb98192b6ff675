"""
Main game engine - handles the frame loop, input routing, and coordination.

Each tick runs the same pipeline:
    events -> movement -> proximity -> interaction -> render sync
and ends by asking the scheduler for the next tick.
"""
from __future__ import annotations

import pygame

from config import FPS
from explorer.content import ARTIFACT_INFO, DEFAULT_SCENE
from explorer.debug import debug_log
from explorer.graphics.font_cache import clear_caches
from explorer.sim.scheduler import ClockScheduler, Scheduler
from explorer.state import GameState
from explorer.systems import (
    InteractionController, MovementController, ProximityDetector,
    normalize_key, is_close_key,
)
from explorer.systems.input_state import INTERACT_KEY
from explorer.ui.render_sync import RenderSink, RenderSync
from explorer.world import WorldModel

# pygame key codes whose names differ from the identifiers the game uses.
KEY_NAMES = {
    pygame.K_LEFT: "arrowleft",
    pygame.K_RIGHT: "arrowright",
    pygame.K_RETURN: "enter",
    pygame.K_KP_ENTER: "enter",
    pygame.K_SPACE: "space",
    pygame.K_ESCAPE: "escape",
}


def key_identifier(key_code: int) -> str:
    """Map a pygame key code to a game key identifier."""
    name = KEY_NAMES.get(key_code)
    if name is None:
        name = pygame.key.name(key_code)
    return normalize_key(name)


class GameEngine:
    """Main game engine class."""

    def __init__(
        self,
        world: WorldModel | None = None,
        scheduler: Scheduler | None = None,
        sink: RenderSink | None = None,
        fps: int = FPS,
    ):
        if world is None:
            world = WorldModel.from_scene(ARTIFACT_INFO, DEFAULT_SCENE)
        self.world = world

        # Without an injected sink we own a real window and the pygame event queue.
        self.view = None
        self.pump_events = sink is None
        if sink is None:
            pygame.init()
            pygame.font.init()
            from explorer.ui.pygame_view import PygameView
            self.view = PygameView(world)
            sink = self.view

        self.scheduler = scheduler or ClockScheduler(fps)
        self.running = True

        self.state = GameState.new(world)

        # Systems
        self.movement = MovementController()
        self.proximity = ProximityDetector()
        self.interaction = InteractionController()
        self.render_sync = RenderSync(sink)

        debug_log(
            f"World ready: width={world.world_width:g} artifacts={world.total_artifacts} "
            f"start_x={self.state.player_x:g}"
        )

    # --- Input ---------------------------------------------------------------

    def handle_events(self):
        """Process pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self.key_down(key_identifier(event.key))

            elif event.type == pygame.KEYUP:
                self.key_up(key_identifier(event.key))

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self.click(event.pos)

            # Pygame 2 window focus event: keyups never arrive after focus is lost.
            elif hasattr(pygame, "WINDOWFOCUSLOST") and event.type == pygame.WINDOWFOCUSLOST:
                self.state.input.release_all()

    def key_down(self, key: str):
        """Handle a key press (identifier, any case)."""
        key = normalize_key(key)
        state = self.state
        was_held = state.input.is_held(key)
        state.input.set_key_held(key, True)

        if state.popup_open:
            # Only close keys do anything while the popup is up.
            if is_close_key(key):
                self.close_popup()
            return

        if key == INTERACT_KEY and not was_held:
            state.input.press_interaction()

    def key_up(self, key: str):
        self.state.input.set_key_held(key, False)

    def click(self, pos):
        """Left click: the popup's close button is the only clickable control."""
        if self.view is not None and self.state.popup_open and self.view.popup.hit_close(pos):
            self.close_popup()

    def close_popup(self) -> bool:
        return self.interaction.close(self.state)

    # --- Frame loop ----------------------------------------------------------

    def tick(self):
        """Run one frame and schedule the next."""
        if self.pump_events:
            self.handle_events()
        if not self.running:
            return

        state = self.state
        camera_x = self.movement.step(state)
        self.proximity.scan(state)
        if state.input.consume_interaction_press(popup_open=state.popup_open):
            self.interaction.try_open(state, state.active_artifact)

        self.render_sync.sync(state, camera_x)
        self.scheduler.request_tick(self.tick)

    def start(self):
        """Queue the first tick."""
        self.scheduler.request_tick(self.tick)

    def run(self):
        """Main game loop (blocks until the window is closed)."""
        self.start()
        try:
            run = getattr(self.scheduler, "run", None)
            if run is None:
                raise TypeError(f"{type(self.scheduler).__name__} cannot drive a realtime loop")
            run()
        finally:
            if self.view is not None:
                clear_caches()
                pygame.quit()
