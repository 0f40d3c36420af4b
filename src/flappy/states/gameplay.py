from flappy.engine.input import is_flap, is_quit
from flappy.engine.render import draw_world
from flappy.engine.state import State
from flappy.engine.world import World


class GameplayState(State):
    def enter(self, **kwargs):
        self.world = World(self.app.config, rng=kwargs.get("rng"))

    def handle_event(self, e):
        if is_quit(e):
            self.app.running = False
        elif is_flap(e, self.app.flap_key):
            self.world.press()

    def update(self, dt):
        # dt arrives in seconds; the spawner counts milliseconds
        self.world.step(dt * 1000.0)

    def draw(self, screen):
        draw_world(screen, self.world,
                   (self.app.hud_font, self.app.big_font, self.app.font))
