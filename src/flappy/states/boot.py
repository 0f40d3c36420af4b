from flappy.engine.state import State
from .gameplay import GameplayState


class BootState(State):
    def enter(self, **kwargs):
        # Nothing to preload yet: straight into the game
        self.app.switch_state(GameplayState(self.app))

    def draw(self, screen):
        screen.fill(self.app.config.colors.background)
