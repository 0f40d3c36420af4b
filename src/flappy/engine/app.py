import logging

import pygame

from flappy.data.schema import GameConfig
from flappy.engine.input import resolve_key
from flappy.states.boot import BootState
from .state import State

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, config: GameConfig):
        pygame.init()
        self.config = config

        W, H = config.window.width, config.window.height
        self.screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption(config.window.title)
        logger.info("Window %dx%d at %d fps", W, H, config.window.target_fps)

        self.clock = pygame.time.Clock()
        self.fps = config.window.target_fps
        self.flap_key = resolve_key(config.controls.flap_key)
        self.hud_font = pygame.font.SysFont("arial", 24)
        self.font = pygame.font.SysFont("arial", 20)
        self.big_font = pygame.font.SysFont("arial", 30)

        self.state_stack = []
        self.running = True

        self.push_state(BootState(self))

    def push_state(self, st: State, **kwargs):
        self.state_stack.append(st)
        st.enter(**kwargs)

    def pop_state(self):
        if self.state_stack:
            top = self.state_stack.pop()
            top.exit()

    def switch_state(self, st: State, **kwargs):
        self.pop_state()
        self.push_state(st, **kwargs)

    def current_state(self):
        return self.state_stack[-1] if self.state_stack else None

    def run(self):
        while self.running and self.current_state():
            dt = self.clock.tick(self.fps) / 1000.0
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                else:
                    self.current_state().handle_event(e)
            if not self.running or not self.current_state():
                break
            self.current_state().update(dt)
            self.current_state().draw(self.screen)
            pygame.display.flip()
        logger.info("Shutting down")
        pygame.quit()
