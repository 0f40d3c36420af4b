class State:
    """
    One screen on GameApp's state stack. The app calls, every frame and only
    on the top state: handle_event() per pygame event, update(dt) with dt in
    seconds, then draw(screen). enter()/exit() run on push and pop.
    """
    def __init__(self, app):
        self.app = app

    def enter(self, **kwargs): pass
    def exit(self): pass

    def handle_event(self, e): pass
    def update(self, dt: float): pass
    def draw(self, screen): pass
