import pygame


def resolve_key(name):
    """Map a key name from the config ("space", "UP", "w") to a pygame key code."""
    for attr in ("K_" + name, "K_" + name.upper(), "K_" + name.lower()):
        code = getattr(pygame, attr, None)
        if isinstance(code, int):
            return code
    return None


def is_flap(e, key=pygame.K_SPACE):
    return (e.type==pygame.KEYDOWN and e.key == key)

def is_quit(e):
    return (e.type==pygame.QUIT or (e.type==pygame.KEYDOWN and e.key==pygame.K_ESCAPE))
