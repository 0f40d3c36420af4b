def apply_gravity(bird, gravity):
    bird.velocity += gravity
    bird.y += bird.velocity


def flap(bird, flap_speed):
    bird.velocity = flap_speed


def clamp_to_bounds(bird, height):
    """Keep the bird on screen. Returns True when it touched the ground."""
    if bird.y + bird.height > height:
        bird.y = height - bird.height
        return True
    if bird.y < 0:
        bird.y = 0
        bird.velocity = 0
    return False
