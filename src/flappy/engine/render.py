import pygame

from .geometry import barrier_rects

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
OVERLAY_ALPHA = 128


def draw_bird(surf, bird, color):
    pygame.draw.rect(surf, color, bird.rect())


def draw_pipes(surf, pipes, color):
    H = surf.get_height()
    for p in pipes:
        for r in barrier_rects(p, H):
            pygame.draw.rect(surf, color, r)


def draw_hud(surf, font, score, color=WHITE):
    text = font.render(f"Score: {score}", True, color)
    surf.blit(text, (12, 10))


def draw_game_over(surf, big_font, font, color=WHITE, key_label="Space"):
    W, H = surf.get_size()
    # dim the frozen frame
    shade = pygame.Surface((W, H), pygame.SRCALPHA)
    shade.fill((*BLACK, OVERLAY_ALPHA))
    surf.blit(shade, (0, 0))

    title = big_font.render("Game Over!", True, color)
    hint = font.render(f"Press {key_label} to Restart", True, color)
    surf.blit(title, title.get_rect(center=(W // 2, H // 2)))
    surf.blit(hint, hint.get_rect(center=(W // 2, H // 2 + 40)))


def draw_world(surf, world, fonts):
    """Clear and redraw one frame. ``fonts`` is (hud, big, small)."""
    colors = world.config.colors
    hud_font, big_font, font = fonts
    surf.fill(colors.background)
    draw_bird(surf, world.bird, colors.bird)
    draw_pipes(surf, world.pipes, colors.pipe)
    draw_hud(surf, hud_font, world.score, colors.hud)
    if world.game_over:
        draw_game_over(surf, big_font, font, colors.text,
                       key_label=world.config.controls.flap_key.title())
