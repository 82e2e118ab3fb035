import pygame

import constants


class PygameRenderer:
    """Draws balls as filled circles on a pygame surface."""
    def __init__(self, screen, background=constants.BACKGROUND_COLOR):
        self.screen = screen
        self.background = background

    def clear(self):
        self.screen.fill(self.background)

    def draw_ball(self, position, radius, color):
        pygame.draw.circle(self.screen, color, (int(position.x), int(position.y)), radius)

    def draw_text(self, font, text, pos, color=constants.HUD_COLOR):
        surf = font.render(text, True, color)
        self.screen.blit(surf, pos)
        return surf
