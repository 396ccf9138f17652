import logging

import pygame
from settings import Settings

logger = logging.getLogger(__name__)


class Button:
    def __init__(self, text, rect, action):
        self.text = text
        self.rect = pygame.Rect(rect)
        self.action = action
        self.hovered = False

    def draw(self, screen, font):
        color = Settings.BUTTON_HOVER_COLOR if self.hovered else Settings.BUTTON_COLOR
        pygame.draw.rect(screen, color, self.rect, border_radius=6)
        text_surf = font.render(self.text, True, Settings.BUTTON_TEXT_COLOR)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)

    def check_hover(self, mouse_pos):
        self.hovered = self.rect.collidepoint(mouse_pos)

    def check_click(self, mouse_pos):
        """Runs the action when the button was hit. Returns True if it was."""
        if self.rect.collidepoint(mouse_pos):
            self.action()
            return True
        return False


def configure_logging(level=logging.INFO):
    """Same log line format for every entry point."""
    logging.basicConfig(level=level, format=Settings.LOG_FORMAT)


def main():
    configure_logging()

    pygame.init()
    screen = pygame.display.set_mode((Settings.WINDOW_WIDTH, Settings.WINDOW_HEIGHT))
    pygame.display.set_caption("Main Menu")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, Settings.MENU_FONT_SIZE)
    title_font = pygame.font.SysFont(None, Settings.TITLE_FONT_SIZE)
    running = True

    # -------------------------
    # Actions for buttons
    # -------------------------
    def play_game():
        nonlocal running, screen
        logger.info("Two player game selected")
        from offline_game import Game
        game = Game()
        if game.run():
            # back from the game: restore the menu window
            screen = pygame.display.set_mode((Settings.WINDOW_WIDTH, Settings.WINDOW_HEIGHT))
            pygame.display.set_caption("Main Menu")
        else:
            running = False

    def exit_action():
        nonlocal running
        running = False

    # -------------------------
    # Create buttons
    # -------------------------
    button_width = 300
    button_height = 60
    button_margin = 20
    start_y = (Settings.WINDOW_HEIGHT - (2 * button_height + button_margin)) // 2

    buttons = [
        Button("Play (2 Players)",
               (Settings.WINDOW_WIDTH // 2 - button_width // 2, start_y, button_width, button_height),
               play_game),
        Button("Exit",
               (Settings.WINDOW_WIDTH // 2 - button_width // 2, start_y + (button_height + button_margin),
                button_width, button_height),
               exit_action),
    ]

    # -------------------------
    # Main loop
    # -------------------------
    while running:
        mouse_pos = pygame.mouse.get_pos()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for button in buttons:
                    if button.check_click(mouse_pos):
                        break

        if not running:
            break

        for button in buttons:
            button.check_hover(mouse_pos)

        screen.fill(Settings.BG_COLOR)
        title = title_font.render(Settings.WINDOW_TITLE, True, Settings.TEXT_COLOR)
        screen.blit(title, title.get_rect(center=(Settings.WINDOW_WIDTH // 2, start_y - 60)))
        for button in buttons:
            button.draw(screen, font)

        pygame.display.flip()
        clock.tick(Settings.FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
