import logging

import pygame
from boardView import (
    build_draw_instructions,
    compute_layout,
    get_clicked_line,
    outcome_message,
    score_label,
    turn_label,
)
from gameLogic import AlreadyClaimed, GameAlreadyFinished, GameLogic, OutOfBounds
from mainMenu import Button, configure_logging
from settings import Settings

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, grid_size=Settings.GRID_SIZE):
        pygame.init()
        self.screen = pygame.display.set_mode((Settings.WINDOW_WIDTH, Settings.WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(Settings.WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.font = pygame.font.SysFont(None, Settings.FONT_SIZE)
        self.title_font = pygame.font.SysFont(None, Settings.TITLE_FONT_SIZE)

        # Initialize game logic
        self.gameLogic = GameLogic(grid_size)

        self.reset_button = Button("Reset", (0, 0, 110, 40), self.reset)
        self.play_again_button = Button("Play Again", (0, 0, 180, 48), self.reset)

        # Board geometry depends on the window size
        self.layout = None
        self.resize(Settings.WINDOW_WIDTH, Settings.WINDOW_HEIGHT)

        # Cache for hover logic
        self.hovered_edge = None

    def resize(self, width, height):
        """Recompute board geometry and HUD positions for a new window size."""
        if self.screen.get_size() != (width, height):
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.layout = compute_layout(width, height, self.gameLogic.grid_size)

        self.reset_button.rect.topright = (width - 20, 15)
        self.play_again_button.rect.center = (width // 2, height // 2 + 50)

    def reset(self):
        logger.info("game reset")
        self.gameLogic.reset()
        self.hovered_edge = None

    def run(self):
        """
        Main game loop.
        Returns True when the player goes back to the menu (Escape),
        False when the window was closed.
        """
        while self.running:
            if self.handle_events() == -1:
                return True
            self.update_hover_state()
            self.draw()
            self.clock.tick(Settings.FPS)
        self.quit()
        return False

    # --------------------
    # MOUSE DETECTION
    # --------------------
    def update_hover_state(self, mouse_pos=None):
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()

        self.reset_button.check_hover(mouse_pos)
        self.play_again_button.check_hover(mouse_pos)

        if self.gameLogic.is_over:
            self.hovered_edge = None
            return
        self.hovered_edge = get_clicked_line(self.layout, self.gameLogic.grid_size, *mouse_pos)

    def handle_events(self):
        """Handle user inputs (quit, mouse clicks, keys, resize)."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return -1
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:  # Left-click
                self.handle_click(event.pos)
        return 0

    def handle_click(self, mouse_pos):
        """
        Routes a left click: the end-of-game dialog first, then the reset
        button, then the board. Returns the MoveOutcome of a played move.
        """
        if self.gameLogic.is_over:
            self.play_again_button.check_click(mouse_pos)
            return None

        if self.reset_button.check_click(mouse_pos):
            return None

        edge = get_clicked_line(self.layout, self.gameLogic.grid_size, *mouse_pos)
        if edge is None:
            return None

        try:
            outcome = self.gameLogic.apply_move(*edge)
        except (AlreadyClaimed, GameAlreadyFinished):
            return None
        except OutOfBounds:
            logger.error("click mapped to an edge outside the board: %s", edge)
            return None

        if outcome.outcome is not None:
            logger.info("%s (%d - %d)", outcome_message(outcome.outcome), *outcome.scores)
        return outcome

    # --------------------
    # DRAWING
    # --------------------
    def draw(self):
        self.screen.fill(Settings.BG_COLOR)

        self.draw_status_bar()

        state = self.gameLogic.get_state()
        for instruction in build_draw_instructions(state, self.layout, self.hovered_edge):
            self.paint(instruction)

        if state.is_over:
            self.draw_message_box(outcome_message(state.outcome))

        pygame.display.flip()

    def paint(self, instruction):
        kind, color, points, size = instruction
        if kind == "box":
            x, y = points[0]
            pygame.draw.rect(self.screen, color, pygame.Rect(round(x), round(y), round(size), round(size)))
        elif kind == "line":
            pygame.draw.line(self.screen, color, points[0], points[1], size)
        elif kind == "dot":
            pygame.draw.circle(self.screen, color, points[0], size)

    def draw_status_bar(self):
        """Score labels (active player highlighted), current turn and the reset button."""
        scores = self.gameLogic.scores
        current = self.gameLogic.current_player

        for i, player in enumerate(Settings.PLAYERS):
            idle, active = Settings.SCORE_LABEL_COLORS[player]
            rect = pygame.Rect(20 + i * 160, 15, 150, 40)
            pygame.draw.rect(self.screen, active if player == current else idle, rect, border_radius=6)
            text = self.font.render(score_label(player, scores[player]), True, Settings.TEXT_COLOR)
            self.screen.blit(text, text.get_rect(center=rect.center))

        if current is not None:
            turn_text = self.font.render(turn_label(current), True, Settings.TEXT_COLOR)
            self.screen.blit(turn_text, (20, 70))

        self.reset_button.draw(self.screen, self.font)

    def draw_message_box(self, message):
        """Modal end-of-game dialog drawn over the board."""
        width, height = self.screen.get_size()

        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(Settings.OVERLAY_COLOR)
        self.screen.blit(overlay, (0, 0))

        dialog = pygame.Rect(0, 0, min(360, width - 40), 200)
        dialog.center = (width // 2, height // 2)
        pygame.draw.rect(self.screen, Settings.DIALOG_COLOR, dialog, border_radius=10)

        title = self.title_font.render("Game Over!", True, Settings.TEXT_COLOR)
        self.screen.blit(title, title.get_rect(center=(dialog.centerx, dialog.top + 40)))
        text = self.font.render(message, True, Settings.TEXT_COLOR)
        self.screen.blit(text, text.get_rect(center=(dialog.centerx, dialog.top + 85)))

        self.play_again_button.draw(self.screen, self.font)

    def quit(self):
        """Clean up pygame on exit."""
        pygame.quit()


# --------------------
# MAIN ENTRY POINT
# --------------------
if __name__ == "__main__":
    configure_logging()
    game = Game()
    game.run()
