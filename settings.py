class Settings:
    # --------------------------
    # GAME
    # --------------------------
    GRID_SIZE = 5  # dots per side, so (GRID_SIZE - 1) ** 2 boxes
    PLAYER1 = 0
    PLAYER2 = 1
    PLAYERS = (PLAYER1, PLAYER2)

    # --------------------------
    # WINDOW
    # --------------------------
    WINDOW_TITLE = "Dots and Boxes"
    WINDOW_WIDTH = 520
    WINDOW_HEIGHT = 620
    FPS = 60

    # --------------------------
    # BOARD GEOMETRY (pixels)
    # --------------------------
    DOT_RADIUS = 5
    LINE_THICKNESS = 4
    CLICK_TOLERANCE = 5
    BOARD_MARGIN = 60  # space kept free around the board
    MAX_BOARD_SIZE = 450
    MIN_BOARD_SIZE = 120
    HUD_HEIGHT = 110  # score labels, turn label and reset button above the board

    # --------------------------
    # COLORS
    # --------------------------
    BG_COLOR = (245, 245, 245)
    DOT_COLOR = (51, 51, 51)
    TEXT_COLOR = (33, 33, 33)
    PLAYERS_LINE_COLORS = {PLAYER1: (255, 138, 101), PLAYER2: (100, 181, 246)}
    BOX_FILL_COLORS = {PLAYER1: (255, 204, 188), PLAYER2: (187, 222, 251)}
    PLAYER_MOUSE_ON_OBJECT_COLOR = {PLAYER1: (255, 204, 188), PLAYER2: (187, 222, 251)}

    # score label backgrounds: (idle, active)
    SCORE_LABEL_COLORS = {
        PLAYER1: ((255, 224, 178), (255, 204, 128)),
        PLAYER2: ((187, 222, 251), (144, 202, 249)),
    }

    BUTTON_COLOR = (70, 130, 180)
    BUTTON_HOVER_COLOR = (100, 160, 210)
    BUTTON_TEXT_COLOR = (255, 255, 255)
    OVERLAY_COLOR = (0, 0, 0, 140)
    DIALOG_COLOR = (255, 255, 255)

    # --------------------------
    # FONTS
    # --------------------------
    FONT_SIZE = 28
    TITLE_FONT_SIZE = 40
    MENU_FONT_SIZE = 36

    # --------------------------
    # LOGGING
    # --------------------------
    LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
