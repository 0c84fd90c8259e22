"""
Game configuration for the console TicTacToe engine.
Board geometry, display glyphs and operator messages.
"""


class GameConfig:
    """
    Configuration class for the game engine and console.
    Override values on an instance to change them for one game only.
    """

    # ==================== BOARD SETTINGS ====================
    # Classic 3x3 grid, cells indexed 0-8 in row-major order
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== DISPLAY SETTINGS ====================
    PLAYER_GLYPH = "X"
    CPU_GLYPH = "O"
    EMPTY_GLYPH = "."

    # Each glyph is padded to this width when drawing a row
    CELL_WIDTH = 3

    NO_BOARD_MESSAGE = "No moves yet!"

    # ==================== CONSOLE MESSAGES ====================
    PROMPT = "Choose index(0 to 8):"
    ENTERED_MESSAGE = "You entered: {index}"
    NOT_A_NUMBER_MESSAGE = "Please enter a valid number"

    OUT_OF_BOUNDS_MESSAGE = "Invalid index!\nMust be between 0 and 8"
    CELL_OCCUPIED_MESSAGE = "That area is already occupied!"
    NOT_STARTED_MESSAGE = "The game has not started!"

    PLAYER_WIN_MESSAGE = "** You win! **"
    CPU_WIN_MESSAGE = "** Cpu wins! **"
    TIE_MESSAGE = "** Tie! **"
    CPU_TURN_MESSAGE = "** Cpu turn **"
    PLAYER_TURN_MESSAGE = "** Your turn **"

    GOODBYE_MESSAGE = "Goodbye!"

    # ==================== DEBUG SETTINGS ====================
    # Print engine internals (rejected moves, CPU picks, score changes)
    DEBUG_MODE = False
