from connect4_rules.utils import COLUMNS, ROWS, Pawn


def draw_color(column, row):
    """Colouring of a full board with no four-in-a-row anywhere."""
    return Pawn.RED if (column // 2 + row) % 2 == 0 else Pawn.YELLOW


def fill_without_win(board):
    """Fill the board row by row; returns every outcome seen."""
    results = []
    for row in range(ROWS):
        for column in range(COLUMNS):
            results.append(board.add_pawn(draw_color(column, row), column))
    return results
