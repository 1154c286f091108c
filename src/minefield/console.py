"""
Console front end for the engine.

Turns typed coordinates such as ``b3`` into positions, asks the yes/no
questions needed to tell a flag from a reveal, and draws the board as
text. All game rules live in the engine modules.
"""
import argparse
import logging
import string
from typing import Callable, List, Optional, Tuple

from .board import DIFFICULTIES, BoardConfig
from .cell import CellView
from .errors import ConfigurationError, MinefieldError
from .game import Game, Phase

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

GLYPHS = {
    CellView.HIDDEN: ".",
    CellView.FLAGGED: "F",
    CellView.MINE: "*",
}


# ============================================================================
# Coordinates
# ============================================================================

def column_label(col: int) -> str:
    """Spreadsheet-style label for a 0-based column (A..Z, AA, AB, ...)."""
    label = ""
    col += 1
    while col:
        col, rem = divmod(col - 1, 26)
        label = string.ascii_uppercase[rem] + label
    return label


def parse_cell(text: str, width: int, height: int) -> Tuple[int, int]:
    """
    Parse a letter-column, numeric-row coordinate.

    Args:
        text: Input such as ``"b3"`` or ``"AA12"`` (rows are 1-based).
        width: Board width, for range checking.
        height: Board height, for range checking.

    Returns:
        0-based (row, col).

    Raises:
        ValueError: If the text is malformed or off the board.
    """
    text = text.strip().upper()
    letters = text.rstrip(string.digits)
    digits = text[len(letters):]
    if not letters or not digits or not letters.isalpha():
        raise ValueError(
            f"Invalid cell {text!r}; use a column letter and row number"
        )

    col = 0
    for letter in letters:
        if letter not in string.ascii_uppercase:
            raise ValueError(f"Invalid column {letters!r}")
        col = col * 26 + string.ascii_uppercase.index(letter) + 1
    col -= 1
    row = int(digits) - 1

    if not 0 <= col < width:
        raise ValueError(
            f"Column must be between A and {column_label(width - 1)}"
        )
    if not 0 <= row < height:
        raise ValueError(f"Row must be between 1 and {height}")
    return row, col


# ============================================================================
# Prompts
# ============================================================================

def read_input(prompt: str, input_fn: InputFn = input) -> str:
    """Prompt until a non-empty line is entered; returns it lowercased."""
    while True:
        line = input_fn(prompt).strip()
        if line:
            return line.lower()


def read_bool(
    prompt: str, input_fn: InputFn = input, output: OutputFn = print
) -> bool:
    """Prompt until the answer is yes or no."""
    while True:
        answer = read_input(prompt, input_fn)
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        output("Invalid input. Please enter either 'yes' or 'no'.")


def read_int(
    prompt: str,
    minimum: int,
    maximum: int,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> int:
    """Prompt until an integer in [minimum, maximum] is entered."""
    while True:
        answer = read_input(prompt, input_fn)
        try:
            value = int(answer)
        except ValueError:
            output("Invalid input. Please enter an integer.")
            continue
        if minimum <= value <= maximum:
            return value
        output(f"Number must be between {minimum} and {maximum} inclusive.")


# ============================================================================
# Rendering
# ============================================================================

def _glyph(game: Game, row: int, col: int) -> str:
    view = game.cell_view(row, col)
    if view is CellView.NUMBER:
        hint = game.hint_at(row, col)
        return str(hint) if hint else " "
    return GLYPHS[view]


def render(game: Game) -> str:
    """
    Render the board with lettered columns and 1-based row numbers.

    Hidden cells are ``.``, flags ``F``, mines ``*``, zero hints blank.
    """
    labels = [column_label(col) for col in range(game.width)]
    cell_width = max(len(label) for label in labels)
    gutter = len(str(game.height))

    header = " ".join(label.rjust(cell_width) for label in labels)
    lines = [" " * (gutter + 1) + header]
    for row in range(game.height):
        cells = [
            _glyph(game, row, col).rjust(cell_width)
            for col in range(game.width)
        ]
        lines.append(f"{row + 1:>{gutter}} " + " ".join(cells))
    return "\n".join(lines)


def status_line(game: Game) -> str:
    return f"Mines remaining: {game.mines_remaining}  Turn: {game.turn}"


# ============================================================================
# Game Loop
# ============================================================================

def _take_turn(game: Game, input_fn: InputFn, output: OutputFn) -> None:
    """Read one selection and apply it; bad input is reported, not raised."""
    text = read_input("Select a hidden cell (e.g. A1): ", input_fn)
    try:
        row, col = parse_cell(text, game.width, game.height)
    except ValueError as exc:
        output(str(exc))
        return

    view = game.cell_view(row, col)
    try:
        if view is CellView.FLAGGED:
            if read_bool("Unflag this cell? (yes/no): ", input_fn, output):
                game.toggle_flag(row, col)
            elif read_bool("Reveal this flagged cell? (yes/no): ",
                           input_fn, output):
                game.reveal(row, col, confirm=True)
        elif view is CellView.HIDDEN:
            if read_bool("Flag this cell? (yes/no): ", input_fn, output):
                game.toggle_flag(row, col)
            else:
                game.reveal(row, col)
        else:
            output("Selected cell must be hidden.")
    except MinefieldError as exc:
        output(str(exc))


def play(
    game: Game, input_fn: InputFn = input, output: OutputFn = print
) -> Phase:
    """
    Run a game to completion on the console.

    Returns:
        The terminal phase (won or lost).
    """
    while game.is_playing:
        output(render(game))
        output(status_line(game))
        _take_turn(game, input_fn, output)

    output(render(game))
    output(status_line(game))
    output("You win!" if game.is_won else "Game over!")
    return game.phase


def choose_config(
    input_fn: InputFn = input, output: OutputFn = print
) -> BoardConfig:
    """Ask the player for a difficulty preset."""
    names = list(DIFFICULTIES)
    for number, name in enumerate(names, start=1):
        config = DIFFICULTIES[name]
        output(f"{number}) {name.title()} "
               f"({config.width}x{config.height}, {config.num_mines} mines)")
    choice = read_int("Select difficulty: ", 1, len(names), input_fn, output)
    return DIFFICULTIES[names[choice - 1]]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minefield", description="Play a game of mine clearing."
    )
    parser.add_argument("--difficulty", choices=list(DIFFICULTIES),
                        help="Preset board (prompted for if omitted)")
    parser.add_argument("--width", type=int, help="Custom board width")
    parser.add_argument("--height", type=int, help="Custom board height")
    parser.add_argument("--mines", type=int, help="Custom mine count")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for mine placement")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log engine events")
    return parser


def _config_from_args(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> Optional[BoardConfig]:
    custom: List[Optional[int]] = [args.width, args.height, args.mines]
    if any(value is not None for value in custom):
        if args.difficulty or None in custom:
            parser.error("custom boards need --width, --height and --mines "
                         "and cannot be combined with --difficulty")
        try:
            return BoardConfig(args.width, args.height, args.mines)
        except ConfigurationError as exc:
            parser.error(str(exc))
    if args.difficulty:
        return DIFFICULTIES[args.difficulty]
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _config_from_args(args, parser) or choose_config(input, print)
        phase = play(Game(config, seed=args.seed), input, print)
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")
        return 1
    return 0 if phase is Phase.WON else 2
