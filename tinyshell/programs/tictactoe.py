"""Tic-tac-toe for two players at one terminal."""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import Enum

SIZE = 3

MoveReader = Callable[["Player"], "tuple[int, int]"]


class Player(Enum):
    NONE = "."
    X = "X"
    O = "O"  # noqa: E741


def _read_move_from_stdin(player: Player) -> tuple[int, int]:
    """Read 'row col' from standard input; unparsable input is an invalid move."""
    line = input()
    parts = line.split()
    try:
        return int(parts[0]), int(parts[1])
    except (IndexError, ValueError):
        return 0, 0


class TicTacToe:
    """The board and the player whose turn it is."""

    def __init__(self) -> None:
        self.board = [[Player.NONE] * SIZE for _ in range(SIZE)]
        self.current_player = Player.X

    def make_move(self, row: int, col: int) -> bool:
        """Place the current player's mark at a 0-based cell; False if not allowed."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            return False
        if self.board[row][col] is not Player.NONE:
            return False
        self.board[row][col] = self.current_player
        return True

    def _lines(self):
        yield from self.board
        yield from ([self.board[r][c] for r in range(SIZE)] for c in range(SIZE))
        yield [self.board[i][i] for i in range(SIZE)]
        yield [self.board[i][SIZE - 1 - i] for i in range(SIZE)]

    def check_winner(self) -> Player:
        for line in self._lines():
            if line[0] is not Player.NONE and all(cell is line[0] for cell in line):
                return line[0]
        return Player.NONE

    def switch_player(self) -> None:
        self.current_player = Player.O if self.current_player is Player.X else Player.X

    def render_board(self) -> str:
        rows = ["  1 2 3"]
        for number, row in enumerate(self.board, 1):
            rows.append(f"{number} " + "".join(f"{cell.value} " for cell in row))
        return "\n".join(rows) + "\n"

    def play_game(self, read_move: MoveReader | None = None) -> Player | None:
        """Play until someone wins or the board fills.

        Returns the winner, Player.NONE for a draw, or None when interrupted.
        """
        read_move = read_move or _read_move_from_stdin
        winner = Player.NONE
        move_count = 0
        try:
            while winner is Player.NONE and move_count < SIZE * SIZE:
                sys.stdout.write(self.render_board())
                print(
                    f"Player {self.current_player.value}, enter your move (row and column): ",
                    end="",
                    flush=True,
                )
                row, col = read_move(self.current_player)
                if self.make_move(row - 1, col - 1):
                    winner = self.check_winner()
                    if winner is Player.NONE:
                        self.switch_player()
                        move_count += 1
                else:
                    print("Invalid move. Try again.")
        except (KeyboardInterrupt, EOFError):
            print("\nGame interrupted. Exiting...")
            return None

        sys.stdout.write(self.render_board())
        if winner is not Player.NONE:
            print(f"Player {winner.value} wins!")
        else:
            print("It's a draw!")
        return winner


def main(argv=None) -> int:
    TicTacToe().play_game()
    return 0


if __name__ == "__main__":
    sys.exit(main())