import unittest

from pawnchess.board import Board
from pawnchess.errors import MoveParseError
from pawnchess.move import EnPassant, Move
from pawnchess.pawn import Color
from pawnchess.position import Position


class MoveParseTests(unittest.TestCase):
    def test_parses_coordinate_move(self) -> None:
        move = Move.parse("e2e4")
        self.assertEqual(move.from_, Position.parse("e2"))
        self.assertEqual(move.to, Position.parse("e4"))
        self.assertEqual(str(move), "e2e4")

    def test_rejects_malformed_text(self) -> None:
        for text in ("", "e2", "e2e", "e2e44", "e2-e4", "i2i4", "e0e1", "E2E4"):
            with self.subTest(text=text):
                with self.assertRaises(MoveParseError) as ctx:
                    Move.parse(text)
                self.assertEqual(str(ctx.exception), "Invalid Input")

    def test_double_step_detection(self) -> None:
        self.assertTrue(Move.parse("e2e4").is_double_step)
        self.assertTrue(Move.parse("d7d5").is_double_step)
        self.assertFalse(Move.parse("e2e3").is_double_step)
        self.assertFalse(Move.parse("e2f4").is_double_step)


class MoveEqualityTests(unittest.TestCase):
    def test_equality_ignores_subtype(self) -> None:
        board = Board.from_squares(black=["d5"])
        victim = board.at(Position.parse("d5"))
        en_passant = EnPassant(Position.parse("e5"), Position.parse("d6"), victim)

        self.assertEqual(Move.parse("e5d6"), en_passant)
        self.assertEqual(en_passant, Move.parse("e5d6"))
        self.assertEqual(hash(Move.parse("e5d6")), hash(en_passant))
        self.assertNotEqual(Move.parse("e5e6"), en_passant)


class MoveApplyTests(unittest.TestCase):
    def test_plain_move_relocates_pawn(self) -> None:
        board = Board()
        pawn = board.at(Position.parse("e2"))

        captured = Move.parse("e2e4").apply(board)

        self.assertEqual(captured, ())
        self.assertIsNone(board.at(Position.parse("e2")))
        self.assertIs(board.at(Position.parse("e4")), pawn)
        self.assertEqual(len(board.pawns), 16)

    def test_capture_removes_occupant(self) -> None:
        board = Board.from_squares(white=["e4"], black=["d5"])
        victim = board.at(Position.parse("d5"))

        captured = Move.parse("e4d5").apply(board)

        self.assertEqual(captured, (victim,))
        self.assertNotIn(victim, board.pawns)
        self.assertEqual(board.of_color(Color.BLACK), [])
        self.assertIs(board.at(Position.parse("d5")).color, Color.WHITE)

    def test_en_passant_removes_pawn_beside_destination(self) -> None:
        board = Board.from_squares(white=["e5"], black=["d5"])
        victim = board.at(Position.parse("d5"))
        capturer = board.at(Position.parse("e5"))

        captured = EnPassant(Position.parse("e5"), Position.parse("d6"), victim).apply(board)

        self.assertEqual(captured, (victim,))
        self.assertIsNone(board.at(Position.parse("d5")))
        self.assertIs(board.at(Position.parse("d6")), capturer)
        self.assertEqual(board.pawns, [capturer])

    def test_en_passant_onto_occupied_square_removes_both_pawns(self) -> None:
        # Only reachable when the advance jumped over the landing square.
        board = Board.from_squares(white=["d4"], black=["d3", "e4"])
        victim = board.at(Position.parse("d4"))
        jumped = board.at(Position.parse("d3"))
        capturer = board.at(Position.parse("e4"))

        captured = EnPassant(Position.parse("e4"), Position.parse("d3"), victim).apply(board)

        self.assertEqual(captured, (victim, jumped))
        self.assertEqual(board.pawns, [capturer])
        self.assertEqual(capturer.position, Position.parse("d3"))
