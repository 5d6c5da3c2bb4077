"""Pawns-only chess: rule validation and turn resolution for an 8x8 pawn game."""
