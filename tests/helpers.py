from blockfall_piece import COLS


class SequenceRandom:
    """Hands out a fixed list of piece types, repeating the last one."""

    def __init__(self, *types):
        self.types = list(types)

    def next_piece(self):
        if len(self.types) > 1:
            return self.types.pop(0)
        return self.types[0]


def full_row(gaps=()):
    return [0 if c in gaps else 1 for c in range(COLS)]


def drop(game, limit=40):
    for _ in range(limit):
        result = game.tick()
        if result.landed or result.game_over:
            return result
    raise AssertionError("piece never landed")
