import random
import unittest

from game import (
    CardKind,
    END_GRID_EMPTY,
    TurnOutcome,
    TurnPhase,
    deal_game,
)


def solve_greedily(game):
    """Plays perfect-memory turns until the match ends; returns the outcomes."""
    outcomes = []
    while not game.is_over:
        cards = list(game.grid.cards())
        normals = [(coord, card) for coord, card in cards if card.kind is CardKind.NORMAL]
        if normals:
            first_coord, first = normals[0]
            second_coord = next(coord for coord, card in normals if card.matches(first))
            outcomes.append(game.play_turn(first_coord, second_coord).outcome)
        else:
            outcomes.append(game.play_turn(cards[0][0]).outcome)
    return outcomes


class TestMemoryBasics(unittest.TestCase):
    def test_smallest_grid_has_one_pair_one_jolly_one_bomb(self):
        g = deal_game(['Ada', 'Bruno'], 2, 2, seed=0)
        kinds = sorted(card.kind.value for _, card in g.grid.cards())
        self.assertEqual(kinds, ['bomb', 'jolly', 'normal', 'normal'])

    def test_greedy_match_clears_every_grid(self):
        for rows, cols in [(2, 2), (2, 5), (4, 4), (6, 6)]:
            g = deal_game(['Ada', 'Bruno', 'Carla'], rows, cols, seed=rows * cols)
            outcomes = solve_greedily(g)
            self.assertEqual(g.phase, TurnPhase.GAME_OVER)
            self.assertEqual(g.end_reason, END_GRID_EMPTY)
            self.assertEqual(outcomes.count(TurnOutcome.MATCH), (rows * cols - 2) // 2)
            self.assertEqual(outcomes.count(TurnOutcome.BOMB), 1)
            self.assertEqual(outcomes.count(TurnOutcome.JOLLY), 1)
            self.assertNotIn(TurnOutcome.MISMATCH, outcomes)

    def test_mismatch_passes_turn_round_robin(self):
        g = deal_game(['Ada', 'Bruno', 'Carla'], 4, 4, seed=5)
        normals = [(coord, card) for coord, card in g.grid.cards() if card.kind is CardKind.NORMAL]
        a_coord, a = normals[0]
        b_coord = next(coord for coord, card in normals if card.symbol != a.symbol)
        seen = []
        for _ in range(4):
            seen.append(g.current)
            self.assertEqual(g.play_turn(a_coord, b_coord).outcome, TurnOutcome.MISMATCH)
        self.assertEqual(seen, [0, 1, 2, 0])

    def test_same_seed_same_random_source_same_match(self):
        g1 = deal_game(['Ada', 'Bruno'], 4, 4, rng=random.Random(99))
        g2 = deal_game(['Ada', 'Bruno'], 4, 4, seed=99)
        self.assertEqual(solve_greedily(g1), solve_greedily(g2))
        self.assertEqual([p.score for p in g1.players], [p.score for p in g2.players])


if __name__ == '__main__':
    unittest.main(verbosity=2)
