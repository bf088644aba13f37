import unittest

from game import Card, CardKind, rules


class TestCard(unittest.TestCase):
    def test_given_new_card_when_created_then_face_down(self):
        card = Card('A', 3)
        self.assertFalse(card.face_up)
        self.assertIs(card.kind, CardKind.NORMAL)
        self.assertEqual(card.label(), rules.HIDDEN_SYMBOL)

    def test_given_card_when_flipping_without_state_then_toggles(self):
        card = Card('A', 3)
        card.flip()
        self.assertTrue(card.face_up)
        self.assertEqual(card.label(), 'A')
        card.flip()
        self.assertFalse(card.face_up)

    def test_given_card_when_flipping_with_state_then_sets_exactly(self):
        card = Card('A', 3)
        card.flip(True)
        card.flip(True)
        self.assertTrue(card.face_up)
        card.flip(False)
        self.assertFalse(card.face_up)

    def test_given_two_distinct_cards_with_same_symbol_when_matching_then_true(self):
        a1 = Card('A', 3)
        a2 = Card('A', 3)
        self.assertTrue(a1.matches(a2))
        self.assertTrue(a2.matches(a1))

    def test_given_same_card_instance_when_matching_itself_then_false(self):
        a1 = Card('A', 3)
        self.assertFalse(a1.matches(a1))

    def test_given_different_symbols_or_none_when_matching_then_false(self):
        self.assertFalse(Card('A', 3).matches(Card('B', 3)))
        self.assertFalse(Card('A', 3).matches(None))

    def test_given_special_cards_when_matching_then_never_match(self):
        self.assertFalse(Card.bomb().matches(Card.bomb()))
        self.assertFalse(Card.jolly().matches(Card.jolly()))
        self.assertFalse(Card.bomb().matches(Card.jolly()))
        # A normal card wearing the jolly symbol still does not pair with the jolly
        self.assertFalse(Card(rules.JOLLY_SYMBOL, 4).matches(Card.jolly()))

    def test_given_special_factories_when_created_then_kinds_and_points(self):
        bomb = Card.bomb()
        jolly = Card.jolly()
        self.assertTrue(bomb.is_bomb and bomb.is_special)
        self.assertTrue(jolly.is_jolly and jolly.is_special)
        self.assertEqual(bomb.points, rules.BOMB_POINTS)
        self.assertEqual(jolly.points, rules.JOLLY_POINTS)
        self.assertEqual(str(bomb), rules.BOMB_SYMBOL)

    def test_given_invalid_values_when_creating_then_value_error(self):
        with self.assertRaises(ValueError):
            Card('A', 0)
        with self.assertRaises(ValueError):
            Card('AB', 1)
        with self.assertRaises(ValueError):
            Card(rules.HIDDEN_SYMBOL, 1)
        with self.assertRaises(ValueError):
            Card('\n', 1)
        with self.assertRaises(ValueError):
            Card.jolly(points=0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
