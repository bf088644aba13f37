import unittest

from game import Card, Game, Grid, Player, TurnOutcome
from memory_core.console import (
    ConsoleInput,
    ConsoleView,
    colorize,
    render_grid,
    render_leaderboard,
)


def scripted(answers):
    it = iter(answers)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(it)
    return read, prompts


def small_game():
    grid = Grid(2, 2)
    grid.set_card((1, 1), Card('A', 3))
    grid.set_card((1, 2), Card('A', 3))
    grid.set_card((2, 1), Card.jolly())
    grid.set_card((2, 2), Card.bomb())
    return Game([Player(name='Ada'), Player(name='Bruno')], grid)


class TestConsoleInput(unittest.TestCase):
    def setUp(self):
        self.out = []

    def _input(self, answers):
        read, prompts = scripted(answers)
        return ConsoleInput(read=read, write=self.out.append, color=False), prompts

    def test_given_non_integer_when_reading_int_then_reprompts(self):
        ci, prompts = self._input(['x', ' 5 '])
        self.assertEqual(ci.read_int('Value'), 5)
        self.assertEqual(self.out, ['Error, must be an integer'])
        self.assertEqual(prompts, ['Value: ', 'Value: '])

    def test_given_out_of_range_when_reading_then_reprompts(self):
        ci, _ = self._input(['1', '7', '3'])
        self.assertEqual(ci.read_roster_size(), 3)
        self.assertEqual(self.out, ['Number out of range', 'Number out of range'])

    def test_given_names_when_reading_then_blank_is_random_and_bad_length_rejected(self):
        ci, _ = self._input(['   ', 'Al', 'x' * 16, ' Ada '])
        self.assertIsNone(ci.read_player_name(0))
        self.assertEqual(ci.read_player_name(1), 'Ada')
        self.assertEqual(len(self.out), 2)

    def test_given_odd_grid_when_reading_dimensions_then_asks_again(self):
        ci, _ = self._input(['3', '3', '2', '3'])
        self.assertEqual(ci.read_grid_dimensions(), (2, 3))
        self.assertIn('Error: height * width must be even', self.out)

    def test_given_bounds_when_reading_coordinate_then_one_based_in_range(self):
        ci, prompts = self._input(['9', '1', '2'])
        self.assertEqual(ci.read_coordinate(2, 2), (1, 2))
        self.assertEqual(prompts[0], 'Row [1-2]: ')
        self.assertEqual(prompts[-1], 'Column [1-2]: ')


class TestConsoleRendering(unittest.TestCase):
    def test_given_grid_when_rendering_without_color_then_box_and_hidden_cards(self):
        game = small_game()
        game.grid.get_card((1, 2)).flip(True)
        game.grid.set_card((2, 1), None)
        lines = render_grid(game.grid, color=False).split('\n')
        self.assertEqual(lines[0], '      1   2 ')
        self.assertEqual(lines[1], '    ┌───┬───┐')
        self.assertEqual(lines[2], '   1| ! | A |')
        self.assertEqual(lines[3], '    ├───┼───┤')
        self.assertEqual(lines[4], '   2|   | ! |')
        self.assertEqual(lines[5], '    └───┴───┘')

    def test_given_color_when_rendering_face_up_card_then_ansi_codes(self):
        game = small_game()
        game.grid.get_card((2, 2)).flip(True)
        txt = render_grid(game.grid, color=True)
        self.assertIn('\033[31m', txt)
        self.assertEqual(colorize('x', enabled=False), 'x')
        self.assertEqual(colorize('x'), 'x')

    def test_given_scores_when_rendering_leaderboard_then_leader_crowned(self):
        game = small_game()
        game.players[1].add_score(5)
        game.players[0].kill()
        lines = render_leaderboard(game, color=False).split('\n')
        self.assertEqual(lines[0], 'LEADERBOARD: ')
        self.assertTrue(lines[1].startswith('Bruno'))
        self.assertTrue(lines[1].endswith(' ♛'))
        self.assertTrue(lines[2].endswith('(eliminated)'))


class TestConsoleView(unittest.TestCase):
    def test_given_turn_and_outcome_when_shown_then_banner_result_and_pause(self):
        out = []
        read, prompts = scripted([''] * 3)
        view = ConsoleView(write=out.append, read=read, color=False)
        game = small_game()
        view.show_turn(game)
        self.assertIn("Ada's turn (0)", out)
        card = game.reveal((1, 1))
        view.show_reveal(game, card)
        game.reveal((1, 2))
        res = game.resolve()
        self.assertEqual(res.outcome, TurnOutcome.MATCH)
        view.show_outcome(game, res)
        self.assertIn('MATCH! +3', out)
        self.assertEqual(prompts, ['Press enter to continue...'])

    def test_given_finished_game_when_shown_then_game_over_and_leaderboard(self):
        out = []
        view = ConsoleView(write=out.append, color=False, pause=False)
        game = small_game()
        game.play_turn((2, 2))
        game.play_turn((2, 1))
        game.play_turn((1, 1), (1, 2))
        self.assertTrue(game.is_over)
        view.show_game_over(game)
        self.assertEqual(out[0], 'GAME OVER')
        self.assertTrue(any('LEADERBOARD' in line for line in out))


if __name__ == '__main__':
    unittest.main(verbosity=2)
