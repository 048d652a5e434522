import unittest
from collections import Counter

from game import (
    Card,
    GameState,
    MATCH_REWARD,
    build_deck,
    new_game,
)


def make_state(symbols):
    cards = [Card(symbol=s, id=str(i)) for i, s in enumerate(symbols)]
    return GameState(cards=cards, pair_count=len(symbols) // 2)


class TestMemoryBasics(unittest.TestCase):
    def test_new_game_defaults(self):
        s = new_game(seed=1)
        self.assertEqual(len(s.cards), 2 * s.pair_count)
        self.assertEqual(s.score, 0)
        self.assertFalse(s.won)

    def test_deck_symbols_paired(self):
        deck = build_deck(12, seed=3)
        self.assertEqual(set(Counter(c.symbol for c in deck).values()), {2})

    def test_match_scores_reward(self):
        s = make_state(['X', 'Y', 'X', 'Y'])
        s.select_card('0')
        s.select_card('2')
        self.assertEqual(s.score, MATCH_REWARD)
        self.assertTrue(s.cards[0].matched and s.cards[2].matched)

    def test_mismatch_does_not_score(self):
        s = make_state(['X', 'Y', 'X', 'Y'])
        s.select_card('0')
        s.select_card('1')
        self.assertEqual(s.score, 0)
        self.assertFalse(any(c.matched for c in s.cards))

    def test_pending_points_at_only_face_up_unmatched_card(self):
        s = make_state(['X', 'Y', 'X', 'Y'])
        s.select_card('0')
        s.select_card('1')
        s.select_card('3')
        up = [c.id for c in s.cards if c.face_up and not c.matched]
        self.assertEqual(up, ['3'])
        self.assertEqual(s.pending_card_id, '3')

    def test_won_requires_cards(self):
        self.assertFalse(GameState().won)


if __name__ == '__main__':
    unittest.main(verbosity=2)
