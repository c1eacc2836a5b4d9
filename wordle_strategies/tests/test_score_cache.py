import unittest

from wordle_strategies.score import Score
from wordle_strategies.score_cache import ScoreCache, Scorer
from wordle_strategies.tests.common import make_word_dictionary


class TestScoreCache(unittest.TestCase):
    def setUp(self) -> None:
        self.dictionary = make_word_dictionary()
        self.cache = ScoreCache(self.dictionary)

    def test_scores_agree(self) -> None:
        scorer = Scorer()
        for attempt in self.dictionary.guess_words:
            for actual in self.dictionary.solution_words:
                assert self.cache.score(attempt, actual) == \
                    scorer.score(attempt, actual) == \
                    Score.of(attempt, actual)

    def test_shape(self) -> None:
        assert self.cache.matrix.shape == (
            len(self.dictionary.guess_words),
            len(self.dictionary.solution_words),
        )
        assert not self.cache.matrix.flags.writeable

    def test_buckets_agree(self) -> None:
        direct = Scorer()
        for actuals in [self.dictionary.solution_words,
                        self.dictionary.solution_words[:3],
                        self.dictionary.solution_words[5:6]]:
            cached_sizer = self.cache.partitioner(actuals)
            direct_sizer = direct.partitioner(actuals)
            for guess in self.dictionary.guess_words:
                cached = sorted(cached_sizer(guess))
                assert cached == sorted(direct_sizer(guess))
                assert sum(cached) == len(actuals)

    def test_no_actuals(self) -> None:
        assert self.cache.partitioner(())(
            self.dictionary.guess_words[0]
        ) == []
        assert Scorer().partitioner(())(self.dictionary.guess_words[0]) == []
