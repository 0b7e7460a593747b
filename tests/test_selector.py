import unittest
from collections import Counter

from tests.fixtures import LootgenTestBase, ScriptedRandom
from lootgen.host import SystemRandomSource
from lootgen.selector import choose_weighted, choose_uniform


class TestChooseWeighted(LootgenTestBase):
    def test_single_candidate_always_selected(self):
        rng = ScriptedRandom([0.0, 0.5, 0.999999])
        for _ in range(3):
            self.assertEqual(choose_weighted([("only", 3)], rng), "only")

    def test_prefix_sum_boundaries(self):
        candidates = [("a", 1), ("b", 2), ("c", 1)]
        # total 4: a covers [0, 1), b covers [1, 3), c covers [3, 4)
        picks = [
            choose_weighted(candidates, ScriptedRandom([r]))
            for r in [0.0, 0.24, 0.25, 0.74, 0.75, 0.99]
        ]
        self.assertEqual(picks, ["a", "a", "b", "b", "c", "c"])

    def test_zero_weight_never_selected(self):
        candidates = [("zero", 0), ("one", 1), ("also-zero", 0)]
        for r in [0.0, 0.3, 0.999]:
            self.assertEqual(choose_weighted(candidates, ScriptedRandom([r])), "one")

    def test_all_zero_weights_fail(self):
        with self.assertRaises(ValueError):
            choose_weighted([("a", 0), ("b", 0)], self.rng)

    def test_negative_weight_fails(self):
        with self.assertRaises(ValueError):
            choose_weighted([("a", -1), ("b", 2)], self.rng)

    def test_empty_fails(self):
        with self.assertRaises(ValueError):
            choose_weighted([], self.rng)

    def test_upper_bound_falls_back_to_last_weighted(self):
        rng = ScriptedRandom([1.0])
        self.assertEqual(choose_weighted([("a", 1), ("b", 1), ("c", 0)], rng), "b")

    def test_frequencies_converge(self):
        rng = SystemRandomSource(seed=1234)
        candidates = [("a", 1), ("b", 3), ("c", 6)]
        trials = 20000
        counts = Counter(choose_weighted(candidates, rng) for _ in range(trials))
        for name, weight in candidates:
            self.assertAlmostEqual(counts[name] / trials, weight / 10, delta=0.02)


class TestChooseUniform(LootgenTestBase):
    def test_picks_by_position(self):
        elements = ["a", "b", "c", "d"]
        self.assertEqual(choose_uniform(elements, ScriptedRandom([0.0])), "a")
        self.assertEqual(choose_uniform(elements, ScriptedRandom([0.5])), "c")
        self.assertEqual(choose_uniform(elements, ScriptedRandom([0.99])), "d")

    def test_empty_fails(self):
        with self.assertRaises(ValueError):
            choose_uniform([], self.rng)


if __name__ == "__main__":
    unittest.main()
