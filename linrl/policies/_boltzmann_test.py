# ------------------------------------------------------------------------------------------------ #
# MIT License                                                                                      #
#                                                                                                  #
# Copyright (c) 2020, Microsoft Corporation                                                        #
#                                                                                                  #
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software    #
# and associated documentation files (the "Software"), to deal in the Software without             #
# restriction, including without limitation the rights to use, copy, modify, merge, publish,       #
# distribute, sublicense, and/or sell copies of the Software, and to permit persons to whom the    #
# Software is furnished to do so, subject to the following conditions:                             #
#                                                                                                  #
# The above copyright notice and this permission notice shall be included in all copies or         #
# substantial portions of the Software.                                                            #
#                                                                                                  #
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING    #
# BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND       #
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,     #
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,   #
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.          #
# ------------------------------------------------------------------------------------------------ #

import numpy as onp

from .._base.errors import UnsupportedOperationError
from .._base.test_case import TestCase
from .._core.parameter import Parameter
from ._boltzmann import Boltzmann, softmax


class TestSoftmax(TestCase):

    def test_known_values(self):
        self.assertArrayAlmostEqual(softmax([0., onp.log(2.)]), [1 / 3, 2 / 3])
        self.assertArrayAlmostEqual(softmax([0., 2 * onp.log(2.)], tau=2.), [1 / 3, 2 / 3])
        self.assertArrayAlmostEqual(softmax([7.]), [1.])

    def test_normalized(self):
        rnd = onp.random.RandomState(self.seed)
        for tau in (0.01, 0.5, 1., 10.):
            for scale in (1., 1e3):
                p = softmax(scale * rnd.randn(6), tau)
                self.assertTrue(onp.all(onp.isfinite(p)))
                self.assertTrue(onp.all(p >= 0))
                self.assertAlmostEqual(p.sum(), 1., decimal=9)

    def test_shift_invariance(self):
        x = onp.random.RandomState(self.seed).randn(4)
        self.assertArrayAlmostEqual(softmax(x + 123.4, 0.7), softmax(x, 0.7))

    def test_bad_input(self):
        with self.assertRaisesRegex(ValueError, r"must not be empty"):
            softmax([])
        with self.assertRaisesRegex(ValueError, r"temperature must be positive"):
            softmax([1., 2.], tau=0.)


class TestBoltzmann(TestCase):

    def test_probabilities(self):
        policy = Boltzmann(tau=1.)
        scores = onp.array([0., onp.log(3.)])
        self.assertArrayAlmostEqual(policy.probabilities(scores), [0.25, 0.75])
        self.assertAlmostEqual(policy.probability(scores, 1), 0.75)

    def test_sample_frequencies(self):
        policy = Boltzmann(random_seed=self.seed)
        scores = onp.array([0., onp.log(3.)])
        n = 1000
        freq = sum(policy.sample(scores) for _ in range(n)) / n
        self.assertGreater(freq, 0.7)
        self.assertLess(freq, 0.8)

    def test_seeded_samples_are_reproducible(self):
        scores = onp.random.RandomState(self.seed).randn(5)
        policy1 = Boltzmann(random_seed=13)
        policy2 = Boltzmann(random_seed=13)
        samples1 = [policy1(scores) for _ in range(20)]
        samples2 = [policy2(scores) for _ in range(20)]
        self.assertEqual(samples1, samples2)
        self.assertTrue(all(0 <= a < 5 for a in samples1))

    def test_mpa_unsupported(self):
        policy = Boltzmann()
        with self.assertRaises(UnsupportedOperationError):
            policy.mpa(onp.zeros(3))

    def test_empty_scores(self):
        with self.assertRaises(ValueError):
            Boltzmann().sample([])

    def test_bad_tau(self):
        with self.assertRaisesRegex(ValueError, r"tau must be positive"):
            Boltzmann(tau=0.)
        with self.assertRaisesRegex(TypeError, r"tau must be a number or a Parameter"):
            Boltzmann(tau='hot')

    def test_handle_terminal_steps_tau(self):
        policy = Boltzmann(tau=Parameter.exponential(2., rate=0.5))
        policy.handle_terminal()
        self.assertAlmostEqual(policy.tau.value, 1.)
        self.assertArrayAlmostEqual(
            policy.probabilities([0., onp.log(3.)]), [0.25, 0.75])

    def test_probability_out_of_range(self):
        policy = Boltzmann()
        scores = onp.array([0., onp.log(3.)])
        for a in (-1, 2):
            with self.assertRaisesRegex(IndexError, rf"action {a} is out of range for 2 scores"):
                policy.probability(scores, a)

    def test_tau_must_stay_positive(self):
        policy = Boltzmann(tau=Parameter.linear(1., delta=0.5))
        policy.handle_terminal()
        self.assertAlmostEqual(policy.tau.value, 0.5)
        with self.assertRaisesRegex(ValueError, r"tau must stay positive"):
            policy.handle_terminal()
        self.assertAlmostEqual(policy.tau.value, 0.5)
        self.assertEqual(policy.tau.count, 1)
