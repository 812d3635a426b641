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

from .._base.errors import UnsupportedOperationError
from .._base.test_case import TestCase
from ._base import FinitePolicy, Policy, sample_probs


class Undefined(Policy):
    def probability(self, s, a):
        return 0.5


class AlwaysOne(FinitePolicy):
    n_actions = 2

    def mpa(self, s):
        return 1

    def probabilities(self, s):
        return [0., 1.]


class TestSampleProbs(TestCase):

    def test_inverse_cdf(self):
        p = [0.2, 0.5, 0.3]
        self.assertEqual(sample_probs(0., p), 0)
        self.assertEqual(sample_probs(0.1, p), 0)
        self.assertEqual(sample_probs(0.2, p), 1)
        self.assertEqual(sample_probs(0.69, p), 1)
        self.assertEqual(sample_probs(0.75, p), 2)

    def test_rounding_falls_back_to_last_index(self):
        self.assertEqual(sample_probs(1., [0.5, 0.5]), 1)
        self.assertEqual(sample_probs(0.999, [0.3, 0.3, 0.3]), 2)


class TestPolicy(TestCase):

    def test_mpa_unsupported_by_default(self):
        policy = Undefined(random_seed=13)
        with self.assertRaisesRegex(UnsupportedOperationError, r"Undefined doesn't define"):
            policy.mpa(0)
        with self.assertRaises(NotImplementedError):
            policy(0)

    def test_sample_defaults_to_mpa(self):
        policy = AlwaysOne()
        self.assertEqual(policy(0), 1)
        self.assertEqual(policy.sample(0), 1)
        self.assertEqual(policy.probability(0, 1), 1.)
        with self.assertRaisesRegex(IndexError, r"action 2 is out of range"):
            policy.probability(0, 2)

    def test_random_seed(self):
        self.assertEqual(Undefined(random_seed=13).random_seed, 13)
        self.assertIsInstance(Undefined().random_seed, int)
