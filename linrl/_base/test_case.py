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

import unittest

import gymnasium
import numpy as onp


__all__ = (
    'TestCase',
)


class TestCase(unittest.TestCase):
    r""" adds some common properties to unittest.TestCase """
    seed = 42
    decimal = 6    # sets the absolute tolerance
    n_states = 5
    n_actions = 3

    @property
    def space_discrete(self):
        space = gymnasium.spaces.Discrete(self.n_states)
        space.seed(self.seed)
        return space

    @property
    def space_boxspace(self):
        space = gymnasium.spaces.Box(low=onp.float32(0), high=onp.float32(1), shape=(3,))
        space.seed(11 * self.seed)
        return space

    @property
    def projector_discrete(self):
        from ..fa import OneHot
        return OneHot(self.space_discrete)

    @property
    def projector_boxspace(self):
        from ..fa import Identity
        return Identity(self.space_boxspace)

    def random_q(self, projector=None, n_actions=None, seed=None):
        from ..fa import LinearQ
        projector = projector or self.projector_discrete
        n_actions = n_actions or self.n_actions
        rnd = onp.random.RandomState(self.seed if seed is None else seed)
        return LinearQ(projector, n_actions, weights=rnd.randn(projector.dim, n_actions))

    def random_transitions(self, n, seed=None):
        from .._core.transition import Transition
        rnd = onp.random.RandomState(self.seed if seed is None else seed)
        return [
            Transition(
                s=rnd.randint(self.n_states),
                a=rnd.randint(self.n_actions),
                r=rnd.randn(),
                s_next=rnd.randint(self.n_states),
                done=rnd.rand() < 0.2)
            for _ in range(n)]

    def assertArrayAlmostEqual(self, x, y, decimal=None):
        decimal = decimal or self.decimal
        onp.testing.assert_array_almost_equal(
            onp.asanyarray(x), onp.asanyarray(y), decimal=decimal)

    def assertArrayNotEqual(self, x, y, margin=1e-3):
        maxdiff = onp.max(onp.abs(onp.asanyarray(x) - onp.asanyarray(y)))
        self.assertGreater(float(maxdiff), margin)

    def assertArrayShape(self, arr, shape):
        self.assertEqual(arr.shape, shape)

    def assertAlmostEqual(self, x, y, decimal=None):
        decimal = decimal or self.decimal
        super().assertAlmostEqual(x, y, places=decimal)
