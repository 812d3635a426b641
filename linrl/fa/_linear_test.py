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

from .._base.test_case import TestCase
from ._linear import LinearQ, LinearV
from ._projection import DenseProjection


class TestLinearV(TestCase):

    def test_evaluate(self):
        v = LinearV(self.projector_discrete, weights=onp.arange(self.n_states, dtype='float64'))
        self.assertIsInstance(v.evaluate(3), float)
        self.assertAlmostEqual(v.evaluate(3), 3.)

        v = LinearV(self.projector_boxspace, weights=[1., 2., 3.])
        self.assertAlmostEqual(v.evaluate([0.5, 0.5, 1.]), 4.5)
        self.assertAlmostEqual(v.evaluate_phi([1., 0., 0.]), 1.)

    def test_update(self):
        v = LinearV(self.projector_boxspace)
        v.update([0.5, 0., 1.], 2.)
        self.assertArrayAlmostEqual(v.weights, [1., 0., 2.])
        v.update_phi(DenseProjection([1., 1., 1.]), -1.)
        self.assertArrayAlmostEqual(v.weights, [0., -1., 1.])

    def test_weights_setter(self):
        v = LinearV(self.projector_discrete)
        w = v.weights
        v.weights = onp.ones(self.n_states)
        self.assertIs(v.weights, w)  # overwritten in place
        self.assertArrayAlmostEqual(w, onp.ones(self.n_states))

        with self.assertRaisesRegex(ValueError, r"expected weights.shape: \(5,\), got: \(4,\)"):
            v.weights = onp.ones(4)

    def test_dim_mismatch(self):
        v = LinearV(self.projector_boxspace)
        with self.assertRaisesRegex(ValueError, r"feature dimensionality mismatch"):
            v.evaluate_phi([1., 2.])

    def test_bad_projector(self):
        with self.assertRaisesRegex(TypeError, r"projector must be a Projector"):
            LinearV(self.space_discrete)


class TestLinearQ(TestCase):

    def test_evaluate(self):
        q = self.random_q()
        self.assertEqual(q.n_outputs, self.n_actions)
        self.assertArrayShape(q.weights, (self.n_states, self.n_actions))
        q_s = q.evaluate(2)
        self.assertArrayShape(q_s, (self.n_actions,))
        self.assertArrayAlmostEqual(q_s, q.weights[2])
        for a in range(self.n_actions):
            self.assertAlmostEqual(q.evaluate_action(2, a), q_s[a])

    def test_evaluate_boxspace(self):
        q = self.random_q(self.projector_boxspace)
        s = self.space_boxspace.sample()
        self.assertArrayAlmostEqual(q.evaluate(s), s.astype('float64') @ q.weights)

    def test_update_action(self):
        q = self.random_q()
        W = q.weights.copy()
        q.update_action(1, 2, 0.5)
        W[1, 2] += 0.5
        self.assertArrayAlmostEqual(q.weights, W)

        q = self.random_q(self.projector_boxspace)
        W = q.weights.copy()
        q.update_action_phi([1., 2., 0.], 0, -1.)
        W[:, 0] += [-1., -2., 0.]
        self.assertArrayAlmostEqual(q.weights, W)

    def test_update(self):
        q = self.random_q()
        W = q.weights.copy()
        q.update(4, [1., 0., -1.])
        W[4] += [1., 0., -1.]
        self.assertArrayAlmostEqual(q.weights, W)

        with self.assertRaisesRegex(ValueError, r"expected errors.shape: \(3,\), got: \(2,\)"):
            q.update(4, [1., 0.])

    def test_bad_action(self):
        q = self.random_q()
        with self.assertRaisesRegex(IndexError, r"action 3 is out of range for n_actions=3"):
            q.evaluate_action(0, 3)
        with self.assertRaises(IndexError):
            q.update_action(0, -1, 1.)

    def test_bad_n_actions(self):
        with self.assertRaisesRegex(ValueError, r"n_actions must be a positive int"):
            LinearQ(self.projector_discrete, 0)
