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
from .._core.parameter import Parameter
from .._core.trace import Trace
from .._core.transition import Transition
from ..fa import LinearQ
from ..policies import EpsilonGreedy
from ._q_lambda import QLambda


class TestQLambda(TestCase):

    def setUp(self):
        # action 0 is greedy everywhere
        W = onp.zeros((self.n_states, self.n_actions))
        W[:, 0] = 1.
        self.q = LinearQ(self.projector_discrete, self.n_actions, weights=W)
        self.policy = EpsilonGreedy(self.q, epsilon=0.1, random_seed=self.seed)
        self.trace = Trace(0.8, self.n_states)
        self.qlambda = QLambda(self.q, self.policy, self.trace, alpha=0.1, gamma=0.9)

    def test_single_update(self):
        self.qlambda.handle_sample(Transition(s=0, a=0, r=1., s_next=1))
        td_error = 1. + 0.9 * 1. - 1.
        expected = onp.zeros((self.n_states, self.n_actions))
        expected[:, 0] = 1.
        expected[0, 0] += 0.1 * td_error
        self.assertArrayAlmostEqual(self.q.weights, expected)
        self.assertArrayAlmostEqual(self.trace.get(), [1., 0., 0., 0., 0.])

    def test_greedy_action_keeps_trace(self):
        self.qlambda.handle_sample(Transition(s=0, a=0, r=0., s_next=1))
        self.qlambda.handle_sample(Transition(s=1, a=0, r=0., s_next=2))
        self.assertArrayAlmostEqual(self.trace.get(), [0.72, 1., 0., 0., 0.])

        # credit flows back to the first state through the trace
        self.assertAlmostEqual(self.q.weights[0, 0], 1. - 0.01 - 0.0072)
        self.assertAlmostEqual(self.q.weights[1, 0], 1. - 0.01)

    def test_exploratory_action_cuts_trace(self):
        self.qlambda.handle_sample(Transition(s=0, a=0, r=0., s_next=1))
        self.qlambda.handle_sample(Transition(s=0, a=1, r=0., s_next=1))
        self.assertArrayAlmostEqual(self.trace.get(), [1., 0., 0., 0., 0.])
        self.assertAlmostEqual(self.q.weights[0, 1], 0.1 * 0.9)

        trace_greedy = Trace(0.8, self.n_states)
        q = LinearQ(self.projector_discrete, self.n_actions, weights=self.q.weights * 0.)
        q.weights[:, 0] = 1.
        qlambda = QLambda(q, self.policy, trace_greedy, alpha=0.1, gamma=0.9)
        qlambda.handle_sample(Transition(s=0, a=0, r=0., s_next=1))
        qlambda.handle_sample(Transition(s=0, a=0, r=0., s_next=1))
        self.assertAlmostEqual(trace_greedy.get()[0], 1.72)

    def test_handle_terminal(self):
        alpha = Parameter.exponential(0.5, rate=0.9)
        gamma = Parameter.linear(0.99, delta=0.01, floor=0.9)
        lambda_ = Parameter.exponential(0.9, rate=0.5)
        epsilon = Parameter.exponential(0.5, rate=0.5)
        trace = Trace(lambda_, self.n_states)
        policy = EpsilonGreedy(self.q, epsilon=epsilon, random_seed=self.seed)
        qlambda = QLambda(self.q, policy, trace, alpha=alpha, gamma=gamma)

        n = 7
        for episode in range(n):
            for t in self.random_transitions(3, seed=episode):
                qlambda.handle_sample(t)
            qlambda.handle_terminal()
            self.assertArrayAlmostEqual(trace.get(), onp.zeros(self.n_states))

        for p in (alpha, gamma, lambda_, epsilon):
            self.assertEqual(p.count, n)
            self.assertAlmostEqual(p.value, p.value_at(n))
        self.assertAlmostEqual(qlambda.hyperparams['alpha'], 0.5 * 0.9 ** n)
        self.assertAlmostEqual(qlambda.hyperparams['gamma'], 0.92)

    def test_policies(self):
        for s in range(self.n_states):
            self.assertEqual(self.qlambda.pi(s), 0)
            self.assertIn(self.qlambda.mu(s), range(self.n_actions))
            self.assertAlmostEqual(self.qlambda.v(s), 1.)
            self.assertArrayAlmostEqual(self.qlambda.qs(s), [1., 0., 0.])
            self.assertAlmostEqual(self.qlambda.qsa(s, 1), 0.)

    def test_bad_arguments(self):
        with self.assertRaisesRegex(ValueError, r"trace.n_features=4 doesn't match q.dim=5"):
            QLambda(self.q, self.policy, Trace(0.8, 4), alpha=0.1, gamma=0.9)
        with self.assertRaisesRegex(TypeError, r"trace must be a Trace"):
            QLambda(self.q, self.policy, onp.zeros(5), alpha=0.1, gamma=0.9)
        with self.assertRaisesRegex(TypeError, r"policy must be a Policy"):
            QLambda(self.q, 'greedy', self.trace, alpha=0.1, gamma=0.9)
