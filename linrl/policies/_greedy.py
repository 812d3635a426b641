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

import jax
import numpy as onp

from .._core.parameter import as_parameter
from .._core.shared import make_shared
from ..utils import argmax
from ._base import FinitePolicy


__all__ = (
    'Greedy',
    'EpsilonGreedy',
)


def greedy_probabilities(q_s):
    r""" Spread the probability mass evenly over the maximal entries of :math:`q(s,.)`. """
    q_s = onp.asarray(q_s)
    p = (q_s == q_s.max()).astype('float64')
    return p / p.sum()  # there may be multiple max's (ties)


class Greedy(FinitePolicy):
    r"""

    The greedy policy :math:`\pi(s)=\arg\max_a q(s,a)` w.r.t. a (shared) action-value function.
    Ties are broken uniformly at random.

    This is typically used as the target policy of an off-policy control algorithm. Because it
    holds a :class:`Shared <linrl.Shared>` reference to the same q-function that the algorithm
    updates, it always reflects the latest weights.

    Parameters
    ----------
    q : LinearQ or Shared[LinearQ]

        The action-value function.

    random_seed : int, optional

        Seed for the private pseudo-random number generator used for tie-breaking.

    """
    def __init__(self, q, random_seed=None):
        super().__init__(random_seed)
        self.q = make_shared(q)

    @property
    def n_actions(self):
        return self.q.borrow().n_actions

    def mpa(self, s):
        return argmax(self.rng, self.q.borrow().evaluate(s))

    def probabilities(self, s):
        return greedy_probabilities(self.q.borrow().evaluate(s))


class EpsilonGreedy(Greedy):
    r"""

    Create an :math:`\epsilon`-greedy policy, given a q-function.

    This policy samples actions :math:`a\sim\pi_q(.|s)` according to the following rule:

    .. math::

        u &\sim \text{Uniform([0, 1])} \\
        a_\text{rand} &\sim \text{Uniform}(\text{actions}) \\
        a\ &=\ \left\{\begin{matrix}
            a_\text{rand} & \text{ if } u < \epsilon \\
            \arg\max_{a'} q(s,a') & \text{ otherwise }
        \end{matrix}\right.

    Parameters
    ----------
    q : LinearQ or Shared[LinearQ]

        The action-value function.

    epsilon : float between 0 and 1 or Parameter, optional

        The probability of sampling an action uniformly at random. A Parameter is stepped at the
        end of each episode.

    random_seed : int, optional

        Seed for the private pseudo-random number generator of this policy.

    """
    def __init__(self, q, epsilon=0.1, random_seed=None):
        super().__init__(q, random_seed)
        self.epsilon = as_parameter(epsilon, 'epsilon')

    def sample(self, s):
        if self.uniform() < self.epsilon.value:
            return int(jax.random.randint(self.rng, (), 0, self.n_actions))
        return self.mpa(s)

    def probabilities(self, s):
        p = super().probabilities(s)
        p *= 1 - self.epsilon.value                # take away ε from greedy action(s)
        p += self.epsilon.value / self.n_actions   # spread ε evenly to all actions
        return p

    def handle_terminal(self, transition=None):
        self.epsilon.step()
