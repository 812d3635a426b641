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
from scipy.special import expit

from .._core.parameter import as_parameter
from .._core.shared import make_shared
from ..utils import argmax
from ._base import FinitePolicy, sample_probs


__all__ = (
    'TruncatedBoltzmann',
)


class TruncatedBoltzmann(FinitePolicy):
    r"""

    A Boltzmann policy whose logits are bounded by a logistic squashing of the action values,

    .. math::

        \kappa_c(x)\ &=\ \frac{c}{1 + \text{e}^{-x}}\ \in\ (0, c) \\
        \pi(a|s)\ &\propto\ \exp\left(\kappa_c\left(q(s,a)\right)\right)

    Bounding the logits damps the sensitivity of the policy to large-magnitude value estimates.
    The bound :math:`c` is annealed once per episode.

    Parameters
    ----------
    q : LinearQ or Shared[LinearQ]

        The action-value function.

    c : positive float or Parameter

        The bound :math:`c` on the logits.

    random_seed : int, optional

        Seed for the private pseudo-random number generator of this policy.

    """
    def __init__(self, q, c, random_seed=None):
        super().__init__(random_seed)
        self.q = make_shared(q)
        self.c = as_parameter(c, 'c')

    @property
    def n_actions(self):
        return self.q.borrow().n_outputs

    def probabilities(self, s):
        logits = self.c.value * expit(self.q.borrow().evaluate(s))
        w = onp.exp(logits - logits.max())
        return w / w.sum()

    def sample(self, s):
        return sample_probs(self.uniform(), self.probabilities(s))

    def mpa(self, s):
        return argmax(self.rng, self.probabilities(s))

    def handle_terminal(self, transition=None):
        self.c.step()
