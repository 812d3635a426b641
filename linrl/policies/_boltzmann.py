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

from .._core.parameter import as_parameter
from ..utils import check_vector
from ._base import Policy, sample_probs


__all__ = (
    'Boltzmann',
    'softmax',
)


def softmax(scores, tau=1.):
    r"""

    Numerically stable softmax with temperature,
    :math:`p_k\propto\exp\left((x_k - \max_j x_j)/\tau\right)`.

    """
    if not tau > 0:
        raise ValueError(f"temperature must be positive, got: {tau}")
    scores = check_vector(scores, 'scores')
    w = onp.exp((scores - scores.max()) / tau)
    return w / w.sum()


class Boltzmann(Policy):
    r"""

    A stateless Boltzmann (softmax) policy over a raw score vector, e.g. the output of the actor
    in :class:`ActorCritic <linrl.control.ActorCritic>`. Note that the "state" input of this
    policy is the score vector itself.

    .. math::

        \pi(a|x)\ =\ \frac{\exp\left((x_a - \max_b x_b)/\tau\right)}
            {\sum_{a'}\exp\left((x_{a'} - \max_b x_b)/\tau\right)}

    This policy only supports sampling; asking for the most probable action raises an
    :class:`UnsupportedOperationError`.

    Parameters
    ----------
    tau : positive float or Parameter, optional

        The Boltzmann temperature :math:`\tau>0`. A Parameter is stepped at the end of each
        episode.

    random_seed : int, optional

        Seed for the private pseudo-random number generator of this policy.

    """
    def __init__(self, tau=1.0, random_seed=None):
        super().__init__(random_seed)
        self.tau = as_parameter(tau, 'tau')
        if not self.tau.value > 0:
            raise ValueError(f"tau must be positive, got: {self.tau.value}")

    def probabilities(self, scores):
        return softmax(scores, self.tau.value)

    def probability(self, scores, a):
        p = self.probabilities(scores)
        if not 0 <= a < p.size:
            raise IndexError(f"action {a} is out of range for {p.size} scores")
        return float(p[a])

    def sample(self, scores):
        return sample_probs(self.uniform(), self.probabilities(scores))

    def handle_terminal(self, transition=None):
        tau_next = self.tau.value_at(self.tau.count + 1)
        if not tau_next > 0:
            raise ValueError(
                f"tau must stay positive, but its schedule steps to {tau_next:g}; "
                "use a positive floor")
        self.tau.step()
