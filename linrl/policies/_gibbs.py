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

from ..fa import Projector
from ..utils import argmax, one_hot
from ._base import DifferentiablePolicy, FinitePolicy, ParameterisedPolicy, sample_probs
from ._boltzmann import softmax


__all__ = (
    'Gibbs',
)


class Gibbs(DifferentiablePolicy, ParameterisedPolicy, FinitePolicy):
    r"""

    A linear softmax (Gibbs) policy with its own weights,

    .. math::

        \pi_\theta(a|s)\ \propto\ \exp\left(\phi(s)^\top\theta_a/\tau\right)

    Its log-gradient is

    .. math::

        \nabla_{\theta}\log\pi_\theta(a|s)\ =\ \frac{1}{\tau}\,
            \phi(s)\otimes\left(e_a - \pi_\theta(.|s)\right)

    where :math:`e_a` is the one-hot encoding of :math:`a`.

    Parameters
    ----------
    projector : Projector

        The feature map :math:`\phi`.

    n_actions : positive int

        The number of actions.

    tau : positive float, optional

        The temperature :math:`\tau`.

    random_seed : int, optional

        Seed for the private pseudo-random number generator of this policy.

    """
    def __init__(self, projector, n_actions, tau=1.0, random_seed=None):
        super().__init__(random_seed)
        if not isinstance(projector, Projector):
            raise TypeError(f"projector must be a Projector, got: {type(projector)}")
        if not tau > 0:
            raise ValueError(f"tau must be positive, got: {tau}")
        self.projector = projector
        self.tau = float(tau)
        self._n_actions = int(n_actions)
        self._weights = onp.zeros((projector.dim, self._n_actions))

    @property
    def n_actions(self):
        return self._n_actions

    @property
    def weights(self):
        return self._weights

    def probabilities(self, s):
        return softmax(self.projector.project(s).dot(self._weights), self.tau)

    def sample(self, s):
        return sample_probs(self.uniform(), self.probabilities(s))

    def mpa(self, s):
        return argmax(self.rng, self.probabilities(s))

    def grad_log(self, s, a):
        phi = self.projector.project(s)
        p = softmax(phi.dot(self._weights), self.tau)
        return onp.outer(phi.expanded(self.projector.dim), one_hot(a, self.n_actions) - p) / self.tau

    def update(self, s, a, error):
        self._weights += error * self.grad_log(s, a)

    def update_raw(self, errors):
        errors = onp.asarray(errors, dtype='float64')
        if errors.shape != self._weights.shape:
            raise ValueError(f"expected errors.shape: {self._weights.shape}, got: {errors.shape}")
        self._weights += errors
