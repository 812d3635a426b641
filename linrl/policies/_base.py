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

r"""

A policy is either deterministic or stochastic, i.e. it's either a map :math:`\pi(s)\mapsto a` or
a conditional distribution :math:`\pi(a|s)`. A deterministic policy is the special case of a
stochastic policy that puts all probability mass on a single action.

The capabilities of a policy are layered:

- :class:`Policy`: sampling and probabilities of single actions;
- :class:`FinitePolicy`: a finite action set with a full probability vector;
- :class:`DifferentiablePolicy`: the gradient of the log-probability;
- :class:`ParameterisedPolicy`: direct updates to the policy weights.

"""
from abc import ABC, abstractmethod

import numpy as onp

from .._base.errors import UnsupportedOperationError
from .._base.mixins import LoggerMixin, RandomStateMixin


__all__ = (
    'Policy',
    'FinitePolicy',
    'DifferentiablePolicy',
    'ParameterisedPolicy',
    'sample_probs',
)


def sample_probs(u, probabilities):
    r"""

    Inverse-CDF sampling from a categorical distribution.

    Parameters
    ----------
    u : float between 0 and 1

        A uniform variate.

    probabilities : 1d array

        The (normalized) probabilities.

    Returns
    -------
    index : int

        The first index whose cumulative probability exceeds ``u``. If there is none (which can
        only happen due to rounding errors), this returns the last index.

    """
    exceeds = onp.flatnonzero(onp.cumsum(probabilities) > u)
    return int(exceeds[0]) if exceeds.size else len(probabilities) - 1


class Policy(ABC, RandomStateMixin, LoggerMixin):
    r"""

    Abstract base class for policies.

    Parameters
    ----------
    random_seed : int, optional

        Seed for the private pseudo-random number generator of this policy.

    """
    def __init__(self, random_seed=None):
        self.random_seed = random_seed

    def __call__(self, s):
        return self.sample(s)

    def sample(self, s):
        r"""

        Sample an action :math:`a\sim\pi(.|s)`. This defaults to the most probable action.

        """
        return self.mpa(s)

    def mpa(self, s):
        r"""

        Get the most probable action :math:`a=\arg\max_a\pi(a|s)`, if well-defined.

        """
        raise UnsupportedOperationError(
            f"{self.__class__.__name__} doesn't define a most probable action")

    @abstractmethod
    def probability(self, s, a):
        r""" The probability :math:`\pi(a|s)` of selecting action :math:`a`. """
        pass

    def handle_terminal(self, transition=None):
        r""" Hook that is called at the end of each episode. """
        pass


class FinitePolicy(Policy):
    r""" Abstract base class for policies over a finite set of actions. """

    @property
    @abstractmethod
    def n_actions(self):
        pass

    @abstractmethod
    def probabilities(self, s):
        r"""

        Get the full distribution :math:`\pi(.|s)`.

        Returns
        -------
        p : ndarray, shape: (n_actions,)

            The probabilities, which sum to one.

        """
        pass

    def probability(self, s, a):
        if not 0 <= a < self.n_actions:
            raise IndexError(f"action {a} is out of range for n_actions={self.n_actions}")
        return float(self.probabilities(s)[a])


class DifferentiablePolicy(Policy):
    @abstractmethod
    def grad_log(self, s, a):
        r""" The gradient :math:`\nabla_\theta\log\pi_\theta(a|s)` w.r.t. the weights. """
        pass


class ParameterisedPolicy(Policy):
    @property
    @abstractmethod
    def weights(self):
        pass

    @abstractmethod
    def update(self, s, a, error):
        r""" Update the weights in the direction of an error for a given state and action. """
        pass

    @abstractmethod
    def update_raw(self, errors):
        r""" Update the weights directly by adding an update matrix. """
        pass
