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

import chex
import numpy as onp

from .._base.mixins import LoggerMixin
from ._projection import DenseProjection, Projection
from ._projectors import Projector


__all__ = (
    'LinearV',
    'LinearQ',
)


class BaseLinear(LoggerMixin):
    r""" Abstract base class for linear function approximators. """

    def __init__(self, projector, weights):
        if not isinstance(projector, Projector):
            raise TypeError(f"projector must be a Projector, got: {type(projector)}")
        self.projector = projector
        self._weights = onp.zeros(self.weights_shape)
        if weights is not None:
            self.weights = weights

    @property
    def dim(self):
        r""" The dimensionality of the feature space. """
        return self.projector.dim

    @property
    def weights_shape(self):
        raise NotImplementedError

    @property
    def weights(self):
        r"""

        The weights :math:`\theta`. Assigning to this property overwrites the weights in place,
        which means that every component that shares this function approximator sees the new
        weights.

        """
        return self._weights

    @weights.setter
    def weights(self, new_weights):
        new_weights = onp.asarray(new_weights, dtype='float64')
        if new_weights.shape != self.weights_shape:
            raise ValueError(
                f"expected weights.shape: {self.weights_shape}, got: {new_weights.shape}")
        self._weights[...] = new_weights

    def project(self, s):
        r"""

        Project a state observation onto the feature space, :math:`s\mapsto\phi(s)`.

        """
        return self.projector.project(s)

    def _check_phi(self, phi):
        if not isinstance(phi, Projection):
            phi = DenseProjection(phi)
        if phi.dim != self.dim:
            raise ValueError(
                f"feature dimensionality mismatch: got dim={phi.dim}, "
                f"{self.__class__.__name__} expects dim={self.dim}")
        return phi


class LinearV(BaseLinear):
    r"""

    A linear state-value function,

    .. math::

        v(s)\ =\ \phi(s)^\top\theta

    Parameters
    ----------
    projector : Projector

        The feature map :math:`\phi`.

    weights : ndarray, shape: (dim,), optional

        The initial weights. These default to zeros.

    """
    def __init__(self, projector, weights=None):
        super().__init__(projector, weights)

    @property
    def weights_shape(self):
        return (self.dim,)

    def evaluate(self, s):
        return self.evaluate_phi(self.project(s))

    def evaluate_phi(self, phi):
        return float(self._check_phi(phi).dot(self._weights))

    def update(self, s, error):
        r"""

        Update the weights, :math:`\theta\leftarrow\theta + \delta\,\phi(s)`.

        Parameters
        ----------
        s : state observation

            A single state observation.

        error : float

            The (step-size scaled) error :math:`\delta`.

        """
        self.update_phi(self.project(s), error)

    def update_phi(self, phi, error):
        self._check_phi(phi).accumulate(self._weights, float(error))


class LinearQ(BaseLinear):
    r"""

    A linear state-action value function over a finite action space, with one weight vector per
    action,

    .. math::

        q(s,a)\ =\ \phi(s)^\top\theta_a

    This also serves as any other vector-valued linear function, e.g. the actor in
    :class:`ActorCritic <linrl.control.ActorCritic>`.

    Parameters
    ----------
    projector : Projector

        The feature map :math:`\phi`.

    n_actions : positive int

        The number of actions (outputs).

    weights : ndarray, shape: (dim, n_actions), optional

        The initial weights. These default to zeros.

    """
    def __init__(self, projector, n_actions, weights=None):
        if int(n_actions) <= 0:
            raise ValueError(f"n_actions must be a positive int, got: {n_actions}")
        self.n_actions = int(n_actions)
        super().__init__(projector, weights)

    @property
    def n_outputs(self):
        return self.n_actions

    @property
    def weights_shape(self):
        return (self.dim, self.n_actions)

    def evaluate(self, s):
        r"""

        Evaluate all actions, :math:`q(s,.)`.

        Returns
        -------
        q_s : ndarray, shape: (n_actions,)

            The action values.

        """
        return self.evaluate_phi(self.project(s))

    def evaluate_phi(self, phi):
        q_s = onp.asarray(self._check_phi(phi).dot(self._weights))
        chex.assert_shape(q_s, (self.n_actions,))
        return q_s

    def evaluate_action(self, s, a):
        return self.evaluate_action_phi(self.project(s), a)

    def evaluate_action_phi(self, phi, a):
        return float(self._check_phi(phi).dot(self._weights[:, self._check_action(a)]))

    def update(self, s, errors):
        r"""

        Update all actions, :math:`\theta\leftarrow\theta + \phi(s)\otimes\delta`.

        Parameters
        ----------
        s : state observation

            A single state observation.

        errors : ndarray, shape: (n_actions,)

            The (step-size scaled) errors :math:`\delta`, one per action.

        """
        self.update_phi(self.project(s), errors)

    def update_phi(self, phi, errors):
        errors = onp.asarray(errors, dtype='float64')
        if errors.shape != (self.n_actions,):
            raise ValueError(f"expected errors.shape: ({self.n_actions},), got: {errors.shape}")
        self._check_phi(phi).accumulate(self._weights, errors)

    def update_action(self, s, a, error):
        r"""

        Update a single action, :math:`\theta_a\leftarrow\theta_a + \delta\,\phi(s)`.

        """
        self.update_action_phi(self.project(s), a, error)

    def update_action_phi(self, phi, a, error):
        self._check_phi(phi).accumulate(self._weights[:, self._check_action(a)], float(error))

    def _check_action(self, a):
        a = int(a)
        if not 0 <= a < self.n_actions:
            raise IndexError(f"action {a} is out of range for n_actions={self.n_actions}")
        return a
