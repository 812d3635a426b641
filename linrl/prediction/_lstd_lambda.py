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

import warnings

import numpy as onp
from scipy.linalg import LinAlgError, LinAlgWarning, pinv, solve

from .._base.errors import SolveFailedError
from .._core.algorithm import BatchLearner, ValuePredictor
from .._core.parameter import as_parameter
from .._core.shared import make_shared
from .._core.trace import Trace


__all__ = (
    'LSTDLambda',
)


class LSTDLambda(BatchLearner, ValuePredictor):
    r"""

    Least-squares TD(:math:`\lambda`) for batch value prediction.

    Each transition contributes to the statistics

    .. math::

        z\ &\leftarrow\ \lambda\gamma\,z + \phi(S_t) \\
        b\ &\leftarrow\ b + R_t\,z \\
        A\ &\leftarrow\ A + z\left(\phi(S_t) - \gamma\,\phi(S_{t+1})\right)^\top

    where the bootstrap term :math:`\gamma\,\phi(S_{t+1})` is dropped (and the trace is reset) if
    :math:`S_{t+1}` is terminal. After each batch, the weights are set to the solution of
    :math:`A\theta=b`.

    The statistics :math:`A` and :math:`b` accumulate over *all* batches ever submitted, until
    :func:`reset` is called.

    **Reference:** Boyan, J. A. (2002). Technical update: Least-squares temporal difference
    learning. Machine Learning, 49(2-3):233–246.

    Parameters
    ----------
    v : LinearV or Shared[LinearV]

        The state-value function whose weights are overwritten by each solve.

    trace : Trace

        The eligibility trace over the feature space of ``v``.

    gamma : float or Parameter

        The discount factor :math:`\gamma`.

    """
    HYPERPARAMS = ('gamma',)

    def __init__(self, v, trace, gamma):
        if not isinstance(trace, Trace):
            raise TypeError(f"trace must be a Trace, got: {type(trace)}")
        self.v = make_shared(v)
        if trace.n_features != self.n_features:
            raise ValueError(
                f"trace.n_features={trace.n_features} doesn't match v.dim={self.n_features}")
        self.trace = trace
        self.gamma = as_parameter(gamma, 'gamma')
        self.reset()

    @property
    def n_features(self):
        return self.v.borrow().dim

    @property
    def A(self):
        return self._A

    @property
    def b(self):
        return self._b

    @property
    def weights(self):
        return self.v.borrow().weights

    def reset(self):
        r"""

        Discard the accumulated statistics :math:`A` and :math:`b` and reset the trace. The
        current weights are left untouched.

        """
        self._A = onp.zeros((self.n_features, self.n_features))
        self._b = onp.zeros(self.n_features)
        self.trace.reset()

    def handle_batch(self, transitions):
        r"""

        Accumulate the statistics of a batch of transitions and solve for the weights.

        Parameters
        ----------
        transitions : sequence of Transition

            The transitions, consumed in order.

        Returns
        -------
        weights : ndarray

            A copy of the new weights.

        Raises
        ------
        SolveFailedError

            If neither the direct solve nor the pseudo-inverse fallback produced a solution. The
            statistics are kept, but the weights are left unchanged.

        """
        v = self.v.borrow()

        # project the whole batch before any of the statistics are touched
        projected = []
        for t in transitions:
            phi_s = v.project(t.s).expanded(self.n_features)
            if t.done:
                row = phi_s
            else:
                row = phi_s - self.gamma.value * v.project(t.s_next).expanded(self.n_features)
            projected.append((t, phi_s, row))

        for t, phi_s, row in projected:
            self.trace.decay(self.trace.lambda_.value * self.gamma.value)
            self.trace.update(phi_s)
            z = self.trace.get()
            if t.done:
                self.trace.decay(0.)

            self._b += t.r * z
            self._A += onp.outer(z, row)

        return self.solve()

    def solve(self):
        r"""

        Solve :math:`A\theta=b` and overwrite the weights.

        This first attempts a direct solve. If :math:`A` is singular or ill-conditioned, it falls
        back to the Moore-Penrose pseudo-inverse, :math:`\theta=A^+b`.

        Returns
        -------
        weights : ndarray

            A copy of the new weights.

        Raises
        ------
        SolveFailedError

            If the fallback fails too, in which case the weights are left unchanged.

        """
        try:
            with warnings.catch_warnings():
                warnings.simplefilter('error', LinAlgWarning)
                theta = solve(self._A, self._b)
        except (LinAlgError, LinAlgWarning, ValueError) as e:
            self.logger.warning(f"direct solve failed ({e}); falling back to pseudo-inverse")
            try:
                theta = pinv(self._A) @ self._b
            except (LinAlgError, ValueError) as e:
                raise SolveFailedError(f"pseudo-inverse solve failed: {e}") from e

        if not onp.all(onp.isfinite(theta)):
            raise SolveFailedError(f"solve produced non-finite weights: {theta}")

        with self.v.borrow_mut() as v:
            v.weights = theta
        return v.weights.copy()

    def handle_terminal(self, transition=None):
        self._step_hyperparams('gamma')

    def predict_v(self, s):
        return self.v.borrow().evaluate(s)
