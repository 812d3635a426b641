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

from .._base.mixins import LoggerMixin
from ..fa import Projection
from .parameter import as_parameter


__all__ = (
    'Trace',
    'ReplacingTrace',
)


class Trace(LoggerMixin):
    r"""

    An accumulating eligibility trace over a dense feature vector.

    The canonical refresh is to decay first and then add the current feature vector:

    .. math::

        z\ \leftarrow\ \rho\,z + \phi(s)

    where the decay rate :math:`\rho` is typically :math:`\lambda\gamma` (or zero to cut the
    trace).

    Parameters
    ----------
    lambda_ : float or Parameter

        The trace-decay parameter :math:`\lambda\in[0, 1]`. This is stepped once per episode by
        :func:`handle_terminal`.

    n_features : positive int

        The dimensionality of the feature space.

    """
    def __init__(self, lambda_, n_features):
        if int(n_features) <= 0:
            raise ValueError(f"n_features must be a positive int, got: {n_features}")
        self.lambda_ = as_parameter(lambda_, 'lambda_')
        self._z = onp.zeros(int(n_features))

    @property
    def n_features(self):
        return self._z.size

    def get(self):
        r""" A copy of the current accumulator :math:`z`. """
        return self._z.copy()

    def decay(self, rate):
        r"""

        Scale the accumulator in place, :math:`z\leftarrow\rho\,z`.

        Parameters
        ----------
        rate : float between 0 and 1

            The decay rate :math:`\rho`. A rate of zero is a hard reset, a rate of one leaves the
            trace untouched.

        """
        rate = float(rate)
        if not 0 <= rate <= 1:
            raise ValueError(f"decay rate must be in the interval [0, 1], got: {rate}")
        if rate == 0:
            self._z.fill(0.)
        else:
            self._z *= rate

    def update(self, phi):
        r"""

        Add a feature vector to the accumulator, :math:`z\leftarrow z + \phi`.

        Parameters
        ----------
        phi : ndarray or Projection

            The (possibly sparse) feature vector :math:`\phi(s)`.

        """
        self._z += self._dense(phi)

    def reset(self):
        self.decay(0.)

    def handle_terminal(self, transition=None):
        self.reset()
        self.lambda_.step()
        self.logger.debug(f"trace reset, lambda_ = {self.lambda_.value:g}")

    def _dense(self, phi):
        if isinstance(phi, Projection):
            return phi.expanded(self.n_features)
        phi = onp.asarray(phi, dtype='float64')
        if phi.shape != self._z.shape:
            raise ValueError(f"expected phi.shape: {self._z.shape}, got: {phi.shape}")
        return phi

    def __repr__(self):
        return f"{self.__class__.__name__}(lambda_={self.lambda_.value:g}, n_features={self.n_features})"


class ReplacingTrace(Trace):
    r"""

    A replacing eligibility trace: the entries of active features are overwritten rather than
    incremented,

    .. math::

        z_i\ \leftarrow\ \left\{\begin{matrix}
            \phi_i(s)   & \text{if } \phi_i(s) \neq 0 \\
            z_i         & \text{otherwise}
        \end{matrix}\right.

    This is only meaningful for binary (e.g. one-hot or tile-coded) features. See :class:`Trace`
    for the parameters.

    """
    def update(self, phi):
        phi = self._dense(phi)
        active = phi != 0
        self._z[active] = phi[active]
