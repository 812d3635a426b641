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

from abc import ABC, abstractmethod
from itertools import product

import numpy as onp
from gymnasium.spaces import Box, Discrete

from ._projection import DenseProjection, SparseProjection


__all__ = (
    'Projector',
    'Identity',
    'OneHot',
    'Fourier',
)


class Projector(ABC):
    r"""

    Abstract base class for feature maps :math:`s\mapsto\phi(s)\in\mathbb{R}^n`.

    """
    @property
    @abstractmethod
    def dim(self):
        r""" The dimensionality :math:`n` of the feature space. """
        pass

    @abstractmethod
    def project(self, s):
        r"""

        Project a state observation onto the feature space.

        Parameters
        ----------
        s : state observation

            A single state observation.

        Returns
        -------
        phi : Projection

            The feature vector :math:`\phi(s)`.

        """
        pass

    def __call__(self, s):
        return self.project(s)


class Identity(Projector):
    r"""

    Use the (flattened) state observation itself as the feature vector.

    Parameters
    ----------
    space : gymnasium.spaces.Box

        The observation space.

    """
    def __init__(self, space):
        if not isinstance(space, Box):
            raise TypeError(f"{self.__class__.__name__} requires a Box space, got: {type(space)}")
        self.space = space

    @property
    def dim(self):
        return int(onp.prod(self.space.shape))

    def project(self, s):
        s = onp.asarray(s, dtype='float64')
        if s.shape != self.space.shape:
            raise ValueError(f"expected s.shape: {self.space.shape}, got: {s.shape}")
        return DenseProjection(s.ravel())


class OneHot(Projector):
    r"""

    Tabular features: a one-hot encoding of a discrete state, stored sparsely.

    Parameters
    ----------
    space : gymnasium.spaces.Discrete

        The observation space.

    """
    def __init__(self, space):
        if not isinstance(space, Discrete):
            raise TypeError(
                f"{self.__class__.__name__} requires a Discrete space, got: {type(space)}")
        self.space = space

    @property
    def dim(self):
        return int(self.space.n)

    def project(self, s):
        i = int(s) - int(self.space.start)
        if not 0 <= i < self.dim:
            raise ValueError(f"state {s} is not an element of {self.space}")
        return SparseProjection([i], self.dim)


class Fourier(Projector):
    r"""

    The Fourier cosine basis of Konidaris et al. (2011),

    .. math::

        \phi_c(s)\ =\ \cos\left(\pi\,c^\top\bar{s}\right)\,,
            \qquad c\in\{0, \dots, k\}^d

    where :math:`\bar{s}\in[0, 1]^d` is the state rescaled to the unit hypercube and :math:`k` is
    the order of the basis. The number of features is :math:`(k+1)^d`.

    Parameters
    ----------
    space : gymnasium.spaces.Box

        A bounded, flat observation space.

    order : positive int

        The order :math:`k` of the basis.

    """
    def __init__(self, space, order=3):
        if not isinstance(space, Box):
            raise TypeError(f"{self.__class__.__name__} requires a Box space, got: {type(space)}")
        if len(space.shape) != 1:
            raise ValueError(f"{self.__class__.__name__} requires a flat Box, got: {space.shape}")
        if not space.is_bounded():
            raise ValueError(f"{self.__class__.__name__} requires a bounded Box space")
        if int(order) < 1:
            raise ValueError(f"order must be a positive int, got: {order}")
        self.space = space
        self.order = int(order)
        self._low = space.low.astype('float64')
        self._range = space.high.astype('float64') - self._low
        self._coefficients = onp.array(
            list(product(range(self.order + 1), repeat=space.shape[0])), dtype='float64')

    @property
    def dim(self):
        return self._coefficients.shape[0]

    def project(self, s):
        s = onp.asarray(s, dtype='float64')
        if s.shape != self.space.shape:
            raise ValueError(f"expected s.shape: {self.space.shape}, got: {s.shape}")
        s = onp.clip((s - self._low) / self._range, 0., 1.)
        return DenseProjection(onp.cos(onp.pi * self._coefficients @ s))
