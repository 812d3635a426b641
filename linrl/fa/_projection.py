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

import numpy as onp


__all__ = (
    'Projection',
    'DenseProjection',
    'SparseProjection',
)


class Projection(ABC):
    r"""

    Abstract base class for feature vectors :math:`\phi(s)\in\mathbb{R}^n`, which may be stored
    densely or sparsely.

    """
    __slots__ = ()

    @property
    @abstractmethod
    def dim(self):
        r""" The dimensionality :math:`n` of the feature space. """
        pass

    @abstractmethod
    def expanded(self, dim=None):
        r"""

        Materialize the dense feature vector.

        Parameters
        ----------
        dim : int, optional

            The expected dimensionality. A :class:`ValueError` is raised if it doesn't match.

        Returns
        -------
        phi : ndarray

            A dense 1d ``float64`` array of shape ``(dim,)``.

        """
        pass

    @abstractmethod
    def dot(self, weights):
        r"""

        Contract the features with a weight array, :math:`\phi^\top W`.

        Parameters
        ----------
        weights : ndarray, shape: (dim,) or (dim, k)

            The weights.

        Returns
        -------
        out : float or ndarray, shape: (k,)

            The linear estimate(s).

        """
        pass

    @abstractmethod
    def accumulate(self, weights, error):
        r"""

        Add the error-scaled features to a weight array in place,
        :math:`W\leftarrow W + \phi\otimes\delta`.

        Parameters
        ----------
        weights : ndarray, shape: (dim,) or (dim, k)

            The weights to update in place.

        error : float or ndarray, shape: (k,)

            The error :math:`\delta`.

        """
        pass

    def _check_dim(self, dim):
        if dim is not None and int(dim) != self.dim:
            raise ValueError(
                f"feature dimensionality mismatch: projection has dim={self.dim}, expected {dim}")

    def _check_weights(self, weights):
        if weights.shape[0] != self.dim:
            raise ValueError(
                f"feature dimensionality mismatch: projection has dim={self.dim}, "
                f"weights have shape {weights.shape}")


class DenseProjection(Projection):
    r"""

    A dense feature vector.

    Parameters
    ----------
    values : 1d array_like

        The feature values.

    """
    __slots__ = ('values',)

    def __init__(self, values):
        values = onp.asarray(values, dtype='float64')
        if values.ndim != 1:
            raise ValueError(f"expected a 1d feature vector, got shape: {values.shape}")
        self.values = values

    @property
    def dim(self):
        return self.values.size

    def expanded(self, dim=None):
        self._check_dim(dim)
        return self.values.copy()

    def dot(self, weights):
        self._check_weights(weights)
        return self.values @ weights

    def accumulate(self, weights, error):
        self._check_weights(weights)
        weights += onp.multiply.outer(self.values, error)

    def __repr__(self):
        return f"DenseProjection({self.values!r})"


class SparseProjection(Projection):
    r"""

    A sparse feature vector, e.g. the active tiles of a tile coding or the active entry of a
    one-hot encoding.

    Parameters
    ----------
    indices : 1d array_like of int

        The (unique) indices of the active features.

    dim : positive int

        The dimensionality of the feature space.

    values : 1d array_like, optional

        The values of the active features. These default to ones (binary features).

    """
    __slots__ = ('indices', 'values', '_dim')

    def __init__(self, indices, dim, values=None):
        indices = onp.asarray(indices, dtype='int64').ravel()
        if onp.unique(indices).size != indices.size:
            raise ValueError(f"indices must be unique, got: {indices}")
        if indices.size and not (0 <= indices.min() and indices.max() < dim):
            raise ValueError(f"indices must lie in the range [0, {dim}), got: {indices}")
        values = onp.ones(indices.size) if values is None else onp.asarray(values, 'float64')
        if values.shape != indices.shape:
            raise ValueError(
                f"values.shape {values.shape} doesn't match indices.shape {indices.shape}")
        self.indices = indices
        self.values = values
        self._dim = int(dim)

    @property
    def dim(self):
        return self._dim

    def expanded(self, dim=None):
        self._check_dim(dim)
        phi = onp.zeros(self._dim)
        phi[self.indices] = self.values
        return phi

    def dot(self, weights):
        self._check_weights(weights)
        return self.values @ weights[self.indices]

    def accumulate(self, weights, error):
        self._check_weights(weights)
        weights[self.indices] += onp.multiply.outer(self.values, error)

    def __repr__(self):
        return f"SparseProjection(indices={self.indices!r}, dim={self._dim})"
