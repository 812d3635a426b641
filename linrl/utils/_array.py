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
import jax.numpy as jnp
import numpy as onp


__all__ = (
    'StepwiseLinearFunction',
    'argmax',
    'check_vector',
    'one_hot',
)


def argmax(rng, arr):
    r"""

    This is a little hack to ensure that argmax breaks ties randomly, which is
    something that :func:`numpy.argmax` doesn't do.

    Parameters
    ----------
    rng : jax.random.PRNGKey

        A pseudo-random number generator key.

    arr : 1d array_like

        Input vector, e.g. the action values :math:`q(s,.)`.

    Returns
    -------
    index : int

        The index of one of the maximal entries, chosen uniformly at random among ties.

    """
    arr = check_vector(arr, 'arr')
    candidates = arr == onp.max(arr)
    logits = (2 * jnp.asarray(candidates) - 1) * 50.  # log(max_float32) == 88.72284
    return int(jax.random.categorical(rng, logits))


def check_vector(arr, name='x', size=None):
    r"""

    Cast to a 1d float64 array and check that it is non-empty and finite.

    Parameters
    ----------
    arr : array_like

        The input vector.

    name : str, optional

        The name to use in error messages.

    size : int, optional

        If provided, the expected length of the vector.

    Returns
    -------
    arr : ndarray

        A 1d ``float64`` numpy array.

    """
    arr = onp.asarray(arr, dtype='float64')
    if arr.ndim != 1:
        raise ValueError(f"{name} must be a 1d vector, got shape: {arr.shape}")
    if not arr.size:
        raise ValueError(f"{name} must not be empty")
    if size is not None and arr.size != size:
        raise ValueError(f"expected {name}.shape: ({size},), got: {arr.shape}")
    if not onp.all(onp.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values: {arr}")
    return arr


def one_hot(index, n):
    """ A dense one-hot vector of length ``n``. """
    if not 0 <= index < n:
        raise IndexError(f"index {index} is out of range for a vector of length {n}")
    x = onp.zeros(n)
    x[index] = 1.
    return x


class StepwiseLinearFunction:
    r"""

    Stepwise linear function. The function remains flat outside of the regions defined by
    :code:`steps`.

    Parameters
    ----------
    \*steps : sequence of tuples (int, float)

        Each step :code:`(episode, value)` fixes the output value at :code:`episode` to the
        provided :code:`value`.

    Example
    -------
    Here's an example of a learning-rate schedule that is annealed per episode:

    .. code::

        alpha = StepwiseLinearFunction((0, 0.1), (100, 0.01), (1000, 0.001))

        alpha(0)     # 0.1
        alpha(50)    # 0.055
        alpha(5000)  # 0.001

    """

    def __init__(self, *steps):
        if len(steps) < 2:
            raise TypeError("need at least two steps")
        if not all(
                isinstance(s, tuple) and len(s) == 2                          # check if pair
                and isinstance(s[0], int) and isinstance(s[1], (float, int))  # check types
                for s in steps):
            raise TypeError("all steps must be pairs (size-2 tuples) of (int, float)")
        if not all(t1 < t2 for (t1, _), (t2, _) in zip(steps, steps[1:])):  # check if consecutive
            raise ValueError(
                "steps [(t1, value), ..., (t2, value)] must be provided in ascending order, i.e. "
                "0 < t1 < t2 < ... < tn")

        self.steps = steps
        self._offsets = onp.array([t for t, _ in steps])
        self._intercepts = onp.array([v for _, v in steps], dtype='float64')
        self._slopes = onp.array([
            (v_next - v) / (t_next - t) for (t, v), (t_next, v_next) in zip(steps, steps[1:])])

    def __call__(self, t):
        r"""

        Return the value at episode count ``t``.

        """
        if t <= self._offsets[0]:
            return float(self._intercepts[0])
        if t >= self._offsets[-1]:
            return float(self._intercepts[-1])
        i = int(onp.searchsorted(self._offsets, t, side='right')) - 1
        return float(self._intercepts[i] + self._slopes[i] * (t - self._offsets[i]))
