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
from numbers import Real

from .._base.mixins import LoggerMixin
from ..utils import StepwiseLinearFunction


__all__ = (
    'Parameter',
    'as_parameter',
)


class Schedule(ABC):
    """ Abstract base class for decay schedules, i.e. maps from episode count to value. """

    @abstractmethod
    def __call__(self, n):
        pass

    def __repr__(self):
        args = ', '.join(f'{k}={v!r}' for k, v in vars(self).items() if not k.startswith('_'))
        return f"{self.__class__.__name__}({args})"


class Constant(Schedule):
    def __init__(self, value):
        self.value = float(value)

    def __call__(self, n):
        return self.value


class LinearDecay(Schedule):
    def __init__(self, start, delta, floor=0.):
        if delta < 0:
            raise ValueError(f"delta must be non-negative, got: {delta}")
        if floor > start:
            raise ValueError(f"floor ({floor}) must not exceed the start value ({start})")
        self.start = float(start)
        self.delta = float(delta)
        self.floor = float(floor)

    def __call__(self, n):
        return max(self.floor, self.start - self.delta * n)


class ExponentialDecay(Schedule):
    def __init__(self, start, rate, floor=0.):
        if not 0 < rate <= 1:
            raise ValueError(f"rate must be in the interval (0, 1], got: {rate}")
        if floor > start:
            raise ValueError(f"floor ({floor}) must not exceed the start value ({start})")
        self.start = float(start)
        self.rate = float(rate)
        self.floor = float(floor)

    def __call__(self, n):
        return max(self.floor, self.start * self.rate ** n)


class PolynomialDecay(Schedule):
    def __init__(self, start, exponent, floor=0.):
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got: {exponent}")
        if floor > start:
            raise ValueError(f"floor ({floor}) must not exceed the start value ({start})")
        self.start = float(start)
        self.exponent = float(exponent)
        self.floor = float(floor)

    def __call__(self, n):
        return max(self.floor, self.start * (n + 1) ** -self.exponent)


class Stepwise(Schedule):
    def __init__(self, *steps):
        self._func = StepwiseLinearFunction(*steps)

    def __call__(self, n):
        return self._func(n)

    def __repr__(self):
        return f"Stepwise{self._func.steps!r}"


class Parameter(LoggerMixin):
    r"""

    A scalar hyperparameter (learning rate, discount factor, temperature, ...) that follows a
    schedule over episodes.

    The schedule is advanced by calling :func:`step`, which algorithms do exactly once per
    :func:`handle_terminal` call. This means that after :math:`n` terminal events the current
    value is always equal to the closed-form value :code:`param.value_at(n)`, regardless of how
    many non-terminal samples were processed in between.

    Don't instantiate this class directly; use one of the constructors instead:

    .. code:: python

        alpha = Parameter.exponential(0.1, rate=0.99, floor=0.001)
        gamma = Parameter.constant(0.9)
        tau = Parameter.stepwise((0, 1.0), (100, 0.1))

    Parameters
    ----------
    schedule : Schedule

        A map from the episode count :math:`n\geq0` to the parameter value.

    """
    __slots__ = ('_schedule', '_count', '_value')

    def __init__(self, schedule):
        if not isinstance(schedule, Schedule):
            raise TypeError(f"schedule must be a Schedule, got: {type(schedule)}")
        self._schedule = schedule
        self._count = 0
        self._value = schedule(0)

    @classmethod
    def constant(cls, value):
        r""" A parameter that never changes. """
        return cls(Constant(value))

    @classmethod
    def linear(cls, start, delta, floor=0.):
        r"""

        A linearly decaying parameter, :math:`x_n = \max(x_\text{floor}, x_0 - n\,\delta)`.

        """
        return cls(LinearDecay(start, delta, floor))

    @classmethod
    def exponential(cls, start, rate, floor=0.):
        r"""

        An exponentially decaying parameter, :math:`x_n = \max(x_\text{floor}, x_0\,r^n)`.

        """
        return cls(ExponentialDecay(start, rate, floor))

    @classmethod
    def polynomial(cls, start, exponent, floor=0.):
        r"""

        A polynomially decaying parameter, :math:`x_n = \max(x_\text{floor}, x_0\,(n+1)^{-k})`.

        """
        return cls(PolynomialDecay(start, exponent, floor))

    @classmethod
    def stepwise(cls, *steps):
        r"""

        A parameter that interpolates linearly between :code:`(episode, value)` knots, see
        :class:`linrl.utils.StepwiseLinearFunction`.

        """
        return cls(Stepwise(*steps))

    @property
    def value(self):
        """ The current value. """
        return self._value

    @property
    def count(self):
        """ The number of times :func:`step` has been called. """
        return self._count

    @property
    def schedule(self):
        return self._schedule

    def value_at(self, n):
        """ The value after ``n`` steps. """
        return self._schedule(n)

    def step(self):
        r"""

        Advance the schedule by one episode.

        Returns
        -------
        value : float

            The new value.

        """
        self._count += 1
        self._value = self._schedule(self._count)
        self.logger.debug(f"step {self._count}: {self._schedule!r} -> {self._value:g}")
        return self._value

    def reset(self):
        """ Rewind the schedule to its initial value. """
        self._count = 0
        self._value = self._schedule(0)

    def __float__(self):
        return float(self._value)

    def __repr__(self):
        return f"Parameter({self._schedule!r}, count={self._count}, value={self._value:g})"


def as_parameter(value, name='value'):
    r"""

    Cast to a :class:`Parameter`. Plain numbers become constant parameters.

    """
    if isinstance(value, Parameter):
        return value
    if isinstance(value, Real) and not isinstance(value, bool):
        return Parameter.constant(value)
    raise TypeError(f"{name} must be a number or a Parameter, got: {type(value)}")
