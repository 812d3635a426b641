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

from contextlib import contextmanager
from threading import RLock

from .._base.errors import BorrowError


__all__ = (
    'Shared',
    'make_shared',
)


class Shared:
    r"""

    A mutable cell that lets several components observe the same object, with a single writer at
    any one time.

    A typical example is a set of action-value weights that is updated by a control algorithm and
    read by the greedy target policy that the algorithm derives from it:

    .. code:: python

        q = linrl.Shared(linrl.fa.LinearQ(projector, n_actions=2))
        pi = linrl.policies.EpsilonGreedy(q, epsilon=0.1)
        qlambda = linrl.control.QLambda(q, pi, trace, alpha=0.1, gamma=0.9)

    Readers call :func:`borrow`, writers enter :func:`borrow_mut`:

    .. code:: python

        value = q.borrow().evaluate(s)

        with q.borrow_mut() as q_:
            q_.update_action(s, a, error)

    Writers on different threads are serialized. A nested :func:`borrow_mut` on the same thread
    violates the single-writer discipline and raises a :class:`BorrowError`.

    Parameters
    ----------
    obj : object

        The object to share.

    """
    __slots__ = ('_obj', '_lock', '_writing')

    def __init__(self, obj):
        if isinstance(obj, Shared):
            raise TypeError("cannot wrap a Shared cell in another Shared cell")
        self._obj = obj
        self._lock = RLock()
        self._writing = False

    def borrow(self):
        """ Get the shared object for reading. """
        return self._obj

    @contextmanager
    def borrow_mut(self):
        """ Get exclusive write access to the shared object. """
        with self._lock:
            if self._writing:
                raise BorrowError(
                    f"{type(self._obj).__name__} is already mutably borrowed; "
                    "only one writer is allowed at a time")
            self._writing = True
            try:
                yield self._obj
            finally:
                self._writing = False

    def replace(self, new_obj):
        """ Swap out the shared object; all other holders of this cell will see the new one. """
        with self.borrow_mut():
            self._obj = new_obj

    def __repr__(self):
        return f"Shared({self._obj!r})"


def make_shared(obj):
    r""" Wrap ``obj`` in a :class:`Shared` cell, unless it already is one. """
    return obj if isinstance(obj, Shared) else Shared(obj)
