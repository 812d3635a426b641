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

from collections import namedtuple


__all__ = (
    'Transition',
)


class Transition(namedtuple('Transition', ('s', 'a', 'r', 's_next', 'done'))):
    r"""

    A single (immutable) environment transition :math:`(S_t, A_t, R_t, S_{t+1})`.

    Parameters
    ----------
    s : state observation

        The state observation :math:`S_t`.

    a : int

        The action :math:`A_t` that was taken.

    r : float

        The reward :math:`R_t`.

    s_next : state observation

        The next-state observation :math:`S_{t+1}`.

    done : bool, optional

        Whether :math:`S_{t+1}` is a terminal state.

    """
    __slots__ = ()

    def __new__(cls, s, a, r, s_next, done=False):
        return super().__new__(cls, s, a, float(r), s_next, bool(done))

    @property
    def terminated(self):
        return self.done
