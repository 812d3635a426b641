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

class HyperparamsMixin:
    r""" Mix-in class that exposes the (possibly scheduled) scalar hyperparameters. """
    HYPERPARAMS = ()

    @property
    def hyperparams(self):
        r"""

        The current values of the hyperparameters, e.g. ``{'alpha': 0.1, 'gamma': 0.9}``.

        Setting this property replaces the hyperparameters. A :class:`Parameter
        <linrl.Parameter>` attribute stays a Parameter: plain numbers are turned into constant
        Parameters and Parameters are taken as they are.

        """
        return {k: float(getattr(self, k)) for k in self.HYPERPARAMS}

    @hyperparams.setter
    def hyperparams(self, new_hyperparams):
        from ..._core.parameter import Parameter, as_parameter

        if set(self.hyperparams) != set(new_hyperparams):
            raise ValueError("cannot set new hyperparams if keys don't match old hyperparams")
        for k, v in new_hyperparams.items():
            if isinstance(getattr(self, k), Parameter):
                v = as_parameter(v, k)
            else:
                v = float(v)
            setattr(self, k, v)
