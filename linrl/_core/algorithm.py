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

from .._base.mixins import HyperparamsMixin, LoggerMixin


__all__ = (
    'Algorithm',
    'OnlineLearner',
    'BatchLearner',
    'Agent',
    'Controller',
    'Predictor',
    'ValuePredictor',
)


class Algorithm(ABC, HyperparamsMixin, LoggerMixin):
    r""" Abstract base class for all learning algorithms. """

    def handle_terminal(self, transition=None):
        r"""

        Handle the end of an episode.

        This steps all scheduled hyperparameters and propagates the terminal event to any nested
        policies and traces.

        Parameters
        ----------
        transition : Transition, optional

            The final transition of the episode.

        """
        pass

    def _step_hyperparams(self, *names):
        for name in names:
            getattr(self, name).step()
        self.logger.debug(
            "stepped hyperparams: " + ", ".join(f"{k}={v:g}" for k, v in self.hyperparams.items()))


class OnlineLearner(Algorithm):
    @abstractmethod
    def handle_sample(self, transition):
        r"""

        Update the estimates from a single transition.

        Parameters
        ----------
        transition : Transition

            A single transition :math:`(S_t, A_t, R_t, S_{t+1})`.

        """
        pass


class BatchLearner(Algorithm):
    @abstractmethod
    def handle_batch(self, transitions):
        r"""

        Update the estimates from a batch of transitions.

        Parameters
        ----------
        transitions : sequence of Transition

            The transitions, consumed in order.

        """
        pass


class Agent(Algorithm):
    @abstractmethod
    def handle(self, transition):
        r"""

        Update the estimates from a single transition and pick the next action.

        Parameters
        ----------
        transition : Transition

            A single transition :math:`(S_t, A_t, R_t, S_{t+1})`.

        Returns
        -------
        a_next : int

            The action to take in :math:`S_{t+1}`.

        """
        pass


class Controller(ABC):
    @abstractmethod
    def pi(self, s):
        r"""

        Sample the target policy, :math:`a\sim\pi(.|s)`.

        """
        pass

    @abstractmethod
    def mu(self, s):
        r"""

        Sample the behavior policy, :math:`a\sim\mu(.|s)`.

        """
        pass


class Predictor(ABC):
    @abstractmethod
    def v(self, s):
        r""" Estimate the state value :math:`v(s)`. """
        pass

    @abstractmethod
    def qs(self, s):
        r""" Estimate the action values :math:`q(s,.)` of all actions. """
        pass

    @abstractmethod
    def qsa(self, s, a):
        r""" Estimate the action value :math:`q(s,a)`. """
        pass


class ValuePredictor(ABC):
    @abstractmethod
    def predict_v(self, s):
        r""" Estimate the state value :math:`v(s)`. """
        pass
