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

from .._core.algorithm import Controller, OnlineLearner, Predictor
from .._core.parameter import as_parameter
from .._core.shared import make_shared
from .._core.trace import Trace
from ..fa import DenseProjection
from ..policies import Greedy, Policy
from ..utils import docstring


__all__ = (
    'QLambda',
)


class QLambda(OnlineLearner, Controller, Predictor):
    r"""

    Watkins' Q(:math:`\lambda`): Q-learning with eligibility traces.

    Per transition,

    .. math::

        \delta\ &=\ R_t + \gamma\,\max_{a'}q(S_{t+1}, a') - q(S_t, A_t) \\
        z\ &\leftarrow\ \left\{\begin{matrix}
            \lambda\gamma\,z + \phi(S_t) & \text{if } A_t = \arg\max_a q(S_t, a) \\
            \phi(S_t) & \text{otherwise}
        \end{matrix}\right. \\
        \theta_{A_t}\ &\leftarrow\ \theta_{A_t} + \alpha\,\delta\,z

    The trace is cut whenever an exploratory (non-greedy) action is taken, so that no credit is
    assigned through non-greedy actions.

    **References:**

    - Watkins, C. J. C. H. (1989). Learning from Delayed Rewards. Ph.D. thesis, Cambridge
      University.
    - Watkins, C. J. C. H., Dayan, P. (1992). Q-learning. Machine Learning, 8:279–292.

    Parameters
    ----------
    q : LinearQ or Shared[LinearQ]

        The action-value function.

    policy : Policy

        The behavior policy.

    trace : Trace

        The eligibility trace over the feature space of ``q``.

    alpha : float or Parameter

        The step size :math:`\alpha`.

    gamma : float or Parameter

        The discount factor :math:`\gamma`.

    """
    HYPERPARAMS = ('alpha', 'gamma')

    def __init__(self, q, policy, trace, alpha, gamma):
        if not isinstance(policy, Policy):
            raise TypeError(f"policy must be a Policy, got: {type(policy)}")
        if not isinstance(trace, Trace):
            raise TypeError(f"trace must be a Trace, got: {type(trace)}")
        self.q = make_shared(q)
        if trace.n_features != self.q.borrow().dim:
            raise ValueError(
                f"trace.n_features={trace.n_features} doesn't match q.dim={self.q.borrow().dim}")

        self.trace = trace
        self.policy = policy
        self.target = Greedy(self.q)

        self.alpha = as_parameter(alpha, 'alpha')
        self.gamma = as_parameter(gamma, 'gamma')

    def handle_sample(self, transition):
        s, a, r, s_next = transition.s, transition.a, transition.r, transition.s_next
        q = self.q.borrow()

        phi_s = q.project(s)

        q_s = q.evaluate_phi(phi_s)
        q_next = q.evaluate(s_next)

        td_error = r + self.gamma.value * q_next[self.target.sample(s_next)] - q_s[a]

        if a == self.target.sample(s):
            self.trace.decay(self.trace.lambda_.value * self.gamma.value)
        else:
            self.trace.decay(0.)

        self.trace.update(phi_s.expanded(q.dim))

        with self.q.borrow_mut() as q:
            q.update_action_phi(DenseProjection(self.trace.get()), a, self.alpha.value * td_error)

    def handle_terminal(self, transition=None):
        self._step_hyperparams('alpha', 'gamma')
        self.trace.handle_terminal(transition)
        self.target.handle_terminal(transition)
        self.policy.handle_terminal(transition)

    @docstring(Controller.pi)
    def pi(self, s):
        return self.target.sample(s)

    @docstring(Controller.mu)
    def mu(self, s):
        return self.policy.sample(s)

    def v(self, s):
        r"""

        Estimate the state value under the greedy policy, :math:`v(s)=q(s,\pi(s))`.

        """
        return self.qsa(s, self.pi(s))

    @docstring(Predictor.qs)
    def qs(self, s):
        return self.q.borrow().evaluate(s)

    @docstring(Predictor.qsa)
    def qsa(self, s, a):
        return self.q.borrow().evaluate_action(s, a)
