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
from ..fa import DenseProjection
from ..policies import Greedy, Policy
from ..utils import docstring


__all__ = (
    'GreedyGQ',
)


class GreedyGQ(OnlineLearner, Controller, Predictor):
    r"""

    Greedy-GQ: off-policy control with gradient-TD corrections.

    Two linear estimators share a feature map: the action-value function :math:`q_\theta` (the
    control target) and a secondary estimator :math:`w` of the expected TD error. Per transition,

    .. math::

        \delta\ &=\ R_t + \gamma\,q_\theta(S_{t+1}, A') - q_\theta(S_t, A_t)
            \,,\qquad A'\sim\mu(.|S_{t+1}) \\
        \theta_{A_t}\ &\leftarrow\ \theta_{A_t}
            + \alpha\left(\delta\,\phi(S_t) - \gamma\,w(S_t)\,\phi(S_{t+1})\right) \\
        w\ &\leftarrow\ w + \alpha\beta\left(\delta - w(S_t)\right)\phi(S_t)

    Note that the bootstrap action :math:`A'` is sampled from the *behavior* policy :math:`\mu`
    rather than taken greedily.

    **Reference:** Maei, H. R., Szepesvári, Cs., Bhatnagar, S., Sutton, R. S. (2010). Toward
    off-policy learning control with function approximation. ICML.

    Parameters
    ----------
    q : LinearQ or Shared[LinearQ]

        The action-value function :math:`q_\theta`.

    w : LinearV or Shared[LinearV]

        The secondary (TD-error) estimator. It must have the same feature dimensionality as ``q``.

    policy : Policy

        The behavior policy :math:`\mu`.

    alpha : float or Parameter

        The step size :math:`\alpha`.

    beta : float or Parameter

        The relative step size :math:`\beta` of the secondary estimator.

    gamma : float or Parameter

        The discount factor :math:`\gamma`.

    """
    HYPERPARAMS = ('alpha', 'beta', 'gamma')

    def __init__(self, q, w, policy, alpha, beta, gamma):
        if not isinstance(policy, Policy):
            raise TypeError(f"policy must be a Policy, got: {type(policy)}")
        self.q = make_shared(q)
        self.w = make_shared(w)
        if self.q.borrow().dim != self.w.borrow().dim:
            raise ValueError(
                "q and w must share the same feature space, got: "
                f"q.dim={self.q.borrow().dim}, w.dim={self.w.borrow().dim}")

        self.policy = policy
        self.target = Greedy(self.q)

        self.alpha = as_parameter(alpha, 'alpha')
        self.beta = as_parameter(beta, 'beta')
        self.gamma = as_parameter(gamma, 'gamma')

    def handle_sample(self, transition):
        s, a, r, s_next = transition.s, transition.a, transition.r, transition.s_next
        q, w = self.q.borrow(), self.w.borrow()

        phi_s = w.project(s)
        phi_ns = w.project(s_next)

        a_next = self.mu(s_next)

        td_estimate = w.evaluate_phi(phi_s)
        td_error = (
            r + self.gamma.value * q.evaluate_action_phi(phi_ns, a_next)
            - q.evaluate_action_phi(phi_s, a))

        phi_s = phi_s.expanded(w.dim)
        phi_ns = phi_ns.expanded(w.dim)

        update_q = td_error * phi_s - self.gamma.value * td_estimate * phi_ns
        update_v = (td_error - td_estimate) * phi_s

        with self.w.borrow_mut() as w:
            w.update_phi(DenseProjection(update_v), self.alpha.value * self.beta.value)
        with self.q.borrow_mut() as q:
            q.update_action_phi(DenseProjection(update_q), a, self.alpha.value)

    def handle_terminal(self, transition=None):
        self._step_hyperparams('alpha', 'beta', 'gamma')
        self.policy.handle_terminal(transition)
        self.target.handle_terminal(transition)

    @docstring(Controller.pi)
    def pi(self, s):
        return self.target.sample(s)

    @docstring(Controller.mu)
    def mu(self, s):
        return self.policy.sample(s)

    def v(self, s):
        r"""

        Estimate the state value under the target policy,
        :math:`v(s)=\sum_a\pi(a|s)\,q(s,a)`.

        """
        return float(self.qs(s) @ self.target.probabilities(s))

    @docstring(Predictor.qs)
    def qs(self, s):
        return self.q.borrow().evaluate(s)

    @docstring(Predictor.qsa)
    def qsa(self, s, a):
        return self.q.borrow().evaluate_action(s, a)
