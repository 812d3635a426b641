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

import numpy as onp

from .._core.algorithm import Agent
from .._core.shared import make_shared
from ..policies import Policy


__all__ = (
    'ActorCritic',
)


class ActorCritic(Agent):
    r"""

    One-step actor-critic with a state-value critic.

    The critic provides the TD error

    .. math::

        \delta\ =\ R_t + \gamma\,v(S_{t+1}) - v(S_t)

    which drives both the critic update, :math:`v\leftarrow v + \alpha\,\delta\,\phi(S_t)`, and the
    actor update on the taken action only,
    :math:`x_{A_t}\leftarrow x_{A_t} + \beta\,\delta\,\phi(S_t)`. The next action is sampled from
    the policy applied to the actor's output :math:`x(S_{t+1})`.

    The step sizes and discount factor are fixed for the lifetime of the agent.

    Parameters
    ----------
    actor : LinearQ or Shared[LinearQ]

        A vector-valued linear function with one output per action.

    critic : LinearV or Shared[LinearV]

        A state-value function.

    policy : Policy

        A policy over the actor's output vector, e.g. :class:`linrl.policies.Boltzmann`.

    alpha : float

        The critic's step size :math:`\alpha`.

    beta : float

        The actor's step size :math:`\beta`.

    gamma : float between 0 and 1

        The discount factor :math:`\gamma`.

    """
    HYPERPARAMS = ('alpha', 'beta', 'gamma')

    def __init__(self, actor, critic, policy, alpha, beta, gamma):
        if not isinstance(policy, Policy):
            raise TypeError(f"policy must be a Policy, got: {type(policy)}")
        self.actor = make_shared(actor)
        self.critic = make_shared(critic)
        self.policy = policy
        self.alpha = float(alpha)
        self.beta = float(beta)
        self.gamma = float(gamma)

    def handle(self, transition):
        s, a, r, s_next = transition.s, transition.a, transition.r, transition.s_next

        v = self.critic.borrow()
        delta = r + self.gamma * v.evaluate(s_next) - v.evaluate(s)

        n_outputs = self.actor.borrow().n_outputs
        if not 0 <= a < n_outputs:
            raise IndexError(f"action {a} is out of range for n_outputs={n_outputs}")

        errors = onp.zeros(n_outputs)
        errors[a] = self.beta * delta

        with self.actor.borrow_mut() as actor:
            actor.update(s, errors)
        with self.critic.borrow_mut() as critic:
            critic.update(s, self.alpha * delta)

        return self.policy.sample(self.actor.borrow().evaluate(s_next))

    def handle_terminal(self, transition=None):
        self.policy.handle_terminal(transition)
