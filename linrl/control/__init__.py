r"""

Control
=======

.. autosummary::
    :nosignatures:

    linrl.control.ActorCritic
    linrl.control.GreedyGQ
    linrl.control.QLambda

----

This is a collection of online control algorithms. Each of them consumes one
:class:`Transition <linrl.Transition>` at a time and updates its linear estimates in place. At the
end of each episode, the driver calls ``handle_terminal``, which steps any scheduled
hyperparameters and notifies nested policies and traces.


Object Reference
----------------

.. autoclass:: linrl.control.ActorCritic
.. autoclass:: linrl.control.GreedyGQ
.. autoclass:: linrl.control.QLambda

"""

from ._actor_critic import ActorCritic
from ._greedy_gq import GreedyGQ
from ._q_lambda import QLambda


__all__ = (
    'ActorCritic',
    'GreedyGQ',
    'QLambda',
)
