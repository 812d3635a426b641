r"""

Policies
========

.. autosummary::
    :nosignatures:

    linrl.policies.Boltzmann
    linrl.policies.TruncatedBoltzmann
    linrl.policies.Greedy
    linrl.policies.EpsilonGreedy
    linrl.policies.Gibbs

----

This is a collection of policies, which turn value estimates (or their own weights) into action
distributions. Every policy implements :class:`linrl.policies.Policy`; policies over a finite action
set also implement :class:`linrl.policies.FinitePolicy`, and the Gibbs policy additionally
implements :class:`linrl.policies.DifferentiablePolicy` and
:class:`linrl.policies.ParameterisedPolicy`.

Each policy instance owns its own pseudo-random number generator, which is seeded via the
``random_seed`` argument.


Object Reference
----------------

.. autoclass:: linrl.policies.Policy
.. autoclass:: linrl.policies.FinitePolicy
.. autoclass:: linrl.policies.DifferentiablePolicy
.. autoclass:: linrl.policies.ParameterisedPolicy
.. autoclass:: linrl.policies.Boltzmann
.. autoclass:: linrl.policies.TruncatedBoltzmann
.. autoclass:: linrl.policies.Greedy
.. autoclass:: linrl.policies.EpsilonGreedy
.. autoclass:: linrl.policies.Gibbs

"""

from ._base import Policy, FinitePolicy, DifferentiablePolicy, ParameterisedPolicy, sample_probs
from ._boltzmann import Boltzmann, softmax
from ._truncated_boltzmann import TruncatedBoltzmann
from ._greedy import Greedy, EpsilonGreedy
from ._gibbs import Gibbs


__all__ = (
    'Policy',
    'FinitePolicy',
    'DifferentiablePolicy',
    'ParameterisedPolicy',
    'Boltzmann',
    'TruncatedBoltzmann',
    'Greedy',
    'EpsilonGreedy',
    'Gibbs',
    'sample_probs',
    'softmax',
)
