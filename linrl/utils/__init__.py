r"""

Utilities
=========

This is a collection of utility (helper) functions used throughout the package.

.. autosummary::
    :nosignatures:

    linrl.utils.StepwiseLinearFunction
    linrl.utils.argmax
    linrl.utils.check_vector
    linrl.utils.docstring
    linrl.utils.enable_logging
    linrl.utils.one_hot


Object Reference
----------------

.. autoclass:: linrl.utils.StepwiseLinearFunction
.. autofunction:: linrl.utils.argmax
.. autofunction:: linrl.utils.check_vector
.. autofunction:: linrl.utils.docstring
.. autofunction:: linrl.utils.enable_logging
.. autofunction:: linrl.utils.one_hot

"""

from ._array import StepwiseLinearFunction, argmax, check_vector, one_hot
from ._misc import docstring, enable_logging


__all__ = (
    'StepwiseLinearFunction',
    'argmax',
    'check_vector',
    'docstring',
    'enable_logging',
    'one_hot',
)
