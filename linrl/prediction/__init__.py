r"""

Prediction
==========

.. autosummary::
    :nosignatures:

    linrl.prediction.LSTDLambda

----

This is a collection of value-prediction algorithms, i.e. algorithms that estimate the state-value
function of the policy that generated the data.


Object Reference
----------------

.. autoclass:: linrl.prediction.LSTDLambda

"""

from ._lstd_lambda import LSTDLambda


__all__ = (
    'LSTDLambda',
)
