r"""

Function Approximation
======================

.. autosummary::
    :nosignatures:

    linrl.fa.LinearV
    linrl.fa.LinearQ
    linrl.fa.Identity
    linrl.fa.OneHot
    linrl.fa.Fourier
    linrl.fa.DenseProjection
    linrl.fa.SparseProjection

----

This is a collection of linear function approximators and the feature maps (projectors) that
they're built on. A projector maps a state observation :math:`s` onto a feature vector
:math:`\phi(s)`, which may be stored densely or sparsely. The linear estimators then evaluate and
update :math:`\phi(s)^\top\theta`.


Object Reference
----------------

.. autoclass:: linrl.fa.LinearV
.. autoclass:: linrl.fa.LinearQ
.. autoclass:: linrl.fa.Identity
.. autoclass:: linrl.fa.OneHot
.. autoclass:: linrl.fa.Fourier
.. autoclass:: linrl.fa.DenseProjection
.. autoclass:: linrl.fa.SparseProjection

"""

from ._projection import Projection, DenseProjection, SparseProjection
from ._projectors import Projector, Identity, OneHot, Fourier
from ._linear import LinearV, LinearQ


__all__ = (
    'Projection',
    'DenseProjection',
    'SparseProjection',
    'Projector',
    'Identity',
    'OneHot',
    'Fourier',
    'LinearV',
    'LinearQ',
)
