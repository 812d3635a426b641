__version__ = '0.1.0'

# expose specific classes and functions
from ._base.errors import (
    LinrlError, BorrowError, SolveFailedError, UnsupportedOperationError)
from ._core.parameter import Parameter, as_parameter
from ._core.trace import Trace, ReplacingTrace
from ._core.shared import Shared, make_shared
from ._core.transition import Transition
from ._core.algorithm import (
    Algorithm, OnlineLearner, BatchLearner, Agent, Controller, Predictor, ValuePredictor)
from .utils import enable_logging

# pre-load submodules
from . import control
from . import fa
from . import policies
from . import prediction
from . import utils


__all__ = (

    # classes and functions
    'Agent',
    'Algorithm',
    'BatchLearner',
    'BorrowError',
    'Controller',
    'LinrlError',
    'OnlineLearner',
    'Parameter',
    'Predictor',
    'ReplacingTrace',
    'Shared',
    'SolveFailedError',
    'Trace',
    'Transition',
    'UnsupportedOperationError',
    'ValuePredictor',
    'as_parameter',
    'enable_logging',
    'make_shared',

    # modules
    'control',
    'fa',
    'policies',
    'prediction',
    'utils',
)
