from ._logger import LoggerMixin
from ._param import HyperparamsMixin
from ._random_state import RandomStateMixin


__all__ = (
    'HyperparamsMixin',
    'LoggerMixin',
    'RandomStateMixin',
)
