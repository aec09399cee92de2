from ._step import StepFunction
from ._unfold import Unfold, unfold

__all__ = ['StepFunction', 'Unfold', 'unfold']

__version__ = '0.1.0'
