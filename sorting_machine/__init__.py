import importlib.metadata

__version__ = importlib.metadata.version("sorting-machine")

from .config import Strategy
from .errors import SortingMachineError, IllegalStateError, EmptyContainerError
from .heap import HeapStore, heapsort
from .machine import Mode, SortingMachine, sort
from .staged import Inserter, Extractor
from . import order
