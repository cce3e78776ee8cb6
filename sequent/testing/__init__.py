from .core import Step
from .traversal_scenario import TraversalScenario

__all__ = [
    "Step",
    "TraversalScenario",
]
