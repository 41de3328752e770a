"""Hypervolume strategies."""

from hvcore.algorithms.base import HypervolumeAlgorithm
from hvcore.algorithms.beume3d import Beume3D
from hvcore.algorithms.native2d import Native2D
from hvcore.algorithms.wfg import WFG
from hvcore.registry import AlgorithmRegistry

# Register built-in strategies
AlgorithmRegistry.register(Native2D.name, Native2D)
AlgorithmRegistry.register(Beume3D.name, Beume3D)
AlgorithmRegistry.register(WFG.name, WFG)

__all__ = ["HypervolumeAlgorithm", "Native2D", "Beume3D", "WFG"]
