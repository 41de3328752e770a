"""Registry of hypervolume strategies.

Instead of importing strategy classes, callers can pick a strategy by name:

- **Configuration-driven experiments**: choose the algorithm from a string
- **Discoverability**: list every available strategy programmatically
- **Factory pattern**: register any callable that builds a strategy

Built-in strategies ("native2d", "beume3d", "wfg") are registered when
``hvcore.algorithms`` is imported, which ``import hvcore`` does.

Basic usage:
    ```python
    from hvcore.registry import AlgorithmRegistry, list_algorithms

    strategy = AlgorithmRegistry.get("wfg")
    available = list_algorithms()  # ["beume3d", "native2d", "wfg"]

    hv.compute(reference_point, algorithm="beume3d")
    ```

Registering a custom strategy:
    ```python
    class MyStrategy(HypervolumeAlgorithm):
        name = "mine"

        def _volume(self, points, reference_point):
            ...

    AlgorithmRegistry.register("mine", MyStrategy)
    ```
"""

from collections.abc import Callable

from hvcore.protocols import HypervolumeStrategy


class AlgorithmRegistry:
    """Registry for hypervolume strategy factories.

    Strategies are registered by name and instantiated on retrieval, so every
    ``get`` returns a fresh strategy built with the given keyword arguments.

    Class Attributes:
        _registry: Dictionary mapping strategy names to factory callables
            that return HypervolumeStrategy instances.

    Example:
        ```python
        AlgorithmRegistry.register("wfg", WFG)
        strategy = AlgorithmRegistry.get("wfg")
        strategies = AlgorithmRegistry.list()  # ["wfg"]
        ```
    """

    _registry: dict[str, Callable[..., HypervolumeStrategy]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., HypervolumeStrategy]) -> None:
        """Register a strategy factory.

        Args:
            name: Unique name for the strategy. Will overwrite if already exists.
            factory: Callable (usually the strategy class) returning a
                HypervolumeStrategy. Keyword arguments given to ``get`` are
                passed through.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> HypervolumeStrategy:
        """Get a strategy instance by name.

        Args:
            name: Name of the registered strategy.
            **kwargs: Configuration parameters passed to the factory.

        Returns:
            A new strategy instance.

        Raises:
            KeyError: If the strategy name is not registered. Error message
                includes list of available strategies.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Hypervolume algorithm '{name}' not found. Available algorithms: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted list of registered strategy names."""
        return sorted(cls._registry.keys())


def list_algorithms() -> list[str]:
    """List all registered hypervolume strategies.

    Convenience function that returns AlgorithmRegistry.list().

    Example:
        ```python
        from hvcore.registry import list_algorithms

        for name in list_algorithms():
            print(f"- {name}")
        ```
    """
    return AlgorithmRegistry.list()
