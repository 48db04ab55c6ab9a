"""Abstract base class for covering algorithm wrappers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from radiuscover.config import AnnealingConfig
from radiuscover.core.distance_index import DistanceIndex


class AlgorithmWrapper(ABC):
    """
    Base class that every benchmarked covering algorithm must implement.

    Subclass this, set ``name``, and implement :meth:`solve`.

    Example
    -------
    >>> class EveryVertex(AlgorithmWrapper):
    ...     name = "every_vertex"
    ...     def solve(self, index, config):
    ...         return {"solution": {"shops": list(range(len(index)))}, "metadata": {}}
    """

    name: str = "unnamed"

    @abstractmethod
    def solve(self, index: DistanceIndex, config: AnnealingConfig) -> dict:
        """
        Choose shops covering every vertex of *index*.

        Parameters
        ----------
        index : DistanceIndex
            Prebuilt radius-d neighbourhoods.
        config : AnnealingConfig
            Search settings; ``deadline_seconds`` bounds the run.

        Returns
        -------
        dict
            Must contain at least:

            - ``"solution"`` – ``{"shops": [...]}``
            - ``"metadata"`` – optional extra info (iterations, etc.)
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
