"""Base step interface."""

from abc import ABC, abstractmethod

from lxclocal.models.context import PipelineContext


class BaseStep(ABC):
    """Base interface that all assembly steps implement."""

    name: str = "step"

    @abstractmethod
    def run(self, context: PipelineContext) -> None:
        """Apply this step to the container being assembled."""
        pass
