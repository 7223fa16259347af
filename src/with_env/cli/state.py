"""CLI state container."""

import typing as t

from ..config.settings import Settings
from ..pipeline import EnvPipeline

PipelineFactory = t.Callable[[], EnvPipeline]


class CLIState:
    """Settings plus the factory used to build the pipeline.

    Tests swap the factory to observe or replace process spawning.
    """

    def __init__(
        self,
        settings: Settings,
        pipeline_factory: PipelineFactory | None = None,
    ):
        self.settings = settings
        self._pipeline_factory = pipeline_factory or EnvPipeline

    def create_pipeline(self) -> EnvPipeline:
        return self._pipeline_factory()
