from .pipeline_config_repository import PipelineConfigRepository

__all__ = [
    'PipelineConfigRepository'
]
