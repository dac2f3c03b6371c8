from schema_union.runners.local import LocalMatchingPipeline, PipelineResult

__all__ = ["LocalMatchingPipeline", "PipelineResult"]
