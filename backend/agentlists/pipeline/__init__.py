"""
Import pipeline — step-based orchestration of one contact-list upload.

Decode → normalize → validate → distribute → persist, each a
PipelineStep run in order by the PipelineEngine with per-step timing,
structured logging and a classified failure reason.
"""

from agentlists.pipeline.engine import PipelineEngine, PipelineResult
from agentlists.pipeline.context import PipelineContext, StepResult
from agentlists.pipeline.step import PipelineStep

__all__ = ["PipelineEngine", "PipelineResult", "PipelineContext", "PipelineStep", "StepResult"]
