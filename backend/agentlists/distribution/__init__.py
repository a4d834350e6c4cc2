"""Round-robin distribution of validated records across the agent pool."""

from agentlists.distribution.partitioner import DistributionBatch, distribute

__all__ = ["DistributionBatch", "distribute"]
