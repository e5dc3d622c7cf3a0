"""
Run parameters model.

Flags chosen on the command line for one heartbeat invocation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RunParams(BaseModel):
	"""Validated CLI flags for a heartbeat run."""

	dry_run: bool = Field(
	    default=False,
	    description="Fetch and print intended actions; no writes, no gate")
	force: bool = Field(default=False,
	                    description="Ignore the heartbeat interval")
	vote_only: bool = Field(
	    default=False,
	    description="Skip evaluator resolution; only agree-vote")

	@property
	def requires_api_key(self) -> bool:
		"""Writes (and authenticated reads) happen on every non-dry run."""
		return not self.dry_run


__all__ = ["RunParams"]
