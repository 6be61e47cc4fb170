"""Testing fakes – in-memory doubles for kernel ports."""
from tx_executor.testing.fakes.database import RecordingDatabase

__all__ = ["RecordingDatabase"]
