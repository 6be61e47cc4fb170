"""Testing – in-memory doubles for library users' own tests."""
from tx_executor.testing.fakes import RecordingDatabase

__all__ = ["RecordingDatabase"]
