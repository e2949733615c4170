"""Testing – doubles for exercising retry executors without real delays."""
from retry_executor.testing.fakes import (
    AsyncRecordingSleeper,
    FlakyOperation,
    RecordingSleeper,
    ScriptedHttpOperation,
)

__all__ = ["AsyncRecordingSleeper", "FlakyOperation", "RecordingSleeper", "ScriptedHttpOperation"]
