"""HTTP API for the daily mood: read the persisted element, trigger a run."""
