"""Feature lifecycle test suite."""
