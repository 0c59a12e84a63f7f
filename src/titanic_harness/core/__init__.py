"""Orchestration engine: session state, cleanup and the suite driver."""
