"""Runtime support: telemetry built on telelog."""
