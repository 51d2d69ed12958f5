"""Runtime layer: retry drivers, scheduler backends and logging."""
