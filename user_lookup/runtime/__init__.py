"""Runtime configuration and bootstrapping."""
