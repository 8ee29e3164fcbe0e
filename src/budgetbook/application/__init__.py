"""Application layer: commands, queries and the ports they depend on."""
