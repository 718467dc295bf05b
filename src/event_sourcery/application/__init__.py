"""Application layer — repositories and the ports they depend on."""
