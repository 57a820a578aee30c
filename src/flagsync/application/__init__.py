"""Application layer – flag documents, installations, refresh notifications."""
