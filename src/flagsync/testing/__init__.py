"""Testing – fakes and property-based strategies for flagsync consumers and tests."""
