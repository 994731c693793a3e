"""Framework adapters for breedql."""
