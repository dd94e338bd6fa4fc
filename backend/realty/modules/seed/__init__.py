# Sample data seeding

from .service import SeedError, seed_sample_data, seed_if_empty

__all__ = ["SeedError", "seed_sample_data", "seed_if_empty"]
